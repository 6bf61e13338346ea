#!/usr/bin/env python3
"""projgen CLI - Main Entry Point.

Usage:
    projgen <command> [options]

Commands:
    init NAME    Write a starter .projgenrc.yaml
    synth        Synthesize project files from .projgenrc.yaml
    tasks        List project tasks and the command that runs each one
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import click

from projgen.config import DEFAULT_RC_FILE, GENERATOR_VERSION
from projgen.core.errors import ProjgenError
from projgen.core.project import ProjectModel
from projgen.helpers.helpers_logging import Colors, print_header, print_info
from projgen.projgenrc import load_project_options, write_sample_rc

_RC_OPTION_HELP = f"Path to the project config file (default: ./{DEFAULT_RC_FILE})"


def _fail(exc: ProjgenError) -> NoReturn:
    exc.print_error()
    sys.exit(1)


def _load_project(rc_path: Path | None, outdir: Path | None = None) -> ProjectModel:
    options = load_project_options(rc_path or Path.cwd() / DEFAULT_RC_FILE, outdir)
    return ProjectModel(options)


@click.group(help="Generate and maintain project scaffolding files.")
@click.version_option(GENERATOR_VERSION, prog_name="projgen")
def cli() -> None:
    pass


@cli.command(name="init", help="Write a starter .projgenrc.yaml")
@click.argument("name")
@click.option(
    "--dir", "project_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    help="Project directory",
)
def init_command(name: str, project_dir: Path) -> None:
    project_dir.mkdir(parents=True, exist_ok=True)
    write_sample_rc(project_dir, name)


@cli.command(name="synth", help="Synthesize project files")
@click.option("--rc", "rc_path", type=click.Path(dir_okay=False, path_type=Path),
              help=_RC_OPTION_HELP)
@click.option("--outdir", type=click.Path(file_okay=False, path_type=Path),
              help="Output directory (default: the config file's directory)")
def synth_command(rc_path: Path | None, outdir: Path | None) -> None:
    try:
        project = _load_project(rc_path, outdir)
        written = project.synthesize()
    except ProjgenError as exc:
        _fail(exc)
    print_info(f"{len(written)} file(s) written")


@cli.command(name="tasks", help="List tasks and how to run them")
@click.option("--rc", "rc_path", type=click.Path(dir_okay=False, path_type=Path),
              help=_RC_OPTION_HELP)
def tasks_command(rc_path: Path | None) -> None:
    try:
        project = _load_project(rc_path)
    except ProjgenError as exc:
        _fail(exc)

    print_header(f"Tasks of {project.name}")
    for task in project.tasks.all:
        description = f" {Colors.DIM}{task.description}{Colors.RESET}" if task.description else ""
        click.echo(f"  {Colors.BOLD}{task.name}{Colors.RESET}{description}")
        click.echo(f"      {project.run_task_command(task)}")
        if task.spawns:
            chain = " -> ".join(child.name for child in task.walk())
            click.echo(f"      {Colors.DIM}spawns: {chain}{Colors.RESET}")


def main() -> None:
    """Entry point for the ``projgen`` console script."""
    cli()


if __name__ == "__main__":
    main()
