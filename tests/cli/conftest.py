"""Shared fixtures for end-to-end CLI tests.

Every CLI test gets an isolated temporary directory to work in, so tests
never pollute each other or the real workspace. Commands run through
Click's ``CliRunner`` against the real ``projgen`` command group.
"""

import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from projgen.cli.commands import cli

RunProjgen = Callable[..., Result]


@pytest.fixture()
def isolated_project(tmp_path: Path) -> Iterator[Path]:
    """Create an isolated empty project directory and cd into it.

    After the test, the working directory is restored.
    """
    original_cwd = Path.cwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_cwd)


@pytest.fixture()
def run_projgen(isolated_project: Path) -> RunProjgen:
    """Return a helper that invokes ``projgen <args>`` in the project dir.

    Usage in tests::

        def test_synth(run_projgen: RunProjgen) -> None:
            result = run_projgen("synth")
            assert result.exit_code == 0
    """
    runner = CliRunner()

    def _run(*args: str) -> Result:
        return runner.invoke(cli, list(args), catch_exceptions=False)

    return _run
