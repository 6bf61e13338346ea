"""Tests for ProjectModel: modes, task wiring and task command derivation."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from projgen.config import EJECTED_RUN_TASK_COMMAND, GENERATOR_VERSION
from projgen.core.errors import ConfigError, DuplicateTaskError, SpawnCycleError
from projgen.core.project import (
    EjectedMode,
    NormalMode,
    ProjectModel,
    ProjectOptions,
    TaskCommandProvider,
    TaskSpec,
)
from projgen.core.task import Task

MakeProject = Callable[..., ProjectModel]


class TestNormalMode:
    """Projects managed by the generator get default and eject tasks."""

    def test_mode_holds_default_and_eject(self, project: ProjectModel) -> None:
        assert isinstance(project.mode, NormalMode)
        assert project.ejected is False
        assert project.default_task is project.tasks.get("default")
        assert project.eject_task is project.tasks.get("eject")

    def test_eject_spawns_default(self, project: ProjectModel) -> None:
        eject = project.tasks.get("eject")
        assert eject is not None
        assert [t.name for t in eject.spawns] == ["default"]
        assert eject.environment == {"PROJGEN_EJECTING": "true"}

    def test_runner_command_defaults(self, project: ProjectModel) -> None:
        assert project.runner_command == "uvx projgen"

    def test_runner_command_override(self, make_project: MakeProject) -> None:
        project = make_project(runner_command="pipx run projgen")
        assert project.runner_command == "pipx run projgen"

    def test_run_task_command_is_versioned(self, project: ProjectModel) -> None:
        task = project.add_task("lint")
        assert project.run_task_command(task) == f"uvx projgen@{GENERATOR_VERSION} lint"

    def test_run_task_command_is_pure(self, project: ProjectModel) -> None:
        task = project.tasks.get("build")
        assert task is not None
        assert project.run_task_command(task) == project.run_task_command(task)


class TestEjectedMode:
    """Ejected projects have no generator tasks and run a local script."""

    def test_no_default_or_eject_task(self, ejected_project: ProjectModel) -> None:
        assert isinstance(ejected_project.mode, EjectedMode)
        assert ejected_project.tasks.get("default") is None
        assert ejected_project.tasks.get("eject") is None
        assert ejected_project.default_task is None
        assert ejected_project.eject_task is None

    @pytest.mark.parametrize("name", ["build", "test", "anything"])
    def test_run_task_command_is_local_script(
        self, ejected_project: ProjectModel, name: str,
    ) -> None:
        task = ejected_project.tasks.get(name) or ejected_project.add_task(name)
        assert ejected_project.run_task_command(task) == EJECTED_RUN_TASK_COMMAND

    def test_runner_command_ignores_override(
        self, make_project: MakeProject, capsys: pytest.CaptureFixture[str],
    ) -> None:
        project = make_project(ejected=True, runner_command="pipx run projgen")

        assert project.runner_command == "scripts/run-task"
        assert "is ignored for ejected projects" in capsys.readouterr().out

    def test_ejected_from_environment(
        self, make_project: MakeProject, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("PROJGEN_EJECTING", "true")
        project = make_project(ejected=None)
        assert project.ejected is True

    def test_explicit_option_beats_environment(
        self, make_project: MakeProject, monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("PROJGEN_EJECTING", "true")
        project = make_project(ejected=False)
        assert project.ejected is False


class TestBuildTasks:

    def test_build_spawn_order(self, project: ProjectModel) -> None:
        assert [t.name for t in project.build_task.spawns] == [
            "default", "pre-compile", "compile", "post-compile", "test", "package",
        ]

    def test_build_skips_default_when_ejected(self, ejected_project: ProjectModel) -> None:
        assert [t.name for t in ejected_project.build_task.spawns] == [
            "pre-compile", "compile", "post-compile", "test", "package",
        ]

    def test_accessors(self, project: ProjectModel) -> None:
        assert project.pre_compile_task.name == "pre-compile"
        assert project.compile_task.name == "compile"
        assert project.post_compile_task.name == "post-compile"
        assert project.test_task.name == "test"
        assert project.package_task.name == "package"

    def test_removing_compile_prunes_build(self, project: ProjectModel) -> None:
        removed = project.remove_task("compile")

        assert removed is not None
        assert "compile" not in [t.name for t in project.build_task.spawns]


class TestProjectTasks:

    def test_add_duplicate_fails(self, project: ProjectModel) -> None:
        with pytest.raises(DuplicateTaskError):
            project.add_task("build")

    def test_remove_absent(self, project: ProjectModel) -> None:
        before = [t.name for t in project.tasks.all]
        assert project.remove_task("nope") is None
        assert [t.name for t in project.tasks.all] == before

    def test_tasks_from_options(self, make_project: MakeProject) -> None:
        project = make_project(
            env={"CI": "true"},
            tasks={
                "check": TaskSpec(description="All checks", spawn=["lint", "test"]),
                "lint": TaskSpec(env={"RUFF": "1"}),
            },
        )

        check = project.tasks.get("check")
        assert check is not None
        assert [t.name for t in check.spawns] == ["lint", "test"]
        assert project.tasks.environment == {"CI": "true"}

    def test_unknown_spawn_in_options(self, make_project: MakeProject) -> None:
        with pytest.raises(ConfigError, match="unknown task 'missing'"):
            make_project(tasks={"check": TaskSpec(spawn=["missing"])})

    def test_cycle_in_options(self, make_project: MakeProject) -> None:
        with pytest.raises(SpawnCycleError):
            make_project(tasks={
                "a": TaskSpec(spawn=["b"]),
                "b": TaskSpec(spawn=["a"]),
            })


class TestTaskCommandOverride:
    """Project kinds can change how tasks are invoked."""

    class MakeProjectModel(ProjectModel):
        def run_task_command(self, task: Task) -> str:
            return f"make {task.name}"

    def test_subclass_override(self, tmp_path: Path) -> None:
        project = self.MakeProjectModel(
            ProjectOptions(name="demo", outdir=tmp_path, ejected=False),
        )
        provider: TaskCommandProvider = project

        assert provider.run_task_command(project.build_task) == "make build"


class TestIgnoreWiring:

    def test_gitignore_includes_gitattributes(self, project: ProjectModel) -> None:
        assert "!/.gitattributes" in project.gitignore.patterns

    def test_generated_annotations(self, project: ProjectModel) -> None:
        assert project.gitattributes.attributes_for("/.projgen/**") == ["linguist-generated"]
        assert project.gitattributes.attributes_for("/.gitattributes") == ["linguist-generated"]

    def test_add_git_ignore(self, project: ProjectModel) -> None:
        project.add_git_ignore("dist/")
        project.add_git_ignore("dist/")

        assert project.gitignore.patterns.count("dist/") == 1

    def test_add_package_ignore_is_noop(self, project: ProjectModel) -> None:
        before = project.gitignore.patterns
        project.add_package_ignore("*.md")
        assert project.gitignore.patterns == before


def test_invalid_dependency_spec_is_config_error(make_project: MakeProject) -> None:
    with pytest.raises(ConfigError, match="Invalid dependency spec"):
        make_project(deps=[""])
