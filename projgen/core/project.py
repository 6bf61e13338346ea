"""Project model: tasks, generated files and task command derivation.

A project is built in two phases. The constructor wires every component
(ignore files, task manifest, build tasks, renovatebot); ``synthesize`` then
runs ``pre_synthesize`` on each component so they can read the final state
of the project, and writes all files.

Whether the project is ejected is decided once, at construction:

- normal mode: ``default`` (synthesize) and ``eject`` tasks exist, tasks are
  invoked through the versioned generator (``uvx projgen@<version> <task>``)
- ejected mode: no ``default``/``eject`` tasks, tasks are invoked through
  the vendored ``scripts/run-task`` script
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, Union

from projgen.config import (
    DEFAULT_RUNNER_COMMAND,
    DEPS_MANIFEST,
    EJECTED_RUN_TASK_COMMAND,
    EJECTING_ENV_VAR,
    FILE_MANIFEST,
    GENERATOR_VERSION,
    PROJGEN_DIR,
    RUN_TASK_PREFIX,
    TASKS_MANIFEST,
    is_ejecting,
)
from projgen.core.component import Component
from projgen.core.dependencies import Dependencies, DependencyType
from projgen.core.errors import ConfigError
from projgen.core.files import FileBase, JsonFile
from projgen.core.gitattributes import GitAttributesFile
from projgen.core.ignore_file import IgnoreFile
from projgen.core.project_build import ProjectBuild
from projgen.core.renovatebot import Renovatebot, RenovatebotOptions
from projgen.core.task import Task
from projgen.core.tasks import TaskRegistry
from projgen.helpers.helpers_logging import (
    print_debug,
    print_header,
    print_success,
    print_warning,
)

DEFAULT_TASK = "default"
EJECT_TASK = "eject"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------


@dataclass
class TaskSpec:
    """Declarative task definition, as read from .projgenrc.yaml."""

    description: str | None = None
    env: dict[str, str] = field(default_factory=dict)
    spawn: list[str] = field(default_factory=list)


@dataclass
class ProjectOptions:
    """Options for :class:`ProjectModel`.

    Attributes:
        name: Project name.
        outdir: Directory files are synthesized into.
        runner_command: Command used to run the generator CLI.
        ejected: Build the project in ejected mode. Defaults to the
            PROJGEN_EJECTING environment variable.
        deps: Runtime dependencies (``name[@version]``).
        build_deps: Build-time dependencies.
        test_deps: Test dependencies.
        gitignore: Extra .gitignore patterns.
        env: Environment variables shared by all tasks.
        tasks: Extra tasks, keyed by name.
        renovatebot: Generate renovatebot configuration.
        renovatebot_options: Options for renovatebot.
    """

    name: str
    outdir: Path = Path(".")
    runner_command: str | None = None
    ejected: bool | None = None
    deps: list[str] = field(default_factory=list)
    build_deps: list[str] = field(default_factory=list)
    test_deps: list[str] = field(default_factory=list)
    gitignore: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)
    tasks: dict[str, TaskSpec] = field(default_factory=dict)
    renovatebot: bool = False
    renovatebot_options: RenovatebotOptions | None = None


# ---------------------------------------------------------------------------
# Mode
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NormalMode:
    """Project managed by the generator."""

    default_task: Task
    eject_task: Task


@dataclass(frozen=True)
class EjectedMode:
    """Project that no longer depends on the generator."""


ProjectMode = Union[NormalMode, EjectedMode]


class TaskCommandProvider(Protocol):
    """Anything that can produce the shell command running a task."""

    def run_task_command(self, task: Task) -> str:
        ...


# ---------------------------------------------------------------------------
# Project
# ---------------------------------------------------------------------------


class ProjectModel:
    """A generated project and its task graph."""

    def __init__(self, options: ProjectOptions) -> None:
        self.name = options.name
        self.outdir = Path(options.outdir)
        self.components: list[Component] = []

        ejected = options.ejected if options.ejected is not None else is_ejecting()
        if ejected:
            if options.runner_command:
                print_warning(
                    f"runner_command '{options.runner_command}' is ignored "
                    + "for ejected projects"
                )
            self.runner_command = EJECTED_RUN_TASK_COMMAND
        else:
            self.runner_command = options.runner_command or DEFAULT_RUNNER_COMMAND

        self.gitattributes = GitAttributesFile(self)
        self.annotate_generated(f"/{PROJGEN_DIR}/**")
        self.annotate_generated(f"/{self.gitattributes.path}")

        self.gitignore = IgnoreFile(self, ".gitignore")
        self.gitignore.include(f"/{self.gitattributes.path}")

        self.tasks = TaskRegistry()
        self.mode: ProjectMode = self._create_mode(ejected)
        JsonFile(self, TASKS_MANIFEST, obj=self.tasks.to_manifest)

        self.deps = Dependencies()
        JsonFile(self, DEPS_MANIFEST, obj=self.deps.to_manifest, omit_empty=True)

        self.project_build = ProjectBuild(self.tasks, self.default_task)

        self._apply_options(options)

        self.renovatebot: Renovatebot | None = None
        if options.renovatebot:
            self.renovatebot = Renovatebot(self, options.renovatebot_options)

    def _create_mode(self, ejected: bool) -> ProjectMode:
        if ejected:
            print_debug(f"Project '{self.name}' is ejected")
            return EjectedMode()

        default_task = self.tasks.add_task(
            DEFAULT_TASK, description="Synthesize project files",
        )
        eject_task = self.tasks.add_task(
            EJECT_TASK,
            description="Remove projgen from the project",
            env={EJECTING_ENV_VAR: "true"},
        )
        # ejecting re-synthesizes once without the generator
        eject_task.spawn(default_task)

        JsonFile(self, FILE_MANIFEST, omit_empty=True, obj=self._file_manifest)
        return NormalMode(default_task=default_task, eject_task=eject_task)

    def _file_manifest(self) -> dict[str, object]:
        # only files that will be written; the manifest always lists itself
        files = [
            f.path.replace("\\", "/")
            for f in self.files
            if f.readonly and (f.path == FILE_MANIFEST or f.render() is not None)
        ]
        return {"files": files}

    def _apply_options(self, options: ProjectOptions) -> None:
        for specs, dep_type in (
            (options.deps, DependencyType.RUNTIME),
            (options.build_deps, DependencyType.BUILD),
            (options.test_deps, DependencyType.TEST),
        ):
            for spec in specs:
                try:
                    self.deps.add(spec, dep_type)
                except ValueError as exc:
                    raise ConfigError(str(exc)) from exc

        for pattern in options.gitignore:
            self.add_git_ignore(pattern)

        for key, value in options.env.items():
            self.tasks.add_environment(key, value)

        # all tasks first, so spawns may point at tasks declared later
        created = {
            name: self.add_task(name, description=spec.description, env=spec.env)
            for name, spec in options.tasks.items()
        }
        for name, spec in options.tasks.items():
            task = created[name]
            for child_name in spec.spawn:
                child = self.tasks.get(child_name)
                if child is None:
                    raise ConfigError(
                        f"Task '{name}' spawns unknown task '{child_name}'"
                    )
                task.spawn(child)

    # -- Mode accessors ---------------------------------------------------

    @property
    def ejected(self) -> bool:
        return isinstance(self.mode, EjectedMode)

    @property
    def default_task(self) -> Task | None:
        """The task that synthesizes the project. None when ejected."""
        if isinstance(self.mode, NormalMode):
            return self.mode.default_task
        return None

    @property
    def eject_task(self) -> Task | None:
        """The task that ejects the project. None when ejected."""
        if isinstance(self.mode, NormalMode):
            return self.mode.eject_task
        return None

    # -- Tasks ------------------------------------------------------------

    def add_task(
        self,
        name: str,
        description: str | None = None,
        env: dict[str, str] | None = None,
    ) -> Task:
        """Add a task. Fails if the project already has a task with ``name``.

        Raises:
            DuplicateTaskError: If the name is taken.
        """
        return self.tasks.add_task(name, description=description, env=env)

    def remove_task(self, name: str) -> Task | None:
        """Remove a task. Returns the removed task, or None."""
        return self.tasks.remove_task(name)

    def run_task_command(self, task: Task) -> str:
        """Shell command that runs ``task``.

        Normally ``uvx projgen@<version> <task>``; ejected projects always
        go through the vendored ``scripts/run-task`` script. Project kinds
        with a different runner override this.
        """
        if self.ejected:
            return EJECTED_RUN_TASK_COMMAND
        return f"{RUN_TASK_PREFIX}@{GENERATOR_VERSION} {task.name}"

    @property
    def build_task(self) -> Task:
        return self.project_build.build_task

    @property
    def pre_compile_task(self) -> Task:
        return self.project_build.pre_compile_task

    @property
    def compile_task(self) -> Task:
        return self.project_build.compile_task

    @property
    def post_compile_task(self) -> Task:
        return self.project_build.post_compile_task

    @property
    def test_task(self) -> Task:
        return self.project_build.test_task

    @property
    def package_task(self) -> Task:
        return self.project_build.package_task

    # -- Files ------------------------------------------------------------

    def add_component(self, component: Component) -> None:
        self.components.append(component)

    @property
    def files(self) -> list[FileBase]:
        return [c for c in self.components if isinstance(c, FileBase)]

    def add_git_ignore(self, pattern: str) -> None:
        """Add a .gitignore pattern."""
        self.gitignore.add_patterns(pattern)

    def add_package_ignore(self, pattern: str) -> None:
        """Exclude ``pattern`` from the bundled package.

        Project kinds with a packaging mechanism implement this; there is
        nothing to do at this level.
        """

    def annotate_generated(self, glob: str) -> None:
        """Mark files matching ``glob`` as generated (github-linguist)."""
        self.gitattributes.add_attributes(glob, "linguist-generated")

    # -- Synthesis --------------------------------------------------------

    def pre_synthesize(self) -> None:
        for component in list(self.components):
            component.pre_synthesize()

    def synthesize(self, outdir: Path | None = None) -> list[Path]:
        """Finalize every component and write all files.

        Returns:
            Paths of the written files.
        """
        target = Path(outdir) if outdir is not None else self.outdir
        print_header(f"Synthesizing {self.name} into {target}")

        self.pre_synthesize()

        written: list[Path] = []
        for component in list(self.components):
            written.extend(component.synthesize(target))

        for path in written:
            print_success(f"Wrote {path.relative_to(target).as_posix()}")
        return written
