"""Standard build tasks of a project."""

from __future__ import annotations

from projgen.core.task import Task
from projgen.core.tasks import TaskRegistry


class ProjectBuild:
    """Creates the build pipeline tasks.

    ``build`` spawns, in order: ``default`` (when the project is not
    ejected), ``pre-compile``, ``compile``, ``post-compile``, ``test``
    and ``package``.
    """

    def __init__(self, tasks: TaskRegistry, default_task: Task | None = None) -> None:
        self.pre_compile_task = tasks.add_task(
            "pre-compile", description="Prepare the project for compilation",
        )
        self.compile_task = tasks.add_task("compile", description="Only compile")
        self.post_compile_task = tasks.add_task(
            "post-compile", description="Runs after successful compilation",
        )
        self.test_task = tasks.add_task("test", description="Run tests")
        self.package_task = tasks.add_task(
            "package", description="Creates the distribution package",
        )
        self.build_task = tasks.add_task("build", description="Full release build")

        if default_task is not None:
            self.build_task.spawn(default_task)
        for step in (
            self.pre_compile_task,
            self.compile_task,
            self.post_compile_task,
            self.test_task,
            self.package_task,
        ):
            self.build_task.spawn(step)
