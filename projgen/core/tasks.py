"""Task registry owned by a project."""

from __future__ import annotations

from collections.abc import Mapping

from projgen.core.errors import DuplicateTaskError
from projgen.core.task import Task
from projgen.helpers.helpers_logging import print_debug


class TaskRegistry:
    """Named tasks of one project, kept in insertion order.

    Names are unique. Removing a task also prunes it from the spawn lists of
    the remaining tasks, so the graph never points at a task that is gone.
    """

    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}
        self._env: dict[str, str] = {}

    def __len__(self) -> int:
        return len(self._tasks)

    def __contains__(self, name: object) -> bool:
        return name in self._tasks

    @property
    def all(self) -> list[Task]:
        """Snapshot of all tasks in insertion order."""
        return list(self._tasks.values())

    @property
    def environment(self) -> dict[str, str]:
        """Copy of the environment shared by every task."""
        return dict(self._env)

    def add_task(
        self,
        name: str,
        description: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> Task:
        """Register a new task.

        Raises:
            DuplicateTaskError: If a task with ``name`` already exists.
        """
        if name in self._tasks:
            raise DuplicateTaskError(name)

        task = Task(name, description=description, env=env)
        self._tasks[name] = task
        print_debug(f"Added task: {name}")
        return task

    def remove_task(self, name: str) -> Task | None:
        """Remove a task and prune spawn references to it.

        Returns:
            The removed task, or None if no task has that name.
        """
        task = self._tasks.pop(name, None)
        if task is None:
            return None

        for other in self._tasks.values():
            if other.unspawn(task):
                print_debug(f"Pruned spawn {other.name} -> {name}")
        print_debug(f"Removed task: {name}")
        return task

    def get(self, name: str) -> Task | None:
        """Look up a task by name."""
        return self._tasks.get(name)

    def names(self) -> set[str]:
        """Unique task names."""
        return set(self._tasks)

    def add_environment(self, name: str, value: str) -> None:
        """Set an environment variable shared by all tasks."""
        self._env[name] = value

    def to_manifest(self) -> dict[str, object]:
        """Serializable view of the registry, keyed by task name."""
        manifest: dict[str, object] = {
            "tasks": {task.name: task.to_dict() for task in self._tasks.values()},
        }
        if self._env:
            manifest["env"] = dict(self._env)
        return manifest
