"""Task: a named unit of work in the project task graph.

A task carries a description, environment variables and an ordered list of
tasks it spawns. Tasks only model the graph; running them is up to the
runner that reads the synthesized task manifest.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from projgen.core.errors import SelfSpawnError, SpawnCycleError


class Task:
    """A named, describable unit of work.

    Attributes:
        name: Task name, unique within its registry.
        description: Optional human-readable description.
    """

    def __init__(
        self,
        name: str,
        description: str | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self.name = name
        self.description = description
        self._env: dict[str, str] = dict(env or {})
        self._spawns: list[Task] = []

    def __repr__(self) -> str:
        return f"Task({self.name!r})"

    @property
    def environment(self) -> dict[str, str]:
        """Copy of the task environment."""
        return dict(self._env)

    @property
    def spawns(self) -> list[Task]:
        """Copy of the spawned tasks, in execution order."""
        return list(self._spawns)

    def env(self, key: str, value: str) -> None:
        """Set an environment variable for this task (last write wins)."""
        self._env[key] = value

    def spawn(self, child: Task) -> None:
        """Queue ``child`` to run after the steps already declared.

        Raises:
            SelfSpawnError: If ``child`` is this task.
            SpawnCycleError: If this task is reachable from ``child``.
        """
        if child is self:
            raise SelfSpawnError(self.name)

        path = child._path_to(self)
        if path is not None:
            raise SpawnCycleError([self.name, *path])

        self._spawns.append(child)

    def unspawn(self, child: Task) -> bool:
        """Drop every spawn of ``child``. Returns True if any was dropped."""
        kept = [t for t in self._spawns if t is not child]
        removed = len(kept) != len(self._spawns)
        self._spawns = kept
        return removed

    def walk(self) -> Iterator[Task]:
        """Yield spawned tasks depth-first, in execution order."""
        for child in self._spawns:
            yield child
            yield from child.walk()

    def _path_to(self, target: Task) -> list[str] | None:
        """Names along a spawn path from this task to ``target``, or None."""
        stack: list[tuple[Task, list[str]]] = [(self, [self.name])]
        seen: set[int] = set()
        while stack:
            node, path = stack.pop()
            if node is target:
                return path
            if id(node) in seen:
                continue
            seen.add(id(node))
            for child in node._spawns:
                stack.append((child, [*path, child.name]))
        return None

    def to_dict(self) -> dict[str, object]:
        """Serializable view of the task; empty members are omitted."""
        data: dict[str, object] = {"name": self.name}
        if self.description:
            data["description"] = self.description
        if self._env:
            data["env"] = dict(self._env)
        if self._spawns:
            data["steps"] = [{"spawn": child.name} for child in self._spawns]
        return data
