"""Ignore files (.gitignore, .npmignore, ...) with deduplicated patterns."""

from __future__ import annotations

from typing import TYPE_CHECKING

from projgen.config import DEFAULT_RC_FILE, GENERATOR_NAME
from projgen.core.files import FileBase

if TYPE_CHECKING:
    from projgen.core.project import ProjectModel


class IgnoreFile(FileBase):
    """An ignore file whose patterns are kept unique, in insertion order.

    ``exclude`` and ``include`` cancel each other: excluding ``dist/``
    drops an earlier ``!dist/`` and vice versa. Comment lines are kept
    as given.
    """

    def __init__(self, project: ProjectModel, path: str) -> None:
        super().__init__(project, path)
        self._patterns: list[str] = []

    @property
    def patterns(self) -> list[str]:
        return list(self._patterns)

    def add_patterns(self, *patterns: str) -> None:
        """Add patterns; a leading ``!`` marks an include."""
        for pattern in patterns:
            if pattern.startswith("#"):
                self._append(pattern)
            elif pattern.startswith("!"):
                self.include(pattern[1:])
            else:
                self.exclude(pattern)

    def exclude(self, *patterns: str) -> None:
        """Ignore files matching ``patterns``."""
        for pattern in patterns:
            self._drop(f"!{pattern}")
            self._append(pattern)

    def include(self, *patterns: str) -> None:
        """Re-include files matching ``patterns`` (written as ``!pattern``)."""
        for pattern in patterns:
            self._drop(pattern)
            self._append(f"!{pattern}")

    def remove_patterns(self, *patterns: str) -> None:
        for pattern in patterns:
            self._drop(pattern)

    def _append(self, pattern: str) -> None:
        if pattern and pattern not in self._patterns:
            self._patterns.append(pattern)

    def _drop(self, pattern: str) -> None:
        self._patterns = [p for p in self._patterns if p != pattern]

    def render(self) -> str | None:
        marker = (
            f"# ~~ Generated by {GENERATOR_NAME}. To modify, edit "
            f"{DEFAULT_RC_FILE} and run \"{self.project.runner_command}\"."
        )
        return "\n".join([marker, *self._patterns]) + "\n"
