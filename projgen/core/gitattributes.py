"""The .gitattributes file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from projgen.config import GENERATOR_NAME
from projgen.core.files import FileBase

if TYPE_CHECKING:
    from projgen.core.project import ProjectModel


class GitAttributesFile(FileBase):
    """Maps globs to git attributes, e.g. ``linguist-generated``."""

    def __init__(self, project: ProjectModel) -> None:
        super().__init__(project, ".gitattributes")
        self._attributes: dict[str, list[str]] = {}

    def add_attributes(self, glob: str, *attributes: str) -> None:
        """Attach ``attributes`` to ``glob``; duplicates are ignored."""
        current = self._attributes.setdefault(glob, [])
        for attribute in attributes:
            if attribute not in current:
                current.append(attribute)

    def attributes_for(self, glob: str) -> list[str]:
        return list(self._attributes.get(glob, []))

    def render(self) -> str | None:
        width = max((len(glob) for glob in self._attributes), default=0)
        lines = [f"# ~~ Generated by {GENERATOR_NAME}"]
        for glob, attributes in self._attributes.items():
            if attributes:
                lines.append(f"{glob.ljust(width)} {' '.join(attributes)}")
        return "\n".join(lines) + "\n"
