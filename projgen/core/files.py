"""JSON file components written during synthesis."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Union

from projgen.core.component import Component
from projgen.core.errors import DuplicateFileError
from projgen.helpers.helpers_logging import print_debug

if TYPE_CHECKING:
    from projgen.core.project import ProjectModel

JsonObject = Mapping[str, object]
JsonSource = Union[JsonObject, Callable[[], JsonObject]]


class FileBase(Component, ABC):
    """A generated file at ``path`` relative to the output directory.

    Subclasses implement ``render``. A project holds at most one file per
    path.

    Attributes:
        path: Path relative to the project output directory.
        readonly: Whether the file is listed in the generated-files manifest.

    Raises:
        DuplicateFileError: If the project already has a file at ``path``.
    """

    def __init__(
        self,
        project: ProjectModel,
        path: str,
        *,
        readonly: bool = True,
    ) -> None:
        if any(f.path == path for f in project.files):
            raise DuplicateFileError(path)
        super().__init__(project)
        self.path = path
        self.readonly = readonly

    @abstractmethod
    def render(self) -> str | None:
        """Return file content, or None to skip writing the file."""

    def synthesize(self, outdir: Path) -> list[Path]:
        content = self.render()
        if content is None:
            print_debug(f"Skipped empty file: {self.path}")
            return []

        target = outdir / self.path
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return [target]


class JsonFile(FileBase):
    """A JSON file built from a mapping or a callable returning one.

    A callable is evaluated at render time, so it sees the final state of the
    project. With ``omit_empty`` the file is not written when every value is
    empty.
    """

    def __init__(
        self,
        project: ProjectModel,
        path: str,
        obj: JsonSource,
        *,
        omit_empty: bool = False,
        readonly: bool = True,
    ) -> None:
        super().__init__(project, path, readonly=readonly)
        self.obj = obj
        self.omit_empty = omit_empty

    def resolve(self) -> dict[str, object]:
        """Evaluate the object and drop None values."""
        raw = self.obj() if callable(self.obj) else self.obj
        return {key: value for key, value in raw.items() if value is not None}

    def render(self) -> str | None:
        data = self.resolve()
        if self.omit_empty and not any(data.values()):
            return None
        return json.dumps(data, indent=2) + "\n"
