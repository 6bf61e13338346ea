"""Base class for project components that take part in synthesis."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from projgen.core.project import ProjectModel


class Component:
    """A piece of a project that is finalized and written during synthesis.

    Components register themselves with their project on construction.
    ``pre_synthesize`` runs for every component before any ``synthesize``.
    """

    def __init__(self, project: ProjectModel) -> None:
        self.project = project
        project.add_component(self)

    def pre_synthesize(self) -> None:
        """Finalize state that depends on other components."""

    def synthesize(self, outdir: Path) -> list[Path]:
        """Write output under ``outdir`` and return the written paths."""
        return []
