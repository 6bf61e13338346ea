"""Project dependency list.

Dependencies are declared as ``name`` or ``name@version`` and grouped by
type. A ``(name, type)`` pair is unique; declaring it again replaces the
version.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DependencyType(str, Enum):
    """How a dependency is used by the project."""

    RUNTIME = "runtime"
    PEER = "peer"
    BUNDLED = "bundled"
    BUILD = "build"
    TEST = "test"
    DEVENV = "devenv"


@dataclass(frozen=True)
class Dependency:
    """A single declared dependency.

    Attributes:
        name: Package name.
        type: Dependency type.
        version: Version requirement, or None if unpinned.
    """

    name: str
    type: DependencyType
    version: str | None = None

    def to_dict(self) -> dict[str, str]:
        data = {"name": self.name, "type": self.type.value}
        if self.version:
            data["version"] = self.version
        return data


def parse_dependency_spec(spec: str) -> tuple[str, str | None]:
    """Split ``name@version`` into its parts.

    A leading ``@`` belongs to the name (scoped packages such as
    ``@scope/pkg@1.0``).

    Example:
        "requests@2.31" → ("requests", "2.31")
        "@types/node"   → ("@types/node", None)
    """
    spec = spec.strip()
    index = spec.rfind("@")
    if index <= 0:
        return spec, None
    version = spec[index + 1:].strip()
    return spec[:index], version or None


class Dependencies:
    """Dependencies of one project."""

    def __init__(self) -> None:
        self._deps: dict[tuple[str, DependencyType], Dependency] = {}

    def add(self, spec: str, type: DependencyType) -> Dependency:  # noqa: A002
        """Declare a dependency from a ``name[@version]`` spec."""
        name, version = parse_dependency_spec(spec)
        if not name:
            raise ValueError(f"Invalid dependency spec: '{spec}'")
        dep = Dependency(name=name, type=type, version=version)
        self._deps[(name, type)] = dep
        return dep

    def remove(self, name: str, type: DependencyType | None = None) -> None:  # noqa: A002
        """Remove ``name`` of the given type, or of every type."""
        for key in list(self._deps):
            if key[0] == name and (type is None or key[1] == type):
                del self._deps[key]

    def get(
        self, name: str, type: DependencyType | None = None,  # noqa: A002
    ) -> Dependency | None:
        for (dep_name, dep_type), dep in self._deps.items():
            if dep_name == name and (type is None or dep_type == type):
                return dep
        return None

    @property
    def all(self) -> list[Dependency]:
        """All dependencies sorted by type, then name."""
        return sorted(self._deps.values(), key=lambda d: (d.type.value, d.name))

    def names(self) -> set[str]:
        return {name for name, _ in self._deps}

    def to_manifest(self) -> dict[str, object]:
        return {"dependencies": [dep.to_dict() for dep in self.all]}
