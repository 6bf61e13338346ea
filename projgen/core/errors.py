"""Error types raised by the project model."""

from projgen.helpers.helpers_logging import print_error


class ProjgenError(Exception):
    """Base error for projgen."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def print_error(self) -> None:
        """Print the error message using the logging helper."""
        print_error(self.message)


class TaskError(ProjgenError):
    """Raised when the task graph rejects a change."""


class DuplicateTaskError(TaskError):
    """Raised when a task name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Task '{name}' already exists")
        self.name = name


class SelfSpawnError(TaskError):
    """Raised when a task tries to spawn itself."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Task '{name}' cannot spawn itself")
        self.name = name


class SpawnCycleError(TaskError):
    """Raised when a spawn would close a cycle in the task graph."""

    def __init__(self, path: list[str]) -> None:
        super().__init__(
            "Spawn would create a cycle: " + " -> ".join(path)
        )
        self.path = path


class ConfigError(ProjgenError):
    """Raised when a .projgenrc file cannot be turned into project options."""


class DuplicateFileError(ProjgenError):
    """Raised when two generated files share an output path."""

    def __init__(self, path: str) -> None:
        super().__init__(f"A generated file already exists at '{path}'")
        self.path = path
