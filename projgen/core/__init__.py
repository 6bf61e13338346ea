"""Project model, task graph and generated file components."""

from projgen.core.errors import (
    ConfigError,
    DuplicateFileError,
    DuplicateTaskError,
    ProjgenError,
    SelfSpawnError,
    SpawnCycleError,
    TaskError,
)
from projgen.core.project import (
    EjectedMode,
    NormalMode,
    ProjectModel,
    ProjectOptions,
    TaskCommandProvider,
    TaskSpec,
)
from projgen.core.task import Task
from projgen.core.tasks import TaskRegistry

__all__ = [
    "ConfigError",
    "DuplicateFileError",
    "DuplicateTaskError",
    "EjectedMode",
    "NormalMode",
    "ProjectModel",
    "ProjectOptions",
    "ProjgenError",
    "SelfSpawnError",
    "SpawnCycleError",
    "Task",
    "TaskCommandProvider",
    "TaskError",
    "TaskRegistry",
    "TaskSpec",
]
