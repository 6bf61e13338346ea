"""
projgen

Generates and maintains project scaffolding files (ignore files, git
attributes, renovatebot configuration, task manifests) from a project model.
"""

from projgen.config import GENERATOR_VERSION as __version__
from projgen.core.project import ProjectModel, ProjectOptions
from projgen.core.renovatebot import RenovatebotOptions

__all__ = [
    "__version__",
    "ProjectModel",
    "ProjectOptions",
    "RenovatebotOptions",
]
