"""Renovatebot configuration for generated projects.

The bot is told to leave alone every dependency whose version the project
pins itself, plus ``projgen`` (upgrading the generator changes committed
files, so those upgrades are handled separately).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from projgen.config import GENERATOR_NAME
from projgen.core.component import Component
from projgen.core.files import JsonFile

if TYPE_CHECKING:
    from projgen.core.project import ProjectModel

RENOVATE_CONFIG_FILE = "renovate.json5"

_EXTENDS = [
    ":preserveSemverRanges",
    "config:base",
    "group:allNonMajor",
    "group:recommended",
    "group:monorepos",
]


class ScheduleInterval(str, Enum):
    """Renovate schedule presets.

    See https://docs.renovatebot.com/presets-schedule/
    """

    ANY_TIME = "at any time"
    EARLY_MONDAYS = "before 3am on Monday"
    DAILY = "before 2am"
    WEEKLY = "before 3am on Monday"  # alias of EARLY_MONDAYS
    MONTHLY = "before 3am on the first day of the month"
    QUARTERLY = "every 3 months on the first day of the month"
    WEEKENDS = "every weekend"
    WEEKDAYS = "every weekday"


@dataclass
class RenovatebotOptions:
    """Options for Renovatebot.

    Attributes:
        schedule_interval: Cron or "later" schedules, passed through as-is.
            Multiple entries are OR-ed by renovate.
        ignore: Package names renovate must not update.
        ignore_projgen: Also ignore ``projgen`` itself.
        labels: Labels applied to renovate pull requests.
    """

    schedule_interval: list[str] = field(
        default_factory=lambda: [ScheduleInterval.ANY_TIME.value],
    )
    ignore: list[str] = field(default_factory=list)
    ignore_projgen: bool = True
    labels: list[str] | None = None


class Renovatebot(Component):
    """Writes renovate.json5 once all dependencies are known."""

    def __init__(
        self,
        project: ProjectModel,
        options: RenovatebotOptions | None = None,
    ) -> None:
        super().__init__(project)
        options = options or RenovatebotOptions()

        self.explicit_ignores: list[str] = list(options.ignore)
        if options.ignore_projgen:
            self.explicit_ignores.append(GENERATOR_NAME)
        self.schedule_interval = [
            s.value if isinstance(s, ScheduleInterval) else s
            for s in options.schedule_interval
        ]
        self.labels = list(options.labels) if options.labels is not None else None
        self.file: JsonFile | None = None

    def pre_synthesize(self) -> None:
        # dependencies are final only now
        config = self.create_configuration()
        if self.file is None:
            self.file = JsonFile(self.project, RENOVATE_CONFIG_FILE, obj=config)
        else:
            self.file.obj = config

    def ignored_dependencies(self) -> list[str]:
        """Pinned dependency names plus explicit ignores, without duplicates."""
        pinned = [dep.name for dep in self.project.deps.all if dep.version]
        return list(dict.fromkeys([*pinned, *self.explicit_ignores]))

    def create_configuration(self) -> dict[str, object]:
        return {
            "labels": self.labels,
            "schedule": list(self.schedule_interval),
            "extends": list(_EXTENDS),
            "packageRules": [
                {
                    "matchDepTypes": ["devDependencies"],
                    "matchUpdateTypes": ["patch", "minor"],
                    "groupName": "devDependencies (non-major)",
                },
            ],
            "ignoreDeps": self.ignored_dependencies(),
        }
