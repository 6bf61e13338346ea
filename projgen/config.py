"""Generator-wide constants and environment switches."""

import os

GENERATOR_NAME = "projgen"
GENERATOR_VERSION = "0.1.0"

# Versioned remote invocation: ``uvx projgen@<version> <task>``
RUN_TASK_PREFIX = f"uvx {GENERATOR_NAME}"
DEFAULT_RUNNER_COMMAND = RUN_TASK_PREFIX

# Once ejected, tasks run through a locally vendored script.
EJECTED_RUN_TASK_COMMAND = "scripts/run-task"

EJECTING_ENV_VAR = "PROJGEN_EJECTING"
DEBUG_ENV_VAR = "PROJGEN_DEBUG"

PROJGEN_DIR = ".projgen"
FILE_MANIFEST = f"{PROJGEN_DIR}/files.json"
TASKS_MANIFEST = f"{PROJGEN_DIR}/tasks.json"
DEPS_MANIFEST = f"{PROJGEN_DIR}/deps.json"
DEFAULT_RC_FILE = ".projgenrc.yaml"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in _TRUTHY


def is_ejecting() -> bool:
    """Return True when the eject task is running (PROJGEN_EJECTING=true)."""
    return _env_flag(EJECTING_ENV_VAR)


def is_debug() -> bool:
    """Return True when debug traces are enabled (PROJGEN_DEBUG=1)."""
    return _env_flag(DEBUG_ENV_VAR)
