"""Project configuration file (.projgenrc.yaml).

Example .projgenrc.yaml:
    name: my-service
    deps:
      - requests@2.31
    test_deps:
      - pytest
    gitignore:
      - .venv/
    tasks:
      lint:
        description: Run linters
        env:
          RUFF_CACHE_DIR: .cache/ruff
      check:
        spawn: [lint, test]
    renovatebot:
      schedule_interval: ["before 3am on Monday"]
      labels: [dependencies]

``renovatebot`` also accepts a plain ``true``/``false``.
"""

from pathlib import Path
from typing import Any, cast

import yaml
from ruamel.yaml.comments import CommentedMap

from projgen.config import DEFAULT_RC_FILE, GENERATOR_NAME
from projgen.core.errors import ConfigError
from projgen.core.project import ProjectOptions, TaskSpec
from projgen.core.renovatebot import RenovatebotOptions
from projgen.helpers.helpers_logging import print_info, print_success
from projgen.helpers.yaml_loader import save_yaml_file

_KNOWN_KEYS = frozenset({
    "name", "runner_command", "ejected",
    "deps", "build_deps", "test_deps",
    "gitignore", "env", "tasks", "renovatebot",
})
_TASK_KEYS = frozenset({"description", "env", "spawn"})
_RENOVATE_KEYS = frozenset({
    "schedule_interval", "ignore", "ignore_projgen", "labels",
})


# ---------------------------------------------------------------------------
# Field parsers
# ---------------------------------------------------------------------------


def _check_keys(data: dict[str, Any], allowed: frozenset[str], where: str) -> None:
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise ConfigError(
            f"Unknown key(s) in {where}: {', '.join(unknown)}. "
            + f"Allowed: {', '.join(sorted(allowed))}"
        )


def _str_list(data: dict[str, Any], key: str, where: str) -> list[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigError(f"'{key}' in {where} must be a list of strings")
    return cast(list[str], list(value))


def _str_map(data: dict[str, Any], key: str, where: str) -> dict[str, str]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{key}' in {where} must be a mapping")
    result: dict[str, str] = {}
    for k, v in cast(dict[Any, Any], value).items():
        if v is None or isinstance(v, (dict, list)):
            raise ConfigError(f"'{key}' in {where}: value of '{k}' must be a string")
        result[str(k)] = _env_value(v)
    return result


def _env_value(value: object) -> str:
    # YAML turns `true` / `1` into non-strings; env values are always strings
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _optional_str(data: dict[str, Any], key: str, where: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ConfigError(f"'{key}' in {where} must be a string")
    return value


def _optional_bool(data: dict[str, Any], key: str, where: str) -> bool | None:
    value = data.get(key)
    if value is not None and not isinstance(value, bool):
        raise ConfigError(f"'{key}' in {where} must be true or false")
    return value


def _parse_tasks(data: dict[str, Any], where: str) -> dict[str, TaskSpec]:
    raw = data.get("tasks")
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigError(f"'tasks' in {where} must be a mapping")

    tasks: dict[str, TaskSpec] = {}
    for name, body in cast(dict[Any, Any], raw).items():
        task_where = f"{where} task '{name}'"
        if body is None:
            body = {}
        if not isinstance(body, dict):
            raise ConfigError(f"{task_where} must be a mapping")
        body = cast(dict[str, Any], body)
        _check_keys(body, _TASK_KEYS, task_where)
        tasks[str(name)] = TaskSpec(
            description=_optional_str(body, "description", task_where),
            env=_str_map(body, "env", task_where),
            spawn=_str_list(body, "spawn", task_where),
        )
    return tasks


def _parse_renovatebot(
    data: dict[str, Any], where: str,
) -> tuple[bool, RenovatebotOptions | None]:
    raw = data.get("renovatebot")
    if raw is None:
        return False, None
    if isinstance(raw, bool):
        return raw, None
    if not isinstance(raw, dict):
        raise ConfigError(f"'renovatebot' in {where} must be true, false or a mapping")

    body = cast(dict[str, Any], raw)
    bot_where = f"{where} renovatebot"
    _check_keys(body, _RENOVATE_KEYS, bot_where)

    options = RenovatebotOptions(
        ignore=_str_list(body, "ignore", bot_where),
        labels=_str_list(body, "labels", bot_where) if "labels" in body else None,
    )
    if "schedule_interval" in body:
        options.schedule_interval = _str_list(body, "schedule_interval", bot_where)
    ignore_projgen = _optional_bool(body, "ignore_projgen", bot_where)
    if ignore_projgen is not None:
        options.ignore_projgen = ignore_projgen
    return True, options


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_project_options(path: Path, outdir: Path | None = None) -> ProjectOptions:
    """Read project options from a .projgenrc.yaml file.

    Args:
        path: Path to the rc file.
        outdir: Output directory; defaults to the rc file's directory.

    Raises:
        ConfigError: If the file is missing, unparsable or invalid.
    """
    if not path.exists():
        raise ConfigError(
            f"{path} not found - run '{GENERATOR_NAME} init <name>' first"
        )

    try:
        raw: object = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Could not parse {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path} must contain a mapping at the top level")

    data = cast(dict[str, Any], raw)
    where = path.name
    _check_keys(data, _KNOWN_KEYS, where)

    project_dir = path.resolve().parent
    renovatebot, renovatebot_options = _parse_renovatebot(data, where)

    return ProjectOptions(
        name=_optional_str(data, "name", where) or project_dir.name,
        outdir=outdir if outdir is not None else project_dir,
        runner_command=_optional_str(data, "runner_command", where),
        ejected=_optional_bool(data, "ejected", where),
        deps=_str_list(data, "deps", where),
        build_deps=_str_list(data, "build_deps", where),
        test_deps=_str_list(data, "test_deps", where),
        gitignore=_str_list(data, "gitignore", where),
        env=_str_map(data, "env", where),
        tasks=_parse_tasks(data, where),
        renovatebot=renovatebot,
        renovatebot_options=renovatebot_options,
    )


def write_sample_rc(project_dir: Path, name: str) -> bool:
    """Write a starter .projgenrc.yaml unless one already exists.

    Returns:
        True if the file was written.
    """
    rc_path = project_dir / DEFAULT_RC_FILE
    if rc_path.exists():
        print_info(f"⊘ Skipped (exists): {DEFAULT_RC_FILE}")
        return False

    data = CommentedMap()
    data["name"] = name
    data["deps"] = []
    data["test_deps"] = []
    data["gitignore"] = []
    data["tasks"] = CommentedMap()
    data["renovatebot"] = False
    data.yaml_set_start_comment(
        f"{GENERATOR_NAME} project configuration.\n"
        + f"Run '{GENERATOR_NAME} synth' after editing this file."
    )
    data.yaml_set_comment_before_after_key(
        "tasks",
        before="Extra tasks: name -> {description, env, spawn}",
    )

    save_yaml_file(data, rc_path)
    print_success(f"Created {DEFAULT_RC_FILE}")
    return True
