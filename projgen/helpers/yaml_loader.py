"""Comment-preserving YAML writer (ruamel.yaml) for files users edit by hand."""

from pathlib import Path
from typing import Any

from ruamel.yaml import YAML


def _create_yaml() -> YAML:
    yaml_obj = YAML()
    yaml_obj.preserve_quotes = True
    yaml_obj.default_flow_style = False
    yaml_obj.indent(mapping=2, sequence=4, offset=2)
    return yaml_obj


yaml = _create_yaml()


def save_yaml_file(data: Any, file_path: Path) -> None:
    """Save data to a YAML file with comment preservation."""
    file_path.parent.mkdir(parents=True, exist_ok=True)

    with file_path.open("w", encoding="utf-8") as f:
        yaml.dump(data, f)
