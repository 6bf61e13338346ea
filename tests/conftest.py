"""Shared fixtures for the projgen test suite.

Every test runs with the PROJGEN_* environment switches cleared, so the
ejected/debug state never leaks in from the shell running pytest.

``make_project`` is a factory for projects synthesized into ``tmp_path``;
``write_rc`` writes a ``.projgenrc.yaml`` and returns its path.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from projgen.config import DEBUG_ENV_VAR, DEFAULT_RC_FILE, EJECTING_ENV_VAR
from projgen.core.project import ProjectModel, ProjectOptions

MakeProject = Callable[..., ProjectModel]
WriteRc = Callable[[str], Path]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(EJECTING_ENV_VAR, raising=False)
    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)


@pytest.fixture()
def make_project(tmp_path: Path) -> MakeProject:
    """Return a factory building a ``ProjectModel`` rooted at ``tmp_path``.

    Usage::

        project = make_project(ejected=True, deps=["requests@2.31"])
    """

    def _make(**overrides: Any) -> ProjectModel:
        options: dict[str, Any] = {"name": "demo", "outdir": tmp_path, "ejected": False}
        options.update(overrides)
        return ProjectModel(ProjectOptions(**options))

    return _make


@pytest.fixture()
def project(make_project: MakeProject) -> ProjectModel:
    """A normal (not ejected) project with default options."""
    return make_project()


@pytest.fixture()
def ejected_project(make_project: MakeProject) -> ProjectModel:
    """A project built in ejected mode."""
    return make_project(ejected=True)


@pytest.fixture()
def write_rc(tmp_path: Path) -> WriteRc:
    """Return a helper writing ``.projgenrc.yaml`` content into ``tmp_path``."""

    def _write(content: str) -> Path:
        rc_path = tmp_path / DEFAULT_RC_FILE
        rc_path.write_text(content, encoding="utf-8")
        return rc_path

    return _write
