"""Shared pytest fixtures for optional-deps-validate tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import structlog


def _write_package(
    modules_dir: Path,
    install_path: str,
    name: str | None = None,
    optional: dict[str, str] | None = None,
) -> Path:
    package_dir = modules_dir / install_path
    package_dir.mkdir(parents=True, exist_ok=True)
    metadata: dict = {"version": "1.0.0"}
    if name is not None:
        metadata["name"] = name
    if optional is not None:
        metadata["optionalDependencies"] = optional
    (package_dir / "package.json").write_text(json.dumps(metadata))
    return package_dir


def _write_lockfile(project_dir: Path, names: list[str], version: int = 3) -> Path:
    packages: dict = {"": {"name": "app", "version": "1.0.0"}}
    for name in names:
        packages[f"node_modules/{name}"] = {"version": "1.0.0"}
    lock_path = project_dir / "package-lock.json"
    lock_path.write_text(
        json.dumps({"name": "app", "lockfileVersion": version, "packages": packages})
    )
    return lock_path


@pytest.fixture
def make_package():
    """``make_package(modules_dir, "a/node_modules/@s/b", name=..., optional=...)``."""
    return _write_package


@pytest.fixture
def make_lockfile():
    """``make_lockfile(project_dir, ["a", "@s/b"])`` writes a v3 package-lock.json."""
    return _write_lockfile


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """An empty project directory with an empty node_modules/."""
    (tmp_path / "node_modules").mkdir()
    return tmp_path


@pytest.fixture
def modules_dir(project: Path) -> Path:
    return project / "node_modules"


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()
