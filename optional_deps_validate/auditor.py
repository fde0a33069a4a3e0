"""Audit pipeline: precondition checks, then load -> index -> scan -> compare."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import structlog

from optional_deps_validate.comparator import MissingHandler, compare
from optional_deps_validate.exceptions import MissingLockfileError, MissingModulesDirError
from optional_deps_validate.installed import MODULES_DIRNAME, scan_installed_packages
from optional_deps_validate.loader import load_json_object
from optional_deps_validate.lockfile import build_lock_index
from optional_deps_validate.models import AuditResult

log = structlog.get_logger("optional_deps_validate.auditor")

LOCKFILE_NAME = "package-lock.json"


@dataclass(frozen=True)
class AuditConfig:
    """Where to find the inputs of one audit run."""

    project_dir: Path

    @property
    def lock_path(self) -> Path:
        return self.project_dir / LOCKFILE_NAME

    @property
    def modules_path(self) -> Path:
        return self.project_dir / MODULES_DIRNAME


def check_preconditions(config: AuditConfig) -> None:
    """Raise a :class:`PreconditionError` subclass if an input is missing."""
    if not config.lock_path.exists():
        raise MissingLockfileError(config.lock_path)
    if not config.modules_path.exists():
        raise MissingModulesDirError(config.modules_path)


def run_audit(config: AuditConfig, on_missing: MissingHandler | None = None) -> AuditResult:
    """Run a full audit of *config.project_dir*.

    Fatal problems raise :class:`OptionalDepsError` subclasses; missing
    optional dependencies are reported through the returned result and
    *on_missing*.
    """
    check_preconditions(config)

    lock_index = build_lock_index(load_json_object(config.lock_path))
    optional_deps = scan_installed_packages(config.modules_path)
    result = compare(optional_deps, lock_index, on_missing)

    log.info(
        "audit.complete",
        project_dir=str(config.project_dir),
        locked_packages=len(lock_index),
        installed_packages=result.packages_checked,
        optional_dependencies=result.dependencies_checked,
        missing=len(result.missing),
    )
    return result
