"""Index package names recorded in package-lock.json.

Two schema shapes are understood:

* ``lockfileVersion >= 2`` (npm 7+): a flat ``packages`` map keyed by install
  path, e.g. ``node_modules/a/node_modules/@scope/b``.
* ``lockfileVersion 1`` (npm 5/6): a nested ``dependencies`` tree.
"""

from __future__ import annotations

from typing import Any

import structlog

from optional_deps_validate.models import LockIndex

log = structlog.get_logger("optional_deps_validate.lockfile")

INSTALL_DIR_MARKER = "node_modules/"


def package_name_from_path(install_path: str) -> str:
    """Return the logical package name for a ``packages`` key.

    The name is whatever follows the last ``node_modules/`` so packages nested
    inside other packages' install trees resolve to their own name.
    """
    return install_path.rsplit(INSTALL_DIR_MARKER, 1)[-1]


def _names_from_packages(packages: dict[str, Any]) -> set[str]:
    # "" is the root project itself
    return {package_name_from_path(key) for key in packages if key}


def _names_from_dependencies(dependencies: dict[str, Any]) -> set[str]:
    names: set[str] = set()
    stack = [dependencies]
    while stack:
        current = stack.pop()
        for name, entry in current.items():
            names.add(name)
            if isinstance(entry, dict):
                nested = entry.get("dependencies")
                if isinstance(nested, dict) and nested:
                    stack.append(nested)
    return names


def _lockfile_version(raw: Any) -> float:
    """Numeric ``lockfileVersion``; missing, zero or non-numeric means 1."""
    if isinstance(raw, str):
        try:
            raw = float(raw)
        except ValueError:
            log.warning("lockfile.bad_version", lockfile_version=raw)
            return 1
    if not isinstance(raw, (int, float)):
        if raw is not None:
            log.warning("lockfile.bad_version", lockfile_version=raw)
        return 1
    return raw or 1


def build_lock_index(lock_document: dict[str, Any]) -> LockIndex:
    """Build the set of every package name recorded in *lock_document*.

    A document matching neither schema shape yields an empty index.
    """
    version = _lockfile_version(lock_document.get("lockfileVersion"))
    packages = lock_document.get("packages")
    dependencies = lock_document.get("dependencies")

    if version >= 2 and isinstance(packages, dict) and packages:
        names = _names_from_packages(packages)
        shape = "packages"
    elif isinstance(dependencies, dict) and dependencies:
        names = _names_from_dependencies(dependencies)
        shape = "dependencies"
    else:
        log.debug("lockfile.unrecognized_shape", lockfile_version=version)
        return frozenset()

    log.debug(
        "lockfile.indexed",
        lockfile_version=version,
        shape=shape,
        package_count=len(names),
    )
    return frozenset(names)
