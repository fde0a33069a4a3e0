"""Walk node_modules and collect the optional dependencies of every package."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

import structlog

from optional_deps_validate.exceptions import DirectoryReadError
from optional_deps_validate.loader import load_json_object
from optional_deps_validate.models import PackageObservation, PackageOptionalDepsMap

log = structlog.get_logger("optional_deps_validate.installed")

MODULES_DIRNAME = "node_modules"
METADATA_FILENAME = "package.json"


def _child_dirs(directory: Path, *, skip_hidden: bool) -> list[Path]:
    """Real (non-symlink) subdirectories of *directory*, sorted by name."""
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        raise DirectoryReadError(directory, str(e)) from e

    children = []
    for child in entries:
        if skip_hidden and child.name.startswith("."):
            continue
        if child.is_symlink() or not child.is_dir():
            continue
        children.append(child)
    return children


def iter_package_dirs(modules_dir: Path) -> Iterator[Path]:
    """Yield every candidate package directory under *modules_dir*.

    ``@scope`` directories are containers: their immediate subdirectories are
    the packages. Each package's own ``node_modules`` is visited as well.
    A missing *modules_dir* yields nothing.
    """
    stack = [modules_dir]
    while stack:
        current = stack.pop()
        if not current.is_dir():
            continue

        for entry in _child_dirs(current, skip_hidden=True):
            if entry.name.startswith("@"):
                candidates = _child_dirs(entry, skip_hidden=False)
            else:
                candidates = [entry]

            for package_dir in candidates:
                yield package_dir
                stack.append(package_dir / MODULES_DIRNAME)


def read_package(package_dir: Path) -> PackageObservation | None:
    """Read ``package.json`` in *package_dir*.

    Returns ``None`` when the directory has no metadata file.
    """
    metadata_path = package_dir / METADATA_FILENAME
    if not metadata_path.is_file():
        return None

    metadata = load_json_object(metadata_path)
    name = metadata.get("name")
    if not name or not isinstance(name, str):
        name = package_dir.name

    optional = metadata.get("optionalDependencies") or {}
    if not isinstance(optional, dict):
        log.warning(
            "installed.bad_optional_dependencies",
            path=str(metadata_path),
            value_type=type(optional).__name__,
        )
        optional = {}

    return PackageObservation(
        name=name,
        optional_dependencies=frozenset(optional),
        path=package_dir,
    )


def iter_package_observations(modules_dir: Path) -> Iterator[PackageObservation]:
    """Yield one observation per installed package that has metadata."""
    for package_dir in iter_package_dirs(modules_dir):
        observation = read_package(package_dir)
        if observation is None:
            log.debug("installed.no_metadata", path=str(package_dir))
            continue
        log.debug(
            "installed.package",
            package=observation.name,
            optional_count=len(observation.optional_dependencies),
        )
        yield observation


def merge_observations(
    observations: Iterable[PackageObservation],
) -> PackageOptionalDepsMap:
    """Fold observations into one entry per package name.

    The same name installed at several locations gets the union of their
    optional dependencies.
    """
    merged: PackageOptionalDepsMap = {}
    for observation in observations:
        merged.setdefault(observation.name, set()).update(
            observation.optional_dependencies
        )
    return merged


def scan_installed_packages(modules_dir: Path) -> PackageOptionalDepsMap:
    """Map every installed package name to its declared optional dependencies."""
    return merge_observations(iter_package_observations(modules_dir))
