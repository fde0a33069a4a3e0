"""Compare installed optional dependencies against the lock index."""

from __future__ import annotations

from collections.abc import Callable

from optional_deps_validate.models import (
    AuditResult,
    LockIndex,
    MissingOptionalDependency,
    PackageOptionalDepsMap,
)

MissingHandler = Callable[[MissingOptionalDependency], None]


def compare(
    optional_deps: PackageOptionalDepsMap,
    lock_index: LockIndex,
    on_missing: MissingHandler | None = None,
) -> AuditResult:
    """Find every declared optional dependency that the lock index lacks.

    *on_missing* is called for each finding as soon as it is found.
    """
    result = AuditResult(packages_checked=len(optional_deps))
    for package in sorted(optional_deps):
        for dependency in sorted(optional_deps[package]):
            result.dependencies_checked += 1
            if dependency in lock_index:
                continue
            finding = MissingOptionalDependency(package=package, dependency=dependency)
            result.missing.append(finding)
            if on_missing is not None:
                on_missing(finding)
    return result
