"""Data models for the optional dependency audit."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

# Names of every package recorded in package-lock.json.
LockIndex = frozenset[str]

# Declaring package name -> names of its optional dependencies.
PackageOptionalDepsMap = dict[str, set[str]]


@dataclass(frozen=True)
class PackageObservation:
    """A single installed package found while walking node_modules."""

    name: str
    optional_dependencies: frozenset[str]
    path: Path


@dataclass(frozen=True)
class MissingOptionalDependency:
    """An optional dependency declared by *package* but absent from the lockfile."""

    package: str
    dependency: str


@dataclass
class AuditResult:
    """Outcome of comparing installed optional dependencies to the lock index."""

    missing: list[MissingOptionalDependency] = field(default_factory=list)
    packages_checked: int = 0
    dependencies_checked: int = 0

    @property
    def ok(self) -> bool:
        return not self.missing
