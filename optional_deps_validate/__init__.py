"""optional-deps-validate: find optional dependencies missing from package-lock.json."""

__version__ = "0.1.0"

from optional_deps_validate.auditor import AuditConfig, check_preconditions, run_audit
from optional_deps_validate.comparator import compare
from optional_deps_validate.exceptions import (
    DirectoryReadError,
    ManifestLoadError,
    MissingLockfileError,
    MissingModulesDirError,
    OptionalDepsError,
    PreconditionError,
)
from optional_deps_validate.installed import (
    iter_package_dirs,
    iter_package_observations,
    merge_observations,
    read_package,
    scan_installed_packages,
)
from optional_deps_validate.loader import load_json, load_json_object
from optional_deps_validate.lockfile import build_lock_index
from optional_deps_validate.models import (
    AuditResult,
    MissingOptionalDependency,
    PackageObservation,
)

__all__ = [
    "AuditConfig",
    "AuditResult",
    "DirectoryReadError",
    "ManifestLoadError",
    "MissingLockfileError",
    "MissingModulesDirError",
    "MissingOptionalDependency",
    "OptionalDepsError",
    "PackageObservation",
    "PreconditionError",
    "build_lock_index",
    "check_preconditions",
    "compare",
    "iter_package_dirs",
    "iter_package_observations",
    "load_json",
    "load_json_object",
    "merge_observations",
    "read_package",
    "run_audit",
    "scan_installed_packages",
]
