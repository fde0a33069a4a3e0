"""Custom exceptions for optional-deps-validate."""

from __future__ import annotations

from pathlib import Path


class OptionalDepsError(Exception):
    """Base exception for all fatal audit errors."""


class PreconditionError(OptionalDepsError):
    """Raised when a required input is missing from the project directory."""

    def __init__(self, path: Path, message: str):
        self.path = path
        super().__init__(message)


class MissingLockfileError(PreconditionError):
    """Raised when package-lock.json does not exist."""

    def __init__(self, path: Path):
        super().__init__(path, f"No {path.name} found in {path.parent}.")


class MissingModulesDirError(PreconditionError):
    """Raised when the node_modules/ directory does not exist."""

    def __init__(self, path: Path):
        super().__init__(
            path,
            f"No {path.name}/ directory found in {path.parent}. Please run npm install first.",
        )


class ManifestLoadError(OptionalDepsError):
    """Raised when a JSON manifest cannot be read or parsed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read or parse JSON file: {path}: {reason}")


class DirectoryReadError(OptionalDepsError):
    """Raised when a directory under node_modules/ cannot be listed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read directory: {path}: {reason}")
