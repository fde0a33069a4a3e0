"""JSON file loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from optional_deps_validate.exceptions import ManifestLoadError


def load_json(path: Path) -> Any:
    """Read *path* as UTF-8 and parse it as JSON.

    Raises :class:`ManifestLoadError` on any read or parse failure.
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestLoadError(path, str(e)) from e

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ManifestLoadError(path, str(e)) from e


def load_json_object(path: Path) -> dict[str, Any]:
    """Like :func:`load_json`, but the document must be a JSON object."""
    data = load_json(path)
    if not isinstance(data, dict):
        raise ManifestLoadError(
            path, f"expected a JSON object, got {type(data).__name__}"
        )
    return data
