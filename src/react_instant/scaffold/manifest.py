"""
In-place edits of the generated package.json.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping

from ..util import write_text_file


class ManifestError(RuntimeError):
    """Raised when package.json is missing or not a JSON object."""


def merge_scripts(package_json: Path | str, scripts: Mapping[str, str]) -> Dict[str, Any]:
    """
    Merge ``scripts`` into the ``scripts`` key of a package.json file.

    Same-named scripts are overwritten; every other key is preserved.

    Returns:
        The manifest as written.
    """
    path = Path(package_json)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ManifestError(f"No package.json found at {path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise ManifestError(f"Unable to read {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object")
    existing = data.get("scripts") or {}
    if not isinstance(existing, dict):
        raise ManifestError(f"'scripts' in {path} must be an object")

    data["scripts"] = {**existing, **scripts}
    write_text_file(path, json.dumps(data, indent=2, ensure_ascii=False) + "\n")
    return data
