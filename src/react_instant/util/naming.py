"""
Helpers for picking a project folder name that does not clash with existing entries.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..config.models import DEFAULT_FOLDER


@dataclass(frozen=True)
class FolderChoice:
    """
    Outcome of folder-name resolution.

    Attributes:
        name: The unused folder name to create.
        requested: The base name after trimming/defaulting.
        conflicted: True when a numeric suffix had to be appended.
    """
    name: str
    requested: str

    @property
    def conflicted(self) -> bool:
        return self.name != self.requested


def _taken(path: Path) -> bool:
    # broken symlinks still occupy the name
    return path.exists() or path.is_symlink()


def resolve_folder_name(
    raw: Optional[str],
    *,
    default: str = DEFAULT_FOLDER,
    base_dir: Path | str | None = None,
) -> FolderChoice:
    """
    Turn user input into a folder name that does not exist under ``base_dir``.

    Empty or whitespace-only input falls back to ``default``. While the candidate
    exists, ``-1``, ``-2``, ... is appended to the base name (never stacked).
    """
    base = (raw or "").strip() or default
    parent = Path(base_dir) if base_dir is not None else Path.cwd()

    candidate = base
    counter = 1
    while _taken(parent / candidate):
        candidate = f"{base}-{counter}"
        counter += 1
    return FolderChoice(name=candidate, requested=base)
