"""
Removal of stray dependency directories and leftover CLI install files.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from ..util import remove_path

logger = logging.getLogger(__name__)


def remove_extra_dependency_dirs(
    root: Path | str,
    *,
    dependency_dirs: Iterable[str] = ("node_modules",),
    vcs_dirs: Iterable[str] = (".git",),
) -> List[Path]:
    """
    Delete every dependency directory below ``root`` except ``root``'s own.

    The walk is depth first and never enters a dependency directory (kept or
    removed) or a version-control directory. Symlinks are never followed; a
    symlink carrying a dependency-directory name is unlinked unless it resolves
    to ``root``'s own dependency directory.
    Errors while listing or deleting a subtree are logged and the walk carries
    on with the next sibling.

    Args:
        root: Project directory.
        dependency_dirs: Reserved dependency-cache directory names.
        vcs_dirs: Version-control metadata directory names.

    Returns:
        The directories that were removed.
    """
    base = Path(root).resolve()
    reserved = frozenset(dependency_dirs)
    skipped = frozenset(vcs_dirs)
    keep = {(base / name).resolve() for name in reserved}
    removed: List[Path] = []

    def _remove(entry: Path) -> None:
        remove_path(entry)
        removed.append(entry)
        logger.info("Removed nested dependency directory %s", entry)

    def walk(directory: Path) -> None:
        try:
            entries = list(directory.iterdir())
        except OSError as exc:
            logger.debug("Skipping unreadable directory %s: %s", directory, exc)
            return

        for entry in entries:
            try:
                if entry.is_symlink():
                    # never followed; a reserved link is unlinked, its target kept
                    if entry.name in reserved and entry.resolve() not in keep:
                        _remove(entry)
                    continue
                if not entry.is_dir():
                    continue
                if entry.name in reserved:
                    if entry.resolve() in keep:
                        continue
                    _remove(entry)
                elif entry.name not in skipped:
                    walk(entry)
            except OSError as exc:
                logger.debug("Skipping %s: %s", entry, exc)

    walk(base)
    return removed


def cleanup_cli_files(working_dir: Path | str, project_dir: Path | str, names: Iterable[str]) -> List[str]:
    """
    Remove files a local CLI install left in the invoking directory.

    Nothing happens when the invoking directory is the project itself.

    Returns:
        Names of the entries that were removed.
    """
    working = Path(working_dir).resolve()
    if working == Path(project_dir).resolve():
        logger.info("Skipping CLI cleanup (same directory)")
        return []

    removed: List[str] = []
    for name in names:
        target = working / name
        try:
            if remove_path(target):
                removed.append(name)
        except OSError as exc:
            logger.warning("Could not remove %s: %s", target, exc)
    return removed
