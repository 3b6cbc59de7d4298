"""
End-to-end scaffold flow for a new Vite + React project.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from rich.console import Console

from ..config import ScaffoldConfig
from ..util import write_text_file
from . import commands
from .cleanup import cleanup_cli_files, remove_extra_dependency_dirs
from .manifest import ManifestError, merge_scripts
from .templates import render_project_files

console = Console()
logger = logging.getLogger(__name__)


class GeneratorError(RuntimeError):
    """Raised when the project generator command fails."""


@dataclass
class ScaffoldReport:
    """
    Stores what happened while scaffolding.

    Attributes:
        root: The project directory.
        directories_created: Newly created layout folders.
        files_written: Template files written.
        dependency_dirs_removed: Nested dependency directories deleted.
        cli_files_removed: Leftover CLI install entries removed from the working directory.
        failed_commands: Recoverable commands that exited unsuccessfully.
        scripts_merged: True if package.json received the extra scripts.
    """
    root: Path
    directories_created: List[Path] = field(default_factory=list)
    files_written: List[Path] = field(default_factory=list)
    dependency_dirs_removed: List[Path] = field(default_factory=list)
    cli_files_removed: List[str] = field(default_factory=list)
    failed_commands: List[str] = field(default_factory=list)
    scripts_merged: bool = False

    def summary_rows(self) -> Iterable[tuple[str, str]]:
        yield ("Project", str(self.root))
        yield ("Directories created", str(len(self.directories_created)))
        yield ("Files written", str(len(self.files_written)))
        yield ("Nested dependency dirs removed", str(len(self.dependency_dirs_removed)))
        yield ("CLI files removed", str(len(self.cli_files_removed)))
        yield ("package.json scripts", "merged" if self.scripts_merged else "unchanged")
        yield ("Failed commands", ", ".join(self.failed_commands) or "none")


def ensure_directory(path: Path, report: ScaffoldReport) -> None:
    """Create a directory if it doesn't exist and record the action."""
    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)
        report.directories_created.append(path)


def _clean_dependency_dirs(root: Path, config: ScaffoldConfig, report: ScaffoldReport) -> None:
    console.print("[yellow]Cleaning up extra dependency directories...[/]")
    removed = remove_extra_dependency_dirs(
        root,
        dependency_dirs=config.dependency_dirs,
        vcs_dirs=config.vcs_dirs,
    )
    for path in removed:
        console.print(f"   [red]Removed:[/] {path}")
    report.dependency_dirs_removed.extend(removed)


def write_project_files(root: Path, project_name: str, report: ScaffoldReport) -> None:
    """Write every template file under ``root``."""
    for relative, content in render_project_files(project_name).items():
        report.files_written.append(write_text_file(root / relative, content))


def create_project(
    folder: str,
    *,
    config: Optional[ScaffoldConfig] = None,
    working_dir: Optional[Path] = None,
) -> ScaffoldReport:
    """
    Generate, install and template a project in ``working_dir / folder``.

    Only a failing generator aborts the flow. Install, update, manifest and
    cleanup problems are logged and recorded on the report.

    Args:
        folder: Name of the project folder (must not exist yet).
        config: Scaffold settings; defaults to ScaffoldConfig().
        working_dir: Directory the project is created in; defaults to the cwd.

    Returns:
        A ScaffoldReport detailing the actions taken.

    Raises:
        GeneratorError: If the generator command fails.
    """
    config = config or ScaffoldConfig()
    working = (working_dir or Path.cwd()).resolve()
    root = working / folder
    report = ScaffoldReport(root=root)

    console.print(f"[green]Creating Vite React project in folder:[/] {folder}")
    if not commands.run_command(config.generator_command(folder), cwd=working):
        raise GeneratorError(f"Failed to create project {folder!r}")
    logger.info("Generator finished for %s", root)

    console.print("[blue]Installing dependencies...[/]")
    report.failed_commands.extend(commands.install_dependencies(root, config))
    _clean_dependency_dirs(root, config, report)

    console.print("[blue]Creating folder structure...[/]")
    for relative in config.folders:
        ensure_directory(root / relative, report)

    console.print("[blue]Setting up project files...[/]")
    write_project_files(root, folder, report)

    console.print("[blue]Updating package.json...[/]")
    try:
        merge_scripts(root / "package.json", config.scripts)
    except ManifestError as exc:
        logger.warning("Skipping package.json update: %s", exc)
    else:
        report.scripts_merged = True

    _clean_dependency_dirs(root, config, report)
    console.print("[yellow]Cleaning CLI installation files...[/]")
    report.cli_files_removed.extend(cleanup_cli_files(working, root, config.cli_files))

    if config.update_packages:
        console.print("[blue]Updating packages to latest versions...[/]")
        report.failed_commands.extend(commands.update_packages(root, config))

    logger.info("Scaffold finished for %s", root)
    return report
