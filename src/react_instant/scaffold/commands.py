"""
Blocking wrappers around the package-manager and generator subprocesses.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from typing import List, Optional, Sequence

from rich.console import Console

from ..config import ScaffoldConfig

console = Console()
logger = logging.getLogger(__name__)


def format_command(args: Sequence[str]) -> str:
    return shlex.join(args)


def run_command(args: Sequence[str], *, cwd: Optional[Path] = None) -> bool:
    """
    Run one command with the terminal attached and wait for it to exit.

    Returns:
        True on exit code 0, False on a non-zero exit or when the process
        could not be started.
    """
    command = format_command(args)
    console.print(f"[blue]Running:[/] {command}")
    logger.debug("Executing %s in %s", command, cwd or Path.cwd())
    try:
        subprocess.run(list(args), cwd=str(cwd) if cwd else None, check=True)
    except FileNotFoundError:
        logger.error("Command not found: %s", args[0])
        console.print(f"[bold red]Error:[/] {args[0]} not found on PATH")
        return False
    except OSError as exc:
        logger.error("Could not start %s: %s", command, exc)
        console.print(f"[bold red]Error:[/] could not run {command}: {exc}")
        return False
    except subprocess.CalledProcessError as exc:
        logger.error("Command failed with exit code %s: %s", exc.returncode, command)
        console.print(f"[bold red]Error:[/] {command} exited with code {exc.returncode}")
        return False
    return True


def install_dependencies(project_dir: Path, config: ScaffoldConfig) -> List[str]:
    """
    Install the generated project's dependencies plus the extra runtime packages.

    Uses ``npm ci`` when a lockfile is present, ``npm install`` otherwise.

    Returns:
        The commands that failed, formatted for display.
    """
    failed: List[str] = []
    pm = config.package_manager
    if (project_dir / config.lockfile).exists():
        base_install = [pm, "ci"]
    else:
        base_install = [pm, "install"]
    if not run_command(base_install, cwd=project_dir):
        failed.append(format_command(base_install))

    if config.extra_packages:
        console.print("[blue]Installing additional packages...[/]")
        extra_install = [pm, "install", *config.extra_packages, "--silent"]
        if not run_command(extra_install, cwd=project_dir):
            failed.append(format_command(extra_install))
    return failed


def update_packages(project_dir: Path, config: ScaffoldConfig) -> List[str]:
    """Bump dependencies to their latest versions and reinstall."""
    failed: List[str] = []
    for args in (
        ["npx", "npm-check-updates", "-u", "--silent"],
        [config.package_manager, "install", "--silent"],
    ):
        if not run_command(args, cwd=project_dir):
            failed.append(format_command(args))
    if failed:
        logger.warning("Package update incomplete; keeping installed versions")
    return failed


def start_dev_server(project_dir: Path, config: ScaffoldConfig) -> bool:
    """
    Start the dev server and block until it exits.

    A terminal interrupt stops the server and counts as a normal exit.
    """
    try:
        return run_command([config.package_manager, "run", "dev"], cwd=project_dir)
    except KeyboardInterrupt:
        console.print("\n[cyan]Development server stopped.[/]")
        return True
