"""
Command line interface for the react-instant scaffolder and reference browser.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from . import __version__
from .config import ConfigError, ScaffoldConfig, get_settings, load_config
from .reference import CatalogError, ReferenceCatalog, browse, load_builtin_catalog, load_catalog_file, render_catalog
from .scaffold import GeneratorError, ScaffoldReport, create_project
from .scaffold.commands import start_dev_server
from .util import resolve_folder_name

console = Console()
app = typer.Typer(help="Scaffold a Vite + React + Tailwind project and browse quick references.")
logger = logging.getLogger(__name__)

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def _configure_logging(level_name: str) -> None:
    env_override = os.getenv("REACT_INSTANT_LOG_LEVEL")
    level_str = (env_override or level_name or "warning").upper()
    if level_str not in {lvl.upper() for lvl in LOG_LEVELS}:
        level_str = "INFO"
    logging.basicConfig(
        level=getattr(logging, level_str, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    logger.debug("Logging configured at %s", level_str)


def _resolve_config_path(value: Optional[Path]) -> Optional[Path]:
    """Ensure an explicit config path exists and return the absolute path."""
    if value is None:
        return None
    resolved = value.expanduser().resolve()
    if not resolved.exists():
        raise typer.BadParameter(f"No config file found at {resolved}")
    if not resolved.is_file():
        raise typer.BadParameter(f"Config path must be a file, got directory: {resolved}")
    return resolved


def _load_config_or_exit(path: Optional[Path]) -> ScaffoldConfig:
    settings = get_settings()
    path = path or settings.config_path
    try:
        config = load_config(path) if path else ScaffoldConfig()
    except ConfigError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=1) from exc
    if settings.default_folder:
        config = config.model_copy(update={"default_folder": settings.default_folder.strip() or config.default_folder})
    return config


def _load_catalog_or_exit(name: str, path: Optional[Path]) -> ReferenceCatalog:
    try:
        return load_catalog_file(path) if path else load_builtin_catalog(name)
    except CatalogError as exc:
        console.print(f"[bold red]Catalog error:[/] {exc}")
        raise typer.Exit(code=1) from exc


def _print_scaffold_report(report: ScaffoldReport) -> None:
    table = Table(title="Scaffold Summary")
    table.add_column("Key")
    table.add_column("Value", overflow="fold")
    for key, value in report.summary_rows():
        table.add_row(key, value)
    console.print(table)


@app.callback(invoke_without_command=True)
def _root_command(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show react-instant version and exit.",
        is_flag=True,
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Logging level (critical, error, warning, info, debug).",
        show_default=True,
        case_sensitive=False,
    ),
) -> None:
    """
    Default command when no subcommand is selected.

    Runs `create` with its defaults so a bare `react-instant` starts the setup.
    """
    _configure_logging(log_level)

    if version:
        console.print(f"[bold green]react-instant[/] {__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        create(name=None, config=None, dev_server=None, update=None)


@app.command()
def create(
    name: Optional[str] = typer.Option(
        None,
        "--name",
        "-n",
        help="Project folder name (prompted for when omitted).",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a TOML file overriding scaffold defaults.",
        callback=_resolve_config_path,
    ),
    dev_server: Optional[bool] = typer.Option(
        None,
        "--dev-server/--no-dev-server",
        help="Start the dev server when setup finishes (default from config).",
        show_default=False,
    ),
    update: Optional[bool] = typer.Option(
        None,
        "--update/--no-update",
        help="Update packages to their latest versions (default from config).",
        show_default=False,
    ),
) -> None:
    """
    Create a Vite + React project, install packages, write templates and start the dev server.
    """
    scaffold_config = _load_config_or_exit(config)
    overrides = {}
    if dev_server is not None:
        overrides["start_dev_server"] = dev_server
    if update is not None:
        overrides["update_packages"] = update
    if overrides:
        scaffold_config = scaffold_config.model_copy(update=overrides)

    console.rule("[bold cyan]React Instant - Vite + React setup[/]")
    if name is None:
        try:
            name = Prompt.ask(
                f"[cyan]Enter folder name for your Vite React project[/] (default: {scaffold_config.default_folder})",
                default="",
                show_default=False,
                console=console,
            )
        except EOFError:
            # closed stdin reads as an empty answer
            name = ""
    working_dir = Path.cwd()
    leftovers = [entry for entry in scaffold_config.cli_files if (working_dir / entry).exists()]
    if leftovers:
        console.print(
            f"[yellow]Warning:[/] {', '.join(leftovers)} in {working_dir} will be removed after setup "
            "(set cli_files = [] in the config to keep them)."
        )
    choice = resolve_folder_name(name, default=scaffold_config.default_folder, base_dir=working_dir)
    if choice.conflicted:
        console.print(f"[yellow]Folder {choice.requested!r} exists. Using {choice.name!r} instead.[/]")

    logger.info("Scaffolding %s in %s", choice.name, working_dir)
    try:
        report = create_project(choice.name, config=scaffold_config, working_dir=working_dir)
    except GeneratorError as exc:
        console.print(f"[bold red]Failed to create Vite project:[/] {exc}")
        raise typer.Exit(code=1) from exc

    _print_scaffold_report(report)
    console.print("[bold green]Setup completed successfully![/]")

    if scaffold_config.start_dev_server:
        console.print("[blue]Starting development server...[/]")
        start_dev_server(report.root, scaffold_config)
    else:
        console.print(f"Next: [cyan]cd {choice.name} && {scaffold_config.package_manager} run dev[/]")


@app.command()
def chapters(
    catalog: Optional[Path] = typer.Option(
        None,
        "--catalog",
        help="Browse a custom catalog TOML file instead of the JavaScript chapters.",
    ),
) -> None:
    """
    Browse JavaScript chapter tables interactively.
    """
    reference = _load_catalog_or_exit("js_chapters", catalog)
    browse(console, reference)


@app.command("git-commands")
def git_commands(
    interactive: bool = typer.Option(
        False,
        "--interactive",
        "-i",
        help="Pick categories from a menu instead of printing everything.",
    ),
) -> None:
    """
    Print the Git command reference tables.
    """
    reference = _load_catalog_or_exit("git_commands", None)
    if interactive:
        browse(console, reference)
    else:
        render_catalog(console, reference)


def main() -> None:
    """
    Entry-point used by the `react-instant` console script defined in pyproject.toml.
    """
    app()


def chapters_main() -> None:
    """Entry-point for the standalone `js-chapters` console script."""
    _configure_logging("warning")
    typer.run(chapters)


def git_helper_main() -> None:
    """Entry-point for the standalone `git-helper` console script."""
    _configure_logging("warning")
    typer.run(git_commands)
