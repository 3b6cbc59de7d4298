"""
Pydantic models for validating scaffolder configuration files.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict, List

from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_FOLDER = "my-vite-app"


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


class ScaffoldConfig(BaseModel):
    """
    Every tunable value of the scaffold flow.

    Attributes:
        default_folder: Folder name used when the prompt is left empty.
        generator: Command that creates the base project (folder name is appended).
        template: Template selector passed to the generator.
        package_manager: Executable used for installs, scripts and the dev server.
        lockfile: File whose presence enables the reproducible install mode.
        extra_packages: Runtime packages installed after the base install.
        dependency_dirs: Reserved dependency-cache directory names.
        vcs_dirs: Version-control metadata directory names never traversed.
        folders: Project-relative directories created after installation.
        scripts: Entries merged into the ``scripts`` key of package.json.
        cli_files: Leftovers of a local CLI install removed from the invoking directory.
        update_packages: Run npm-check-updates and reinstall after scaffolding.
        start_dev_server: Launch the dev server as the final step.
    """
    default_folder: str = DEFAULT_FOLDER
    generator: List[str] = Field(default_factory=lambda: ["npm", "create", "vite@latest"])
    template: str = "react"
    package_manager: str = "npm"
    lockfile: str = "package-lock.json"
    extra_packages: List[str] = Field(
        default_factory=lambda: ["axios", "react-router-dom", "tailwindcss", "@tailwindcss/vite"]
    )
    dependency_dirs: List[str] = Field(default_factory=lambda: ["node_modules"])
    vcs_dirs: List[str] = Field(default_factory=lambda: [".git"])
    folders: List[str] = Field(
        default_factory=lambda: [
            "src/components/ui",
            "src/components/layout",
            "src/pages",
            "src/hooks",
            "src/services",
            "src/utils",
            "src/context",
            "src/assets/images",
            "src/assets/icons",
            "src/styles",
            "public",
        ]
    )
    scripts: Dict[str, str] = Field(
        default_factory=lambda: {
            "build": "vite build",
            "preview": "vite preview",
            "lint": "eslint . --ext js,jsx --report-unused-disable-directives --max-warnings 0",
        }
    )
    cli_files: List[str] = Field(
        default_factory=lambda: [
            "node_modules",
            "package.json",
            "package-lock.json",
            ".npm",
            "npm-debug.log",
            ".npmrc",
        ]
    )
    update_packages: bool = True
    start_dev_server: bool = True

    model_config = {
        "extra": "forbid",
    }

    @field_validator("generator", "dependency_dirs")
    @classmethod
    def _require_entries(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("must contain at least one entry")
        return value

    @field_validator("default_folder", "template", "package_manager")
    @classmethod
    def _require_text(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value

    def generator_command(self, folder: str) -> List[str]:
        """Full generator invocation for ``folder``."""
        return [*self.generator, folder, "--", "--template", self.template]


def load_config(path: Path | str) -> ScaffoldConfig:
    """
    Load and validate a TOML config file into a ScaffoldConfig instance.

    Args:
        path: Path to the TOML configuration file.

    Returns:
        A validated ScaffoldConfig object.

    Raises:
        ConfigError: If the file is missing, unreadable, or invalid.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with config_path.open("rb") as handle:
            raw_data: Dict[str, Any] = tomllib.load(handle)
    except OSError as exc:
        raise ConfigError(f"Unable to read configuration file: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in configuration file: {exc}") from exc

    try:
        return ScaffoldConfig.model_validate(raw_data)
    except ValidationError as exc:
        raise ConfigError(str(exc)) from exc
