"""
Environment settings loading helpers.
"""

from __future__ import annotations

import os
from pathlib import Path
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field
from dotenv import load_dotenv


def _load_dotenv() -> None:
    cwd_env = Path.cwd() / ".env"
    if cwd_env.exists():
        load_dotenv(dotenv_path=cwd_env, override=True)


_load_dotenv()


class Settings(BaseModel):
    """
    Container for react-instant options read from environment variables.

    Attributes:
        config_path: TOML config used when ``--config`` is not given.
        default_folder: Overrides the fallback project folder name.
    """
    config_path: Optional[Path] = Field(default=None, alias="REACT_INSTANT_CONFIG")
    default_folder: Optional[str] = Field(default=None, alias="REACT_INSTANT_DEFAULT_FOLDER")

    model_config = {
        "populate_by_name": True,
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Load settings from environment/.env exactly once.
    """
    values = {field.alias: os.getenv(field.alias) or None for field in Settings.model_fields.values()}
    return Settings(**values)
