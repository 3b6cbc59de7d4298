"""
Configuration helpers for the react-instant scaffolder.
"""

from .models import ConfigError, ScaffoldConfig, load_config
from .settings import Settings, get_settings

__all__ = ["ConfigError", "ScaffoldConfig", "load_config", "Settings", "get_settings"]
