#!/usr/bin/env python3
"""
Configuration access for the CareerMatch web application.
"""

from pathlib import Path
from functools import lru_cache

from core.config_loader import AppConfig, load_config


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads config.yaml from the project root and applies environment
    variable overrides (see core.config_loader).
    """
    return load_config(str(get_project_root() / 'config.yaml'))
