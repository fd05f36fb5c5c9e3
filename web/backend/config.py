#!/usr/bin/env python3
"""
Configuration management for the Nestara web application.

Wraps the shared YAML/env loader and the rubric definition with caching so
each request sees the same configuration.
"""

from pathlib import Path
from functools import lru_cache

from core.config_loader import AppConfig, load_config
from core.vetting.models import Rubric
from core.vetting.rubric import load_rubric


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Loads config.yaml from the project root and applies environment
    variable overrides.

    Returns:
        AppConfig: The application configuration.
    """
    return load_config(str(get_project_root() / 'config.yaml'))


@lru_cache()
def get_rubric() -> Rubric:
    """Vetting rubric named by `vetting.rubric_file`, loaded once."""
    rubric_file = Path(get_config().vetting.rubric_file)
    if not rubric_file.is_absolute():
        rubric_file = get_project_root() / rubric_file
    return load_rubric(str(rubric_file))
