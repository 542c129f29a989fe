# filterview/config/__init__.py

"""
Configuration management for the FilterView application.

This package handles loading configuration from files (TOML),
environment variables, and internal defaults, providing a unified
configuration object.
"""

from .models import FilterViewConfig
from .loaders import load_configuration

__all__ = [
    "FilterViewConfig",
    "load_configuration",
]
