# filterview/cli/__init__.py

"""
Command-line interface for FilterView.
"""

from .main import cli

__all__ = ["cli"]
