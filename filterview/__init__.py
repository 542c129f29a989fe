# filterview/__init__.py

"""
FilterView: streaming FIR filtering and centered spectrum analysis.
"""

from .version import __version__

__all__ = ["__version__"]
