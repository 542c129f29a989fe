# filterview/utils/__init__.py

"""
Utilities: logging setup and plot export.
"""
