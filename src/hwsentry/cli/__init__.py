"""
Command-line interface for the hwsentry package.

This module provides the main CLI entry point and the console summary.
"""

from .main import main_cli

__all__ = [
    "main_cli",
]
