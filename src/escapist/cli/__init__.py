"""Command-line interface module for escapist.

This module provides the ``escapist escape`` and ``escapist unescape``
commands with JSON profile loading and streaming output.
"""

from .main import main

__all__ = ["main"]
