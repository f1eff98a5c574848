"""
CLI package for fullname_parser.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from fullname_parser.cli.app import app, main

__all__ = [
    "app",
    "main",
]
