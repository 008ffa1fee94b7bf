"""
typedconf CLI Package.

This package contains the command-line interface for inspecting properties
files and checking duration strings.
"""

from .cli import app, cli_main

__all__ = ["app", "cli_main"]
