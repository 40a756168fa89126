"""
CLI layer for railop.

Provides a Typer application for looking at operation definitions from
the terminal. All logic lives in ``railop.operation``; this package only
handles argument parsing and table formatting.

Entry point::

    railop --help
"""

from railop.cli.app import app

__all__ = ["app"]
