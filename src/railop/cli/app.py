"""
Root Typer application for the railop CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

from railop.cli.utils import load_operation, output_description

app = Typer(
    name="railop",
    help="railop — inspect Railway-style operations.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from railop import __version__

        typer.echo(f"railop {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(  # noqa: UP007
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """railop CLI — inspect operation definitions."""


# ── Commands ─────────────────────────────────────────────────────────────


@app.command("inspect")
def inspect_operation(
    target: str = typer.Argument(..., help="Operation as MODULE:CLASS"),
    json_out: bool = typer.Option(False, "--json"),
) -> None:
    """Show an operation's steps, params transform, hooks and options."""
    operation_cls = load_operation(target)
    output_description(operation_cls.describe(), as_json=json_out)


if __name__ == "__main__":  # pragma: no cover
    app()
