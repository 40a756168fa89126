"""
CLI utility helpers — target loading and output formatting.
"""

from __future__ import annotations

import importlib
import json
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def load_operation(target: str) -> Any:
    """Import ``package.module:ClassName`` and return the Operation subclass."""
    from railop.operation import Operation

    module_name, sep, attr_path = target.partition(":")
    if not sep or not module_name or not attr_path:
        err_console.print(f"[red]Expected MODULE:CLASS, got {target!r}[/red]")
        raise typer.Exit(code=1)

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        err_console.print(f"[red]Cannot import {module_name}: {exc}[/red]")
        raise typer.Exit(code=1) from exc

    for part in attr_path.split("."):
        obj = getattr(obj, part, None)
        if obj is None:
            err_console.print(f"[red]{module_name} has no attribute {attr_path!r}[/red]")
            raise typer.Exit(code=1)

    if not (isinstance(obj, type) and issubclass(obj, Operation)):
        err_console.print(f"[red]{target} is not an Operation subclass[/red]")
        raise typer.Exit(code=1)
    return obj


def output_description(description: dict[str, Any], *, as_json: bool = False) -> None:
    """Print an ``Operation.describe()`` dict as JSON or rich tables."""
    if as_json:
        typer.echo(json.dumps(description, indent=2, default=str))
        return

    steps = Table(title=f"Operation: {description['operation']}")
    steps.add_column("Step", style="cyan")
    steps.add_column("Implementation")
    steps.add_column("Error override", style="yellow")
    for step in description["steps"]:
        steps.add_row(step["name"], step["implementation"], _cell(step["error"]))
    console.print(steps)

    details = Table(show_header=False)
    details.add_column("Key", style="bold")
    details.add_column("Value")
    params = description["params"]
    details.add_row("params", params["transform"] if params else "-")
    details.add_row("params error", _cell(params["error"]) if params else "-")
    for kind, hook in description["hooks"].items():
        details.add_row(kind, hook or "-")
    for key, value in description["options"].items():
        details.add_row(key, _cell(value))
    console.print(details)


def _cell(value: Any) -> str:
    return "-" if value is None else str(value)
