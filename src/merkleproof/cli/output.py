"""Shared output formatting with ASCII boxes. NO class - just functions."""

import json

import click

BOX_WIDTH = 80


def print_json(data) -> None:
    """Print JSON data formatted."""
    click.echo(json.dumps(data, indent=2, sort_keys=True))


def _truncate(text: str, max_len: int = 70) -> str:
    """Truncate text with ellipsis if too long."""
    return text[:max_len-3] + "..." if len(text) > max_len else text


def success_box(title: str, rows: list[tuple[str, str]], next_cmd: str | None = None) -> None:
    """Print green-bordered box with an optional Next: suggestion."""
    click.secho(f"╭─ {title} " + "─" * (BOX_WIDTH - len(title) - 4) + "╮", fg="green")
    for label, value in rows:
        line = f"│ {label}: {_truncate(str(value), BOX_WIDTH - len(label) - 6)}"
        click.echo(line + " " * (BOX_WIDTH - len(line)) + "│")
    click.secho("╰" + "─" * (BOX_WIDTH - 1) + "╯", fg="green")
    if next_cmd:
        click.echo(f"Next: {next_cmd}")


def error_box(title: str, message: str, fix_cmd: str | None = None) -> None:
    """Print red-bordered error box with optional Fix: suggestion."""
    message = _truncate(message, BOX_WIDTH - 4)
    click.secho(f"╭─ {title} " + "─" * (BOX_WIDTH - len(title) - 4) + "╮", fg="red")
    click.echo(f"│ {message}" + " " * (BOX_WIDTH - len(message) - 3) + "│")
    click.secho("╰" + "─" * (BOX_WIDTH - 1) + "╯", fg="red")
    if fix_cmd:
        click.echo(f"Fix: {fix_cmd}")
