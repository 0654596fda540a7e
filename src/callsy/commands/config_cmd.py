"""Config management commands."""

from __future__ import annotations

import sys
from dataclasses import asdict
from io import StringIO
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from ruamel.yaml import YAML

from ..config import (
    find_config_path,
    get_default_config_yaml,
    load_config,
    validate_config,
)
from ..errors import CallsyError

console = Console()
err_console = Console(stderr=True)

DEFAULT_FILENAME = "callsy.yaml"


@click.group("config")
def config():
    """Manage callsy configuration.

    View, create, and check callsy.yaml settings.
    """


@config.command()
@click.option("--force", "-f", is_flag=True, help="Overwrite existing config file")
@click.option("--filename", default=DEFAULT_FILENAME,
              help="Config filename (default: callsy.yaml)")
def init(force, filename):
    """Create a default callsy.yaml config file in the current directory."""
    target = Path.cwd() / filename

    if target.exists() and not force:
        console.print(f"[yellow]Config file already exists:[/yellow] {target}")
        console.print("[dim]Use --force to overwrite.[/dim]")
        return

    target.write_text(get_default_config_yaml(), encoding="utf-8")
    console.print(f"[green]Config file created:[/green] {target}")


@config.command()
@click.option("--config", "-c", "config_path", default=None, help="Config file path")
def show(config_path):
    """Show the effective configuration (defaults + config file)."""
    try:
        cfg = load_config(config_path)
    except CallsyError as e:
        err_console.print(f"[red]Error:[/red] {e.kind}: {escape(str(e))}", highlight=False)
        sys.exit(1)

    yaml = YAML()
    yaml.default_flow_style = False
    buf = StringIO()
    yaml.dump({"callsy": asdict(cfg)}, buf)

    syntax = Syntax(buf.getvalue(), "yaml", theme="monokai", line_numbers=False)
    console.print(syntax)

    if config_path:
        console.print(f"\n[dim]Config file: {Path(config_path).resolve()}[/dim]")
    else:
        found = find_config_path()
        if found:
            console.print(f"\n[dim]Config file: {found}[/dim]")
        else:
            console.print("\n[dim]No config file found (using defaults)[/dim]")


@config.command()
@click.option("--config", "-c", "config_path", default=None, help="Config file path")
def validate(config_path):
    """Check a config file for syntax errors, unknown keys and bad values."""
    path = Path(config_path) if config_path else find_config_path()
    if path is None:
        console.print("[dim]No config file found (using defaults)[/dim]")
        return
    if not path.exists():
        err_console.print(f"[red]Config file not found:[/red] {path}")
        sys.exit(1)

    errors = validate_config(path)
    if errors:
        err_console.print(f"[red]Invalid config:[/red] {path}")
        for error in errors:
            err_console.print(f"  - {escape(error)}", highlight=False)
        sys.exit(1)

    console.print(f"[green]Config is valid:[/green] {path}")
