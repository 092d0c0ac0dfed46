# pathsource/cli.py
"""
Main CLI entry point for pathsource.

This module sets up the Typer application and registers all commands.
"""
import typer
from rich.console import Console

from pathsource.commands import (
    install,
    info,
)

import importlib.metadata
import pathlib
import sys
import tomllib

app = typer.Typer(
    name="pathsource",
    help="pathsource - local path dependencies for packages",
    add_completion=False,
    no_args_is_help=True,
)

# Register commands
install.register(app)
info.register(app)

# Auxiliary function to get the version of the package
def get_package_version():
    package_name = "pathsource"

    # 1. Try to get the version from an installed package
    try:
        return importlib.metadata.version(package_name)
    except importlib.metadata.PackageNotFoundError:
        pass

    # 2. If not installed, try reading directly from pyproject.toml
    project_root = pathlib.Path(__file__).parent.parent
    pyproject_path = project_root / "pyproject.toml"

    if pyproject_path.exists():
        try:
            with open(pyproject_path, "rb") as f:
                pyproject_data = tomllib.load(f)
            return pyproject_data.get("project", {}).get("version", "unknown")
        except (OSError, tomllib.TOMLDecodeError) as e:
            print(f"Warning: Could not read version from pyproject.toml: {e}", file=sys.stderr)
            return "unknown"

    return "unknown"

@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version of pathsource and exit.",
        callback=lambda value: _version_callback(value),
        is_eager=True,
    )
):
    """
    pathsource CLI.
    """
    pass

def _version_callback(value: bool):
    if value:
        console = Console(log_path=False)
        current_version = get_package_version()
        console.print(f"[bold green]pathsource[/] version [cyan]{current_version}[/]")
        raise typer.Exit()

if __name__ == "__main__":
    app()
