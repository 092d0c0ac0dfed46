# pathsource/commands/info.py

from typing import Optional
from pathlib import Path
import typer
from rich.console import Console

from pathsource.core.console import ConsoleAware
from pathsource.core.dependency_installer import parse_path_dependency
from pathsource.core.exceptions import PathSourceError, DependencyError, UnsupportedSourceError
from pathsource.core.file_reading import find_manifest_file, load_manifest
from pathsource.core.lockfile import LockFile
from pathsource.core.path_source import PathSource
from pathsource.core.system_cache import SystemCache
from pathsource.core.utils import canonicalize

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def info_command(dep_name: str, project_dir: Path, console_awr: ConsoleAware, verbose: bool):
    """Command wrapper for info command."""
    project_dir = Path(project_dir).resolve()
    manifest_path = find_manifest_file(project_dir)
    manifest = load_manifest(manifest_path)

    if dep_name not in manifest.dependencies:
        raise DependencyError(f"'{dep_name}' is not a dependency of {manifest.name}")

    source = PathSource()
    ref = parse_path_dependency(source, dep_name, manifest.dependencies[dep_name], manifest_path)
    if ref is None:
        raise UnsupportedSourceError(dep_name, "registry")

    bound = source.bind(SystemCache(), console=console_awr.console, verbose=verbose)
    package_id = bound.get_versions(ref)[0]
    dep_manifest = bound.describe(package_id)

    console_awr.print("🔍 [bold cyan]Path Dependency Information[/bold cyan]\n")
    console_awr.print(f"📦 [bold magenta]{package_id.name}[/bold magenta] [cyan]{package_id.version}[/cyan]")
    console_awr.print(f"  Description: [cyan]{dep_manifest.description or 'No description'}[/cyan]")
    console_awr.print(f"  Path: [cyan]{source.format_description(str(project_dir), package_id.description)}[/cyan]")
    console_awr.print(f"  Relative: {'[cyan]Yes[/]' if package_id.description.is_relative else '[yellow]No[/]'}")
    console_awr.print(f"  Directory: [cyan]{bound.get_directory(package_id)}[/cyan]")
    console_awr.print(f"  Canonical: [cyan]{canonicalize(package_id.description.path)}[/cyan]")

    locked = LockFile(project_dir, source).get(dep_name)
    if locked is None:
        console_awr.print("  Locked: [yellow]not in lockfile[/]")
    elif locked.version != package_id.version or not source.descriptions_equal(locked.description, package_id.description):
        console_awr.print(f"  Locked: [yellow]{locked.version} (out of date, run install)[/]")
    else:
        console_awr.print(f"  Locked: [cyan]{locked.version}[/cyan]")


def register(app):
    """Register the info command with the Typer app."""

    @app.command()
    def info(
        dep_name: str = typer.Argument(..., help="Name of the path dependency"),
        project_dir: Optional[Path] = typer.Option(
            None,
            "--project-dir",
            "-d",
            help="Project directory (default: current directory)"
        ),
        verbose: Optional[bool] = typer.Option(
            False,
            "--verbose",
            help="Show detailed output"
        )
    ):
        """Show where a path dependency lives and which version it resolves to."""

        console: Console = Console(log_path=False)
        console_awr = ConsoleAware(console=console, verbose=True if verbose else False)

        try:
            console_awr.print("")
            project_dir = project_dir if project_dir is not None else Path.cwd()
            info_command(dep_name, project_dir, console_awr, True if verbose else False)
            console_awr.print("")

        except PathSourceError as e:
            console_awr.print(f"\n[bold red]❌ Info failed:[/bold red] {e}")
            console_awr.print("")
            raise typer.Exit(code=1)

        except Exception as e:
            console_awr.print(f"\n[bold red]❌ Unexpected error:[/bold red] {e}")
            console_awr.print("")
            raise typer.Exit(code=1)
