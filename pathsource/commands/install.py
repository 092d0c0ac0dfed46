# pathsource/commands/install.py

from typing import Optional
from pathlib import Path
import typer
from rich.console import Console

from pathsource.core.console import ConsoleAware
from pathsource.core.dependency_installer import PathDependencyInstaller, ProjectNode
from pathsource.core.exceptions import PathSourceError

# ==============================================================
# COMMAND WRAPPER
# ==============================================================

def install_command(project_dir: Path, packages_dir: Optional[Path], console: Console, verbose: bool) -> ProjectNode:
    """Command wrapper for install command."""

    installer = PathDependencyInstaller(
        Path(project_dir).resolve(),
        packages_dir=packages_dir,
        console=console,
        verbose=verbose,
    )
    return installer.install_all()


def register(app):
    """Register the install command with the main Typer app."""

    @app.command()
    def install(
        project_dir: Optional[Path] = typer.Option(
            None,
            "--project-dir",
            "-d",
            help="Project directory (default: current directory)"
        ),
        packages_dir: Optional[Path] = typer.Option(
            None,
            "--packages-dir",
            "-p",
            help="Where to link dependencies (default: config or ./packages)"
        ),
        verbose: Optional[bool] = typer.Option(
            False,
            "--verbose",
            help="Show detailed output"
        )
    ):
        """Resolve path dependencies and link them into the packages directory."""

        console: Console = Console(log_path=False)
        console_awr = ConsoleAware(console=console, verbose=True if verbose else False)

        try:
            console_awr.print("")
            project_dir = project_dir if project_dir is not None else Path.cwd()
            root = install_command(project_dir, packages_dir,
                                   console=console,
                                   verbose=True if verbose else False)
            count = len(root.resolved_nodes())
            console_awr.print(f"\n✅ [bold green]Installed[/] {count} path dependenc{'y' if count == 1 else 'ies'} for [bold]{root.name}[/]")
            console_awr.print("")

        except KeyboardInterrupt:
            console_awr.print("\n[bold yellow]⚠️  Install cancelled by user.[/bold yellow]")
            console_awr.print("")
            raise typer.Exit(code=1)

        except PathSourceError as e:
            console_awr.print(f"\n[bold red]❌ Install failed:[/bold red] {e}")
            console_awr.print("")
            raise typer.Exit(code=1)

        except Exception as e:
            console_awr.print(f"\n[bold red]❌ Unexpected error:[/bold red] {e}")
            console_awr.print("")
            raise typer.Exit(code=1)
