
from typing import Optional, Protocol, Any

class Console(Protocol):
    """Output interface; rich.console.Console satisfies it."""
    def print(self, *objects: Any) -> None:
        ...

    def log(self, *objects: Any) -> None:
        ...

class ConsoleAware:
    """
    Base for library classes that report progress.

    Silent when no console is given. `log()` output only appears in
    verbose mode; `print()` and `warn()` always do.
    """
    def __init__(self, console: Optional[Console] = None, verbose: bool = False):
        self.console = console
        self.verbose = verbose

    def print(self, msg: str) -> None:
        if self.console:
            self.console.print(msg)

    def warn(self, msg: str) -> None:
        self.print(f"[yellow]Warning:[/] {msg}")

    def log(self, msg: str) -> None:
        if self.console and self.verbose:
            self.console.log(msg)
