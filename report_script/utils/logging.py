"""Rich console logging utilities."""

from rich.console import Console
from rich.markup import escape

# Global console instance, on stderr so stdout only carries the report
console = Console(stderr=True)

# Toggled by --verbose
_verbose = False


def set_verbose(enabled: bool) -> None:
    """Enable or disable progress messages."""
    global _verbose
    _verbose = enabled


def success(message: str) -> None:
    """Print a success message."""
    console.print(f"✅ {escape(message)}")


def error(message: str) -> None:
    """Print an error message."""
    console.print(f"❌ {escape(message)}", style="red")


def warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"⚠️  {escape(message)}", style="yellow")


def info(message: str) -> None:
    """Print an info message (verbose only)."""
    if _verbose:
        console.print(f"ℹ️  {escape(message)}", style="blue")


def step(message: str) -> None:
    """Print a step message (verbose only)."""
    if _verbose:
        console.print(f"📥 {escape(message)}", style="cyan")
