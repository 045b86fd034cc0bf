"""Main CLI application for report-script."""

import typer
from typing import Optional

from .utils.logging import set_verbose

__version__ = "0.1.0"

EXAMPLES = """Examples:

  generate report to stdout:     report-script --input "https://url/to/report"

  generate report to file:       report-script --input "https://url/to/report" --output path/to/file

  generate report by local file: report-script --input path/to/input
"""

# Create the main Typer app
app = typer.Typer(
    name="report-script",
    help="report-script generate the predefined format report from BeyondStorage weekly report",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"report-script version {__version__}")
        raise typer.Exit()


@app.command(
    help="Generate the predefined format report from BeyondStorage weekly report",
    epilog=EXAMPLES,
)
def generate(
    input_path: str = typer.Option(..., "--input", "-i", help="input for BeyondStorage weekly report, url or local path"),
    output_path: Optional[str] = typer.Option(None, "--output", "-o", help="output for formatted report, if blank, use stdout instead"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    version: Optional[bool] = typer.Option(
        None, "--version", callback=version_callback, is_eager=True, help="Show version and exit"
    ),
) -> None:
    """Generate the formatted weekly report."""
    from .commands.generate import generate_main

    set_verbose(verbose)
    if verbose:
        # Enable verbose logging
        import logging
        logging.basicConfig(level=logging.DEBUG)

    generate_main(input_path, output_path)


if __name__ == "__main__":
    app()
