"""Generate the formatted weekly report."""

import typer
from typing import Optional

from ..config import load_config
from ..utils.errors import ReportError
from ..utils.extract import extract_report
from ..utils.formatter import format_report
from ..utils.logging import success, error, warning, info, step
from ..utils.source import read_input, parse_document, write_output


def generate_main(input_path: str, output_path: Optional[str] = None) -> None:
    """Read the weekly report, extract stats and contributions, write the summary."""

    try:
        config = load_config()
    except RuntimeError as e:
        error(str(e))
        raise typer.Exit(1)

    try:
        step(f"Reading weekly report from {input_path}")
        raw = read_input(input_path, config.fetch.timeout)

        document = parse_document(raw)
        summary = extract_report(document, config.community.bots, config.report.container)
        info(f"Weekly stats: {summary.counters.total()} issue/PR events")

        # Output is only touched once the whole report has been processed
        write_output(format_report(summary, config.community.prefix), output_path)

        sections = sum(1 for entries in summary.sections.values() if entries)
        success(
            f"Report generated: {summary.contribution_count()} contributions "
            f"in {sections} sections from {len(summary.users)} contributors"
        )
        if output_path:
            info(f"Written to {output_path}")

    except ReportError as e:
        error(str(e))
        raise typer.Exit(1)
    except KeyboardInterrupt:
        warning("Report generation interrupted by user")
        raise typer.Exit(1)
    except Exception as e:
        error(f"Report generation failed: {e}")
        raise typer.Exit(1)
