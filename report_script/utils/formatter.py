"""Render an extracted weekly report as Markdown."""

from typing import List

from .extract import ReportSummary

DEFAULT_COMMUNITY_PREFIX = "https://github.com/beyondstorage/"

STATS_TEMPLATE = """
## Weekly Stats

| | Opened this week | Closed this week |
| ---- | ---- | ---- |
| Issues | {issues_opened} | {issues_closed} |
| PR's | {prs_opened} | {prs_closed} |
"""


def format_stats(summary: ReportSummary) -> str:
    counters = summary.counters
    return STATS_TEMPLATE.format(
        issues_opened=counters.issues_opened,
        issues_closed=counters.issues_closed,
        prs_opened=counters.prs_opened,
        prs_closed=counters.prs_closed,
    )


def format_sections(summary: ReportSummary, community_prefix: str = DEFAULT_COMMUNITY_PREFIX) -> str:
    """Render each section that has contributions.

    Example heading: "## [go-storage](https://github.com/beyondstorage/go-storage)"
    """
    lines: List[str] = []
    for name, entries in summary.sections.items():
        if not entries:
            continue
        lines.append(f"## [{name}]({community_prefix}{name})")
        lines.append("")
        for entry in entries:
            lines.append(f"- {entry.render()}")
        lines.append("")
    return "".join(f"{line}\n" for line in lines)


def format_user_links(summary: ReportSummary) -> str:
    return "".join(f"[{handle}]: {link}\n" for handle, link in summary.users.items())


def format_report(summary: ReportSummary, community_prefix: str = DEFAULT_COMMUNITY_PREFIX) -> str:
    """Render stats, per-section contributions and user reference links."""
    return "".join([
        format_stats(summary),
        "\n",
        format_sections(summary, community_prefix),
        "\n",
        format_user_links(summary),
    ])
