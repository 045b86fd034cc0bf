import re

from report_script.utils.extract import ContributionEntry, Counters, ReportSummary
from report_script.utils.formatter import format_report, format_sections


def _summary() -> ReportSummary:
    return ReportSummary(
        counters=Counters(issues_opened=2, issues_closed=1, prs_opened=3, prs_closed=4),
        sections={
            "go-storage": [
                ContributionEntry("@alice", " opened issue ", "Bug X", "http://x"),
                ContributionEntry("@bob", " merged pull request ", "Fix Y", "http://y"),
            ],
            "go-service-fs": [],
            "specs": [ContributionEntry("@alice", " closed issue ", "RFC", "http://z")],
        },
        users={"@alice": "https://github.com/alice", "@bob": "https://github.com/bob"},
    )


def test_format_report_layout():
    expected = (
        "\n"
        "## Weekly Stats\n"
        "\n"
        "| | Opened this week | Closed this week |\n"
        "| ---- | ---- | ---- |\n"
        "| Issues | 2 | 1 |\n"
        "| PR's | 3 | 4 |\n"
        "\n"
        "## [go-storage](https://github.com/beyondstorage/go-storage)\n"
        "\n"
        "- [@alice] opened issue [Bug X](http://x)\n"
        "- [@bob] merged pull request [Fix Y](http://y)\n"
        "\n"
        "## [specs](https://github.com/beyondstorage/specs)\n"
        "\n"
        "- [@alice] closed issue [RFC](http://z)\n"
        "\n"
        "\n"
        "[@alice]: https://github.com/alice\n"
        "[@bob]: https://github.com/bob\n"
    )
    assert format_report(_summary()) == expected


def test_format_report_is_idempotent():
    summary = _summary()
    assert format_report(summary) == format_report(summary)


def test_community_prefix():
    text = format_sections(_summary(), "https://example.com/org/")
    assert "## [specs](https://example.com/org/specs)" in text


def test_empty_sections_are_suppressed():
    summary = ReportSummary(sections={"go-storage": []})
    text = format_report(summary)

    assert "## [" not in text
    assert "| Issues | 0 | 0 |" in text


def test_every_handle_has_reference_link():
    text = format_report(_summary())
    handles = set(re.findall(r"^- \[(@[^\]]+)\]", text, re.MULTILINE))
    for handle in handles:
        assert re.search(rf"^\[{re.escape(handle)}\]: \S+$", text, re.MULTILINE)
