"""Extract weekly statistics and contributions from a rendered weekly report.

The report is a GitHub issue comment generated by a templating bot. Inside the
comment body, ``h2`` headings name a project and each following ``ul`` lists
the week's activity on it, one ``li`` per action::

    <h2><a href="...">go-storage</a></h2>
    <ul>
      <li><a class="user-mention" href="https://github.com/alice">@alice</a>
          opened issue <code><a href="https://...">Bug X</a></code></li>
    </ul>
"""

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Pattern, Tuple

from bs4 import BeautifulSoup, NavigableString, Tag
from bs4.element import PreformattedString

from .errors import ListBeforeHeadingError, MalformedHeadingError, ReportParseError
from .logging import warning

DEFAULT_CONTAINER = "td.comment-body"
DEFAULT_BOTS = ("@dependabot", "@BeyondRobot")

# Evaluated top to bottom, first match wins
CLASSIFICATION_RULES: List[Tuple[Pattern, str]] = [
    (re.compile("opened pull request"), "prs_opened"),
    (re.compile("merged pull request|closed pull request"), "prs_closed"),
    (re.compile("opened issue"), "issues_opened"),
    (re.compile("closed issue"), "issues_closed"),
]


@dataclass
class Counters:
    """Weekly issue and pull request statistics."""
    issues_opened: int = 0
    issues_closed: int = 0
    prs_opened: int = 0
    prs_closed: int = 0

    def total(self) -> int:
        return self.issues_opened + self.issues_closed + self.prs_opened + self.prs_closed


@dataclass
class ContributionEntry:
    """A single user action on an issue or pull request."""
    user_handle: str
    action_text: str
    issue_title: str
    issue_link: str

    def render(self) -> str:
        """Render as a Markdown line using a reference link for the user."""
        return f"[{self.user_handle}]{self.action_text}[{self.issue_title}]({self.issue_link})"


@dataclass
class ReportSummary:
    """Everything extracted from one weekly report."""
    counters: Counters = field(default_factory=Counters)
    sections: Dict[str, List[ContributionEntry]] = field(default_factory=dict)
    users: Dict[str, str] = field(default_factory=dict)

    def contribution_count(self) -> int:
        return sum(len(entries) for entries in self.sections.values())


def classify(action_text: str) -> Optional[str]:
    """Return the counter an action text increments, or None."""
    for pattern, counter in CLASSIFICATION_RULES:
        if pattern.search(action_text):
            return counter
    return None


def first_text(tag: Tag) -> Optional[str]:
    """Return the first text node directly under a tag, skipping elements and comments."""
    for child in tag.children:
        if isinstance(child, NavigableString) and not isinstance(child, PreformattedString):
            return str(child)
    return None


def find_issue_anchor(item: Tag) -> Optional[Tag]:
    """Find the issue/PR link, an anchor nested one level inside the list item."""
    for child in item.find_all(recursive=False):
        anchor = child.find("a", recursive=False)
        if anchor is not None:
            return anchor
    return None


class ReportExtractor:
    """Single pass over the report container collecting stats and contributions."""

    def __init__(self, bots: Iterable[str] = DEFAULT_BOTS, container: str = DEFAULT_CONTAINER):
        self.bots = set(bots)
        self.container = container

    def is_bot(self, handle: str) -> bool:
        return handle in self.bots

    def extract(self, document: BeautifulSoup) -> ReportSummary:
        root = document.select_one(self.container)
        if root is None:
            raise ReportParseError(f"Report container '{self.container}' not found in document")

        summary = ReportSummary()
        current: Optional[str] = None

        for node in root.find_all(recursive=False):
            if node.name == "h2":
                current = self._section_name(node)
                # A repeated heading drops whatever was collected under that name
                summary.sections[current] = []
            elif node.name == "ul":
                for item in node.find_all("li", recursive=False):
                    entry = self._extract_item(item, summary)
                    if entry is None:
                        continue
                    if current is None:
                        raise ListBeforeHeadingError(
                            f"Contribution '{entry.render()}' appears before any section heading"
                        )
                    summary.sections[current].append(entry)

        return summary

    def _section_name(self, heading: Tag) -> str:
        anchors = heading.find_all("a", recursive=False)
        if not anchors:
            raise MalformedHeadingError(
                f"Section heading has no link: {heading.get_text(strip=True)!r}"
            )
        return "".join(anchor.get_text() for anchor in anchors)

    def _extract_item(self, item: Tag, summary: ReportSummary) -> Optional[ContributionEntry]:
        """Classify one list item, returning its entry or None when it is skipped."""
        user = item.find("a", class_="user-mention", recursive=False)
        if user is None:
            warning(f"get user from item failed, text: {item.get_text(strip=True)}")
            return None

        handle = user.get_text()
        if self.is_bot(handle):
            return None

        if handle not in summary.users:
            user_link = user.get("href")
            if user_link is None:
                warning(f"get href from user failed, text: {handle}")
                return None
            summary.users[handle] = user_link

        action_text = first_text(item)
        if action_text is None:
            warning(f"get action from item failed, user: {handle}")
            return None

        counter = classify(action_text)
        if counter is not None:
            setattr(summary.counters, counter, getattr(summary.counters, counter) + 1)

        issue = find_issue_anchor(item)
        if issue is None:
            warning(f"get issue from item failed, user: {handle}")
            return None

        issue_link = issue.get("href")
        if issue_link is None:
            warning(f"get href from issue failed, text: {issue.get_text()}")
            return None

        issue_title = first_text(issue)
        if issue_title is None:
            warning(f"get title from issue failed, link: {issue_link}")
            return None

        return ContributionEntry(handle, action_text, issue_title, issue_link)


def extract_report(document: BeautifulSoup, bots: Iterable[str] = DEFAULT_BOTS,
                   container: str = DEFAULT_CONTAINER) -> ReportSummary:
    """Extract a report summary from a parsed weekly report page."""
    return ReportExtractor(bots, container).extract(document)
