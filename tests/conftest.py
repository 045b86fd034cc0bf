import pytest
from bs4 import BeautifulSoup


def wrap_report(body: str) -> str:
    """Wrap report markup in the comment table GitHub renders around it."""
    return (
        "<html><body><table><tbody><tr>"
        '<td class="d-block comment-body markdown-body js-comment-body">'
        f"{body}"
        "</td></tr></tbody></table></body></html>"
    )


def item(handle: str, action: str, title: str, link: str = "https://github.com/beyondstorage/go-storage/issues/1") -> str:
    return (
        f'<li><a class="user-mention" href="https://github.com/{handle.lstrip("@")}">{handle}</a>'
        f'{action}<code><a href="{link}">{title}</a></code></li>'
    )


@pytest.fixture
def make_document():
    def _make(body: str) -> BeautifulSoup:
        return BeautifulSoup(wrap_report(body), "html.parser")
    return _make


@pytest.fixture
def report_html() -> str:
    return wrap_report(
        '<p>Weekly report for BeyondStorage</p>\n'
        '<h2><a href="https://github.com/beyondstorage/go-storage">go-storage</a></h2>\n'
        "<ul>\n"
        + item("@alice", " opened issue ", "Bug X", "https://github.com/beyondstorage/go-storage/issues/10") + "\n"
        + item("@bob", " merged pull request ", "Fix Y", "https://github.com/beyondstorage/go-storage/pull/11") + "\n"
        + item("@dependabot", " opened pull request ", "Bump Z", "https://github.com/beyondstorage/go-storage/pull/12") + "\n"
        + "</ul>\n"
        '<h2><a href="https://github.com/beyondstorage/go-service-fs">go-service-fs</a></h2>\n'
        "<ul>\n"
        + item("@alice", " closed issue ", "Old bug", "https://github.com/beyondstorage/go-service-fs/issues/3") + "\n"
        + "</ul>\n"
        '<h2><a href="https://github.com/beyondstorage/specs">specs</a></h2>\n'
        "<ul>\n"
        + item("@BeyondRobot", " opened pull request ", "Sync", "https://github.com/beyondstorage/specs/pull/1") + "\n"
        + "</ul>\n"
    )
