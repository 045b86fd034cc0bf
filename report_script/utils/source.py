"""Input acquisition and output sink for weekly reports."""

from pathlib import Path
from typing import Optional

import requests
import typer
from bs4 import BeautifulSoup, ParserRejectedMarkup

from .errors import FetchError, FileOpenError, OutputCreateError, ReportParseError


def is_url(location: str) -> bool:
    """Check whether the input location should be fetched over HTTP."""
    return location.startswith("http://") or location.startswith("https://")


def fetch_url(url: str, timeout: float = 30) -> bytes:
    """Fetch the report page, failing on any non-200 response."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as e:
        raise FetchError(f"Request to {url} failed: {e}")

    if response.status_code != 200:
        raise FetchError(f"status code error: {response.status_code} {response.reason}")

    return response.content


def read_file(path: str) -> bytes:
    """Read a local copy of the report page."""
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise FileOpenError(f"Cannot open input file <{path}>: {e}")


def read_input(location: str, timeout: float = 30) -> bytes:
    """Read the report from a URL or, when the network is not an option, a local file."""
    if is_url(location):
        return fetch_url(location, timeout)
    return read_file(location)


def parse_document(raw: bytes) -> BeautifulSoup:
    """Build the DOM tree for a report page."""
    try:
        return BeautifulSoup(raw, "html.parser")
    except ParserRejectedMarkup as e:
        raise ReportParseError(f"Cannot parse input as HTML: {e}")


def write_output(text: str, destination: Optional[str] = None) -> None:
    """Write the formatted report to stdout or to a file."""
    if not destination:
        typer.echo(text, nl=False)
        return

    try:
        with open(destination, "w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise OutputCreateError(f"create output file <{destination}> failed: [{e}]")
