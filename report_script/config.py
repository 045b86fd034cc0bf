"""Configuration management for report-script."""

from pathlib import Path
from typing import List, Optional
import tomli
from dataclasses import dataclass, field

CONFIG_FILE_NAME = ".report-script.toml"


@dataclass
class CommunityConfig:
    """Community the weekly report belongs to."""
    prefix: str = "https://github.com/beyondstorage/"
    bots: List[str] = field(default_factory=lambda: ["@dependabot", "@BeyondRobot"])


@dataclass
class ReportConfig:
    """Location of the report inside the HTML page."""
    container: str = "td.comment-body"


@dataclass
class FetchConfig:
    """Network fetch configuration."""
    timeout: float = 30


@dataclass
class Config:
    """Main configuration class."""
    community: CommunityConfig = field(default_factory=CommunityConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
    fetch: FetchConfig = field(default_factory=FetchConfig)


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Find the config file, checking the start directory and its parents."""
    current = start or Path.cwd()

    for parent in [current] + list(current.parents):
        config_path = parent / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path

    return None


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from .report-script.toml, falling back to defaults."""
    config = Config()

    if config_path is None:
        config_path = find_config_file()
    if config_path is None:
        return config

    try:
        with open(config_path, "rb") as f:
            data = tomli.load(f)

        if "community" in data:
            community = data["community"]
            prefix = community.get("prefix", config.community.prefix)
            if not isinstance(prefix, str):
                raise ValueError("'community.prefix' must be a string")
            config.community.prefix = prefix
            bots = community.get("bots", config.community.bots)
            if not isinstance(bots, list):
                raise ValueError("'community.bots' must be a list of handles")
            config.community.bots = bots

        if "report" in data:
            report = data["report"]
            container = report.get("container", config.report.container)
            if not isinstance(container, str):
                raise ValueError("'report.container' must be a CSS selector string")
            config.report.container = container

        if "fetch" in data:
            fetch = data["fetch"]
            timeout = fetch.get("timeout", config.fetch.timeout)
            if isinstance(timeout, bool) or not isinstance(timeout, (int, float)):
                raise ValueError("'fetch.timeout' must be a number of seconds")
            config.fetch.timeout = timeout

    except Exception as e:
        raise RuntimeError(f"Error loading config from {config_path}: {e}")

    return config
