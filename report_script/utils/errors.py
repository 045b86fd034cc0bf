"""Error types raised while generating a weekly report."""


class ReportError(Exception):
    """Base class for fatal report generation errors."""


class FetchError(ReportError):
    """The report URL could not be fetched or returned a non-success status."""


class FileOpenError(ReportError):
    """The local report file could not be read."""


class ReportParseError(ReportError):
    """The input could not be parsed or has no report container."""


class MalformedHeadingError(ReportError):
    """A section heading has no anchor to take the section name from."""


class ListBeforeHeadingError(ReportError):
    """A contribution list appeared before any section heading."""


class OutputCreateError(ReportError):
    """The output file could not be created."""
