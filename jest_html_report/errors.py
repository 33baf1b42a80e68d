"""Error kinds raised by the report pipeline stages."""


class ReportError(Exception):
    """Base class for failures that abort report generation."""


class StylesheetNotFoundError(ReportError):
    """Raised when the stylesheet file cannot be read."""


class MissingTestDataError(ReportError):
    """Raised when no test run data was handed to the renderer."""


class WriteFailureError(ReportError):
    """Raised when the rendered report cannot be persisted."""
