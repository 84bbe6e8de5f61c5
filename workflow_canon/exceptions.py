"""Common exceptions for workflow-canon."""

EXIT_FAILURE = 1
EXIT_INVALID_JSON = 3
EXIT_NOT_FOUND = 4
EXIT_NOT_NORMALIZED = 5


class WorkflowCanonError(Exception):
    """Base exception for workflow-canon."""
    exit_code = EXIT_FAILURE


class ConfigError(WorkflowCanonError):
    """Configuration error."""
    pass


class InputNotFoundError(WorkflowCanonError):
    """Input file is missing or unreadable."""
    exit_code = EXIT_NOT_FOUND


class DocumentParseError(WorkflowCanonError):
    """Input file is not valid JSON."""
    exit_code = EXIT_INVALID_JSON

    def __init__(self, message: str, lineno: int | None = None, colno: int | None = None):
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


class OutputError(WorkflowCanonError):
    """Normalized document could not be written."""
    pass
