"""Custom exceptions for documentation search."""


class DocSearchError(Exception):
    """Base exception for documentation search operations."""
    pass


class ValidationError(DocSearchError):
    """Exception raised during input validation."""
    pass


class IndexNotReadyError(DocSearchError):
    """Exception raised when querying before an index has been built."""
    pass


class IndexValidationError(DocSearchError):
    """Exception raised when startup diagnostics report errors in strict mode."""

    def __init__(self, report):
        self.report = report
        super().__init__("Index validation failed: " + "; ".join(report.errors))
