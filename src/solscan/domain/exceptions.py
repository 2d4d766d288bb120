"""Domain exceptions for analysis and pipeline execution."""


class AnalyzerError(Exception):
    """Base exception for analyzer failures."""

    pass


class AnalyzerInitError(AnalyzerError):
    """Raised when the grammar or parser cannot be initialized."""

    pass


class ParseError(AnalyzerError):
    """Raised when source text cannot be parsed into a syntax tree."""

    def __init__(self, message: str = "parse failed"):
        super().__init__(message)


class SourceTooLargeError(AnalyzerError):
    """Raised when source text exceeds the configured size bound."""

    def __init__(self, size: int, limit: int):
        """
        Initialize the error.

        Args:
            size: Size of the rejected source in UTF-8 bytes
            limit: Configured maximum size in bytes
        """
        self.size = size
        self.limit = limit
        super().__init__(f"Source is {size} bytes, limit is {limit} bytes")


class PipelineFatalError(Exception):
    """Exception raised by tasks to signal pipeline should terminate."""

    def __init__(self, message: str, source: str | None = None):
        """
        Initialize fatal error.

        Args:
            message: Error message describing the fatal condition
            source: Optional name of the task/component that raised the error
        """
        self.message = message
        self.source = source
        super().__init__(self.message)
