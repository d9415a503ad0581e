class SummarizationError(Exception):
    """Raised when summarization fails."""


class SummarizationNetworkError(SummarizationError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class SummarizationUnavailableError(SummarizationError):
    """Raised when no summarization provider is configured."""
