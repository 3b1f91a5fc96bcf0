class QuizGenerationError(Exception):
    """Base class for failures that abort a generation call."""


class ConfigurationError(QuizGenerationError):
    """Server-side setup is missing something, e.g. the API key."""


class UpstreamAPIError(QuizGenerationError):
    """The model API answered with a non-success status or could not be reached."""

    def __init__(self, message, status_code=None, detail=None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class MalformedResponseError(QuizGenerationError):
    """The model's reply could not be turned into a question list."""
