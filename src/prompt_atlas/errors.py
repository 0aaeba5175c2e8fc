"""Exception types for Prompt Atlas."""


class PromptAtlasError(Exception):
    """Base error carrying a machine-readable code and an HTTP-style status."""

    def __init__(self, message: str, code: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class DocumentFetchError(PromptAtlasError):
    """Raised when a source document cannot be retrieved.

    ``status_code`` is the upstream HTTP status, or 0 for transport failures
    (timeouts, connection errors) where no response was received.
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message, code="GITHUB_FETCH_ERROR", status_code=status_code)
