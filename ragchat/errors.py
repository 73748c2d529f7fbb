"""Error taxonomy shared by the clients, the engine and the HTTP layer."""


class RAGError(Exception):
    """Base class for every failure the chat pipeline reports to callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigError(RAGError):
    """A required setting (the inference credential) is missing."""


class ValidationError(RAGError):
    """The request body does not carry a usable question."""


class UpstreamError(RAGError):
    """A remote inference call answered with a non-success status."""

    def __init__(self, message: str, *, status: int, body: str):
        super().__init__(message)
        self.status = status
        self.body = body


class UnknownError(RAGError):
    """Any other failure inside the pipeline."""


class ResponseDecodeError(UnknownError):
    """An upstream payload did not have any of the accepted shapes."""
