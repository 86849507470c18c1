"""
Error taxonomy shared by the fetcher, the agents and the pipelines.
"""
from typing import Optional


class VeritasError(Exception):
    """Base class for all application errors."""


class FetchError(VeritasError):
    """Fetching or parsing a user-supplied URL failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ValidationError(VeritasError):
    """Model output did not conform to the declared output schema."""


class ModelInvocationError(VeritasError):
    """The model call itself failed (transport, API or tool-loop failure)."""


class FlowError(VeritasError):
    """Generic, user-presentable failure raised at a pipeline boundary."""
