"""
API Errors

Failure taxonomy raised by the data-access layer.
"""

from typing import Optional


class FetchError(Exception):
    """Base error for any failed call against the REST API."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class NetworkError(FetchError):
    """The request never completed (connection refused, timeout, ...)."""


class ServerError(FetchError):
    """The server answered with a non-2xx status or an unusable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class ValidationError(FetchError):
    """Input rejected before any request was sent."""
