"""
Exception types raised by the Abucoins SDK.

There are two kinds of failure: the request never produced a usable response
(TransportError, including timeouts) or the exchange answered with an error
message (ApplicationError).
"""

from typing import Optional


class AbucoinsError(Exception):
    """Base class for all SDK errors."""


class TransportError(AbucoinsError):
    """Network failure, refused connection, unusable response or timeout."""

    def __init__(self, message: str, cause: Optional[BaseException] = None, status: Optional[int] = None):
        super().__init__(message)
        self.cause = cause
        self.status = status


class RequestTimeoutError(TransportError):
    """The configured total request timeout elapsed."""


class ApplicationError(AbucoinsError):
    """The exchange returned a response carrying a ``message`` field."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message
