"""Error taxonomy shared by services and routes.

``ValidationError`` and ``NotFoundError`` carry a short client-facing message.
``InternalError`` carries a generic message for the client plus an ``ErrorKind``
that is only logged, so store and configuration failures look the same from
outside but stay distinguishable in the server logs.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Downstream cause of an InternalError."""

    STORE = "store"
    CONFIGURATION = "configuration"
    ENGINE = "engine"
    UNEXPECTED = "unexpected"


class DiaryError(Exception):
    """Base class for errors surfaced through the HTTP API."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DiaryError):
    """Caller input missing or malformed."""

    status_code = 400


class NotFoundError(DiaryError):
    """Requested record does not exist."""

    status_code = 404


class InternalError(DiaryError):
    """Any downstream, configuration or unexpected fault."""

    status_code = 500

    def __init__(self, message: str, kind: ErrorKind = ErrorKind.UNEXPECTED):
        super().__init__(message)
        self.kind = kind


class ConfigurationError(Exception):
    """Raised by the environment validator on misconfiguration."""
