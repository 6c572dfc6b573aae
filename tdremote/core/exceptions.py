"""Custom exceptions for tdremote."""

from typing import Any


class RemoteAdminError(Exception):
    """Base exception for tdremote."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(RemoteAdminError):
    """Missing target or invalid build settings."""

    pass


class TransportError(RemoteAdminError):
    """Network failure, TLS failure or non-success status from the remote."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        path: str | None = None,
    ):
        details: dict[str, Any] = {}
        if status_code is not None:
            details["status_code"] = status_code
        if path is not None:
            details["path"] = path
        super().__init__(message, details)
        self.status_code = status_code
        self.path = path


class MalformedResponseError(RemoteAdminError):
    """Response body does not have the expected structure."""

    def __init__(self, message: str, path: str | None = None):
        details = {}
        if path is not None:
            details["path"] = path
        super().__init__(f"Malformed response: {message}", details)
        self.path = path
