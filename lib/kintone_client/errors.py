from __future__ import annotations


class KintoneClientError(Exception):
    """Base client error."""


class ConfigurationError(KintoneClientError):
    """App registry or client configuration problem."""


class AuthenticationError(KintoneClientError):
    """No usable credential for the target app."""


class NetworkError(KintoneClientError):
    """Transport/network layer error."""


TransportError = NetworkError


class ApiError(KintoneClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""


class UnknownAppError(ConfigurationError, KeyError):
    """App name not present in the registry."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
