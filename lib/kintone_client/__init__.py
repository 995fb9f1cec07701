from .client import KintoneClient, connect
from .config_types import AppEntry, BasicAuth, ClientConfig, EncodedCredential, UserPassCredential
from .errors import (
    ApiError,
    AuthenticationError,
    AuthError,
    ConfigurationError,
    KintoneClientError,
    NetworkError,
    TransportError,
    UnknownAppError,
)
from .registry import AppRegistry

__all__ = [
    "KintoneClient",
    "connect",
    "AppEntry",
    "AppRegistry",
    "BasicAuth",
    "ClientConfig",
    "EncodedCredential",
    "UserPassCredential",
    "ApiError",
    "AuthenticationError",
    "AuthError",
    "ConfigurationError",
    "KintoneClientError",
    "NetworkError",
    "TransportError",
    "UnknownAppError",
]
