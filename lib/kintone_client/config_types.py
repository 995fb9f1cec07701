from __future__ import annotations

import base64
from dataclasses import dataclass
from typing import Any, Mapping

from .errors import ConfigurationError


def encode_credentials(user: str, password: str) -> str:
    """base64("user:pass") as used by both X-Cybozu-Authorization and Basic auth."""
    return base64.b64encode(f"{user}:{password}".encode("utf-8")).decode("ascii")


@dataclass(frozen=True)
class EncodedCredential:
    """Session credential that is already base64("user:pass")."""

    token: str

    @property
    def encoded(self) -> str:
        return self.token


@dataclass(frozen=True)
class UserPassCredential:
    user: str
    password: str

    @property
    def encoded(self) -> str:
        return encode_credentials(self.user, self.password)


SessionCredential = EncodedCredential | UserPassCredential


@dataclass(frozen=True)
class BasicAuth:
    user: str
    password: str

    @property
    def encoded(self) -> str:
        return encode_credentials(self.user, self.password)


@dataclass(frozen=True)
class ClientConfig:
    subdomain: str
    session: SessionCredential | None = None
    basic_auth: BasicAuth | None = None
    timeout_s: float = 15.0
    mute_http_errors: bool = True
    client_version: str | None = None

    @property
    def session_auth(self) -> str | None:
        return self.session.encoded if self.session is not None else None

    @property
    def basic_auth_token(self) -> str | None:
        return self.basic_auth.encoded if self.basic_auth is not None else None


def _optional_int(value: Any, field_name: str) -> int | None:
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{field_name} must be an integer, got {value!r}") from None


@dataclass(frozen=True)
class AppEntry:
    app_id: int
    guest_id: int | None = None
    name: str = ""
    # May hold several comma separated tokens; sent as-is.
    api_token: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AppEntry":
        """Accepts snake_case keys as well as the short keys appid/guestid/token."""
        raw_app_id = data.get("app_id", data.get("appid"))
        app_id = _optional_int(raw_app_id, "app_id")
        if app_id is None:
            raise ConfigurationError("app_id is required")
        guest_id = _optional_int(data.get("guest_id", data.get("guestid")), "guest_id")
        token = data.get("api_token", data.get("token"))
        return cls(
            app_id=app_id,
            guest_id=guest_id,
            name=str(data.get("name") or ""),
            api_token=str(token) if token else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"appid": self.app_id, "name": self.name}
        if self.guest_id is not None:
            data["guestid"] = self.guest_id
        if self.api_token:
            data["token"] = self.api_token
        return data
