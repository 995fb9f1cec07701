from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir

APP_NAME = "kintone"
CONFIG_FILENAME = "config.toml"
ENV_CONFIG_PATH = "KINTONE_CONFIG"
ENV_SUBDOMAIN = "KINTONE_SUBDOMAIN"


@dataclass
class AuthConfig:
    user: str = ""
    password: str = ""
    # pre-encoded base64("user:pass")
    token: str = ""


@dataclass
class BasicConfig:
    user: str = ""
    password: str = ""


@dataclass
class AppConfig:
    subdomain: str
    auth: AuthConfig
    basic: BasicConfig
    apps: dict[str, dict[str, Any]] = field(default_factory=dict)
    timeout_s: float = 15.0


def config_path() -> str:
    override = os.getenv(ENV_CONFIG_PATH, "").strip()
    if override:
        return os.path.expanduser(override)
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(
        subdomain="",
        auth=AuthConfig(),
        basic=BasicConfig(),
        apps={},
    )


def normalize_subdomain(raw: str | None) -> str:
    value = (raw or "").strip().rstrip("/")
    lowered = value.lower()
    for scheme in ("https://", "http://"):
        if lowered.startswith(scheme):
            value = value[len(scheme):]
            break
    # "example.cybozu.com" and "example" address the same tenant
    if value.lower().endswith(".cybozu.com"):
        value = value[: -len(".cybozu.com")]
    return value


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return _prune_empty(
        {
            "subdomain": cfg.subdomain,
            "timeout_s": cfg.timeout_s,
            "auth": {
                "user": cfg.auth.user,
                "password": cfg.auth.password,
                "token": cfg.auth.token,
            },
            "basic": {
                "user": cfg.basic.user,
                "password": cfg.basic.password,
            },
            "apps": cfg.apps,
        }
    )


def _prune_empty(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune_empty(v) for k, v in value.items() if v is not None and v != ""}
    return value


def from_toml(data: dict[str, Any]) -> AppConfig:
    subdomain = normalize_subdomain(str(data.get("subdomain") or ""))
    auth_raw = data.get("auth") or {}
    auth = AuthConfig()
    if isinstance(auth_raw, dict):
        auth = AuthConfig(
            user=str(auth_raw.get("user") or ""),
            password=str(auth_raw.get("password") or ""),
            token=str(auth_raw.get("token") or ""),
        )
    basic_raw = data.get("basic") or {}
    basic = BasicConfig()
    if isinstance(basic_raw, dict):
        basic = BasicConfig(
            user=str(basic_raw.get("user") or ""),
            password=str(basic_raw.get("password") or ""),
        )
    apps_raw = data.get("apps") or {}
    apps: dict[str, dict[str, Any]] = {}
    if isinstance(apps_raw, dict):
        for name, v in apps_raw.items():
            if isinstance(v, dict):
                apps[str(name)] = dict(v)
    timeout_s = 15.0
    try:
        timeout_s = float(data.get("timeout_s") or 15.0)
    except (TypeError, ValueError):
        timeout_s = 15.0
    return AppConfig(subdomain=subdomain, auth=auth, basic=basic, apps=apps, timeout_s=timeout_s)


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        cfg = from_toml(data)
    except FileNotFoundError:
        cfg = default_config()
    env_subdomain = os.getenv(ENV_SUBDOMAIN, "").strip()
    if env_subdomain:
        cfg.subdomain = normalize_subdomain(env_subdomain)
    return cfg


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
