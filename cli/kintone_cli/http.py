from __future__ import annotations

from importlib import metadata

from kintone_client import KintoneClient
from kintone_client.config_types import BasicAuth, ClientConfig, EncodedCredential, UserPassCredential
from kintone_client.errors import ConfigurationError

from .config import AppConfig


def cli_version() -> str:
    try:
        return metadata.version("kintone-manager")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def make_client(cfg: AppConfig, *, subdomain_override: str | None = None) -> KintoneClient:
    subdomain = (subdomain_override or cfg.subdomain or "").strip()
    if not subdomain:
        raise ConfigurationError("Subdomain is not configured. Run `kintone settings set subdomain <name>` first.")

    session = None
    if cfg.auth.user and cfg.auth.password:
        session = UserPassCredential(cfg.auth.user, cfg.auth.password)
    elif cfg.auth.token:
        session = EncodedCredential(cfg.auth.token)

    basic = None
    if cfg.basic.user:
        basic = BasicAuth(cfg.basic.user, cfg.basic.password)

    return KintoneClient(
        ClientConfig(
            subdomain=subdomain,
            session=session,
            basic_auth=basic,
            timeout_s=cfg.timeout_s,
            client_version=cli_version(),
        ),
        cfg.apps,
    )
