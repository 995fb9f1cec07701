from __future__ import annotations

DEFAULT_DOMAIN = "cybozu.com"


def base_host(subdomain: str) -> str:
    # kintone.com tenants pass the full FQDN ("example.kintone.com").
    if subdomain.endswith(".com"):
        return f"https://{subdomain}"
    return f"https://{subdomain}.{DEFAULT_DOMAIN}"


def endpoint(subdomain: str, guest_id: int | None = None) -> str:
    host = base_host(subdomain)
    if guest_id is None:
        return f"{host}/k/v1"
    return f"{host}/k/guest/{guest_id}/v1"
