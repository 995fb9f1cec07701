from __future__ import annotations

import logging
from dataclasses import dataclass, field

import httpx

from .config_types import ClientConfig
from .errors import ApiError, AuthError, NetworkError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestOptions:
    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    content_type: str | None = None
    payload: bytes | str | None = None
    mute_http_exceptions: bool = True


class Transport:
    def __init__(self, cfg: ClientConfig, *, client: httpx.Client | None = None):
        self._cfg = cfg
        headers = {"User-Agent": f"kintone-client/{cfg.client_version or '0.1.0'}"}
        self._client = client if client is not None else httpx.Client(
            timeout=cfg.timeout_s,
            headers=headers,
            follow_redirects=True,
        )

    def close(self) -> None:
        self._client.close()

    def fetch(
            self,
            url: str,
            *,
            method: str,
            headers: dict[str, str],
            content_type: str | None = None,
            payload: bytes | str | None = None,
            mute_http_exceptions: bool = True,
    ) -> httpx.Response:
        request_headers = dict(headers)
        if content_type:
            request_headers["Content-Type"] = content_type
        content = payload.encode("utf-8") if isinstance(payload, str) else payload

        log.debug("%s %s", method.upper(), url)
        try:
            r = self._client.request(method.upper(), url, headers=request_headers, content=content)
        except httpx.RequestError as e:
            raise NetworkError(str(e)) from e
        log.debug("%s %s -> %s", method.upper(), url, r.status_code)

        if r.status_code >= 400 and not mute_http_exceptions:
            msg = f"{method.upper()} {url} failed with {r.status_code}"
            details = None
            try:
                data = r.json()
            except ValueError:
                data = None
            if isinstance(data, dict) and data.get("message"):
                msg = str(data["message"])
            if r.text:
                details = r.text[:1000]
            if r.status_code in (401, 403):
                raise AuthError(r.status_code, msg, details)
            raise ApiError(r.status_code, msg, details)

        return r
