from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any, Protocol
from urllib.parse import quote

import httpx

from .auth import build_auth_headers
from .config_types import BasicAuth, ClientConfig, EncodedCredential, SessionCredential, UserPassCredential
from .endpoints import endpoint
from .files import FileSource, LocalFileSource
from .multipart import DEFAULT_BOUNDARY, build_multipart_body, content_type_for
from .registry import AppRegistry, as_registry
from .transport import RequestOptions, Transport

log = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class Fetcher(Protocol):
    def fetch(
            self,
            url: str,
            *,
            method: str,
            headers: dict[str, str],
            content_type: str | None = None,
            payload: bytes | str | None = None,
            mute_http_exceptions: bool = True,
    ) -> Any:
        ...


class KintoneClient:
    """Request builder for the kintone record and file REST endpoints.

    Every public operation issues exactly one request and returns the
    transport response untouched.
    """

    def __init__(
            self,
            cfg: ClientConfig,
            apps: AppRegistry | Mapping[str, Any],
            *,
            transport: Fetcher | None = None,
            files: FileSource | None = None,
    ):
        self._cfg = cfg
        self._apps = as_registry(apps)
        self._t = transport if transport is not None else Transport(cfg)
        self._files = files if files is not None else LocalFileSource()

    @property
    def config(self) -> ClientConfig:
        return self._cfg

    @property
    def apps(self) -> AppRegistry:
        return self._apps

    def close(self) -> None:
        close = getattr(self._t, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "KintoneClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # --- request building ---
    def endpoint_for(self, app_name: str) -> str:
        app = self._apps[app_name]
        return endpoint(self._cfg.subdomain, app.guest_id)

    def auth_headers_for(self, app_name: str) -> dict[str, str]:
        return build_auth_headers(self._cfg, self._apps[app_name].api_token)

    def _options(
            self,
            app_name: str,
            method: str,
            path: str,
            *,
            content_type: str | None = None,
            payload: bytes | str | None = None,
    ) -> RequestOptions:
        return RequestOptions(
            method=method,
            url=f"{self.endpoint_for(app_name)}/{path}",
            headers=self.auth_headers_for(app_name),
            content_type=content_type,
            payload=payload,
            mute_http_exceptions=self._cfg.mute_http_errors,
        )

    def _records_body(self, app_name: str, records: Sequence[Any]) -> str:
        body = {"app": self._apps[app_name].app_id, "records": list(records)}
        return json.dumps(body, ensure_ascii=False)

    def build_create(self, app_name: str, records: Sequence[Any]) -> RequestOptions:
        return self._options(
            app_name,
            "post",
            "records.json",
            content_type=JSON_CONTENT_TYPE,
            payload=self._records_body(app_name, records),
        )

    def build_search(self, app_name: str, query: str) -> RequestOptions:
        app = self._apps[app_name]
        q = quote(query, safe="-_.!~*'()")
        return self._options(app_name, "get", f"records.json?app={app.app_id}&query={q}")

    def build_update(self, app_name: str, records: Sequence[Any]) -> RequestOptions:
        return self._options(
            app_name,
            "put",
            "records.json",
            content_type=JSON_CONTENT_TYPE,
            payload=self._records_body(app_name, records),
        )

    def build_destroy(self, app_name: str, record_ids: Iterable[int | str]) -> RequestOptions:
        app = self._apps[app_name]
        query = f"app={app.app_id}"
        for index, record_id in enumerate(record_ids):
            query += f"&ids[{index}]={record_id}"
        return self._options(app_name, "delete", f"records.json?{query}")

    def build_upload(self, app_name: str, file_id: str, *, boundary: str = DEFAULT_BOUNDARY) -> RequestOptions:
        # resolve the app first so an unknown name fails before touching the file
        self._apps[app_name]
        upload = self._files.get(file_id)
        body = build_multipart_body(upload.name, upload.mime_type, upload.content, boundary=boundary)
        return self._options(
            app_name,
            "post",
            "file.json",
            content_type=content_type_for(boundary),
            payload=body,
        )

    def _send(self, opts: RequestOptions) -> Any:
        return self._t.fetch(
            opts.url,
            method=opts.method,
            headers=opts.headers,
            content_type=opts.content_type,
            payload=opts.payload,
            mute_http_exceptions=opts.mute_http_exceptions,
        )

    # --- API methods ---
    def create(self, app_name: str, records: Sequence[Any]) -> httpx.Response:
        return self._send(self.build_create(app_name, records))

    def search(self, app_name: str, query: str) -> httpx.Response:
        return self._send(self.build_search(app_name, query))

    def update(self, app_name: str, records: Sequence[Any]) -> httpx.Response:
        return self._send(self.build_update(app_name, records))

    def destroy(self, app_name: str, record_ids: Iterable[int | str]) -> httpx.Response:
        return self._send(self.build_destroy(app_name, record_ids))

    def upload(self, app_name: str, file_id: str) -> httpx.Response:
        opts = self.build_upload(app_name, file_id)
        log.debug("uploading %s bytes to app '%s'", len(opts.payload or b""), app_name)
        return self._send(opts)


def session_credential(user_or_encoded: str | None, password: str | None = None) -> SessionCredential | None:
    if user_or_encoded is None:
        return None
    if password is not None:
        return UserPassCredential(user_or_encoded, password)
    return EncodedCredential(user_or_encoded)


def connect(
        subdomain: str,
        apps: AppRegistry | Mapping[str, Any],
        user_or_encoded: str | None = None,
        password: str | None = None,
        basic_auth: BasicAuth | tuple[str, str] | None = None,
        *,
        transport: Fetcher | None = None,
        files: FileSource | None = None,
        timeout_s: float = 15.0,
        mute_http_errors: bool = True,
) -> KintoneClient:
    """Positional-argument form of the client.

    ``connect(sub, apps, encoded)`` keeps ``encoded`` verbatim as the session
    credential, ``connect(sub, apps, user, password)`` encodes the pair.
    """
    if isinstance(basic_auth, tuple):
        basic_auth = BasicAuth(*basic_auth)
    cfg = ClientConfig(
        subdomain=subdomain,
        session=session_credential(user_or_encoded, password),
        basic_auth=basic_auth,
        timeout_s=timeout_s,
        mute_http_errors=mute_http_errors,
    )
    return KintoneClient(cfg, apps, transport=transport, files=files)
