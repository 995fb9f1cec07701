from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import httpx
import pytest


@dataclass
class FakeFetcher:
    """Records fetch() calls instead of going to the network."""

    response: httpx.Response = field(default_factory=lambda: httpx.Response(200, json={}))
    calls: list[dict[str, Any]] = field(default_factory=list)

    def fetch(self, url, *, method, headers, content_type=None, payload=None, mute_http_exceptions=True):
        self.calls.append(
            {
                "url": url,
                "method": method,
                "headers": dict(headers),
                "content_type": content_type,
                "payload": payload,
                "mute_http_exceptions": mute_http_exceptions,
            }
        )
        return self.response

    @property
    def last(self) -> dict[str, Any]:
        return self.calls[-1]


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def apps() -> dict[str, dict[str, Any]]:
    return {
        "report": {"appid": 5, "name": "Daily report"},
        "guest": {"appid": 7, "guestid": 3, "name": "Guest app", "token": "tok-guest"},
        "tokened": {"appid": 9, "name": "Tokened", "token": "tok-a,tok-b"},
    }
