from __future__ import annotations

from .config_types import ClientConfig
from .errors import AuthenticationError

SESSION_HEADER = "X-Cybozu-Authorization"
API_TOKEN_HEADER = "X-Cybozu-API-Token"
BASIC_HEADER = "Authorization"


def build_auth_headers(cfg: ClientConfig, api_token: str | None) -> dict[str, str]:
    """Headers identifying the caller for one request.

    Session and API token headers are combined when both are present; the
    server decides which one applies. Basic auth only ever rides along with
    the session credential.
    """
    session = cfg.session_auth
    if not (session or api_token):
        raise AuthenticationError("Authentication failed: no session credential or API token configured.")

    headers: dict[str, str] = {}
    if session:
        headers[SESSION_HEADER] = session
        basic = cfg.basic_auth_token
        if basic:
            headers[BASIC_HEADER] = f"Basic {basic}"
    if api_token:
        headers[API_TOKEN_HEADER] = api_token
    return headers
