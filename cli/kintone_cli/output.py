from __future__ import annotations

from typing import Any

import httpx
import typer
from kintone_client import ApiError, AuthenticationError, ConfigurationError, NetworkError

from . import console
from .config import load_config
from .http import make_client


def emit_response(resp: httpx.Response, *, json_out: bool = False) -> None:
    """Print a kintone response; non-2xx statuses exit with code 1."""
    try:
        data = resp.json()
    except ValueError:
        data = None

    if not json_out:
        label = f"HTTP {resp.status_code}"
        if resp.is_success:
            console.ok(label)
        else:
            console.err(label)

    if data is not None:
        console.print_json(data)
    elif resp.text:
        console.console.print(resp.text)

    if not resp.is_success:
        raise typer.Exit(code=1)


def run_operation(operation: str, app_name: str, arg: Any, *, subdomain: str | None, json_out: bool) -> None:
    cfg = load_config()
    try:
        client = make_client(cfg, subdomain_override=subdomain)
    except ConfigurationError as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    try:
        resp = getattr(client, operation)(app_name, arg)
    except (ConfigurationError, AuthenticationError) as e:
        console.err(str(e))
        raise typer.Exit(code=2)
    except NetworkError as e:
        console.err(f"Network error: {e}")
        raise typer.Exit(code=2)
    except ApiError as e:
        console.err(f"HTTP {e.status_code}: {e}")
        raise typer.Exit(code=1)
    finally:
        client.close()
    emit_response(resp, json_out=json_out)
