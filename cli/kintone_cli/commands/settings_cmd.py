from __future__ import annotations

import typer

from .. import console
from ..config import config_path, load_config, normalize_subdomain, save_config

app = typer.Typer(help="Manage local CLI settings (~/.config/kintone/config.toml).")

SETTING_KEYS = (
    "subdomain",
    "timeout_s",
    "auth.user",
    "auth.password",
    "auth.token",
    "basic.user",
    "basic.password",
)
_SECRET_KEYS = {"auth.password", "auth.token", "basic.password"}


@app.command("path")
def show_path():
    console.console.print(config_path())


@app.command("show")
def show_settings():
    cfg = load_config()

    def _state(value: str) -> str:
        return "(set)" if (value or "").strip() else "(empty)"

    console.console.print(
        f"subdomain={cfg.subdomain or '-'} timeout_s={cfg.timeout_s} "
        f"auth.user={cfg.auth.user or '-'} auth.password={_state(cfg.auth.password)} "
        f"auth.token={_state(cfg.auth.token)} basic.user={cfg.basic.user or '-'} "
        f"basic.password={_state(cfg.basic.password)} apps={len(cfg.apps)}"
    )


@app.command("set")
def set_setting(
        key: str = typer.Argument(..., help="Setting key: " + ", ".join(SETTING_KEYS) + "."),
        value: str = typer.Argument(..., help="New value (empty string clears it)."),
):
    cfg = load_config()
    k = key.strip().lower()
    if k == "subdomain":
        cfg.subdomain = normalize_subdomain(value)
    elif k == "timeout_s":
        try:
            cfg.timeout_s = float(value)
        except ValueError:
            console.err(f"timeout_s must be a number, got {value!r}")
            raise typer.Exit(code=2)
    elif k == "auth.user":
        cfg.auth.user = value.strip()
    elif k == "auth.password":
        cfg.auth.password = value
    elif k == "auth.token":
        cfg.auth.token = value.strip()
    elif k == "basic.user":
        cfg.basic.user = value.strip()
    elif k == "basic.password":
        cfg.basic.password = value
    else:
        console.err(f"Unknown setting: {key}")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    shown = "(set)" if k in _SECRET_KEYS and value else value
    console.ok(f"{k}={shown} written to {saved}")


@app.command("app")
def set_app(
        name: str = typer.Argument(..., help="Logical app name used by other commands."),
        app_id: int | None = typer.Option(None, "--app-id", help="Numeric kintone app id."),
        guest_id: int | None = typer.Option(None, "--guest-id", help="Guest space id."),
        display_name: str = typer.Option("", "--name", help="Display name."),
        token: str | None = typer.Option(None, "--token", help="API token (comma separated for several)."),
        remove: bool = typer.Option(False, "--remove", help="Remove the app instead."),
):
    cfg = load_config()
    if remove:
        if cfg.apps.pop(name, None) is None:
            console.err(f"App '{name}' is not registered.")
            raise typer.Exit(code=2)
        saved = save_config(cfg)
        console.ok(f"App '{name}' removed from {saved}")
        return

    if app_id is None:
        console.err("--app-id is required when adding an app.")
        raise typer.Exit(code=2)

    entry: dict[str, object] = {"appid": app_id, "name": display_name}
    if guest_id is not None:
        entry["guestid"] = guest_id
    if token:
        entry["token"] = token
    cfg.apps[name] = entry
    saved = save_config(cfg)
    console.ok(f"App '{name}' saved to {saved}")
