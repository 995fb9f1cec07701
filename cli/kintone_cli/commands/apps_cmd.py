from __future__ import annotations

import typer
from kintone_client import AppRegistry, ConfigurationError
from kintone_client.endpoints import endpoint
from rich.table import Table

from .. import console
from ..config import load_config

app = typer.Typer(help="Apps registered in the local config.")


@app.command("list")
def list_apps(
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    try:
        registry = AppRegistry(cfg.apps)
    except ConfigurationError as e:
        console.err(str(e))
        raise typer.Exit(code=2)

    if json_out:
        console.print_json({name: entry.to_dict() for name, entry in registry.items()})
        return
    if not registry:
        console.info("No apps configured. Use `kintone settings app NAME --app-id ID`.")
        return

    table = Table(title="kintone apps")
    table.add_column("name")
    table.add_column("app id", justify="right")
    table.add_column("guest", justify="right")
    table.add_column("display name")
    table.add_column("token")
    table.add_column("endpoint")
    for name, entry in registry.items():
        table.add_row(
            name,
            str(entry.app_id),
            "-" if entry.guest_id is None else str(entry.guest_id),
            entry.name or "-",
            "(set)" if entry.api_token else "-",
            endpoint(cfg.subdomain, entry.guest_id) if cfg.subdomain else "-",
        )
    console.console.print(table)
