from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import typer

from .. import console
from ..output import run_operation

RECORDS_USAGE = """\
Usage:
  kintone records search <app> [QUERY]
  kintone records create <app> --json FILE|-
  kintone records update <app> --json FILE|-
  kintone records delete <app> <id>...
"""

app = typer.Typer(help="Record commands.\n\n" + RECORDS_USAGE)


def _read_records(source: str) -> list[Any]:
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text(encoding="utf-8")
    except OSError as exc:
        console.err(f"Cannot read {source}: {exc}")
        raise typer.Exit(code=2)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        console.err(f"Invalid JSON in {source}: {exc}")
        raise typer.Exit(code=2)
    # accept either a bare list or {"records": [...]}
    if isinstance(data, dict) and isinstance(data.get("records"), list):
        return data["records"]
    if isinstance(data, list):
        return data
    console.err("Expected a JSON array of records or an object with a 'records' array.")
    raise typer.Exit(code=2)


@app.command("search")
def search_records(
        app_name: str = typer.Argument(..., metavar="APP", help="App name from the config."),
        query: str = typer.Argument("", help='kintone query, e.g. \'Status = "Open"\'.'),
        subdomain: str | None = typer.Option(None, "--subdomain", help="Override subdomain."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON only."),
):
    run_operation("search", app_name, query, subdomain=subdomain, json_out=json_out)


@app.command("create")
def create_records(
        app_name: str = typer.Argument(..., metavar="APP", help="App name from the config."),
        source: str = typer.Option(..., "--json", help="JSON file with records, or - for stdin."),
        subdomain: str | None = typer.Option(None, "--subdomain", help="Override subdomain."),
        json_out: bool = typer.Option(False, "--raw", help="Print raw JSON only."),
):
    run_operation("create", app_name, _read_records(source), subdomain=subdomain, json_out=json_out)


@app.command("update")
def update_records(
        app_name: str = typer.Argument(..., metavar="APP", help="App name from the config."),
        source: str = typer.Option(..., "--json", help="JSON file with records, or - for stdin."),
        subdomain: str | None = typer.Option(None, "--subdomain", help="Override subdomain."),
        json_out: bool = typer.Option(False, "--raw", help="Print raw JSON only."),
):
    run_operation("update", app_name, _read_records(source), subdomain=subdomain, json_out=json_out)


@app.command("delete")
def delete_records(
        app_name: str = typer.Argument(..., metavar="APP", help="App name from the config."),
        record_ids: list[int] = typer.Argument(..., metavar="ID...", help="Record ids to delete."),
        yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation."),
        subdomain: str | None = typer.Option(None, "--subdomain", help="Override subdomain."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON only."),
):
    if not yes:
        ids = ", ".join(str(i) for i in record_ids)
        if not typer.confirm(f"Delete records {ids} from '{app_name}'?", default=False):
            raise typer.Exit(code=0)
    run_operation("destroy", app_name, list(record_ids), subdomain=subdomain, json_out=json_out)
