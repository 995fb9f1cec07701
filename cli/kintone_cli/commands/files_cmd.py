from __future__ import annotations

import typer

from ..output import run_operation

app = typer.Typer(help="File commands.")


@app.command("upload")
def upload_file(
        app_name: str = typer.Argument(..., metavar="APP", help="App name from the config."),
        path: str = typer.Argument(..., help="Local file to upload."),
        subdomain: str | None = typer.Option(None, "--subdomain", help="Override subdomain."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON only."),
):
    """Upload a file; the response carries the fileKey for attachment fields."""
    run_operation("upload", app_name, path, subdomain=subdomain, json_out=json_out)
