from __future__ import annotations

import typer

from .commands import apps_cmd, files_cmd, records_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="kintone",
        help="kintone record and file CLI",
        no_args_is_help=True,
    )

    app.add_typer(records_cmd.app, name="records")
    app.add_typer(files_cmd.app, name="files")
    app.add_typer(apps_cmd.app, name="apps")
    app.add_typer(settings_cmd.app, name="settings")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
