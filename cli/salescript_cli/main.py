from __future__ import annotations

import typer

from .commands import auth_cmd, customers_cmd, interactions_cmd, scripts_cmd, settings_cmd
from .logging_ import setup_logging


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="salescript",
        help="salescript CLI",
        no_args_is_help=True,
    )

    app.add_typer(settings_cmd.app, name="config")
    app.add_typer(auth_cmd.app, name="auth")
    app.command("whoami")(auth_cmd.whoami_impl)
    app.add_typer(scripts_cmd.app, name="scripts")
    app.add_typer(customers_cmd.app, name="customers")
    app.add_typer(interactions_cmd.app, name="interactions")

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()
