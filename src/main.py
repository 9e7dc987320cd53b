"""
Point d'entrée CLI d'AeroReg.

Initialise le container DI, configure le logging et monte les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from .adapters.cli.commands import airline_app, airport_app, association_app
from .adapters.cli.helpers import console
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="aeroreg",
    help="Registre des compagnies aériennes et des aéroports",
)
container = Container()


@app.callback()
def main_callback(
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """AeroReg - compagnies aériennes, aéroports et leurs associations."""
    settings = container.config()
    configure_logging(settings, quiet=quiet)
    logger.info("Démarrage d'AeroReg", database_url=settings.database_url)


app.add_typer(airline_app, name="airline")
app.add_typer(airport_app, name="airport")
app.add_typer(association_app, name="association")


@app.command(name="init-db")
def init_database() -> None:
    """Crée les tables manquantes dans la base configurée."""
    settings = container.config()
    container.database.init()
    console.print(f"[green]Base initialisée :[/green] {settings.database_url}")


def main() -> None:
    """Point d'entrée de l'application (le logging est configuré par le callback)."""
    app()


if __name__ == "__main__":
    main()
