"""
Utilitaires partages pour les commandes CLI d'AeroReg.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- report_business_errors : traduit les erreurs metier en message + code de sortie 1
- render_airlines / render_airports : tableaux Rich
"""

from collections.abc import Iterable
from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.console import Console
from rich.table import Table

from src.container import Container
from src.core.entities.aviation import Airline, Airport
from src.core.errors import BusinessLogicException

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        def my_command(container, ...):
            service = container.airline_service()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


@contextmanager
def report_business_errors():
    """
    Affiche une erreur metier et termine la commande avec le code 1.

    Les erreurs d'infrastructure ne sont pas interceptees.
    """
    try:
        yield
    except BusinessLogicException as exc:
        console.print(
            f"[bold red]Erreur {exc.kind.http_status} ({exc.kind.value})[/bold red] {exc.message}"
        )
        raise typer.Exit(code=1) from exc


def render_airlines(airlines: Iterable[Airline], title: str = "Compagnies") -> None:
    """Affiche les compagnies dans un tableau Rich."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim")
    table.add_column("Nom", style="cyan")
    table.add_column("Fondation")
    table.add_column("Site web")
    table.add_column("Aeroports", justify="right")

    for airline in airlines:
        table.add_row(
            airline.id or "",
            airline.name,
            airline.foundation_date.isoformat() if airline.foundation_date else "?",
            airline.web_page,
            str(len(airline.airports)),
        )

    console.print(table)


def render_airports(airports: Iterable[Airport], title: str = "Aeroports") -> None:
    """Affiche les aeroports dans un tableau Rich."""
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim")
    table.add_column("Code", style="bold")
    table.add_column("Nom", style="cyan")
    table.add_column("Ville")
    table.add_column("Pays")
    table.add_column("Compagnies", justify="right")

    for airport in airports:
        table.add_row(
            airport.id or "",
            airport.code,
            airport.name,
            airport.city,
            airport.country,
            str(len(airport.airlines)),
        )

    console.print(table)
