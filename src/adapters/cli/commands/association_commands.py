"""
Commandes CLI de gestion des aeroports associes a une compagnie
(add, list, show, set, remove).
"""

from typing import Annotated, Optional

import typer

from src.adapters.cli.helpers import (
    console,
    render_airports,
    report_business_errors,
    with_container,
)
from src.core.entities.aviation import Airport

association_app = typer.Typer(
    name="association",
    help="Gestion des aeroports desservis par une compagnie",
    rich_markup_mode="rich",
)

AirlineArg = Annotated[str, typer.Argument(help="ID de la compagnie")]
AirportArg = Annotated[str, typer.Argument(help="ID de l'aeroport")]


@association_app.command("add")
def add_airport(airline_id: AirlineArg, airport_id: AirportArg) -> None:
    """Associe un aeroport a une compagnie (sans controle de doublon)."""
    _add_airport(airline_id, airport_id)


@with_container()
def _add_airport(container, airline_id: str, airport_id: str) -> None:
    with report_business_errors():
        airline = container.airline_airport_service().add_airport_to_airline(
            airline_id, airport_id
        )
    console.print(
        f"[green]Aeroport associe[/green] a {airline.name} "
        f"({len(airline.airports)} aeroport(s))"
    )


@association_app.command("list")
def list_airports(airline_id: AirlineArg) -> None:
    """Liste les aeroports d'une compagnie."""
    _list_airports(airline_id)


@with_container()
def _list_airports(container, airline_id: str) -> None:
    with report_business_errors():
        airports = container.airline_airport_service().find_airports_by_airline_id(airline_id)
    if not airports:
        console.print("[dim]Aucun aeroport associe.[/dim]")
        return
    render_airports(airports, title="Aeroports associes")


@association_app.command("show")
def show_airport(airline_id: AirlineArg, airport_id: AirportArg) -> None:
    """Affiche un aeroport s'il est associe a la compagnie."""
    _show_airport(airline_id, airport_id)


@with_container()
def _show_airport(container, airline_id: str, airport_id: str) -> None:
    with report_business_errors():
        airport = container.airline_airport_service().find_airport_by_airline_id_airport_id(
            airline_id, airport_id
        )
    render_airports([airport], title="Aeroport associe")


@association_app.command("set")
def set_airports(
    airline_id: AirlineArg,
    airport_ids: Annotated[
        Optional[list[str]],
        typer.Argument(help="IDs des aeroports (remplacent toute la liste ; aucun ID la vide)"),
    ] = None,
) -> None:
    """Remplace toute la liste des aeroports d'une compagnie."""
    _set_airports(airline_id, airport_ids or [])


@with_container()
def _set_airports(container, airline_id: str, airport_ids: list[str]) -> None:
    with report_business_errors():
        airline = container.airline_airport_service().update_airports_for_airline(
            airline_id, [Airport(id=airport_id) for airport_id in airport_ids]
        )
    console.print(
        f"[green]Liste remplacee[/green] pour {airline.name} "
        f"({len(airline.airports)} aeroport(s))"
    )


@association_app.command("remove")
def remove_airport(airline_id: AirlineArg, airport_id: AirportArg) -> None:
    """Retire un aeroport de la liste d'une compagnie."""
    _remove_airport(airline_id, airport_id)


@with_container()
def _remove_airport(container, airline_id: str, airport_id: str) -> None:
    with report_business_errors():
        container.airline_airport_service().delete_airport_from_airline(airline_id, airport_id)
    console.print(f"[green]Aeroport retire[/green] de la compagnie {airline_id}")
