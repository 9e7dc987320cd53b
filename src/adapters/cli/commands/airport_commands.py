"""
Commandes CLI de gestion des aeroports (list, show, create, update, delete).
"""

from typing import Annotated

import typer

from src.adapters.cli.helpers import (
    console,
    render_airlines,
    render_airports,
    report_business_errors,
    suppress_loguru,
    with_container,
)
from src.core.dtos import AirportDto, validate_dto

airport_app = typer.Typer(
    name="airport",
    help="Gestion des aeroports",
    rich_markup_mode="rich",
)

NameOption = Annotated[str, typer.Option("--name", "-n", help="Nom de l'aeroport")]
CodeOption = Annotated[str, typer.Option("--code", "-c", help="Code IATA (3 caracteres)")]
CountryOption = Annotated[str, typer.Option("--country", help="Pays")]
CityOption = Annotated[str, typer.Option("--city", help="Ville")]


@airport_app.command("list")
def list_airports() -> None:
    """Liste tous les aeroports."""
    _list_airports()


@with_container()
def _list_airports(container) -> None:
    with suppress_loguru():
        airports = container.airport_service().find_all()
    if not airports:
        console.print("[dim]Aucun aeroport enregistre.[/dim]")
        return
    render_airports(airports)


@airport_app.command("show")
def show_airport(
    airport_id: Annotated[str, typer.Argument(help="ID de l'aeroport")],
) -> None:
    """Affiche un aeroport et les compagnies qui le desservent."""
    _show_airport(airport_id)


@with_container()
def _show_airport(container, airport_id: str) -> None:
    with report_business_errors():
        airport = container.airport_service().find_one(airport_id)

    console.print(
        f"\n[bold cyan]{airport.code}[/bold cyan] {airport.name} - "
        f"{airport.city}, {airport.country} [dim]({airport.id})[/dim]\n"
    )
    render_airlines(airport.airlines, title="Compagnies associees")


@airport_app.command("create")
def create_airport(
    name: NameOption,
    code: CodeOption,
    country: CountryOption,
    city: CityOption,
) -> None:
    """Cree un aeroport."""
    _create_airport({"name": name, "code": code, "country": country, "city": city})


@with_container()
def _create_airport(container, payload: dict) -> None:
    with report_business_errors():
        dto = validate_dto(AirportDto, payload)
        airport = container.airport_service().create(dto.to_entity())
    console.print(f"[green]Aeroport cree :[/green] {airport.code} [dim]({airport.id})[/dim]")


@airport_app.command("update")
def update_airport(
    airport_id: Annotated[str, typer.Argument(help="ID de l'aeroport")],
    name: NameOption,
    code: CodeOption,
    country: CountryOption,
    city: CityOption,
) -> None:
    """Remplace les champs d'un aeroport."""
    _update_airport(airport_id, {"name": name, "code": code, "country": country, "city": city})


@with_container()
def _update_airport(container, airport_id: str, payload: dict) -> None:
    with report_business_errors():
        dto = validate_dto(AirportDto, payload)
        airport = container.airport_service().update(airport_id, dto.to_entity())
    console.print(f"[green]Aeroport modifie :[/green] {airport.code} [dim]({airport.id})[/dim]")


@airport_app.command("delete")
def delete_airport(
    airport_id: Annotated[str, typer.Argument(help="ID de l'aeroport")],
) -> None:
    """Supprime un aeroport (les compagnies sont conservees)."""
    _delete_airport(airport_id)


@with_container()
def _delete_airport(container, airport_id: str) -> None:
    with report_business_errors():
        container.airport_service().delete(airport_id)
    console.print(f"[green]Aeroport supprime :[/green] {airport_id}")
