"""
Commandes CLI de gestion des compagnies aeriennes (list, show, create, update, delete).
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
from src.core.dtos import AirlineDto, validate_dto

airline_app = typer.Typer(
    name="airline",
    help="Gestion des compagnies aeriennes",
    rich_markup_mode="rich",
)

NameOption = Annotated[str, typer.Option("--name", "-n", help="Nom de la compagnie")]
DescriptionOption = Annotated[str, typer.Option("--description", "-d", help="Description")]
FoundationOption = Annotated[
    str,
    typer.Option("--foundation-date", "-f", help="Date de fondation (AAAA-MM-JJ)"),
]
WebPageOption = Annotated[str, typer.Option("--web-page", "-w", help="URL du site web")]


@airline_app.command("list")
def list_airlines() -> None:
    """Liste toutes les compagnies."""
    _list_airlines()


@with_container()
def _list_airlines(container) -> None:
    with suppress_loguru():
        airlines = container.airline_service().find_all()
    if not airlines:
        console.print("[dim]Aucune compagnie enregistree.[/dim]")
        return
    render_airlines(airlines)


@airline_app.command("show")
def show_airline(
    airline_id: Annotated[str, typer.Argument(help="ID de la compagnie")],
) -> None:
    """Affiche une compagnie et ses aeroports."""
    _show_airline(airline_id)


@with_container()
def _show_airline(container, airline_id: str) -> None:
    with report_business_errors():
        airline = container.airline_service().find_one(airline_id)

    console.print(f"\n[bold cyan]{airline.name}[/bold cyan] [dim]({airline.id})[/dim]")
    console.print(f"  {airline.description}")
    console.print(f"  Fondation : {airline.foundation_date}")
    console.print(f"  Site web  : {airline.web_page}\n")
    render_airports(airline.airports, title="Aeroports associes")


@airline_app.command("create")
def create_airline(
    name: NameOption,
    description: DescriptionOption,
    foundation_date: FoundationOption,
    web_page: WebPageOption,
) -> None:
    """Cree une compagnie (la date de fondation n'est pas controlee ici)."""
    _create_airline({
        "name": name,
        "description": description,
        "foundation_date": foundation_date,
        "web_page": web_page,
    })


@with_container()
def _create_airline(container, payload: dict) -> None:
    with report_business_errors():
        dto = validate_dto(AirlineDto, payload)
        airline = container.airline_service().create(dto.to_entity())
    console.print(f"[green]Compagnie creee :[/green] {airline.name} [dim]({airline.id})[/dim]")


@airline_app.command("update")
def update_airline(
    airline_id: Annotated[str, typer.Argument(help="ID de la compagnie")],
    name: NameOption,
    description: DescriptionOption,
    foundation_date: FoundationOption,
    web_page: WebPageOption,
) -> None:
    """Remplace les champs d'une compagnie (les aeroports associes sont conserves)."""
    _update_airline(airline_id, {
        "name": name,
        "description": description,
        "foundation_date": foundation_date,
        "web_page": web_page,
    })


@with_container()
def _update_airline(container, airline_id: str, payload: dict) -> None:
    with report_business_errors():
        dto = validate_dto(AirlineDto, payload)
        airline = container.airline_service().update(airline_id, dto.to_entity())
    console.print(f"[green]Compagnie modifiee :[/green] {airline.name} [dim]({airline.id})[/dim]")


@airline_app.command("delete")
def delete_airline(
    airline_id: Annotated[str, typer.Argument(help="ID de la compagnie")],
) -> None:
    """Supprime une compagnie (ses aeroports sont conserves)."""
    _delete_airline(airline_id)


@with_container()
def _delete_airline(container, airline_id: str) -> None:
    with report_business_errors():
        container.airline_service().delete(airline_id)
    console.print(f"[green]Compagnie supprimee :[/green] {airline_id}")
