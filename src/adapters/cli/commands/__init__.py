"""Sous-package CLI commands - re-exporte les applications Typer publiques."""

from src.adapters.cli.commands.airline_commands import airline_app
from src.adapters.cli.commands.airport_commands import airport_app
from src.adapters.cli.commands.association_commands import association_app

__all__ = [
    "airline_app",
    "airport_app",
    "association_app",
]
