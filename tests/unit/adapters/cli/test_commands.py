"""
Tests unitaires pour les commandes CLI.

Tests couvrant:
- airline: list, show, create, update, delete
- airport: create, update, delete
- association: add, list, show, set, remove
- traduction des erreurs metier en code de sortie 1
"""

from datetime import date
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from src.core.entities.aviation import Airline, Airport
from src.core.errors import (
    AIRLINE_NOT_FOUND,
    AIRPORT_CODE_LENGTH,
    AIRPORT_NOT_FOUND,
    BadRequestError,
    NotAssociatedError,
    NotFoundError,
)
from src.main import app

runner = CliRunner()


def _flat(output: str) -> str:
    """Recolle les lignes coupees par Rich."""
    return " ".join(output.split())


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def mock_logging():
    """Empeche le callback de reconfigurer loguru (et d'ecrire logs/)."""
    with patch("src.main.configure_logging") as mock_configure:
        yield mock_configure


@pytest.fixture
def mock_container():
    """Mock le Container pour les tests.

    Patche Container dans helpers.py car c'est la que le decorateur
    @with_container() l'importe et l'instancie.
    """
    with patch("src.adapters.cli.helpers.Container") as mock_cls:
        container_instance = MagicMock()
        mock_cls.return_value = container_instance
        container_instance.database.init = MagicMock()
        yield container_instance


@pytest.fixture
def bogota() -> Airport:
    return Airport(id="A1", name="El Dorado", code="BOG", country="Colombia", city="Bogota")


@pytest.fixture
def avianca(bogota) -> Airline:
    return Airline(
        id="L1",
        name="Avianca",
        description="Compagnie colombienne",
        foundation_date=date(1919, 12, 5),
        web_page="https://www.avianca.com",
        airports=[bogota],
    )


AIRLINE_OPTIONS = [
    "--name", "Avianca",
    "--description", "Compagnie colombienne",
    "--foundation-date", "1919-12-05",
    "--web-page", "https://www.avianca.com",
]

AIRPORT_OPTIONS = [
    "--name", "El Dorado",
    "--code", "BOG",
    "--country", "Colombia",
    "--city", "Bogota",
]


# ============================================================================
# airline
# ============================================================================


class TestAirlineCommands:
    """Tests pour le groupe de commandes airline."""

    def test_list_empty(self, mock_container):
        mock_container.airline_service.return_value.find_all.return_value = []

        result = runner.invoke(app, ["airline", "list"])

        assert result.exit_code == 0
        assert "Aucune compagnie" in _flat(result.output)
        mock_container.database.init.assert_called_once()

    def test_list(self, mock_container, avianca):
        mock_container.airline_service.return_value.find_all.return_value = [avianca]

        result = runner.invoke(app, ["airline", "list"])

        assert result.exit_code == 0
        assert "Avianca" in _flat(result.output)

    def test_show(self, mock_container, avianca):
        mock_container.airline_service.return_value.find_one.return_value = avianca

        result = runner.invoke(app, ["airline", "show", "L1"])

        assert result.exit_code == 0
        assert "Avianca" in _flat(result.output)
        assert "BOG" in _flat(result.output)
        mock_container.airline_service.return_value.find_one.assert_called_once_with("L1")

    def test_show_not_found(self, mock_container):
        mock_container.airline_service.return_value.find_one.side_effect = NotFoundError(
            AIRLINE_NOT_FOUND
        )

        result = runner.invoke(app, ["airline", "show", "0"])

        assert result.exit_code == 1
        assert "404" in _flat(result.output)
        assert "was not found" in _flat(result.output)

    def test_create_passes_entity(self, mock_container, avianca):
        service = mock_container.airline_service.return_value
        service.create.return_value = avianca

        result = runner.invoke(app, ["airline", "create", *AIRLINE_OPTIONS])

        assert result.exit_code == 0
        assert "Compagnie creee" in _flat(result.output)
        created = service.create.call_args.args[0]
        assert created.id is None
        assert created.foundation_date == date(1919, 12, 5)

    def test_create_invalid_url(self, mock_container):
        options = list(AIRLINE_OPTIONS)
        options[options.index("https://www.avianca.com")] = "nope"

        result = runner.invoke(app, ["airline", "create", *options])

        assert result.exit_code == 1
        assert "400" in _flat(result.output)
        mock_container.airline_service.return_value.create.assert_not_called()

    def test_update(self, mock_container, avianca):
        service = mock_container.airline_service.return_value
        service.update.return_value = avianca

        result = runner.invoke(app, ["airline", "update", "L1", *AIRLINE_OPTIONS])

        assert result.exit_code == 0
        assert service.update.call_args.args[0] == "L1"

    def test_update_future_date(self, mock_container):
        service = mock_container.airline_service.return_value
        service.update.side_effect = BadRequestError("The aerolinea foundation date should be in the past")

        result = runner.invoke(app, ["airline", "update", "L1", *AIRLINE_OPTIONS])

        assert result.exit_code == 1
        assert "foundation date" in _flat(result.output)

    def test_delete(self, mock_container):
        result = runner.invoke(app, ["airline", "delete", "L1"])

        assert result.exit_code == 0
        mock_container.airline_service.return_value.delete.assert_called_once_with("L1")


# ============================================================================
# airport
# ============================================================================


class TestAirportCommands:
    """Tests pour le groupe de commandes airport."""

    def test_create(self, mock_container, bogota):
        service = mock_container.airport_service.return_value
        service.create.return_value = bogota

        result = runner.invoke(app, ["airport", "create", *AIRPORT_OPTIONS])

        assert result.exit_code == 0
        assert service.create.call_args.args[0].code == "BOG"

    def test_create_bad_code(self, mock_container):
        service = mock_container.airport_service.return_value
        service.create.side_effect = BadRequestError(AIRPORT_CODE_LENGTH)

        result = runner.invoke(app, ["airport", "create", *AIRPORT_OPTIONS])

        assert result.exit_code == 1
        assert "3 characters" in _flat(result.output)

    def test_create_missing_option(self, mock_container):
        result = runner.invoke(app, ["airport", "create", "--name", "El Dorado"])

        assert result.exit_code != 0
        mock_container.airport_service.return_value.create.assert_not_called()

    def test_update(self, mock_container, bogota):
        service = mock_container.airport_service.return_value
        service.update.return_value = bogota

        result = runner.invoke(app, ["airport", "update", "A1", *AIRPORT_OPTIONS])

        assert result.exit_code == 0
        assert service.update.call_args.args[0] == "A1"

    def test_delete_not_found(self, mock_container):
        service = mock_container.airport_service.return_value
        service.delete.side_effect = NotFoundError(AIRPORT_NOT_FOUND)

        result = runner.invoke(app, ["airport", "delete", "0"])

        assert result.exit_code == 1
        assert "was not found" in _flat(result.output)


# ============================================================================
# association
# ============================================================================


class TestAssociationCommands:
    """Tests pour le groupe de commandes association."""

    def test_add(self, mock_container, avianca):
        service = mock_container.airline_airport_service.return_value
        service.add_airport_to_airline.return_value = avianca

        result = runner.invoke(app, ["association", "add", "L1", "A1"])

        assert result.exit_code == 0
        service.add_airport_to_airline.assert_called_once_with("L1", "A1")

    def test_list(self, mock_container, bogota):
        service = mock_container.airline_airport_service.return_value
        service.find_airports_by_airline_id.return_value = [bogota]

        result = runner.invoke(app, ["association", "list", "L1"])

        assert result.exit_code == 0
        assert "BOG" in _flat(result.output)

    def test_list_empty(self, mock_container):
        service = mock_container.airline_airport_service.return_value
        service.find_airports_by_airline_id.return_value = []

        result = runner.invoke(app, ["association", "list", "L1"])

        assert result.exit_code == 0
        assert "Aucun aeroport" in _flat(result.output)

    def test_show_not_associated(self, mock_container):
        service = mock_container.airline_airport_service.return_value
        service.find_airport_by_airline_id_airport_id.side_effect = NotAssociatedError()

        result = runner.invoke(app, ["association", "show", "L1", "A9"])

        assert result.exit_code == 1
        assert "412" in _flat(result.output)
        assert "not associated" in _flat(result.output)

    def test_set_builds_airport_refs(self, mock_container, avianca):
        service = mock_container.airline_airport_service.return_value
        service.update_airports_for_airline.return_value = avianca

        result = runner.invoke(app, ["association", "set", "L1", "A1", "A2"])

        assert result.exit_code == 0
        airline_id, airports = service.update_airports_for_airline.call_args.args
        assert airline_id == "L1"
        assert [a.id for a in airports] == ["A1", "A2"]

    def test_set_without_ids_clears_list(self, mock_container, avianca):
        """Sans ID, la liste de la compagnie est remplacee par une liste vide."""
        service = mock_container.airline_airport_service.return_value
        service.update_airports_for_airline.return_value = avianca

        result = runner.invoke(app, ["association", "set", "L1"])

        assert result.exit_code == 0
        service.update_airports_for_airline.assert_called_once_with("L1", [])

    def test_remove(self, mock_container):
        result = runner.invoke(app, ["association", "remove", "L1", "A1"])

        assert result.exit_code == 0
        service = mock_container.airline_airport_service.return_value
        service.delete_airport_from_airline.assert_called_once_with("L1", "A1")


class TestQuietOption:
    """Tests pour l'option globale --quiet."""

    def test_quiet_forwarded_to_logging(self, mock_container, mock_logging):
        mock_container.airline_service.return_value.find_all.return_value = []

        result = runner.invoke(app, ["--quiet", "airline", "list"])

        assert result.exit_code == 0
        assert mock_logging.call_args.kwargs["quiet"] is True

    def test_default_not_quiet(self, mock_container, mock_logging):
        mock_container.airline_service.return_value.find_all.return_value = []

        runner.invoke(app, ["airline", "list"])

        assert mock_logging.call_args.kwargs["quiet"] is False


class TestInitDb:
    """Tests pour la commande init-db."""

    def test_init_db(self):
        with patch("src.main.container") as container:
            container.config.return_value = MagicMock(database_url="sqlite:///x.db")
            result = runner.invoke(app, ["init-db"])

        assert result.exit_code == 0
        container.database.init.assert_called_once()
        assert "sqlite:///x.db" in _flat(result.output)
