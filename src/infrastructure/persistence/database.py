"""
Configuration de la base de donnees pour AeroReg.

Ce module fournit :
- Engine SQLModel cree a la demande depuis la configuration
- Session factory avec context manager
- Fonction d'initialisation des tables

La base de donnees est configuree via AEROREG_DATABASE_URL (defaut: sqlite:///aeroreg.db).
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def get_engine() -> Engine:
    """
    Retourne l'engine de la base, en le creant si necessaire.

    Utilise la configuration de l'application pour l'URL de la BDD.
    """
    global _engine
    if _engine is None:
        from src.config import Settings
        settings = Settings()

        db_url = settings.database_url
        connect_args = {}
        if db_url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
            # Creer le repertoire parent si l'URL est un fichier SQLite
            if db_url.startswith("sqlite:///") and not db_url.startswith("sqlite:///:memory:"):
                db_path = Path(db_url.replace("sqlite:///", ""))
                db_path.parent.mkdir(exist_ok=True, parents=True)

        _engine = create_engine(
            db_url,
            echo=settings.database_echo,
            connect_args=connect_args,
        )
    return _engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation avec next() :
        session = next(get_session())

    Ou avec context manager :
        with Session(get_engine()) as session:
            # operations

    Yields:
        Session SQLModel connectee a l'engine
    """
    with Session(get_engine()) as session:
        yield session


def init_db() -> None:
    """
    Initialise la base de donnees en creant toutes les tables.

    Importe les modeles pour enregistrer leurs metadonnees dans
    SQLModel.metadata, puis cree les tables manquantes.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # L'import est fait ici pour eviter les imports circulaires
    from src.infrastructure.persistence import models  # noqa: F401

    engine = get_engine()
    SQLModel.metadata.create_all(engine)
    logger.debug("Tables initialisees", url=str(engine.url))
