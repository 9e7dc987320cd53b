"""
Configuration du logging d'AeroReg via loguru.

Deux sorties :
- console : niveau issu de Settings.log_level, releve a ERROR en mode --quiet,
  avec les identifiants de compagnie/aeroport lies au message
- fichier : JSON avec rotation, tous niveaux, y compris en mode --quiet

Les services journalisent avec des kwargs (airline_id=..., airport_id=...) ;
loguru les range dans record["extra"], d'ou ils sont repris ici.
"""

import sys

from loguru import logger

from src.config import Settings

# Cles de contexte affichees en fin de ligne console, dans cet ordre
CONTEXT_KEYS = ("airline_id", "airport_id", "total")

_CONSOLE_PREFIX = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level>"
)


def format_console(record) -> str:
    """Construit le gabarit console, suivi du contexte present dans extra."""
    context = " ".join(
        f"{key}={{extra[{key}]}}" for key in CONTEXT_KEYS if key in record["extra"]
    )
    suffix = f" <dim>[{context}]</dim>" if context else ""
    return _CONSOLE_PREFIX + suffix + "\n{exception}"


def configure_logging(settings: Settings, quiet: bool = False) -> None:
    """
    (Re)configure les handlers loguru a partir de la configuration.

    Args:
        settings: Configuration de l'application (niveau, fichier, rotation)
        quiet: Si True, la console n'affiche que les erreurs
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level="ERROR" if quiet else settings.log_level,
        format=format_console,
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        "Logging configure",
        log_file=str(settings.log_file),
        console_level="ERROR" if quiet else settings.log_level,
    )
