"""
Configuration du logging de l'application via loguru.

Deux sorties :
- console (stderr) : colorée, au niveau choisi par la configuration ou par -v/-q
- fichier : JSON sérialisé, niveau DEBUG, avec rotation, pour relire une exécution
  (requêtes HTTP, variantes de titres essayées, opérations Radarr/Agregarr)
"""

import sys
from pathlib import Path

from loguru import logger

from metrowatch.config import Settings

# -v : DEBUG, -vv et plus : TRACE
_VERBOSITY_LEVELS = {1: "DEBUG", 2: "TRACE"}


def console_level(base_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """Niveau console effectif selon les options -v/-q de la CLI."""
    if quiet:
        return "ERROR"
    if verbose > 0:
        return _VERBOSITY_LEVELS.get(min(verbose, 2), base_level)
    return base_level.upper()


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/metrowatch.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure les handlers loguru.

    Args :
        log_level : Niveau de log minimum pour la sortie console
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB")
        retention_count : Nombre de fichiers rotatifs à conserver
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level=log_level,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
            "<level>{message}</level>"
        ),
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
    )

    logger.debug("Logging configuré", log_file=str(log_file), level=log_level)


def configure_from_settings(settings: Settings, verbose: int = 0, quiet: bool = False) -> None:
    """Configure le logging à partir des Settings et des options de la CLI."""
    configure_logging(
        log_level=console_level(settings.log_level, verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
