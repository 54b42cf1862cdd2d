"""
Utilitaires partages pour les commandes CLI de metrowatch.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container en premier argument
- load_snapshot : chargement d'un snapshot avec affichage de son en-tete
"""

from contextlib import contextmanager
from functools import wraps
from pathlib import Path

import httpx
import typer
from loguru import logger as loguru_logger
from rich.console import Console

from metrowatch.container import Container
from metrowatch.core.entities.catalog import Snapshot
from metrowatch.core.exceptions import MetrowatchError

# Console globale pour tous les affichages
console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("metrowatch")
    try:
        yield
    finally:
        loguru_logger.enable("metrowatch")


def with_container(func):
    """
    Decorateur qui injecte un container en premier argument.

    Les erreurs fatales (configuration, snapshot illisible, echec HTTP non
    rattrape par un service) sont affichees en rouge et terminent la commande
    avec le code 1.

    Usage:
        @with_container
        def _my_command(container, ...):
            config = container.config()
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        container = Container()
        try:
            return func(container, *args, **kwargs)
        except (MetrowatchError, httpx.HTTPError) as e:
            loguru_logger.error(f"Execution interrompue: {e}")
            console.print(f"[red]Erreur:[/red] {e}")
            raise typer.Exit(code=1) from e

    return wrapper


def load_snapshot(container: Container, path: Path) -> Snapshot:
    """Charge un snapshot et affiche son en-tete."""
    snapshot = container.catalog_store().load(path)
    console.print(
        f"[bold cyan]{path}[/bold cyan] (scrape le {snapshot.date}): "
        f"{len(snapshot.catalog)} serie(s)"
    )
    return snapshot
