"""
Point d'entrée CLI de metrowatch.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import (
    collections,
    crawl,
    get_collections,
    profiles,
    radarr,
    sync,
    test_agregarr,
)
from .config import Settings
from .container import Container
from .logging_config import configure_from_settings

app = typer.Typer(
    name="metrowatch",
    help="Synchronisation des series du Metrograph avec Radarr et Agregarr",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """metrowatch - series du Metrograph vers Radarr et Agregarr."""
    configure_from_settings(get_config(), verbose=verbose, quiet=quiet)


# Pipeline de scraping
app.command()(crawl)

# Radarr
app.command()(radarr)
app.command()(profiles)

# Agregarr
app.command()(collections)
app.command()(sync)
app.command(name="test-agregarr")(test_agregarr)
app.command(name="get-collections")(get_collections)


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration metrowatch")
    typer.echo(f"Snapshots : {config.snapshot_dir}")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"Radarr : {config.radarr_host if config.radarr_enabled else 'non configuré'}")
    typer.echo(
        f"Agregarr : {config.agregarr_host if config.agregarr_enabled else 'non configuré'}"
    )
    typer.echo(f"Délai entre requêtes TMDB : {config.rate_limit_ms} ms")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"metrowatch v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    logger.debug("Démarrage de metrowatch", version=__version__)
    app()


if __name__ == "__main__":
    main()
