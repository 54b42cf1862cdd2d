"""Sous-package CLI commands - re-exporte les commandes publiques."""

from metrowatch.adapters.cli.commands.collection_commands import (
    collections,
    get_collections,
    sync,
    test_agregarr,
)
from metrowatch.adapters.cli.commands.crawl_command import crawl
from metrowatch.adapters.cli.commands.radarr_commands import profiles, radarr

__all__ = [
    # scraping
    "crawl",
    # radarr
    "radarr",
    "profiles",
    # agregarr
    "collections",
    "sync",
    "test_agregarr",
    "get_collections",
]
