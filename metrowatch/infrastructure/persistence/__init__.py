"""
Module de persistance des snapshots de catalogue.

- catalog_store.py : Lecture/ecriture des snapshots JSON dates

Usage:
    from metrowatch.infrastructure.persistence import JsonCatalogStore

    store = JsonCatalogStore(directory=Path("snapshots"))
    snapshot = store.load(Path("snapshots/2026-10-12.json"))
"""

from metrowatch.infrastructure.persistence.catalog_store import JsonCatalogStore

__all__ = ["JsonCatalogStore"]
