"""
Stockage JSON des snapshots de catalogue.

Un snapshot par execution, ecrit dans un fichier nomme d'apres la date du
jour (YYYY-MM-DD.json). Seules les series eligibles (plus de 2 films avec un
ID TMDB) sont ecrites. Les identifiants nuls ou vides sont omis du JSON.

Format:
    {
      "date": "2026-10-19",
      "collections": {
        "12345": {
          "name": "...", "url": "...", "id": "12345",
          "movies": [{"title": "...", "director": "...", "year": 1999,
                      "tmdb_id": 42, "imdb_id": "tt0000042"}]
        }
      }
    }
"""

import json
from datetime import date
from pathlib import Path
from typing import Any, Callable, Optional

from loguru import logger

from metrowatch.core.entities.catalog import Catalog, Film, Series, Snapshot
from metrowatch.core.exceptions import SnapshotCorruptError, SnapshotNotFoundError


def film_to_dict(film: Film) -> dict[str, Any]:
    """Encode un film, sans les identifiants non resolus."""
    data: dict[str, Any] = {
        "title": film.title,
        "director": film.director,
        "year": film.year,
    }
    if film.tmdb_id > 0:
        data["tmdb_id"] = film.tmdb_id
    if film.imdb_id:
        data["imdb_id"] = film.imdb_id
    return data


def film_from_dict(data: dict[str, Any]) -> Film:
    """Decode un film. Le titre est obligatoire."""
    return Film(
        title=data["title"],
        director=data.get("director") or "",
        year=int(data.get("year") or 0),
        tmdb_id=int(data.get("tmdb_id") or 0),
        imdb_id=data.get("imdb_id") or "",
    )


def series_to_dict(series: Series) -> dict[str, Any]:
    """Encode une serie et ses films, dans l'ordre."""
    return {
        "name": series.name,
        "url": series.url,
        "id": series.series_id,
        "movies": [film_to_dict(film) for film in series.films],
    }


def series_from_dict(series_id: str, data: dict[str, Any]) -> Series:
    """Decode une serie. La cle du dictionnaire fait foi pour l'ID."""
    return Series(
        name=data["name"],
        url=data.get("url") or "",
        series_id=data.get("id") or series_id,
        films=[film_from_dict(item) for item in data.get("movies") or []],
    )


def snapshot_to_dict(snapshot: Snapshot) -> dict[str, Any]:
    """Encode un snapshot, series triees par ID."""
    return {
        "date": snapshot.date,
        "collections": {
            series.series_id: series_to_dict(series)
            for series in snapshot.catalog.ordered()
        },
    }


def snapshot_from_dict(data: dict[str, Any]) -> Snapshot:
    """Decode un snapshot. Leve KeyError/TypeError/ValueError si malforme."""
    collections = data["collections"] or {}
    catalog = Catalog()
    for series_id, item in collections.items():
        series = series_from_dict(series_id, item)
        catalog[series.series_id] = series
    return Snapshot(date=str(data["date"]), catalog=catalog)


class JsonCatalogStore:
    """
    Lecture et ecriture des snapshots JSON.

    Example:
        store = JsonCatalogStore(directory=Path("snapshots"))
        previous = store.load(Path("snapshots/2026-10-12.json"))
        path = store.save(catalog)  # snapshots/<aujourd'hui>.json
    """

    def __init__(
        self,
        directory: Path = Path("."),
        today: Callable[[], date] = date.today,
    ) -> None:
        """
        Initialise le store.

        Args:
            directory: Repertoire des snapshots (cree a l'ecriture si absent)
            today: Fournisseur de la date du jour (injectable pour les tests)
        """
        self._directory = directory
        self._today = today

    def path_for(self, day: str) -> Path:
        """Chemin du snapshot d'une date donnee."""
        return self._directory / f"{day}.json"

    def load(self, path: Path) -> Snapshot:
        """
        Charge un snapshot.

        Args:
            path: Fichier JSON a lire

        Returns:
            Le snapshot decode

        Raises:
            SnapshotNotFoundError: Le fichier n'existe pas
            SnapshotCorruptError: Le fichier existe mais ne peut pas etre decode
        """
        if not path.exists():
            raise SnapshotNotFoundError(path)

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            snapshot = snapshot_from_dict(data)
        except (OSError, json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            raise SnapshotCorruptError(path, str(e)) from e

        logger.debug(
            f"Snapshot charge: {path} ({snapshot.date}, {len(snapshot.catalog)} serie(s))"
        )
        return snapshot

    def save(self, catalog: Catalog, path: Optional[Path] = None) -> Path:
        """
        Ecrit les series eligibles du catalogue, datees du jour.

        Args:
            catalog: Catalogue complet (filtre ici)
            path: Fichier cible (defaut: <directory>/<date du jour>.json)

        Returns:
            Chemin du fichier ecrit
        """
        day = self._today().isoformat()
        snapshot = Snapshot(date=day, catalog=catalog.eligible())
        target = path or self.path_for(day)

        target.parent.mkdir(parents=True, exist_ok=True)
        # Ecriture dans un fichier temporaire puis remplacement atomique :
        # un snapshot existant n'est jamais laisse a moitie ecrit.
        temp_path = target.with_suffix(target.suffix + ".tmp")
        try:
            temp_path.write_text(
                json.dumps(snapshot_to_dict(snapshot), ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
            temp_path.replace(target)
        finally:
            temp_path.unlink(missing_ok=True)

        logger.info(f"Resultats ecrits dans {target}")
        logger.info(
            f"{len(catalog)} serie(s) au total, "
            f"{len(snapshot.catalog)} serie(s) avec plus de 2 films resolus"
        )
        return target
