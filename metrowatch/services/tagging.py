"""
Service de synchronisation des films et tags Radarr.

Pour chaque serie eligible, TaggingService garantit l'existence du tag
"metrograph-<id>" et l'ajout de chaque film resolu avec ce tag. L'ajout est
idempotent : un film deja present dans Radarr recoit simplement les tags
manquants, sans doublon, et n'est pas modifie s'il les a deja tous.
"""

from dataclasses import dataclass
from enum import Enum

from loguru import logger

from metrowatch.core.entities.catalog import Catalog, Film, Series
from metrowatch.core.entities.downstream import AddMovieOutcome, tag_label
from metrowatch.core.ports.api_clients import ITaggingService


class TagResult(Enum):
    """Resultat de l'association d'un film a ses tags."""

    ADDED = "added"
    TAGGED = "tagged"
    UNCHANGED = "unchanged"


@dataclass
class TaggingReport:
    """Bilan d'une passe de tagging.

    Attributes:
        series: Series traitees (tag obtenu)
        series_failed: Series ignorees faute de tag
        added: Films ajoutes a Radarr
        tagged: Films existants auxquels un tag a ete ajoute
        unchanged: Films existants portant deja tous les tags
        failed: Films en echec
    """

    series: int = 0
    series_failed: int = 0
    added: int = 0
    tagged: int = 0
    unchanged: int = 0
    failed: int = 0


class TaggingService:
    """
    Synchronisation idempotente des films d'un catalogue vers Radarr.

    Example:
        service = TaggingService(tagging=radarr_client)
        report = service.tag_catalog(snapshot.catalog)
    """

    def __init__(self, tagging: ITaggingService) -> None:
        """
        Args:
            tagging: Client du systeme d'acquisition (Radarr)
        """
        self._tagging = tagging

    def ensure_tag(self, series_id: str) -> int:
        """Retourne l'ID du tag d'une serie, en le creant si absent."""
        return self._tagging.create_or_get_tag(tag_label(series_id))

    def ensure_movie_tagged(self, film: Film, tag_ids: list[int]) -> TagResult:
        """
        Ajoute un film a Radarr, ou complete ses tags s'il y est deja.

        Args:
            film: Film resolu (tmdb_id > 0)
            tag_ids: Tags a porter

        Returns:
            TagResult decrivant l'operation effectuee

        Raises:
            LookupError: Radarr signale le film comme existant mais ne le retrouve pas
            httpx.HTTPError: Erreur de transport ou statut non-2xx
        """
        outcome = self._tagging.add_movie(film.tmdb_id, film.title, film.year, tag_ids)
        if outcome is AddMovieOutcome.ADDED:
            logger.info(f"Film '{film.title}' ({film.year}) ajoute a Radarr")
            return TagResult.ADDED

        existing = self._tagging.get_movie_by_tmdb_id(film.tmdb_id)
        if existing is None:
            raise LookupError(f"Film TMDB {film.tmdb_id} introuvable dans Radarr")

        updated = list(existing.tags)
        for tag_id in tag_ids:
            if tag_id not in updated:
                updated.append(tag_id)

        added_count = len(updated) - len(existing.tags)
        if added_count == 0:
            logger.debug(f"Film '{film.title}' ({film.year}) porte deja tous les tags")
            return TagResult.UNCHANGED

        self._tagging.update_movie_tags(existing.id, updated)
        logger.info(
            f"{added_count} tag(s) ajoute(s) au film existant '{film.title}' ({film.year})"
        )
        return TagResult.TAGGED

    def tag_series(self, series: Series, report: TaggingReport) -> None:
        """Tagge tous les films resolus d'une serie. Les echecs sont comptes."""
        try:
            tag_id = self.ensure_tag(series.series_id)
        except Exception as e:
            logger.warning(f"Impossible de creer le tag de la serie {series.name}: {e}")
            report.series_failed += 1
            return

        report.series += 1
        done = 0
        for film in series.films:
            if not film.is_resolved:
                continue
            try:
                result = self.ensure_movie_tagged(film, [tag_id])
            except Exception as e:
                logger.warning(f"Echec de l'ajout du film {film.title}: {e}")
                report.failed += 1
                continue

            done += 1
            if result is TagResult.ADDED:
                report.added += 1
            elif result is TagResult.TAGGED:
                report.tagged += 1
            else:
                report.unchanged += 1

        logger.info(
            f"{done}/{series.valid_movie_count} film(s) synchronise(s) pour la serie '{series.name}'"
        )

    def tag_catalog(self, catalog: Catalog) -> TaggingReport:
        """
        Tagge les series eligibles du catalogue, par series_id.

        Args:
            catalog: Catalogue (les series non eligibles sont ignorees)

        Returns:
            TaggingReport avec les compteurs
        """
        report = TaggingReport()
        for series in catalog.eligible().ordered():
            self.tag_series(series, report)
        return report
