"""
Service de resolution des films du catalogue vers leur ID TMDB.

CatalogMatcherService essaie les variantes de titre dans l'ordre
(voir title_normalizer) et retient le premier candidat de la premiere
variante qui en retourne au moins un. Aucun classement n'est fait entre
plusieurs candidats.

Responsabilites:
- Espacer les appels TMDB (0.25s minimum entre deux requetes)
- Laisser un film non resolu quand aucune variante ne donne de resultat
- Propager les erreurs HTTP : elles interrompent toute la passe
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from loguru import logger

from metrowatch.core.entities.catalog import Catalog, Film
from metrowatch.core.ports.api_clients import IMovieLookup
from metrowatch.services.rate_limiter import RateLimiter
from metrowatch.services.title_normalizer import title_variants


class MatchResult(Enum):
    """Resultat de la resolution d'un film."""

    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    SKIPPED = "skipped"


@dataclass
class ProgressInfo:
    """Information de progression pour le callback."""

    current: int
    total: int
    series_name: str
    film_title: str
    result: MatchResult
    tmdb_id: int = 0


@dataclass
class MatchStats:
    """Statistiques d'une passe de resolution.

    Attributes:
        resolved: Films resolus pendant la passe
        not_found: Films sans aucun candidat
        skipped: Films deja resolus, ou passe desactivee (pas de cle TMDB)
    """

    resolved: int = 0
    not_found: int = 0
    skipped: int = 0

    @property
    def total(self) -> int:
        """Nombre total de films traites."""
        return self.resolved + self.not_found + self.skipped


class CatalogMatcherService:
    """
    Resolution des films vers TMDB avec rate limiting.

    Attributes:
        RATE_LIMIT_DELAY: Delai minimal entre requetes TMDB (0.25s)

    Example:
        matcher = CatalogMatcherService(lookup=tmdb_client)
        stats = matcher.match_catalog(catalog)
        print(f"Resolus: {stats.resolved}, introuvables: {stats.not_found}")
    """

    RATE_LIMIT_DELAY: float = 0.25

    def __init__(
        self,
        lookup: Optional[IMovieLookup],
        rate_limiter: Optional[RateLimiter] = None,
        fetch_imdb_ids: bool = False,
    ) -> None:
        """
        Initialise le service de resolution.

        Args:
            lookup: Client de recherche TMDB (None si aucune cle configuree)
            rate_limiter: Limiteur partage par tous les appels TMDB
            fetch_imdb_ids: Recuperer aussi l'ID IMDb des films resolus
        """
        self._lookup = lookup
        self._rate_limiter = rate_limiter or RateLimiter(self.RATE_LIMIT_DELAY)
        self._fetch_imdb_ids = fetch_imdb_ids

    @property
    def enabled(self) -> bool:
        """La resolution n'est possible qu'avec un client TMDB."""
        return self._lookup is not None

    def resolve(self, film: Film) -> Optional[int]:
        """
        Resout un film vers son ID TMDB.

        Une requete par variante de titre, filtree par annee si connue.

        Args:
            film: Film a resoudre

        Returns:
            ID TMDB du premier candidat, ou None si aucune variante n'aboutit

        Raises:
            httpx.HTTPError: Erreur de transport ou statut non-2xx
        """
        if self._lookup is None:
            return None

        year = film.year if film.year > 0 else None
        for i, variant in enumerate(title_variants(film.title)):
            if i > 0:
                logger.debug(f"  Variante essayee: {variant}")

            self._rate_limiter.wait()
            candidates = self._lookup.search(variant, year=year)
            if candidates:
                if i > 0:
                    logger.debug(f"  Trouve avec la variante: {variant}")
                return candidates[0].id

        return None

    def _resolve_imdb_id(self, film: Film) -> None:
        """Complete l'ID IMDb d'un film resolu. Un echec n'est qu'un avertissement."""
        if self._lookup is None or film.imdb_id:
            return
        self._rate_limiter.wait()
        try:
            imdb_id = self._lookup.get_imdb_id(film.tmdb_id)
        except Exception as e:
            logger.warning(f"ID IMDb indisponible pour {film.title}: {e}")
            return
        if imdb_id:
            film.imdb_id = imdb_id

    def match_catalog(
        self,
        catalog: Catalog,
        on_progress: Optional[Callable[[ProgressInfo], None]] = None,
    ) -> MatchStats:
        """
        Resout tous les films non resolus du catalogue, en place.

        Les series sont parcourues par series_id, les films dans leur ordre.
        Un film deja resolu n'est pas recherche a nouveau.

        Args:
            catalog: Catalogue a enrichir
            on_progress: Callback appele apres chaque film (optionnel)

        Returns:
            MatchStats avec les compteurs de la passe

        Raises:
            httpx.HTTPError: La premiere erreur HTTP interrompt la passe
        """
        stats = MatchStats()
        total = catalog.film_count

        if not self.enabled:
            logger.warning("Cle TMDB absente : les films ne seront pas resolus")
            stats.skipped = total
            return stats

        current = 0
        for series in catalog.ordered():
            for film in series.films:
                current += 1

                if film.is_resolved:
                    result = MatchResult.SKIPPED
                    stats.skipped += 1
                else:
                    tmdb_id = self.resolve(film)
                    if tmdb_id is None:
                        result = MatchResult.NOT_FOUND
                        stats.not_found += 1
                        logger.info(f"Aucun resultat TMDB pour {film.title} ({film.year})")
                    else:
                        film.tmdb_id = tmdb_id
                        result = MatchResult.RESOLVED
                        stats.resolved += 1
                        logger.info(f"ID TMDB trouve pour {film.title}: {tmdb_id}")
                        if self._fetch_imdb_ids:
                            self._resolve_imdb_id(film)

                if on_progress:
                    on_progress(
                        ProgressInfo(
                            current=current,
                            total=total,
                            series_name=series.name,
                            film_title=film.title,
                            result=result,
                            tmdb_id=film.tmdb_id,
                        )
                    )

        logger.info(
            f"Resolution terminee: {stats.resolved} resolu(s), "
            f"{stats.not_found} introuvable(s), {stats.skipped} ignore(s)"
        )
        return stats
