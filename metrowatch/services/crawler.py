"""
Construction du catalogue brut a partir du site du cinema.

CatalogCrawlerService parcourt les series publiees, extrait leur ID depuis
le parametre vista_series_id de l'URL et decode les metadonnees de chaque
film ("realisateur / annee" ou "annee").
"""

from typing import Callable, Optional
from urllib.parse import parse_qs, urlparse

from loguru import logger

from metrowatch.core.entities.catalog import Catalog, Film, Series
from metrowatch.core.exceptions import ScrapeError
from metrowatch.core.ports.scraper import ISeriesSource

SERIES_ID_PARAM = "vista_series_id"
MIN_YEAR = 1801
MAX_YEAR = 2099


def extract_series_id(url: str) -> str:
    """
    Extrait l'ID de serie du parametre vista_series_id.

    Raises:
        ScrapeError: Le parametre est absent ou vide
    """
    values = parse_qs(urlparse(url).query).get(SERIES_ID_PARAM)
    if not values or not values[0]:
        raise ScrapeError(f"{SERIES_ID_PARAM} absent de l'URL {url}")
    return values[0]


def _parse_year(token: str) -> Optional[int]:
    return int(token) if token.isascii() and token.isdigit() else None


def parse_film_metadata(text: str) -> tuple[str, int]:
    """
    Decode le texte de metadonnees d'un film.

    - "Todd Haynes / 2015" -> ("Todd Haynes", 2015)
    - "2015 / 118min" -> ("", 2015) : un premier token entre 1801 et 2099 est une annee
    - "2015" -> ("", 2015)
    - "" -> ("", 0)

    Args:
        text: Texte brut, parties separees par "/"

    Returns:
        Tuple (realisateur, annee), annee a 0 si inconnue
    """
    if not text or not text.strip():
        return "", 0

    parts = [part.strip() for part in text.split("/")]
    first = parts[0]

    year = _parse_year(first)
    if year is not None and MIN_YEAR <= year <= MAX_YEAR:
        return "", year

    director = first
    if len(parts) >= 2:
        year = _parse_year(parts[1])
        if year is not None:
            return director, year
    return director, 0


class CatalogCrawlerService:
    """
    Scraping des series et de leurs films.

    Example:
        crawler = CatalogCrawlerService(source=MetrographScraper())
        catalog = crawler.crawl()
    """

    def __init__(self, source: ISeriesSource) -> None:
        self._source = source

    def crawl(
        self, on_series: Optional[Callable[[Series], None]] = None
    ) -> Catalog:
        """
        Scrape toutes les series publiees.

        Args:
            on_series: Callback appele apres chaque serie scrapee (optionnel)

        Returns:
            Catalogue non resolu (tmdb_id a 0)

        Raises:
            ScrapeError: URL de serie sans ID
            httpx.HTTPError: Erreur de transport ou statut non-2xx
        """
        catalog = Catalog()
        for link in self._source.list_series():
            series_id = extract_series_id(link.url)
            if series_id in catalog:
                logger.debug(f"Serie deja scrapee: {link.name} ({series_id})")
                continue

            logger.info(f"Serie trouvee: {link.name} -> {link.url}")
            series = Series(name=link.name, url=link.url, series_id=series_id)
            catalog[series_id] = series

            for entry in self._source.list_films(link.url):
                title = entry.title.strip()
                if not title:
                    continue
                director, year = parse_film_metadata(entry.metadata)
                series.films.append(Film(title=title, director=director, year=year))

            if on_series:
                on_series(series)

        logger.info(f"{len(catalog)} serie(s), {catalog.film_count} film(s) scrapes")
        return catalog
