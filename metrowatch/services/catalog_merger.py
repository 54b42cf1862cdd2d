"""
Fusion d'un catalogue fraichement scrape avec le dernier snapshot.

Les films deja connus sont conserves tels quels (avec leur ID TMDB) et
seuls les titres nouveaux sont ajoutes a la suite. Une fusion ne remet
donc jamais a zero un ID resolu, et fusionner un catalogue avec lui-meme
ne le modifie pas.
"""

from dataclasses import dataclass

from loguru import logger

from metrowatch.core.entities.catalog import Catalog, Film, Series


def merge_films(existing: list[Film], new: list[Film]) -> list[Film]:
    """
    Fusionne deux listes de films, dedupliquees par titre exact.

    Args:
        existing: Films du snapshot precedent (conserves en tete, dans l'ordre)
        new: Films scrapes (ajoutes si leur titre est absent de existing)

    Returns:
        Nouvelle liste : existing puis les films nouveaux
    """
    seen = {film.title for film in existing}
    merged = list(existing)
    for film in new:
        if film.title not in seen:
            merged.append(film)
    return merged


@dataclass
class MergeStats:
    """Statistiques de fusion.

    Attributes:
        merged_series: Series presentes dans les deux catalogues
        film_delta: Ecart cumule entre films fusionnes et films scrapes
    """

    merged_series: int = 0
    film_delta: int = 0


def merge_catalog(scraped: Catalog, stored: Catalog) -> tuple[Catalog, MergeStats]:
    """
    Fusionne le catalogue scrape avec le catalogue stocke.

    Seules les series presentes dans le scraping sont conservees : une serie
    disparue du site disparait du catalogue. Pour une serie connue des deux
    cotes, les films du snapshot passent en premier.

    Args:
        scraped: Catalogue issu du scraping
        stored: Catalogue charge depuis le snapshot precedent

    Returns:
        Tuple (catalogue fusionne, statistiques)
    """
    stats = MergeStats()
    result = Catalog()

    for series in scraped.ordered():
        previous = stored.get(series.series_id)
        if previous is None:
            result[series.series_id] = series
            continue

        films = merge_films(previous.films, series.films)
        stats.merged_series += 1
        if len(films) != len(series.films):
            stats.film_delta += len(films) - len(series.films)
            logger.info(
                f"Serie {series.name} mise a jour: {len(series.films)} -> {len(films)} film(s)"
            )
        result[series.series_id] = Series(
            name=series.name,
            url=series.url,
            series_id=series.series_id,
            films=films,
        )

    return result, stats
