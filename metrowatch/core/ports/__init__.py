"""
Ports (interfaces abstraites) definissant les contrats pour les adaptateurs.

Les ports sont les frontieres de l'architecture hexagonale. Ils definissent
ce dont le domaine a besoin du monde exterieur sans specifier
comment ces besoins sont satisfaits.

Ports client API :
- IMovieLookup : Recherche dans la base de films (TMDB)
- ITaggingService : Tags et films du systeme d'acquisition (Radarr)
- ICollectionService : Collections du systeme de curation (Agregarr)
- SearchResult : Resultat de recherche

Port scraping :
- ISeriesSource : Series et films publies par le cinema
"""

from metrowatch.core.ports.api_clients import (
    ICollectionService,
    IMovieLookup,
    ITaggingService,
    SearchResult,
)
from metrowatch.core.ports.scraper import FilmEntry, ISeriesSource, SeriesLink

__all__ = [
    # Clients API
    "ICollectionService",
    "IMovieLookup",
    "ITaggingService",
    "SearchResult",
    # Scraping
    "FilmEntry",
    "ISeriesSource",
    "SeriesLink",
]
