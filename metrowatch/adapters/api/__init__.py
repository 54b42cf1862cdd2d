"""
Clients API externes.

Ce module fournit les adaptateurs pour communiquer avec les API externes:
- TMDB: The Movie Database pour la resolution des films
- Radarr: tags et films du systeme d'acquisition
- Agregarr: collections du systeme de curation

Infrastructure partagee:
- build_client / send: client httpx synchrone, erreurs HTTP propagees sans retry

Les clients implementent les ports definis dans core/ports/api_clients.py.
"""

from metrowatch.adapters.api.agregarr_client import AgregarrClient
from metrowatch.adapters.api.radarr_client import RadarrClient
from metrowatch.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "AgregarrClient",
    "RadarrClient",
    "TMDBClient",
]
