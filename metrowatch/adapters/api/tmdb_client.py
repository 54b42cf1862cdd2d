"""
Client TMDB pour la recherche de films.

Implemente l'interface IMovieLookup pour TMDB (The Movie Database).
Le rate limiting est impose par l'appelant (CatalogMatcherService) :
ce client n'attend jamais et ne relance jamais.

Usage:
    client = TMDBClient(api_key="your_key")
    results = client.search("Carol", year=2015)
    client.close()
"""

from typing import Optional

import httpx

from metrowatch.adapters.api.http import DEFAULT_TIMEOUT, build_client, send
from metrowatch.core.ports.api_clients import IMovieLookup, SearchResult


class TMDBClient(IMovieLookup):
    """
    Client API TMDB.

    Implemente IMovieLookup avec:
    - Recherche de films par titre (avec filtre annee optionnel)
    - Recuperation de l'ID IMDb d'un film

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3

    Example:
        client = TMDBClient(api_key="xxx")
        results = client.search("Carol", year=2015)
        if results:
            print(results[0].id, results[0].title)
        client.close()
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API v3 ou Read Access Token v4
            timeout: Timeout HTTP en secondes
            transport: Transport httpx alternatif (tests)
        """
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Supporte les deux modes d'authentification TMDB:
        - API Key v3 (32 caracteres hex) : passe en parametre api_key
        - Read Access Token v4 (long JWT) : passe en header Bearer
        """
        if self._client is None or self._client.is_closed:
            is_v4_token = len(self._api_key) > 40

            headers = {"Accept": "application/json"}
            params = {}
            if is_v4_token:
                headers["Authorization"] = f"Bearer {self._api_key}"
            else:
                params["api_key"] = self._api_key

            self._client = build_client(
                self.TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    def search(self, query: str, year: Optional[int] = None) -> list[SearchResult]:
        """
        Recherche des films par titre.

        Args:
            query: Titre du film a rechercher
            year: Annee de sortie optionnelle pour filtrer

        Returns:
            Liste de SearchResult dans l'ordre TMDB (vide si aucun resultat)

        Raises:
            httpx.HTTPError: Erreur de transport ou statut non-2xx
        """
        params: dict[str, str | int] = {"query": query}
        if year:
            params["year"] = year

        response = send(self._get_client(), "GET", "/search/movie", params=params)
        data = response.json()

        return [
            SearchResult(
                id=int(item["id"]),
                title=item.get("title") or item.get("original_title", ""),
                release_date=item.get("release_date") or "",
            )
            for item in data.get("results", [])
        ]

    def get_imdb_id(self, movie_id: int) -> Optional[str]:
        """
        Recupere l'ID IMDb d'un film via /movie/{id}/external_ids.

        Returns:
            ID IMDb (ttXXXXXXX), ou None si absent ou film inconnu
        """
        try:
            response = send(self._get_client(), "GET", f"/movie/{movie_id}/external_ids")
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                return None
            raise
        return response.json().get("imdb_id") or None

    def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None
