"""
Client Radarr (API v3) pour les tags et les films.

Implemente ITaggingService. La creation de tag est idempotente par label, et
l'ajout d'un film deja connu de Radarr est classe en
AddMovieOutcome.ALREADY_EXISTS au lieu de lever une erreur : la detection
textuelle de la reponse Radarr reste confinee a cet adaptateur.

Usage:
    client = RadarrClient(host="https://radarr.local", api_key="xxx", defaults=defaults)
    tag_id = client.create_or_get_tag("metrograph-12345")
    outcome = client.add_movie(64690, "Carol", 2015, [tag_id])
    client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from metrowatch.adapters.api.http import DEFAULT_TIMEOUT, build_client, send
from metrowatch.core.entities.downstream import (
    AddMovieOutcome,
    QualityProfile,
    RadarrDefaults,
    RadarrMovie,
    Tag,
)
from metrowatch.core.exceptions import TagNotFoundError
from metrowatch.core.ports.api_clients import ITaggingService

# Reponses Radarr signalant un film deja present
ALREADY_EXISTS_CODES = ("MovieExistsValidator",)
ALREADY_EXISTS_MESSAGES = ("already been added", "already exists")


def is_already_exists_response(response: httpx.Response) -> bool:
    """
    Indique si une reponse d'erreur signale un film deja present.

    Radarr repond 400 avec une liste d'erreurs de validation, par exemple
    [{"propertyName": "TmdbId", "errorMessage": "This movie has already been
    added", "errorCode": "MovieExistsValidator"}].
    """
    if response.status_code not in (400, 409):
        return False

    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        payload = [payload]
    if not isinstance(payload, list):
        payload = []
    for error in payload:
        if not isinstance(error, dict):
            continue
        if error.get("errorCode") in ALREADY_EXISTS_CODES:
            return True
        message = str(error.get("errorMessage") or error.get("message") or "")
        if any(text in message for text in ALREADY_EXISTS_MESSAGES):
            return True

    return any(text in response.text for text in ALREADY_EXISTS_MESSAGES)


class RadarrClient(ITaggingService):
    """
    Client API Radarr v3.

    Attributes:
        API_PREFIX: Prefixe des routes de l'API
    """

    API_PREFIX = "/api/v3"

    def __init__(
        self,
        host: str,
        api_key: str,
        defaults: RadarrDefaults = RadarrDefaults(),
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialise le client Radarr.

        Args:
            host: URL de l'instance (ex: https://radarr.local:7878)
            api_key: Cle API Radarr
            defaults: Parametres appliques aux films ajoutes
            timeout: Timeout HTTP en secondes
            verify_ssl: Verification du certificat TLS
            transport: Transport httpx alternatif (tests)
        """
        self._host = host.rstrip("/")
        self._api_key = api_key
        self._defaults = defaults
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    def _get_client(self) -> httpx.Client:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = build_client(
                f"{self._host}{self.API_PREFIX}",
                headers={"X-Api-Key": self._api_key, "Accept": "application/json"},
                timeout=self._timeout,
                verify=self._verify_ssl,
                transport=self._transport,
            )
        return self._client

    # -------------------------------------------------------------------------
    # Tags
    # -------------------------------------------------------------------------

    def list_tags(self) -> list[Tag]:
        response = send(self._get_client(), "GET", "/tag")
        return [Tag(id=int(item["id"]), label=item["label"]) for item in response.json()]

    def get_tag_id(self, label: str) -> int:
        """
        Retourne l'ID du tag portant ce label.

        Raises:
            TagNotFoundError: Aucun tag ne porte ce label
        """
        for tag in self.list_tags():
            if tag.label == label:
                return tag.id
        raise TagNotFoundError(label)

    def create_tag(self, label: str) -> int:
        """Cree un tag sans verifier son existence. Retourne son ID."""
        response = send(self._get_client(), "POST", "/tag", json={"label": label})
        tag_id = int(response.json()["id"])
        logger.info(f"Tag '{label}' cree avec l'ID {tag_id}")
        return tag_id

    def create_or_get_tag(self, label: str) -> int:
        """
        Retourne l'ID du tag portant ce label, en le creant si absent.

        Args:
            label: Label du tag (ex: "metrograph-12345")

        Returns:
            ID du tag existant ou cree
        """
        try:
            tag_id = self.get_tag_id(label)
        except TagNotFoundError:
            return self.create_tag(label)
        logger.debug(f"Tag '{label}' existe deja avec l'ID {tag_id}")
        return tag_id

    def delete_tag(self, label: str) -> None:
        """
        Supprime le tag portant ce label.

        Raises:
            TagNotFoundError: Aucun tag ne porte ce label
            httpx.HTTPError: Echec de la suppression
        """
        tag_id = self.get_tag_id(label)
        send(self._get_client(), "DELETE", f"/tag/{tag_id}")
        logger.info(f"Tag Radarr '{label}' supprime (ID {tag_id})")

    # -------------------------------------------------------------------------
    # Films
    # -------------------------------------------------------------------------

    def add_movie(
        self, tmdb_id: int, title: str, year: int, tag_ids: list[int]
    ) -> AddMovieOutcome:
        """
        Ajoute un film a Radarr avec les parametres par defaut.

        Returns:
            ADDED, ou ALREADY_EXISTS si Radarr connait deja ce film

        Raises:
            httpx.HTTPError: Toute autre erreur
        """
        payload: dict[str, Any] = {
            "title": title,
            "year": year,
            "tmdbId": tmdb_id,
            "qualityProfileId": self._defaults.quality_profile_id,
            "rootFolderPath": self._defaults.root_folder_path,
            "monitored": self._defaults.monitored,
            "tags": list(tag_ids),
            "addOptions": {"searchForMovie": self._defaults.search_for_movie},
        }
        try:
            send(self._get_client(), "POST", "/movie", json=payload)
        except httpx.HTTPStatusError as e:
            if is_already_exists_response(e.response):
                logger.debug(f"Film '{title}' ({year}) deja present dans Radarr")
                return AddMovieOutcome.ALREADY_EXISTS
            raise
        return AddMovieOutcome.ADDED

    def _get_movie_payload(self, movie_id: int) -> dict[str, Any]:
        return send(self._get_client(), "GET", f"/movie/{movie_id}").json()

    def get_movie_by_tmdb_id(self, tmdb_id: int) -> Optional[RadarrMovie]:
        response = send(self._get_client(), "GET", "/movie", params={"tmdbId": tmdb_id})
        movies = response.json()
        if not movies:
            return None
        item = movies[0]
        return RadarrMovie(
            id=int(item["id"]),
            tmdb_id=int(item.get("tmdbId") or tmdb_id),
            title=item.get("title", ""),
            tags=[int(tag) for tag in item.get("tags") or []],
        )

    def update_movie_tags(self, movie_id: int, tag_ids: list[int]) -> None:
        """Remplace les tags d'un film (PUT du film complet, sans deplacement de fichiers)."""
        movie = self._get_movie_payload(movie_id)
        movie["tags"] = list(tag_ids)
        send(
            self._get_client(),
            "PUT",
            f"/movie/{movie_id}",
            params={"moveFiles": "false"},
            json=movie,
        )

    # -------------------------------------------------------------------------
    # Profils
    # -------------------------------------------------------------------------

    def list_quality_profiles(self) -> list[QualityProfile]:
        response = send(self._get_client(), "GET", "/qualityprofile")
        return [
            QualityProfile(id=int(item["id"]), name=item.get("name", ""))
            for item in response.json()
        ]

    def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None
