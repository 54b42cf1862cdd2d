"""
Client Agregarr (API v1) pour les collections.

Implemente ICollectionService. Agregarr enveloppe ses listes de collections
dans {"collectionConfigs": [...]}.

Usage:
    client = AgregarrClient(host="https://agregarr.local", api_key="xxx")
    collections = client.list_collections()
    client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from metrowatch.adapters.api.http import DEFAULT_TIMEOUT, build_client, send
from metrowatch.core.entities.downstream import CollectionSpec, DownstreamCollection
from metrowatch.core.ports.api_clients import ICollectionService

# Routes sondees par test_connection()
PROBE_PATHS = ("health", "status", "ping", "version", "collections")


def collection_to_payload(spec: CollectionSpec) -> dict[str, Any]:
    """
    Construit le corps de creation d'une collection.

    Collection de type "radarrtag" : Agregarr affiche les films portant le
    tag, et demande directement a Radarr les films manquants.
    """
    return {
        "id": "",
        "name": spec.name,
        "visibilityConfig": {
            "usersHome": True,
            "serverOwnerHome": True,
            "libraryRecommended": True,
        },
        "maxItems": spec.max_items,
        "type": "radarrtag",
        "subtype": spec.subtype,
        "mediaType": "movie",
        "libraryIds": list(spec.library_ids),
        "template": spec.name,
        "autoPoster": True,
        "randomizeOrder": False,
        "searchMissingMovies": True,
        "autoApproveMovies": True,
        "downloadMode": "direct",
        "radarrInstanceId": spec.radarr_instance_id,
        "directDownloadRadarrProfileId": spec.defaults.quality_profile_id,
        "directDownloadRadarrRootFolder": spec.defaults.root_folder_path,
        "radarrTagId": spec.radarr_tag_id,
    }


def collection_from_payload(item: dict[str, Any]) -> DownstreamCollection:
    return DownstreamCollection(
        id=str(item.get("id", "")),
        name=item.get("name", ""),
        subtype=item.get("subtype") or "",
    )


class AgregarrClient(ICollectionService):
    """
    Client API Agregarr v1.

    L'authentification passe la cle dans X-API-Key et Authorization.
    """

    API_PREFIX = "/api/v1"

    def __init__(
        self,
        host: str,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        verify_ssl: bool = True,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        """
        Initialise le client Agregarr.

        Args:
            host: URL de l'instance
            api_key: Cle API Agregarr
            timeout: Timeout HTTP en secondes
            verify_ssl: Verification du certificat TLS
            transport: Transport httpx alternatif (tests)
        """
        self._host = host.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._verify_ssl = verify_ssl
        self._transport = transport
        self._client: Optional[httpx.Client] = None

    @property
    def host(self) -> str:
        return self._host

    def _get_client(self) -> httpx.Client:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            headers = {"Content-Type": "application/json"}
            if self._api_key:
                headers["X-API-Key"] = self._api_key
                headers["Authorization"] = self._api_key
            self._client = build_client(
                f"{self._host}{self.API_PREFIX}",
                headers=headers,
                timeout=self._timeout,
                verify=self._verify_ssl,
                transport=self._transport,
            )
        return self._client

    def list_collections(self) -> list[DownstreamCollection]:
        """
        Liste toutes les collections configurees.

        Raises:
            httpx.HTTPError: Erreur de transport ou statut non-2xx
        """
        response = send(self._get_client(), "GET", "/collections")
        configs = response.json().get("collectionConfigs") or []
        return [collection_from_payload(item) for item in configs]

    def create_collection(self, spec: CollectionSpec) -> DownstreamCollection:
        """
        Cree une collection.

        Returns:
            La premiere collection renvoyee par Agregarr, ou une collection
            portant le nom demande si la reponse ne la contient pas
        """
        response = send(
            self._get_client(), "POST", "/collections/create", json=collection_to_payload(spec)
        )
        try:
            configs = response.json().get("collectionConfigs") or []
        except (ValueError, AttributeError):
            logger.debug(f"Reponse de creation non decodable pour '{spec.name}'")
            configs = []

        if configs:
            return collection_from_payload(configs[0])
        return DownstreamCollection(id="created", name=spec.name, subtype=spec.subtype)

    def delete_collection(self, collection_id: str) -> None:
        send(self._get_client(), "DELETE", f"/collections/{collection_id}")
        logger.info(f"Collection {collection_id} supprimee")

    def test_connection(self) -> dict[str, Optional[int]]:
        """
        Sonde quelques routes connues.

        Returns:
            Statut HTTP par route (None si la requete a echoue)
        """
        results: dict[str, Optional[int]] = {}
        client = self._get_client()
        for path in PROBE_PATHS:
            try:
                response = client.get(f"/{path}")
            except httpx.TransportError as e:
                logger.warning(f"Sonde /{path} en echec: {e}")
                results[path] = None
                continue
            results[path] = response.status_code
        return results

    def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None
