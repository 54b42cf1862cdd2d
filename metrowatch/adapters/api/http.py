"""
Outils HTTP partages par les clients API.

Les requetes ne sont jamais relancees : un statut non-2xx est converti en
httpx.HTTPStatusError et propage a l'appelant, qui decide s'il s'agit d'un
echec unitaire ou fatal.

Usage:
    client = build_client("https://radarr.local", headers={"X-Api-Key": key})
    response = send(client, "GET", "/api/v3/tag")
"""

from typing import Any, Optional

import httpx
from loguru import logger

DEFAULT_TIMEOUT = 30.0


def build_client(
    base_url: str,
    headers: Optional[dict[str, str]] = None,
    params: Optional[dict[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
    verify: bool = True,
    transport: Optional[httpx.BaseTransport] = None,
) -> httpx.Client:
    """
    Cree un client httpx synchrone.

    Args:
        base_url: URL de base de l'API
        headers: En-tetes envoyes a chaque requete
        params: Parametres de requete envoyes a chaque requete
        timeout: Timeout de connexion et de lecture en secondes
        verify: Verification TLS (desactivable pour les hotes auto-signes)
        transport: Transport httpx alternatif (tests)

    Returns:
        httpx.Client configure
    """
    return httpx.Client(
        base_url=base_url,
        headers=headers or {},
        params=params or {},
        timeout=timeout,
        verify=verify,
        transport=transport,
    )


def send(client: httpx.Client, method: str, url: str, **kwargs: Any) -> httpx.Response:
    """
    Execute une requete et leve une erreur pour tout statut non-2xx.

    Raises:
        httpx.TransportError: Erreur reseau ou timeout
        httpx.HTTPStatusError: Statut 4xx ou 5xx
    """
    response = client.request(method, url, **kwargs)
    logger.debug(f"{method} {response.request.url} -> {response.status_code}")
    response.raise_for_status()
    return response
