"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI : configuration,
clients HTTP (TMDB, Radarr, Agregarr, site du cinema) et services.
"""

from typing import Optional

from dependency_injector import containers, providers

from .adapters.api.agregarr_client import AgregarrClient
from .adapters.api.radarr_client import RadarrClient
from .adapters.api.tmdb_client import TMDBClient
from .adapters.scraping.metrograph_scraper import MetrographScraper
from .config import Settings
from .core.exceptions import ConfigurationError
from .infrastructure.persistence.catalog_store import JsonCatalogStore
from .services.catalog_matcher import CatalogMatcherService
from .services.crawler import CatalogCrawlerService
from .services.rate_limiter import RateLimiter
from .services.reconciliation import ReconciliationService
from .services.tagging import TaggingService


def build_tmdb_client(settings: Settings) -> Optional[TMDBClient]:
    """Client TMDB, ou None si aucune cle n'est configuree."""
    if not settings.tmdb_enabled:
        return None
    return TMDBClient(api_key=settings.tmdb_api_key, timeout=settings.http_timeout)


def build_radarr_client(settings: Settings) -> RadarrClient:
    """Client Radarr. Leve ConfigurationError si l'hote ou la cle manque."""
    if not settings.radarr_enabled:
        raise ConfigurationError(
            "Configuration Radarr manquante (METROWATCH_RADARR_HOST, METROWATCH_RADARR_API_KEY)"
        )
    return RadarrClient(
        host=settings.radarr_host,
        api_key=settings.radarr_api_key,
        defaults=settings.radarr_defaults,
        timeout=settings.http_timeout,
        verify_ssl=settings.verify_ssl,
    )


def build_agregarr_client(settings: Settings) -> AgregarrClient:
    """Client Agregarr. Leve ConfigurationError si l'hote ou la cle manque."""
    if not settings.agregarr_enabled:
        raise ConfigurationError(
            "Configuration Agregarr manquante (METROWATCH_AGREGARR_HOST, METROWATCH_AGREGARR_API_KEY)"
        )
    return AgregarrClient(
        host=settings.agregarr_host,
        api_key=settings.agregarr_api_key,
        timeout=settings.http_timeout,
        verify_ssl=settings.verify_ssl,
    )


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        matcher = container.matcher_service()
        report = container.reconciliation_service().reconcile(catalog)

    Les clients Radarr et Agregarr ne sont construits qu'a la premiere
    demande : une commande qui n'en a pas besoin ne requiert pas leur
    configuration.
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Adapters - implementations concretes des ports
    tmdb_client = providers.Singleton(build_tmdb_client, settings=config)
    radarr_client = providers.Singleton(build_radarr_client, settings=config)
    agregarr_client = providers.Singleton(build_agregarr_client, settings=config)
    scraper = providers.Singleton(
        MetrographScraper,
        timeout=config.provided.http_timeout,
    )

    # Stockage des snapshots
    catalog_store = providers.Factory(
        JsonCatalogStore,
        directory=config.provided.snapshot_dir,
    )

    # Limiteur partage par tous les appels TMDB
    rate_limiter = providers.Singleton(
        RateLimiter,
        min_interval=config.provided.rate_limit_seconds,
    )

    # Services
    crawler_service = providers.Factory(CatalogCrawlerService, source=scraper)
    matcher_service = providers.Factory(
        CatalogMatcherService,
        lookup=tmdb_client,
        rate_limiter=rate_limiter,
    )
    tagging_service = providers.Factory(TaggingService, tagging=radarr_client)
    reconciliation_service = providers.Factory(
        ReconciliationService,
        collections=agregarr_client,
        tagging=radarr_client,
        defaults=config.provided.radarr_defaults,
        library_ids=providers.Callable(
            lambda settings: tuple(settings.agregarr_library_ids), config
        ),
        max_items=config.provided.collection_max_items,
    )
