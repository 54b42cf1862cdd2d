"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe METROWATCH_,
et peut optionnellement être fournie via un fichier .env.

Les clés API sont optionnelles : sans clé TMDB, les films ne sont pas résolus mais le
scraping et la fusion continuent ; sans configuration Radarr/Agregarr, les commandes
correspondantes refusent de démarrer.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from metrowatch.core.entities.downstream import RadarrDefaults

# Trouver le fichier .env à la racine du projet (parent de metrowatch/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

# Délai minimal entre deux requêtes TMDB (quota de l'API)
MIN_RATE_LIMIT_MS = 250


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe METROWATCH_.
    Exemple : METROWATCH_RATE_LIMIT_MS=500

    L'instance est figée : elle est construite une fois par le container puis
    passée aux composants à leur construction.
    """

    model_config = SettingsConfigDict(
        env_prefix="METROWATCH_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # TMDB (OPTIONNELLE - résolution désactivée si non définie)
    tmdb_api_key: Optional[str] = Field(default=None)

    # Radarr
    radarr_host: Optional[str] = Field(default=None)
    radarr_api_key: Optional[str] = Field(default=None)
    radarr_root_folder_path: str = Field(default="")
    radarr_quality_profile_id: int = Field(default=0, ge=0)
    radarr_monitored: bool = Field(default=True)
    radarr_search_for_movie: bool = Field(default=True)

    # Agregarr
    agregarr_host: Optional[str] = Field(default=None)
    agregarr_api_key: Optional[str] = Field(default=None)
    agregarr_library_ids: list[str] = Field(default_factory=lambda: ["1"])
    collection_max_items: int = Field(default=10, ge=1)

    # Réseau
    rate_limit_ms: int = Field(default=250, ge=MIN_RATE_LIMIT_MS)
    http_timeout: float = Field(default=30.0, gt=0)
    # Radarr et Agregarr tournent souvent sur des hôtes auto-signés (équivalent curl -k)
    verify_ssl: bool = Field(default=False)

    # Snapshots
    snapshot_dir: Path = Field(default=Path("."))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/metrowatch.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("snapshot_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si l'API TMDB est configurée."""
        return bool(self.tmdb_api_key)

    @property
    def radarr_enabled(self) -> bool:
        """Vérifie si Radarr est configuré."""
        return bool(self.radarr_host and self.radarr_api_key)

    @property
    def agregarr_enabled(self) -> bool:
        """Vérifie si Agregarr est configuré."""
        return bool(self.agregarr_host and self.agregarr_api_key)

    @property
    def rate_limit_seconds(self) -> float:
        """Délai minimal entre deux requêtes TMDB, en secondes."""
        return self.rate_limit_ms / 1000

    @property
    def radarr_defaults(self) -> RadarrDefaults:
        """Paramètres d'acquisition appliqués aux films et collections."""
        return RadarrDefaults(
            root_folder_path=self.radarr_root_folder_path,
            quality_profile_id=self.radarr_quality_profile_id,
            monitored=self.radarr_monitored,
            search_for_movie=self.radarr_search_for_movie,
        )
