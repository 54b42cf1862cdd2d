"""
Entites des systemes en aval (Radarr et Agregarr).

Le tag Radarr et la collection Agregarr d'une serie sont relies par une
convention de nommage deterministe derivee du series_id : le label du tag
et le subtype de la collection sont toujours produits par tag_label().
"""

from dataclasses import dataclass, field
from enum import Enum

TAG_PREFIX = "metrograph-"
COLLECTION_PREFIX = "Metrograph: "


def tag_label(series_id: str) -> str:
    """Label du tag Radarr (et subtype de la collection) d'une serie."""
    return f"{TAG_PREFIX}{series_id}"


def collection_name(series_name: str) -> str:
    """Nom de la collection Agregarr d'une serie."""
    return f"{COLLECTION_PREFIX}{series_name}"


def is_owned_collection(name: str) -> bool:
    """Indique si une collection a ete creee par metrowatch."""
    return name.startswith(COLLECTION_PREFIX)


def is_owned_tag(label: str) -> bool:
    """Indique si un label de tag suit la convention metrowatch."""
    return label.startswith(TAG_PREFIX)


class AddMovieOutcome(Enum):
    """Resultat d'un ajout de film dans Radarr."""

    ADDED = "added"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class Tag:
    """Tag Radarr."""

    id: int
    label: str


@dataclass(frozen=True)
class QualityProfile:
    """Profil de qualite Radarr."""

    id: int
    name: str


@dataclass
class RadarrMovie:
    """Film deja present dans Radarr (sous-ensemble des champs utiles)."""

    id: int
    tmdb_id: int
    title: str
    tags: list[int] = field(default_factory=list)


@dataclass(frozen=True)
class RadarrDefaults:
    """
    Parametres d'acquisition appliques aux films et collections.

    Attributs :
        root_folder_path : Dossier racine Radarr
        quality_profile_id : ID du profil de qualite
        monitored : Films surveilles a l'ajout
        search_for_movie : Lancer une recherche a l'ajout
    """

    root_folder_path: str = ""
    quality_profile_id: int = 0
    monitored: bool = True
    search_for_movie: bool = True


@dataclass
class DownstreamCollection:
    """
    Collection connue d'Agregarr.

    L'identite logique pour la reconciliation est le nom ; le subtype porte
    le label du tag Radarr associe.
    """

    id: str
    name: str
    subtype: str = ""


@dataclass(frozen=True)
class CollectionSpec:
    """
    Description d'une collection a creer dans Agregarr.

    Attributs :
        name : Nom affiche ("Metrograph: <serie>")
        subtype : Label du tag Radarr ("metrograph-<id>")
        radarr_tag_id : ID du tag Radarr
        defaults : Parametres d'acquisition directe
        library_ids : Bibliotheques cibles
        max_items : Nombre maximum d'elements affiches
    """

    name: str
    subtype: str
    radarr_tag_id: int
    defaults: RadarrDefaults = field(default_factory=RadarrDefaults)
    library_ids: tuple[str, ...] = ("1",)
    max_items: int = 10
    radarr_instance_id: int = 0
