"""
Interfaces ports pour les clients API.

Interfaces abstraites (ports) definissant les contrats pour les services
externes : la base de films (TMDB), le systeme d'acquisition (Radarr) et le
systeme de collections (Agregarr). Les implementations (adaptateurs) vivent
dans metrowatch.adapters.api.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from metrowatch.core.entities.downstream import (
    AddMovieOutcome,
    CollectionSpec,
    DownstreamCollection,
    QualityProfile,
    RadarrMovie,
    Tag,
)


@dataclass
class SearchResult:
    """
    Resultat de recherche depuis la base de films.

    Attributs :
        id : ID TMDB
        title : Titre retourne par l'API
        release_date : Date de sortie brute (YYYY-MM-DD, peut etre vide)
    """

    id: int
    title: str
    release_date: str = ""


class IMovieLookup(ABC):
    """
    Recherche de films dans une base externe.

    Le premier resultat retourne fait autorite : aucun classement n'est
    applique par les appelants.
    """

    @abstractmethod
    def search(self, query: str, year: Optional[int] = None) -> list[SearchResult]:
        """
        Recherche des films par titre.

        Args :
            query : Variante de titre
            year : Annee de sortie, si connue

        Retourne :
            Candidats ordonnes (liste vide si aucun)

        Leve :
            httpx.HTTPError : erreur de transport ou statut non-2xx
        """
        ...

    @abstractmethod
    def get_imdb_id(self, movie_id: int) -> Optional[str]:
        """Retourne l'ID IMDb d'un film TMDB, ou None."""
        ...


class ITaggingService(ABC):
    """Contrat du systeme d'acquisition (tags et films)."""

    @abstractmethod
    def list_tags(self) -> list[Tag]:
        ...

    @abstractmethod
    def create_or_get_tag(self, label: str) -> int:
        """Retourne l'ID du tag portant ce label, en le creant si absent."""
        ...

    @abstractmethod
    def delete_tag(self, label: str) -> None:
        """Supprime le tag portant ce label (TagNotFoundError si absent)."""
        ...

    @abstractmethod
    def add_movie(
        self, tmdb_id: int, title: str, year: int, tag_ids: list[int]
    ) -> AddMovieOutcome:
        """Ajoute un film ; ALREADY_EXISTS si Radarr le connait deja."""
        ...

    @abstractmethod
    def get_movie_by_tmdb_id(self, tmdb_id: int) -> Optional[RadarrMovie]:
        ...

    @abstractmethod
    def update_movie_tags(self, movie_id: int, tag_ids: list[int]) -> None:
        ...

    @abstractmethod
    def list_quality_profiles(self) -> list[QualityProfile]:
        ...


class ICollectionService(ABC):
    """Contrat du systeme de collections."""

    @abstractmethod
    def list_collections(self) -> list[DownstreamCollection]:
        ...

    @abstractmethod
    def create_collection(self, spec: CollectionSpec) -> DownstreamCollection:
        ...

    @abstractmethod
    def delete_collection(self, collection_id: str) -> None:
        ...
