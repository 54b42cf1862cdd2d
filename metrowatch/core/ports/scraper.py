"""
Interface port pour la source de scraping.

Definit ce que le pipeline attend du site du cinema, sans preciser
comment les pages sont recuperees ni analysees.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class SeriesLink:
    """Lien vers une serie, tel que trouve sur la page d'index."""

    name: str
    url: str


@dataclass(frozen=True)
class FilmEntry:
    """
    Film brut trouve sur la page d'une serie.

    Attributs :
        title : Titre affiche
        metadata : Texte "realisateur / annee" ou "annee" (peut etre vide)
    """

    title: str
    metadata: str = ""


class ISeriesSource(ABC):
    """Source des series et de leurs films."""

    @abstractmethod
    def list_series(self) -> list[SeriesLink]:
        """Retourne les series publiees, dans l'ordre de la page."""
        ...

    @abstractmethod
    def list_films(self, series_url: str) -> list[FilmEntry]:
        """Retourne les films d'une serie, dans l'ordre de la page."""
        ...
