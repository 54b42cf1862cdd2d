"""
Entites du catalogue de series.

Entites representant les series publiees par le cinema et les films qui
les composent, enrichis de leur identifiant TMDB une fois resolu.
"""

from dataclasses import dataclass, field

# Une serie n'est persistee et synchronisee que si elle compte strictement
# plus de MIN_VALID_MOVIES films resolus.
MIN_VALID_MOVIES = 2


@dataclass
class Film:
    """
    Un film d'une serie, tel que scrape puis enrichi.

    L'identite d'un film pour la deduplication est son titre exact
    (sensible a la casse).

    Attributs :
        title : Titre tel que scrape (jamais modifie apres creation)
        director : Realisateur (vide si inconnu)
        year : Annee de sortie (0 = inconnue)
        tmdb_id : ID TMDB (0 = non resolu)
        imdb_id : ID IMDb optionnel (format ttXXXXXXX)
    """

    title: str
    director: str = ""
    year: int = 0
    tmdb_id: int = 0
    imdb_id: str = ""

    @property
    def is_resolved(self) -> bool:
        """Indique si le film possede un ID TMDB."""
        return self.tmdb_id > 0


@dataclass
class Series:
    """
    Une serie thematique du cinema.

    Attributs :
        name : Nom de la serie
        url : URL (relative) de la page de la serie
        series_id : ID stable extrait de l'URL, cle de jointure inter-systemes
        films : Films dans l'ordre de scraping puis d'ajout par fusion
    """

    name: str
    url: str
    series_id: str
    films: list[Film] = field(default_factory=list)

    @property
    def valid_movie_count(self) -> int:
        """Nombre de films possedant un ID TMDB."""
        return sum(1 for film in self.films if film.is_resolved)

    @property
    def is_eligible(self) -> bool:
        """Une serie est eligible au-dela de MIN_VALID_MOVIES films resolus."""
        return self.valid_movie_count > MIN_VALID_MOVIES


class Catalog(dict[str, Series]):
    """
    Catalogue de series indexe par series_id.

    Un dict dont l'iteration publique passe par ``ordered()``, triee par
    series_id, pour que l'ecriture des fichiers et les logs soient
    deterministes.
    """

    def ordered(self) -> list[Series]:
        """Retourne les series triees par series_id."""
        return [self[series_id] for series_id in sorted(self)]

    def eligible(self) -> "Catalog":
        """Retourne un nouveau catalogue ne contenant que les series eligibles."""
        return Catalog(
            (series.series_id, series)
            for series in self.ordered()
            if series.is_eligible
        )

    @property
    def film_count(self) -> int:
        """Nombre total de films, toutes series confondues."""
        return sum(len(series.films) for series in self.values())


@dataclass
class Snapshot:
    """
    Catalogue persiste, date du jour d'ecriture.

    Attributs :
        date : Date au format YYYY-MM-DD
        catalog : Series eligibles au moment de l'ecriture
    """

    date: str
    catalog: Catalog = field(default_factory=Catalog)
