"""
Constructeurs de donnees de test pour le catalogue.

Utilises par les tests de services et par conftest.py.
"""

from metrowatch.core.entities.catalog import Catalog, Film, Series


class FakeClock:
    """Horloge manuelle : sleep() fait avancer le temps."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


def make_series(
    series_id: str,
    name: str = "",
    resolved: int = 0,
    unresolved: int = 0,
) -> Series:
    """Serie avec `resolved` films resolus suivis de `unresolved` films non resolus."""
    films = [
        Film(title=f"Film {series_id}-{i}", year=2000 + i, tmdb_id=1000 * int(series_id) + i)
        for i in range(1, resolved + 1)
    ]
    films += [
        Film(title=f"Unknown {series_id}-{i}", year=1990 + i)
        for i in range(1, unresolved + 1)
    ]
    return Series(
        name=name or f"Series {series_id}",
        url=f"/series/?vista_series_id={series_id}",
        series_id=series_id,
        films=films,
    )


def make_catalog(*series: Series) -> Catalog:
    return Catalog((s.series_id, s) for s in series)
