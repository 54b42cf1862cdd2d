"""
Tests for catalog_merger - combining a fresh scrape with the stored snapshot.
"""

import pytest

from metrowatch.core.entities.catalog import Film, Series
from metrowatch.services.catalog_merger import merge_catalog, merge_films
from tests.fixtures.catalogs import make_catalog


def _films(*titles: str) -> list[Film]:
    return [Film(title=title) for title in titles]


class TestMergeFilms:
    """Tests for merge_films()."""

    def test_existing_first_then_new_titles(self):
        existing = [Film(title="Carol", tmdb_id=258480), Film(title="Safe", tmdb_id=27066)]
        new = _films("Poison", "Carol", "Velvet Goldmine")

        merged = merge_films(existing, new)

        assert [f.title for f in merged] == ["Carol", "Safe", "Poison", "Velvet Goldmine"]

    def test_existing_entries_are_kept_with_their_ids(self):
        """A re-scraped film never replaces the stored entry."""
        stored = Film(title="Carol", year=2015, tmdb_id=258480)

        merged = merge_films([stored], [Film(title="Carol", year=2015)])

        assert merged == [stored]
        assert merged[0].tmdb_id == 258480

    def test_title_match_is_exact(self):
        merged = merge_films(_films("Carol"), _films("carol", "Carol "))

        assert [f.title for f in merged] == ["Carol", "carol", "Carol "]

    def test_merge_with_itself_is_identity(self):
        films = _films("Carol", "Safe", "Poison")

        assert merge_films(films, films) == films

    @pytest.mark.parametrize(
        "existing, new",
        [
            ((), ("A", "B")),
            (("A", "B"), ()),
            (("A", "B"), ("B", "C", "D")),
            (("A",), ("A", "A")),
        ],
    )
    def test_length(self, existing, new):
        """len(merge(A, B)) = len(A) + number of B films whose title is not in A."""
        a, b = _films(*existing), _films(*new)
        titles = set(existing)

        merged = merge_films(a, b)

        assert len(merged) == len(a) + sum(1 for f in b if f.title not in titles)

    def test_inputs_are_not_modified(self):
        existing, new = _films("A"), _films("B")

        merge_films(existing, new)

        assert [f.title for f in existing] == ["A"]


class TestMergeCatalog:
    """Tests for merge_catalog()."""

    def _series(self, series_id: str, films: list[Film], name: str = "Series") -> Series:
        return Series(name=name, url=f"/s/{series_id}", series_id=series_id, films=films)

    def test_stored_ids_survive_a_rescrape(self):
        stored = make_catalog(
            self._series("1", [Film(title="Carol", tmdb_id=258480), Film(title="Safe", tmdb_id=27066)])
        )
        scraped = make_catalog(self._series("1", _films("Carol", "Safe", "Poison")))

        merged, stats = merge_catalog(scraped, stored)

        films = merged["1"].films
        assert [f.title for f in films] == ["Carol", "Safe", "Poison"]
        assert [f.tmdb_id for f in films] == [258480, 27066, 0]
        assert stats.merged_series == 1

    def test_series_metadata_comes_from_the_scrape(self):
        stored = make_catalog(self._series("1", _films("Carol"), name="Old name"))
        scraped = make_catalog(self._series("1", _films("Carol"), name="New name"))

        merged, _ = merge_catalog(scraped, stored)

        assert merged["1"].name == "New name"

    def test_new_series_are_kept_as_scraped(self):
        scraped_series = self._series("2", _films("Poison"))

        merged, stats = merge_catalog(make_catalog(scraped_series), make_catalog())

        assert merged["2"] is scraped_series
        assert stats.merged_series == 0

    def test_series_missing_from_scrape_are_dropped(self):
        stored = make_catalog(self._series("1", _films("Carol")))
        scraped = make_catalog(self._series("2", _films("Poison")))

        merged, _ = merge_catalog(scraped, stored)

        assert list(merged) == ["2"]

    def test_film_delta(self):
        stored = make_catalog(self._series("1", _films("A", "B", "C")))
        scraped = make_catalog(self._series("1", _films("C", "D")))

        merged, stats = merge_catalog(scraped, stored)

        assert [f.title for f in merged["1"].films] == ["A", "B", "C", "D"]
        assert stats.film_delta == 2

    def test_merging_a_catalog_with_itself_changes_nothing(self):
        catalog = make_catalog(
            self._series("1", [Film(title="Carol", tmdb_id=258480)]),
            self._series("2", _films("Poison", "Safe")),
        )

        merged, stats = merge_catalog(catalog, catalog)

        assert {k: v.films for k, v in merged.items()} == {k: v.films for k, v in catalog.items()}
        assert stats.film_delta == 0
