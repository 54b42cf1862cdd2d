"""
Tests for TaggingService - idempotent Radarr tagging of catalog films.
"""

from unittest.mock import MagicMock

import httpx
import pytest

from metrowatch.core.entities.catalog import Film
from metrowatch.core.entities.downstream import AddMovieOutcome, RadarrMovie
from metrowatch.services.tagging import TaggingReport, TaggingService, TagResult
from tests.fixtures.catalogs import make_catalog, make_series

CAROL = Film(title="Carol", year=2015, tmdb_id=258480)


@pytest.fixture
def service(mock_tagging: MagicMock) -> TaggingService:
    mock_tagging.create_or_get_tag.return_value = 7
    mock_tagging.add_movie.return_value = AddMovieOutcome.ADDED
    return TaggingService(tagging=mock_tagging)


class TestEnsureMovieTagged:
    """Tests for TaggingService.ensure_movie_tagged()."""

    def test_new_movie_is_added_with_tags(self, service: TaggingService, mock_tagging: MagicMock):
        result = service.ensure_movie_tagged(CAROL, [7])

        assert result is TagResult.ADDED
        mock_tagging.add_movie.assert_called_once_with(258480, "Carol", 2015, [7])
        mock_tagging.get_movie_by_tmdb_id.assert_not_called()

    def test_existing_movie_gets_missing_tag(
        self, service: TaggingService, mock_tagging: MagicMock
    ):
        mock_tagging.add_movie.return_value = AddMovieOutcome.ALREADY_EXISTS
        mock_tagging.get_movie_by_tmdb_id.return_value = RadarrMovie(
            id=42, tmdb_id=258480, title="Carol", tags=[1]
        )

        result = service.ensure_movie_tagged(CAROL, [7])

        assert result is TagResult.TAGGED
        mock_tagging.update_movie_tags.assert_called_once_with(42, [1, 7])

    def test_existing_movie_already_tagged_is_left_alone(
        self, service: TaggingService, mock_tagging: MagicMock
    ):
        mock_tagging.add_movie.return_value = AddMovieOutcome.ALREADY_EXISTS
        mock_tagging.get_movie_by_tmdb_id.return_value = RadarrMovie(
            id=42, tmdb_id=258480, title="Carol", tags=[1, 7]
        )

        result = service.ensure_movie_tagged(CAROL, [7])

        assert result is TagResult.UNCHANGED
        mock_tagging.update_movie_tags.assert_not_called()

    def test_tags_are_not_duplicated(self, service: TaggingService, mock_tagging: MagicMock):
        mock_tagging.add_movie.return_value = AddMovieOutcome.ALREADY_EXISTS
        mock_tagging.get_movie_by_tmdb_id.return_value = RadarrMovie(
            id=42, tmdb_id=258480, title="Carol", tags=[7]
        )

        service.ensure_movie_tagged(CAROL, [7, 9, 9])

        mock_tagging.update_movie_tags.assert_called_once_with(42, [7, 9])

    def test_existing_movie_not_found_raises(
        self, service: TaggingService, mock_tagging: MagicMock
    ):
        mock_tagging.add_movie.return_value = AddMovieOutcome.ALREADY_EXISTS
        mock_tagging.get_movie_by_tmdb_id.return_value = None

        with pytest.raises(LookupError):
            service.ensure_movie_tagged(CAROL, [7])


class TestTagCatalog:
    """Tests for TaggingService.tag_catalog()."""

    def test_only_eligible_series_are_tagged(
        self, service: TaggingService, mock_tagging: MagicMock
    ):
        catalog = make_catalog(
            make_series("1", resolved=3),
            make_series("2", resolved=2, unresolved=5),
        )

        report = service.tag_catalog(catalog)

        mock_tagging.create_or_get_tag.assert_called_once_with("metrograph-1")
        assert report.series == 1
        assert report.added == 3

    def test_unresolved_films_are_skipped(
        self, service: TaggingService, mock_tagging: MagicMock
    ):
        catalog = make_catalog(make_series("1", resolved=3, unresolved=2))

        service.tag_catalog(catalog)

        assert mock_tagging.add_movie.call_count == 3

    def test_series_in_id_order(self, service: TaggingService, mock_tagging: MagicMock):
        catalog = make_catalog(make_series("30", resolved=3), make_series("10", resolved=3))

        service.tag_catalog(catalog)

        labels = [c.args[0] for c in mock_tagging.create_or_get_tag.call_args_list]
        assert labels == ["metrograph-10", "metrograph-30"]

    def test_film_failure_does_not_stop_the_series(
        self, service: TaggingService, mock_tagging: MagicMock
    ):
        request = httpx.Request("POST", "https://radarr.test/api/v3/movie")
        mock_tagging.add_movie.side_effect = [
            AddMovieOutcome.ADDED,
            httpx.HTTPStatusError(
                "500", request=request, response=httpx.Response(500, request=request)
            ),
            AddMovieOutcome.ADDED,
        ]

        report = service.tag_catalog(make_catalog(make_series("1", resolved=3)))

        assert report.added == 2
        assert report.failed == 1

    def test_tag_failure_skips_only_that_series(
        self, service: TaggingService, mock_tagging: MagicMock
    ):
        mock_tagging.create_or_get_tag.side_effect = [httpx.ConnectError("down"), 8]
        catalog = make_catalog(make_series("1", resolved=3), make_series("2", resolved=3))

        report = service.tag_catalog(catalog)

        assert report.series_failed == 1
        assert report.series == 1
        assert mock_tagging.add_movie.call_count == 3
        assert all(c.args[3] == [8] for c in mock_tagging.add_movie.call_args_list)

    def test_second_pass_changes_nothing(
        self, service: TaggingService, mock_tagging: MagicMock
    ):
        """Once every film carries the tag, a new pass issues no update."""
        mock_tagging.add_movie.return_value = AddMovieOutcome.ALREADY_EXISTS
        mock_tagging.get_movie_by_tmdb_id.side_effect = lambda tmdb_id: RadarrMovie(
            id=tmdb_id, tmdb_id=tmdb_id, title="", tags=[7]
        )

        report = service.tag_catalog(make_catalog(make_series("1", resolved=3)))

        assert report == TaggingReport(series=1, unchanged=3)
        mock_tagging.update_movie_tags.assert_not_called()
