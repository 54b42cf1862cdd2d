"""
Fixtures pytest partagees pour les tests metrowatch.

Ce module contient les fixtures communes utilisees dans les tests:
- Mocks des ports (recherche TMDB, Radarr, Agregarr)
- Horloge manuelle pour le rate limiting
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from metrowatch.config import Settings
from metrowatch.core.ports.api_clients import (
    ICollectionService,
    IMovieLookup,
    ITaggingService,
)
from tests.fixtures.catalogs import FakeClock


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def mock_lookup() -> MagicMock:
    """Mock de IMovieLookup sans resultat par defaut."""
    mock = MagicMock(spec=IMovieLookup)
    mock.search.return_value = []
    mock.get_imdb_id.return_value = None
    return mock


@pytest.fixture
def mock_tagging() -> MagicMock:
    """
    Mock de ITaggingService (Radarr).

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    return MagicMock(spec=ITaggingService)


@pytest.fixture
def mock_collections() -> MagicMock:
    """Mock de ICollectionService (Agregarr) sans collection existante."""
    mock = MagicMock(spec=ICollectionService)
    mock.list_collections.return_value = []
    return mock


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec chemins temporaires.

    Les hotes et cles sont renseignes pour que tous les clients puissent
    etre construits.
    """
    return Settings(
        tmdb_api_key="tmdb_test_key",
        radarr_host="https://radarr.test",
        radarr_api_key="radarr_key",
        radarr_root_folder_path="/movies",
        radarr_quality_profile_id=4,
        agregarr_host="https://agregarr.test",
        agregarr_api_key="agregarr_key",
        snapshot_dir=tmp_path / "snapshots",
        log_file=tmp_path / "logs" / "test.log",
    )
