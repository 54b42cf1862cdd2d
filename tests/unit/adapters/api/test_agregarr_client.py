"""
Tests for AgregarrClient - Agregarr API v1 client.
"""

import json

import httpx
import pytest
import respx

from metrowatch.adapters.api.agregarr_client import AgregarrClient, collection_to_payload
from metrowatch.core.entities.downstream import CollectionSpec, RadarrDefaults
from tests.fixtures.agregarr_responses import (
    AGREGARR_COLLECTIONS_RESPONSE,
    AGREGARR_CREATE_RESPONSE,
)

API = "https://agregarr.test/api/v1"

SPEC = CollectionSpec(
    name="Metrograph: Carol and Friends",
    subtype="metrograph-12345",
    radarr_tag_id=7,
    defaults=RadarrDefaults(root_folder_path="/movies", quality_profile_id=4),
)


@pytest.fixture
def agregarr_client() -> AgregarrClient:
    client = AgregarrClient(host="https://agregarr.test", api_key="agregarr_key")
    yield client
    client.close()


class TestCollectionPayload:
    """Tests for collection_to_payload()."""

    def test_radarr_tag_collection(self):
        payload = collection_to_payload(SPEC)

        assert payload["name"] == "Metrograph: Carol and Friends"
        assert payload["template"] == "Metrograph: Carol and Friends"
        assert payload["type"] == "radarrtag"
        assert payload["subtype"] == "metrograph-12345"
        assert payload["mediaType"] == "movie"
        assert payload["radarrTagId"] == 7

    def test_defaults(self):
        payload = collection_to_payload(SPEC)

        assert payload["maxItems"] == 10
        assert payload["libraryIds"] == ["1"]
        assert payload["visibilityConfig"] == {
            "usersHome": True,
            "serverOwnerHome": True,
            "libraryRecommended": True,
        }
        assert payload["downloadMode"] == "direct"
        assert payload["searchMissingMovies"] is True
        assert payload["autoApproveMovies"] is True
        assert payload["radarrInstanceId"] == 0
        assert payload["directDownloadRadarrProfileId"] == 4
        assert payload["directDownloadRadarrRootFolder"] == "/movies"


class TestCollections:
    """Tests for collection operations."""

    @respx.mock
    def test_list_collections(self, agregarr_client: AgregarrClient):
        route = respx.get(f"{API}/collections").mock(
            return_value=httpx.Response(200, json=AGREGARR_COLLECTIONS_RESPONSE)
        )

        collections = agregarr_client.list_collections()

        assert [(c.id, c.name, c.subtype) for c in collections] == [
            ("a1", "Metrograph: Old Series", "metrograph-111"),
            ("b2", "Unrelated", "trending"),
        ]
        headers = route.calls.last.request.headers
        assert headers["X-API-Key"] == "agregarr_key"
        assert headers["Authorization"] == "agregarr_key"

    @respx.mock
    def test_list_without_configs(self, agregarr_client: AgregarrClient):
        respx.get(f"{API}/collections").mock(return_value=httpx.Response(200, json={}))

        assert agregarr_client.list_collections() == []

    @respx.mock
    def test_list_failure_raises(self, agregarr_client: AgregarrClient):
        respx.get(f"{API}/collections").mock(return_value=httpx.Response(401))

        with pytest.raises(httpx.HTTPStatusError):
            agregarr_client.list_collections()

    @respx.mock
    def test_create_collection(self, agregarr_client: AgregarrClient):
        route = respx.post(f"{API}/collections/create").mock(
            return_value=httpx.Response(200, json=AGREGARR_CREATE_RESPONSE)
        )

        created = agregarr_client.create_collection(SPEC)

        assert created.id == "c3"
        assert json.loads(route.calls.last.request.content) == collection_to_payload(SPEC)

    @respx.mock
    def test_create_without_echo_uses_requested_name(self, agregarr_client: AgregarrClient):
        respx.post(f"{API}/collections/create").mock(return_value=httpx.Response(201, text=""))

        created = agregarr_client.create_collection(SPEC)

        assert created.name == "Metrograph: Carol and Friends"
        assert created.subtype == "metrograph-12345"

    @respx.mock
    def test_delete_collection(self, agregarr_client: AgregarrClient):
        route = respx.delete(f"{API}/collections/a1").mock(return_value=httpx.Response(204))

        agregarr_client.delete_collection("a1")

        assert route.called

    @respx.mock
    def test_delete_failure_raises(self, agregarr_client: AgregarrClient):
        respx.delete(f"{API}/collections/a1").mock(return_value=httpx.Response(500))

        with pytest.raises(httpx.HTTPStatusError):
            agregarr_client.delete_collection("a1")


class TestConnection:
    @respx.mock
    def test_probe_statuses(self, agregarr_client: AgregarrClient):
        respx.get(f"{API}/health").mock(return_value=httpx.Response(200))
        respx.get(f"{API}/status").mock(return_value=httpx.Response(200))
        respx.get(f"{API}/ping").mock(return_value=httpx.Response(404))
        respx.get(f"{API}/version").mock(side_effect=httpx.ConnectError("refused"))
        respx.get(f"{API}/collections").mock(return_value=httpx.Response(200, json={}))

        results = agregarr_client.test_connection()

        assert results == {
            "health": 200,
            "status": 200,
            "ping": 404,
            "version": None,
            "collections": 200,
        }
