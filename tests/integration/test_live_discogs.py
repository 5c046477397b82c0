"""Integration tests against the live Discogs API."""
import os

import pytest
from fastapi.testclient import TestClient

from discogs_gateway.main import create_app

# Mark integration tests
pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(
        not os.getenv("DISCOGS_PERSONAL_ACCESS_TOKEN"),
        reason="DISCOGS_PERSONAL_ACCESS_TOKEN is not set",
    ),
]


@pytest.fixture(scope="module")
def client():
    """Gateway client wired to the real Discogs tools."""
    with TestClient(create_app(), raise_server_exceptions=False) as test_client:
        yield test_client


def test_get_artist_returns_profile(client):
    response = client.post("/api/tools/get_artist", json={"artist_id": 45467})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["result"]["id"] == 45467


def test_search_returns_results(client):
    response = client.post("/api/tools/search", json={"q": "Pink Floyd", "type": "artist", "per_page": 3})

    assert response.status_code == 200
    assert "results" in response.json()["result"]


def test_unknown_release_surfaces_upstream_error(client):
    response = client.post("/api/tools/get_release", json={"release_id": 999999999})

    assert response.status_code == 500
    assert response.json()["tool"] == "get_release"
