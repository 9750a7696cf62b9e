"""Tests for GET /api/traffic"""
from urllib.parse import unquote

import httpx
import pytest


def test_traffic_builds_flow_request(client, upstream, test_settings):
    upstream.payload = {"sourceUpdated": "2024-05-01T10:00:00Z", "results": []}

    response = client.get("/api/traffic", params={"bbox": "139.9,35.7,140.1,35.8"})

    assert response.status_code == 200
    assert response.json() == upstream.payload
    assert len(upstream.requests) == 1
    sent = upstream.requests[0]
    assert sent.url.host == "data.traffic.hereapi.com"
    assert sent.url.path == "/v7/flow"
    assert "in=bbox:139.9,35.7,140.1,35.8" in unquote(str(sent.url))
    assert sent.url.params["locationReferencing"] == "shape"
    assert sent.url.params["apiKey"] == test_settings.here_api_key


def test_traffic_forwards_bbox_without_validating_it(client, upstream):
    client.get("/api/traffic", params={"bbox": "not-a-box"})

    assert upstream.requests[0].url.params["in"] == "bbox:not-a-box"


@pytest.mark.parametrize("query", ["", "?bbox="])
def test_traffic_requires_bbox(client, upstream, query):
    response = client.get(f"/api/traffic{query}")

    assert response.status_code == 400
    assert response.json() == {"error": "Bounding box (bbox) is required"}
    assert upstream.requests == []


def test_traffic_forwards_upstream_failure_status(client, upstream):
    upstream.status_code = 400
    upstream.payload = {"title": "Invalid bbox"}

    response = client.get("/api/traffic", params={"bbox": "1,2,3"})

    assert response.status_code == 400
    assert response.json() == {"error": "Failed to fetch traffic data"}


def test_traffic_connection_failure_maps_to_502(client, upstream):
    upstream.error = httpx.ConnectError

    response = client.get("/api/traffic", params={"bbox": "139.9,35.7,140.1,35.8"})

    assert response.status_code == 502
    assert response.json() == {"error": "Upstream service unavailable"}
