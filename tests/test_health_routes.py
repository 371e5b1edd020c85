"""Tests for the /health endpoint."""

from unittest.mock import patch

from storage.object_store import ObjectStore


def test_health_reports_ok(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["service"] == "local-object-store"
    assert body["version"]


def test_health_describes_routes(client):
    routes = {(r["method"], r["path"]) for r in client.get("/health").json()["routes"]}

    assert ("PUT", "/upload/{bucket}") in routes
    assert ("GET", "/download/{bucket}/{key}") in routes
    assert ("GET", "/list/{bucket}") in routes
    assert ("GET", "/buckets") in routes
    assert ("POST", "/buckets/{bucket}") in routes
    assert ("DELETE", "/buckets/{bucket}") in routes
    assert ("DELETE", "/delete/{bucket}/{key}") in routes
    assert ("GET", "/health") in routes


def test_route_descriptions_come_from_docstrings(client):
    routes = client.get("/health").json()["routes"]
    upload_route = next(r for r in routes if r["path"] == "/upload/{bucket}")

    assert upload_route["description"] == "Upload an object, creating the bucket if needed."


def test_health_does_not_touch_store(client):
    with patch.object(ObjectStore, "list_buckets") as mock_list, \
         patch.object(ObjectStore, "bucket_exists") as mock_exists:
        resp = client.get("/health")

    assert resp.status_code == 200
    mock_list.assert_not_called()
    mock_exists.assert_not_called()
