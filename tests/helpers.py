"""Request helpers shared by the route tests."""

from fastapi.testclient import TestClient


def upload(client: TestClient, bucket: str, content: bytes, filename: str = "file.bin",
           content_type: str = "application/octet-stream", key: str | None = None):
    """PUT a multipart upload and return the response."""
    params = {"key": key} if key is not None else None
    return client.put(
        f"/upload/{bucket}",
        params=params,
        files={"file": (filename, content, content_type)},
    )
