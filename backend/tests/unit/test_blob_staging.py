"""Tests for the blob staging client (httpx.MockTransport)."""

import json

import httpx
import pytest

from app.components.blob.staging import BlobStagingClient
from app.components.drive.errors import DriveConfigurationError, RemoteStoreError


def make_client(handler, token: str = "blob-token") -> BlobStagingClient:
    return BlobStagingClient(token=token, api_url="https://blob.test", transport=httpx.MockTransport(handler))


class TestFetch:
    """Test staged blob download."""

    def test_fetch(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert str(request.url) == "https://store.test/a.pdf"
            return httpx.Response(200, content=b"%PDF")

        assert make_client(handler).fetch("https://store.test/a.pdf") == b"%PDF"

    def test_fetch_failure(self):
        client = make_client(lambda request: httpx.Response(404))

        with pytest.raises(RemoteStoreError) as exc_info:
            client.fetch("https://store.test/missing.pdf")

        assert exc_info.value.status == 404


class TestDelete:
    """Test staged blob deletion."""

    def test_delete_sends_urls_with_token(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(200, json={})

        make_client(handler).delete(["https://store.test/a.pdf"])

        request = seen["request"]
        assert request.url.path == "/delete"
        assert request.headers["Authorization"] == "Bearer blob-token"
        assert json.loads(request.content) == {"urls": ["https://store.test/a.pdf"]}

    def test_delete_nothing(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        make_client(handler).delete([])

    def test_delete_without_token(self):
        client = make_client(lambda request: httpx.Response(200), token="")

        with pytest.raises(DriveConfigurationError):
            client.delete(["https://store.test/a.pdf"])

    def test_discard_swallows_failures(self):
        client = make_client(lambda request: httpx.Response(500))

        client.discard(["https://store.test/a.pdf"])
