"""Client for the blob staging service.

Browsers upload large campaign files to a public blob store first and send
only the blob URL with the create-campaign request. The campaign builder
fetches each staged blob while uploading it; uploaded blobs are deleted
afterwards.
"""

import logging

import httpx

from app.components.drive.errors import DriveConfigurationError, RemoteStoreError
from app.settings import settings

logger = logging.getLogger(__name__)

BLOB_API_VERSION = "7"


class BlobStagingClient:
    """Fetch and delete staged blobs."""

    def __init__(
        self,
        token: str = settings.blob_read_write_token,
        api_url: str = settings.blob_api_url,
        timeout: float = settings.http_timeout,
        transport: httpx.BaseTransport | None = None,
    ):
        self._token = token
        self.api_url = api_url.rstrip("/")
        self._http = httpx.Client(timeout=timeout, transport=transport, follow_redirects=True)

    def close(self) -> None:
        self._http.close()

    def fetch(self, url: str) -> bytes:
        """Download a staged blob.

        Raises:
            RemoteStoreError: If the blob cannot be downloaded
        """
        response = self._http.get(url)
        if not response.is_success:
            raise RemoteStoreError(
                f"Failed to fetch staged file {url}: HTTP {response.status_code}",
                status=response.status_code,
            )
        logger.debug(f"Fetched staged blob {url} ({len(response.content)} bytes)")
        return response.content

    def delete(self, urls: list[str]) -> None:
        """Delete staged blobs.

        Raises:
            DriveConfigurationError: If no read-write token is configured
            RemoteStoreError: If the staging service rejects the request
        """
        if not urls:
            return
        if not self._token:
            raise DriveConfigurationError("Blob read-write token not configured")

        response = self._http.post(
            f"{self.api_url}/delete",
            json={"urls": urls},
            headers={
                "Authorization": f"Bearer {self._token}",
                "x-api-version": BLOB_API_VERSION,
            },
        )
        if not response.is_success:
            raise RemoteStoreError(
                f"Failed to delete staged files: HTTP {response.status_code}",
                status=response.status_code,
            )
        logger.info(f"Deleted {len(urls)} staged blobs")

    def discard(self, urls: list[str]) -> None:
        """Delete staged blobs, logging instead of raising on failure."""
        try:
            self.delete(urls)
        except (httpx.HTTPError, RemoteStoreError, DriveConfigurationError) as e:
            logger.warning(f"Could not delete {len(urls)} staged blobs: {e}")


# Singleton client instance
_blob_client: BlobStagingClient | None = None


def get_blob_client() -> BlobStagingClient:
    global _blob_client
    if _blob_client is None:
        _blob_client = BlobStagingClient()
    return _blob_client
