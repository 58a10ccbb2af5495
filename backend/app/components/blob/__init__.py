"""Blob Staging Module.

Usage:
    from app.components.blob import get_blob_client

    content = get_blob_client().fetch(url)
"""

from app.components.blob.staging import BlobStagingClient, get_blob_client

__all__ = ["BlobStagingClient", "get_blob_client"]
