"""Unified store provider for the Drive repository layer.

Selects between the real Google Drive client and the in-memory store
(for local development and tests) based on settings.drive_store_type.

Usage:
    from app.components.drive.store_provider import build_drive_context

    ctx = build_drive_context(workspace_id)
    folder = ctx.store.create_folder("Launch", ctx.workspace_id)
"""

import logging
from typing import Literal, Protocol

from app.components.drive.errors import DriveConfigurationError, DriveValidationError
from app.components.drive.models import DriveContext, DriveItem, ServiceCredential, SharedDrive
from app.settings import settings

logger = logging.getLogger(__name__)

ItemKind = Literal["folder", "file"]

DEFAULT_MEMORY_WORKSPACE_ID = "workspace_local"


class DriveStoreProtocol(Protocol):
    """Protocol defining the remote store interface."""

    def create_folder(
        self, name: str, parent_id: str, description: str | None = None
    ) -> DriveItem: ...

    def create_file(
        self,
        name: str,
        parent_id: str,
        content: bytes,
        mime_type: str,
        description: str | None = None,
    ) -> DriveItem: ...

    def list_children(
        self,
        parent_id: str,
        name: str | None = None,
        kind: ItemKind | None = None,
        order_by: str | None = None,
    ) -> list[DriveItem]: ...

    def get_metadata(self, file_id: str) -> DriveItem: ...
    def download(self, file_id: str) -> bytes: ...
    def export(self, file_id: str, mime_type: str) -> bytes: ...
    def delete(self, file_id: str) -> None: ...
    def list_drives(self) -> list[SharedDrive]: ...


# Singleton store instance
_drive_store: DriveStoreProtocol | None = None


def get_service_credential() -> ServiceCredential:
    """Build the service account credential from settings.

    Raises:
        DriveConfigurationError: If the credential is not configured
    """
    if not settings.is_google_configured():
        raise DriveConfigurationError(
            "Google service account credentials not configured. Please check "
            "GOOGLE_SERVICE_ACCOUNT_EMAIL and GOOGLE_PRIVATE_KEY environment variables"
        )
    return ServiceCredential(
        client_email=settings.google_service_account_email,
        private_key=settings.get_private_key(),
    )


def get_drive_store() -> DriveStoreProtocol:
    """Get the configured store.

    Returns:
        DriveClient when drive_store_type is "google"
        InMemoryDriveStore when drive_store_type is "in_memory"
    """
    global _drive_store

    if _drive_store is not None:
        return _drive_store

    if settings.drive_store_type == "in_memory":
        from app.components.drive.memory import InMemoryDriveStore

        store = InMemoryDriveStore()
        store.add_workspace(settings.google_workspace_id or DEFAULT_MEMORY_WORKSPACE_ID, "Local Workspace")
        _drive_store = store
        logger.info("DriveStore: Using in-memory store (single instance only)")
    else:
        from app.components.drive.client import DriveClient

        _drive_store = DriveClient.from_credential(get_service_credential())
        logger.info("DriveStore: Using Google Drive API")

    return _drive_store


def reset_drive_store() -> None:
    """Reset the store singleton (for testing)."""
    global _drive_store
    _drive_store = None


def resolve_workspace_id(workspace_id: str | None = None) -> str:
    """Pick the request workspace id, falling back to configuration.

    Raises:
        DriveValidationError: If neither is set
    """
    target = workspace_id or settings.google_workspace_id
    if not target and settings.drive_store_type == "in_memory":
        target = DEFAULT_MEMORY_WORKSPACE_ID
    if not target:
        raise DriveValidationError(
            "No workspace ID specified. Please provide workspaceId parameter "
            "or configure GOOGLE_WORKSPACE_ID environment variable."
        )
    return target


def build_drive_context(workspace_id: str | None = None) -> DriveContext:
    """Build the explicit context for one repository-layer call chain."""
    return DriveContext(workspace_id=resolve_workspace_id(workspace_id), store=get_drive_store())
