"""Shared FastAPI dependencies."""

from fastapi import Depends, Query

from app.components.drive.models import DriveContext
from app.components.drive.store_provider import (
    DriveStoreProtocol,
    get_drive_store,
    resolve_workspace_id,
)


def get_store() -> DriveStoreProtocol:
    return get_drive_store()


def get_drive_context(
    workspaceId: str | None = Query(None, description="Workspace root; defaults to GOOGLE_WORKSPACE_ID"),
    store: DriveStoreProtocol = Depends(get_store),
) -> DriveContext:
    """Per-request context: workspace from the query string, shared store."""
    return DriveContext(workspace_id=resolve_workspace_id(workspaceId), store=store)
