"""Path-addressed file and folder operations.

Provides service functions for:
- Creating files and folders at a logical path
- Listing folder contents (root, any path, folders only, files only)
- Deleting a file by id or by name within a path
"""

import logging

from app.components.drive.errors import (
    AmbiguousMatchError,
    DriveNotFoundError,
    DrivePermissionError,
    DriveValidationError,
)
from app.components.drive.models import (
    CreatedFile,
    CreatedFolder,
    DeletedFile,
    DriveContext,
    FolderListing,
    FolderRef,
    PathResolution,
)
from app.components.drive.paths import ROOT_PATH, ensure_folder_path, resolve_folder_path

logger = logging.getLogger(__name__)

DEFAULT_FILE_DESCRIPTION = "File created via Copy Tool"
DEFAULT_FOLDER_DESCRIPTION = "Folder created via Copy Tool"


def _require_existing(ctx: DriveContext, folder_path: str | None, label: str) -> PathResolution:
    target = resolve_folder_path(ctx, folder_path)
    if not target.exists:
        raise DriveNotFoundError(f"{label} '{folder_path}' does not exist")
    return target


def create_file_in_path(
    ctx: DriveContext,
    name: str,
    content: str | bytes,
    mime_type: str = "text/plain",
    description: str | None = None,
    folder_path: str | None = None,
) -> CreatedFile:
    """Create a file inside an existing folder path.

    Args:
        ctx: Workspace and store
        name: File name
        content: File content; text is encoded as UTF-8
        mime_type: MIME type of the content
        description: Optional description
        folder_path: Target folder path, root when empty

    Returns:
        The created file with its folder id and path

    Raises:
        DriveNotFoundError: If the target folder path does not exist
    """
    if not name or not name.strip():
        raise DriveValidationError("File name is required")

    target = _require_existing(ctx, folder_path, "Target folder path")
    body = content.encode("utf-8") if isinstance(content, str) else content

    file = ctx.store.create_file(
        name,
        target.folderId,
        body,
        mime_type,
        description=description or DEFAULT_FILE_DESCRIPTION,
    )
    logger.info(f"File '{name}' created in {target.path}")
    return CreatedFile(file=file, folderId=target.folderId, folderPath=target.path)


def create_file_with_path(
    ctx: DriveContext,
    name: str,
    content: str | bytes,
    mime_type: str = "text/plain",
    description: str | None = None,
    folder_path: str | None = None,
) -> CreatedFile:
    """Create a file, materializing its folder path first."""
    if folder_path:
        ensure_folder_path(ctx, folder_path)
    return create_file_in_path(ctx, name, content, mime_type, description, folder_path)


def create_folder_in_path(
    ctx: DriveContext,
    name: str,
    description: str | None = None,
    parent_path: str | None = None,
) -> CreatedFolder:
    """Create a folder inside an existing parent path.

    Raises:
        DriveValidationError: If the name is blank
        DriveNotFoundError: If the parent path does not exist
    """
    if not name or not name.strip():
        raise DriveValidationError("Folder name is required and must be a non-empty string")

    name = name.strip()
    parent = _require_existing(ctx, parent_path, "Parent folder path")
    folder = ctx.store.create_folder(
        name,
        parent.folderId,
        description=description or DEFAULT_FOLDER_DESCRIPTION,
    )
    full_path = f"/{name}" if parent.path == ROOT_PATH else f"{parent.path}/{name}"
    logger.info(f"Folder created: {full_path} ({folder.id})")
    return CreatedFolder(
        folder=folder,
        parentFolderId=parent.folderId,
        parentFolderPath=parent.path,
        fullPath=full_path,
    )


def list_folder_contents(ctx: DriveContext, folder_path: str | None) -> FolderListing:
    """List every file and folder directly inside a path."""
    folder = _require_existing(ctx, folder_path, "Folder path")
    contents = ctx.store.list_children(folder.folderId)
    return FolderListing(folder=FolderRef(id=folder.folderId, path=folder.path), contents=contents)


def list_root_contents(ctx: DriveContext) -> FolderListing:
    """List every file and folder in the workspace root, by name."""
    contents = ctx.store.list_children(ctx.workspace_id, order_by="name")
    return FolderListing(folder=FolderRef(id=ctx.workspace_id, path=ROOT_PATH), contents=contents)


def list_root_files(ctx: DriveContext) -> FolderListing:
    """List files (not folders) in the workspace root, by name."""
    contents = ctx.store.list_children(ctx.workspace_id, kind="file", order_by="name")
    return FolderListing(folder=FolderRef(id=ctx.workspace_id, path=ROOT_PATH), contents=contents)


def get_folders_in_path(ctx: DriveContext, folder_path: str | None) -> FolderListing:
    """List the folders directly inside a path, by name."""
    folder = _require_existing(ctx, folder_path, "Target folder path")
    folders = ctx.store.list_children(folder.folderId, kind="folder", order_by="name")
    return FolderListing(folder=FolderRef(id=folder.folderId, path=folder.path), contents=folders)


def delete_file(ctx: DriveContext, file_id: str) -> DeletedFile:
    """Delete a file by id.

    Raises:
        DriveValidationError: If no id is given
        DriveNotFoundError: If the file does not exist
        DrivePermissionError: If the store reports the file cannot be deleted
    """
    if not file_id or not file_id.strip():
        raise DriveValidationError("Valid file ID is required")

    info = ctx.store.get_metadata(file_id)
    if info.capabilities is not None and not info.capabilities.get("canDelete", True):
        raise DrivePermissionError(
            "You do not have permission to delete this file. It may be owned by "
            "another user or in a restricted location."
        )

    ctx.store.delete(info.id)
    logger.info(f"File '{info.name}' ({info.id}) deleted")
    return DeletedFile(id=info.id, name=info.name or "Unknown file", mimeType=info.mimeType)


def delete_file_by_path(ctx: DriveContext, file_name: str, folder_path: str | None = None) -> DeletedFile:
    """Delete a file by name within a folder path.

    Raises:
        DriveNotFoundError: If the folder or the file does not exist
        AmbiguousMatchError: If several files share the name
    """
    if not file_name or not file_name.strip():
        raise DriveValidationError("Valid file name is required")

    location = folder_path if folder_path and folder_path.strip() else "root"
    folder = _require_existing(ctx, folder_path, "Target folder path")

    matches = ctx.store.list_children(folder.folderId, name=file_name)
    if not matches:
        raise DriveNotFoundError(f"File '{file_name}' not found in {location}")
    if len(matches) > 1:
        raise AmbiguousMatchError(
            f"Multiple files found with name '{file_name}' in {location}. "
            "Please use file ID for deletion.",
            matches=len(matches),
        )

    target = matches[0]
    ctx.store.delete(target.id)
    logger.info(f"File '{target.name}' ({target.id}) deleted from {location}")
    return DeletedFile(id=target.id, name=target.name, mimeType=target.mimeType, path=location)
