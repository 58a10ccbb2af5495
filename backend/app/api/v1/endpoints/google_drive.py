"""Google Drive workspace API endpoints.

Administrative access to the path-addressed repository layer: list
workspaces, create files and folders by path, list and delete.
"""

from fastapi import APIRouter, Depends, Query

from app.api.deps import get_drive_context, get_store
from app.components.drive import files, paths
from app.components.drive.errors import DriveValidationError
from app.components.drive.models import DriveContext
from app.components.drive.store_provider import DriveStoreProtocol
from app.models.schemas import (
    CreateFolderRequest,
    CreateTextFileRequest,
    DeleteFileRequest,
    EnsurePathRequest,
)
from app.utils import get_timestamp_ms

router = APIRouter()

DEFAULT_TEXT_CONTENT = "This is a test file created via Google Drive API from the copy-tool application."


@router.get("")
def list_workspaces(store: DriveStoreProtocol = Depends(get_store)):
    """List the shared drives visible to the service account."""
    drives = store.list_drives()
    return {
        "success": True,
        "workspaces": [d.model_dump() for d in drives],
        "message": "Workspaces fetched successfully",
    }


@router.post("")
def create_text_file(request: CreateTextFileRequest, ctx: DriveContext = Depends(get_drive_context)):
    """Create a text file, optionally materializing its folder path first."""
    name = request.fileName or f"test-file-{get_timestamp_ms()}.txt"
    description = (
        "Custom text file created via copy-tool application"
        if request.fileContent
        else "Test file created via copy-tool application"
    )
    create = files.create_file_with_path if request.createPath else files.create_file_in_path
    created = create(
        ctx,
        name,
        request.fileContent or DEFAULT_TEXT_CONTENT,
        "text/plain",
        description,
        request.folderPath,
    )
    return {
        "success": True,
        "file": {
            "id": created.file.id,
            "name": created.file.name,
            "link": created.file.webViewLink,
            "size": created.file.size,
            "createdTime": created.file.createdTime,
            "folderId": created.folderId,
            "folderPath": created.folderPath,
        },
        "message": f"File created successfully in {created.folderPath}",
    }


@router.get("/files")
def list_files(ctx: DriveContext = Depends(get_drive_context)):
    """List the files in the workspace root."""
    listing = files.list_root_files(ctx)
    return {
        "success": True,
        "folder": listing.folder.model_dump(),
        "files": [f.model_dump() for f in listing.contents],
        "count": listing.count,
        "message": "Files in workspace root",
    }


@router.post("/folder")
def create_folder(request: CreateFolderRequest, ctx: DriveContext = Depends(get_drive_context)):
    """Create a folder inside an existing parent path."""
    created = files.create_folder_in_path(ctx, request.name, request.description, request.parentPath)
    return {
        "success": True,
        "folder": {
            "id": created.folder.id,
            "name": created.folder.name,
            "link": created.folder.webViewLink,
            "createdTime": created.folder.createdTime,
            "parentFolderId": created.parentFolderId,
            "parentFolderPath": created.parentFolderPath,
            "fullPath": created.fullPath,
        },
        "message": f"Folder created successfully in {created.parentFolderPath}",
    }


@router.post("/delete")
def delete_file(request: DeleteFileRequest, ctx: DriveContext = Depends(get_drive_context)):
    """Delete a file by id, or by name within a folder path."""
    if request.fileId:
        deleted = files.delete_file(ctx, request.fileId)
        message = f'File "{deleted.name}" deleted successfully'
    elif request.fileName:
        deleted = files.delete_file_by_path(ctx, request.fileName, request.folderPath)
        message = f'File "{deleted.name}" deleted successfully from {deleted.path}'
    else:
        raise DriveValidationError("Either fileId or fileName must be provided")

    return {"success": True, "deletedFile": deleted.model_dump(), "message": message}


@router.get("/resolve")
def resolve_path(
    path: str | None = Query(None, description="Slash-delimited folder path"),
    ctx: DriveContext = Depends(get_drive_context),
):
    """Resolve a folder path without creating anything."""
    resolution = paths.resolve_folder_path(ctx, path)
    return {"success": True, **resolution.model_dump()}


@router.post("/ensure")
def ensure_path(request: EnsurePathRequest, ctx: DriveContext = Depends(get_drive_context)):
    """Resolve a folder path, creating missing folders."""
    result = paths.ensure_folder_path(ctx, request.path)
    message = (
        f"Created {len(result.createdFolders)} folders for {result.path}"
        if result.created
        else f"Folder path {result.path} already exists"
    )
    return {"success": True, **result.model_dump(), "message": message}


@router.get("/contents")
def folder_contents(
    path: str | None = Query(None, description="Folder path; the workspace root when empty"),
    ctx: DriveContext = Depends(get_drive_context),
):
    """List every file and folder directly inside a path."""
    if paths.split_path(path):
        listing = files.list_folder_contents(ctx, path)
        message = f"Contents of {listing.folder.path}"
    else:
        listing = files.list_root_contents(ctx)
        message = "Contents of workspace root"
    return {
        "success": True,
        "folder": listing.folder.model_dump(),
        "contents": [item.model_dump() for item in listing.contents],
        "count": listing.count,
        "message": message,
    }


@router.get("/folders")
def folders_in_path(
    path: str | None = Query(None, description="Folder path; the workspace root when empty"),
    ctx: DriveContext = Depends(get_drive_context),
):
    """List the folders directly inside a path."""
    listing = files.get_folders_in_path(ctx, path)
    return {
        "success": True,
        "folder": listing.folder.model_dump(),
        "folders": [item.model_dump() for item in listing.contents],
        "count": listing.count,
        "message": f"Found {listing.count} folders in {listing.folder.path}",
    }
