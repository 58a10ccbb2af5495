"""Drive Repository Module.

This module addresses folders and files in a Google Drive workspace by
slash-delimited logical path.

Components:
- models.py: DriveItem, DriveContext and path/listing result models
- errors.py: DriveError hierarchy with an ErrorKind per failure class
- client.py: Google Drive v3 REST client (service account auth)
- memory.py: In-memory store with the same interface
- store_provider.py: Store selection and context construction
- paths.py: Path resolution and materialization
- files.py: File/folder create, list and delete by path

Usage:
    from app.components.drive import build_drive_context, ensure_folder_path

    ctx = build_drive_context(workspace_id)
    target = ensure_folder_path(ctx, "Launch/Assets")
"""

from app.components.drive.errors import (
    AmbiguousMatchError,
    DriveAuthError,
    DriveConfigurationError,
    DriveError,
    DriveNotFoundError,
    DrivePermissionError,
    DriveValidationError,
    ErrorKind,
    RemoteStoreError,
)
from app.components.drive.files import (
    create_file_in_path,
    create_file_with_path,
    create_folder_in_path,
    delete_file,
    delete_file_by_path,
    get_folders_in_path,
    list_folder_contents,
    list_root_contents,
    list_root_files,
)
from app.components.drive.models import (
    FOLDER_MIME_TYPE,
    DriveContext,
    DriveItem,
    PathMaterialization,
    PathResolution,
    SharedDrive,
)
from app.components.drive.paths import ensure_folder_path, resolve_folder_path
from app.components.drive.store_provider import (
    DriveStoreProtocol,
    build_drive_context,
    get_drive_store,
    reset_drive_store,
)

__all__ = [
    # Errors
    "DriveError",
    "ErrorKind",
    "DriveValidationError",
    "DriveNotFoundError",
    "AmbiguousMatchError",
    "DrivePermissionError",
    "DriveAuthError",
    "DriveConfigurationError",
    "RemoteStoreError",
    # Models
    "FOLDER_MIME_TYPE",
    "DriveContext",
    "DriveItem",
    "SharedDrive",
    "PathResolution",
    "PathMaterialization",
    # Store
    "DriveStoreProtocol",
    "build_drive_context",
    "get_drive_store",
    "reset_drive_store",
    # Paths
    "resolve_folder_path",
    "ensure_folder_path",
    # File operations
    "create_file_in_path",
    "create_file_with_path",
    "create_folder_in_path",
    "list_folder_contents",
    "list_root_contents",
    "list_root_files",
    "get_folders_in_path",
    "delete_file",
    "delete_file_by_path",
]
