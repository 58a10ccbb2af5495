"""Data models for the Drive repository layer.

Field names follow the Drive v3 resource representation (camelCase) so that
API payloads can be validated straight into these models.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from app.components.drive.store_provider import DriveStoreProtocol

FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"
NATIVE_MIME_PREFIX = "application/vnd.google-apps."
PDF_MIME_TYPE = "application/pdf"
DEFAULT_MIME_TYPE = "application/octet-stream"


class DriveItem(BaseModel):
    """A file or folder in the remote store."""

    id: str
    name: str
    mimeType: str = DEFAULT_MIME_TYPE
    size: str | None = None
    description: str | None = None
    createdTime: str | None = None
    modifiedTime: str | None = None
    webViewLink: str | None = None
    parents: list[str] = Field(default_factory=list)
    capabilities: dict[str, bool] | None = None

    @property
    def is_folder(self) -> bool:
        return self.mimeType == FOLDER_MIME_TYPE

    @property
    def is_native_document(self) -> bool:
        """Docs editors files (Docs, Slides, Sheets, Drawings) that support export."""
        return self.mimeType.startswith(NATIVE_MIME_PREFIX) and not self.is_folder


class SharedDrive(BaseModel):
    """A shared drive (workspace) visible to the service account."""

    id: str
    name: str
    createdTime: str | None = None
    capabilities: dict[str, bool] | None = None
    restrictions: dict[str, bool] | None = None


class ServiceCredential(BaseModel):
    """Service account identity used to authenticate against the store."""

    client_email: str
    private_key: str


class PathResolution(BaseModel):
    """Result of walking a slash-delimited folder path."""

    folderId: str
    path: str
    exists: bool


class PathMaterialization(PathResolution):
    """Result of walking a folder path while creating missing segments."""

    created: bool = False
    createdFolders: list[str] = Field(default_factory=list)


class FolderRef(BaseModel):
    id: str
    path: str


class CreatedFile(BaseModel):
    file: DriveItem
    folderId: str
    folderPath: str


class CreatedFolder(BaseModel):
    folder: DriveItem
    parentFolderId: str
    parentFolderPath: str
    fullPath: str


class FolderListing(BaseModel):
    folder: FolderRef
    contents: list[DriveItem] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.contents)


class DeletedFile(BaseModel):
    id: str
    name: str
    mimeType: str
    path: str = "root"


@dataclass
class DriveContext:
    """Explicit per-call context: which workspace root, through which store.

    Passed into every repository-layer call instead of reading ambient
    configuration, so tests can run several workspaces side by side.
    """

    workspace_id: str
    store: "DriveStoreProtocol"
