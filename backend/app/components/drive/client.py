"""Google Drive v3 client.

Adapter from the store interface onto the official Drive v3 discovery client
(`googleapiclient`), authenticated as a service account:
- files().create                 create folder / upload file (MediaIoBaseUpload)
- files().list + list_next       list children, all pages
- files().get / get_media        metadata / content
- files().export                 export native document
- files().delete                 delete
- drives().list                  shared drives (workspaces)

Every call is a single attempt: no retries, no backoff. HttpError responses
are translated into DriveError subclasses; transport errors propagate as-is.
"""

import io
import logging
from typing import Any

from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from app.components.drive.errors import (
    DriveAuthError,
    DriveNotFoundError,
    DrivePermissionError,
    RemoteStoreError,
)
from app.components.drive.models import (
    FOLDER_MIME_TYPE,
    DriveItem,
    ServiceCredential,
    SharedDrive,
)
from app.components.drive.store_provider import ItemKind

logger = logging.getLogger(__name__)

SCOPES = [
    "https://www.googleapis.com/auth/drive.file",
    "https://www.googleapis.com/auth/drive",
    "https://www.googleapis.com/auth/presentations.readonly",
    "https://www.googleapis.com/auth/documents.readonly",
    "https://www.googleapis.com/auth/spreadsheets.readonly",
]

TOKEN_URI = "https://oauth2.googleapis.com/token"

ITEM_FIELDS = "id,name,mimeType,size,description,createdTime,modifiedTime,webViewLink,parents"
DRIVE_FIELDS = "id,name,createdTime,capabilities,restrictions"
LIST_PAGE_SIZE = 1000


def escape_query_value(value: str) -> str:
    """Escape a literal for use inside a single-quoted Drive query string."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


def build_children_query(
    parent_id: str,
    name: str | None = None,
    kind: ItemKind | None = None,
) -> str:
    """Build the `q` expression for listing a folder's children.

    Examples:
        build_children_query("root1")
            -> "'root1' in parents and trashed=false"
        build_children_query("root1", name="Data", kind="folder")
            -> "'root1' in parents and name='Data' and mimeType='application/vnd.google-apps.folder' and trashed=false"
    """
    clauses = [f"'{escape_query_value(parent_id)}' in parents"]
    if name is not None:
        clauses.append(f"name='{escape_query_value(name)}'")
    if kind == "folder":
        clauses.append(f"mimeType='{FOLDER_MIME_TYPE}'")
    elif kind == "file":
        clauses.append(f"mimeType!='{FOLDER_MIME_TYPE}'")
    clauses.append("trashed=false")
    return " and ".join(clauses)


class DriveClient:
    """Store backed by the Google Drive v3 API.

    Args:
        service: A Drive v3 resource from `googleapiclient.discovery.build`
    """

    def __init__(self, service: Any):
        self._service = service

    @classmethod
    def from_credential(cls, credential: ServiceCredential) -> "DriveClient":
        """Create a client from a service account email and private key."""
        credentials = service_account.Credentials.from_service_account_info(
            {
                "type": "service_account",
                "client_email": credential.client_email,
                "private_key": credential.private_key,
                "token_uri": TOKEN_URI,
            },
            scopes=SCOPES,
        )
        service = build("drive", "v3", credentials=credentials, cache_discovery=False)
        logger.info(f"Drive client initialized for {credential.client_email}")
        return cls(service)

    def close(self) -> None:
        self._service.close()

    def _files(self) -> Any:
        return self._service.files()

    # ==================== Store operations ====================

    def create_folder(self, name: str, parent_id: str, description: str | None = None) -> DriveItem:
        metadata: dict[str, Any] = {
            "name": name,
            "mimeType": FOLDER_MIME_TYPE,
            "parents": [parent_id],
        }
        if description is not None:
            metadata["description"] = description

        data = _execute(
            self._files().create(body=metadata, fields=ITEM_FIELDS, supportsAllDrives=True),
            "create folder",
        )
        folder = DriveItem.model_validate(data)
        logger.debug(f"Created folder '{name}' ({folder.id}) under {parent_id}")
        return folder

    def create_file(
        self,
        name: str,
        parent_id: str,
        content: bytes,
        mime_type: str,
        description: str | None = None,
    ) -> DriveItem:
        metadata: dict[str, Any] = {"name": name, "mimeType": mime_type, "parents": [parent_id]}
        if description is not None:
            metadata["description"] = description

        media = MediaIoBaseUpload(io.BytesIO(content), mimetype=mime_type, resumable=False)
        data = _execute(
            self._files().create(
                body=metadata, media_body=media, fields=ITEM_FIELDS, supportsAllDrives=True
            ),
            "upload file",
        )
        created = DriveItem.model_validate(data)
        logger.debug(f"Uploaded file '{name}' ({created.id}, {len(content)} bytes) to {parent_id}")
        return created

    def list_children(
        self,
        parent_id: str,
        name: str | None = None,
        kind: ItemKind | None = None,
        order_by: str | None = None,
    ) -> list[DriveItem]:
        params: dict[str, Any] = {
            "q": build_children_query(parent_id, name, kind),
            "fields": f"nextPageToken,files({ITEM_FIELDS})",
            "supportsAllDrives": True,
            "includeItemsFromAllDrives": True,
            "pageSize": LIST_PAGE_SIZE,
        }
        if order_by:
            params["orderBy"] = order_by

        files = self._files()
        items: list[DriveItem] = []
        request = files.list(**params)
        while request is not None:
            data = _execute(request, "list files")
            items.extend(DriveItem.model_validate(f) for f in data.get("files", []))
            request = files.list_next(request, data)
        return items

    def get_metadata(self, file_id: str) -> DriveItem:
        data = _execute(
            self._files().get(
                fileId=file_id, fields=f"{ITEM_FIELDS},capabilities", supportsAllDrives=True
            ),
            "get metadata",
        )
        return DriveItem.model_validate(data)

    def download(self, file_id: str) -> bytes:
        return _execute(self._files().get_media(fileId=file_id, supportsAllDrives=True), "download")

    def export(self, file_id: str, mime_type: str) -> bytes:
        return _execute(self._files().export(fileId=file_id, mimeType=mime_type), "export")

    def delete(self, file_id: str) -> None:
        _execute(self._files().delete(fileId=file_id, supportsAllDrives=True), "delete")
        logger.info(f"Deleted file {file_id}")

    def list_drives(self) -> list[SharedDrive]:
        drives = self._service.drives()
        result: list[SharedDrive] = []
        request = drives.list(fields=f"nextPageToken,drives({DRIVE_FIELDS})")
        while request is not None:
            data = _execute(request, "list drives")
            result.extend(SharedDrive.model_validate(d) for d in data.get("drives", []))
            request = drives.list_next(request, data)
        return result


def _execute(request: Any, action: str) -> Any:
    """Run one API request, translating HttpError by status."""
    try:
        return request.execute()
    except HttpError as e:
        raise _translate_http_error(e, action) from e


def _translate_http_error(error: HttpError, action: str) -> Exception:
    status = error.resp.status
    message = error.reason or f"HTTP {status}"
    logger.warning(f"Drive API {action} failed: {status} {message}")

    if status == 401:
        return DriveAuthError(message)
    if status == 403:
        return DrivePermissionError(message)
    if status == 404:
        return DriveNotFoundError(message)
    return RemoteStoreError(message, status=status)
