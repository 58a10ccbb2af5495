"""Thread-safe in-memory implementation of the Drive store.

Mirrors the subset of Drive semantics the repository layer relies on:
- folders and files addressed by opaque ids, each with one parent
- listings filtered by parent, exact name and folder/file kind
- ordering by createdTime (creation order) or name
- export of native documents only

Used for local development (drive_store_type=in_memory) and tests.
"""

import threading
import uuid

from app.components.drive.errors import DriveNotFoundError, RemoteStoreError
from app.components.drive.models import (
    FOLDER_MIME_TYPE,
    PDF_MIME_TYPE,
    DriveItem,
    SharedDrive,
)
from app.components.drive.store_provider import ItemKind
from app.utils import get_rfc3339_now


class InMemoryDriveStore:
    """Thread-safe in-memory Drive store.

    Uses a reentrant lock (RLock) to ensure thread safety for all operations.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._items: dict[str, DriveItem] = {}
        self._content: dict[str, bytes] = {}
        self._order: dict[str, int] = {}
        self._drives: dict[str, SharedDrive] = {}
        self._sequence = 0

    # Workspace operations
    def add_workspace(self, workspace_id: str, name: str = "Workspace") -> SharedDrive:
        """Register a workspace root that folders can be created under."""
        with self._lock:
            drive = SharedDrive(id=workspace_id, name=name, createdTime=get_rfc3339_now())
            self._drives[workspace_id] = drive
            return drive

    def list_drives(self) -> list[SharedDrive]:
        with self._lock:
            return list(self._drives.values())

    # Write operations
    def create_folder(self, name: str, parent_id: str, description: str | None = None) -> DriveItem:
        return self._insert(name, parent_id, FOLDER_MIME_TYPE, None, description)

    def create_file(
        self,
        name: str,
        parent_id: str,
        content: bytes,
        mime_type: str,
        description: str | None = None,
    ) -> DriveItem:
        return self._insert(name, parent_id, mime_type, content, description)

    def seed(self, item: DriveItem, content: bytes = b"") -> DriveItem:
        """Insert an item with a caller-chosen id (e.g. a linked document)."""
        with self._lock:
            self._sequence += 1
            self._items[item.id] = item
            self._order[item.id] = self._sequence
            self._content[item.id] = content
            return item

    def delete(self, file_id: str) -> None:
        with self._lock:
            if file_id not in self._items:
                raise DriveNotFoundError(f"File not found: {file_id}")
            for child_id in [i.id for i in self._items.values() if file_id in i.parents]:
                self.delete(child_id)
            del self._items[file_id]
            self._content.pop(file_id, None)
            self._order.pop(file_id, None)

    # Read operations
    def list_children(
        self,
        parent_id: str,
        name: str | None = None,
        kind: ItemKind | None = None,
        order_by: str | None = None,
    ) -> list[DriveItem]:
        with self._lock:
            items = [i for i in self._items.values() if parent_id in i.parents]
            if name is not None:
                items = [i for i in items if i.name == name]
            if kind == "folder":
                items = [i for i in items if i.is_folder]
            elif kind == "file":
                items = [i for i in items if not i.is_folder]

            if order_by == "name":
                items.sort(key=lambda i: (i.name.lower(), self._order[i.id]))
            else:
                items.sort(key=lambda i: self._order[i.id])
            return [i.model_copy(deep=True) for i in items]

    def get_metadata(self, file_id: str) -> DriveItem:
        with self._lock:
            item = self._items.get(file_id)
            if item is None:
                raise DriveNotFoundError(f"File not found: {file_id}.")
            return item.model_copy(deep=True)

    def download(self, file_id: str) -> bytes:
        with self._lock:
            item = self.get_metadata(file_id)
            if item.is_folder or item.is_native_document:
                raise RemoteStoreError(
                    f"Only files with binary content can be downloaded: {item.name}", status=403
                )
            return self._content.get(file_id, b"")

    def export(self, file_id: str, mime_type: str) -> bytes:
        with self._lock:
            item = self.get_metadata(file_id)
            if not item.is_native_document:
                raise RemoteStoreError(
                    f"Export only supports Docs Editors files: {item.name}", status=403
                )
            body = self._content.get(file_id, b"")
            if mime_type == PDF_MIME_TYPE:
                return b"%PDF-1.4\n" + body
            return body

    def clear_all(self) -> None:
        """Clear all data (useful for testing)."""
        with self._lock:
            self._items.clear()
            self._content.clear()
            self._order.clear()
            self._drives.clear()

    def _insert(
        self,
        name: str,
        parent_id: str,
        mime_type: str,
        content: bytes | None,
        description: str | None,
    ) -> DriveItem:
        with self._lock:
            parent = self._items.get(parent_id)
            if parent_id not in self._drives and (parent is None or not parent.is_folder):
                raise DriveNotFoundError(f"File not found: {parent_id}.")

            now = get_rfc3339_now()
            item_id = uuid.uuid4().hex[:16]
            item = DriveItem(
                id=item_id,
                name=name,
                mimeType=mime_type,
                size=None if content is None else str(len(content)),
                description=description,
                createdTime=now,
                modifiedTime=now,
                webViewLink=f"https://drive.local/{'folders' if content is None else 'file/d'}/{item_id}",
                parents=[parent_id],
                capabilities={"canDelete": True},
            )
            self._sequence += 1
            self._items[item_id] = item
            self._order[item_id] = self._sequence
            if content is not None:
                self._content[item_id] = content
            return item.model_copy(deep=True)
