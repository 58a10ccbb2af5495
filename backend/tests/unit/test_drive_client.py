"""Tests for the Google Drive client.

The Drive v3 resource is a MagicMock; HttpError instances carry a dict-based
response with a status and reason, the shape httplib2 returns.

Test cases:
- Query building and literal escaping
- Request arguments for create/list/export/delete
- Pagination through list_next
- HttpError status to error translation
"""

import json
from unittest.mock import MagicMock

import pytest
from googleapiclient.errors import HttpError
from googleapiclient.http import MediaIoBaseUpload

from app.components.drive.client import DriveClient, build_children_query, escape_query_value
from app.components.drive.errors import (
    DriveAuthError,
    DriveNotFoundError,
    DrivePermissionError,
    RemoteStoreError,
)
from app.components.drive.models import FOLDER_MIME_TYPE


class ErrorResponse(dict):
    def __init__(self, status: int):
        super().__init__({"status": str(status), "content-type": "application/json; charset=UTF-8"})
        self.status = status
        self.reason = "Error"


def http_error(status: int, message: str | None = None) -> HttpError:
    content = json.dumps({"error": {"code": status, "message": message}}).encode() if message else b""
    return HttpError(ErrorResponse(status), content)


@pytest.fixture
def service():
    return MagicMock()


@pytest.fixture
def files(service):
    return service.files.return_value


@pytest.fixture
def drive(service):
    return DriveClient(service)


class TestQueryBuilding:
    """Test Drive `q` expression construction."""

    def test_children_only(self):
        assert build_children_query("root1") == "'root1' in parents and trashed=false"

    def test_folder_by_name(self):
        query = build_children_query("root1", name="Data", kind="folder")
        assert query == (
            f"'root1' in parents and name='Data' and mimeType='{FOLDER_MIME_TYPE}' and trashed=false"
        )

    def test_files_only(self):
        assert f"mimeType!='{FOLDER_MIME_TYPE}'" in build_children_query("root1", kind="file")

    def test_quotes_are_escaped(self):
        assert escape_query_value("Mom's Day") == "Mom\\'s Day"
        assert "name='Mom\\'s Day'" in build_children_query("root1", name="Mom's Day")


class TestRequests:
    """Test arguments passed to the Drive resource."""

    def test_create_folder(self, drive, files):
        files.create.return_value.execute.return_value = {
            "id": "f1",
            "name": "Launch",
            "mimeType": FOLDER_MIME_TYPE,
        }

        item = drive.create_folder("Launch", "root1", description="Campaign folder for: Launch")

        kwargs = files.create.call_args.kwargs
        assert kwargs["supportsAllDrives"] is True
        assert kwargs["body"] == {
            "name": "Launch",
            "mimeType": FOLDER_MIME_TYPE,
            "parents": ["root1"],
            "description": "Campaign folder for: Launch",
        }
        assert "media_body" not in kwargs
        assert item.id == "f1"
        assert item.is_folder

    def test_create_file_uploads_media(self, drive, files):
        files.create.return_value.execute.return_value = {
            "id": "x1",
            "name": "a.txt",
            "mimeType": "text/plain",
            "size": "5",
        }

        item = drive.create_file("a.txt", "data1", b"hello", "text/plain")

        kwargs = files.create.call_args.kwargs
        media = kwargs["media_body"]
        assert isinstance(media, MediaIoBaseUpload)
        assert media.mimetype() == "text/plain"
        assert media.getbytes(0, 5) == b"hello"
        assert kwargs["body"]["parents"] == ["data1"]
        assert item.size == "5"

    def test_list_children_follows_pages(self, drive, files):
        first, second = MagicMock(), MagicMock()
        first.execute.return_value = {"files": [{"id": "a", "name": "A"}], "nextPageToken": "p2"}
        second.execute.return_value = {"files": [{"id": "b", "name": "B"}]}
        files.list.return_value = first
        files.list_next.side_effect = [second, None]

        items = drive.list_children("root1", kind="folder", order_by="createdTime")

        assert [i.id for i in items] == ["a", "b"]
        kwargs = files.list.call_args.kwargs
        assert "'root1' in parents" in kwargs["q"]
        assert kwargs["orderBy"] == "createdTime"
        assert kwargs["includeItemsFromAllDrives"] is True

    def test_list_children_without_order(self, drive, files):
        files.list.return_value.execute.return_value = {"files": []}
        files.list_next.return_value = None

        assert drive.list_children("root1") == []
        assert "orderBy" not in files.list.call_args.kwargs

    def test_export_pdf(self, drive, files):
        files.export.return_value.execute.return_value = b"%PDF-1.4"

        assert drive.export("doc1", "application/pdf") == b"%PDF-1.4"
        files.export.assert_called_once_with(fileId="doc1", mimeType="application/pdf")

    def test_download_uses_get_media(self, drive, files):
        files.get_media.return_value.execute.return_value = b"content"

        assert drive.download("f1") == b"content"
        assert files.get_media.call_args.kwargs["fileId"] == "f1"

    def test_get_metadata_requests_capabilities(self, drive, files):
        files.get.return_value.execute.return_value = {
            "id": "f1",
            "name": "a.txt",
            "mimeType": "text/plain",
            "capabilities": {"canDelete": True},
        }

        item = drive.get_metadata("f1")

        assert item.capabilities == {"canDelete": True}
        assert files.get.call_args.kwargs["fields"].endswith(",capabilities")

    def test_delete(self, drive, files):
        drive.delete("f1")

        files.delete.assert_called_once_with(fileId="f1", supportsAllDrives=True)
        files.delete.return_value.execute.assert_called_once_with()

    def test_list_drives(self, drive, service):
        drives = service.drives.return_value
        drives.list.return_value.execute.return_value = {"drives": [{"id": "d1", "name": "Marketing"}]}
        drives.list_next.return_value = None

        assert [d.name for d in drive.list_drives()] == ["Marketing"]


class TestErrorTranslation:
    """Test HttpError status to DriveError mapping."""

    @pytest.mark.parametrize(
        "status,error_type",
        [
            (401, DriveAuthError),
            (403, DrivePermissionError),
            (404, DriveNotFoundError),
            (500, RemoteStoreError),
        ],
    )
    def test_status_mapping(self, drive, files, status, error_type):
        files.get.return_value.execute.side_effect = http_error(status, "nope")

        with pytest.raises(error_type, match="nope"):
            drive.get_metadata("f1")

    def test_remote_error_keeps_status(self, drive, files):
        files.delete.return_value.execute.side_effect = http_error(503)

        with pytest.raises(RemoteStoreError) as exc_info:
            drive.delete("f1")

        assert exc_info.value.status == 503

    def test_failure_on_later_page_propagates(self, drive, files):
        second = MagicMock()
        second.execute.side_effect = http_error(500, "backend error")
        files.list.return_value.execute.return_value = {"files": [{"id": "a", "name": "A"}]}
        files.list_next.return_value = second

        with pytest.raises(RemoteStoreError, match="backend error"):
            drive.list_children("root1")
