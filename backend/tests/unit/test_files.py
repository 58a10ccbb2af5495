"""Tests for path-addressed file and folder operations."""

import pytest

from app.components.drive.errors import (
    AmbiguousMatchError,
    DriveNotFoundError,
    DrivePermissionError,
    DriveValidationError,
)
from app.components.drive.files import (
    DEFAULT_FILE_DESCRIPTION,
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
from app.components.drive.memory import InMemoryDriveStore
from app.components.drive.models import DriveContext
from app.components.drive.paths import ensure_folder_path


class TestCreate:
    """Test file and folder creation by path."""

    def test_create_file_in_root(self, ctx, memory_store, workspace_id):
        created = create_file_in_path(ctx, "hello.txt", "hi there")

        assert created.folderId == workspace_id
        assert created.folderPath == "/"
        assert memory_store.download(created.file.id) == b"hi there"
        assert created.file.description == DEFAULT_FILE_DESCRIPTION

    def test_create_file_in_missing_path(self, ctx):
        with pytest.raises(DriveNotFoundError, match="does not exist"):
            create_file_in_path(ctx, "hello.txt", "hi", folder_path="Nope/Here")

    def test_create_file_with_path_materializes(self, ctx, memory_store):
        created = create_file_with_path(ctx, "copy.md", "# Copy", "text/markdown", folder_path="Launch/Email")

        assert created.folderPath == "/Launch/Email"
        assert memory_store.get_metadata(created.file.id).mimeType == "text/markdown"

    def test_create_folder_full_path(self, ctx):
        ensure_folder_path(ctx, "Launch")

        created = create_folder_in_path(ctx, "  Assets ", parent_path="Launch")

        assert created.folder.name == "Assets"
        assert created.fullPath == "/Launch/Assets"
        assert created.parentFolderPath == "/Launch"

    def test_create_folder_in_root(self, ctx):
        assert create_folder_in_path(ctx, "Top").fullPath == "/Top"

    def test_create_folder_blank_name(self, ctx):
        with pytest.raises(DriveValidationError):
            create_folder_in_path(ctx, "   ")


class TestList:
    """Test folder listings."""

    def test_root_contents_sorted_by_name(self, ctx, memory_store, workspace_id):
        memory_store.create_folder("beta", workspace_id)
        memory_store.create_file("Alpha.txt", workspace_id, b"", "text/plain")

        listing = list_root_contents(ctx)

        assert [i.name for i in listing.contents] == ["Alpha.txt", "beta"]
        assert listing.count == 2

    def test_root_files_excludes_folders(self, ctx, memory_store, workspace_id):
        memory_store.create_folder("Folder", workspace_id)
        memory_store.create_file("file.txt", workspace_id, b"", "text/plain")

        assert [i.name for i in list_root_files(ctx).contents] == ["file.txt"]

    def test_folder_contents_and_folders(self, ctx, memory_store):
        target = ensure_folder_path(ctx, "A")
        memory_store.create_folder("Sub", target.folderId)
        memory_store.create_file("f.txt", target.folderId, b"", "text/plain")

        assert list_folder_contents(ctx, "A").count == 2
        folders = get_folders_in_path(ctx, "A")
        assert [i.name for i in folders.contents] == ["Sub"]
        assert folders.folder.path == "/A"

    def test_missing_folder(self, ctx):
        with pytest.raises(DriveNotFoundError):
            list_folder_contents(ctx, "Missing")


class TestDelete:
    """Test deletion by id and by name."""

    def test_delete_by_id(self, ctx, memory_store):
        created = create_file_in_path(ctx, "a.txt", "a")

        deleted = delete_file(ctx, created.file.id)

        assert deleted.name == "a.txt"
        with pytest.raises(DriveNotFoundError):
            memory_store.get_metadata(created.file.id)

    def test_delete_missing_id(self, ctx):
        with pytest.raises(DriveNotFoundError):
            delete_file(ctx, "nope")

    def test_delete_blank_id(self, ctx):
        with pytest.raises(DriveValidationError):
            delete_file(ctx, " ")

    def test_delete_without_permission(self, workspace_id):
        class ReadOnlyStore(InMemoryDriveStore):
            def get_metadata(self, file_id):
                item = super().get_metadata(file_id)
                item.capabilities = {"canDelete": False}
                return item

        store = ReadOnlyStore()
        store.add_workspace(workspace_id)
        ctx = DriveContext(workspace_id, store)
        created = create_file_in_path(ctx, "a.txt", "a")

        with pytest.raises(DrivePermissionError):
            delete_file(ctx, created.file.id)

    def test_delete_by_path(self, ctx):
        ensure_folder_path(ctx, "Launch/Data")
        create_file_in_path(ctx, "a.txt", "a", folder_path="Launch/Data")

        deleted = delete_file_by_path(ctx, "a.txt", "Launch/Data")

        assert deleted.path == "Launch/Data"
        assert list_folder_contents(ctx, "Launch/Data").count == 0

    def test_delete_by_path_defaults_to_root(self, ctx):
        create_file_in_path(ctx, "a.txt", "a")

        assert delete_file_by_path(ctx, "a.txt").path == "root"

    def test_delete_by_path_ambiguous(self, ctx):
        create_file_in_path(ctx, "a.txt", "1")
        create_file_in_path(ctx, "a.txt", "2")

        with pytest.raises(AmbiguousMatchError, match="Please use file ID"):
            delete_file_by_path(ctx, "a.txt")

    def test_delete_by_path_missing_file(self, ctx):
        with pytest.raises(DriveNotFoundError, match="not found in root"):
            delete_file_by_path(ctx, "ghost.txt")
