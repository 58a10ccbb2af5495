"""Tests for campaign read-back.

Test cases:
- is_text_file classification
- list_campaigns: Global folder excluded, Data never a channel
- get_campaign: Data split, duplicate campaigns, per-channel failures
- get_touchpoint_content: text content, ambiguity, per-file failures
"""

import pytest

from app.components.campaign.builder import build_campaign
from app.components.campaign.models import ChannelSpec, TouchpointSpec
from app.components.campaign.reader import (
    get_campaign,
    get_touchpoint_content,
    is_text_file,
    list_campaigns,
)
from app.components.drive.errors import (
    AmbiguousMatchError,
    DriveNotFoundError,
    DriveValidationError,
    RemoteStoreError,
)
from app.components.drive.memory import InMemoryDriveStore
from app.components.drive.models import DriveContext, DriveItem


def make_campaign(ctx, name="Launch", channels=("Email", "Website")):
    touchpoints = [
        TouchpointSpec(id=1, name="Teaser", channel="Email", purpose="Build anticipation for the launch"),
        TouchpointSpec(id=2, name="Unveil Challenge", channel="Email", purpose="Reveal the challenge"),
        TouchpointSpec(id=2, name="Product Page", channel="Website", purpose="Full Product Page Copy"),
    ]
    return build_campaign(ctx, name, [], [], [ChannelSpec(name=c) for c in channels], touchpoints)


class TestIsTextFile:
    """Test text file classification."""

    @pytest.mark.parametrize(
        "name,mime,expected",
        [
            ("notes.md", "application/octet-stream", True),
            ("copy.txt", "text/plain", True),
            ("page.html", "text/html", True),
            ("README.MD", "application/pdf", True),
            ("brief.TXT", "application/vnd.google-apps.document", True),
            ("image.png", "image/png", False),
            ("deck.pdf", "application/pdf", False),
        ],
    )
    def test_classification(self, name, mime, expected):
        assert is_text_file(DriveItem(id="f1", name=name, mimeType=mime)) is expected


class TestListCampaigns:
    """Test campaign listing."""

    def test_lists_campaigns_with_channels(self, ctx):
        make_campaign(ctx, "Spring")
        make_campaign(ctx, "Autumn", channels=("Organic",))

        campaigns = list_campaigns(ctx)

        assert [c.name for c in campaigns] == ["Autumn", "Spring"]
        spring = campaigns[1]
        assert spring.channels == ["Email", "Website"]
        assert spring.channelCount == 2

    def test_global_folder_is_excluded(self, ctx, memory_store, workspace_id):
        memory_store.create_folder("global", workspace_id)
        make_campaign(ctx)

        assert [c.name for c in list_campaigns(ctx)] == ["Launch"]

    def test_root_files_are_ignored(self, ctx, memory_store, workspace_id):
        memory_store.create_file("notes.txt", workspace_id, b"x", "text/plain")

        assert list_campaigns(ctx) == []

    def test_channel_listing_failure_yields_empty_channels(self, workspace_id):
        class BrokenStore(InMemoryDriveStore):
            broken_parent = ""

            def list_children(self, parent_id, name=None, kind=None, order_by=None):
                if parent_id == self.broken_parent:
                    raise RemoteStoreError("listing failed", status=500)
                return super().list_children(parent_id, name, kind, order_by)

        store = BrokenStore()
        store.add_workspace(workspace_id)
        ctx = DriveContext(workspace_id, store)
        result = make_campaign(ctx)
        store.broken_parent = result.challengeFolder.id

        campaigns = list_campaigns(ctx)

        assert campaigns[0].channels == []
        assert campaigns[0].channelCount == 0


class TestGetCampaign:
    """Test single campaign read-back."""

    def test_structure(self, ctx):
        built = make_campaign(ctx)

        view = get_campaign(ctx, "Launch")

        assert view.id == built.challengeFolder.id
        assert view.dataFolder is not None
        assert view.dataFolder.id == built.dataFolder.id
        assert [c.name for c in view.channels] == ["Email", "Website"]
        assert view.channelCount == 2
        assert view.totalTouchpoints == 3

        email = view.channels[0]
        assert email.touchpointCount == 2
        assert {tp.name for tp in email.touchpoints} == {"Teaser", "Unveil Challenge"}

    def test_data_is_never_a_channel(self, ctx, memory_store):
        built = make_campaign(ctx)
        # A second, lower-case "data" folder is reserved as well
        memory_store.create_folder("data", built.challengeFolder.id)

        view = get_campaign(ctx, "Launch")

        assert all(c.name.lower() != "data" for c in view.channels)

    def test_channel_with_zero_touchpoints(self, ctx):
        make_campaign(ctx, channels=("Email", "Organic"))

        view = get_campaign(ctx, "Launch")

        organic = next(c for c in view.channels if c.name == "Organic")
        assert organic.touchpoints == []
        assert organic.touchpointCount == 0

    def test_duplicate_campaigns_return_first(self, ctx):
        first = make_campaign(ctx)
        make_campaign(ctx)

        assert get_campaign(ctx, "Launch").id == first.challengeFolder.id

    def test_not_found(self, ctx):
        with pytest.raises(DriveNotFoundError, match='Campaign "Missing" not found'):
            get_campaign(ctx, "Missing")

    def test_blank_name(self, ctx):
        with pytest.raises(DriveValidationError):
            get_campaign(ctx, " ")


class TestGetTouchpointContent:
    """Test touchpoint content read-back."""

    def test_text_and_binary_files(self, ctx, memory_store):
        built = make_campaign(ctx)
        teaser = next(c for c in built.channels if c.name == "Email").touchpoints[0]
        memory_store.create_file("notes.md", teaser.folderId, "Launch día".encode(), "application/octet-stream")
        memory_store.create_file("image.png", teaser.folderId, b"\x89PNG", "image/png")

        view = get_touchpoint_content(ctx, "Launch", "Email")

        assert view.campaign.id == built.challengeFolder.id
        assert view.totalTouchpoints == 2
        assert view.totalFiles == 2
        assert view.totalTextFiles == 1

        entry = next(tp for tp in view.touchpoints if tp.name == "Teaser")
        assert entry.fileCount == 2
        assert entry.textFileCount == 1
        flags = {f.name: f.isTextFile for f in entry.files}
        assert flags == {"image.png": False, "notes.md": True}
        assert len(entry.textFiles) == 1
        assert entry.textFiles[0].name == "notes.md"
        assert entry.textFiles[0].content == "Launch día"

    def test_empty_touchpoints(self, ctx):
        make_campaign(ctx)

        view = get_touchpoint_content(ctx, "Launch", "Website")

        assert view.totalTouchpoints == 1
        assert view.touchpoints[0].files == []
        assert view.totalFiles == 0

    def test_duplicate_channels_are_ambiguous(self, ctx, memory_store):
        built = make_campaign(ctx)
        memory_store.create_folder("Email", built.challengeFolder.id)

        with pytest.raises(AmbiguousMatchError) as exc_info:
            get_touchpoint_content(ctx, "Launch", "Email")

        assert exc_info.value.matches == 2

    def test_missing_channel(self, ctx):
        make_campaign(ctx)

        with pytest.raises(DriveNotFoundError, match='Channel "Organic" not found'):
            get_touchpoint_content(ctx, "Launch", "Organic")

    def test_missing_campaign(self, ctx):
        with pytest.raises(DriveNotFoundError):
            get_touchpoint_content(ctx, "Missing", "Email")

    def test_download_failure_is_reported_on_file(self, workspace_id):
        class NoDownloadStore(InMemoryDriveStore):
            def download(self, file_id):
                raise RemoteStoreError("download refused", status=500)

        store = NoDownloadStore()
        store.add_workspace(workspace_id)
        ctx = DriveContext(workspace_id, store)
        built = make_campaign(ctx)
        folder_id = built.channels[0].touchpoints[0].folderId
        store.create_file("copy.txt", folder_id, b"text", "text/plain")

        view = get_touchpoint_content(ctx, "Launch", "Email")

        entry = next(tp for tp in view.touchpoints if tp.id == folder_id)
        assert entry.textFiles[0].content is None
        assert entry.textFiles[0].error == "Failed to read content: download refused"
