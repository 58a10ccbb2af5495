"""Data models for campaign construction and read-back."""

from typing import Literal

from pydantic import BaseModel, Field

from app.components.drive.models import DriveItem


# ==================== Build inputs ====================


class FileBlob(BaseModel):
    """A binary file supplied for the campaign's Data folder.

    Carries its bytes inline, or the URL of a staged blob that is fetched
    while the file is uploaded.
    """

    name: str
    type: str = ""
    size: int | None = None
    content: bytes | None = None
    url: str | None = None


class ChannelSpec(BaseModel):
    name: str
    description: str | None = None


class TouchpointSpec(BaseModel):
    id: int
    name: str
    channel: str
    purpose: str = ""


# ==================== Build result ====================


class FolderDescriptor(BaseModel):
    id: str
    name: str
    link: str | None = None


class TouchpointDescriptor(BaseModel):
    id: int
    name: str
    folderId: str
    folderName: str
    link: str | None = None
    purpose: str = ""


class ChannelDescriptor(FolderDescriptor):
    touchpoints: list[TouchpointDescriptor] = Field(default_factory=list)


class UploadedFile(BaseModel):
    id: str
    name: str
    link: str | None = None
    size: str | None = None
    type: Literal["uploaded", "exported-pdf"] = "uploaded"
    originalUrl: str | None = None
    originalType: str | None = None


class FileOutcome(BaseModel):
    """Outcome of one file upload or link export during a build."""

    name: str
    source: Literal["upload", "link"]
    status: Literal["succeeded", "failed"]
    fileId: str | None = None
    reason: str | None = None


class CampaignResult(BaseModel):
    challengeName: str
    challengeFolder: FolderDescriptor
    dataFolder: FolderDescriptor
    channels: list[ChannelDescriptor] = Field(default_factory=list)
    uploadedFiles: list[UploadedFile] = Field(default_factory=list)
    fileOutcomes: list[FileOutcome] = Field(default_factory=list)
    totalFolders: int
    totalFiles: int

    @property
    def failed_outcomes(self) -> list[FileOutcome]:
        return [o for o in self.fileOutcomes if o.status == "failed"]


# ==================== Read views ====================


class CampaignSummary(DriveItem):
    """A root campaign folder with the names of its channels."""

    channels: list[str] = Field(default_factory=list)
    channelCount: int = 0


class DataFolderRef(BaseModel):
    id: str
    name: str
    webViewLink: str | None = None


class ChannelView(DriveItem):
    touchpoints: list[DriveItem] = Field(default_factory=list)
    touchpointCount: int = 0


class CampaignView(BaseModel):
    id: str
    name: str
    mimeType: str
    createdTime: str | None = None
    modifiedTime: str | None = None
    webViewLink: str | None = None
    dataFolder: DataFolderRef | None = None
    channels: list[ChannelView] = Field(default_factory=list)
    channelCount: int = 0
    totalTouchpoints: int = 0


class NamedRef(BaseModel):
    name: str
    id: str


class TouchpointFile(DriveItem):
    isTextFile: bool = False


class TextFileContent(BaseModel):
    id: str
    name: str
    mimeType: str | None = None
    size: str | None = None
    createdTime: str | None = None
    modifiedTime: str | None = None
    webViewLink: str | None = None
    content: str | None = None
    error: str | None = None


class TouchpointContent(BaseModel):
    id: str
    name: str
    mimeType: str | None = None
    createdTime: str | None = None
    modifiedTime: str | None = None
    webViewLink: str | None = None
    files: list[TouchpointFile] = Field(default_factory=list)
    textFiles: list[TextFileContent] = Field(default_factory=list)
    fileCount: int = 0
    textFileCount: int = 0
    error: str | None = None


class TouchpointContentView(BaseModel):
    campaign: NamedRef
    channel: NamedRef
    touchpoints: list[TouchpointContent] = Field(default_factory=list)
    totalTouchpoints: int = 0
    totalFiles: int = 0
    totalTextFiles: int = 0
