"""Request bodies accepted by the HTTP API.

Field names match the JSON the frontend sends (camelCase).
"""

import base64
import binascii

from pydantic import BaseModel, Field, field_validator, model_validator

from app.components.campaign.models import ChannelSpec, TouchpointSpec


class CampaignFileInput(BaseModel):
    """A campaign file, either inline or staged in the blob store.

    Inline content is a list of byte values (as produced by
    `Array.from(new Uint8Array(buffer))`) or a base64 string.
    """

    name: str
    type: str = ""
    size: int | None = None
    content: list[int] | str | None = None
    url: str | None = None

    @model_validator(mode="after")
    def check_source(self) -> "CampaignFileInput":
        if self.content is None and not self.url:
            raise ValueError(f"File '{self.name}' needs either content or a staged url")
        return self

    def inline_bytes(self) -> bytes | None:
        """Decode inline content, None when the file is staged."""
        if self.content is None:
            return None
        if isinstance(self.content, str):
            try:
                return base64.b64decode(self.content, validate=True)
            except binascii.Error as e:
                raise ValueError(f"File '{self.name}' content is not valid base64") from e
        return bytes(self.content)


class CreateCampaignRequest(BaseModel):
    # Emptiness is checked by the builder so the error uses the common envelope
    challengeName: str = ""
    files: list[CampaignFileInput] = Field(default_factory=list)
    links: list[str] = Field(default_factory=list)
    channels: list[ChannelSpec] = Field(default_factory=list)
    touchpoints: list[TouchpointSpec] = Field(default_factory=list)

    @field_validator("links")
    @classmethod
    def drop_blank_links(cls, v: list[str]) -> list[str]:
        return [link.strip() for link in v if link and link.strip()]


class AnalyzeFileRequest(BaseModel):
    fileId: str = ""
    prompt: str = ""


class CreateTextFileRequest(BaseModel):
    fileName: str | None = None
    fileContent: str | None = None
    folderPath: str | None = None
    createPath: bool = False


class CreateFolderRequest(BaseModel):
    name: str = ""
    description: str | None = None
    parentPath: str | None = None


class DeleteFileRequest(BaseModel):
    fileId: str | None = None
    fileName: str | None = None
    folderPath: str | None = None


class EnsurePathRequest(BaseModel):
    path: str = ""
