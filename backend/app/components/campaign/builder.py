"""Campaign folder tree construction.

Builds the fixed four-level structure in the workspace:

```
{workspace}/
└── {challenge name}/
    ├── Data/                  uploaded files + PDF copies of linked documents
    └── {channel}/             one per selected channel
        └── {touchpoint}/      one per selected touchpoint, ordered by id
```

Creation is strictly sequential so the tree order is deterministic. File
uploads and link exports are best-effort: a failure is logged, recorded as a
failed FileOutcome and the build carries on. Staged blobs are fetched inside
the same per-file step, so an unreachable blob only fails its own file. Any other failure aborts the
build; folders created before it are not rolled back.
"""

import logging
from collections.abc import Callable

from app.components.campaign.links import exported_pdf_name, extract_document_id, get_link_type
from app.components.campaign.models import (
    CampaignResult,
    ChannelDescriptor,
    ChannelSpec,
    FileBlob,
    FileOutcome,
    FolderDescriptor,
    TouchpointDescriptor,
    TouchpointSpec,
    UploadedFile,
)
from app.components.drive.errors import DriveValidationError
from app.components.drive.models import (
    DEFAULT_MIME_TYPE,
    PDF_MIME_TYPE,
    DriveContext,
    DriveItem,
)

logger = logging.getLogger(__name__)

DATA_FOLDER_NAME = "Data"


def validate_campaign_input(
    challenge_name: str | None,
    channels: list[ChannelSpec] | None,
    touchpoints: list[TouchpointSpec] | None,
) -> str:
    """Validate build input before any remote call.

    Returns:
        The trimmed challenge name

    Raises:
        DriveValidationError: If the name is blank or nothing was selected
    """
    if not challenge_name or not challenge_name.strip():
        raise DriveValidationError("Challenge name is required")
    if not channels:
        raise DriveValidationError("At least one channel must be selected")
    if not touchpoints:
        raise DriveValidationError("At least one touchpoint must be selected")
    return challenge_name.strip()


def touchpoints_for_channel(channel_name: str, touchpoints: list[TouchpointSpec]) -> list[TouchpointSpec]:
    """Touchpoints selected for a channel, in ascending id order."""
    return sorted((tp for tp in touchpoints if tp.channel == channel_name), key=lambda tp: tp.id)


def _folder(item: DriveItem) -> FolderDescriptor:
    return FolderDescriptor(id=item.id, name=item.name, link=item.webViewLink)


def _blob_content(blob: FileBlob, fetch_staged: Callable[[str], bytes] | None) -> bytes:
    if blob.content is not None:
        return blob.content
    if blob.url is None or fetch_staged is None:
        raise DriveValidationError(f"No content available for file: {blob.name}")
    return fetch_staged(blob.url)


def _upload_file(
    ctx: DriveContext,
    data_folder_id: str,
    challenge_name: str,
    blob: FileBlob,
    fetch_staged: Callable[[str], bytes] | None,
) -> UploadedFile:
    content = _blob_content(blob, fetch_staged)
    logger.debug(f"Processing file: {blob.name}, size: {blob.size}, buffer size: {len(content)}")
    mime_type = blob.type or DEFAULT_MIME_TYPE
    created = ctx.store.create_file(
        blob.name,
        data_folder_id,
        content,
        mime_type,
        description=f"Uploaded file for campaign: {challenge_name}",
    )
    return UploadedFile(id=created.id, name=created.name, link=created.webViewLink, size=created.size)


def _export_link(ctx: DriveContext, data_folder_id: str, link: str) -> UploadedFile:
    document_id = extract_document_id(link)
    if document_id is None:
        raise DriveValidationError(f"Could not extract file ID from link: {link}")

    link_type = get_link_type(link)
    pdf = ctx.store.export(document_id, PDF_MIME_TYPE)
    created = ctx.store.create_file(
        exported_pdf_name(link_type, document_id),
        data_folder_id,
        pdf,
        PDF_MIME_TYPE,
        description=f"PDF export of {link_type}: {link}",
    )
    return UploadedFile(
        id=created.id,
        name=created.name,
        link=created.webViewLink,
        size=created.size,
        type="exported-pdf",
        originalUrl=link,
        originalType=link_type,
    )


def build_campaign(
    ctx: DriveContext,
    challenge_name: str,
    files: list[FileBlob],
    links: list[str],
    channels: list[ChannelSpec],
    touchpoints: list[TouchpointSpec],
    fetch_staged: Callable[[str], bytes] | None = None,
) -> CampaignResult:
    """Create the complete folder structure of a campaign.

    Args:
        ctx: Workspace and store to build in
        challenge_name: Campaign name, used as the top-level folder name
        files: Binary files to upload into Data
        links: Google document links to export as PDF into Data
        channels: Channels to create under the campaign folder
        touchpoints: Selected touchpoints; each goes under its channel
        fetch_staged: Downloads a staged blob by URL, for files without inline content

    Returns:
        CampaignResult describing everything that was created, with one
        FileOutcome per file and link

    Raises:
        DriveValidationError: If the input is incomplete (no remote call made)
        DriveError: If a folder creation fails
    """
    name = validate_campaign_input(challenge_name, channels, touchpoints)
    logger.info(
        f"Building campaign '{name}': {len(channels)} channels, {len(touchpoints)} touchpoints, "
        f"{len(files)} files, {len(links)} links"
    )

    challenge_folder = ctx.store.create_folder(
        name, ctx.workspace_id, description=f"Campaign folder for: {name}"
    )
    data_folder = ctx.store.create_folder(
        DATA_FOLDER_NAME, challenge_folder.id, description="Uploaded files and campaign data"
    )

    uploaded: list[UploadedFile] = []
    outcomes: list[FileOutcome] = []

    for blob in files:
        try:
            result = _upload_file(ctx, data_folder.id, name, blob, fetch_staged)
        except Exception as e:
            logger.error(f"Error uploading file {blob.name}: {e}")
            outcomes.append(FileOutcome(name=blob.name, source="upload", status="failed", reason=str(e)))
            continue
        uploaded.append(result)
        outcomes.append(FileOutcome(name=blob.name, source="upload", status="succeeded", fileId=result.id))

    for link in links:
        try:
            result = _export_link(ctx, data_folder.id, link)
        except Exception as e:
            if isinstance(e, DriveValidationError):
                logger.warning(str(e))
            else:
                logger.error(f"Error exporting {link} as PDF: {e}")
            outcomes.append(FileOutcome(name=link, source="link", status="failed", reason=str(e)))
            continue
        uploaded.append(result)
        outcomes.append(FileOutcome(name=link, source="link", status="succeeded", fileId=result.id))

    channel_results: list[ChannelDescriptor] = []
    for channel in channels:
        channel_folder = ctx.store.create_folder(
            channel.name,
            challenge_folder.id,
            description=channel.description or f"Channel folder for {channel.name}",
        )
        descriptor = ChannelDescriptor(
            id=channel_folder.id, name=channel_folder.name, link=channel_folder.webViewLink
        )

        for touchpoint in touchpoints_for_channel(channel.name, touchpoints):
            touchpoint_folder = ctx.store.create_folder(
                touchpoint.name, channel_folder.id, description=touchpoint.purpose
            )
            descriptor.touchpoints.append(
                TouchpointDescriptor(
                    id=touchpoint.id,
                    name=touchpoint.name,
                    folderId=touchpoint_folder.id,
                    folderName=touchpoint_folder.name,
                    link=touchpoint_folder.webViewLink,
                    purpose=touchpoint.purpose,
                )
            )

        channel_results.append(descriptor)

    touchpoint_count = sum(len(c.touchpoints) for c in channel_results)
    result = CampaignResult(
        challengeName=name,
        challengeFolder=_folder(challenge_folder),
        dataFolder=_folder(data_folder),
        channels=channel_results,
        uploadedFiles=uploaded,
        fileOutcomes=outcomes,
        totalFolders=2 + len(channel_results) + touchpoint_count,
        totalFiles=len(uploaded),
    )

    if result.failed_outcomes:
        logger.warning(
            f"Campaign '{name}': {len(result.failed_outcomes)} of {len(outcomes)} files/links failed"
        )
    logger.info(
        f"Campaign '{name}' created with {len(channel_results)} channels, "
        f"{touchpoint_count} touchpoints and {len(uploaded)} uploaded files"
    )
    return result


__all__ = [
    "DATA_FOLDER_NAME",
    "build_campaign",
    "touchpoints_for_channel",
    "validate_campaign_input",
]
