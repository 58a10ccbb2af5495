"""Campaign API endpoints.

Creates campaign folder trees and reads them back. Handlers are plain
`def` so the blocking Drive calls run in the threadpool.
"""

import logging

from fastapi import APIRouter, Depends

from app.api.deps import get_drive_context
from app.components.blob.staging import get_blob_client
from app.components.campaign.builder import build_campaign
from app.components.campaign.catalog import TOUCHPOINT_CATALOG
from app.components.campaign.models import CampaignResult, FileBlob
from app.components.campaign.reader import get_campaign, get_touchpoint_content, list_campaigns
from app.components.drive.errors import DriveValidationError
from app.components.drive.models import DriveContext
from app.models.schemas import CampaignFileInput, CreateCampaignRequest

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_blob(file: CampaignFileInput) -> FileBlob:
    """Decode inline content; staged files keep their URL for the builder to fetch."""
    try:
        content = file.inline_bytes()
    except ValueError as e:
        raise DriveValidationError(str(e)) from e

    url = file.url if content is None else None
    return FileBlob(name=file.name, type=file.type, size=file.size, content=content, url=url)


def _uploaded_staged_urls(blobs: list[FileBlob], result: CampaignResult) -> list[str]:
    """URLs of staged blobs whose Drive upload succeeded."""
    upload_outcomes = [o for o in result.fileOutcomes if o.source == "upload"]
    return [
        blob.url
        for blob, outcome in zip(blobs, upload_outcomes)
        if blob.url and outcome.status == "succeeded"
    ]


@router.post("/create-campaign")
def create_campaign(
    request: CreateCampaignRequest,
    ctx: DriveContext = Depends(get_drive_context),
):
    """Create the complete folder tree of a new campaign.

    Staged files are downloaded during the build; each one is deleted from
    staging once it has been uploaded to Drive.
    """
    blobs = [_to_blob(f) for f in request.files]
    logger.info(f"Total files to upload: {len(blobs)}")

    result = build_campaign(
        ctx,
        request.challengeName,
        blobs,
        request.links,
        request.channels,
        request.touchpoints,
        fetch_staged=get_blob_client().fetch,
    )

    staged = _uploaded_staged_urls(blobs, result)
    if staged:
        get_blob_client().discard(staged)

    return {
        "success": True,
        "campaign": result.model_dump(),
        "message": (
            f'Campaign "{result.challengeName}" created successfully with '
            f"{len(result.channels)} channels and {result.totalFiles} uploaded files"
        ),
    }


@router.get("/campaigns")
def get_campaigns(ctx: DriveContext = Depends(get_drive_context)):
    """List campaign folders with their channel names."""
    campaigns = list_campaigns(ctx)
    return {
        "success": True,
        "campaigns": [c.model_dump() for c in campaigns],
        "totalCampaigns": len(campaigns),
        "message": f"Found {len(campaigns)} campaign folders with channel information",
    }


@router.get("/campaigns/{challengeName}")
def get_campaign_detail(challengeName: str, ctx: DriveContext = Depends(get_drive_context)):
    """Get one campaign with its channels and touchpoints."""
    campaign = get_campaign(ctx, challengeName)
    return {
        "success": True,
        "campaign": campaign.model_dump(),
        "message": (
            f'Campaign "{challengeName}" retrieved successfully with {campaign.channelCount} '
            f"channels and {campaign.totalTouchpoints} touchpoints"
        ),
    }


@router.get("/campaigns/{challengeName}/{channelName}/touchpoints")
def get_channel_touchpoints(
    challengeName: str,
    channelName: str,
    ctx: DriveContext = Depends(get_drive_context),
):
    """Get a channel's touchpoints with their files and text content."""
    content = get_touchpoint_content(ctx, challengeName, channelName)
    return {
        "success": True,
        **content.model_dump(),
        "message": (
            f"Retrieved {content.totalTouchpoints} touchpoints with content for channel "
            f'"{channelName}" in campaign "{challengeName}"'
        ),
    }


@router.get("/touchpoints")
def get_touchpoint_catalog():
    """Predefined touchpoints per channel."""
    return {
        "success": True,
        "channels": [entry.model_dump() for entry in TOUCHPOINT_CATALOG],
    }
