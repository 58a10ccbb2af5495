"""Read-back of campaign folder trees.

Reads are uncached and never write. Failures below the campaign level
(one channel, one touchpoint, one file) are reported on the affected
entry instead of failing the whole read.
"""

import logging

from app.components.campaign.builder import DATA_FOLDER_NAME
from app.components.campaign.models import (
    CampaignSummary,
    CampaignView,
    ChannelView,
    DataFolderRef,
    NamedRef,
    TextFileContent,
    TouchpointContent,
    TouchpointContentView,
    TouchpointFile,
)
from app.components.drive.errors import (
    AmbiguousMatchError,
    DriveNotFoundError,
    DriveValidationError,
)
from app.components.drive.models import DEFAULT_MIME_TYPE, DriveContext, DriveItem
from app.components.drive.paths import TIE_BREAK_ORDER

logger = logging.getLogger(__name__)

GLOBAL_FOLDER_NAME = "Global"
TEXT_EXTENSIONS = (".txt", ".md")


def is_data_folder(item: DriveItem) -> bool:
    return item.name.lower() == DATA_FOLDER_NAME.lower()


def is_text_file(item: DriveItem) -> bool:
    """Whether a file's content is fetched when reading a touchpoint.

    Examples:
        notes.md (application/octet-stream) -> True
        brief.txt (application/pdf) -> True
        image.png (image/png) -> False
    """
    if not item.mimeType:
        return False
    return (
        item.mimeType.startswith("text/")
        or item.mimeType == DEFAULT_MIME_TYPE
        or item.name.lower().endswith(TEXT_EXTENSIONS)
    )


def _require_name(value: str | None, label: str) -> str:
    if not value or not value.strip():
        raise DriveValidationError(f"{label} is required")
    return value


def find_campaign_folder(ctx: DriveContext, challenge_name: str) -> DriveItem:
    """Campaign folder by exact name; the earliest created wins on duplicates.

    Raises:
        DriveNotFoundError: If no root folder has that name
    """
    matches = ctx.store.list_children(
        ctx.workspace_id, name=challenge_name, kind="folder", order_by=TIE_BREAK_ORDER
    )
    if not matches:
        raise DriveNotFoundError(f'Campaign "{challenge_name}" not found')
    return matches[0]


def list_campaigns(ctx: DriveContext) -> list[CampaignSummary]:
    """Every campaign folder in the workspace root with its channel names."""
    folders = ctx.store.list_children(ctx.workspace_id, kind="folder", order_by="name")
    campaigns = [f for f in folders if f.name.lower() != GLOBAL_FOLDER_NAME.lower()]

    summaries: list[CampaignSummary] = []
    for folder in campaigns:
        try:
            children = ctx.store.list_children(folder.id, kind="folder", order_by="name")
            channels = [c.name for c in children if not is_data_folder(c)]
        except Exception as e:
            logger.error(f"Error getting channels for campaign {folder.name}: {e}")
            channels = []
        summaries.append(
            CampaignSummary(**folder.model_dump(), channels=channels, channelCount=len(channels))
        )

    logger.debug(f"Found {len(summaries)} campaigns in {ctx.workspace_id}")
    return summaries


def get_campaign(ctx: DriveContext, challenge_name: str) -> CampaignView:
    """Campaign with its Data folder, channels and touchpoint folders.

    Raises:
        DriveValidationError: If the name is blank
        DriveNotFoundError: If the campaign does not exist
    """
    _require_name(challenge_name, "Challenge name")
    campaign = find_campaign_folder(ctx, challenge_name)

    children = ctx.store.list_children(campaign.id, kind="folder", order_by="name")
    data_folder = next((c for c in children if is_data_folder(c)), None)

    channels: list[ChannelView] = []
    for channel in children:
        if is_data_folder(channel):
            continue
        try:
            touchpoints = ctx.store.list_children(channel.id, kind="folder", order_by="name")
        except Exception as e:
            logger.error(f"Error getting touchpoints for channel {channel.name}: {e}")
            touchpoints = []
        channels.append(
            ChannelView(**channel.model_dump(), touchpoints=touchpoints, touchpointCount=len(touchpoints))
        )

    return CampaignView(
        id=campaign.id,
        name=campaign.name,
        mimeType=campaign.mimeType,
        createdTime=campaign.createdTime,
        modifiedTime=campaign.modifiedTime,
        webViewLink=campaign.webViewLink,
        dataFolder=(
            DataFolderRef(id=data_folder.id, name=data_folder.name, webViewLink=data_folder.webViewLink)
            if data_folder
            else None
        ),
        channels=channels,
        channelCount=len(channels),
        totalTouchpoints=sum(c.touchpointCount for c in channels),
    )


def _read_text_file(ctx: DriveContext, item: DriveItem) -> TextFileContent:
    base = TextFileContent(
        id=item.id,
        name=item.name,
        mimeType=item.mimeType,
        size=item.size,
        createdTime=item.createdTime,
        modifiedTime=item.modifiedTime,
        webViewLink=item.webViewLink,
    )
    try:
        base.content = ctx.store.download(item.id).decode("utf-8", errors="replace")
    except Exception as e:
        logger.error(f"Error reading content from file {item.name}: {e}")
        base.error = f"Failed to read content: {e}"
    return base


def _read_touchpoint(ctx: DriveContext, touchpoint: DriveItem) -> TouchpointContent:
    entry = TouchpointContent(
        id=touchpoint.id,
        name=touchpoint.name,
        mimeType=touchpoint.mimeType,
        createdTime=touchpoint.createdTime,
        modifiedTime=touchpoint.modifiedTime,
        webViewLink=touchpoint.webViewLink,
    )
    try:
        files = ctx.store.list_children(touchpoint.id, order_by="name")
    except Exception as e:
        logger.error(f"Error getting content for touchpoint {touchpoint.name}: {e}")
        entry.error = f"Failed to get content: {e}"
        return entry

    text_items = [f for f in files if is_text_file(f)]
    entry.files = [TouchpointFile(**f.model_dump(), isTextFile=is_text_file(f)) for f in files]
    entry.textFiles = [_read_text_file(ctx, f) for f in text_items]
    entry.fileCount = len(files)
    entry.textFileCount = len(text_items)
    return entry


def get_touchpoint_content(
    ctx: DriveContext, challenge_name: str, channel_name: str
) -> TouchpointContentView:
    """Touchpoints of one channel with their files and text content.

    Raises:
        DriveValidationError: If a name is blank
        DriveNotFoundError: If the campaign or the channel does not exist
        AmbiguousMatchError: If several channels share the name
    """
    _require_name(challenge_name, "Challenge name")
    _require_name(channel_name, "Channel name")
    campaign = find_campaign_folder(ctx, challenge_name)

    channels = ctx.store.list_children(
        campaign.id, name=channel_name, kind="folder", order_by=TIE_BREAK_ORDER
    )
    if not channels:
        raise DriveNotFoundError(f'Channel "{channel_name}" not found in campaign "{challenge_name}"')
    if len(channels) > 1:
        raise AmbiguousMatchError(
            f'Multiple channels found with name "{channel_name}" in campaign "{challenge_name}". '
            "Please ensure channel names are unique.",
            matches=len(channels),
        )
    channel = channels[0]

    touchpoint_folders = ctx.store.list_children(channel.id, kind="folder", order_by="name")
    touchpoints = [_read_touchpoint(ctx, tp) for tp in touchpoint_folders]

    logger.info(
        f"Retrieved {len(touchpoints)} touchpoints with content for channel "
        f'"{channel_name}" in campaign "{challenge_name}"'
    )
    return TouchpointContentView(
        campaign=NamedRef(name=challenge_name, id=campaign.id),
        channel=NamedRef(name=channel_name, id=channel.id),
        touchpoints=touchpoints,
        totalTouchpoints=len(touchpoints),
        totalFiles=sum(tp.fileCount for tp in touchpoints),
        totalTextFiles=sum(tp.textFileCount for tp in touchpoints),
    )
