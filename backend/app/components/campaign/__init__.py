"""Campaign Module.

A campaign is a four-level folder tree in the workspace:
campaign -> {Data | channel} -> touchpoint -> files.

Components:
- models.py: Build inputs, build result and read views
- builder.py: build_campaign (sequential, best-effort file uploads)
- reader.py: list_campaigns, get_campaign, get_touchpoint_content
- links.py: Google document link parsing
- catalog.py: Predefined touchpoints per channel
"""

from app.components.campaign.builder import build_campaign
from app.components.campaign.catalog import TOUCHPOINT_CATALOG
from app.components.campaign.models import (
    CampaignResult,
    CampaignView,
    ChannelSpec,
    FileBlob,
    FileOutcome,
    TouchpointContentView,
    TouchpointSpec,
)
from app.components.campaign.reader import (
    get_campaign,
    get_touchpoint_content,
    is_text_file,
    list_campaigns,
)

__all__ = [
    "build_campaign",
    "list_campaigns",
    "get_campaign",
    "get_touchpoint_content",
    "is_text_file",
    "TOUCHPOINT_CATALOG",
    "CampaignResult",
    "CampaignView",
    "ChannelSpec",
    "FileBlob",
    "FileOutcome",
    "TouchpointContentView",
    "TouchpointSpec",
]
