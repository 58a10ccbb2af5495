"""Predefined touchpoints offered for each marketing channel."""

from pydantic import BaseModel


class CatalogOption(BaseModel):
    id: int
    name: str
    purpose: str


class ChannelCatalog(BaseModel):
    channel: str
    options: list[CatalogOption]


_LAUNCH_SEQUENCE = [
    CatalogOption(id=1, name="Teaser", purpose="Build anticipation for the launch"),
    CatalogOption(id=2, name="Unveil Challenge", purpose="Reveal the challenge or problem"),
    CatalogOption(id=3, name="Hype", purpose="Generate excitement and buzz"),
    CatalogOption(id=4, name="Start Orders", purpose="Announce order availability"),
    CatalogOption(id=5, name="Engagement", purpose="Drive community interaction"),
    CatalogOption(id=6, name="Last Chance", purpose="Final call to action"),
]

TOUCHPOINT_CATALOG = [
    ChannelCatalog(channel="Organic", options=_LAUNCH_SEQUENCE),
    ChannelCatalog(channel="Email", options=_LAUNCH_SEQUENCE),
    ChannelCatalog(
        channel="Website",
        options=[
            CatalogOption(id=1, name="Teaser", purpose="Build anticipation for the launch"),
            CatalogOption(id=2, name="Product Page", purpose="Full Product Page Copy"),
        ],
    ),
]


def get_channel_catalog(channel: str) -> ChannelCatalog | None:
    """Catalog entry for a channel; custom channels have none."""
    for entry in TOUCHPOINT_CATALOG:
        if entry.channel == channel:
            return entry
    return None

