"""API Router Aggregator.

Aggregates all API endpoints into a single router mounted at settings.api_prefix.
"""

from fastapi import APIRouter

from app.api.v1.endpoints import analysis, campaigns, google_drive

api_router = APIRouter()

# Mount endpoint routers
api_router.include_router(campaigns.router, tags=["Campaigns"])
api_router.include_router(analysis.router, tags=["Analysis"])
api_router.include_router(google_drive.router, prefix="/google-drive", tags=["Google Drive"])
