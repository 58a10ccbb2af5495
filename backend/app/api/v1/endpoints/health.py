"""Health check API endpoint."""

from fastapi import APIRouter

from app.settings import settings

router = APIRouter(tags=["Health"])


@router.get("")
async def health_check():
    """Health check endpoint with integration configuration status."""
    return {
        "status": "healthy",
        "driveStore": settings.drive_store_type,
        "googleConfigured": settings.is_google_configured(),
        "openaiConfigured": settings.is_openai_configured(),
        "blobConfigured": settings.is_blob_configured(),
    }
