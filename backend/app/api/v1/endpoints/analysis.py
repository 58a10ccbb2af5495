"""AI file analysis API endpoint."""

from fastapi import APIRouter, Depends

from app.api.deps import get_store
from app.components.ai.analysis import analyze_file
from app.components.drive.store_provider import DriveStoreProtocol
from app.models.schemas import AnalyzeFileRequest

router = APIRouter()


@router.post("/analyze-file")
def analyze(request: AnalyzeFileRequest, store: DriveStoreProtocol = Depends(get_store)):
    """Ask the model a question about a stored file."""
    result = analyze_file(store, request.fileId, request.prompt)
    return {
        "success": True,
        **result.model_dump(),
        "message": "File analyzed successfully with AI",
    }
