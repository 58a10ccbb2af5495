from .schemas import (
    AnalyzeFileRequest,
    CampaignFileInput,
    CreateCampaignRequest,
    CreateFolderRequest,
    CreateTextFileRequest,
    DeleteFileRequest,
    EnsurePathRequest,
)

__all__ = [
    "AnalyzeFileRequest",
    "CampaignFileInput",
    "CreateCampaignRequest",
    "CreateFolderRequest",
    "CreateTextFileRequest",
    "DeleteFileRequest",
    "EnsurePathRequest",
]
