"""AI Analysis Module.

Thin adapter over the OpenAI chat/completions API.

Usage:
    from app.components.ai import analyze_file

    result = analyze_file(ctx.store, file_id, "Summarize the key messages")
"""

from app.components.ai.analysis import (
    FileAnalysis,
    analyze_file,
    chat,
    complete,
    get_openai_client,
    is_configured,
    reset_openai_client,
)

__all__ = [
    "FileAnalysis",
    "analyze_file",
    "chat",
    "complete",
    "get_openai_client",
    "is_configured",
    "reset_openai_client",
]
