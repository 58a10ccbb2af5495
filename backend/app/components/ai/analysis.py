"""OpenAI-backed analysis of files stored in the workspace.

One request per call: file metadata and content are fetched from the store
and sent whole in a single chat completion. Large files are not chunked.
"""

import logging

from openai import OpenAI, OpenAIError
from pydantic import BaseModel

from app.components.drive.errors import DriveConfigurationError, DriveValidationError, RemoteStoreError
from app.components.drive.store_provider import DriveStoreProtocol
from app.settings import settings

logger = logging.getLogger(__name__)

ANALYSIS_SYSTEM_PROMPT = (
    "You are a helpful AI assistant that analyzes files and provides insights based on user prompts."
)
EMPTY_ANALYSIS = "No analysis generated"


class FileAnalysis(BaseModel):
    analysis: str
    fileName: str
    fileType: str
    prompt: str


# Singleton client instance
_client: OpenAI | None = None


def is_configured() -> bool:
    return settings.is_openai_configured()


def get_openai_client() -> OpenAI:
    """Get the shared OpenAI client.

    Raises:
        DriveConfigurationError: If no API key is configured
    """
    global _client

    if not is_configured():
        raise DriveConfigurationError("OpenAI API key not configured")
    if _client is None:
        _client = OpenAI(api_key=settings.openai_api_key, timeout=settings.http_timeout)
    return _client


def reset_openai_client() -> None:
    """Reset the client singleton (for testing)."""
    global _client
    _client = None


def build_analysis_message(file_name: str, file_type: str, content: str, prompt: str) -> str:
    return (
        f"File: {file_name}\n"
        f"File Type: {file_type}\n\n"
        f"Content:\n{content}\n\n"
        f"User Question: {prompt}\n\n"
        "Please provide a comprehensive analysis and insights based on the file "
        "content and the user's question."
    )


def _chat_completion(messages: list[dict[str, str]], max_tokens: int) -> str:
    client = get_openai_client()
    try:
        response = client.chat.completions.create(
            model=settings.openai_model,
            messages=messages,
            temperature=settings.openai_temperature,
            max_tokens=max_tokens,
        )
    except OpenAIError as e:
        logger.error(f"OpenAI chat error: {e}")
        raise RemoteStoreError(f"OpenAI request failed: {e}") from e

    if not response.choices:
        return ""
    return response.choices[0].message.content or ""


def analyze_file(store: DriveStoreProtocol, file_id: str, prompt: str) -> FileAnalysis:
    """Ask the model a question about one stored file.

    Args:
        store: Store holding the file
        file_id: Id of the file to analyze
        prompt: The user's question about the file

    Returns:
        FileAnalysis with the model's answer

    Raises:
        DriveValidationError: If the file id or prompt is missing
        DriveNotFoundError: If the file does not exist
        DriveConfigurationError: If OpenAI is not configured
        RemoteStoreError: If the completion request fails
    """
    if not file_id or not prompt:
        raise DriveValidationError("File ID and prompt are required")

    # Fail before touching the store when no key is set
    get_openai_client()

    info = store.get_metadata(file_id)
    content = store.download(file_id).decode("utf-8", errors="replace")
    file_type = info.mimeType or "unknown"

    logger.info(f"Analyzing file '{info.name}' ({file_id}), {len(content)} chars")
    analysis = _chat_completion(
        [
            {"role": "system", "content": ANALYSIS_SYSTEM_PROMPT},
            {"role": "user", "content": build_analysis_message(info.name, file_type, content, prompt)},
        ],
        max_tokens=settings.openai_analysis_max_tokens,
    )

    return FileAnalysis(
        analysis=analysis or EMPTY_ANALYSIS,
        fileName=info.name,
        fileType=file_type,
        prompt=prompt,
    )


def chat(prompt: str, system_message: str | None = None) -> str:
    """Single-turn chat completion with an optional system message."""
    messages = []
    if system_message:
        messages.append({"role": "system", "content": system_message})
    messages.append({"role": "user", "content": prompt})
    return _chat_completion(messages, max_tokens=settings.openai_max_tokens)


def complete(prompt: str) -> str:
    """Plain text completion."""
    client = get_openai_client()
    try:
        response = client.completions.create(
            model=settings.openai_completion_model,
            prompt=prompt,
            temperature=settings.openai_temperature,
            max_tokens=settings.openai_max_tokens,
        )
    except OpenAIError as e:
        logger.error(f"OpenAI completion error: {e}")
        raise RemoteStoreError(f"OpenAI request failed: {e}") from e

    if not response.choices:
        return ""
    return response.choices[0].text or ""
