"""
Application Settings Management

Centralizes all application configuration: Google Drive service account,
OpenAI, blob staging, logging and server settings.

IMPORTANT:
- Secrets must come from environment variables, never hardcoded
- Create a .env.local file for local development (see .env.example)
- Production uses system environment variables or a secret manager
"""

from pathlib import Path

from pydantic import computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

# backend/app/settings.py -> backend/app/ -> backend/ -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent

ENV_FILE = PROJECT_ROOT / ".env.local"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # ==================== Environment ====================
    # "local-dev" | "test" | "production"
    environment: str = "local-dev"

    # ==================== Server ====================
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = True

    # ==================== Frontend (used for CORS) ====================
    frontend_host: str = "localhost"
    frontend_port: int = 3000

    # ==================== API ====================
    api_prefix: str = "/api"

    # ==================== Google Drive ====================
    # "google" | "in_memory"
    # - google: real Drive v3 API with a service account
    # - in_memory: process-local fake store, no external service
    drive_store_type: str = "google"

    google_service_account_email: str = ""
    # Private keys pasted into env files usually carry literal "\n" escapes
    google_private_key: str = ""
    # Default workspace (shared drive or folder id) for all campaign folders
    google_workspace_id: str = ""

    # ==================== OpenAI ====================
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    openai_completion_model: str = "gpt-3.5-turbo-instruct"
    openai_temperature: float = 0.7
    openai_max_tokens: int = 1000
    openai_analysis_max_tokens: int = 2000

    # ==================== Blob staging ====================
    blob_read_write_token: str = ""
    blob_api_url: str = "https://blob.vercel-storage.com"

    # ==================== Timeouts ====================
    http_timeout: float = 60

    # ==================== Logging ====================
    logs_subdir: str = "logs"
    log_max_bytes: int = 20 * 1024 * 1024  # 20MB
    log_backup_count: int = 5

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ==================== Computed ====================

    @computed_field  # type: ignore[misc]
    @property
    def cors_origins(self) -> list[str]:
        """
        Auto-generate CORS origins based on frontend configuration

        Returns:
            List of CORS origin URLs
        """
        return [
            f"http://{self.frontend_host}:{self.frontend_port}",
            f"http://127.0.0.1:{self.frontend_port}",
            f"http://localhost:{self.frontend_port}",
        ]

    # ==================== Validation ====================

    def validate_configuration(self) -> None:
        """
        Validate configuration settings

        Raises:
            ValueError: If configuration is invalid
        """
        if self.port == self.frontend_port:
            raise ValueError(
                f"Port conflict: Backend port {self.port} conflicts with "
                f"frontend port {self.frontend_port}"
            )
        if self.drive_store_type not in ("google", "in_memory"):
            raise ValueError(f"Unknown drive_store_type: {self.drive_store_type}")

    # ==================== Paths ====================

    @classmethod
    def get_project_root(cls) -> Path:
        """Absolute path of the project root."""
        return PROJECT_ROOT

    def get_logs_root(self) -> Path:
        """
        Absolute path of the logs directory

        - local-dev: {project_root}/logs/
        - production: /app/logs/
        """
        if self.environment == "local-dev":
            return self.get_project_root() / self.logs_subdir
        return Path("/app") / self.logs_subdir

    # ==================== Credential checks ====================

    def get_private_key(self) -> str:
        """Service account private key with escaped newlines expanded."""
        return self.google_private_key.replace("\\n", "\n")

    def is_google_configured(self) -> bool:
        """Check whether the Drive service account is configured."""
        return bool(self.google_service_account_email and self.google_private_key)

    def is_openai_configured(self) -> bool:
        """Check whether an OpenAI API key is configured."""
        return bool(self.openai_api_key)

    def is_blob_configured(self) -> bool:
        """Check whether blob staging deletion can be authenticated."""
        return bool(self.blob_read_write_token)


settings = Settings()
