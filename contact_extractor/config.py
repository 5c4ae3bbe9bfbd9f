"""Application configuration with environment variable loading.

Pydantic-based settings shared by the parser, the API and the UI.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class AppConfig(BaseModel):
    """Configuration for the contact extractor.

    Attributes:
        max_file_size_mb: Largest accepted upload, in megabytes.
        preview_limit: Number of extracted numbers listed in the UI preview.
        api_base_url: Base URL the UI uses to reach the API.
        ui_port: Port the standalone upload page listens on.
    """

    max_file_size_mb: int = Field(
        default_factory=lambda: int(os.getenv("MAX_UPLOAD_MB", "10")),
        ge=1,
        le=100,
        description="Maximum upload size in megabytes",
    )
    preview_limit: int = Field(
        default_factory=lambda: int(os.getenv("PREVIEW_LIMIT", "10")),
        ge=1,
        description="Numbers shown before the list is collapsed",
    )
    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:8000"),
        description="API base URL used by the UI",
    )
    ui_port: int = Field(
        default_factory=lambda: int(os.getenv("UI_PORT", "8080")),
        ge=1,
        le=65535,
        description="Port for the standalone upload page",
    )

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be appended directly."""
        v = v.strip()
        if not v:
            raise ValueError("API_BASE_URL must not be empty")
        return v.rstrip("/")

    @property
    def max_file_size(self) -> int:
        """Maximum upload size in bytes."""
        return self.max_file_size_mb * 1024 * 1024


def get_config() -> AppConfig:
    """Create application configuration from environment.

    Returns:
        Configured AppConfig instance.

    Raises:
        pydantic.ValidationError: If an environment value is out of range.
    """
    return AppConfig()
