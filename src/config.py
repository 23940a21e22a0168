"""Client configuration with environment variable loading.

Pydantic-based configuration for the API gateway and the NiceGUI page.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_API_BASE_URL = "http://localhost:8000/api/v1"


class ClientConfig(BaseModel):
    """Configuration for the S3 file retriever client.

    Attributes:
        api_base_url: Base URL of the chat/file API, including ``/api/v1``.
        request_timeout: Seconds before an API request is abandoned.
        host: Interface the NiceGUI server binds to.
        port: Port the NiceGUI server listens on.
        app_title: Browser tab and header title.
        log_level: Root logging level name.
    """

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", DEFAULT_API_BASE_URL),
        description="Base URL of the chat/file API",
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("API_TIMEOUT", "120")),
        gt=0.0,
        description="HTTP timeout in seconds",
    )
    host: str = Field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = Field(
        default_factory=lambda: int(os.getenv("PORT", "8080")),
        ge=1,
        le=65535,
    )
    app_title: str = Field(default_factory=lambda: os.getenv("APP_TITLE", "S3 File Retriever"))
    log_level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("API_BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()


def get_client_config() -> ClientConfig:
    """Create client configuration from environment.

    Returns:
        Configured ClientConfig instance.

    Raises:
        ValidationError: If an environment value is invalid.
    """
    return ClientConfig()
