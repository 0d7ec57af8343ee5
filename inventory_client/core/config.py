"""Centralized client settings using pydantic settings."""

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file
# Look for .env in the package directory or project root
env_path = Path(__file__).parent.parent / ".env"
if not env_path.exists():
    # Try project root
    env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path, override=False)

DEFAULT_API_BASE_URL = "http://localhost:8080"


class Settings(BaseSettings):
    """Environment-aware configuration (backend URL, timeouts, display options)."""

    # Application settings
    app_name: str = "Inventory Console"
    log_level: str = "INFO"

    # Backend settings
    api_base_url: str = Field(
        default=DEFAULT_API_BASE_URL,
        description="Backend origin; the Android emulator reaches the host at http://10.0.2.2:8080",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout in seconds",
    )

    # Display settings
    image_placeholder_url: str = Field(
        default="https://via.placeholder.com/400x300/4CAF50/ffffff?text=Product",
        description="Static image shown when a resolved product image fails to load",
    )
    low_stock_threshold: int = Field(
        default=10,
        ge=0,
        description="Stock above this is 'In Stock'; 1..threshold is 'Low Stock'",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # Allow case-insensitive env var matching
        extra="ignore",  # Ignore extra env vars not defined in model
        populate_by_name=True,
    )

    @field_validator("api_base_url", mode="before")
    @classmethod
    def normalize_api_base_url(cls, v: str | None) -> str:
        """Reduce the backend URL to its origin (endpoint paths carry the /api prefix)."""
        if v is None or not str(v).strip():
            return DEFAULT_API_BASE_URL
        url = str(v).strip().rstrip("/")
        if "://" not in url:
            url = f"http://{url}"
        # Accept values copied from the frontend config, e.g. http://host:8080/api
        if url.endswith("/api"):
            url = url[: -len("/api")]
        return url

    @field_validator("log_level", mode="after")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.strip().upper() or "INFO"


@lru_cache
def get_settings() -> Settings:
    """Provide singleton-like access for the composition root and CLI."""
    return Settings()
