"""Runtime configuration read from the environment."""

import os
from typing import Optional

from pydantic import BaseModel, Field

from .tokens import DEFAULT_EXPIRES_IN

_TRUE_VALUES = {"1", "true", "yes", "on"}


class MediaSyncSettings(BaseModel):
    """Settings shared by the CLI commands. Command-line options override them."""

    management_endpoint: Optional[str] = Field(
        default=None, description="Management API host, e.g. name.management.azure-api.net"
    )
    publish_endpoint: Optional[str] = Field(
        default=None, description="Developer portal host, e.g. name.developer.azure-api.net"
    )
    token: Optional[str] = Field(default=None, description="Management API SAS token")
    identifier: Optional[str] = Field(
        default=None, description="Management API identifier, usually 'integration'"
    )
    key: Optional[str] = Field(default=None, description="Management API key")
    token_expires_in: int = Field(
        default=DEFAULT_EXPIRES_IN, gt=0, description="Lifetime of generated tokens in seconds"
    )
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    http_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")
    media_folder: str = Field(default="./media", description="Local media folder")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


def load_settings(**overrides) -> MediaSyncSettings:
    """
    Build settings from environment variables.

    Keyword overrides with a value of ``None`` are ignored so that unset
    command-line options fall back to the environment.

    Raises:
        pydantic.ValidationError: If a value cannot be converted.
    """
    values = {
        "management_endpoint": os.getenv("PORTAL_MANAGEMENT_ENDPOINT"),
        "publish_endpoint": os.getenv("PORTAL_PUBLISH_ENDPOINT"),
        "token": os.getenv("PORTAL_TOKEN"),
        "identifier": os.getenv("PORTAL_ID"),
        "key": os.getenv("PORTAL_KEY"),
        "token_expires_in": os.getenv("PORTAL_TOKEN_EXPIRES_IN", DEFAULT_EXPIRES_IN),
        "verify_ssl": _env_flag("PORTAL_VERIFY_SSL", True),
        "http_timeout": os.getenv("PORTAL_HTTP_TIMEOUT", 30.0),
        "media_folder": os.getenv("PORTAL_MEDIA_FOLDER", "./media"),
    }
    values.update({k: v for k, v in overrides.items() if v is not None})
    return MediaSyncSettings(**values)
