"""Configuration management.

Uses pydantic-settings to read configuration from environment variables
and `.env.local`. The sheet identifier and service account credentials
are required; without them the service does not start.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENV_FILE = ".env.local"

REQUIRED_FIELDS = (
    "google_sheets_spreadsheet_id",
    "google_sheets_client_email",
    "google_sheets_private_key",
)


class ConfigError(Exception):
    pass


class Settings(BaseSettings):
    """Application settings.

    Every field can be set through the upper-cased environment variable
    of the same name, e.g. GOOGLE_SHEETS_SPREADSHEET_ID or PORT.
    """

    model_config = SettingsConfigDict(
        env_file=DEFAULT_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Google Sheets
    google_sheets_spreadsheet_id: str = ""
    google_sheets_client_email: str = ""
    google_sheets_private_key: str = Field(default="", repr=False)

    # Server
    host: str = "0.0.0.0"
    port: int = 5173
    public_dir: Path = Path("public")
    static_dir: Path = Path("static")

    # Summary cache
    summary_cache_ttl_seconds: float = Field(default=60.0, ge=0)
    serve_stale_on_error: bool = False

    def missing_fields(self) -> list[str]:
        """Names of required settings that are unset or blank."""
        return [name for name in REQUIRED_FIELDS if not getattr(self, name).strip()]


def load_settings(env_file: str | Path | None = DEFAULT_ENV_FILE) -> Settings:
    """Load and validate settings.

    Args:
        env_file: Dotenv file to read in addition to the environment.
            None reads the environment only.

    Raises:
        ConfigError: If a value is malformed or a required one is missing.
    """
    try:
        settings = Settings(_env_file=env_file)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e

    missing = settings.missing_fields()
    if missing:
        names = ", ".join(name.upper() for name in missing)
        raise ConfigError(f"missing Google Sheets configuration: {names}")
    return settings
