"""
notecache — Application Configuration
======================================

What:  Two configuration objects with deliberately different sources.
How:
    - ServerOptions: the three mandatory startup values (host, port, cache
      directory). Populated ONLY from command-line flags; there is no
      environment or config-file fallback for them.
    - Settings: ambient knobs (log level, upload form location) loaded by
      pydantic-settings from NOTECACHE_* environment variables or a .env file.
Who:   ServerOptions is built by notecache.cli; Settings is read by the
       application factory in notecache.main.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

# Packaged HTML form served at /UploadForm.html
DEFAULT_UPLOAD_FORM = Path(__file__).resolve().parent / "static" / "UploadForm.html"


class ServerOptions(BaseModel):
    """
    Validated startup parameters for one server process.

    Immutable after startup; the cache path is the only process-wide state
    shared by request handlers.
    """

    host: str = Field(min_length=1, description="Bind address")
    port: int = Field(ge=1, le=65535, description="Bind port")
    cache_dir: Path = Field(description="Directory holding <name>.txt note files")

    model_config = {"frozen": True}


class Settings(BaseSettings):
    """
    Ambient settings loaded from environment variables.

    All settings have defaults; nothing here is required to start the server.
    """

    # ── Logging ───────────────────────────────────────────────────────────
    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Static Assets ─────────────────────────────────────────────────────
    # What: HTML form served at GET /UploadForm.html for manual testing
    upload_form: Path = Field(default=DEFAULT_UPLOAD_FORM)

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_prefix": "NOTECACHE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }
