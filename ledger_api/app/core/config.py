"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration for local development.
Tests and embedding applications may build their own ``Settings``
instance and pass it to ``create_app``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Ledger API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")

    # When enabled, the message of an unexpected storage failure is
    # returned to the client instead of a generic error text.
    debug: bool = _env_flag("DEBUG")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database.  Relative paths are resolved against
    # the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "ledger.db")

    # Prefix under which the routes are mounted.  Empty by default so the
    # paths match the ones existing clients use (``/login``, ``/transactions``).
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    # bcrypt cost factor used when hashing new passwords.
    password_hash_rounds: int = int(os.getenv("PASSWORD_HASH_ROUNDS", "10"))

    # Comma-separated list of origins allowed by the CORS middleware.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def allowed_origins(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before importing this module.
settings = Settings()
