"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all; in a deployment you
should override them via environment variables.
"""

import os
from dataclasses import dataclass
from typing import List


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Digital Aid Seattle API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    description: str = os.getenv("API_DESCRIPTION", "Backend API for donation management system")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Deployment environment name.  Anything other than ``production``
    # exposes exception messages in 500 responses.
    environment: str = os.getenv("APP_ENV", "development")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))

    # Optional prefix for the donation routes, e.g. ``/api``.  The health
    # check and the service descriptor are always served from the root.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  The web client runs on port 3000 during development.
    cors_origins: str = os.getenv("CORS_ORIGINS", "http://localhost:3000")

    # Populate a freshly created store with a few sample donations.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
