"""
Configuration loaded from environment variables.

Every setting can be given as ``DISTANCE_MATRIX_<NAME>`` in the environment
or in a ``.env`` file, e.g. ``DISTANCE_MATRIX_API_KEY=...``. Option values
are kept as plain strings here; they are validated when an ``OptionSet`` or
client is built from them.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from distance_matrix.services.http import DEFAULT_TIMEOUT

BASE_URL = "https://maps.googleapis.com/maps/api/distancematrix"


class Settings(BaseSettings):
    """Client configuration."""

    model_config = SettingsConfigDict(
        env_prefix="DISTANCE_MATRIX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "distance-matrix"

    # -- Credentials --
    api_key: str = ""

    # -- Endpoint --
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    # -- Request options --
    mode: str = "driving"
    units: str = "metric"
    avoid: str | None = None
    language: str = "en"
    output: str = "json"
    sensor: bool = False

    def option_values(self) -> dict[str, object]:
        """Option fields as keyword arguments for ``OptionSet``."""
        return {
            "mode": self.mode,
            "units": self.units,
            "avoid": self.avoid or None,
            "language": self.language,
            "output": self.output,
            "sensor": self.sensor,
        }

    @property
    def masked_api_key(self) -> str:
        if not self.api_key:
            return "(not set)"
        return f"{self.api_key[:4]}..." if len(self.api_key) > 8 else "****"


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
