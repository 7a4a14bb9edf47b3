"""Central application configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

from homefurgood.errors import ConfigurationError


@dataclass(frozen=True)
class Config:
    """Central application configuration.

    Reads from environment variables with sensible defaults.
    The RescueGroups API key has no default; it is validated on first use
    through :meth:`require_api_key`.
    """

    # RescueGroups
    rescuegroups_api_key: str | None = field(
        default_factory=lambda: os.getenv("RESCUEGROUPS_API_KEY") or None
    )
    rescuegroups_api_base: str = field(
        default_factory=lambda: os.getenv(
            "RESCUEGROUPS_API_BASE", "https://api.rescuegroups.org/v5"
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("RESCUEGROUPS_TIMEOUT", "30"))
    )

    # Favorites read model
    favorites_url: str | None = field(
        default_factory=lambda: os.getenv("FAVORITES_URL") or None
    )

    # Search
    search_page_size: int = 150
    breed_search_page_size: int = 200

    # Spotlight
    spotlight_radius_miles: int = 50

    # Server
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))

    def require_api_key(self) -> str:
        """Return the RescueGroups API key.

        Raises:
            ConfigurationError: If RESCUEGROUPS_API_KEY is not set.
        """
        if not self.rescuegroups_api_key:
            raise ConfigurationError("Missing RESCUEGROUPS_API_KEY")
        return self.rescuegroups_api_key


def get_config() -> Config:
    """Get application configuration.

    Returns:
        Config instance with values from environment or defaults.
    """
    return Config()
