"""
config.py

PURPOSE: Capability flags and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Settings come from (in priority order):
1. Explicit Settings(...) arguments (tests, embedding code)
2. Environment variables prefixed with TYPEWHEEL_
3. Defaults (lowest priority)

Two capability flags gate parts of the library:
- json_codec: the JSON codec can be constructed
- experimental_hover_events: show_item / show_entity hover events, whose
  upstream schema is not finalized, can be constructed, encoded and decoded
"""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings

from typewheel.errors import FeatureDisabled, UnsupportedVariant

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Library settings and capability flags."""

    json_codec: bool = Field(
        default=True,
        description="Enable the JSON component codec",
    )
    experimental_hover_events: bool = Field(
        default=False,
        description="Enable the show_item and show_entity hover events",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the CLI",
    )

    model_config = {"env_prefix": "TYPEWHEEL_"}

    def require_json_codec(self) -> None:
        """Raise FeatureDisabled unless the JSON codec is enabled."""
        if not self.json_codec:
            raise FeatureDisabled("The JSON codec is disabled (TYPEWHEEL_JSON_CODEC=false)")

    def require_experimental_hover_events(self, action: str, path: str = "$") -> None:
        """Raise UnsupportedVariant unless experimental hover events are enabled."""
        if not self.experimental_hover_events:
            logger.debug(f"Rejecting experimental hover event '{action}' at {path}")
            raise UnsupportedVariant(
                f"Hover event '{action}' requires TYPEWHEEL_EXPERIMENTAL_HOVER_EVENTS",
                path,
            )


def get_settings() -> Settings:
    """Get library settings, loading from environment."""
    return Settings()
