"""
Settings and configuration for path_ratchet tooling.

The library API takes its platform explicitly; these settings only feed the
CLI and other entry points that need defaults. Loaded from environment
variables and validated on construction with fail-fast behavior.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

from .platforms import Platform
from .sanitize import check_replacement

__all__ = ["Settings", "create_settings_from_env"]

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """
    Configuration settings for path_ratchet entry points.

    Attributes:
        platform: Path rules to validate under when none is given explicitly
        sanitize_replacement: Text substituted by ``sanitize_component``
        log_level: Root logging level name for the CLI
    """
    platform: Platform = field(default_factory=Platform.native)
    sanitize_replacement: str = "_"
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate settings on construction."""
        # Accept names as well as Platform members
        object.__setattr__(self, "platform", Platform.parse(self.platform))

        check_replacement(self.sanitize_replacement)

        level = str(self.log_level).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log_level: {self.log_level}. Expected one of {', '.join(_LOG_LEVELS)}")
        object.__setattr__(self, "log_level", level)

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)


def create_settings_from_env() -> Settings:
    """
    Load settings from environment variables.

    Environment Variables:
        - PATH_RATCHET_PLATFORM (default: native platform)
        - PATH_RATCHET_SANITIZE_REPLACEMENT (default: "_")
        - PATH_RATCHET_LOG_LEVEL (default: WARNING)

    Returns:
        Settings object with validated configuration

    Raises:
        ValueError: If configuration is invalid

    Note:
        Creates a fresh Settings instance every time (no caching).
    """
    platform = os.getenv("PATH_RATCHET_PLATFORM") or None
    return Settings(
        platform=Platform.parse(platform),
        sanitize_replacement=os.getenv("PATH_RATCHET_SANITIZE_REPLACEMENT", "_"),
        log_level=os.getenv("PATH_RATCHET_LOG_LEVEL", "WARNING"),
    )
