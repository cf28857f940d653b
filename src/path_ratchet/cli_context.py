"""
CLI Context for managing application dependencies.

Holds the settings loaded once per CLI invocation so commands don't read the
environment themselves.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .platforms import Platform
from .settings import Settings, create_settings_from_env


@dataclass
class CLIContext:
    """Shared context for CLI commands."""
    settings: Settings

    @classmethod
    def from_env(cls) -> CLIContext:
        """
        Create CLI context from environment variables.

        Returns:
            CLIContext with settings loaded from environment
        """
        return cls(settings=create_settings_from_env())

    def platform_for(self, override: Optional[str]) -> Platform:
        """Platform from a ``--platform`` option, falling back to settings."""
        if override:
            return Platform.parse(override)
        return self.settings.platform
