"""Runtime configuration for the streak client.

Only parameters that the client actually uses are kept.
• API_BASE_URL     – root URL of the streak tracker backend.
• API_TIMEOUT_SEC  – timeout applied to every HTTP call.
• DEFAULT_SESSION  – session type preselected in the logging form.
• ERROR_MESSAGE    – text shown in place of the time when a call fails.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple
from urllib.parse import urlparse

from dotenv import load_dotenv  # type: ignore

# Load variables from .env if present (shared with other config modules)
load_dotenv()

SESSION_TYPES: Tuple[str, ...] = ("1-hour", "2-hours", "3-hours")


@dataclass(frozen=True)
class ClientSettings:
    """Immutable container for runtime parameters."""

    # --- Backend ---------------------------------------------------------
    api_base_url: str = os.getenv("STREAK_API_BASE_URL", "http://127.0.0.1:8080")
    api_timeout_sec: float = float(os.getenv("STREAK_API_TIMEOUT_SEC", "10"))

    # --- Logging form ----------------------------------------------------
    default_session: str = os.getenv("STREAK_DEFAULT_SESSION", SESSION_TYPES[0])
    session_types: Tuple[str, ...] = SESSION_TYPES

    # --- Presentation ----------------------------------------------------
    error_message: str = os.getenv("STREAK_ERROR_MESSAGE", "Error fetching time")
    log_level: str = os.getenv("STREAK_LOG_LEVEL", "INFO")

    def __post_init__(self):
        parsed = urlparse(self.api_base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"Invalid API base URL: {self.api_base_url!r}")
        if self.api_timeout_sec <= 0:
            raise ValueError("API timeout must be positive")
        if not self.default_session:
            raise ValueError("Default session type must not be empty")

        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "api_base_url", self.api_base_url.rstrip("/"))


# Singleton used by most callers
SETTINGS = ClientSettings()


def update_from_kwargs(**overrides):
    """Return a new ClientSettings with supplied overrides."""

    return ClientSettings(
        api_base_url=overrides.get("api_base_url", SETTINGS.api_base_url),
        api_timeout_sec=overrides.get("api_timeout_sec", SETTINGS.api_timeout_sec),
        default_session=overrides.get("default_session", SETTINGS.default_session),
        session_types=overrides.get("session_types", SETTINGS.session_types),
        error_message=overrides.get("error_message", SETTINGS.error_message),
        log_level=overrides.get("log_level", SETTINGS.log_level),
    )
