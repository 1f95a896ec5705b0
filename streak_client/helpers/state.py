"""Client-side state for the session logging page.

``DashboardController`` owns a single immutable ``DashboardState`` and swaps it
for a new one on every event (fetch result, user input, submit). UI code reads
``controller.state`` and never touches the API client directly.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Optional

from streak_client.api.client import StreakApiClient, StreakApiError
from streak_client.api.models import TimeResponse
from streak_client.config.settings import SETTINGS, ClientSettings

logger = logging.getLogger(__name__)

LOADING_PLACEHOLDER = "Loading..."


@dataclass(frozen=True)
class DashboardState:
    current_time: str
    streak: int
    total_points: int
    selected_date: str
    selected_session: str


def initial_state(
    settings: ClientSettings | None = None, today: Optional[date] = None
) -> DashboardState:
    """Return the placeholder state shown before the first fetch completes."""
    settings = settings or SETTINGS
    today = today or date.today()
    return DashboardState(
        current_time=LOADING_PLACEHOLDER,
        streak=0,
        total_points=0,
        selected_date=today.isoformat(),
        selected_session=settings.default_session,
    )


class DashboardController:
    """Apply load / select / submit events to the dashboard state."""

    def __init__(
        self,
        client: StreakApiClient,
        settings: ClientSettings | None = None,
        state: DashboardState | None = None,
    ):
        self.client = client
        self.settings = settings or SETTINGS
        self.state = state or initial_state(self.settings)
        # Failure behind the current error string; None after a successful call
        self.last_error: Optional[StreakApiError] = None

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def load(self) -> DashboardState:
        """Fetch time, streak and points from the backend."""
        return self._apply(self.client.get_time, "load")

    def set_date(self, value: str) -> DashboardState:
        self.state = replace(self.state, selected_date=value)
        return self.state

    def set_session(self, value: str) -> DashboardState:
        self.state = replace(self.state, selected_session=value)
        return self.state

    def submit(self) -> DashboardState:
        """Log the selected session and show the refreshed totals."""
        selected_date = self.state.selected_date
        selected_session = self.state.selected_session
        return self._apply(
            lambda: self.client.log_session(selected_date, selected_session), "submit"
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _apply(self, call: Callable[[], TimeResponse], action: str) -> DashboardState:
        try:
            result = call()
        except StreakApiError as e:
            logger.error(f"Dashboard {action} failed: {e}")
            self.last_error = e
            # streak and points keep their last known values
            self.state = replace(self.state, current_time=self.settings.error_message)
            return self.state

        self.last_error = None
        self.state = replace(
            self.state,
            current_time=result.current_time,
            streak=result.streak,
            total_points=result.total_points,
        )
        logger.info(
            "Dashboard %s: streak=%d points=%d", action, result.streak, result.total_points
        )
        return self.state
