"""HTTP client for the streak tracker backend.

Thin wrapper around the backend's JSON API:
- get_time()           - current time, streak and point total
- log_session()        - record a session and return the refreshed totals
- get_weekly_trend()   - points per week
- get_achievements()   - unlocked achievement labels
- get_streaks()        - overall / yearly / monthly streaks
- get_overall_statistics() - everything above in one payload
- get_streak_bonuses() - weekly streak bonuses
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from streak_client.api.models import (
    OverallStatistics,
    StreakBonus,
    StreaksResponse,
    TimeResponse,
    WeeklyActivity,
    parse_achievements,
    parse_list,
)
from streak_client.config.settings import SETTINGS, ClientSettings

logger = logging.getLogger(__name__)


class StreakApiError(Exception):
    """Raised for any failed call: transport, HTTP status or payload shape."""
    pass


class StreakApiClient:
    """Streak tracker API client."""

    TIME_PATH = "/api/time"
    LOG_SESSION_PATH = "/api/log_session"
    WEEKLY_TREND_PATH = "/api/statistics/weekly_trend"
    ACHIEVEMENTS_PATH = "/api/statistics/achievements"
    STREAKS_PATH = "/api/statistics/streaks"
    OVERALL_PATH = "/api/statistics/overall"
    BONUSES_PATH = "/api/bonuses/streaks"

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: Optional[requests.Session] = None,
        settings: ClientSettings | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Backend root URL (defaults to the configured one)
            timeout: Per-request timeout in seconds
            session: Pre-built ``requests.Session`` (mainly for tests)
            settings: Settings to read defaults from instead of ``SETTINGS``
        """
        settings = settings or SETTINGS
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout or settings.api_timeout_sec
        self.session = session or requests.Session()
        self.session.headers.setdefault("Accept", "application/json")

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "StreakApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, payload: Dict[str, Any] | None = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("%s %s payload=%s", method, url, payload)

        try:
            response = self.session.request(method, url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"{method} {url} failed: {e}")
            raise StreakApiError(f"Request to {path} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            logger.warning(f"{method} {url} returned {response.status_code}: {response.text}")
            raise StreakApiError(
                f"{path} returned {response.status_code} - {response.text}"
            )

        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Undecodable JSON from {url}: {e}")
            raise StreakApiError(f"Invalid JSON from {path}") from e

    def _decode(self, path: str, decoder, data: Any):
        try:
            return decoder(data)
        except ValueError as e:
            logger.error(f"Unexpected payload from {path}: {e}")
            raise StreakApiError(f"Unexpected payload from {path}: {e}") from e

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def get_time(self) -> TimeResponse:
        """Fetch the current time, streak and total points."""
        data = self._request("GET", self.TIME_PATH)
        return self._decode(self.TIME_PATH, TimeResponse.from_dict, data)

    def log_session(self, date: str, session_type: str) -> TimeResponse:
        """Log a session for *date* and return the refreshed totals.

        The backend validates both fields; a rejected session surfaces as a
        ``StreakApiError`` carrying the 400 response body.
        """
        payload = {"date": date, "session_type": session_type}
        data = self._request("POST", self.LOG_SESSION_PATH, payload)
        logger.info(f"Logged {session_type} session for {date}")
        return self._decode(self.LOG_SESSION_PATH, TimeResponse.from_dict, data)

    def get_weekly_trend(self) -> List[WeeklyActivity]:
        data = self._request("GET", self.WEEKLY_TREND_PATH)
        return self._decode(
            self.WEEKLY_TREND_PATH, lambda d: parse_list(d, WeeklyActivity), data
        )

    def get_achievements(self) -> List[str]:
        data = self._request("GET", self.ACHIEVEMENTS_PATH)
        return self._decode(self.ACHIEVEMENTS_PATH, parse_achievements, data)

    def get_streaks(self) -> StreaksResponse:
        data = self._request("GET", self.STREAKS_PATH)
        return self._decode(self.STREAKS_PATH, StreaksResponse.from_dict, data)

    def get_overall_statistics(self) -> OverallStatistics:
        data = self._request("GET", self.OVERALL_PATH)
        return self._decode(self.OVERALL_PATH, OverallStatistics.from_dict, data)

    def get_streak_bonuses(self) -> List[StreakBonus]:
        data = self._request("GET", self.BONUSES_PATH)
        return self._decode(self.BONUSES_PATH, lambda d: parse_list(d, StreakBonus), data)
