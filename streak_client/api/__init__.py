"""Streak tracker backend access.

Import from:

    from streak_client.api import StreakApiClient, StreakApiError
"""

from streak_client.api.client import StreakApiClient, StreakApiError
from streak_client.api.models import (
    OverallStatistics,
    StreakBonus,
    StreaksResponse,
    TimeResponse,
    WeeklyActivity,
)

__all__ = [
    'StreakApiClient',
    'StreakApiError',
    'TimeResponse',
    'WeeklyActivity',
    'StreaksResponse',
    'StreakBonus',
    'OverallStatistics',
]
