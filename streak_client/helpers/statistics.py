"""Business-logic helper for the statistics page.

Thin façade around the statistics endpoints of `StreakApiClient` so that UI
code can call a single function and get chart-ready data back.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

import pandas as pd

from streak_client.api.client import StreakApiClient
from streak_client.api.models import OverallStatistics, StreakBonus, WeeklyActivity


@dataclass(frozen=True)
class StatisticsSnapshot:
    overall: OverallStatistics
    bonuses: List[StreakBonus] = field(default_factory=list)


def collect_statistics(client: StreakApiClient) -> StatisticsSnapshot:
    """Fetch overall statistics and streak bonuses in one go.

    Any ``StreakApiError`` propagates; the page shows a single error banner.
    """
    overall = client.get_overall_statistics()
    bonuses = client.get_streak_bonuses()
    return StatisticsSnapshot(overall=overall, bonuses=bonuses)


def weekly_trend_frame(trend: List[WeeklyActivity]) -> pd.DataFrame:
    """Return points per week as a DataFrame indexed by ``week_start``."""
    df = pd.DataFrame(
        [{"week_start": w.week_start, "points": w.points} for w in trend],
        columns=["week_start", "points"],
    )
    df["points"] = df["points"].astype(int)
    return df.sort_values("week_start").set_index("week_start")


def bonuses_frame(bonuses: List[StreakBonus]) -> pd.DataFrame:
    """Return streak bonuses as a table, newest week first."""
    df = pd.DataFrame(
        [{"Week of": b.week_start, "Streak length": b.streak_length} for b in bonuses],
        columns=["Week of", "Streak length"],
    )
    return df.sort_values("Week of", ascending=False).reset_index(drop=True)
