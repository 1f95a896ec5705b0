"""Typed views over the streak tracker's JSON payloads.

Each ``from_dict`` raises ``ValueError`` when the payload does not have the
expected shape; callers in :mod:`streak_client.api.client` turn that into a
``StreakApiError``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List


def _require(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    if key not in data:
        raise ValueError(f"Missing field '{key}'")
    return data[key]


def _str(data: Any, key: str) -> str:
    value = _require(data, key)
    if not isinstance(value, str):
        raise ValueError(f"Field '{key}' must be a string")
    return value


def _count(data: Any, key: str) -> int:
    value = _require(data, key)
    # bool is an int subclass; a count is never true/false
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Field '{key}' must be an integer")
    if value < 0:
        raise ValueError(f"Field '{key}' must not be negative (got {value})")
    return value


@dataclass(frozen=True)
class TimeResponse:
    """Payload of ``GET /api/time`` and ``POST /api/log_session``."""

    current_time: str
    streak: int
    total_points: int

    @classmethod
    def from_dict(cls, data: Any) -> "TimeResponse":
        return cls(
            current_time=_str(data, "current_time"),
            streak=_count(data, "streak"),
            total_points=_count(data, "total_points"),
        )


@dataclass(frozen=True)
class WeeklyActivity:
    week_start: str
    points: int

    @classmethod
    def from_dict(cls, data: Any) -> "WeeklyActivity":
        return cls(week_start=_str(data, "week_start"), points=_count(data, "points"))


@dataclass(frozen=True)
class StreaksResponse:
    overall_streak: int
    yearly_streak: int
    monthly_streak: int

    @classmethod
    def from_dict(cls, data: Any) -> "StreaksResponse":
        return cls(
            overall_streak=_count(data, "overall_streak"),
            yearly_streak=_count(data, "yearly_streak"),
            monthly_streak=_count(data, "monthly_streak"),
        )


@dataclass(frozen=True)
class StreakBonus:
    """A run of three or more consecutive days, keyed by its week."""

    streak_length: int
    week_start: str

    @classmethod
    def from_dict(cls, data: Any) -> "StreakBonus":
        return cls(
            streak_length=_count(data, "streak_length"),
            week_start=_str(data, "week_start"),
        )


@dataclass(frozen=True)
class OverallStatistics:
    current_date: str
    streak: int
    total_points: int
    weekly_trend: List[WeeklyActivity] = field(default_factory=list)
    achievements: List[str] = field(default_factory=list)
    yearly_streak: int = 0
    monthly_streak: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "OverallStatistics":
        return cls(
            current_date=_str(data, "current_date"),
            streak=_count(data, "streak"),
            total_points=_count(data, "total_points"),
            weekly_trend=parse_list(_require(data, "weekly_trend"), WeeklyActivity),
            achievements=parse_achievements(data),
            yearly_streak=_count(data, "yearly_streak"),
            monthly_streak=_count(data, "monthly_streak"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def parse_achievements(data: Any) -> List[str]:
    """Return the ``achievements`` list of *data* as strings."""
    items = _require(data, "achievements")
    if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
        raise ValueError("Field 'achievements' must be a list of strings")
    return list(items)


def parse_list(data: Any, model) -> List[Any]:
    """Decode a JSON array of objects with ``model.from_dict``."""
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
    return [model.from_dict(item) for item in data]
