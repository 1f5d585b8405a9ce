"""Mood averages and half-over-half trend classification."""

from datetime import date, timedelta
from typing import Iterable, Sequence

from shared_types import TimeRange, Trend

from .dates import ValidationError, normalize_date
from .models import MoodLogEntry, MoodStats

# Minimum shift between window-half means before a trend is reported
TREND_DEADBAND = 0.5

WINDOW_DAYS = {
    TimeRange.WEEK: 7,
    TimeRange.MONTH: 30,
}


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def classify_trend(scores: Sequence[float]) -> Trend:
    """Compare the mean of the second half of the window to the first.

    The split is at ``len // 2``; for odd lengths the middle score belongs
    to the second half.
    """
    if len(scores) < 2:
        return Trend.STABLE

    mid = len(scores) // 2
    first = _mean(scores[:mid])
    second = _mean(scores[mid:])

    if second > first + TREND_DEADBAND:
        return Trend.UP
    if second < first - TREND_DEADBAND:
        return Trend.DOWN
    return Trend.STABLE


def compute_mood_stats(scores: Sequence[float]) -> MoodStats:
    """Average, trend and count for scores ordered oldest to newest."""
    scores = list(scores)
    return MoodStats(
        average=_mean(scores),
        trend=classify_trend(scores),
        count=len(scores),
    )


def stats_for_entries(entries: Iterable[MoodLogEntry]) -> MoodStats:
    """Stats over mood entries in date order, whatever order they arrive in."""
    ordered = sorted(entries, key=lambda e: e.date)
    return compute_mood_stats([e.score for e in ordered])


def window_days(time_range: str) -> int:
    try:
        return WINDOW_DAYS[TimeRange(time_range)]
    except ValueError as e:
        raise ValidationError(
            f"Invalid time range '{time_range}'. Must be one of {[str(t) for t in TimeRange]}"
        ) from e


def window_start(today, time_range: str = TimeRange.WEEK) -> date:
    """First calendar day (inclusive) of the trailing window."""
    return normalize_date(today) - timedelta(days=window_days(time_range))
