"""Consecutive-day mood logging streaks."""

from datetime import date, timedelta, tzinfo
from typing import Iterable, Optional

from .dates import normalize_date, normalize_dates

# (threshold, message), highest first
MILESTONES = (
    (30, "🏆 Amazing! 30+ days!"),
    (14, "⭐ Two weeks strong!"),
    (7, "🎉 One week milestone!"),
    (3, "💪 Building the habit!"),
)

_ONE_DAY = timedelta(days=1)


def compute_streak(entry_dates: Iterable, today, tz: Optional[tzinfo] = None) -> int:
    """Count consecutive logged days ending today or yesterday.

    Args:
        entry_dates: Dates the user logged a mood. Dates, datetimes and ISO
            strings are accepted; time of day is ignored and duplicates
            collapse.
        today: The user's current calendar day.
        tz: The user's timezone. Aware timestamps are moved into it before
            the day is taken, so a late-evening log counts for that evening.

    Returns:
        Streak length, 0 when the most recent log is older than yesterday.
    """
    days = normalize_dates(entry_dates, tz)
    if not days:
        return 0

    today = normalize_date(today)
    yesterday = today - _ONE_DAY
    most_recent = max(days)

    if most_recent not in (today, yesterday):
        return 0

    check = today if most_recent == today else yesterday
    streak = 0
    while check in days:
        streak += 1
        check -= _ONE_DAY
    return streak


def streak_milestone(streak: int) -> Optional[str]:
    for threshold, message in MILESTONES:
        if streak >= threshold:
            return message
    return None


def streak_status(streak: int) -> str:
    if streak > 0:
        return "Keep it up! You're doing great 🌟"
    return "Log your mood today to start a streak!"


def streak_unit(streak: int) -> str:
    return "day" if streak == 1 else "days"


def last_logged(entry_dates: Iterable, tz: Optional[tzinfo] = None) -> Optional[date]:
    """Most recent logged day, or None."""
    days = normalize_dates(entry_dates, tz)
    return max(days) if days else None
