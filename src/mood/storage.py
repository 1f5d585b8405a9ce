"""Mood log persistence in the hosted ``mood_entries`` table."""

from datetime import date, tzinfo
from typing import Optional

import structlog

from shared_types import TimeRange

from .dates import normalize_date
from .models import MoodLogEntry, MoodStats, option_for_score, validate_score
from .stats import stats_for_entries, window_start
from .streak import compute_streak, last_logged
from .suggestions import RECENT_SCORES

logger = structlog.get_logger()

TABLE = "mood_entries"
CONFLICT_KEY = "user_id,entry_date"


class MoodStorage:
    """Reads and upserts one mood log per user per calendar day."""

    def __init__(self, client):
        self.client = client

    def log(
        self,
        user_id: str,
        score: int,
        entry_date,
        emoji: Optional[str] = None,
    ) -> tuple[MoodLogEntry, bool]:
        """Record today's (or any day's) mood, replacing an existing log.

        Returns:
            (entry, updated) where ``updated`` is True if a log for that day
            already existed.

        Raises:
            ValidationError: If score is outside 1-10 or date is malformed
        """
        validate_score(score)
        day = normalize_date(entry_date)
        emoji = emoji or option_for_score(score).emoji

        existing = self.get(user_id, day)
        row = self.client.upsert(
            TABLE,
            {
                "user_id": user_id,
                "mood_score": score,
                "emoji": emoji,
                "entry_date": day.isoformat(),
            },
            on_conflict=CONFLICT_KEY,
        )
        entry = MoodLogEntry.from_row(row) if row else MoodLogEntry(day, score, emoji, user_id=user_id)
        logger.info("mood.logged", user_id=user_id, date=day.isoformat(), updated=existing is not None)
        return entry, existing is not None

    def get(self, user_id: str, entry_date) -> Optional[MoodLogEntry]:
        day = normalize_date(entry_date)
        row = self.client.maybe_single(
            TABLE,
            filters=[("user_id", "eq", user_id), ("entry_date", "eq", day.isoformat())],
        )
        return MoodLogEntry.from_row(row) if row else None

    def list_dates(self, user_id: str, tz: Optional[tzinfo] = None) -> list[date]:
        """All logged days, newest first, as calendar days in ``tz``."""
        rows = self.client.select(
            TABLE,
            columns="entry_date",
            filters=[("user_id", "eq", user_id)],
            order="entry_date",
            ascending=False,
        )
        return [normalize_date(r["entry_date"], tz) for r in rows]

    def list_window(self, user_id: str, since: Optional[date] = None) -> list[MoodLogEntry]:
        """Entries on or after ``since``, oldest first."""
        filters = [("user_id", "eq", user_id)]
        if since is not None:
            filters.append(("entry_date", "gte", normalize_date(since).isoformat()))
        rows = self.client.select(TABLE, filters=filters, order="entry_date", ascending=True)
        return [MoodLogEntry.from_row(r) for r in rows]

    def recent(self, user_id: str, limit: int = RECENT_SCORES) -> list[MoodLogEntry]:
        """Latest entries, newest first."""
        rows = self.client.select(
            TABLE,
            filters=[("user_id", "eq", user_id)],
            order="entry_date",
            ascending=False,
            limit=limit,
        )
        return [MoodLogEntry.from_row(r) for r in rows]

    def streak(self, user_id: str, today, tz: Optional[tzinfo] = None) -> int:
        return compute_streak(self.list_dates(user_id, tz), today)

    def streak_summary(
        self, user_id: str, today, tz: Optional[tzinfo] = None
    ) -> tuple[int, Optional[date]]:
        """Current streak and the most recent logged day, from one fetch."""
        days = self.list_dates(user_id, tz)
        return compute_streak(days, today), last_logged(days)

    def stats(
        self, user_id: str, today, time_range: str = TimeRange.WEEK
    ) -> tuple[MoodStats, list[MoodLogEntry]]:
        """Stats for the trailing window plus the entries they were computed from."""
        entries = self.list_window(user_id, since=window_start(today, time_range))
        return stats_for_entries(entries), entries
