"""Mood data types and the fixed mood option table."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

from shared_types import Trend

from .dates import ValidationError, normalize_date

MIN_SCORE = 1
MAX_SCORE = 10


@dataclass(frozen=True)
class MoodOption:
    score: int
    emoji: str
    label: str


MOOD_OPTIONS = (
    MoodOption(1, "😢", "Terrible"),
    MoodOption(2, "😟", "Bad"),
    MoodOption(3, "😕", "Not Great"),
    MoodOption(4, "😐", "Below Average"),
    MoodOption(5, "😶", "Okay"),
    MoodOption(6, "🙂", "Fine"),
    MoodOption(7, "😊", "Good"),
    MoodOption(8, "😄", "Great"),
    MoodOption(9, "😁", "Excellent"),
    MoodOption(10, "🤩", "Amazing"),
)


def validate_score(score) -> int:
    """Check a mood score is an integer in [1, 10]."""
    if isinstance(score, bool) or not isinstance(score, int):
        raise ValidationError(f"Mood score must be an integer, got {score!r}")
    if not MIN_SCORE <= score <= MAX_SCORE:
        raise ValidationError(f"Mood score must be {MIN_SCORE}-{MAX_SCORE}, got {score}")
    return score


def option_for_score(score: int) -> MoodOption:
    return MOOD_OPTIONS[validate_score(score) - 1]


@dataclass(frozen=True)
class MoodLogEntry:
    """One mood log for one user on one calendar day."""

    date: date
    score: int
    emoji: str = ""
    id: Optional[str] = None
    user_id: Optional[str] = None
    created_at: Optional[str] = None

    @classmethod
    def from_row(cls, row: dict) -> "MoodLogEntry":
        """Build from a ``mood_entries`` row."""
        return cls(
            date=normalize_date(row["entry_date"]),
            score=int(row["mood_score"]),
            emoji=row.get("emoji") or "",
            id=str(row["id"]) if row.get("id") is not None else None,
            user_id=row.get("user_id"),
            created_at=row.get("created_at"),
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "score": self.score,
            "emoji": self.emoji,
        }


@dataclass(frozen=True)
class MoodStats:
    average: float
    trend: Trend
    count: int

    def to_dict(self) -> dict:
        return {"average": self.average, "trend": str(self.trend), "count": self.count}
