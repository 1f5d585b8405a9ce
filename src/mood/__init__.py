from .dates import ValidationError, local_today, normalize_date
from .models import MOOD_OPTIONS, MoodLogEntry, MoodStats
from .stats import TREND_DEADBAND, compute_mood_stats
from .storage import MoodStorage
from .streak import compute_streak

__all__ = [
    "ValidationError",
    "local_today",
    "normalize_date",
    "MOOD_OPTIONS",
    "MoodLogEntry",
    "MoodStats",
    "TREND_DEADBAND",
    "compute_mood_stats",
    "compute_streak",
    "MoodStorage",
]
