"""Wellness suggestions keyed to recent mood."""

from dataclasses import asdict, dataclass
from typing import Sequence

from shared_types import MoodLevel

# How many of the latest mood scores feed the level
RECENT_SCORES = 3


@dataclass(frozen=True)
class Suggestion:
    title: str
    description: str
    icon: str

    def to_dict(self) -> dict:
        return asdict(self)


SUGGESTIONS: dict[MoodLevel, tuple[Suggestion, ...]] = {
    MoodLevel.LOW: (
        Suggestion("Take a Short Walk", "A 10-minute walk can boost your mood and energy levels.", "🚶"),
        Suggestion("Practice Deep Breathing", "Try 4-7-8 breathing: inhale for 4, hold for 7, exhale for 8.", "🧘"),
        Suggestion("Connect with Someone", "Reach out to a friend or loved one for a quick chat.", "💬"),
        Suggestion("Listen to Uplifting Music", "Put on your favorite feel-good playlist.", "🎵"),
    ),
    MoodLevel.MEDIUM: (
        Suggestion("Practice Gratitude", "List three things you're grateful for today.", "🙏"),
        Suggestion("Take a Break", "Step away from your tasks for a refreshing 5-minute break.", "☕"),
        Suggestion("Stretch Your Body", "Do some simple stretches to release tension.", "🤸"),
        Suggestion("Drink Water", "Stay hydrated - it affects your mood more than you think.", "💧"),
    ),
    MoodLevel.HIGH: (
        Suggestion("Share Your Joy", "Tell someone about what made you happy today.", "🌟"),
        Suggestion("Do Something Creative", "Channel your positive energy into a creative activity.", "🎨"),
        Suggestion("Help Someone", "Your good mood can brighten someone else's day too.", "🤝"),
        Suggestion("Document This Moment", "Take a photo or write about what's making you feel great.", "📸"),
    ),
}


def mood_level(recent_scores: Sequence[int]) -> MoodLevel:
    """Bucket the average of recent scores: <=4 low, <=7 medium, else high.

    No scores at all counts as medium.
    """
    if not recent_scores:
        return MoodLevel.MEDIUM
    avg = sum(recent_scores) / len(recent_scores)
    if avg <= 4:
        return MoodLevel.LOW
    if avg <= 7:
        return MoodLevel.MEDIUM
    return MoodLevel.HIGH


def suggestions_for(recent_scores: Sequence[int]) -> tuple[MoodLevel, tuple[Suggestion, ...]]:
    level = mood_level(recent_scores)
    return level, SUGGESTIONS[level]
