"""Shared enums and types for the wellness tracker."""

from enum import StrEnum


class Trend(StrEnum):
    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class TimeRange(StrEnum):
    WEEK = "week"
    MONTH = "month"


class MoodLevel(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ResponseCategory(StrEnum):
    GREETING = "greeting"
    SAD = "sad"
    ANXIOUS = "anxious"
    HAPPY = "happy"
    STRESSED = "stressed"
    GRATEFUL = "grateful"
    DEFAULT = "default"
