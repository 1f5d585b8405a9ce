"""Pydantic request/response schemas for the web API."""

from typing import Optional

from pydantic import BaseModel, Field

# --- Mood ---


class MoodLog(BaseModel):
    score: int = Field(..., ge=1, le=10)
    emoji: Optional[str] = Field(None, max_length=16)


class MoodEntry(BaseModel):
    id: Optional[str] = None
    date: str
    score: int
    emoji: str = ""


class MoodLogResponse(BaseModel):
    entry: MoodEntry
    updated: bool
    message: str


class MoodOptionOut(BaseModel):
    score: int
    emoji: str
    label: str


class StreakResponse(BaseModel):
    streak: int
    unit: str
    status: str
    milestone: Optional[str] = None
    last_logged: Optional[str] = None


class MoodStatsResponse(BaseModel):
    range: str
    average: float
    trend: str
    count: int
    recent: list[MoodEntry] = []


class SuggestionOut(BaseModel):
    title: str
    description: str
    icon: str


class SuggestionsResponse(BaseModel):
    level: str
    suggestions: list[SuggestionOut]


# --- Journal ---


class JournalSave(BaseModel):
    content: str = Field(..., max_length=100_000)


class JournalEntry(BaseModel):
    entry_date: str
    content: str
    updated_at: Optional[str] = None


# --- Quotes ---


class Quote(BaseModel):
    id: Optional[str] = None
    quote: str
    author: Optional[str] = None


# --- Companion ---


class ChatSend(BaseModel):
    message: str = Field(..., min_length=1, max_length=5000)


class ChatMessage(BaseModel):
    id: Optional[str] = None
    message: str
    is_user: bool
    created_at: Optional[str] = None


class ChatReply(BaseModel):
    user_message: ChatMessage
    reply: ChatMessage
