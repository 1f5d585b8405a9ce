"""Mood logging, streak and suggestion routes."""

from datetime import date
from zoneinfo import ZoneInfo

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from mood.dates import ValidationError
from mood.models import MOOD_OPTIONS, MoodLogEntry
from mood.storage import MoodStorage
from mood.streak import streak_milestone, streak_status, streak_unit
from mood.suggestions import suggestions_for
from store import StoreError
from web.auth import get_current_user
from web.deps import get_user_client, get_user_timezone, get_user_today
from web.models import (
    MoodEntry,
    MoodLog,
    MoodLogResponse,
    MoodOptionOut,
    StreakResponse,
    SuggestionOut,
    SuggestionsResponse,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/api/mood", tags=["mood"])


def to_mood_entry(entry: MoodLogEntry) -> MoodEntry:
    return MoodEntry(**entry.to_dict())


def store_failure(e: StoreError) -> HTTPException:
    logger.error("web.store_error", error=str(e), status=e.status_code)
    return HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail="Storage unavailable")


@router.get("/options", response_model=list[MoodOptionOut])
async def list_options():
    return [MoodOptionOut(score=o.score, emoji=o.emoji, label=o.label) for o in MOOD_OPTIONS]


@router.get("/today", response_model=MoodEntry | None)
async def get_today(
    user: dict = Depends(get_current_user),
    client=Depends(get_user_client),
    today: date = Depends(get_user_today),
):
    try:
        entry = MoodStorage(client).get(user["id"], today)
    except StoreError as e:
        raise store_failure(e)
    return to_mood_entry(entry) if entry else None


@router.post("", response_model=MoodLogResponse)
async def log_mood(
    body: MoodLog,
    user: dict = Depends(get_current_user),
    client=Depends(get_user_client),
    today: date = Depends(get_user_today),
):
    try:
        entry, updated = MoodStorage(client).log(user["id"], body.score, today, emoji=body.emoji)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError as e:
        raise store_failure(e)
    return MoodLogResponse(
        entry=to_mood_entry(entry),
        updated=updated,
        message="Mood updated!" if updated else "Mood logged!",
    )


@router.get("/streak", response_model=StreakResponse)
async def get_streak(
    user: dict = Depends(get_current_user),
    client=Depends(get_user_client),
    today: date = Depends(get_user_today),
    zone: ZoneInfo = Depends(get_user_timezone),
):
    try:
        n, last = MoodStorage(client).streak_summary(user["id"], today, tz=zone)
    except StoreError as e:
        raise store_failure(e)
    return StreakResponse(
        streak=n,
        unit=streak_unit(n),
        status=streak_status(n),
        milestone=streak_milestone(n),
        last_logged=last.isoformat() if last else None,
    )


@router.get("/suggestions", response_model=SuggestionsResponse)
async def get_suggestions(
    user: dict = Depends(get_current_user),
    client=Depends(get_user_client),
):
    try:
        recent = MoodStorage(client).recent(user["id"])
    except StoreError as e:
        raise store_failure(e)
    level, items = suggestions_for([e.score for e in recent])
    return SuggestionsResponse(
        level=str(level),
        suggestions=[SuggestionOut(**s.to_dict()) for s in items],
    )
