"""Mood analytics routes: average and trend over a trailing window."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from mood.dates import ValidationError
from mood.storage import MoodStorage
from store import StoreError
from web.auth import get_current_user
from web.deps import get_config, get_user_client, get_user_today
from web.models import MoodStatsResponse
from web.routes.mood import store_failure, to_mood_entry

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/mood", response_model=MoodStatsResponse)
async def mood_stats(
    time_range: str | None = Query(None, alias="range"),
    user: dict = Depends(get_current_user),
    client=Depends(get_user_client),
    today: date = Depends(get_user_today),
):
    """Average, trend and the most recent entries for the week or month."""
    analytics = get_config().analytics
    time_range = time_range or analytics.default_range
    try:
        stats, entries = MoodStorage(client).stats(user["id"], today, time_range)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError as e:
        raise store_failure(e)

    recent = entries[::-1][: analytics.recent_entries]
    return MoodStatsResponse(
        range=time_range,
        average=stats.average,
        trend=str(stats.trend),
        count=stats.count,
        recent=[to_mood_entry(e) for e in recent],
    )
