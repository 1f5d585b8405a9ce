"""Daily journal routes, one entry per user per day."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from journal.storage import JournalStorage
from mood.dates import ValidationError
from store import StoreError
from web.auth import get_current_user
from web.deps import get_user_client, get_user_today
from web.models import JournalEntry, JournalSave
from web.routes.mood import store_failure

router = APIRouter(prefix="/api/journal", tags=["journal"])


def _to_entry(row: dict) -> JournalEntry:
    return JournalEntry(
        entry_date=str(row.get("entry_date")),
        content=row.get("content", ""),
        updated_at=row.get("updated_at"),
    )


@router.get("/today", response_model=JournalEntry | None)
async def get_today(
    user: dict = Depends(get_current_user),
    client=Depends(get_user_client),
    today: date = Depends(get_user_today),
):
    try:
        row = JournalStorage(client).get(user["id"], today)
    except StoreError as e:
        raise store_failure(e)
    return _to_entry(row) if row else None


@router.put("/today", response_model=JournalEntry)
async def save_today(
    body: JournalSave,
    user: dict = Depends(get_current_user),
    client=Depends(get_user_client),
    today: date = Depends(get_user_today),
):
    try:
        row = JournalStorage(client).save(user["id"], body.content, today)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StoreError as e:
        raise store_failure(e)
    return _to_entry(row)
