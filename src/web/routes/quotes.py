"""Motivational quote routes."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from companion.quotes import QuoteStorage, daily_quote, random_quote
from store import StoreError
from web.auth import get_current_user
from web.deps import get_user_client, get_user_today
from web.models import Quote
from web.routes.mood import store_failure

router = APIRouter(prefix="/api/quotes", tags=["quotes"])


def _load(client) -> list[dict]:
    try:
        return QuoteStorage(client).all()
    except StoreError as e:
        raise store_failure(e)


def _to_quote(row: dict | None) -> Quote:
    if not row:
        raise HTTPException(status_code=404, detail="No quotes available")
    quote_id = row.get("id")
    return Quote(
        id=str(quote_id) if quote_id is not None else None,
        quote=row["quote"],
        author=row.get("author"),
    )


@router.get("/daily", response_model=Quote)
async def get_daily(
    user: dict = Depends(get_current_user),
    client=Depends(get_user_client),
    today: date = Depends(get_user_today),
):
    return _to_quote(daily_quote(_load(client), today))


@router.get("/random", response_model=Quote)
async def get_random(
    user: dict = Depends(get_current_user),
    client=Depends(get_user_client),
):
    return _to_quote(random_quote(_load(client)))
