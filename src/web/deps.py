"""Dependency injection for FastAPI routes."""

from datetime import date
from functools import lru_cache
from typing import Iterator, Optional
from zoneinfo import ZoneInfo

import structlog
from fastapi import Depends, HTTPException, Query, status

from cli.config import load_config_model
from cli.retry import retry_settings
from mood.dates import ValidationError, get_timezone, local_today
from store import StoreConfigError, SupabaseClient
from web.auth import get_current_user

logger = structlog.get_logger()


@lru_cache
def get_config():
    """Load shared config (config.yaml + SUPABASE_* env vars)."""
    return load_config_model()


def build_user_client(access_token: str) -> SupabaseClient:
    """PostgREST client acting as the signed-in user."""
    config = get_config()
    sb = config.supabase
    return SupabaseClient(
        sb.url,
        sb.anon_key,
        access_token=access_token,
        timeout=sb.timeout,
        **retry_settings(config.to_dict()),
    )


def get_user_client(user: dict = Depends(get_current_user)) -> Iterator[SupabaseClient]:
    try:
        client = build_user_client(user["token"])
    except StoreConfigError as e:
        logger.error("web.store_not_configured", error=str(e))
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    try:
        yield client
    finally:
        client.close()


def get_user_timezone(
    tz: Optional[str] = Query(None, description="IANA timezone of the user's calendar"),
) -> ZoneInfo:
    """The caller's timezone; falls back to the configured one."""
    try:
        return get_timezone(tz or get_config().user.timezone)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


def get_user_today(zone: ZoneInfo = Depends(get_user_timezone)) -> date:
    """The caller's calendar day."""
    return local_today(zone.key)
