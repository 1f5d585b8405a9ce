"""Thin PostgREST client for the hosted Supabase project.

All persistence goes through here: ``select`` with simple column filters,
``insert`` and ``upsert`` with an ``on_conflict`` key. Rows come back as
plain dicts; the domain storages turn them into typed objects.

Requests carry the project API key in ``apikey`` and, when acting for a
signed-in user, that user's access token as the bearer so row level
security applies. Without a user token the API key doubles as the bearer
(service role usage from the CLI).
"""

from typing import Any, Optional

import httpx
import structlog

from cli.retry import http_retry

logger = structlog.get_logger()

REST_PATH = "/rest/v1"
FILTER_OPS = {"eq", "neq", "gt", "gte", "lt", "lte", "like", "ilike", "is"}

Filter = tuple[str, str, Any]


class StoreError(RuntimeError):
    """Hosted store request failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class StoreConfigError(StoreError):
    """Store URL or API key missing."""


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def build_params(
    columns: str = "*",
    filters: Optional[list[Filter]] = None,
    order: Optional[str] = None,
    ascending: bool = True,
    limit: Optional[int] = None,
) -> list[tuple[str, str]]:
    """Translate select arguments into PostgREST query params."""
    params = [("select", columns)]
    for column, op, value in filters or []:
        if op not in FILTER_OPS:
            raise ValueError(f"Unsupported filter op '{op}'")
        params.append((column, f"{op}.{_format_value(value)}"))
    if order:
        params.append(("order", f"{order}.{'asc' if ascending else 'desc'}"))
    if limit is not None:
        params.append(("limit", str(limit)))
    return params


class SupabaseClient:
    """Synchronous PostgREST access with retry on transport errors."""

    def __init__(
        self,
        url: str,
        api_key: str,
        access_token: Optional[str] = None,
        timeout: float = 8.0,
        max_attempts: int = 3,
        min_wait: float = 0.5,
        max_wait: float = 4.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        if not url or not api_key:
            raise StoreConfigError("Supabase configuration missing: url or api key")

        self.base_url = url.rstrip("/") + REST_PATH
        headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {access_token or api_key}",
            "Content-Type": "application/json",
        }
        self._client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=httpx.Timeout(timeout if timeout > 0 else 8.0),
            transport=transport,
        )
        self._send = http_retry(
            max_attempts=max_attempts,
            min_wait=min_wait,
            max_wait=max_wait,
            exceptions=(httpx.TransportError,),
        )(self._client.request)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(
        self,
        method: str,
        table: str,
        params: Optional[list[tuple[str, str]]] = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> Any:
        headers = {"Prefer": prefer} if prefer else None
        try:
            response = self._send(method, f"/{table}", params=params, json=json, headers=headers)
        except httpx.TransportError as e:
            logger.error("store.transport_failed", table=table, method=method, error=str(e))
            raise StoreError(f"{method} {table} failed: {e}") from e

        if response.status_code >= 400:
            detail = response.text[:300]
            logger.error(
                "store.request_failed",
                table=table,
                method=method,
                status=response.status_code,
                detail=detail,
            )
            raise StoreError(
                f"{method} {table} returned {response.status_code}: {detail}",
                status_code=response.status_code,
            )

        logger.debug("store.request_ok", table=table, method=method, status=response.status_code)
        if not response.content:
            return None
        return response.json()

    def select(
        self,
        table: str,
        columns: str = "*",
        filters: Optional[list[Filter]] = None,
        order: Optional[str] = None,
        ascending: bool = True,
        limit: Optional[int] = None,
    ) -> list[dict]:
        """Fetch rows matching all filters (``(column, op, value)`` triples)."""
        params = build_params(columns, filters, order, ascending, limit)
        return self._request("GET", table, params=params) or []

    def maybe_single(
        self,
        table: str,
        columns: str = "*",
        filters: Optional[list[Filter]] = None,
    ) -> Optional[dict]:
        """First matching row or None."""
        rows = self.select(table, columns=columns, filters=filters, limit=1)
        return rows[0] if rows else None

    def insert(self, table: str, row: dict) -> dict:
        """Insert one row and return it as stored."""
        data = self._request("POST", table, json=row, prefer="return=representation")
        return data[0] if data else {}

    def upsert(self, table: str, row: dict, on_conflict: str) -> dict:
        """Insert or replace the row keyed by ``on_conflict`` columns."""
        data = self._request(
            "POST",
            table,
            params=[("on_conflict", on_conflict)],
            json=row,
            prefer="resolution=merge-duplicates,return=representation",
        )
        return data[0] if data else {}
