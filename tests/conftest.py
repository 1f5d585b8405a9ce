"""Shared test fixtures for the wellness tracker."""

import itertools
import sys
import uuid
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


def _as_text(value) -> str:
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


_COMPARE = {
    "eq": lambda a, b: a == b,
    "neq": lambda a, b: a != b,
    "gt": lambda a, b: a > b,
    "gte": lambda a, b: a >= b,
    "lt": lambda a, b: a < b,
    "lte": lambda a, b: a <= b,
}


class FakeSupabaseClient:
    """In-memory stand-in for store.SupabaseClient.

    Supports the subset the storages use: eq/gte/... filters, ordering,
    limit, column projection, insert and upsert-on-conflict.
    """

    def __init__(self):
        self.tables: dict[str, list[dict]] = {}
        self.calls: list[tuple] = []
        self._clock = itertools.count()

    def _now(self) -> str:
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        return (base + timedelta(seconds=next(self._clock))).isoformat()

    def seed(self, table: str, rows: list[dict]) -> None:
        for row in rows:
            self.insert(table, dict(row))
        self.calls.clear()

    def select(self, table, columns="*", filters=None, order=None, ascending=True, limit=None):
        self.calls.append(("select", table, filters, order, ascending, limit))
        rows = list(self.tables.get(table, []))
        for column, op, value in filters or []:
            rows = [r for r in rows if _COMPARE[op](_as_text(r.get(column)), _as_text(value))]
        if order:
            rows.sort(key=lambda r: _as_text(r.get(order)), reverse=not ascending)
        if limit is not None:
            rows = rows[:limit]
        if columns != "*":
            wanted = [c.strip() for c in columns.split(",")]
            rows = [{c: r.get(c) for c in wanted} for r in rows]
        return [dict(r) for r in rows]

    def maybe_single(self, table, columns="*", filters=None):
        rows = self.select(table, columns=columns, filters=filters, limit=1)
        return rows[0] if rows else None

    def insert(self, table, row):
        self.calls.append(("insert", table, row))
        stored = {"id": uuid.uuid4().hex, "created_at": self._now(), **row}
        self.tables.setdefault(table, []).append(stored)
        return dict(stored)

    def upsert(self, table, row, on_conflict):
        self.calls.append(("upsert", table, row, on_conflict))
        keys = [k.strip() for k in on_conflict.split(",")]
        for existing in self.tables.get(table, []):
            if all(_as_text(existing.get(k)) == _as_text(row.get(k)) for k in keys):
                existing.update(row)
                return dict(existing)
        stored = {"id": uuid.uuid4().hex, "created_at": self._now(), **row}
        self.tables.setdefault(table, []).append(stored)
        return dict(stored)

    def close(self):
        pass


@pytest.fixture
def fake_client():
    return FakeSupabaseClient()


@pytest.fixture
def today():
    """Fixed calendar day so streak/window math is deterministic."""
    return date(2024, 6, 15)


@pytest.fixture
def mood_rows(today):
    """A week of logs ending yesterday, scores rising."""
    return [
        {
            "user_id": "user-123",
            "mood_score": score,
            "emoji": "🙂",
            "entry_date": (today - timedelta(days=offset)).isoformat(),
        }
        for offset, score in zip(range(6, 0, -1), [3, 3, 4, 7, 8, 8])
    ]


@pytest.fixture
def populated_moods(fake_client, mood_rows):
    from mood.storage import MoodStorage

    fake_client.seed("mood_entries", mood_rows)
    return MoodStorage(fake_client)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate config lookup from the developer's machine."""
    for var in (
        "SUPABASE_URL",
        "SUPABASE_ANON_KEY",
        "SUPABASE_SERVICE_ROLE_KEY",
        "SUPABASE_JWT_SECRET",
        "WELLNESS_USER_ID",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path / "home"))
    return tmp_path
