"""Daily journal entries in the hosted ``journal_entries`` table."""

from datetime import datetime, timezone
from typing import Optional

import structlog

from mood.dates import ValidationError, normalize_date

logger = structlog.get_logger()

TABLE = "journal_entries"
CONFLICT_KEY = "user_id,entry_date"
MAX_CONTENT_LENGTH = 100_000  # 100KB


class JournalStorage:
    """One journal entry per user per calendar day; saving again overwrites."""

    def __init__(self, client):
        self.client = client

    def save(self, user_id: str, content: str, entry_date) -> dict:
        """Create or replace the entry for ``entry_date``.

        Returns:
            The stored row

        Raises:
            ValidationError: If content is blank or too long
        """
        text = (content or "").strip()
        if not text:
            raise ValidationError("Journal entry is empty")
        if len(text) > MAX_CONTENT_LENGTH:
            raise ValidationError(f"Content exceeds max length ({MAX_CONTENT_LENGTH} chars)")

        day = normalize_date(entry_date)
        row = self.client.upsert(
            TABLE,
            {
                "user_id": user_id,
                "content": text,
                "entry_date": day.isoformat(),
                "updated_at": datetime.now(timezone.utc).isoformat(),
            },
            on_conflict=CONFLICT_KEY,
        )
        logger.info("journal.saved", user_id=user_id, date=day.isoformat(), chars=len(text))
        return row or {"user_id": user_id, "content": text, "entry_date": day.isoformat()}

    def get(self, user_id: str, entry_date) -> Optional[dict]:
        day = normalize_date(entry_date)
        return self.client.maybe_single(
            TABLE,
            filters=[("user_id", "eq", user_id), ("entry_date", "eq", day.isoformat())],
        )
