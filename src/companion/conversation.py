"""Scripted companion chat backed by the ``chat_messages`` table."""

import random
from datetime import datetime, timezone
from typing import Optional

import structlog

from mood.dates import ValidationError

from .responses import WELCOME_MESSAGE, get_response_category, pick_response

logger = structlog.get_logger()

TABLE = "chat_messages"
HISTORY_LIMIT = 50
MAX_MESSAGE_LENGTH = 5000


class ConversationStore:
    """Per-user chat history."""

    def __init__(self, client):
        self.client = client

    def history(self, user_id: str, limit: int = HISTORY_LIMIT) -> list[dict]:
        """Stored messages, oldest first."""
        return self.client.select(
            TABLE,
            filters=[("user_id", "eq", user_id)],
            order="created_at",
            ascending=True,
            limit=limit,
        )

    def add(self, user_id: str, message: str, is_user: bool) -> dict:
        row = self.client.insert(
            TABLE,
            {"user_id": user_id, "message": message, "is_user": is_user},
        )
        return row or {"user_id": user_id, "message": message, "is_user": is_user}


def welcome_message(user_id: str) -> dict:
    """Greeting shown when a user has no history yet. Never persisted."""
    return {
        "id": "welcome",
        "user_id": user_id,
        "message": WELCOME_MESSAGE,
        "is_user": False,
        "created_at": datetime.now(timezone.utc).isoformat(),
    }


class Companion:
    """Replies to user messages with keyword-matched canned text."""

    def __init__(self, store: ConversationStore, rng: Optional[random.Random] = None):
        self.store = store
        self.rng = rng or random.Random()

    def history(self, user_id: str, limit: int = HISTORY_LIMIT) -> list[dict]:
        messages = self.store.history(user_id, limit=limit)
        return messages or [welcome_message(user_id)]

    def reply(self, user_id: str, message: str) -> tuple[dict, dict]:
        """Save the user's message and the companion's answer.

        Returns:
            (user_message_row, reply_row)

        Raises:
            ValidationError: If the message is blank or too long
        """
        text = (message or "").strip()
        if not text:
            raise ValidationError("Message is empty")
        if len(text) > MAX_MESSAGE_LENGTH:
            raise ValidationError(f"Message exceeds max length ({MAX_MESSAGE_LENGTH} chars)")

        saved_user = self.store.add(user_id, text, is_user=True)

        category = get_response_category(text)
        answer = pick_response(category, self.rng)
        saved_reply = self.store.add(user_id, answer, is_user=False)

        logger.info("companion.replied", user_id=user_id, category=str(category))
        return saved_user, saved_reply
