"""Motivational quotes: one per calendar day, or a random pick."""

import random
from datetime import date
from typing import Optional

from mood.dates import normalize_date

TABLE = "motivational_quotes"


class QuoteStorage:
    def __init__(self, client):
        self.client = client

    def all(self) -> list[dict]:
        return self.client.select(TABLE)


def daily_quote(quotes: list[dict], today: date) -> Optional[dict]:
    """Quote of the day, indexed by day of month so it changes daily."""
    if not quotes:
        return None
    return quotes[normalize_date(today).day % len(quotes)]


def random_quote(quotes: list[dict], rng: Optional[random.Random] = None) -> Optional[dict]:
    if not quotes:
        return None
    return (rng or random).choice(quotes)


def format_quote(quote: dict) -> str:
    text = f"\"{quote.get('quote', '')}\""
    if quote.get("author"):
        text += f"\n  - {quote['author']}"
    return text
