"""CLI command modules."""

from .companion import chat, quote
from .init import init
from .journal import journal
from .mood import mood, stats, streak, tips

__all__ = [
    "init",
    "mood",
    "streak",
    "stats",
    "tips",
    "journal",
    "chat",
    "quote",
]
