from .conversation import Companion, ConversationStore
from .quotes import QuoteStorage, daily_quote, random_quote
from .responses import get_response_category, pick_response

__all__ = [
    "Companion",
    "ConversationStore",
    "QuoteStorage",
    "daily_quote",
    "random_quote",
    "get_response_category",
    "pick_response",
]
