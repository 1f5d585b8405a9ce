"""Shared CLI utilities."""

import sys

import structlog
from rich.console import Console

console = Console()
logger = structlog.get_logger()


def get_components():
    """Initialize store-backed components from config.

    Exits with a readable message when the hosted store or the user is not
    configured, since no command can do anything useful without them.
    """
    from cli.config import load_config_model
    from cli.retry import retry_settings
    from companion import Companion, ConversationStore, QuoteStorage
    from journal import JournalStorage
    from mood import MoodStorage
    from store import StoreConfigError, SupabaseClient

    config_model = load_config_model()
    sb = config_model.supabase

    try:
        client = SupabaseClient(
            sb.url,
            sb.api_key,
            timeout=sb.timeout,
            **retry_settings(config_model.to_dict()),
        )
    except StoreConfigError as e:
        console.print(
            f"[red]Config error:[/] {e}\n"
            "Set SUPABASE_URL and SUPABASE_ANON_KEY or run [bold]wellness init[/]."
        )
        sys.exit(1)

    user_id = config_model.user.user_id
    if not user_id:
        console.print("[red]Config error:[/] user.user_id is not set (or WELLNESS_USER_ID).")
        sys.exit(1)

    conversation = ConversationStore(client)
    return {
        "config_model": config_model,
        "client": client,
        "user_id": user_id,
        "timezone": config_model.user.timezone,
        "moods": MoodStorage(client),
        "journal": JournalStorage(client),
        "quotes": QuoteStorage(client),
        "conversation": conversation,
        "companion": Companion(conversation),
    }


def today_for(c: dict):
    """The configured user's calendar day."""
    from mood.dates import local_today

    return local_today(c["timezone"])
