"""Journal CLI commands."""

import sys

import click
import structlog
from rich.console import Console
from rich.panel import Panel

from cli.utils import get_components, today_for
from mood.dates import ValidationError
from store import StoreError

console = Console()
logger = structlog.get_logger()

EDITOR_PROMPT = "# How was your day? What are you grateful for? What's on your mind?\n\n"


def _strip_prompt(text: str) -> str:
    return "\n".join(line for line in text.splitlines() if not line.startswith("# ")).strip()


@click.group()
def journal():
    """Write and read today's journal entry."""
    pass


@journal.command("write")
@click.argument("content", required=False)
def journal_write(content: str | None):
    """Save today's entry. Opens editor if no content provided."""
    c = get_components()
    day = today_for(c)

    if not content:
        try:
            existing = c["journal"].get(c["user_id"], day)
        except StoreError as e:
            console.print(f"[red]Error:[/] {e}")
            sys.exit(1)
        initial = EDITOR_PROMPT + (existing["content"] if existing else "")
        edited = click.edit(initial)
        content = _strip_prompt(edited) if edited else ""
        if not content:
            logger.debug("journal.editor_cancelled")
            console.print("[yellow]No content provided, cancelled.[/]")
            return

    try:
        c["journal"].save(c["user_id"], content, day)
    except (ValidationError, StoreError) as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    console.print(f"[green]Journal entry saved![/] [dim]{len(content.strip())} characters[/]")


@journal.command("show")
def journal_show():
    """Show today's entry."""
    c = get_components()
    day = today_for(c)
    try:
        entry = c["journal"].get(c["user_id"], day)
    except StoreError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    if not entry:
        console.print("[yellow]Nothing written today.[/] Try [bold]wellness journal write[/]")
        return
    console.print(Panel(entry["content"], title=day.strftime("%B %d, %Y")))
