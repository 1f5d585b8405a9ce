"""Companion chat and motivational quote CLI commands."""

import sys

import click
from rich.console import Console

from cli.utils import get_components, today_for
from companion.quotes import daily_quote, format_quote, random_quote
from mood.dates import ValidationError
from store import StoreError

console = Console()


def _print_message(msg: dict) -> None:
    if msg.get("is_user"):
        console.print(f"[bold blue]You:[/] {msg['message']}")
    else:
        console.print(f"[bold cyan]Companion:[/] {msg['message']}")


@click.group()
def chat():
    """Talk with the wellness companion."""
    pass


@chat.command("send")
@click.argument("message")
def chat_send(message: str):
    """Send a message and print the reply."""
    c = get_components()
    try:
        _, reply = c["companion"].reply(c["user_id"], message)
    except (ValidationError, StoreError) as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)
    _print_message(reply)


@chat.command("history")
@click.option("-n", "--limit", default=50, help="Max messages to show")
def chat_history(limit: int):
    """Show recent conversation."""
    c = get_components()
    try:
        messages = c["companion"].history(c["user_id"], limit=limit)
    except StoreError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)
    for msg in messages:
        _print_message(msg)


@click.command()
@click.option("--random", "pick_random", is_flag=True, help="Show a random quote instead")
def quote(pick_random: bool):
    """Show today's motivational quote."""
    c = get_components()
    try:
        quotes = c["quotes"].all()
    except StoreError as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    chosen = random_quote(quotes) if pick_random else daily_quote(quotes, today_for(c))
    if not chosen:
        console.print("[yellow]No quotes available.[/]")
        return
    console.print(f"[italic magenta]{format_quote(chosen)}[/]")
