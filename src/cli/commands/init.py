"""Init CLI command."""

import sys
from pathlib import Path

import click
from rich.console import Console

from cli.config import find_config, write_default_config
from mood.dates import ValidationError, get_timezone

console = Console()


@click.command()
@click.option("--user-id", help="Supabase user id the CLI should act as")
@click.option("--timezone", "tz", help="IANA timezone for your calendar day, e.g. Europe/Berlin")
def init(user_id: str | None, tz: str | None):
    """Create a config file with Supabase placeholders."""
    existing = find_config()
    if existing:
        console.print(f"[yellow]Config already exists:[/] {existing}")
        return

    if tz:
        try:
            get_timezone(tz)
        except ValidationError as e:
            console.print(f"[red]Error:[/] {e}")
            sys.exit(1)

    config_path = Path.home() / ".wellness" / "config.yaml"
    write_default_config(config_path, user_id=user_id, timezone=tz)
    console.print(f"[green]✓[/] Created config: {config_path}")

    console.print("\n[bold]Minimal setup:[/]")
    console.print("  1. Set SUPABASE_URL and SUPABASE_ANON_KEY (or edit the config)")
    console.print("  2. Set user.user_id in the config (or WELLNESS_USER_ID)")
    console.print("  3. Run [cyan]wellness mood log 7[/] to log today's mood")
    console.print("  4. Run [cyan]wellness streak[/] to see your streak")
