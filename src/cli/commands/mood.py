"""Mood logging, streak and analytics CLI commands."""

import sys

import click
import structlog
from rich.console import Console
from rich.table import Table

from cli.utils import get_components, today_for
from mood.dates import ValidationError, get_timezone, normalize_date
from mood.models import MOOD_OPTIONS
from mood.streak import streak_milestone, streak_status, streak_unit
from mood.suggestions import suggestions_for
from shared_types import TimeRange, Trend
from store import StoreError

console = Console()
logger = structlog.get_logger()

TREND_ARROW = {
    Trend.UP: "[green]↑[/]",
    Trend.DOWN: "[red]↓[/]",
    Trend.STABLE: "[dim]→[/]",
}


def _score_bar(score: int) -> str:
    return "[cyan]" + "█" * score + "[/]" + "[dim]" + "░" * (10 - score) + "[/]"


def _fail(e: Exception) -> None:
    logger.debug("cli.command_failed", error=str(e))
    console.print(f"[red]Error:[/] {e}")
    sys.exit(1)


@click.group()
def mood():
    """Log and review daily mood."""
    pass


@mood.command("log")
@click.argument("score", type=click.IntRange(1, 10))
@click.option("--date", "entry_date", help="Day to log (YYYY-MM-DD), defaults to today")
def mood_log(score: int, entry_date: str | None):
    """Log a mood score from 1 (terrible) to 10 (amazing)."""
    c = get_components()
    try:
        day = normalize_date(entry_date) if entry_date else today_for(c)
        entry, updated = c["moods"].log(c["user_id"], score, day)
    except (ValidationError, StoreError) as e:
        _fail(e)

    verb = "updated" if updated else "logged"
    console.print(f"[green]Mood {verb}![/] {entry.emoji} {entry.score}/10 for {entry.date.isoformat()}")


@mood.command("today")
def mood_today():
    """Show today's logged mood."""
    c = get_components()
    try:
        entry = c["moods"].get(c["user_id"], today_for(c))
    except StoreError as e:
        _fail(e)

    if not entry:
        console.print("[yellow]No mood logged today.[/] Try [bold]wellness mood log 7[/]")
        return
    console.print(f"Today's mood: {entry.emoji} [bold]{entry.score}/10[/]")


@mood.command("options")
def mood_options():
    """List the mood scale."""
    table = Table(show_header=True, title="Mood scale")
    table.add_column("Score", justify="right")
    table.add_column("")
    table.add_column("Label")
    for opt in MOOD_OPTIONS:
        table.add_row(str(opt.score), opt.emoji, opt.label)
    console.print(table)


@click.command()
def streak():
    """Show your current mood logging streak."""
    c = get_components()
    try:
        zone = get_timezone(c["timezone"])
        n, last = c["moods"].streak_summary(c["user_id"], today_for(c), tz=zone)
    except (ValidationError, StoreError) as e:
        _fail(e)

    console.print(f"[bold orange3]🔥 {n} {streak_unit(n)}[/]")
    console.print(streak_status(n))
    milestone = streak_milestone(n)
    if milestone:
        console.print(milestone)
    if last:
        console.print(f"[dim]Last logged: {last.strftime('%A, %b %d')}[/]")


@click.command()
@click.option(
    "-r",
    "--range",
    "time_range",
    default=None,
    type=click.Choice([str(t) for t in TimeRange]),
    help="Trailing window (defaults to config)",
)
def stats(time_range: str | None):
    """Average mood and trend over the last week or month."""
    c = get_components()
    analytics = c["config_model"].analytics
    time_range = time_range or analytics.default_range
    try:
        result, entries = c["moods"].stats(c["user_id"], today_for(c), time_range)
    except StoreError as e:
        _fail(e)

    if not entries:
        console.print("[yellow]No mood entries yet for this period.[/]")
        return

    console.print(
        f"[bold]Average:[/] {result.average:.1f}  |  "
        f"[bold]Trend:[/] {TREND_ARROW[result.trend]}  |  "
        f"[bold]Entries:[/] {result.count}"
    )

    table = Table(show_header=True, title=f"Mood - last {time_range}")
    table.add_column("Date", style="dim")
    table.add_column("Mood")
    table.add_column("Score", justify="right")
    for entry in entries[::-1][: analytics.recent_entries]:
        table.add_row(
            entry.date.strftime("%A, %b %d"),
            f"{entry.emoji} {_score_bar(entry.score)}",
            f"{entry.score}/10",
        )
    console.print(table)


@click.command()
def tips():
    """Wellness suggestions based on your recent moods."""
    c = get_components()
    try:
        recent = c["moods"].recent(c["user_id"])
    except StoreError as e:
        _fail(e)

    level, items = suggestions_for([e.score for e in recent])
    console.print(f"[bold]Wellness tips[/] [dim]({level} mood)[/]\n")
    for s in items:
        console.print(f"{s.icon} [bold]{s.title}[/]")
        console.print(f"   {s.description}")
