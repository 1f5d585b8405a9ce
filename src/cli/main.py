"""CLI entry point for the wellness tracker."""

import sys
from pathlib import Path

import click

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from cli.commands import chat, init, journal, mood, quote, stats, streak, tips  # noqa: E402
from cli.config import load_config_model  # noqa: E402
from cli.logging_config import setup_logging  # noqa: E402


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
def cli(verbose: bool, json_logs: bool):
    """Wellness tracker - daily mood, journal, and a friendly companion."""
    try:
        log_cfg = load_config_model().logging
        level, json_mode = log_cfg.level, log_cfg.json_mode
    except ValueError:
        level, json_mode = "INFO", False
    if verbose:
        level = "DEBUG"
    setup_logging(json_mode=json_mode or json_logs, level=level)


for command in (init, mood, streak, stats, tips, journal, chat, quote):
    cli.add_command(command)


if __name__ == "__main__":
    cli()
