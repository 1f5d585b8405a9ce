"""CLI command tests using Click CliRunner.

Strategy: patch get_components and today_for at each command module's
import point so commands run against the in-memory store.
"""

import random
from contextlib import ExitStack
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from cli.main import cli
from companion import Companion, ConversationStore, QuoteStorage
from journal import JournalStorage
from mood import MoodStorage
from store import StoreError

COMMAND_MODULES = ("cli.commands.mood", "cli.commands.journal", "cli.commands.companion")


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def components(fake_client, mood_rows):
    """Fake components dict matching cli.utils.get_components return."""
    fake_client.seed("mood_entries", mood_rows)
    config_model = MagicMock()
    config_model.analytics.default_range = "week"
    config_model.analytics.recent_entries = 10
    conversation = ConversationStore(fake_client)
    return {
        "config_model": config_model,
        "client": fake_client,
        "user_id": "user-123",
        "timezone": "UTC",
        "moods": MoodStorage(fake_client),
        "journal": JournalStorage(fake_client),
        "quotes": QuoteStorage(fake_client),
        "conversation": conversation,
        "companion": Companion(conversation, rng=random.Random(0)),
    }


@pytest.fixture
def patched(clean_env, components, today):
    with ExitStack() as stack:
        for module in COMMAND_MODULES:
            stack.enter_context(patch(f"{module}.get_components", return_value=components))
            stack.enter_context(patch(f"{module}.today_for", return_value=today))
        yield components


class TestMoodCommands:
    def test_log_today(self, runner, patched, fake_client):
        result = runner.invoke(cli, ["mood", "log", "7"])

        assert result.exit_code == 0, result.output
        assert "Mood logged!" in result.output
        assert "7/10 for 2024-06-15" in result.output
        assert fake_client.tables["mood_entries"][-1]["emoji"] == "😊"

    def test_log_again_updates(self, runner, patched):
        runner.invoke(cli, ["mood", "log", "4"])
        result = runner.invoke(cli, ["mood", "log", "9"])

        assert result.exit_code == 0
        assert "Mood updated!" in result.output

    def test_log_explicit_date(self, runner, patched):
        result = runner.invoke(cli, ["mood", "log", "5", "--date", "2024-06-01"])
        assert result.exit_code == 0
        assert "2024-06-01" in result.output

    def test_log_bad_date(self, runner, patched):
        result = runner.invoke(cli, ["mood", "log", "5", "--date", "June 1st"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_log_out_of_range(self, runner, patched):
        result = runner.invoke(cli, ["mood", "log", "11"])
        assert result.exit_code == 2

    def test_today_empty(self, runner, patched):
        result = runner.invoke(cli, ["mood", "today"])
        assert result.exit_code == 0
        assert "No mood logged today" in result.output

    def test_today_logged(self, runner, patched):
        runner.invoke(cli, ["mood", "log", "8"])
        result = runner.invoke(cli, ["mood", "today"])
        assert "8/10" in result.output

    def test_options(self, runner, clean_env):
        result = runner.invoke(cli, ["mood", "options"])
        assert result.exit_code == 0
        assert "Terrible" in result.output
        assert "Amazing" in result.output

    def test_store_failure(self, runner, patched):
        patched["moods"] = MagicMock()
        patched["moods"].get.side_effect = StoreError("GET mood_entries returned 503")
        result = runner.invoke(cli, ["mood", "today"])
        assert result.exit_code == 1
        assert "503" in result.output


class TestStreakStatsTips:
    def test_streak(self, runner, patched):
        result = runner.invoke(cli, ["streak"])
        assert result.exit_code == 0, result.output
        assert "6 days" in result.output
        assert "Building the habit" in result.output
        assert "Last logged: Friday, Jun 14" in result.output

    def test_streak_zero(self, runner, patched, fake_client):
        fake_client.tables["mood_entries"] = []
        result = runner.invoke(cli, ["streak"])
        assert "0 days" in result.output
        assert "start a streak" in result.output

    def test_stats_week(self, runner, patched):
        result = runner.invoke(cli, ["stats"])
        assert result.exit_code == 0, result.output
        assert "Average: 5.5" in result.output
        assert "↑" in result.output
        assert "Entries: 6" in result.output

    def test_stats_empty(self, runner, patched, fake_client):
        fake_client.tables["mood_entries"] = []
        result = runner.invoke(cli, ["stats", "--range", "month"])
        assert "No mood entries yet" in result.output

    def test_stats_table_capped(self, runner, patched):
        patched["config_model"].analytics.recent_entries = 2
        result = runner.invoke(cli, ["stats"])
        assert "Entries: 6" in result.output
        assert "Friday, Jun 14" in result.output
        assert "Thursday, Jun 13" in result.output
        assert "Wednesday, Jun 12" not in result.output

    def test_stats_bad_range(self, runner, patched):
        result = runner.invoke(cli, ["stats", "-r", "year"])
        assert result.exit_code == 2

    def test_tips(self, runner, patched):
        result = runner.invoke(cli, ["tips"])
        assert result.exit_code == 0
        assert "high mood" in result.output
        assert "Share Your Joy" in result.output


class TestJournalCommands:
    def test_write_inline(self, runner, patched, fake_client):
        result = runner.invoke(cli, ["journal", "write", "Felt calm after yoga."])
        assert result.exit_code == 0, result.output
        assert "Journal entry saved!" in result.output
        assert fake_client.tables["journal_entries"][0]["content"] == "Felt calm after yoga."

    def test_write_via_editor(self, runner, patched, fake_client):
        with patch("cli.commands.journal.click.edit", return_value="# How was your day?\n\nGood run.\n"):
            result = runner.invoke(cli, ["journal", "write"])
        assert result.exit_code == 0
        assert fake_client.tables["journal_entries"][0]["content"] == "Good run."

    def test_editor_cancelled(self, runner, patched, fake_client):
        with patch("cli.commands.journal.click.edit", return_value=None):
            result = runner.invoke(cli, ["journal", "write"])
        assert "cancelled" in result.output
        assert "journal_entries" not in fake_client.tables

    def test_show(self, runner, patched):
        runner.invoke(cli, ["journal", "write", "Quiet day."])
        result = runner.invoke(cli, ["journal", "show"])
        assert "Quiet day." in result.output
        assert "June 15, 2024" in result.output

    def test_show_empty(self, runner, patched):
        result = runner.invoke(cli, ["journal", "show"])
        assert "Nothing written today" in result.output


class TestCompanionCommands:
    def test_send(self, runner, patched, fake_client):
        result = runner.invoke(cli, ["chat", "send", "I feel stressed"])
        assert result.exit_code == 0, result.output
        assert "Companion:" in result.output
        assert len(fake_client.tables["chat_messages"]) == 2

    def test_send_blank(self, runner, patched):
        result = runner.invoke(cli, ["chat", "send", "   "])
        assert result.exit_code == 1

    def test_history_welcome(self, runner, patched):
        result = runner.invoke(cli, ["chat", "history"])
        assert "Mental Wellness Companion" in result.output

    def test_history_after_send(self, runner, patched):
        runner.invoke(cli, ["chat", "send", "hello"])
        result = runner.invoke(cli, ["chat", "history"])
        assert "You: hello" in result.output

    def test_quote_daily(self, runner, patched, fake_client):
        fake_client.seed(
            "motivational_quotes",
            [{"quote": "Breathe.", "author": None}, {"quote": "Keep going.", "author": "Anon"}],
        )
        result = runner.invoke(cli, ["quote"])
        # day 15 of the month picks index 1
        assert "Keep going." in result.output

    def test_quote_none(self, runner, patched):
        result = runner.invoke(cli, ["quote", "--random"])
        assert "No quotes available" in result.output


class TestInit:
    def test_creates_config(self, runner, clean_env):
        result = runner.invoke(cli, ["init", "--user-id", "user-123", "--timezone", "Asia/Tokyo"])
        assert result.exit_code == 0, result.output
        assert (clean_env / "home" / ".wellness" / "config.yaml").exists()

    def test_existing_config(self, runner, clean_env):
        (clean_env / "config.yaml").write_text("user: {}\n")
        result = runner.invoke(cli, ["init"])
        assert "already exists" in result.output

    def test_bad_timezone(self, runner, clean_env):
        result = runner.invoke(cli, ["init", "--timezone", "Nowhere/Special"])
        assert result.exit_code == 1
        assert not (clean_env / "home" / ".wellness" / "config.yaml").exists()


class TestGetComponents:
    def test_missing_store_config_exits(self, clean_env):
        from cli.utils import get_components

        with pytest.raises(SystemExit) as exc:
            get_components()
        assert exc.value.code == 1

    def test_missing_user_exits(self, clean_env, monkeypatch):
        from cli.utils import get_components

        monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        with pytest.raises(SystemExit):
            get_components()

    def test_builds_components(self, clean_env, monkeypatch):
        from cli.utils import get_components

        monkeypatch.setenv("SUPABASE_URL", "https://abc.supabase.co")
        monkeypatch.setenv("SUPABASE_ANON_KEY", "anon")
        monkeypatch.setenv("WELLNESS_USER_ID", "user-123")
        c = get_components()
        try:
            assert c["user_id"] == "user-123"
            assert c["client"].base_url == "https://abc.supabase.co/rest/v1"
        finally:
            c["client"].close()
