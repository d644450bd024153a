# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unit tests for the CLI commands."""

from __future__ import annotations

import asyncio
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest
from typer.testing import CliRunner

from skillgate.audit.logger import AuditLogger
from skillgate.cache.file import FileApprovedListStore
from skillgate.cli import app as cli_app
from skillgate.cli.app import app
from skillgate.core.config import Settings
from skillgate.core.constants import AuditOutcome
from skillgate.models.metadata import RepoMetadata
from skillgate.models.skill import ApprovedList, SkillEntry
from skillgate.validator import SkillValidator

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, settings: Settings) -> None:
    monkeypatch.setenv("SKILLGATE_CACHE_PATH", str(settings.cache_path))
    monkeypatch.setenv("SKILLGATE_AUDIT_LOG_PATH", str(settings.audit_log_path))
    monkeypatch.setenv("SKILLGATE_LOG_LEVEL", "WARNING")


@pytest.fixture
def use_validator(monkeypatch: pytest.MonkeyPatch, validator: SkillValidator) -> SkillValidator:
    monkeypatch.setattr(cli_app, "build_validator", lambda settings: validator)
    return validator


def _audit_outcomes(path: Path) -> list[AuditOutcome]:
    return [r.outcome for r in AuditLogger(path).read_records()]


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


class TestValidateCommand:
    def test_rejected_exits_1(self, use_validator, settings) -> None:
        result = runner.invoke(app, ["validate", "nonexistent-xyz"])
        assert result.exit_code == 1
        assert "REJECTED" in result.output
        assert _audit_outcomes(settings.audit_log_path) == [AuditOutcome.REJECTED]

    def test_confirmed_exits_0(self, use_validator, fake_client, clock, settings) -> None:
        fake_client.metadata["weather-dev/openclaw-weather"] = RepoMetadata(
            stargazers_count=150,
            forks_count=25,
            updated_at=clock.now - timedelta(days=10),
            description="A well-maintained weather skill",
            license={"name": "MIT"},
        )
        result = runner.invoke(app, ["validate", "weather-forecast"], input="y\n")

        assert result.exit_code == 0
        assert "APPROVED" in result.output
        assert "10/10" in result.output
        assert "https://github.com/weather-dev/openclaw-weather" in result.output
        records = AuditLogger(settings.audit_log_path).read_records()
        assert records[-1].outcome == AuditOutcome.APPROVED
        assert records[-1].user_confirmed is True

    def test_declined_exits_1(self, use_validator, settings) -> None:
        result = runner.invoke(app, ["validate", "task-manager"], input="n\n")
        assert result.exit_code == 1
        assert "cancelled" in result.output
        assert _audit_outcomes(settings.audit_log_path) == [AuditOutcome.DECLINED]

    def test_default_answer_is_no(self, use_validator, settings) -> None:
        result = runner.invoke(app, ["validate", "task-manager"], input="\n")
        assert result.exit_code == 1
        assert _audit_outcomes(settings.audit_log_path) == [AuditOutcome.DECLINED]

    def test_yes_flag_skips_prompt(self, use_validator, settings) -> None:
        result = runner.invoke(app, ["validate", "crypto-prices", "--yes"])
        assert result.exit_code == 0
        assert "metadata unavailable" in result.output
        assert _audit_outcomes(settings.audit_log_path) == [AuditOutcome.APPROVED]

    def test_list_unavailable_exits_1(
        self, use_validator, fake_client, settings, fetch_failure
    ) -> None:
        fake_client.error = fetch_failure
        result = runner.invoke(app, ["validate", "weather-forecast"])
        assert result.exit_code == 1
        assert "Validation failed" in result.output
        assert _audit_outcomes(settings.audit_log_path) == [AuditOutcome.ERROR]

    def test_markup_in_name_is_literal(self, use_validator, settings) -> None:
        result = runner.invoke(app, ["validate", "foo[/x]"])
        assert result.exit_code == 1
        assert "REJECTED" in result.output
        assert "foo[/x]" in result.output
        assert _audit_outcomes(settings.audit_log_path) == [AuditOutcome.REJECTED]

    def test_missing_argument(self) -> None:
        result = runner.invoke(app, ["validate"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


class TestListCommand:
    def test_lists_entries(self, use_validator) -> None:
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "weather-forecast" in result.output
        assert "remote" in result.output

    def test_list_unavailable(self, use_validator, fake_client, fetch_failure) -> None:
        fake_client.error = fetch_failure
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 1
        assert "no approved list available" in result.output


# ---------------------------------------------------------------------------
# cache
# ---------------------------------------------------------------------------


class TestCacheCommands:
    @staticmethod
    def _seed(settings: Settings, fetched_at: datetime) -> None:
        entry = SkillEntry(
            name="weather-forecast",
            owner="weather-dev",
            repo="openclaw-weather",
            url="https://github.com/weather-dev/openclaw-weather",
        )
        asyncio.run(
            FileApprovedListStore(settings.cache_path).save(
                ApprovedList(fetched_at=fetched_at, entries=[entry])
            )
        )

    def test_show_without_cache(self) -> None:
        result = runner.invoke(app, ["cache", "show"])
        assert result.exit_code == 0
        assert "No cache" in result.output

    def test_show_fresh(self, settings) -> None:
        self._seed(settings, datetime.now(UTC))
        result = runner.invoke(app, ["cache", "show"])
        assert result.exit_code == 0
        assert "fresh" in result.output

    def test_show_stale(self, settings) -> None:
        self._seed(settings, datetime.now(UTC) - timedelta(days=2))
        result = runner.invoke(app, ["cache", "show"])
        assert "stale" in result.output

    def test_clear(self, settings) -> None:
        self._seed(settings, datetime.now(UTC))
        result = runner.invoke(app, ["cache", "clear"])
        assert result.exit_code == 0
        assert not settings.cache_path.exists()

        result = runner.invoke(app, ["cache", "clear"])
        assert "already empty" in result.output


# ---------------------------------------------------------------------------
# audit
# ---------------------------------------------------------------------------


class TestAuditCommand:
    def test_empty(self) -> None:
        result = runner.invoke(app, ["audit"])
        assert result.exit_code == 0
        assert "No audit records" in result.output

    def test_shows_records(self, settings) -> None:
        logger = AuditLogger(settings.audit_log_path)
        logger.log_outcome("weather", AuditOutcome.APPROVED, "ok", user_confirmed=True)
        logger.log_outcome("bogus", AuditOutcome.REJECTED, "Not found")

        result = runner.invoke(app, ["audit", "--limit", "1"])
        assert result.exit_code == 0
        assert "bogus" in result.output
        assert "weather" not in result.output

    def test_markup_in_records_is_literal(self, settings) -> None:
        AuditLogger(settings.audit_log_path).log_outcome(
            "x[/red]", AuditOutcome.ERROR, "bad [/bold] tag"
        )

        result = runner.invoke(app, ["audit"])
        assert result.exit_code == 0
        assert "x[/red]" in result.output
        assert "bad [/bold] tag" in result.output
