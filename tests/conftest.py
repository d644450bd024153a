# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from __future__ import annotations

import base64
import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from skillgate.audit.logger import AuditLogger
from skillgate.cache.memory import MemoryApprovedListStore
from skillgate.core.config import Settings
from skillgate.core.exceptions import FetchError
from skillgate.github.client import GitHubClient
from skillgate.models.metadata import RepoMetadata
from skillgate.validator import SkillValidator

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SAMPLE_README = (FIXTURES_DIR / "awesome_readme.md").read_text(encoding="utf-8")

EPOCH = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)


def encode_envelope(text: str) -> bytes:
    """Build a contents-API JSON envelope around *text*."""
    return json.dumps(
        {
            "path": "README.md",
            "encoding": "base64",
            "content": base64.encodebytes(text.encode("utf-8")).decode("ascii"),
        }
    ).encode()


class FrozenClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime = EPOCH) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class FakeGitHubClient(GitHubClient):
    """GitHub client that serves canned responses and counts calls."""

    def __init__(
        self,
        settings: Settings,
        *,
        document: str = SAMPLE_README,
        error: Exception | None = None,
        metadata: dict[str, RepoMetadata] | None = None,
    ) -> None:
        super().__init__(settings)
        self.document = document
        self.error = error
        self.metadata = metadata or {}
        self.document_calls = 0
        self.metadata_calls: list[str] = []

    async def fetch_source_document(self, url: str) -> str:
        self.document_calls += 1
        if self.error is not None:
            raise self.error
        return self.document

    async def fetch_repo_metadata(self, owner: str, repo: str) -> RepoMetadata | None:
        self.metadata_calls.append(f"{owner}/{repo}")
        return self.metadata.get(f"{owner}/{repo}")


@pytest.fixture
def sample_readme() -> str:
    return SAMPLE_README


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        cache_path=tmp_path / "approved-skills.json",
        audit_log_path=tmp_path / "audit.log",
        cache_ttl=3600,
        github_token="",
    )


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def store() -> MemoryApprovedListStore:
    return MemoryApprovedListStore()


@pytest.fixture
def fake_client(settings: Settings) -> FakeGitHubClient:
    return FakeGitHubClient(settings)


@pytest.fixture
def audit(settings: Settings) -> AuditLogger:
    return AuditLogger(settings.audit_log_path)


@pytest.fixture
def validator(
    settings: Settings,
    store: MemoryApprovedListStore,
    fake_client: FakeGitHubClient,
    audit: AuditLogger,
    clock: FrozenClock,
) -> SkillValidator:
    return SkillValidator(settings, store=store, client=fake_client, audit=audit, clock=clock)


@pytest.fixture
def fetch_failure() -> FetchError:
    return FetchError("fetch approved list: HTTP 503", status_code=503)
