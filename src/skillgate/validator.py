# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Skill approval validator.

Resolves the approved list (cache, remote fetch, stale fallback), looks
up a requested skill, scores its repository, and records decisions to
the audit trail.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from skillgate.audit.logger import AuditLogger
from skillgate.cache.base import ApprovedListStore
from skillgate.cache.file import FileApprovedListStore
from skillgate.cache.manager import ApprovalCache, Clock, utc_now
from skillgate.core.config import Settings
from skillgate.core.constants import (
    NOT_FOUND_REASON,
    USER_CONFIRMED_REASON,
    USER_DECLINED_REASON,
    AuditOutcome,
)
from skillgate.core.exceptions import FetchError, ListUnavailableError
from skillgate.github.client import GitHubClient
from skillgate.models.result import ValidationResult
from skillgate.models.skill import ApprovedList, SkillEntry
from skillgate.parsers.markdown_parser import parse_skill_entries
from skillgate.scoring.safety import calculate_safety_score

logger = logging.getLogger("skillgate.validator")


def normalize_name(name: str) -> str:
    return name.lower().strip()


def find_skill(entries: Sequence[SkillEntry], name: str) -> SkillEntry | None:
    """Return the first entry matching *name*, in document order.

    An entry matches if its name equals *name*, its repo equals *name*
    (case-insensitive), or its repo contains *name* as a substring.
    The substring rule is deliberately permissive so partial names
    resolve.
    """
    wanted = normalize_name(name)
    if not wanted:
        return None
    for entry in entries:
        repo = entry.repo.lower()
        if entry.name == wanted or repo == wanted or wanted in repo:
            return entry
    return None


class SkillValidator:
    """Answers "is this skill approved, and how safe does it look?".

    Args:
        settings: Source URL, TTL, cache and audit paths, and HTTP options.
        store: Snapshot store; defaults to a JSON file at
            ``settings.cache_path``.
        client: GitHub transport; defaults to one built from *settings*.
        audit: Audit trail; defaults to ``settings.audit_log_path``.
        clock: Current-time source shared with the cache and scorer.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        store: ApprovedListStore | None = None,
        client: GitHubClient | None = None,
        audit: AuditLogger | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self.settings = settings
        self.cache = ApprovalCache(
            store or FileApprovedListStore(settings.cache_path),
            ttl=settings.cache_ttl,
            clock=clock,
        )
        self.client = client or GitHubClient(settings)
        self.audit = audit or AuditLogger(settings.audit_log_path)
        self._clock = clock

    async def fetch_approved_skills(self) -> ApprovedList:
        """Return the approved list.

        A fresh cache short-circuits the remote fetch.  Otherwise the
        document is fetched and parsed; if that fails, any cached
        snapshot (fresh or stale) is returned instead.

        Raises:
            ListUnavailableError: If the fetch fails and nothing is cached.
        """
        cached = await self.cache.load()
        if cached is not None and not cached.stale:
            logger.info("Using cached approved skills list (%d entries)", len(cached))
            return cached

        logger.info("Fetching approved skills list from %s", self.settings.source_url)
        try:
            text = await self.client.fetch_source_document(self.settings.source_url)
            entries = parse_skill_entries(text, host=self._link_host())
        except FetchError as exc:
            logger.error("Failed to fetch approved skills: %s", exc)
            if cached is not None:
                logger.warning("Using stale cached skills list as fallback")
                return cached
            raise ListUnavailableError(
                "Cannot validate skills - no approved list available"
            ) from exc

        snapshot = await self.cache.save(entries)
        logger.info("Found %d approved community skills", len(snapshot))
        return snapshot

    def _link_host(self) -> str | None:
        host = self.settings.source_host.strip()
        return None if host in ("", "*") else host

    async def validate_skill(self, name: str) -> ValidationResult:
        """Validate *name* against the approved list.

        Writes a ``REJECTED`` audit record when the skill is not listed
        and an ``ERROR`` record if validation raises.  Approved results
        are audited later through :meth:`record_decision`.
        """
        normalized = normalize_name(name)
        try:
            approved = await self.fetch_approved_skills()
            skill = find_skill(approved.entries, normalized)

            if skill is None:
                self.audit.log_outcome(name, AuditOutcome.REJECTED, NOT_FOUND_REASON)
                return ValidationResult(approved=False, reason=NOT_FOUND_REASON)

            metadata = await self.client.fetch_repo_metadata(skill.owner, skill.repo)
            score = calculate_safety_score(metadata, now=self._clock())
            return ValidationResult(
                approved=True,
                skill=skill,
                reason=f"Listed as {skill.name} ({skill.full_name})",
                safety_score=score,
                metadata=metadata,
            )
        except Exception as exc:
            self.audit.log_outcome(name, AuditOutcome.ERROR, str(exc))
            raise

    def record_decision(self, name: str, confirmed: bool) -> None:
        """Audit the user's install decision for an approved skill."""
        if confirmed:
            self.audit.log_outcome(
                name, AuditOutcome.APPROVED, USER_CONFIRMED_REASON, user_confirmed=True
            )
        else:
            self.audit.log_outcome(name, AuditOutcome.DECLINED, USER_DECLINED_REASON)
