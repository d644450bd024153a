# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""TTL-aware wrapper around an approved-list store.

:class:`ApprovalCache` is the sole writer of the persisted snapshot.  It
stamps snapshots on save and decides freshness on load; stale
snapshots are kept as a fallback and never deleted automatically.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from skillgate.cache.base import ApprovedListStore
from skillgate.models.skill import ApprovedList, SkillEntry

logger = logging.getLogger("skillgate.cache.manager")

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class ApprovalCache:
    """Time-boxed approved-list cache.

    Args:
        store: Snapshot persistence backend.
        ttl: Freshness window in seconds (``3600`` = 1 hour).
        clock: Returns the current UTC time; injectable for tests.
    """

    def __init__(
        self,
        store: ApprovedListStore,
        ttl: int = 3600,
        clock: Clock = utc_now,
    ) -> None:
        self._store = store
        self._ttl = timedelta(seconds=ttl)
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    @property
    def store(self) -> ApprovedListStore:
        return self._store

    async def load(self) -> ApprovedList | None:
        """Return the persisted snapshot, flagged ``stale`` when expired."""
        snapshot = await self._store.load()
        if snapshot is None:
            return None
        return snapshot.model_copy(update={"stale": not self.is_fresh(snapshot)})

    async def save(self, entries: list[SkillEntry]) -> ApprovedList:
        """Stamp *entries* with the current time and persist them.

        The returned snapshot is usable even if persistence failed.
        """
        snapshot = ApprovedList(fetched_at=self._clock(), entries=entries)
        if not await self._store.save(snapshot):
            logger.warning("Approved list not persisted; continuing with in-memory copy")
        return snapshot

    async def clear(self) -> bool:
        return await self._store.clear()

    def age(self, snapshot: ApprovedList) -> timedelta:
        return self._clock() - snapshot.fetched_at

    def is_fresh(self, snapshot: ApprovedList) -> bool:
        return self.age(snapshot) < self._ttl
