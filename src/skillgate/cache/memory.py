# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""In-memory snapshot store, used for tests and embedding."""

from __future__ import annotations

from skillgate.cache.base import ApprovedListStore
from skillgate.models.skill import ApprovedList


class MemoryApprovedListStore(ApprovedListStore):
    """Holds a single snapshot in process memory."""

    def __init__(self, snapshot: ApprovedList | None = None) -> None:
        self._snapshot = snapshot
        self.saves = 0

    async def load(self) -> ApprovedList | None:
        if self._snapshot is None:
            return None
        return self._snapshot.model_copy(update={"from_cache": True, "stale": False})

    async def save(self, snapshot: ApprovedList) -> bool:
        self._snapshot = snapshot.model_copy(update={"from_cache": False, "stale": False})
        self.saves += 1
        return True

    async def clear(self) -> bool:
        existed = self._snapshot is not None
        self._snapshot = None
        return existed
