# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Abstract store interface for the persisted approved-list snapshot."""

from __future__ import annotations

import abc

from skillgate.models.skill import ApprovedList


class ApprovedListStore(abc.ABC):
    """Abstract base class for approved-list snapshot stores.

    Stores never raise on read or write: an unreadable snapshot is
    reported as absent and a failed write is logged and dropped.
    """

    @abc.abstractmethod
    async def load(self) -> ApprovedList | None:
        """Return the last persisted snapshot.

        Returns:
            The snapshot, or ``None`` if nothing was written or the
            stored data is unreadable.
        """

    @abc.abstractmethod
    async def save(self, snapshot: ApprovedList) -> bool:
        """Persist a snapshot, replacing any previous one.

        Returns:
            ``True`` if the snapshot was written.
        """

    @abc.abstractmethod
    async def clear(self) -> bool:
        """Remove the persisted snapshot.

        Returns:
            ``True`` if a snapshot existed and was removed.
        """
