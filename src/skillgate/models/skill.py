# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Approved skill entries and the list snapshot they belong to."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from skillgate.core.constants import CACHE_SKILLS_KEY, CACHE_TIMESTAMP_KEY


class SkillEntry(BaseModel):
    """One skill reference extracted from the approved-list document."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    owner: str
    repo: str
    url: str
    parsed_from: str = Field(default="", alias="parsedFrom")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class ApprovedList(BaseModel):
    """Ordered snapshot of approved entries.

    Entries are not de-duplicated; lookups take the first match in
    document order.  ``from_cache`` and ``stale`` describe how the
    snapshot was obtained and are not persisted.
    """

    fetched_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    entries: list[SkillEntry] = Field(default_factory=list)
    from_cache: bool = False
    stale: bool = False

    def __len__(self) -> int:
        return len(self.entries)

    def to_cache_payload(self) -> dict[str, Any]:
        """Serialise to the ``{timestamp: epoch-ms, skills: [...]}`` file format."""
        return {
            CACHE_TIMESTAMP_KEY: int(self.fetched_at.timestamp() * 1000),
            CACHE_SKILLS_KEY: [
                entry.model_dump(mode="json", by_alias=True) for entry in self.entries
            ],
        }

    @classmethod
    def from_cache_payload(cls, payload: dict[str, Any]) -> ApprovedList:
        """Rebuild a snapshot from the cache file format.

        Raises:
            KeyError, TypeError, ValueError: If the payload is malformed or
                the timestamp is out of range.
        """
        timestamp_ms = payload[CACHE_TIMESTAMP_KEY]
        if isinstance(timestamp_ms, bool) or not isinstance(timestamp_ms, (int, float)):
            msg = f"Invalid cache timestamp: {timestamp_ms!r}"
            raise TypeError(msg)
        skills = payload[CACHE_SKILLS_KEY]
        if not isinstance(skills, list):
            msg = "Cache skills must be a list"
            raise TypeError(msg)
        try:
            fetched_at = datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC)
        except (OverflowError, OSError) as exc:
            msg = f"Cache timestamp out of range: {timestamp_ms!r}"
            raise ValueError(msg) from exc
        return cls(
            fetched_at=fetched_at,
            entries=[SkillEntry.model_validate(item) for item in skills],
            from_cache=True,
        )
