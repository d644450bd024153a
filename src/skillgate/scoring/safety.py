# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Deterministic 0-10 safety score from repository metadata.

The score is additive over independent, capped buckets:

    stars        >=100 -> 3, >=20 -> 2, >=5 -> 1
    forks        >=10 -> 2, >=2 -> 1
    last update  <=30 days -> 3, <=90 -> 2, <=180 -> 1
    description  longer than 10 characters -> 1
    license      present -> 1

Absent metadata, or metadata without a star count, scores 0.
"""

from __future__ import annotations

from datetime import UTC, datetime

from skillgate.core.constants import (
    DESCRIPTION_MIN_LENGTH,
    FORK_BUCKETS,
    MAX_SAFETY_SCORE,
    RECENCY_BUCKETS,
    SAFETY_LEVEL_THRESHOLDS,
    STAR_BUCKETS,
    SafetyLevel,
)
from skillgate.models.metadata import RepoMetadata

_SECONDS_PER_DAY = 86_400


def _at_least(value: int | None, buckets: tuple[tuple[int, int], ...]) -> int:
    if value is None:
        return 0
    for minimum, points in buckets:
        if value >= minimum:
            return points
    return 0


def _recency_points(updated_at: datetime | None, now: datetime) -> int:
    if updated_at is None:
        return 0
    if updated_at.tzinfo is None:
        updated_at = updated_at.replace(tzinfo=UTC)
    days = (now - updated_at).total_seconds() / _SECONDS_PER_DAY
    for max_days, points in RECENCY_BUCKETS:
        if days <= max_days:
            return points
    return 0


def calculate_safety_score(metadata: RepoMetadata | None, now: datetime | None = None) -> int:
    """Score *metadata* on a 0-10 scale.

    Args:
        metadata: Repository metadata, or ``None`` if unavailable.
        now: Reference time for recency; defaults to the current UTC time.
    """
    if metadata is None or metadata.stargazers_count is None:
        return 0

    now = now or datetime.now(UTC)
    score = _at_least(metadata.stargazers_count, STAR_BUCKETS)
    score += _at_least(metadata.forks_count, FORK_BUCKETS)
    score += _recency_points(metadata.updated_at, now)
    if metadata.description and len(metadata.description) > DESCRIPTION_MIN_LENGTH:
        score += 1
    if metadata.has_license:
        score += 1
    return min(score, MAX_SAFETY_SCORE)


def safety_level(score: int) -> SafetyLevel:
    for minimum, level in SAFETY_LEVEL_THRESHOLDS:
        if score >= minimum:
            return level
    return SafetyLevel.LOW
