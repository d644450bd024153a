# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations, scoring thresholds, and file format constants."""

from enum import StrEnum


class AuditOutcome(StrEnum):
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"
    REJECTED = "REJECTED"
    ERROR = "ERROR"


class SafetyLevel(StrEnum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    LOW = "Low"


NOT_FOUND_REASON = "Not found in approved repository"
USER_CONFIRMED_REASON = "User confirmed installation"
USER_DECLINED_REASON = "User declined installation"

MAX_SAFETY_SCORE = 10

# (minimum value, points), checked in order
STAR_BUCKETS: tuple[tuple[int, int], ...] = ((100, 3), (20, 2), (5, 1))
FORK_BUCKETS: tuple[tuple[int, int], ...] = ((10, 2), (2, 1))
# (maximum age in days, points), checked in order
RECENCY_BUCKETS: tuple[tuple[int, int], ...] = ((30, 3), (90, 2), (180, 1))
DESCRIPTION_MIN_LENGTH = 10

SAFETY_LEVEL_THRESHOLDS: tuple[tuple[int, SafetyLevel], ...] = (
    (7, SafetyLevel.EXCELLENT),
    (5, SafetyLevel.GOOD),
    (3, SafetyLevel.FAIR),
)

# Approval cache file keys
CACHE_TIMESTAMP_KEY = "timestamp"
CACHE_SKILLS_KEY = "skills"
