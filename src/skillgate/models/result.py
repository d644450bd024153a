# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Validation result returned to callers."""

from __future__ import annotations

from pydantic import BaseModel

from skillgate.models.metadata import RepoMetadata
from skillgate.models.skill import SkillEntry


class ValidationResult(BaseModel):
    """Outcome of a single ``validate_skill`` call.

    ``safety_score`` and ``metadata`` are only populated for approved
    skills; ``metadata`` is ``None`` when the repository lookup failed.
    """

    approved: bool
    skill: SkillEntry | None = None
    reason: str = ""
    safety_score: int | None = None
    metadata: RepoMetadata | None = None
