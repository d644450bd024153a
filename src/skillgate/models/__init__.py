# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pydantic data models for approved skills, repository metadata, and results."""

from skillgate.models.metadata import RepoMetadata, SourceDocument
from skillgate.models.result import ValidationResult
from skillgate.models.skill import ApprovedList, SkillEntry

__all__ = [
    "ApprovedList",
    "RepoMetadata",
    "SkillEntry",
    "SourceDocument",
    "ValidationResult",
]
