# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""skillgate - Allowlist validator for community agent skills."""

__version__ = "0.1.0"

from skillgate.core.exceptions import ListUnavailableError
from skillgate.models.result import ValidationResult
from skillgate.models.skill import ApprovedList, SkillEntry
from skillgate.validator import SkillValidator

__all__ = [
    "ApprovedList",
    "ListUnavailableError",
    "SkillEntry",
    "SkillValidator",
    "ValidationResult",
    "__version__",
]
