# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Repository safety scoring."""

from skillgate.scoring.safety import calculate_safety_score, safety_level

__all__ = ["calculate_safety_score", "safety_level"]
