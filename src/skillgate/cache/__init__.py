# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Approved-list caching layer with stale-read fallback."""

from skillgate.cache.base import ApprovedListStore
from skillgate.cache.file import FileApprovedListStore
from skillgate.cache.manager import ApprovalCache
from skillgate.cache.memory import MemoryApprovedListStore

__all__ = [
    "ApprovalCache",
    "ApprovedListStore",
    "FileApprovedListStore",
    "MemoryApprovedListStore",
]
