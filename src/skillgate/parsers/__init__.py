# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Parsers for approved-list documents."""

from skillgate.parsers.markdown_parser import iter_skill_entries, parse_skill_entries

__all__ = ["iter_skill_entries", "parse_skill_entries"]
