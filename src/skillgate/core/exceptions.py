# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for skillgate."""


class SkillgateError(Exception):
    """Base exception for all skillgate errors."""


class FetchError(SkillgateError):
    """Failed to fetch a remote resource."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SourceDocumentError(FetchError):
    """The approved-list document envelope could not be decoded."""


class ListUnavailableError(SkillgateError):
    """No fresh or stale approved list could be obtained."""
