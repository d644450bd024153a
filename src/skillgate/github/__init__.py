# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""GitHub API transport for the approved list and repository metadata."""

from skillgate.github.client import GitHubClient

__all__ = ["GitHubClient"]
