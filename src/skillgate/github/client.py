# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Async HTTP client for the GitHub REST API."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from skillgate import __version__
from skillgate.core.config import Settings
from skillgate.core.exceptions import FetchError, SourceDocumentError
from skillgate.models.metadata import RepoMetadata, SourceDocument

logger = logging.getLogger("skillgate.github.client")

_USER_AGENT = f"skillgate/{__version__}"
_ACCEPT = "application/vnd.github.v3+json"


def _check_response(resp: httpx.Response, context: str = "") -> None:
    """Raise :class:`FetchError` for non-2xx responses."""
    if resp.is_success:
        return
    msg = f"{context}: HTTP {resp.status_code}" if context else f"HTTP {resp.status_code}"
    body = resp.text[:200]
    if body:
        msg = f"{msg} - {body}"
    raise FetchError(msg, status_code=resp.status_code)


class GitHubClient:
    """Async client for the two GitHub endpoints skillgate relies on.

    Parameters
    ----------
    settings:
        Provides the API base URL, timeouts and optional token.
    """

    def __init__(self, settings: Settings) -> None:
        self.api_base_url = settings.api_base_url.rstrip("/")
        self.list_timeout = settings.list_fetch_timeout
        self.metadata_timeout = settings.metadata_timeout
        self._token = settings.github_token

    def _headers(self) -> dict[str, str]:
        headers = {"User-Agent": _USER_AGENT, "Accept": _ACCEPT}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _client(self, timeout: float) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            headers=self._headers(),
            follow_redirects=True,
        )

    async def fetch_source_document(self, url: str) -> str:
        """Fetch the approved-list document and return its decoded text.

        The endpoint returns a contents-API envelope whose ``content``
        field is base64-encoded markdown.

        Raises
        ------
        FetchError
            On transport errors or a non-2xx status.
        SourceDocumentError
            If the envelope is not JSON or cannot be decoded.
        """
        try:
            async with self._client(self.list_timeout) as client:
                resp = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise FetchError(f"fetch approved list: {exc}") from exc

        _check_response(resp, "fetch approved list")

        try:
            document = SourceDocument.model_validate_json(resp.content)
        except ValidationError as exc:
            raise SourceDocumentError(f"Malformed approved-list envelope: {exc}") from exc
        return document.decode()

    async def fetch_repo_metadata(self, owner: str, repo: str) -> RepoMetadata | None:
        """Return repository metadata, or ``None`` if it cannot be obtained.

        Failures are logged and absorbed; metadata only feeds the soft
        safety score and never decides approval.
        """
        url = f"{self.api_base_url}/repos/{owner}/{repo}"
        try:
            async with self._client(self.metadata_timeout) as client:
                resp = await client.get(url)
            _check_response(resp, f"repository {owner}/{repo}")
            return RepoMetadata.model_validate_json(resp.content)
        except (httpx.HTTPError, httpx.InvalidURL, FetchError, ValidationError) as exc:
            logger.warning("Could not fetch repository info for %s/%s: %s", owner, repo, exc)
            return None
