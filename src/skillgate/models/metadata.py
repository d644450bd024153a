# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Pydantic models for GitHub API responses."""

from __future__ import annotations

import base64
import binascii
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict

from skillgate.core.exceptions import SourceDocumentError


class RepoMetadata(BaseModel):
    """Subset of ``GET /repos/{owner}/{repo}`` used for safety scoring.

    Every field is optional: a missing ``stargazers_count`` means the
    primary trust signal is absent, which scores as zero.
    """

    model_config = ConfigDict(extra="ignore")

    stargazers_count: int | None = None
    forks_count: int | None = None
    updated_at: datetime | None = None
    description: str | None = None
    license: dict[str, Any] | None = None

    @property
    def has_license(self) -> bool:
        return self.license is not None


class SourceDocument(BaseModel):
    """Envelope returned by the repository contents API."""

    model_config = ConfigDict(extra="ignore")

    content: str
    encoding: str = "base64"

    def decode(self) -> str:
        """Return the document text.

        Raises:
            SourceDocumentError: If the encoding is unsupported or the
                payload is not valid base64 / UTF-8.
        """
        if self.encoding != "base64":
            msg = f"Unsupported content encoding: {self.encoding!r}"
            raise SourceDocumentError(msg)
        try:
            # The contents API wraps base64 at 60 columns.
            raw = base64.b64decode("".join(self.content.split()), validate=True)
            return raw.decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            msg = f"Cannot decode source document: {exc}"
            raise SourceDocumentError(msg) from exc
