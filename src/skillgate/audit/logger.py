# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Audit logger that appends records to a plain-text trail file."""

from __future__ import annotations

import logging
from pathlib import Path

from skillgate.audit.events import AuditRecord
from skillgate.core.constants import AuditOutcome

_logger = logging.getLogger("skillgate.audit")


class AuditLogger:
    """Appends :class:`AuditRecord` lines to *path*.

    The logger provides fire-and-forget semantics: failures to persist a
    record are logged but never propagate to the caller.  The file is
    never rotated or truncated here.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def log(self, record: AuditRecord) -> AuditRecord:
        """Append *record* and return it."""
        try:
            if not self.path.parent.exists():
                self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8") as fh:
                fh.write(record.format_line() + "\n")
        except OSError:
            _logger.exception("Could not write to audit log %s", self.path)

        _logger.info(
            "audit skill=%s outcome=%s user_confirmed=%s",
            record.skill_name,
            record.outcome,
            record.user_confirmed,
        )
        return record

    def log_outcome(
        self,
        skill_name: str,
        outcome: AuditOutcome,
        reason: str,
        *,
        user_confirmed: bool = False,
    ) -> AuditRecord:
        return self.log(
            AuditRecord(
                skill_name=skill_name,
                outcome=outcome,
                reason=reason,
                user_confirmed=user_confirmed,
            )
        )

    def read_records(self, limit: int | None = None) -> list[AuditRecord]:
        """Return parseable records in file order, newest last.

        Args:
            limit: Keep only the last *limit* records.
        """
        try:
            lines = self.path.read_text(encoding="utf-8").splitlines()
        except FileNotFoundError:
            return []

        records = [r for r in (AuditRecord.parse_line(line) for line in lines) if r is not None]
        if limit is not None:
            records = records[-limit:] if limit > 0 else []
        return records
