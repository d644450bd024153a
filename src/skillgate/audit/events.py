# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Audit record data model and its line format."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, Field

from skillgate.core.constants import AuditOutcome

_SEPARATOR = " | "
_USER_PREFIX = "User: "
_ESCAPED_PIPE = "\\|"


def _iso_timestamp(value: datetime) -> str:
    """Render *value* as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


class AuditRecord(BaseModel):
    """A single audit trail line.

    Serialised as::

        <ISO timestamp> | <skill name> | <OUTCOME> | <reason> | User: <true|false>
    """

    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    skill_name: str
    outcome: AuditOutcome
    reason: str = ""
    user_confirmed: bool = False

    def format_line(self) -> str:
        # Keep each record on one line; pipes in the name would shift the fields.
        skill_name = " ".join(self.skill_name.split()).replace("|", _ESCAPED_PIPE)
        reason = " ".join(self.reason.split())
        return _SEPARATOR.join(
            [
                _iso_timestamp(self.timestamp),
                skill_name,
                str(self.outcome),
                reason,
                f"{_USER_PREFIX}{'true' if self.user_confirmed else 'false'}",
            ]
        )

    @classmethod
    def parse_line(cls, line: str) -> AuditRecord | None:
        """Parse a line written by :meth:`format_line`.

        Returns ``None`` for lines that do not follow the format.  The
        reason field may itself contain the separator, so the line is
        split from both ends.
        """
        head = line.rstrip("\n").split(_SEPARATOR, 3)
        if len(head) != 4:
            return None
        timestamp, skill_name, outcome, rest = head
        reason, sep, user = rest.rpartition(_SEPARATOR)
        if not sep or not user.startswith(_USER_PREFIX):
            return None
        try:
            return cls(
                timestamp=datetime.fromisoformat(timestamp.replace("Z", "+00:00")),
                skill_name=skill_name.replace(_ESCAPED_PIPE, "|"),
                outcome=AuditOutcome(outcome),
                reason=reason,
                user_confirmed=user[len(_USER_PREFIX) :].strip().lower() == "true",
            )
        except ValueError:
            return None
