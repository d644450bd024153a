# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Append-only audit trail of validation and install decisions."""

from skillgate.audit.events import AuditRecord
from skillgate.audit.logger import AuditLogger

__all__ = ["AuditLogger", "AuditRecord"]
