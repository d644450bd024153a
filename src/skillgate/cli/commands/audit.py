# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CLI command for reading the install audit trail."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from skillgate.audit.logger import AuditLogger
from skillgate.core.config import get_settings
from skillgate.core.constants import AuditOutcome

console = Console()

_OUTCOME_STYLES: dict[AuditOutcome, str] = {
    AuditOutcome.APPROVED: "green",
    AuditOutcome.DECLINED: "yellow",
    AuditOutcome.REJECTED: "red",
    AuditOutcome.ERROR: "bold red",
}


def audit_command(
    limit: Annotated[int, typer.Option("--limit", "-n", help="Number of records")] = 20,
) -> None:
    """Show the most recent install audit records."""
    settings = get_settings()
    records = AuditLogger(settings.audit_log_path).read_records(limit=limit)
    if not records:
        typer.echo("No audit records found.")
        return

    table = Table(title=f"Audit Trail ({len(records)} records)")
    table.add_column("Timestamp", style="dim")
    table.add_column("Skill", style="bold", no_wrap=True)
    table.add_column("Outcome")
    table.add_column("Reason")
    table.add_column("User")

    for record in records:
        style = _OUTCOME_STYLES.get(record.outcome, "")
        table.add_row(
            record.timestamp.isoformat(timespec="seconds"),
            escape(record.skill_name),
            f"[{style}]{record.outcome}[/{style}]",
            escape(record.reason),
            "yes" if record.user_confirmed else "no",
        )

    console.print(table)
