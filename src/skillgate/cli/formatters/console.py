# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console rendering for validation results and the approved list."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from skillgate.core.constants import SafetyLevel
from skillgate.models.result import ValidationResult
from skillgate.models.skill import ApprovedList
from skillgate.scoring.safety import safety_level

LEVEL_STYLES: dict[SafetyLevel, str] = {
    SafetyLevel.EXCELLENT: "bold green",
    SafetyLevel.GOOD: "green",
    SafetyLevel.FAIR: "yellow",
    SafetyLevel.LOW: "bold red",
}


def format_approval(result: ValidationResult, console: Console | None = None) -> None:
    """Print the approval panel and community-skill warning."""
    console = console or Console()
    skill = result.skill
    if skill is None:
        return

    score = result.safety_score or 0
    level = safety_level(score)
    style = LEVEL_STYLES[level]

    lines = [f"Repository: {escape(skill.url)}"]
    meta = result.metadata
    if meta is not None:
        updated = meta.updated_at.date().isoformat() if meta.updated_at else "Unknown"
        lines.append(
            f"Stars: {meta.stargazers_count or 0} | "
            f"Forks: {meta.forks_count or 0} | "
            f"Updated: {updated}"
        )
    else:
        lines.append("[dim]Repository metadata unavailable[/dim]")
    lines.append(f"Safety Score: [{style}]{score}/10 ({level})[/{style}]")

    console.print(
        Panel(
            "\n".join(lines),
            title=f"[bold green]APPROVED[/bold green]: {escape(skill.name)}",
            border_style="green",
            expand=False,
        )
    )
    console.print(
        "[yellow]COMMUNITY SKILL WARNING:[/yellow] This skill is from an external "
        "developer. Review the code before installation."
    )


def format_rejection(skill_name: str, reason: str, console: Console | None = None) -> None:
    console = console or Console(stderr=True)
    console.print(f"[red]REJECTED:[/red] {escape(skill_name)}: {escape(reason)}")
    console.print(
        "[dim]Community skills are the exception, not the rule. "
        "Consider building this skill yourself.[/dim]"
    )


def format_approved_list(approved: ApprovedList, console: Console | None = None) -> None:
    console = console or Console()
    if approved.stale:
        source = "stale cache"
    elif approved.from_cache:
        source = "cache"
    else:
        source = "remote"

    table = Table(title=f"Approved Skills ({len(approved)}, from {source})")
    table.add_column("Name", style="bold", no_wrap=True)
    table.add_column("Repository", no_wrap=True)
    table.add_column("URL", style="dim", overflow="fold")
    for entry in approved.entries:
        table.add_row(escape(entry.name), escape(entry.full_name), escape(entry.url))
    console.print(table)
