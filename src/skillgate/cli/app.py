# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from skillgate.cli.commands import cache as cache_cmd
from skillgate.cli.commands.audit import audit_command
from skillgate.cli.exit_codes import ExitCode
from skillgate.core.config import Settings, get_settings
from skillgate.core.logging import setup_logging
from skillgate.validator import SkillValidator

app = typer.Typer(
    name="skillgate",
    help="Allowlist validator for community agent skills",
    no_args_is_help=True,
)

app.add_typer(cache_cmd.app, name="cache", help="Inspect or clear the approved-list cache")
app.command(name="audit")(audit_command)

console = Console()
err_console = Console(stderr=True)


def build_validator(settings: Settings) -> SkillValidator:
    return SkillValidator(settings)


def _load_settings() -> Settings:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    return settings


def validate(
    skill_name: Annotated[str, typer.Argument(help="Community skill name or repository")],
    yes: Annotated[
        bool, typer.Option("--yes", "-y", help="Confirm installation without prompting")
    ] = False,
) -> None:
    """Check a community skill against the approved list and confirm install."""
    from skillgate.cli.formatters.console import format_approval, format_rejection

    settings = _load_settings()
    validator = build_validator(settings)

    console.print(f"Validating community skill: [bold]{escape(skill_name)}[/bold]", style="dim")
    try:
        result = asyncio.run(validator.validate_skill(skill_name))
    except Exception as exc:
        err_console.print(f"[red]Validation failed:[/red] {escape(str(exc))}")
        raise typer.Exit(ExitCode.NOT_INSTALLED) from exc

    if not result.approved or result.skill is None:
        format_rejection(skill_name, result.reason, err_console)
        raise typer.Exit(ExitCode.NOT_INSTALLED)

    format_approval(result, console)

    if yes:
        confirmed = True
    else:
        try:
            confirmed = typer.confirm(f"Install {result.skill.name}?", default=False)
        except typer.Abort:
            confirmed = False

    validator.record_decision(skill_name, confirmed)

    if not confirmed:
        console.print("[red]Installation cancelled by user[/red]")
        raise typer.Exit(ExitCode.NOT_INSTALLED)

    console.print(f"[green]Installation approved for {escape(skill_name)}[/green]")
    console.print(f"Repository: {escape(result.skill.url)}")
    console.print("[yellow]Remember to review the code before running![/yellow]")
    raise typer.Exit(ExitCode.INSTALL_CONFIRMED)


app.command(name="validate")(validate)


@app.command(name="list")
def list_skills() -> None:
    """Show the approved skills list."""
    from skillgate.cli.formatters.console import format_approved_list

    settings = _load_settings()
    validator = build_validator(settings)
    try:
        approved = asyncio.run(validator.fetch_approved_skills())
    except Exception as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1) from exc

    format_approved_list(approved, console)


def validate_main() -> None:
    """Entry point for the single-command ``validate-skill`` script."""
    typer.run(validate)
