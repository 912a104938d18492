"""CLI helpers for parsing dates and amounts from options."""

from datetime import date
from decimal import Decimal
from typing import Optional

import click

from fundtrack.utils.amount_parser import parse_amount
from fundtrack.utils.date_parser import parse_date


def resolve_today(ctx: click.Context, today: Optional[str]) -> date:
    """Resolve the --today option to the reference date for reports.

    Defaults to the current date. Passing it explicitly makes days-remaining
    figures reproducible.
    """
    if not today:
        return date.today()
    try:
        return parse_date(today)
    except ValueError as e:
        click.echo(f"Error: Invalid --today date: {e}", err=True)
        ctx.exit(1)


def parse_date_or_exit(
    ctx: click.Context, value: Optional[str], label: str, today: Optional[date] = None
) -> Optional[date]:
    """Parse an optional date option, exiting with an error if it is invalid."""
    if value is None:
        return None
    try:
        return parse_date(value, today=today)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def parse_amount_or_exit(
    ctx: click.Context, value: Optional[str], label: str = "amount"
) -> Optional[Decimal]:
    """Parse an optional amount option, exiting with an error if it is invalid."""
    if value is None:
        return None
    try:
        return parse_amount(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)
