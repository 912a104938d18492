"""Donation commands."""

import click
from fundtrack.cli.error_handling import handle_domain_error
from fundtrack.cli.input_parsing import parse_amount_or_exit, parse_date_or_exit
from fundtrack.cli.project_resolution import resolve_project_or_exit
from fundtrack.domain.donation import DonationService
from fundtrack.domain.entities import PaymentMethod
from fundtrack.domain.errors import UNKNOWN_PROJECT
from fundtrack.domain.project import ProjectService
from fundtrack.domain.reports import ReportingService
from fundtrack.utils.currency import format_currency

PAYMENT_METHOD_CHOICE = click.Choice([m.value for m in PaymentMethod], case_sensitive=False)


@click.group()
def donation_group():
    """Record and review donations."""
    pass


@donation_group.command("add")
@click.option("--project", required=True, help="Project name or ID")
@click.option("--amount", required=True, help="Donated amount (e.g., 250 or $1,000.00)")
@click.option("--donor", required=True, help="Donor name")
@click.option("--method", required=True, type=PAYMENT_METHOD_CHOICE, help="Payment method")
@click.option("--date", "date_str", default="today", show_default=True, help="Date received")
@click.pass_context
def add_donation(ctx, project: str, amount: str, donor: str, method: str, date_str: str):
    """Record a donation.

    Examples:
        fundtrack donation add --project "Food Bank Support" --amount 250 --donor "Jane Smith" --method "Bank Transfer"
        fundtrack donation add --project 1 --amount 100 --donor "John Doe" --method paypal --date 2024-09-15
    """
    db = ctx.obj["db"]
    service = DonationService(db)
    project_service = ProjectService(db)

    project_id = resolve_project_or_exit(ctx, project_service, project)
    donation_amount = parse_amount_or_exit(ctx, amount)
    received = parse_date_or_exit(ctx, date_str, "date")

    try:
        donation_id = service.create_donation(
            amount=donation_amount,
            donor_name=donor,
            payment_method=method,
            date=received,
            project_id=project_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Recorded donation {donation_id}")
    click.echo(f"  Donor: {donor}")
    click.echo(f"  Amount: {format_currency(donation_amount)}")
    click.echo(f"  Project: {project_service.get_project(project_id).name}")


@donation_group.command("list")
@click.option("--search", default="", help="Only show donations whose donor or project name contains this text")
@click.pass_context
def list_donations(ctx, search: str):
    """List donations."""
    db = ctx.obj["db"]
    reporting = ReportingService(db)

    donations = reporting.search_donations(search)
    if not donations:
        click.echo("No donations found.")
        return

    names = reporting.project_names()
    click.echo(f"\nFound {len(donations)} donation(s):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<5} {'Date':<12} {'Donor':<22} {'Project':<30} {'Amount':>12} {'Method':<14}"
    )
    click.echo("-" * 100)
    for donation in donations:
        project_name = names.get(donation.project_id, UNKNOWN_PROJECT)
        click.echo(
            f"{donation.id:<5} {donation.date.isoformat():<12} {donation.donor_name[:22]:<22} "
            f"{project_name[:30]:<30} {format_currency(donation.amount):>12} "
            f"{donation.payment_method.value:<14}"
        )


@donation_group.command("edit")
@click.argument("donation_id", type=int, metavar="DONATION_ID")
@click.option("--project", help="Move the donation to another project (name or ID)")
@click.option("--amount", help="New amount")
@click.option("--donor", help="New donor name")
@click.option("--method", type=PAYMENT_METHOD_CHOICE, help="New payment method")
@click.option("--date", "date_str", help="New date")
@click.pass_context
def edit_donation(
    ctx,
    donation_id: int,
    project: str | None,
    amount: str | None,
    donor: str | None,
    method: str | None,
    date_str: str | None,
) -> None:
    """Edit a donation. Only the given fields change."""
    db = ctx.obj["db"]
    service = DonationService(db)

    project_id = None
    if project is not None:
        project_id = resolve_project_or_exit(ctx, ProjectService(db), project)

    try:
        service.update_donation(
            donation_id,
            amount=parse_amount_or_exit(ctx, amount),
            donor_name=donor,
            payment_method=method,
            date=parse_date_or_exit(ctx, date_str, "date"),
            project_id=project_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated donation {donation_id}")


@donation_group.command("delete")
@click.argument("donation_id", type=int, metavar="DONATION_ID")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_donation(ctx, donation_id: int, yes: bool) -> None:
    """Delete a donation."""
    db = ctx.obj["db"]
    service = DonationService(db)

    try:
        donation = service.require_donation(donation_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Are you sure you want to delete the {format_currency(donation.amount)} "
        f"donation from {donation.donor_name} (ID: {donation_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_donation(donation_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted donation {donation_id}")


def register_commands(cli):
    """Register donation commands with main CLI."""
    cli.add_command(donation_group, name="donation")
