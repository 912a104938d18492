"""Project management commands."""

import click
from fundtrack.cli.error_handling import handle_domain_error
from fundtrack.cli.input_parsing import parse_amount_or_exit, parse_date_or_exit, resolve_today
from fundtrack.cli.project_resolution import resolve_project_or_exit
from fundtrack.domain.project import ProjectService
from fundtrack.domain.reports import ReportingService
from fundtrack.utils.currency import format_currency

RECENT_DONATIONS_LIMIT = 5


@click.group()
def project_group():
    """Manage fundraising projects."""
    pass


@project_group.command("create")
@click.argument("name", metavar="PROJECT_NAME")
@click.option("--description", required=True, help="Project description (at least 10 characters)")
@click.option("--target", required=True, help="Target amount (e.g., 5000 or $5,000)")
@click.option(
    "--target-date",
    required=True,
    help="Target date (YYYY-MM-DD or relative like 'end of year', 'in 90 days')",
)
@click.pass_context
def create_project(ctx, name: str, description: str, target: str, target_date: str):
    """Create a new project.

    Examples:
        fundtrack project create "Food Bank Support" --description "Supporting local food banks" --target 10000 --target-date 2024-11-30
        fundtrack project create "Winter Coats" --description "Coats for the shelter" --target 2500 --target-date "in 60 days"
    """
    db = ctx.obj["db"]
    service = ProjectService(db)

    target_amount = parse_amount_or_exit(ctx, target, "target amount")
    deadline = parse_date_or_exit(ctx, target_date, "target date")

    try:
        project_id = service.create_project(
            name=name,
            description=description,
            target_amount=target_amount,
            target_date=deadline,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created project '{name}' (ID: {project_id})")


def _days_left_label(days_remaining: int) -> str:
    return str(days_remaining) if days_remaining > 0 else "Expired"


@project_group.command("list")
@click.option("--search", default="", help="Only show projects whose name or description contains this text")
@click.option("--today", help="Reference date for days remaining (defaults to today)")
@click.pass_context
def list_projects(ctx, search: str, today: str | None):
    """List projects with fundraising progress."""
    db = ctx.obj["db"]
    reporting = ReportingService(db)
    now = resolve_today(ctx, today)

    try:
        rows = reporting.project_progress(now, query=search)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not rows:
        click.echo("No projects found.")
        return

    click.echo("\nProjects:")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<5} {'Name':<35} {'Target':>12} {'Progress':>9} {'Target Date':>12} {'Days Left':>10}"
    )
    click.echo("-" * 100)
    for row in rows:
        project = row.project
        click.echo(
            f"{project.id:<5} {project.name[:35]:<35} {format_currency(project.target_amount):>12} "
            f"{str(row.progress_percent) + '%':>9} {project.target_date.isoformat():>12} "
            f"{_days_left_label(row.days_remaining):>10}"
        )


@project_group.command("show")
@click.argument("project", metavar="PROJECT")
@click.option("--today", help="Reference date for days remaining (defaults to today)")
@click.pass_context
def show_project(ctx, project: str, today: str | None):
    """Show a project's financial summary.

    PROJECT can be a project name or ID.
    """
    db = ctx.obj["db"]
    service = ProjectService(db)
    reporting = ReportingService(db)
    now = resolve_today(ctx, today)

    project_id = resolve_project_or_exit(ctx, service, project)
    try:
        project_obj, summary = reporting.project_summary(project_id, now)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\n{project_obj.name}")
    click.echo(project_obj.description)
    click.echo("=" * 60)

    click.echo("\nFundraising Progress")
    click.echo(f"  {summary.progress_percent}% Complete")
    click.echo(
        f"  {format_currency(summary.total_donations)} of {format_currency(project_obj.target_amount)}"
    )
    click.echo(f"  Still needed: {format_currency(summary.remaining)}")

    click.echo("\nTime Remaining")
    click.echo(f"  {summary.days_remaining} Days Left")
    click.echo(f"  Target: {project_obj.target_date.isoformat()}")

    click.echo("\nFinancial Summary")
    click.echo(f"  {'Total Donations:':<18}{format_currency(summary.total_donations):>14}")
    click.echo(f"  {'Total Expenses:':<18}{format_currency(summary.total_expenses):>14}")
    balance = f"{format_currency(summary.balance):>14}"
    if summary.is_loss:
        balance = click.style(balance, fg="red") + " (loss)"
    else:
        balance = click.style(balance, fg="green")
    click.echo(f"  {'Balance:':<18}{balance}")

    donations = reporting.project_donations(project_id, limit=RECENT_DONATIONS_LIMIT)
    click.echo(f"\nRecent Donations (last {len(donations)})")
    if not donations:
        click.echo("  No donations recorded yet.")
    for donation in donations:
        click.echo(
            f"  {donation.date.isoformat():<12} {donation.donor_name[:25]:<25} "
            f"{format_currency(donation.amount):>12}  {donation.payment_method.value}"
        )

    expenses = reporting.project_expenses(project_id)
    click.echo("\nExpenses")
    if not expenses:
        click.echo("  No expenses recorded yet.")
    for expense in expenses:
        click.echo(
            f"  {expense.date.isoformat():<12} {expense.description[:40]:<40} "
            f"{format_currency(expense.amount):>12}"
        )


@project_group.command("edit")
@click.argument("project", metavar="PROJECT")
@click.option("--name", help="New project name")
@click.option("--description", help="New description")
@click.option("--target", help="New target amount")
@click.option("--target-date", help="New target date")
@click.pass_context
def edit_project(
    ctx,
    project: str,
    name: str | None,
    description: str | None,
    target: str | None,
    target_date: str | None,
) -> None:
    """Edit a project.

    PROJECT can be a project name or ID. Only the given fields change.

    Examples:
        fundtrack project edit "Food Bank Support" --target 12000
        fundtrack project edit 2 --target-date 2025-03-31
    """
    db = ctx.obj["db"]
    service = ProjectService(db)

    project_id = resolve_project_or_exit(ctx, service, project)
    target_amount = parse_amount_or_exit(ctx, target, "target amount")
    deadline = parse_date_or_exit(ctx, target_date, "target date")

    if all(v is None for v in (name, description, target_amount, deadline)):
        click.echo("Nothing to update. Pass at least one of --name, --description, --target, --target-date.")
        return

    try:
        updated = service.update_project(
            project_id,
            name=name,
            description=description,
            target_amount=target_amount,
            target_date=deadline,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated project '{updated.name}' (ID: {project_id})")


@project_group.command("delete")
@click.argument("project", metavar="PROJECT")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_project(ctx, project: str, yes: bool) -> None:
    """Delete a project.

    PROJECT can be a project name or ID.

    Donations and expenses recorded against the project are kept and will
    be listed under "Unknown Project".
    """
    db = ctx.obj["db"]
    service = ProjectService(db)

    project_id = resolve_project_or_exit(ctx, service, project)
    project_obj = service.get_project(project_id)

    if not yes and not click.confirm(
        f"Are you sure you want to delete project '{project_obj.name}' (ID: {project_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_project(project_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted project '{project_obj.name}'")


def register_commands(cli):
    """Register project commands with main CLI."""
    cli.add_command(project_group, name="project")
