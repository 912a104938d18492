"""Expense commands."""

import click
from fundtrack.cli.error_handling import handle_domain_error
from fundtrack.cli.input_parsing import parse_amount_or_exit, parse_date_or_exit
from fundtrack.cli.project_resolution import resolve_project_or_exit
from fundtrack.domain.errors import UNKNOWN_PROJECT
from fundtrack.domain.expense import ExpenseService
from fundtrack.domain.project import ProjectService
from fundtrack.domain.reports import ReportingService
from fundtrack.utils.currency import format_currency


@click.group()
def expense_group():
    """Record and review expenses."""
    pass


@expense_group.command("add")
@click.option("--project", required=True, help="Project name or ID")
@click.option("--amount", required=True, help="Amount spent")
@click.option("--description", required=True, help="What the money was spent on (at least 5 characters)")
@click.option("--date", "date_str", default="today", show_default=True, help="Date of the expense")
@click.pass_context
def add_expense(ctx, project: str, amount: str, description: str, date_str: str):
    """Record an expense.

    Examples:
        fundtrack expense add --project "Food Bank Support" --amount 450 --description "Food purchase for food bank"
        fundtrack expense add --project 1 --amount 300 --description "School notebooks" --date 2024-09-18
    """
    db = ctx.obj["db"]
    service = ExpenseService(db)
    project_service = ProjectService(db)

    project_id = resolve_project_or_exit(ctx, project_service, project)
    expense_amount = parse_amount_or_exit(ctx, amount)
    spent_on = parse_date_or_exit(ctx, date_str, "date")

    try:
        expense_id = service.create_expense(
            amount=expense_amount,
            description=description,
            date=spent_on,
            project_id=project_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Recorded expense {expense_id}")
    click.echo(f"  Amount: {format_currency(expense_amount)}")
    click.echo(f"  Project: {project_service.get_project(project_id).name}")


@expense_group.command("list")
@click.option("--search", default="", help="Only show expenses whose description or project name contains this text")
@click.pass_context
def list_expenses(ctx, search: str):
    """List expenses."""
    db = ctx.obj["db"]
    reporting = ReportingService(db)

    expenses = reporting.search_expenses(search)
    if not expenses:
        click.echo("No expenses found.")
        return

    names = reporting.project_names()
    click.echo(f"\nFound {len(expenses)} expense(s):")
    click.echo("-" * 100)
    click.echo(f"{'ID':<5} {'Date':<12} {'Description':<40} {'Project':<28} {'Amount':>12}")
    click.echo("-" * 100)
    for expense in expenses:
        project_name = names.get(expense.project_id, UNKNOWN_PROJECT)
        click.echo(
            f"{expense.id:<5} {expense.date.isoformat():<12} {expense.description[:40]:<40} "
            f"{project_name[:28]:<28} {format_currency(expense.amount):>12}"
        )


@expense_group.command("edit")
@click.argument("expense_id", type=int, metavar="EXPENSE_ID")
@click.option("--project", help="Move the expense to another project (name or ID)")
@click.option("--amount", help="New amount")
@click.option("--description", help="New description")
@click.option("--date", "date_str", help="New date")
@click.pass_context
def edit_expense(
    ctx,
    expense_id: int,
    project: str | None,
    amount: str | None,
    description: str | None,
    date_str: str | None,
) -> None:
    """Edit an expense. Only the given fields change."""
    db = ctx.obj["db"]
    service = ExpenseService(db)

    project_id = None
    if project is not None:
        project_id = resolve_project_or_exit(ctx, ProjectService(db), project)

    try:
        service.update_expense(
            expense_id,
            amount=parse_amount_or_exit(ctx, amount),
            description=description,
            date=parse_date_or_exit(ctx, date_str, "date"),
            project_id=project_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated expense {expense_id}")


@expense_group.command("delete")
@click.argument("expense_id", type=int, metavar="EXPENSE_ID")
@click.option("--yes", "-y", is_flag=True, help="Skip the confirmation prompt")
@click.pass_context
def delete_expense(ctx, expense_id: int, yes: bool) -> None:
    """Delete an expense."""
    db = ctx.obj["db"]
    service = ExpenseService(db)

    try:
        expense = service.require_expense(expense_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Are you sure you want to delete expense '{expense.description}' (ID: {expense_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_expense(expense_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Deleted expense {expense_id}")


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group, name="expense")
