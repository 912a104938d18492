"""Load sample projects, donations and expenses."""

from datetime import date
from decimal import Decimal

import click
from fundtrack.domain.donation import DonationService
from fundtrack.domain.entities import PaymentMethod
from fundtrack.domain.expense import ExpenseService
from fundtrack.domain.project import ProjectService


# (name, description, target amount, target date)
SAMPLE_PROJECTS = [
    (
        "School Supplies for Children",
        "Providing school supplies for underprivileged children",
        Decimal("5000"),
        date(2023, 12, 31),
    ),
    (
        "Food Bank Support",
        "Supporting local food banks with resources",
        Decimal("10000"),
        date(2023, 11, 30),
    ),
    (
        "Medical Aid Program",
        "Providing medical aid to communities in need",
        Decimal("15000"),
        date(2024, 3, 31),
    ),
]

# (project name, amount, donor, payment method, date)
SAMPLE_DONATIONS = [
    ("School Supplies for Children", Decimal("100"), "John Doe", PaymentMethod.CREDIT_CARD, date(2023, 9, 15)),
    ("Food Bank Support", Decimal("250"), "Jane Smith", PaymentMethod.BANK_TRANSFER, date(2023, 9, 20)),
    ("School Supplies for Children", Decimal("500"), "Michael Johnson", PaymentMethod.PAYPAL, date(2023, 9, 25)),
    ("Medical Aid Program", Decimal("1000"), "Sarah Williams", PaymentMethod.CHECK, date(2023, 9, 28)),
]

# (project name, amount, description, date)
SAMPLE_EXPENSES = [
    ("School Supplies for Children", Decimal("300"), "Purchase of school notebooks", date(2023, 9, 18)),
    ("Food Bank Support", Decimal("450"), "Food purchase for food bank", date(2023, 9, 22)),
    ("Medical Aid Program", Decimal("200"), "Office supplies for volunteer coordination", date(2023, 9, 26)),
]


@click.command("init-sample")
@click.option("--force", is_flag=True, help="Load sample data even if projects already exist")
@click.pass_context
def init_sample(ctx, force: bool):
    """Load a small set of sample projects, donations and expenses."""
    db = ctx.obj["db"]
    project_service = ProjectService(db)
    donation_service = DonationService(db)
    expense_service = ExpenseService(db)

    if project_service.list_projects() and not force:
        click.echo("Projects already exist. Use --force to load sample data anyway.")
        return

    click.echo("Loading sample data...")

    project_ids: dict[str, int] = {}
    errors = 0

    for name, description, target_amount, target_date in SAMPLE_PROJECTS:
        try:
            project_ids[name] = project_service.create_project(
                name=name,
                description=description,
                target_amount=target_amount,
                target_date=target_date,
            )
        except ValueError as e:
            click.echo(f"Warning: Could not create project '{name}': {e}", err=True)
            errors += 1

    donations = 0
    for project_name, amount, donor, method, received in SAMPLE_DONATIONS:
        if project_name not in project_ids:
            continue
        donation_service.create_donation(
            amount=amount,
            donor_name=donor,
            payment_method=method,
            date=received,
            project_id=project_ids[project_name],
        )
        donations += 1

    expenses = 0
    for project_name, amount, description, spent_on in SAMPLE_EXPENSES:
        if project_name not in project_ids:
            continue
        expense_service.create_expense(
            amount=amount,
            description=description,
            date=spent_on,
            project_id=project_ids[project_name],
        )
        expenses += 1

    summary = f"{len(project_ids)} projects, {donations} donations and {expenses} expenses"
    if errors == 0:
        click.echo(f"Successfully loaded {summary}.")
    else:
        click.echo(f"Loaded {summary} with {errors} errors.")


def register_commands(cli):
    """Register init-sample command with main CLI."""
    cli.add_command(init_sample)
