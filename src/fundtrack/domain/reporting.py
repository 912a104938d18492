"""Reporting engine: derived financial views over projects, donations and expenses.

Every function here is pure. Inputs are never mutated and the same inputs
always produce equal outputs, so callers may recompute on every render.
"""

import math
from datetime import date, datetime, time
from decimal import Decimal, ROUND_FLOOR
from typing import Callable, Iterable, Sequence, TypeVar, Union

from fundtrack.domain.entities import (
    DashboardStats,
    Donation,
    Expense,
    Project,
    ProjectAmount,
    ProjectFinancialSummary,
    ProjectProgress,
)
from fundtrack.domain.errors import UNKNOWN_PROJECT, ValidationError, amount_not_positive

T = TypeVar("T")

ZERO = Decimal("0")
SECONDS_PER_DAY = 24 * 60 * 60


def sum_amounts(records: Iterable[Union[Donation, Expense]]) -> Decimal:
    """Sum the ``amount`` of each record."""
    return sum((record.amount for record in records), ZERO)


def _raised_by_project(donations: Iterable[Donation]) -> dict[int, Decimal]:
    totals: dict[int, Decimal] = {}
    for donation in donations:
        totals[donation.project_id] = totals.get(donation.project_id, ZERO) + donation.amount
    return totals


def _spent_by_project(expenses: Iterable[Expense]) -> dict[int, Decimal]:
    totals: dict[int, Decimal] = {}
    for expense in expenses:
        totals[expense.project_id] = totals.get(expense.project_id, ZERO) + expense.amount
    return totals


def compute_dashboard_stats(
    projects: Sequence[Project],
    donations: Sequence[Donation],
    expenses: Sequence[Expense],
) -> DashboardStats:
    """Compute dashboard totals and per-project breakdowns.

    A project counts as completed once its donations meet or exceed its
    target amount. Every other project counts as active, including projects
    whose target date has already passed.

    Breakdowns follow the order of ``projects`` and include projects with
    nothing recorded against them.
    """
    raised = _raised_by_project(donations)
    spent = _spent_by_project(expenses)

    completed = sum(
        1 for project in projects if raised.get(project.id, ZERO) >= project.target_amount
    )

    return DashboardStats(
        total_donations=sum_amounts(donations),
        total_expenses=sum_amounts(expenses),
        active_projects=len(projects) - completed,
        completed_projects=completed,
        donations_by_project=tuple(
            ProjectAmount(project_name=project.name, amount=raised.get(project.id, ZERO))
            for project in projects
        ),
        expenses_by_project=tuple(
            ProjectAmount(project_name=project.name, amount=spent.get(project.id, ZERO))
            for project in projects
        ),
    )


def compute_project_progress_percent(
    project_id: int, target_amount: Decimal, donations: Iterable[Donation]
) -> int:
    """Return the share of ``target_amount`` raised, as a whole percentage.

    Halves round up and the result is capped at 100.

    Raises:
        ValidationError: If target_amount is not positive
    """
    if target_amount <= 0:
        raise ValidationError(amount_not_positive("Target amount"))

    raised = sum_amounts(d for d in donations if d.project_id == project_id)
    ratio = Decimal(raised) * 100 / Decimal(target_amount)
    percent = int((ratio + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))
    return min(percent, 100)


def compute_days_remaining(target_date: date, now: Union[date, datetime]) -> int:
    """Return whole days left until ``target_date``, never less than zero.

    ``now`` may be a date or a datetime. A datetime is measured against
    midnight at the start of ``target_date`` in the same timezone and
    partial days count as a full day.
    """
    if isinstance(now, datetime):
        deadline = datetime.combine(target_date, time.min, tzinfo=now.tzinfo)
        days = math.ceil((deadline - now).total_seconds() / SECONDS_PER_DAY)
    else:
        days = (target_date - now).days
    return max(days, 0)


def compute_project_financial_summary(
    project: Project,
    donations: Iterable[Donation],
    expenses: Iterable[Expense],
    now: Union[date, datetime],
) -> ProjectFinancialSummary:
    """Build the financial summary for one project.

    Records belonging to other projects are ignored, so the full
    collections may be passed in.
    """
    project_donations = [d for d in donations if d.project_id == project.id]
    project_expenses = [e for e in expenses if e.project_id == project.id]

    total_donations = sum_amounts(project_donations)
    total_expenses = sum_amounts(project_expenses)

    return ProjectFinancialSummary(
        total_donations=total_donations,
        total_expenses=total_expenses,
        progress_percent=compute_project_progress_percent(
            project.id, project.target_amount, project_donations
        ),
        remaining=max(project.target_amount - total_donations, ZERO),
        balance=total_donations - total_expenses,
        days_remaining=compute_days_remaining(project.target_date, now),
    )


def compute_project_progress(
    projects: Sequence[Project],
    donations: Sequence[Donation],
    now: Union[date, datetime],
) -> list[ProjectProgress]:
    """Build list view rows for ``projects`` in their given order."""
    return [
        ProjectProgress(
            project=project,
            progress_percent=compute_project_progress_percent(
                project.id, project.target_amount, donations
            ),
            days_remaining=compute_days_remaining(project.target_date, now),
        )
        for project in projects
    ]


def resolve_project_name(project_id: int, projects: Iterable[Project]) -> str:
    """Return the name of the project, or "Unknown Project" if it is gone."""
    for project in projects:
        if project.id == project_id:
            return project.name
    return UNKNOWN_PROJECT


def filter_by_text(
    items: Iterable[T], fields: Sequence[Callable[[T], str]], query: str
) -> list[T]:
    """Keep the items where any field contains ``query``, ignoring case.

    Relative order is preserved and an empty query keeps everything.
    """
    needle = (query or "").lower()
    if not needle:
        return list(items)
    return [
        item for item in items if any(needle in (field(item) or "").lower() for field in fields)
    ]


def filter_donations(
    donations: Iterable[Donation], projects: Sequence[Project], query: str
) -> list[Donation]:
    """Match donations by donor name or project name."""
    names = {project.id: project.name for project in projects}
    return filter_by_text(
        donations,
        (
            lambda d: d.donor_name,
            lambda d: names.get(d.project_id, UNKNOWN_PROJECT),
        ),
        query,
    )


def filter_expenses(
    expenses: Iterable[Expense], projects: Sequence[Project], query: str
) -> list[Expense]:
    """Match expenses by description or project name."""
    names = {project.id: project.name for project in projects}
    return filter_by_text(
        expenses,
        (
            lambda e: e.description,
            lambda e: names.get(e.project_id, UNKNOWN_PROJECT),
        ),
        query,
    )


def filter_projects(projects: Iterable[Project], query: str) -> list[Project]:
    """Match projects by name or description."""
    return filter_by_text(projects, (lambda p: p.name, lambda p: p.description), query)
