"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so the schema can change without
touching the domain entities.
"""

from decimal import Decimal

from fundtrack.domain import entities as domain
from fundtrack.database.models import (
    Project as ORMProject,
    Donation as ORMDonation,
    Expense as ORMExpense,
)


def project_to_domain(orm_project: ORMProject) -> domain.Project:
    """Convert SQLAlchemy Project model to domain Project entity."""
    return domain.Project(
        id=orm_project.id,
        name=orm_project.name,
        description=orm_project.description,
        target_amount=Decimal(orm_project.target_amount),
        target_date=orm_project.target_date,
    )


def donation_to_domain(orm_donation: ORMDonation) -> domain.Donation:
    """Convert SQLAlchemy Donation model to domain Donation entity."""
    return domain.Donation(
        id=orm_donation.id,
        amount=Decimal(orm_donation.amount),
        donor_name=orm_donation.donor_name,
        payment_method=domain.PaymentMethod.parse(orm_donation.payment_method),
        date=orm_donation.date,
        project_id=orm_donation.project_id,
    )


def expense_to_domain(orm_expense: ORMExpense) -> domain.Expense:
    """Convert SQLAlchemy Expense model to domain Expense entity."""
    return domain.Expense(
        id=orm_expense.id,
        amount=Decimal(orm_expense.amount),
        description=orm_expense.description,
        date=orm_expense.date,
        project_id=orm_expense.project_id,
    )
