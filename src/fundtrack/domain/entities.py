"""Domain model entities for fundtrack.

These are pure data classes representing business concepts, independent of
the storage backend. Entities are immutable: updating a record means
replacing it with a new instance carrying the same id.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class PaymentMethod(str, Enum):
    """Accepted donation payment methods."""

    CREDIT_CARD = "Credit Card"
    BANK_TRANSFER = "Bank Transfer"
    CHECK = "Check"
    CASH = "Cash"
    PAYPAL = "PayPal"
    OTHER = "Other"

    @classmethod
    def parse(cls, value: "str | PaymentMethod") -> "PaymentMethod":
        """Parse a payment method from its label or member name.

        Matching is case-insensitive, so "paypal", "PayPal" and "PAYPAL"
        all resolve to PaymentMethod.PAYPAL.

        Raises:
            ValueError: If the value is not a known payment method
        """
        if isinstance(value, cls):
            return value
        needle = str(value).strip().lower()
        for method in cls:
            if needle in (method.value.lower(), method.name.lower()):
                return method
        choices = ", ".join(method.value for method in cls)
        raise ValueError(f"Unknown payment method '{value}'. Choose one of: {choices}")


# Stored amounts are whole cents
AMOUNT_DECIMAL_PLACES = 2


def has_fractional_cents(amount: Decimal) -> bool:
    """Return True if amount carries precision below one cent."""
    return Decimal(amount).normalize().as_tuple().exponent < -AMOUNT_DECIMAL_PLACES


@dataclass(frozen=True)
class Project:
    """Fundraising project domain entity."""

    id: int
    name: str
    description: str
    target_amount: Decimal
    target_date: date


@dataclass(frozen=True)
class Donation:
    """Donation domain entity credited to a project."""

    id: int
    amount: Decimal
    donor_name: str
    payment_method: PaymentMethod
    date: date
    project_id: int


@dataclass(frozen=True)
class Expense:
    """Expense domain entity charged against a project."""

    id: int
    amount: Decimal
    description: str
    date: date
    project_id: int


@dataclass(frozen=True)
class ProjectAmount:
    """Per-project amount row used in dashboard breakdowns."""

    project_name: str
    amount: Decimal


@dataclass(frozen=True)
class DashboardStats:
    """Aggregate figures shown on the dashboard."""

    total_donations: Decimal
    total_expenses: Decimal
    active_projects: int
    completed_projects: int
    donations_by_project: tuple[ProjectAmount, ...]
    expenses_by_project: tuple[ProjectAmount, ...]


@dataclass(frozen=True)
class ProjectFinancialSummary:
    """Financial view of a single project.

    ``remaining`` never drops below zero while ``balance`` may be negative
    when expenses exceed donations.
    """

    total_donations: Decimal
    total_expenses: Decimal
    progress_percent: int
    remaining: Decimal
    balance: Decimal
    days_remaining: int

    @property
    def is_loss(self) -> bool:
        return self.balance < 0


@dataclass(frozen=True)
class ProjectProgress:
    """Row of the projects list view."""

    project: Project
    progress_percent: int
    days_remaining: int
