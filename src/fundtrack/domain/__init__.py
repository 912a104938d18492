"""Domain layer for fundtrack application.

Services live in their own modules (``fundtrack.domain.project`` and so on)
and are not re-exported here, since the database layer imports entities
from this package.
"""

from fundtrack.domain.entities import (
    DashboardStats,
    Donation,
    Expense,
    PaymentMethod,
    Project,
    ProjectAmount,
    ProjectFinancialSummary,
    ProjectProgress,
)

__all__ = [
    "DashboardStats",
    "Donation",
    "Expense",
    "PaymentMethod",
    "Project",
    "ProjectAmount",
    "ProjectFinancialSummary",
    "ProjectProgress",
]
