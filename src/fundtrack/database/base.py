"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from fundtrack.domain.entities import Donation, Expense, PaymentMethod, Project


class Database(ABC):
    """Abstract database interface for fundtrack.

    Lists are returned in insertion order. Updates replace the stored
    record that has the same id. Update and delete raise NotFoundError
    for unknown ids.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Project operations
    @abstractmethod
    def create_project(
        self, name: str, description: str, target_amount: Decimal, target_date: date
    ) -> int:
        """Create a project. Returns project ID."""
        pass

    @abstractmethod
    def get_project(self, project_id: int) -> Optional[Project]:
        """Get project by ID."""
        pass

    @abstractmethod
    def list_projects(self) -> list[Project]:
        """List all projects."""
        pass

    @abstractmethod
    def update_project(self, project: Project) -> None:
        """Replace the stored project with the same ID."""
        pass

    @abstractmethod
    def delete_project(self, project_id: int) -> None:
        """Delete a project. Donations and expenses are left untouched."""
        pass

    # Donation operations
    @abstractmethod
    def create_donation(
        self,
        amount: Decimal,
        donor_name: str,
        payment_method: PaymentMethod,
        date: date,
        project_id: int,
    ) -> int:
        """Create a donation. Returns donation ID."""
        pass

    @abstractmethod
    def get_donation(self, donation_id: int) -> Optional[Donation]:
        """Get donation by ID."""
        pass

    @abstractmethod
    def list_donations(self) -> list[Donation]:
        """List all donations."""
        pass

    @abstractmethod
    def list_donations_by_project(self, project_id: int) -> list[Donation]:
        """List donations credited to a project."""
        pass

    @abstractmethod
    def update_donation(self, donation: Donation) -> None:
        """Replace the stored donation with the same ID."""
        pass

    @abstractmethod
    def delete_donation(self, donation_id: int) -> None:
        """Delete a donation."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(
        self, amount: Decimal, description: str, date: date, project_id: int
    ) -> int:
        """Create an expense. Returns expense ID."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def list_expenses(self) -> list[Expense]:
        """List all expenses."""
        pass

    @abstractmethod
    def list_expenses_by_project(self, project_id: int) -> list[Expense]:
        """List expenses charged against a project."""
        pass

    @abstractmethod
    def update_expense(self, expense: Expense) -> None:
        """Replace the stored expense with the same ID."""
        pass

    @abstractmethod
    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense."""
        pass
