"""In-memory database implementation."""

import itertools
import logging
import threading
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Callable, Generic, Optional, TypeVar

from fundtrack.database.base import Database
from fundtrack.domain.entities import Donation, Expense, PaymentMethod, Project
from fundtrack.domain.errors import (
    NotFoundError,
    donation_not_found,
    expense_not_found,
    project_not_found,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", Project, Donation, Expense)


class _Table(Generic[E]):
    """Records keyed by id with a monotonic id counter.

    Python dicts keep insertion order, which doubles as the list order.
    Ids come from a counter that only moves forward, so deleting the
    newest record never frees its id for reuse.
    """

    def __init__(self, not_found: Callable[[int], str]):
        self._rows: dict[int, E] = {}
        self._ids = itertools.count(1)
        self._not_found = not_found

    def insert(self, record: E) -> int:
        record_id = next(self._ids)
        self._rows[record_id] = replace(record, id=record_id)
        return record_id

    def get(self, record_id: int) -> Optional[E]:
        return self._rows.get(record_id)

    def all(self) -> list[E]:
        return list(self._rows.values())

    def replace(self, record: E) -> None:
        if record.id not in self._rows:
            raise NotFoundError(self._not_found(record.id))
        self._rows[record.id] = record

    def delete(self, record_id: int) -> None:
        if self._rows.pop(record_id, None) is None:
            raise NotFoundError(self._not_found(record_id))


class InMemoryDatabase(Database):
    """Process-local store for projects, donations and expenses.

    All access goes through a single re-entrant lock. A write is never
    observed half-applied and readers receive snapshot lists that later
    writes do not change.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._projects: _Table[Project] = _Table(project_not_found)
        self._donations: _Table[Donation] = _Table(donation_not_found)
        self._expenses: _Table[Expense] = _Table(expense_not_found)

    def connect(self) -> None:
        """Connect to the database."""
        # Nothing to connect to
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Project operations
    def create_project(
        self, name: str, description: str, target_amount: Decimal, target_date: date
    ) -> int:
        """Create a project. Returns project ID."""
        with self._lock:
            project_id = self._projects.insert(
                Project(
                    id=0,
                    name=name,
                    description=description,
                    target_amount=target_amount,
                    target_date=target_date,
                )
            )
        logger.debug("Stored project %d", project_id)
        return project_id

    def get_project(self, project_id: int) -> Optional[Project]:
        """Get project by ID."""
        with self._lock:
            return self._projects.get(project_id)

    def list_projects(self) -> list[Project]:
        """List all projects."""
        with self._lock:
            return self._projects.all()

    def update_project(self, project: Project) -> None:
        """Replace the stored project with the same ID."""
        with self._lock:
            self._projects.replace(project)
        logger.debug("Replaced project %d", project.id)

    def delete_project(self, project_id: int) -> None:
        """Delete a project. Donations and expenses are left untouched."""
        with self._lock:
            self._projects.delete(project_id)
        logger.debug("Deleted project %d", project_id)

    # Donation operations
    def create_donation(
        self,
        amount: Decimal,
        donor_name: str,
        payment_method: PaymentMethod,
        date: date,
        project_id: int,
    ) -> int:
        """Create a donation. Returns donation ID."""
        with self._lock:
            donation_id = self._donations.insert(
                Donation(
                    id=0,
                    amount=amount,
                    donor_name=donor_name,
                    payment_method=payment_method,
                    date=date,
                    project_id=project_id,
                )
            )
        logger.debug("Stored donation %d", donation_id)
        return donation_id

    def get_donation(self, donation_id: int) -> Optional[Donation]:
        """Get donation by ID."""
        with self._lock:
            return self._donations.get(donation_id)

    def list_donations(self) -> list[Donation]:
        """List all donations."""
        with self._lock:
            return self._donations.all()

    def list_donations_by_project(self, project_id: int) -> list[Donation]:
        """List donations credited to a project."""
        with self._lock:
            return [d for d in self._donations.all() if d.project_id == project_id]

    def update_donation(self, donation: Donation) -> None:
        """Replace the stored donation with the same ID."""
        with self._lock:
            self._donations.replace(donation)
        logger.debug("Replaced donation %d", donation.id)

    def delete_donation(self, donation_id: int) -> None:
        """Delete a donation."""
        with self._lock:
            self._donations.delete(donation_id)
        logger.debug("Deleted donation %d", donation_id)

    # Expense operations
    def create_expense(
        self, amount: Decimal, description: str, date: date, project_id: int
    ) -> int:
        """Create an expense. Returns expense ID."""
        with self._lock:
            expense_id = self._expenses.insert(
                Expense(
                    id=0,
                    amount=amount,
                    description=description,
                    date=date,
                    project_id=project_id,
                )
            )
        logger.debug("Stored expense %d", expense_id)
        return expense_id

    def get_expense(self, expense_id: int) -> Optional[Expense]:
        """Get expense by ID."""
        with self._lock:
            return self._expenses.get(expense_id)

    def list_expenses(self) -> list[Expense]:
        """List all expenses."""
        with self._lock:
            return self._expenses.all()

    def list_expenses_by_project(self, project_id: int) -> list[Expense]:
        """List expenses charged against a project."""
        with self._lock:
            return [e for e in self._expenses.all() if e.project_id == project_id]

    def update_expense(self, expense: Expense) -> None:
        """Replace the stored expense with the same ID."""
        with self._lock:
            self._expenses.replace(expense)
        logger.debug("Replaced expense %d", expense.id)

    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense."""
        with self._lock:
            self._expenses.delete(expense_id)
        logger.debug("Deleted expense %d", expense_id)
