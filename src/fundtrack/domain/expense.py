"""Expense domain service."""

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

from fundtrack.database.base import Database
from fundtrack.domain.entities import Expense as ExpenseEntity, has_fractional_cents
from fundtrack.domain.errors import (
    NotFoundError,
    ValidationError,
    amount_not_positive,
    amount_too_precise,
    expense_not_found,
    project_not_found,
    text_too_short,
)

logger = logging.getLogger(__name__)

MIN_DESCRIPTION_LENGTH = 5


class ExpenseService:
    """Service for recording expenses."""

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    def _validate(self, amount: Decimal, description: str) -> None:
        if amount <= 0:
            raise ValidationError(amount_not_positive("Amount"))
        if has_fractional_cents(amount):
            raise ValidationError(amount_too_precise("Amount"))
        if len(description.strip()) < MIN_DESCRIPTION_LENGTH:
            raise ValidationError(text_too_short("Description", MIN_DESCRIPTION_LENGTH))

    def _require_project(self, project_id: int) -> None:
        if self.db.get_project(project_id) is None:
            raise NotFoundError(project_not_found(project_id))

    def create_expense(
        self, amount: Decimal, description: str, date: date, project_id: int
    ) -> int:
        """Record an expense against a project.

        Args:
            amount: Amount spent, must be positive
            description: What the money was spent on (at least 5 characters)
            date: Date of the expense
            project_id: Project the expense is charged to

        Returns:
            Expense ID

        Raises:
            ValidationError: If any field fails validation
            NotFoundError: If the project does not exist
        """
        self._validate(amount, description)
        self._require_project(project_id)

        expense_id = self.db.create_expense(
            amount=amount, description=description, date=date, project_id=project_id
        )
        logger.info("Recorded expense %d of %s for project %d", expense_id, amount, project_id)
        return expense_id

    def get_expense(self, expense_id: int) -> Optional[ExpenseEntity]:
        """Get expense by ID."""
        return self.db.get_expense(expense_id)

    def require_expense(self, expense_id: int) -> ExpenseEntity:
        """Get expense by ID, raising NotFoundError if it does not exist."""
        expense = self.db.get_expense(expense_id)
        if expense is None:
            raise NotFoundError(expense_not_found(expense_id))
        return expense

    def list_expenses(self) -> list[ExpenseEntity]:
        """List all expenses."""
        return self.db.list_expenses()

    def list_by_project(self, project_id: int) -> list[ExpenseEntity]:
        """List expenses charged against a project."""
        return self.db.list_expenses_by_project(project_id)

    def update_expense(
        self,
        expense_id: int,
        amount: Optional[Decimal] = None,
        description: Optional[str] = None,
        date: Optional[date] = None,
        project_id: Optional[int] = None,
    ) -> ExpenseEntity:
        """Update an expense, keeping any field that is not given.

        Raises:
            NotFoundError: If the expense or new project does not exist
            ValidationError: If the resulting expense fails validation
        """
        current = self.require_expense(expense_id)
        updated = replace(
            current,
            amount=amount if amount is not None else current.amount,
            description=description if description is not None else current.description,
            date=date if date is not None else current.date,
            project_id=project_id if project_id is not None else current.project_id,
        )
        self._validate(updated.amount, updated.description)
        if updated.project_id != current.project_id:
            self._require_project(updated.project_id)

        self.db.update_expense(updated)
        logger.info("Updated expense %d", expense_id)
        return updated

    def delete_expense(self, expense_id: int) -> None:
        """Delete an expense.

        Raises:
            NotFoundError: If the expense does not exist
        """
        self.db.delete_expense(expense_id)
        logger.info("Deleted expense %d", expense_id)
