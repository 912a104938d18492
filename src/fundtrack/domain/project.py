"""Project domain service."""

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

from fundtrack.database.base import Database
from fundtrack.domain.entities import Project as ProjectEntity, has_fractional_cents
from fundtrack.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    amount_not_positive,
    amount_too_precise,
    duplicate_project_name,
    project_not_found,
    text_too_short,
)

logger = logging.getLogger(__name__)

MIN_NAME_LENGTH = 3
MIN_DESCRIPTION_LENGTH = 10


class ProjectService:
    """Service for managing fundraising projects.

    Project names are checked for uniqueness before the store is called.
    The check and the insert are separate store calls, so the rule holds
    for a single writer only.
    """

    def __init__(self, db: Database):
        """Initialize project service.

        Args:
            db: Database instance
        """
        self.db = db

    def _validate(
        self,
        name: str,
        description: str,
        target_amount: Decimal,
        exclude_id: Optional[int] = None,
    ) -> None:
        if len(name.strip()) < MIN_NAME_LENGTH:
            raise ValidationError(text_too_short("Name", MIN_NAME_LENGTH))
        if len(description.strip()) < MIN_DESCRIPTION_LENGTH:
            raise ValidationError(text_too_short("Description", MIN_DESCRIPTION_LENGTH))
        if target_amount <= 0:
            raise ValidationError(amount_not_positive("Target amount"))
        if has_fractional_cents(target_amount):
            raise ValidationError(amount_too_precise("Target amount"))

        for existing in self.db.list_projects():
            if existing.id != exclude_id and existing.name == name:
                raise ConflictError(duplicate_project_name(name))

    def create_project(
        self, name: str, description: str, target_amount: Decimal, target_date: date
    ) -> int:
        """Create a new project.

        Args:
            name: Project name (at least 3 characters, unique)
            description: Project description (at least 10 characters)
            target_amount: Fundraising target, must be positive
            target_date: Fundraising deadline

        Returns:
            Project ID

        Raises:
            ValidationError: If any field fails validation
            ConflictError: If a project with the same name exists
        """
        self._validate(name, description, target_amount)
        project_id = self.db.create_project(
            name=name,
            description=description,
            target_amount=target_amount,
            target_date=target_date,
        )
        logger.info("Created project %d (%s)", project_id, name)
        return project_id

    def get_project(self, project_id: int) -> Optional[ProjectEntity]:
        """Get project by ID.

        Args:
            project_id: Project ID

        Returns:
            Project entity or None if not found
        """
        return self.db.get_project(project_id)

    def require_project(self, project_id: int) -> ProjectEntity:
        """Get project by ID, raising NotFoundError if it does not exist."""
        project = self.db.get_project(project_id)
        if project is None:
            raise NotFoundError(project_not_found(project_id))
        return project

    def list_projects(self) -> list[ProjectEntity]:
        """List all projects in creation order."""
        return self.db.list_projects()

    def update_project(
        self,
        project_id: int,
        name: Optional[str] = None,
        description: Optional[str] = None,
        target_amount: Optional[Decimal] = None,
        target_date: Optional[date] = None,
    ) -> ProjectEntity:
        """Update a project, keeping any field that is not given.

        Returns:
            The stored replacement project

        Raises:
            NotFoundError: If the project does not exist
            ValidationError: If the resulting project fails validation
            ConflictError: If the new name belongs to another project
        """
        current = self.require_project(project_id)
        updated = replace(
            current,
            name=name if name is not None else current.name,
            description=description if description is not None else current.description,
            target_amount=target_amount if target_amount is not None else current.target_amount,
            target_date=target_date if target_date is not None else current.target_date,
        )
        self._validate(
            updated.name, updated.description, updated.target_amount, exclude_id=project_id
        )
        self.db.update_project(updated)
        logger.info("Updated project %d", project_id)
        return updated

    def delete_project(self, project_id: int) -> None:
        """Delete a project.

        Donations and expenses recorded against the project are kept and
        show up as belonging to an unknown project afterwards.

        Raises:
            NotFoundError: If the project does not exist
        """
        self.require_project(project_id)
        self.db.delete_project(project_id)
        logger.info("Deleted project %d", project_id)
