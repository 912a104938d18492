"""Reporting domain service.

Reads the current collections from the database and hands them to the
pure functions in ``fundtrack.domain.reporting``. Nothing is cached; every
call recomputes from what is stored.
"""

from datetime import date, datetime
from typing import Optional, Union

from fundtrack.database.base import Database
from fundtrack.domain import reporting
from fundtrack.domain.entities import (
    DashboardStats,
    Donation,
    Expense,
    Project,
    ProjectFinancialSummary,
    ProjectProgress,
)
from fundtrack.domain.errors import NotFoundError, project_not_found


class ReportingService:
    """Service for dashboard and per-project financial reports."""

    def __init__(self, db: Database):
        """Initialize reporting service.

        Args:
            db: Database instance
        """
        self.db = db

    def dashboard_stats(self) -> DashboardStats:
        """Compute dashboard statistics over everything stored."""
        return reporting.compute_dashboard_stats(
            self.db.list_projects(),
            self.db.list_donations(),
            self.db.list_expenses(),
        )

    def project_summary(
        self, project_id: int, now: Union[date, datetime]
    ) -> tuple[Project, ProjectFinancialSummary]:
        """Compute the financial summary for one project.

        Args:
            project_id: Project ID
            now: Reference point for the days remaining

        Returns:
            Tuple of (project, summary)

        Raises:
            NotFoundError: If the project does not exist
        """
        project = self.db.get_project(project_id)
        if project is None:
            raise NotFoundError(project_not_found(project_id))

        summary = reporting.compute_project_financial_summary(
            project,
            self.db.list_donations_by_project(project_id),
            self.db.list_expenses_by_project(project_id),
            now,
        )
        return project, summary

    def project_progress(
        self, now: Union[date, datetime], query: str = ""
    ) -> list[ProjectProgress]:
        """Progress rows for the projects matching ``query``."""
        projects = reporting.filter_projects(self.db.list_projects(), query)
        return reporting.compute_project_progress(projects, self.db.list_donations(), now)

    def search_donations(self, query: str = "") -> list[Donation]:
        """Donations whose donor or project name contains ``query``."""
        return reporting.filter_donations(
            self.db.list_donations(), self.db.list_projects(), query
        )

    def search_expenses(self, query: str = "") -> list[Expense]:
        """Expenses whose description or project name contains ``query``."""
        return reporting.filter_expenses(
            self.db.list_expenses(), self.db.list_projects(), query
        )

    def project_donations(self, project_id: int, limit: Optional[int] = None) -> list[Donation]:
        """Donations for a project in recorded order, optionally truncated."""
        donations = self.db.list_donations_by_project(project_id)
        return donations if limit is None else donations[:limit]

    def project_expenses(self, project_id: int, limit: Optional[int] = None) -> list[Expense]:
        """Expenses for a project in recorded order, optionally truncated."""
        expenses = self.db.list_expenses_by_project(project_id)
        return expenses if limit is None else expenses[:limit]

    def project_names(self) -> dict[int, str]:
        """Map of project ID to name for rendering foreign keys."""
        return {project.id: project.name for project in self.db.list_projects()}
