"""Shared pytest fixtures for fundtrack tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from fundtrack.database.factories import create_memory_database, create_sqlite_database
from fundtrack.domain.donation import DonationService
from fundtrack.domain.entities import PaymentMethod
from fundtrack.domain.expense import ExpenseService
from fundtrack.domain.project import ProjectService
from fundtrack.domain.reports import ReportingService


@pytest.fixture
def temp_db():
    """Create a temporary SQLite database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_db():
    """Create an empty in-memory database."""
    return create_memory_database()


@pytest.fixture(params=["memory", "sqlite"])
def any_db(request):
    """Run a test against every Database implementation."""
    if request.param == "memory":
        return request.getfixturevalue("memory_db")
    return request.getfixturevalue("temp_db")


@pytest.fixture
def project_service(temp_db):
    """Create a ProjectService with a temporary database."""
    return ProjectService(temp_db)


@pytest.fixture
def donation_service(temp_db):
    """Create a DonationService with a temporary database."""
    return DonationService(temp_db)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def reporting_service(temp_db):
    """Create a ReportingService with a temporary database."""
    return ReportingService(temp_db)


@pytest.fixture
def sample_project(project_service):
    """Create a sample project with a 5000 target."""
    project_id = project_service.create_project(
        name="School Supplies for Children",
        description="Providing school supplies for underprivileged children",
        target_amount=Decimal("5000"),
        target_date=date(2023, 12, 31),
    )
    return project_service.get_project(project_id)


@pytest.fixture
def second_project(project_service):
    """Create a second project with a 10000 target."""
    project_id = project_service.create_project(
        name="Food Bank Support",
        description="Supporting local food banks with resources",
        target_amount=Decimal("10000"),
        target_date=date(2023, 11, 30),
    )
    return project_service.get_project(project_id)


@pytest.fixture
def sample_donations(donation_service, sample_project):
    """Record two donations (100 and 500) against the sample project."""
    ids = [
        donation_service.create_donation(
            amount=Decimal("100"),
            donor_name="John Doe",
            payment_method=PaymentMethod.CREDIT_CARD,
            date=date(2023, 9, 15),
            project_id=sample_project.id,
        ),
        donation_service.create_donation(
            amount=Decimal("500"),
            donor_name="Michael Johnson",
            payment_method=PaymentMethod.PAYPAL,
            date=date(2023, 9, 25),
            project_id=sample_project.id,
        ),
    ]
    return [donation_service.get_donation(i) for i in ids]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
