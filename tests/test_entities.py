"""Tests for domain entities."""

import pytest
from datetime import date
from decimal import Decimal

from fundtrack.domain.entities import (
    Donation,
    Expense,
    PaymentMethod,
    Project,
    ProjectFinancialSummary,
    has_fractional_cents,
)


class TestProject:
    """Tests for Project entity."""

    def test_create_project(self):
        """Test creating a Project entity."""
        project = Project(
            id=1,
            name="Food Bank Support",
            description="Supporting local food banks with resources",
            target_amount=Decimal("10000"),
            target_date=date(2023, 11, 30),
        )
        assert project.id == 1
        assert project.name == "Food Bank Support"
        assert project.target_amount == Decimal("10000")
        assert project.target_date == date(2023, 11, 30)

    def test_project_immutability(self):
        """Test that Project entities are immutable."""
        project = Project(
            id=1,
            name="Test",
            description="Test project",
            target_amount=Decimal("100"),
            target_date=date(2024, 1, 1),
        )
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            project.name = "New Name"

    def test_project_equality(self):
        """Test Project entity equality."""
        kwargs = dict(
            name="Test", description="Test project", target_amount=Decimal("100"), target_date=date(2024, 1, 1)
        )
        assert Project(id=1, **kwargs) == Project(id=1, **kwargs)
        assert Project(id=1, **kwargs) != Project(id=2, **kwargs)


class TestDonation:
    """Tests for Donation entity."""

    def test_create_donation(self):
        """Test creating a Donation entity."""
        donation = Donation(
            id=1,
            amount=Decimal("250"),
            donor_name="Jane Smith",
            payment_method=PaymentMethod.BANK_TRANSFER,
            date=date(2023, 9, 20),
            project_id=2,
        )
        assert donation.amount == Decimal("250")
        assert donation.payment_method is PaymentMethod.BANK_TRANSFER
        assert donation.project_id == 2

    def test_donation_immutability(self):
        """Test that Donation entities are immutable."""
        donation = Donation(
            id=1,
            amount=Decimal("250"),
            donor_name="Jane Smith",
            payment_method=PaymentMethod.CASH,
            date=date(2023, 9, 20),
            project_id=2,
        )
        with pytest.raises(Exception):
            donation.amount = Decimal("1")


class TestExpense:
    """Tests for Expense entity."""

    def test_create_expense(self):
        """Test creating an Expense entity."""
        expense = Expense(
            id=3,
            amount=Decimal("200"),
            description="Office supplies for volunteer coordination",
            date=date(2023, 9, 26),
            project_id=3,
        )
        assert expense.id == 3
        assert expense.description.startswith("Office supplies")


class TestPaymentMethod:
    """Tests for PaymentMethod parsing."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("Credit Card", PaymentMethod.CREDIT_CARD),
            ("credit card", PaymentMethod.CREDIT_CARD),
            ("CREDIT_CARD", PaymentMethod.CREDIT_CARD),
            ("paypal", PaymentMethod.PAYPAL),
            ("  Check ", PaymentMethod.CHECK),
            (PaymentMethod.OTHER, PaymentMethod.OTHER),
        ],
    )
    def test_parse(self, value, expected):
        assert PaymentMethod.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown payment method"):
            PaymentMethod.parse("Bitcoin")

    def test_value_is_label(self):
        assert PaymentMethod.BANK_TRANSFER.value == "Bank Transfer"
        assert len(list(PaymentMethod)) == 6


def test_summary_loss_flag():
    summary = ProjectFinancialSummary(
        total_donations=Decimal("100"),
        total_expenses=Decimal("150"),
        progress_percent=10,
        remaining=Decimal("900"),
        balance=Decimal("-50"),
        days_remaining=0,
    )
    assert summary.is_loss


@pytest.mark.parametrize(
    "amount,expected",
    [
        ("12.34", False),
        ("12.340", False),
        ("100", False),
        ("1E+3", False),
        ("0.004", True),
        ("12.345", True),
    ],
)
def test_has_fractional_cents(amount, expected):
    assert has_fractional_cents(Decimal(amount)) is expected
