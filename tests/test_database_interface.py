"""Tests for Database implementations returning domain models."""

import threading
from dataclasses import replace
from datetime import date
from decimal import Decimal

import pytest

from fundtrack.domain import entities
from fundtrack.domain.donation import DonationService
from fundtrack.domain.entities import PaymentMethod
from fundtrack.domain.errors import NotFoundError, ValidationError
from fundtrack.domain.expense import ExpenseService
from fundtrack.domain.project import ProjectService


def _create_project(db, name="Food Bank Support", target="10000"):
    return db.create_project(
        name=name,
        description="Supporting local food banks",
        target_amount=Decimal(target),
        target_date=date(2023, 11, 30),
    )


def _create_donation(db, project_id, amount="250"):
    return db.create_donation(
        amount=Decimal(amount),
        donor_name="Jane Smith",
        payment_method=PaymentMethod.BANK_TRANSFER,
        date=date(2023, 9, 20),
        project_id=project_id,
    )


def _create_expense(db, project_id, amount="450"):
    return db.create_expense(
        amount=Decimal(amount),
        description="Food purchase for food bank",
        date=date(2023, 9, 22),
        project_id=project_id,
    )


class TestDatabaseInterface:
    """Behaviour shared by every Database implementation."""

    def test_get_project_returns_domain_model(self, any_db):
        project_id = _create_project(any_db)

        project = any_db.get_project(project_id)

        assert isinstance(project, entities.Project)
        assert project.id == project_id
        assert project.name == "Food Bank Support"
        assert project.target_amount == Decimal("10000")
        assert isinstance(project.target_amount, Decimal)
        assert project.target_date == date(2023, 11, 30)

    def test_get_missing_returns_none(self, any_db):
        assert any_db.get_project(123) is None
        assert any_db.get_donation(123) is None
        assert any_db.get_expense(123) is None

    def test_get_donation_returns_domain_model(self, any_db):
        project_id = _create_project(any_db)
        donation_id = _create_donation(any_db, project_id)

        donation = any_db.get_donation(donation_id)

        assert isinstance(donation, entities.Donation)
        assert donation.amount == Decimal("250")
        assert donation.donor_name == "Jane Smith"
        assert donation.payment_method is PaymentMethod.BANK_TRANSFER
        assert donation.date == date(2023, 9, 20)
        assert donation.project_id == project_id

    def test_get_expense_returns_domain_model(self, any_db):
        project_id = _create_project(any_db)
        expense_id = _create_expense(any_db, project_id)

        expense = any_db.get_expense(expense_id)

        assert isinstance(expense, entities.Expense)
        assert expense.amount == Decimal("450")
        assert expense.description == "Food purchase for food bank"

    def test_lists_keep_insertion_order(self, any_db):
        first = _create_project(any_db, name="Zebra Rescue")
        second = _create_project(any_db, name="Animal Shelter")

        assert [p.id for p in any_db.list_projects()] == [first, second]

    def test_list_by_project(self, any_db):
        p1 = _create_project(any_db, name="One")
        p2 = _create_project(any_db, name="Two")
        d1 = _create_donation(any_db, p1)
        _create_donation(any_db, p2)
        d3 = _create_donation(any_db, p1)
        e1 = _create_expense(any_db, p2)

        assert [d.id for d in any_db.list_donations_by_project(p1)] == [d1, d3]
        assert [e.id for e in any_db.list_expenses_by_project(p2)] == [e1]
        assert any_db.list_expenses_by_project(p1) == []
        assert len(any_db.list_donations()) == 3

    def test_update_replaces_record(self, any_db):
        project_id = _create_project(any_db)
        donation_id = _create_donation(any_db, project_id)

        project = any_db.get_project(project_id)
        any_db.update_project(replace(project, name="Renamed", target_amount=Decimal("12000")))
        donation = any_db.get_donation(donation_id)
        any_db.update_donation(replace(donation, payment_method=PaymentMethod.CHECK))

        assert any_db.get_project(project_id).name == "Renamed"
        assert any_db.get_project(project_id).target_amount == Decimal("12000")
        assert any_db.get_donation(donation_id).payment_method is PaymentMethod.CHECK

    def test_update_unknown_raises(self, any_db):
        ghost = entities.Expense(
            id=99, amount=Decimal("1"), description="Nothing here", date=date(2024, 1, 1), project_id=1
        )
        with pytest.raises(NotFoundError):
            any_db.update_expense(ghost)

    def test_delete_unknown_raises(self, any_db):
        with pytest.raises(NotFoundError):
            any_db.delete_project(5)
        with pytest.raises(NotFoundError):
            any_db.delete_donation(5)

    def test_delete_project_leaves_orphans(self, any_db):
        project_id = _create_project(any_db)
        donation_id = _create_donation(any_db, project_id)
        expense_id = _create_expense(any_db, project_id)

        any_db.delete_project(project_id)

        assert any_db.get_project(project_id) is None
        assert any_db.get_donation(donation_id).project_id == project_id
        assert any_db.get_expense(expense_id).project_id == project_id

    def test_ids_are_not_reused_after_deleting_newest(self, any_db):
        _create_project(any_db, name="First")
        newest = _create_project(any_db, name="Second")

        any_db.delete_project(newest)
        replacement = _create_project(any_db, name="Third")

        assert replacement > newest


class TestInMemoryDatabase:
    """Tests specific to InMemoryDatabase."""

    def test_list_is_a_snapshot(self, memory_db):
        _create_project(memory_db, name="One")
        snapshot = memory_db.list_projects()

        _create_project(memory_db, name="Two")

        assert len(snapshot) == 1
        assert len(memory_db.list_projects()) == 2

    def test_concurrent_creates_get_distinct_ids(self, memory_db):
        project_id = _create_project(memory_db)
        ids = []
        ids_lock = threading.Lock()

        def worker():
            for _ in range(50):
                donation_id = _create_donation(memory_db, project_id, amount="1")
                with ids_lock:
                    ids.append(donation_id)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(ids) == 400
        assert len(set(ids)) == 400
        assert len(memory_db.list_donations()) == 400

    def test_ids_start_at_one_per_entity(self, memory_db):
        project_id = _create_project(memory_db)
        assert project_id == 1
        assert _create_donation(memory_db, project_id) == 1
        assert _create_expense(memory_db, project_id) == 1


class TestAmountPrecision:
    """Amounts reach every store as whole cents or not at all."""

    @pytest.mark.parametrize("amount", ["0.004", "12.345", "100.001"])
    def test_fractional_cents_rejected_before_storing(self, any_db, amount):
        projects = ProjectService(any_db)
        donations = DonationService(any_db)
        expenses = ExpenseService(any_db)

        with pytest.raises(ValidationError, match="more than 2 decimal places"):
            projects.create_project(
                name="Food Bank Support",
                description="Supporting local food banks",
                target_amount=Decimal(amount),
                target_date=date(2023, 11, 30),
            )
        project_id = _create_project(any_db)
        with pytest.raises(ValidationError, match="more than 2 decimal places"):
            donations.create_donation(
                amount=Decimal(amount),
                donor_name="Jane Smith",
                payment_method=PaymentMethod.CASH,
                date=date(2023, 9, 20),
                project_id=project_id,
            )
        with pytest.raises(ValidationError, match="more than 2 decimal places"):
            expenses.create_expense(
                amount=Decimal(amount),
                description="Food purchase for food bank",
                date=date(2023, 9, 22),
                project_id=project_id,
            )

        assert [p.id for p in any_db.list_projects()] == [project_id]
        assert any_db.list_donations() == []
        assert any_db.list_expenses() == []

    @pytest.mark.parametrize("amount", ["12.34", "12.340", "0.01", "1E+3"])
    def test_cent_amounts_come_back_unchanged(self, any_db, amount):
        project_id = ProjectService(any_db).create_project(
            name="Food Bank Support",
            description="Supporting local food banks",
            target_amount=Decimal(amount),
            target_date=date(2023, 11, 30),
        )
        donation_id = DonationService(any_db).create_donation(
            amount=Decimal(amount),
            donor_name="Jane Smith",
            payment_method=PaymentMethod.CASH,
            date=date(2023, 9, 20),
            project_id=project_id,
        )

        assert any_db.get_project(project_id).target_amount == Decimal(amount)
        assert any_db.get_donation(donation_id).amount == Decimal(amount)

    def test_update_rejects_fractional_cents(self, any_db):
        projects = ProjectService(any_db)
        project_id = _create_project(any_db)

        with pytest.raises(ValidationError):
            projects.update_project(project_id, target_amount=Decimal("0.004"))

        assert any_db.get_project(project_id).target_amount == Decimal("10000")
