"""Donation domain service."""

import logging
from dataclasses import replace
from datetime import date
from decimal import Decimal
from typing import Optional

from fundtrack.database.base import Database
from fundtrack.domain.entities import (
    Donation as DonationEntity,
    PaymentMethod,
    has_fractional_cents,
)
from fundtrack.domain.errors import (
    NotFoundError,
    ValidationError,
    amount_not_positive,
    amount_too_precise,
    donation_not_found,
    project_not_found,
    text_too_short,
)

logger = logging.getLogger(__name__)

MIN_DONOR_NAME_LENGTH = 2


class DonationService:
    """Service for recording donations."""

    def __init__(self, db: Database):
        """Initialize donation service.

        Args:
            db: Database instance
        """
        self.db = db

    def _validate(self, amount: Decimal, donor_name: str) -> None:
        if amount <= 0:
            raise ValidationError(amount_not_positive("Amount"))
        if has_fractional_cents(amount):
            raise ValidationError(amount_too_precise("Amount"))
        if len(donor_name.strip()) < MIN_DONOR_NAME_LENGTH:
            raise ValidationError(text_too_short("Donor name", MIN_DONOR_NAME_LENGTH))

    def _require_project(self, project_id: int) -> None:
        if self.db.get_project(project_id) is None:
            raise NotFoundError(project_not_found(project_id))

    def _parse_method(self, payment_method: "str | PaymentMethod") -> PaymentMethod:
        try:
            return PaymentMethod.parse(payment_method)
        except ValueError as e:
            raise ValidationError(str(e)) from e

    def create_donation(
        self,
        amount: Decimal,
        donor_name: str,
        payment_method: "str | PaymentMethod",
        date: date,
        project_id: int,
    ) -> int:
        """Record a donation against a project.

        Args:
            amount: Donated amount, must be positive
            donor_name: Donor name (at least 2 characters)
            payment_method: PaymentMethod or its label
            date: Date the donation was received
            project_id: Project the donation is credited to

        Returns:
            Donation ID

        Raises:
            ValidationError: If any field fails validation
            NotFoundError: If the project does not exist
        """
        self._validate(amount, donor_name)
        method = self._parse_method(payment_method)
        self._require_project(project_id)

        donation_id = self.db.create_donation(
            amount=amount,
            donor_name=donor_name,
            payment_method=method,
            date=date,
            project_id=project_id,
        )
        logger.info("Recorded donation %d of %s for project %d", donation_id, amount, project_id)
        return donation_id

    def get_donation(self, donation_id: int) -> Optional[DonationEntity]:
        """Get donation by ID."""
        return self.db.get_donation(donation_id)

    def require_donation(self, donation_id: int) -> DonationEntity:
        """Get donation by ID, raising NotFoundError if it does not exist."""
        donation = self.db.get_donation(donation_id)
        if donation is None:
            raise NotFoundError(donation_not_found(donation_id))
        return donation

    def list_donations(self) -> list[DonationEntity]:
        """List all donations."""
        return self.db.list_donations()

    def list_by_project(self, project_id: int) -> list[DonationEntity]:
        """List donations credited to a project."""
        return self.db.list_donations_by_project(project_id)

    def update_donation(
        self,
        donation_id: int,
        amount: Optional[Decimal] = None,
        donor_name: Optional[str] = None,
        payment_method: "str | PaymentMethod | None" = None,
        date: Optional[date] = None,
        project_id: Optional[int] = None,
    ) -> DonationEntity:
        """Update a donation, keeping any field that is not given.

        Moving a donation requires the target project to exist. A donation
        left behind by a deleted project can still be edited in place.

        Raises:
            NotFoundError: If the donation or new project does not exist
            ValidationError: If the resulting donation fails validation
        """
        current = self.require_donation(donation_id)
        updated = replace(
            current,
            amount=amount if amount is not None else current.amount,
            donor_name=donor_name if donor_name is not None else current.donor_name,
            payment_method=(
                self._parse_method(payment_method)
                if payment_method is not None
                else current.payment_method
            ),
            date=date if date is not None else current.date,
            project_id=project_id if project_id is not None else current.project_id,
        )
        self._validate(updated.amount, updated.donor_name)
        if updated.project_id != current.project_id:
            self._require_project(updated.project_id)

        self.db.update_donation(updated)
        logger.info("Updated donation %d", donation_id)
        return updated

    def delete_donation(self, donation_id: int) -> None:
        """Delete a donation.

        Raises:
            NotFoundError: If the donation does not exist
        """
        self.db.delete_donation(donation_id)
        logger.info("Deleted donation %d", donation_id)
