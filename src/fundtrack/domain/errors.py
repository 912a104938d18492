"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


UNKNOWN_PROJECT = "Unknown Project"


def project_not_found(project_id: int) -> str:
    """Return message for missing project."""
    return f"Project {project_id} not found"


def donation_not_found(donation_id: int) -> str:
    """Return message for missing donation."""
    return f"Donation {donation_id} not found"


def expense_not_found(expense_id: int) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def duplicate_project_name(name: str) -> str:
    """Return message for a project name that is already taken."""
    return f"Project with name '{name}' already exists"


def text_too_short(field: str, minimum: int) -> str:
    """Return message for a text field below its minimum length."""
    return f"{field} must be at least {minimum} characters"


def amount_not_positive(field: str) -> str:
    """Return message for a non-positive amount."""
    return f"{field} must be greater than 0"


def amount_too_precise(field: str) -> str:
    """Return message for an amount with fractions of a cent."""
    return f"{field} cannot have more than 2 decimal places"
