"""Domain errors raised by services and mapped to HTTP responses in app.main."""
from app.schemas.common import FieldViolation


class LedgerError(Exception):
    """Base class for errors raised by the ledger services."""


class ValidationError(LedgerError):
    """Input was malformed or out of range. Carries every field violation found."""

    def __init__(self, violations: list[FieldViolation]):
        self.violations = violations
        fields = ", ".join(v.field for v in violations)
        super().__init__(f"Validation failed for: {fields}")


class CategoryCycleError(ValidationError):
    """Re-parenting would make a category its own ancestor."""


class InvalidRangeInput(LedgerError):
    """A month token could not be turned into a date range."""


class AuthenticationError(LedgerError):
    """Credential or registration rejection."""


class InvalidCredentials(AuthenticationError):
    def __init__(self):
        super().__init__("Invalid credentials")


class DuplicateUser(AuthenticationError):
    def __init__(self, email: str):
        self.email = email
        super().__init__("User already exists")


class PersistenceError(LedgerError):
    """The database rejected a write."""
