"""Validation rules for transaction creation payloads.

Each field has an ordered list of rules. Rules for one field stop at the first
failure; every field is always checked, so a payload with several problems
reports all of them at once. Validation never raises for bad input, it returns
a ValidationResult.
"""
from dataclasses import dataclass, field
from datetime import date, time
from decimal import Decimal
import math
import re
from typing import Any, Callable

from app.schemas.common import FieldViolation
from app.schemas.transaction import TransactionCreate

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}(T\d{2}:\d{2}:\d{2}(\.\d{3})?Z?)?$")
NUMERIC_STRING_PATTERN = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

AMOUNT_MIN = Decimal("-999999.99")
AMOUNT_MAX = Decimal("999999.99")
AMOUNT_MAX_DECIMALS = 2
MERCHANT_MAX_LENGTH = 255
DESCRIPTION_MAX_LENGTH = 1000

_MISSING = object()


@dataclass(frozen=True)
class Rule:
    """A single predicate over an already-present field value."""

    constraint: str
    check: Callable[[Any], bool]
    message: str


@dataclass(frozen=True)
class FieldRules:
    name: str
    rules: tuple[Rule, ...]
    required_message: str | None = None  # None means the field is optional
    transform: Callable[[Any], Any] | None = None

    @property
    def required(self) -> bool:
        return self.required_message is not None


@dataclass
class ValidationResult:
    """Either a normalized record or the list of violations, never both."""

    record: TransactionCreate | None = None
    violations: list[FieldViolation] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.violations


def is_uuid(value: Any) -> bool:
    return isinstance(value, str) and bool(UUID_PATTERN.match(value))


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def max_length(limit: int) -> Callable[[Any], bool]:
    return lambda value: len(value) <= limit


def is_finite_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    return False


def has_max_decimal_places(value: Any) -> bool:
    exponent = _to_decimal(value).as_tuple().exponent
    return exponent >= -AMOUNT_MAX_DECIMALS


def is_calendar_datetime(value: str) -> bool:
    try:
        date.fromisoformat(value[:10])
        if len(value) > 10:
            time.fromisoformat(value[11:19])
    except ValueError:
        return False
    return True


def trim(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


def coerce_number(value: Any) -> Any:
    """Turn numeric-looking strings into floats; leave anything else untouched."""
    if isinstance(value, str):
        candidate = value.strip()
        if NUMERIC_STRING_PATTERN.match(candidate):
            return float(candidate)
    return value


def _to_decimal(value: Any) -> Decimal:
    # str() of a float is its shortest round-tripping repr, so 50.25 stays 50.25
    if isinstance(value, (Decimal, int)):
        return Decimal(value)
    return Decimal(str(value))


def _uuid_field(name: str, label: str, required: bool = False) -> FieldRules:
    return FieldRules(
        name=name,
        rules=(Rule("uuid", is_uuid, f"{label} must be a valid UUID"),),
        required_message=f"{label} is required" if required else None,
    )


TRANSACTION_RULES: tuple[FieldRules, ...] = (
    _uuid_field("account_id", "Account ID", required=True),
    FieldRules(
        name="date",
        required_message="Date is required",
        rules=(
            Rule("date", is_string, "Date must be a valid ISO date string"),
            Rule(
                "date_format",
                lambda value: bool(DATE_PATTERN.match(value)),
                "Date must be in valid ISO format (YYYY-MM-DD or YYYY-MM-DDTHH:mm:ss.sssZ)",
            ),
            Rule("date", is_calendar_datetime, "Date must be a valid ISO date string"),
        ),
    ),
    FieldRules(
        name="amount",
        required_message="Amount is required",
        transform=coerce_number,
        rules=(
            Rule("number", is_finite_number, "Amount must be a valid number with up to 2 decimal places"),
            Rule("precision", has_max_decimal_places, "Amount must be a valid number with up to 2 decimal places"),
            Rule("min", lambda value: _to_decimal(value) >= AMOUNT_MIN, "Amount cannot be less than -999999.99"),
            Rule("max", lambda value: _to_decimal(value) <= AMOUNT_MAX, "Amount cannot be greater than 999999.99"),
        ),
    ),
    FieldRules(
        name="merchant",
        transform=trim,
        rules=(
            Rule("string", is_string, "Merchant must be a string"),
            Rule("max_length", max_length(MERCHANT_MAX_LENGTH), "Merchant name cannot exceed 255 characters"),
        ),
    ),
    FieldRules(
        name="description",
        transform=trim,
        rules=(
            Rule("string", is_string, "Description must be a string"),
            Rule("max_length", max_length(DESCRIPTION_MAX_LENGTH), "Description cannot exceed 1000 characters"),
        ),
    ),
    _uuid_field("category_id", "Category ID"),
    _uuid_field("owner_user_id", "Owner User ID"),
    _uuid_field("card_id", "Card ID"),
)


def _check_field(field_rules: FieldRules, payload: dict) -> tuple[Any, FieldViolation | None]:
    value = payload.get(field_rules.name, _MISSING)

    if value is _MISSING or value is None or (field_rules.required and value == ""):
        if field_rules.required:
            return _MISSING, FieldViolation(field=field_rules.name, constraint="required", message=field_rules.required_message)
        return _MISSING, None

    if field_rules.transform is not None:
        value = field_rules.transform(value)

    for rule in field_rules.rules:
        if not rule.check(value):
            return _MISSING, FieldViolation(field=field_rules.name, constraint=rule.constraint, message=rule.message)

    return value, None


def validate_transaction_payload(payload: Any) -> ValidationResult:
    """Check a raw transaction payload and normalize it.

    Unknown keys are ignored, including any client-supplied added_by_user_id;
    the creating user is always taken from the authenticated identity.
    """
    if not isinstance(payload, dict):
        return ValidationResult(violations=[
            FieldViolation(field="body", constraint="object", message="Request body must be a JSON object"),
        ])

    values: dict[str, Any] = {}
    violations: list[FieldViolation] = []
    for field_rules in TRANSACTION_RULES:
        value, violation = _check_field(field_rules, payload)
        if violation is not None:
            violations.append(violation)
        elif value is not _MISSING:
            values[field_rules.name] = value

    if violations:
        return ValidationResult(violations=violations)

    values["date"] = date.fromisoformat(values["date"][:10])
    values["amount"] = _to_decimal(values["amount"]).quantize(Decimal("0.01"))
    return ValidationResult(record=TransactionCreate(**values))
