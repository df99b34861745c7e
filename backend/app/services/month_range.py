"""Month token ("YYYY-MM") to inclusive date range."""
from datetime import date
import re

from dateutil.relativedelta import relativedelta

from app.errors import InvalidRangeInput

MONTH_TOKEN_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})$")


def resolve_month_range(month: str) -> tuple[date, date]:
    """Return (first_day, last_day) of the month named by a "YYYY-MM" token.

    relativedelta clamps day=31 to the real end of the month, which gives
    28/29/30/31 as appropriate, leap-year February included.

    Raises:
        InvalidRangeInput: the token is not a 4-digit year and a 1-12 month.
    """
    match = MONTH_TOKEN_PATTERN.match(month.strip()) if isinstance(month, str) else None
    if not match:
        raise InvalidRangeInput(f"Month must be in YYYY-MM format, got {month!r}")

    year, month_number = int(match.group(1)), int(match.group(2))
    if year < 1 or not 1 <= month_number <= 12:
        raise InvalidRangeInput(f"Month out of range: {month!r}")

    start = date(year, month_number, 1)
    end = start + relativedelta(day=31)
    return start, end
