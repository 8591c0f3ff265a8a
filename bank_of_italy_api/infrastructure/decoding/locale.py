"""
Conversion of the provider's numeric and date strings into exact values.

Both parsers are strict: anything that is not unambiguously a fixed-point
number or a ``YYYY-MM-DD`` date raises ConversionFailed instead of being
coerced.
"""
import re
from datetime import date
from decimal import Decimal
from typing import Any

from bank_of_italy_api.domain.exceptions.currency import ConversionFailed

MAX_SIGNIFICANT_DIGITS = 28

_DECIMAL_PATTERN = re.compile(r"^(\d+)(?:[.,](\d+))?$")


def parse_decimal(raw: Any) -> Decimal:
    """Parse a fixed-point string using ``.`` or ``,`` as fractional separator."""
    if not isinstance(raw, str):
        raise ConversionFailed(raw, "decimal", f"expected a string, got {type(raw).__name__}")

    cleaned = raw.strip()
    if not cleaned:
        raise ConversionFailed(raw, "decimal", "empty value")

    # \d would also accept non-ASCII digits
    match = _DECIMAL_PATTERN.match(cleaned) if cleaned.isascii() else None
    if match is None:
        raise ConversionFailed(raw, "decimal", "not a fixed-point number")

    integer_part, fraction_part = match.group(1), match.group(2) or ""
    significant = len(integer_part.lstrip("0")) + len(fraction_part)
    if significant > MAX_SIGNIFICANT_DIGITS:
        raise ConversionFailed(
            raw, "decimal", f"more than {MAX_SIGNIFICANT_DIGITS} significant digits"
        )

    normalized = f"{integer_part}.{fraction_part}" if fraction_part else integer_part
    return Decimal(normalized)


def parse_date(raw: Any) -> date:
    """Parse a ``YYYY-MM-DD`` calendar date."""
    if not isinstance(raw, str):
        raise ConversionFailed(raw, "date", f"expected a string, got {type(raw).__name__}")

    cleaned = raw.strip()
    if len(cleaned) != 10:
        raise ConversionFailed(raw, "date", "expected format YYYY-MM-DD")
    if cleaned[4] != "-" or cleaned[7] != "-":
        raise ConversionFailed(raw, "date", "expected format YYYY-MM-DD")

    year, month, day = cleaned[:4], cleaned[5:7], cleaned[8:]
    if not all(part.isascii() and part.isdigit() for part in (year, month, day)):
        raise ConversionFailed(raw, "date", "date components must be digits")

    try:
        return date(int(year), int(month), int(day))
    except ValueError as e:
        raise ConversionFailed(raw, "date", str(e)) from e
