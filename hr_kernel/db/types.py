"""
Module: hr_kernel.db.types
Responsibility: Column types and rounding helpers for salary and
    score columns.  Centralizes precision so that every model and service
    uses identical definitions.
Architecture position: Kernel > DB.  May be imported by models/, domain/,
    services/, and selectors/.  MUST NOT import from any of those layers.

Invariants enforced:
    - No floats for money or scores.  Salaries use Numeric(38, 9); scores
      use Numeric(5, 2).
    - round_money() and round_percentage() are the only sanctioned rounding
      functions (ROUND_HALF_UP, i.e. half away from zero).
"""

from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import Numeric, String

# Column types for values that do not use the Base type_annotation_map default
SCORE_TYPE = Numeric(5, 2)
PERCENTAGE_TYPE = Numeric(12, 2)
LONG_TEXT_TYPE = String(4000)

MONEY_DECIMAL_PLACES = 2
SCORE_DECIMAL_PLACES = 2
PERCENTAGE_DECIMAL_PLACES = 2

MIN_PERFORMANCE_SCORE = Decimal("0")
MAX_PERFORMANCE_SCORE = Decimal("10")


def _quantizer(places: int) -> Decimal:
    return Decimal(1).scaleb(-places)


def round_money(amount: Decimal) -> Decimal:
    """Round a monetary amount to cents using ROUND_HALF_UP."""
    return Decimal(amount).quantize(
        _quantizer(MONEY_DECIMAL_PLACES), rounding=ROUND_HALF_UP
    )


def round_score(score: Decimal) -> Decimal:
    """Round a performance score to two places using ROUND_HALF_UP."""
    return Decimal(score).quantize(
        _quantizer(SCORE_DECIMAL_PLACES), rounding=ROUND_HALF_UP
    )


def round_percentage(value: Decimal) -> Decimal:
    """Round a percentage to two places using ROUND_HALF_UP."""
    return Decimal(value).quantize(
        _quantizer(PERCENTAGE_DECIMAL_PLACES), rounding=ROUND_HALF_UP
    )


def to_decimal(value) -> Decimal:
    """
    Coerce a driver value (Decimal, int, float, str) to Decimal.

    Aggregates such as AVG come back as float on some drivers; going
    through str() avoids binary float artefacts.
    """
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))
