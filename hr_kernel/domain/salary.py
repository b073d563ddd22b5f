"""
Salary change arithmetic.

Responsibility:
    Computes the percentage delta recorded for every salary change and
    decides what happens when the prior salary is zero.

Architecture position:
    Kernel > Domain -- pure functional core.
"""

from decimal import Decimal
from enum import Enum

from hr_kernel.db.types import round_percentage


class ZeroSalaryPolicy(str, Enum):
    """What to record when a salary changes from 0, where the delta is undefined."""

    # Abort the salary change with UndefinedSalaryChangeError
    REJECT = "reject"
    # Record the change with change_percentage = NULL
    RECORD_NULL = "record_null"


def change_percentage(old_salary: Decimal, new_salary: Decimal) -> Decimal | None:
    """
    Return round(((new - old) / old) * 100, 2), or None when old is zero.

    >>> change_percentage(Decimal("1000"), Decimal("1100"))
    Decimal('10.00')
    """
    if old_salary == 0:
        return None
    return round_percentage((new_salary - old_salary) / old_salary * 100)


def is_valid_salary(amount: Decimal) -> bool:
    """A salary is a finite amount >= 0.  NaN and infinities are rejected."""
    return amount.is_finite() and amount >= 0
