"""
BonusCalculator -- performance bonus for a stored employee.

Responsibility:
    Loads an employee's salary and performance score and applies the bonus
    tier table from ``hr_kernel.domain.bonus``.

Architecture position:
    Kernel > Services.  Read-only: never adds, flushes, or commits.

Failure modes:
    - EmployeeNotFoundError if the employee number does not exist.
"""

from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy.orm import Session

from hr_kernel.domain.bonus import (
    DEFAULT_BONUS_TIERS,
    BonusTier,
    calculate_bonus,
    validate_tiers,
)
from hr_kernel.exceptions import EmployeeNotFoundError
from hr_kernel.logging_config import get_logger
from hr_kernel.selectors.employee_selector import EmployeeSelector

logger = get_logger("services.bonus")


class BonusCalculator:
    """Computes bonuses with a fixed, validated tier table."""

    def __init__(
        self,
        session: Session,
        tiers: Sequence[BonusTier] = DEFAULT_BONUS_TIERS,
    ):
        self._employees = EmployeeSelector(session)
        self._tiers = validate_tiers(tiers)

    @property
    def tiers(self) -> tuple[BonusTier, ...]:
        return self._tiers

    def bonus(self, employee_number: int) -> Decimal:
        """
        Bonus for the employee with ``employee_number``.

        Raises:
            EmployeeNotFoundError: No such employee.
        """
        employee = self._employees.get_by_number(employee_number)
        if employee is None:
            logger.warning(
                "bonus_employee_not_found",
                extra={"employee_number": employee_number},
            )
            raise EmployeeNotFoundError(employee_number)

        amount = self.bonus_for(employee.salary, employee.performance_score)
        logger.debug(
            "bonus_calculated",
            extra={
                "employee_number": employee_number,
                "performance_score": str(employee.performance_score),
                "bonus": str(amount),
            },
        )
        return amount

    def bonus_for(self, salary: Decimal, performance_score: Decimal) -> Decimal:
        """Bonus for an already loaded salary and score."""
        return calculate_bonus(salary, performance_score, self._tiers)
