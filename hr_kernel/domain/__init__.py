"""Pure domain logic: clock, bonus tiers, salary change arithmetic, report values."""

from hr_kernel.domain.bonus import (
    DEFAULT_BONUS_TIERS,
    BonusTier,
    calculate_bonus,
    select_tier,
    validate_tiers,
)
from hr_kernel.domain.clock import Clock, DeterministicClock, SystemClock
from hr_kernel.domain.report import (
    EMPTY_DEPARTMENT_NOTICE,
    DepartmentReport,
    ReportLine,
    ReportSummary,
)
from hr_kernel.domain.salary import ZeroSalaryPolicy, change_percentage, is_valid_salary

__all__ = [
    "DEFAULT_BONUS_TIERS",
    "BonusTier",
    "calculate_bonus",
    "select_tier",
    "validate_tiers",
    "Clock",
    "DeterministicClock",
    "SystemClock",
    "EMPTY_DEPARTMENT_NOTICE",
    "DepartmentReport",
    "ReportLine",
    "ReportSummary",
    "ZeroSalaryPolicy",
    "change_percentage",
    "is_valid_salary",
]
