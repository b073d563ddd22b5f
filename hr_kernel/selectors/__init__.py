"""Read-only selectors returning DTOs."""

from hr_kernel.selectors.base import BaseSelector
from hr_kernel.selectors.department_selector import DepartmentRecord, DepartmentSelector
from hr_kernel.selectors.employee_selector import (
    DepartmentStatistics,
    EmployeeRecord,
    EmployeeSelector,
)

__all__ = [
    "BaseSelector",
    "DepartmentRecord",
    "DepartmentSelector",
    "DepartmentStatistics",
    "EmployeeRecord",
    "EmployeeSelector",
]
