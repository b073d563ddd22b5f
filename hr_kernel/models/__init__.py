"""ORM models for the HR kernel."""

from hr_kernel.models.audit_log import AuditAction, AuditLog
from hr_kernel.models.department import Department
from hr_kernel.models.employee import DEFAULT_PERFORMANCE_SCORE, Employee
from hr_kernel.models.performance_review import PerformanceReview
from hr_kernel.models.salary_history import SalaryHistory

__all__ = [
    "AuditAction",
    "AuditLog",
    "DEFAULT_PERFORMANCE_SCORE",
    "Department",
    "Employee",
    "PerformanceReview",
    "SalaryHistory",
]
