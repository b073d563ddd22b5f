"""Kernel services: business operations and the salary change auditor."""

from hr_kernel.services.audit_log_service import AuditLogService
from hr_kernel.services.bonus_calculator import BonusCalculator
from hr_kernel.services.onboarding_service import OnboardingService
from hr_kernel.services.performance_service import PerformanceService
from hr_kernel.services.report_service import ReportService
from hr_kernel.services.salary_auditor import (
    SalaryChangeAuditor,
    register_salary_change_auditor,
    unregister_salary_change_auditor,
)
from hr_kernel.services.salary_service import SalaryService
from hr_kernel.services.sequence_service import SequenceService

__all__ = [
    "AuditLogService",
    "BonusCalculator",
    "OnboardingService",
    "PerformanceService",
    "ReportService",
    "SalaryChangeAuditor",
    "SalaryService",
    "SequenceService",
    "register_salary_change_auditor",
    "unregister_salary_change_auditor",
]
