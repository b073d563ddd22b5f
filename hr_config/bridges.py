"""
Config -> Kernel Bridges.

Functions that turn an HrConfig into configured kernel services.  These
live in hr_config (the producer) because the kernel must never import
hr_config.

Usage:
    from hr_config.bridges import build_report_service, build_salary_auditor

    config = get_active_config()
    init_engine_from_url(url, salary_auditor=build_salary_auditor(config))
    with snapshot_scope() as session:
        report = build_report_service(session, config).department_report(dept_id)
"""

from sqlalchemy.orm import Session

from hr_config.schema import HrConfig
from hr_kernel.domain.clock import Clock
from hr_kernel.services.bonus_calculator import BonusCalculator
from hr_kernel.services.onboarding_service import OnboardingService
from hr_kernel.services.report_service import ReportService
from hr_kernel.services.salary_auditor import SalaryChangeAuditor


def build_salary_auditor(config: HrConfig, clock: Clock | None = None) -> SalaryChangeAuditor:
    """SalaryChangeAuditor honouring the configured zero-salary policy."""
    return SalaryChangeAuditor(
        clock=clock,
        zero_salary_policy=config.salary_history.zero_salary_policy,
    )


def build_bonus_calculator(session: Session, config: HrConfig) -> BonusCalculator:
    return BonusCalculator(session, tiers=config.bonus_tiers)


def build_onboarding_service(
    session: Session,
    config: HrConfig,
    clock: Clock | None = None,
) -> OnboardingService:
    return OnboardingService(
        session,
        clock=clock,
        default_performance_score=config.default_performance_score,
    )


def build_report_service(
    session: Session,
    config: HrConfig,
    clock: Clock | None = None,
) -> ReportService:
    return ReportService(
        session,
        clock=clock,
        bonus_calculator=build_bonus_calculator(session, config),
        batch_size=config.reporting.stream_batch_size,
    )
