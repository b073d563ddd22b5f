"""
ReportService -- per-department performance report.

Responsibility:
    Streams a department's employees best-first, prices each one's bonus,
    accumulates headcount and salary cost, and attaches the department
    aggregate (average score) as the report summary.

Architecture position:
    Kernel > Services.  Read-only; composes DepartmentSelector,
    EmployeeSelector, and BonusCalculator.  Text rendering lives in
    scripts/department_report.py.

Invariants enforced:
    - Lines are ordered by performance score descending, ties broken by
      employee number ascending.
    - Both reads (row stream and aggregate) run in the caller's
      transaction.  Callers obtain a consistent one from
      ``hr_kernel.db.engine.snapshot_scope()``.
    - The aggregate read happens only when at least one employee was
      streamed; an empty department yields the explicit
      "No employees in department" summary.

Failure modes:
    - DepartmentNotFoundError: unknown department.
    - InconsistentReportError: the aggregate disagrees with the stream,
      i.e. the session was not reading from one snapshot.
"""

from decimal import Decimal
from uuid import UUID

from sqlalchemy.orm import Session

from hr_kernel.db.types import round_money
from hr_kernel.domain.clock import Clock, SystemClock
from hr_kernel.domain.report import DepartmentReport, ReportLine, ReportSummary
from hr_kernel.exceptions import DepartmentNotFoundError, InconsistentReportError
from hr_kernel.logging_config import LogContext, get_logger
from hr_kernel.selectors.department_selector import DepartmentSelector
from hr_kernel.selectors.employee_selector import (
    DEFAULT_STREAM_BATCH_SIZE,
    DepartmentStatistics,
    EmployeeSelector,
)
from hr_kernel.services.bonus_calculator import BonusCalculator

logger = get_logger("services.report")


class ReportService:
    """
    Builds DepartmentReport values.

    Usage:
        with snapshot_scope() as session:
            report = ReportService(session).department_report(department_id)
    """

    def __init__(
        self,
        session: Session,
        clock: Clock | None = None,
        bonus_calculator: BonusCalculator | None = None,
        batch_size: int = DEFAULT_STREAM_BATCH_SIZE,
    ):
        self._clock = clock or SystemClock()
        self._departments = DepartmentSelector(session)
        self._employees = EmployeeSelector(session, batch_size=batch_size)
        self._bonus_calculator = bonus_calculator or BonusCalculator(session)

    def department_report(self, department_id: UUID) -> DepartmentReport:
        """
        Build the report for one department.

        Raises:
            DepartmentNotFoundError: department_id does not exist.
            InconsistentReportError: stream and aggregate disagree.
        """
        with LogContext.bind(operation="department_report", department_id=str(department_id)):
            department = self._departments.get(department_id)
            if department is None:
                logger.warning("report_department_not_found")
                raise DepartmentNotFoundError(str(department_id))

            generated_at = self._clock.now()
            lines: list[ReportLine] = []
            employee_count = 0
            total_salary = Decimal("0")

            for employee in self._employees.iter_department_employees(department_id):
                lines.append(
                    ReportLine(
                        employee_number=employee.employee_number,
                        full_name=employee.full_name,
                        performance_score=employee.performance_score,
                        bonus=self._bonus_calculator.bonus_for(
                            employee.salary, employee.performance_score
                        ),
                    )
                )
                employee_count += 1
                total_salary += employee.salary

            if employee_count == 0:
                summary = ReportSummary.empty()
            else:
                statistics = self._employees.department_statistics(department_id)
                self._check_consistency(
                    department_id, employee_count, total_salary, statistics
                )
                summary = ReportSummary(
                    employee_count=employee_count,
                    total_salary_cost=round_money(total_salary),
                    average_performance=statistics.average_performance,
                )

            logger.info(
                "report_generated",
                extra={
                    "department_name": department.name,
                    "employee_count": employee_count,
                    "total_salary_cost": str(summary.total_salary_cost),
                },
            )

            return DepartmentReport(
                department_id=department.id,
                department_name=department.name,
                generated_at=generated_at,
                summary=summary,
                lines=tuple(lines),
            )

    @staticmethod
    def _check_consistency(
        department_id: UUID,
        streamed_count: int,
        streamed_total: Decimal,
        statistics: DepartmentStatistics,
    ) -> None:
        if (
            statistics.employee_count != streamed_count
            or round_money(statistics.total_salary) != round_money(streamed_total)
        ):
            logger.error(
                "report_inconsistent",
                extra={
                    "streamed_count": streamed_count,
                    "aggregate_count": statistics.employee_count,
                },
            )
            raise InconsistentReportError(
                department_id=str(department_id),
                streamed_count=streamed_count,
                aggregate_count=statistics.employee_count,
                streamed_total=round_money(streamed_total),
                aggregate_total=round_money(statistics.total_salary),
            )
