"""
Module: hr_kernel.selectors.employee_selector
Responsibility: Read-only employee queries, including the lazy, ordered
    department stream and the department aggregate used by reports.
Architecture position: Kernel > Selectors.  May import from models/ and
    selectors/base.py.

Invariants enforced:
    - iter_department_employees() yields rows ordered by performance score
      descending, ties broken by employee_number ascending (hire order).
    - The stream is forward-only and fetched in batches of ``batch_size``
      rows; it is not restartable.

Failure modes:
    - Returns an empty stream / zero statistics for a department with no
      employees.  Department existence is the caller's concern.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from hr_kernel.db.types import round_score, to_decimal
from hr_kernel.models.employee import Employee
from hr_kernel.selectors.base import BaseSelector

DEFAULT_STREAM_BATCH_SIZE = 100


@dataclass(frozen=True)
class EmployeeRecord:
    """Employee DTO."""

    id: UUID
    employee_number: int
    first_name: str
    last_name: str
    email: str
    hire_date: datetime
    salary: Decimal
    department_id: UUID
    performance_score: Decimal

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class DepartmentStatistics:
    """Aggregate figures for a department's employees."""

    employee_count: int
    total_salary: Decimal
    average_performance: Decimal | None


def _to_record(employee: Employee) -> EmployeeRecord:
    return EmployeeRecord(
        id=employee.id,
        employee_number=employee.employee_number,
        first_name=employee.first_name,
        last_name=employee.last_name,
        email=employee.email,
        hire_date=employee.hire_date,
        salary=employee.salary,
        department_id=employee.department_id,
        performance_score=employee.performance_score,
    )


class EmployeeSelector(BaseSelector[Employee]):
    """Selector for employee queries."""

    def __init__(self, session: Session, batch_size: int = DEFAULT_STREAM_BATCH_SIZE):
        super().__init__(session)
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self._batch_size = batch_size

    def get_by_number(self, employee_number: int) -> EmployeeRecord | None:
        """Return the employee, or None if no such employee number exists."""
        employee = self.session.execute(
            select(Employee).where(Employee.employee_number == employee_number)
        ).scalar_one_or_none()

        return _to_record(employee) if employee is not None else None

    def iter_department_employees(self, department_id: UUID) -> Iterator[EmployeeRecord]:
        """
        Lazily yield the department's employees, best performers first.

        Rows are fetched ``batch_size`` at a time; each is converted to a DTO
        as it is consumed.
        """
        result = self.session.execute(
            select(Employee)
            .where(Employee.department_id == department_id)
            .order_by(
                Employee.performance_score.desc(),
                Employee.employee_number.asc(),
            )
            .execution_options(yield_per=self._batch_size)
        ).scalars()

        for employee in result:
            yield _to_record(employee)

    def department_statistics(self, department_id: UUID) -> DepartmentStatistics:
        """Count, total salary, and average score of a department in one query."""
        count, total, average = self.session.execute(
            select(
                func.count(Employee.id),
                func.coalesce(func.sum(Employee.salary), 0),
                func.avg(Employee.performance_score),
            ).where(Employee.department_id == department_id)
        ).one()

        return DepartmentStatistics(
            employee_count=int(count),
            total_salary=to_decimal(total),
            average_performance=(
                round_score(to_decimal(average)) if average is not None else None
            ),
        )
