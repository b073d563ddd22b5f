"""
Department report value objects.

Responsibility:
    The structured result of ReportService.department_report().  Rendering
    (column widths, text layout) is left to the presentation layer.

Architecture position:
    Kernel > Domain -- pure data, frozen dataclasses.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID

EMPTY_DEPARTMENT_NOTICE = "No employees in department"


@dataclass(frozen=True)
class ReportLine:
    """One employee's row in a department report."""

    employee_number: int
    full_name: str
    performance_score: Decimal
    bonus: Decimal


@dataclass(frozen=True)
class ReportSummary:
    """
    Report footer.

    For a department with employees, ``notice`` is None and the statistics
    are populated.  For an empty department the statistics are absent and
    ``notice`` carries EMPTY_DEPARTMENT_NOTICE.
    """

    employee_count: int
    total_salary_cost: Decimal
    average_performance: Decimal | None = None
    notice: str | None = None

    @classmethod
    def empty(cls) -> "ReportSummary":
        return cls(
            employee_count=0,
            total_salary_cost=Decimal("0"),
            average_performance=None,
            notice=EMPTY_DEPARTMENT_NOTICE,
        )

    @property
    def is_empty(self) -> bool:
        return self.employee_count == 0


@dataclass(frozen=True)
class DepartmentReport:
    """Header, ordered lines, and summary for one department."""

    department_id: UUID
    department_name: str
    generated_at: datetime
    summary: ReportSummary
    lines: tuple[ReportLine, ...] = field(default_factory=tuple)

    @property
    def total_bonus(self) -> Decimal:
        return sum((line.bonus for line in self.lines), Decimal("0"))
