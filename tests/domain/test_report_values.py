"""DepartmentReport value objects."""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import uuid4

from hr_kernel.domain.report import (
    EMPTY_DEPARTMENT_NOTICE,
    DepartmentReport,
    ReportLine,
    ReportSummary,
)


def test_empty_summary_carries_notice():
    summary = ReportSummary.empty()

    assert summary.is_empty
    assert summary.employee_count == 0
    assert summary.total_salary_cost == Decimal("0")
    assert summary.average_performance is None
    assert summary.notice == EMPTY_DEPARTMENT_NOTICE


def test_total_bonus_sums_lines():
    report = DepartmentReport(
        department_id=uuid4(),
        department_name="Sales",
        generated_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        summary=ReportSummary(
            employee_count=2,
            total_salary_cost=Decimal("2000.00"),
            average_performance=Decimal("8.00"),
        ),
        lines=(
            ReportLine(1, "Ada Lovelace", Decimal("9.00"), Decimal("150.00")),
            ReportLine(2, "Alan Turing", Decimal("7.00"), Decimal("100.00")),
        ),
    )

    assert report.total_bonus == Decimal("250.00")
    assert not report.summary.is_empty


def test_total_bonus_of_empty_report_is_zero():
    report = DepartmentReport(
        department_id=uuid4(),
        department_name="Empty",
        generated_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
        summary=ReportSummary.empty(),
    )

    assert report.lines == ()
    assert report.total_bonus == Decimal("0")
