"""
ReportService tests.

Lines come out best performer first with a stable tie-break, every line
carries its bonus, and the summary agrees with the rows.  An empty
department is a successful report with an explicit notice.
"""

from decimal import Decimal
from uuid import uuid4

import pytest

from hr_kernel.db.engine import snapshot_scope
from hr_kernel.domain.bonus import BonusTier
from hr_kernel.domain.report import EMPTY_DEPARTMENT_NOTICE
from hr_kernel.exceptions import (
    DepartmentNotFoundError,
    InconsistentReportError,
    InvalidStateError,
)
from hr_kernel.selectors.employee_selector import DepartmentStatistics, EmployeeSelector
from hr_kernel.services.bonus_calculator import BonusCalculator
from hr_kernel.services.report_service import ReportService


@pytest.fixture
def report_service(session, clock) -> ReportService:
    return ReportService(session, clock=clock)


class TestDepartmentReport:

    def test_lines_ordered_by_score_descending(self, report_service, hire_employee, department_id):
        low = hire_employee(score=Decimal("4.5"), first_name="Low")
        high = hire_employee(score=Decimal("9.5"), first_name="High")
        mid = hire_employee(score=Decimal("7"), first_name="Mid")

        report = report_service.department_report(department_id)

        assert [line.employee_number for line in report.lines] == [high, mid, low]
        assert [line.performance_score for line in report.lines] == [
            Decimal("9.5"), Decimal("7"), Decimal("4.5"),
        ]

    def test_ties_broken_by_employee_number(self, report_service, hire_employee, department_id):
        first = hire_employee(score=Decimal("8"))
        second = hire_employee(score=Decimal("8"))
        third = hire_employee(score=Decimal("8"))

        report = report_service.department_report(department_id)

        assert [line.employee_number for line in report.lines] == [first, second, third]

    def test_each_line_carries_name_and_bonus(self, report_service, hire_employee, department_id):
        hire_employee(salary=Decimal("1000"), score=Decimal("9.5"), first_name="Ada", last_name="Lovelace")
        hire_employee(salary=Decimal("2000"), score=Decimal("7"), first_name="Alan", last_name="Turing")
        hire_employee(salary=Decimal("3000"), score=Decimal("4.9"), first_name="Charles", last_name="Babbage")

        report = report_service.department_report(department_id)

        assert [(line.full_name, line.bonus) for line in report.lines] == [
            ("Ada Lovelace", Decimal("150.00")),
            ("Alan Turing", Decimal("200.00")),
            ("Charles Babbage", Decimal("0.00")),
        ]
        assert report.total_bonus == Decimal("350.00")

    def test_summary_matches_rows(self, report_service, hire_employee, department_id):
        hire_employee(salary=Decimal("1000.50"), score=Decimal("9"))
        hire_employee(salary=Decimal("2000.25"), score=Decimal("6"))
        hire_employee(salary=Decimal("3000"), score=Decimal("7.5"))

        report = report_service.department_report(department_id)

        summary = report.summary
        assert summary.employee_count == 3
        assert summary.total_salary_cost == Decimal("6000.75")
        assert summary.average_performance == Decimal("7.50")
        assert summary.notice is None
        assert not summary.is_empty

    def test_header(self, report_service, hire_employee, department_id, clock):
        hire_employee()

        report = report_service.department_report(department_id)

        assert report.department_id == department_id
        assert report.department_name == "Engineering"
        assert report.generated_at == clock.now()

    def test_only_the_requested_department(self, report_service, hire_employee, create_department, department_id):
        other = create_department("Sales")
        mine = hire_employee(department=department_id)
        hire_employee(department=other)

        report = report_service.department_report(department_id)

        assert [line.employee_number for line in report.lines] == [mine]
        assert report.summary.employee_count == 1

    def test_small_stream_batches(self, session, clock, hire_employee, department_id):
        numbers = [hire_employee(score=Decimal("5")) for _ in range(7)]

        report = ReportService(session, clock=clock, batch_size=2).department_report(department_id)

        assert [line.employee_number for line in report.lines] == numbers

    def test_configured_tiers(self, session, clock, hire_employee, department_id):
        hire_employee(salary=Decimal("1000"), score=Decimal("5"))
        calculator = BonusCalculator(
            session, tiers=[BonusTier(min_score=Decimal("1"), rate=Decimal("0.01"))]
        )

        report = ReportService(session, clock=clock, bonus_calculator=calculator).department_report(
            department_id
        )

        assert report.lines[0].bonus == Decimal("10.00")


class TestEmptyDepartment:

    def test_explicit_notice(self, report_service, department_id):
        report = report_service.department_report(department_id)

        assert report.lines == ()
        assert report.summary.is_empty
        assert report.summary.employee_count == 0
        assert report.summary.total_salary_cost == Decimal("0")
        assert report.summary.average_performance is None
        assert report.summary.notice == EMPTY_DEPARTMENT_NOTICE

    def test_aggregate_not_queried(self, report_service, department_id, monkeypatch):
        def _fail(self, department_id):
            raise AssertionError("aggregate read issued for an empty department")

        monkeypatch.setattr(EmployeeSelector, "department_statistics", _fail)

        report = report_service.department_report(department_id)

        assert report.summary.is_empty


class TestReportErrors:

    def test_unknown_department(self, report_service, db_engine):
        missing = uuid4()

        with pytest.raises(DepartmentNotFoundError) as exc_info:
            report_service.department_report(missing)

        assert exc_info.value.department_id == str(missing)

    def test_drifting_aggregate_rejected(self, report_service, hire_employee, department_id, monkeypatch):
        hire_employee(salary=Decimal("1000"))
        hire_employee(salary=Decimal("1000"))

        def _drifted(self, department_id):
            return DepartmentStatistics(
                employee_count=3,
                total_salary=Decimal("3000"),
                average_performance=Decimal("5.00"),
            )

        monkeypatch.setattr(EmployeeSelector, "department_statistics", _drifted)

        with pytest.raises(InconsistentReportError) as exc_info:
            report_service.department_report(department_id)

        error = exc_info.value
        assert isinstance(error, InvalidStateError)
        assert error.streamed_count == 2
        assert error.aggregate_count == 3
        assert error.streamed_total == Decimal("2000.00")
        assert error.aggregate_total == Decimal("3000.00")


class TestSnapshotScope:

    def test_report_from_snapshot_session(self, clock, hire_employee, department_id, session):
        hire_employee(salary=Decimal("1000"), score=Decimal("9"))
        hire_employee(salary=Decimal("500"), score=Decimal("7"))
        session.close()

        with snapshot_scope() as snapshot:
            report = ReportService(snapshot, clock=clock).department_report(department_id)

        assert report.summary.employee_count == 2
        assert report.summary.total_salary_cost == Decimal("1500.00")
        assert report.summary.average_performance == Decimal("8.00")

    def test_concurrent_snapshots_do_not_block_each_other(self, clock, hire_employee, department_id, session):
        hire_employee(salary=Decimal("1000"), score=Decimal("9"))
        session.close()

        with snapshot_scope() as first:
            first_report = ReportService(first, clock=clock).department_report(department_id)
            # The first snapshot's transaction is still open here
            with snapshot_scope() as second:
                second_report = ReportService(second, clock=clock).department_report(department_id)

        assert first_report.summary == second_report.summary
        assert second_report.summary.employee_count == 1
