"""PerformanceService tests."""

from decimal import Decimal

import pytest
from sqlalchemy import func, select

from hr_kernel.exceptions import (
    EmployeeNotFoundError,
    InvalidInputError,
    InvalidPerformanceScoreError,
)
from hr_kernel.models.performance_review import PerformanceReview


class TestRecordReview:

    def test_review_updates_current_score(self, session, performance, hire_employee, load_employee):
        employee_number = hire_employee()

        review = performance.record_review(employee_number, Decimal("8.25"), "Strong year")

        assert review.score == Decimal("8.25")
        assert review.comments == "Strong year"
        employee = load_employee(employee_number)
        assert employee.performance_score == Decimal("8.25")
        assert review.employee_id == employee.id

    def test_latest_review_wins(self, performance, hire_employee, load_employee):
        employee_number = hire_employee()

        performance.record_review(employee_number, Decimal("9"))
        performance.record_review(employee_number, Decimal("3"))

        assert load_employee(employee_number).performance_score == Decimal("3")

    @pytest.mark.parametrize("score", ["0", "10"])
    def test_bounds_are_inclusive(self, performance, hire_employee, load_employee, score):
        employee_number = hire_employee()

        performance.record_review(employee_number, Decimal(score))

        assert load_employee(employee_number).performance_score == Decimal(score)

    @pytest.mark.parametrize("score", ["-0.01", "10.01", "11", "NaN", "Infinity"])
    def test_out_of_range_rejected(self, session, performance, hire_employee, load_employee, score):
        employee_number = hire_employee()

        with pytest.raises(InvalidPerformanceScoreError) as exc_info:
            performance.record_review(employee_number, Decimal(score))

        assert isinstance(exc_info.value, InvalidInputError)
        assert load_employee(employee_number).performance_score == Decimal("5.0")
        assert session.execute(
            select(func.count()).select_from(PerformanceReview)
        ).scalar_one() == 0

    def test_unknown_employee(self, session, performance, db_engine):
        with pytest.raises(EmployeeNotFoundError):
            performance.record_review(42, Decimal("7"))

        assert session.execute(
            select(func.count()).select_from(PerformanceReview)
        ).scalar_one() == 0
