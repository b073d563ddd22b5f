"""EmployeeSelector and DepartmentSelector tests."""

import types
from decimal import Decimal
from uuid import uuid4

import pytest

from hr_kernel.selectors.department_selector import DepartmentSelector
from hr_kernel.selectors.employee_selector import EmployeeSelector


class TestDepartmentSelector:

    def test_get(self, session, department_id):
        record = DepartmentSelector(session).get(department_id)

        assert record.id == department_id
        assert record.name == "Engineering"
        assert record.budget == Decimal("1000000")

    def test_missing(self, session, db_engine):
        selector = DepartmentSelector(session)

        assert selector.get(uuid4()) is None
        assert not selector.exists(uuid4())


class TestEmployeeSelector:

    def test_get_by_number(self, session, hire_employee):
        employee_number = hire_employee(
            salary=Decimal("1234.56"), first_name="Ada", last_name="Lovelace"
        )

        record = EmployeeSelector(session).get_by_number(employee_number)

        assert record.employee_number == employee_number
        assert record.full_name == "Ada Lovelace"
        assert record.salary == Decimal("1234.56")
        assert record.performance_score == Decimal("5.0")

    def test_get_by_number_missing(self, session, db_engine):
        assert EmployeeSelector(session).get_by_number(1) is None

    def test_stream_is_lazy(self, session, hire_employee, department_id):
        hire_employee()

        stream = EmployeeSelector(session).iter_department_employees(department_id)

        assert isinstance(stream, types.GeneratorType)
        assert next(stream).employee_number == 1
        assert next(stream, None) is None

    def test_stream_order(self, session, hire_employee, department_id):
        a = hire_employee(score=Decimal("6"))
        b = hire_employee(score=Decimal("9"))
        c = hire_employee(score=Decimal("6"))
        d = hire_employee(score=Decimal("2"))

        numbers = [
            r.employee_number
            for r in EmployeeSelector(session, batch_size=1).iter_department_employees(department_id)
        ]

        assert numbers == [b, a, c, d]

    def test_statistics(self, session, hire_employee, department_id):
        hire_employee(salary=Decimal("100"), score=Decimal("4"))
        hire_employee(salary=Decimal("300"), score=Decimal("7"))

        stats = EmployeeSelector(session).department_statistics(department_id)

        assert stats.employee_count == 2
        assert stats.total_salary == Decimal("400")
        assert stats.average_performance == Decimal("5.50")

    def test_statistics_of_empty_department(self, session, department_id):
        stats = EmployeeSelector(session).department_statistics(department_id)

        assert stats.employee_count == 0
        assert stats.total_salary == Decimal("0")
        assert stats.average_performance is None

    def test_invalid_batch_size(self, session):
        with pytest.raises(ValueError):
            EmployeeSelector(session, batch_size=0)
