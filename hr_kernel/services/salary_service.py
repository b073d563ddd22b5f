"""
SalaryService -- explicit salary change operation.

Responsibility:
    Changes an employee's salary inside a transaction it owns.  The history
    row is written by the registered SalaryChangeAuditor during the flush;
    this service hands that row back to the caller.

Architecture position:
    Kernel > Services -- imperative shell.

Failure modes:
    - InvalidSalaryError: new salary is negative or not finite.  Nothing written.
    - EmployeeNotFoundError: unknown employee number.  Nothing written.
    - UndefinedSalaryChangeError: prior salary is 0 under the reject policy.
      Rolled back.
    - StorageFailureError: SQLAlchemy error, rolled back.
"""

from decimal import Decimal

from sqlalchemy import select

from hr_kernel.domain.salary import is_valid_salary
from hr_kernel.exceptions import EmployeeNotFoundError, InvalidSalaryError
from hr_kernel.logging_config import LogContext, get_logger
from hr_kernel.models.employee import Employee
from hr_kernel.models.salary_history import SalaryHistory
from hr_kernel.services.base import BaseService
from hr_kernel.services.salary_auditor import pop_recorded_changes

logger = get_logger("services.salary")


class SalaryService(BaseService[Employee]):
    """Changes salaries; the auditor records each change."""

    def change_salary(
        self,
        employee_number: int,
        new_salary: Decimal,
    ) -> SalaryHistory | None:
        """
        Set the employee's salary and commit.

        Returns:
            The SalaryHistory row recorded for the change, or None when the
            salary already had that value.
        """
        new_salary = Decimal(new_salary)

        with LogContext.bind(operation="change_salary", employee_number=str(employee_number)):
            if not is_valid_salary(new_salary):
                logger.warning(
                    "salary_change_invalid",
                    extra={"new_salary": str(new_salary)},
                )
                raise InvalidSalaryError(new_salary)

            return self._in_transaction(
                "change_salary",
                lambda: self._apply(employee_number, new_salary),
            )

    def _apply(self, employee_number: int, new_salary: Decimal) -> SalaryHistory | None:
        employee = self.session.execute(
            select(Employee).where(Employee.employee_number == employee_number)
        ).scalar_one_or_none()
        if employee is None:
            raise EmployeeNotFoundError(employee_number)

        # Drop anything a previous flush on this session left behind
        pop_recorded_changes(self.session)

        employee.salary = new_salary
        self.session.flush()

        recorded = pop_recorded_changes(self.session)
        if not recorded:
            logger.info("salary_unchanged", extra={"salary": str(new_salary)})
            return None
        return recorded[-1]
