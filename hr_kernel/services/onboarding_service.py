"""
OnboardingService -- validated, atomic employee creation.

Responsibility:
    Hires an employee: validates the request, allocates an employee number,
    writes the Employee row and its NEW_HIRE audit entry, and commits them
    as one unit.

Architecture position:
    Kernel > Services -- imperative shell.  Reads departments through
    DepartmentSelector; composes SequenceService and AuditLogService inside
    its own transaction.

Invariants enforced:
    - Validation order: salary >= 0, then department existence.  Both run
      before anything is written.
    - Employee + AuditLog(NEW_HIRE) commit together or not at all.
    - Employee numbers come from the locked ``employee_number`` counter,
      never from max(employee_number) + 1.

Failure modes:
    - InvalidSalaryError: salary < 0 or not finite.  Nothing written.
    - DepartmentNotFoundError: unknown department.  Nothing written.
    - StorageFailureError: any SQLAlchemy error during the write; the whole
      unit is rolled back and the driver error chained as the cause.

Audit relevance:
    hire_started / hire_rejected / hire_completed / hire_failed log events,
    plus the persisted NEW_HIRE audit log entry.
"""

from decimal import Decimal
from uuid import UUID, uuid4

from sqlalchemy.orm import Session

from hr_kernel.db.types import round_score
from hr_kernel.domain.clock import Clock, SystemClock
from hr_kernel.domain.salary import is_valid_salary
from hr_kernel.exceptions import (
    DepartmentNotFoundError,
    InvalidSalaryError,
    StorageFailureError,
)
from hr_kernel.logging_config import LogContext, get_logger
from hr_kernel.models.employee import DEFAULT_PERFORMANCE_SCORE, Employee
from hr_kernel.selectors.department_selector import DepartmentRecord, DepartmentSelector
from hr_kernel.services.audit_log_service import AuditLogService
from hr_kernel.services.base import BaseService
from hr_kernel.services.sequence_service import SequenceService

logger = get_logger("services.onboarding")


class OnboardingService(BaseService[Employee]):
    """
    Hires employees.

    Contract:
        ``hire()`` returns the new employee number after commit, or raises.
        The session is committed on success and rolled back on any failure.

    Usage:
        service = OnboardingService(session, clock=clock)
        employee_number = service.hire(
            "Ada", "Lovelace", "ada@example.com", Decimal("85000"), dept_id,
        )
    """

    def __init__(
        self,
        session: Session,
        clock: Clock | None = None,
        default_performance_score: Decimal = DEFAULT_PERFORMANCE_SCORE,
    ):
        super().__init__(session)
        self._clock = clock or SystemClock()
        self._default_performance_score = round_score(default_performance_score)
        self._departments = DepartmentSelector(session)
        self._sequence_service = SequenceService(session)
        self._audit_log = AuditLogService(session, self._clock)

    def hire(
        self,
        first_name: str,
        last_name: str,
        email: str,
        salary: Decimal,
        department_id: UUID,
    ) -> int:
        """
        Create an employee and return their employee number.

        Raises:
            InvalidSalaryError: salary is negative or not finite.
            DepartmentNotFoundError: department_id does not exist.
            StorageFailureError: the write failed and was rolled back.
        """
        salary = Decimal(salary)

        with LogContext.bind(operation="hire", department_id=str(department_id)):
            logger.info(
                "hire_started",
                extra={"email": email, "salary": str(salary)},
            )

            department = self._validate(salary, department_id)

            try:
                employee_number = self._in_transaction(
                    "hire",
                    lambda: self._create_employee(
                        first_name, last_name, email, salary, department
                    ),
                )
            except StorageFailureError as exc:
                logger.error(
                    "hire_failed",
                    extra={"email": email, "cause": type(exc.cause).__name__},
                )
                raise

            logger.info(
                "hire_completed",
                extra={"employee_number": employee_number, "email": email},
            )
            return employee_number

    def _validate(self, salary: Decimal, department_id: UUID) -> DepartmentRecord:
        if not is_valid_salary(salary):
            logger.warning(
                "hire_rejected",
                extra={"reason": InvalidSalaryError.code, "salary": str(salary)},
            )
            raise InvalidSalaryError(salary)

        department = self._departments.get(department_id)
        if department is None:
            logger.warning(
                "hire_rejected",
                extra={"reason": DepartmentNotFoundError.code},
            )
            # End the read transaction opened by the lookup
            self.session.rollback()
            raise DepartmentNotFoundError(str(department_id))

        return department

    def _create_employee(
        self,
        first_name: str,
        last_name: str,
        email: str,
        salary: Decimal,
        department: DepartmentRecord,
    ) -> int:
        employee_number = self._sequence_service.next_value(
            SequenceService.EMPLOYEE_NUMBER
        )

        employee = Employee(
            id=uuid4(),
            employee_number=employee_number,
            first_name=first_name,
            last_name=last_name,
            email=email,
            hire_date=self._clock.now(),
            salary=salary,
            department_id=department.id,
            performance_score=self._default_performance_score,
        )
        self.session.add(employee)
        self.session.flush()

        self._audit_log.record_new_hire(employee, department.name)
        return employee_number
