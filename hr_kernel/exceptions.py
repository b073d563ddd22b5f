"""
Typed Exception Hierarchy for the HR Kernel.

===============================================================================
WHY TYPED EXCEPTIONS
===============================================================================

Callers must be able to react to a failure without parsing its message.
Every error therefore:
  1. Has a TYPED exception class (catch by type, not message)
  2. Has a CODE class attribute (machine-readable, API-safe)
  3. Carries its context as attributes (not just a message string)

The message (``str(exc)``) is the human-readable description that goes
into the logs.

Example:
    try:
        employee_number = onboarding.hire(...)
    except InvalidInputError as e:
        return {"error": e.code, "salary": str(e.salary)}
    except NotFoundError as e:
        return {"error": e.code}

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    HrKernelError (base)
    |
    +-- InvalidInputError
    |   +-- InvalidSalaryError
    |   +-- InvalidPerformanceScoreError
    |
    +-- NotFoundError
    |   +-- DepartmentNotFoundError
    |   +-- EmployeeNotFoundError
    |
    +-- InvalidStateError
    |   +-- UndefinedSalaryChangeError
    |   +-- InconsistentReportError
    |
    +-- ImmutabilityError
    |   +-- ImmutabilityViolationError
    |
    +-- StorageFailureError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
Input           | INVALID_SALARY              | Salary below zero
                | INVALID_PERFORMANCE_SCORE   | Score outside [0, 10]
----------------|-----------------------------|-----------------------------------------
Not found       | DEPARTMENT_NOT_FOUND        | Department ID doesn't exist
                | EMPLOYEE_NOT_FOUND          | Employee number doesn't exist
----------------|-----------------------------|-----------------------------------------
State           | UNDEFINED_SALARY_CHANGE     | Change percentage from a zero salary
                | INCONSISTENT_REPORT         | Aggregate read drifted from row stream
----------------|-----------------------------|-----------------------------------------
Immutability    | IMMUTABILITY_VIOLATION      | Update/delete of an append-only record
----------------|-----------------------------|-----------------------------------------
Storage         | STORAGE_FAILURE             | Underlying persistence error (wrapped)

===============================================================================
PROPAGATION
===============================================================================

Input and not-found errors are raised before any write.  Services that own
a transaction roll it back on every error; SQLAlchemy errors are re-raised
as StorageFailureError with the original exception chained as ``__cause__``
and kept on ``.cause``.
"""

from decimal import Decimal


class HrKernelError(Exception):
    """
    Base exception for all HR kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "HR_KERNEL_ERROR"


# Input validation


class InvalidInputError(HrKernelError):
    """Base exception for rejected caller input."""

    code: str = "INVALID_INPUT"


class InvalidSalaryError(InvalidInputError):
    """Salary must be a finite amount, zero or positive."""

    code: str = "INVALID_SALARY"

    def __init__(self, salary: Decimal):
        self.salary = salary
        super().__init__(f"Salary must be a finite amount >= 0, got {salary}")


class InvalidPerformanceScoreError(InvalidInputError):
    """Performance score must lie in [0, 10]."""

    code: str = "INVALID_PERFORMANCE_SCORE"

    def __init__(self, score: Decimal):
        self.score = score
        super().__init__(f"Performance score must be within [0, 10], got {score}")


# Lookup failures


class NotFoundError(HrKernelError):
    """Base exception for missing records."""

    code: str = "NOT_FOUND"


class DepartmentNotFoundError(NotFoundError):
    """Department with given ID was not found."""

    code: str = "DEPARTMENT_NOT_FOUND"

    def __init__(self, department_id: str):
        self.department_id = department_id
        super().__init__(f"Department not found: {department_id}")


class EmployeeNotFoundError(NotFoundError):
    """Employee with given employee number was not found."""

    code: str = "EMPLOYEE_NOT_FOUND"

    def __init__(self, employee_number: int):
        self.employee_number = employee_number
        super().__init__(f"Employee not found: {employee_number}")


# State violations


class InvalidStateError(HrKernelError):
    """Base exception for operations the current data cannot support."""

    code: str = "INVALID_STATE"


class UndefinedSalaryChangeError(InvalidStateError):
    """
    Change percentage is undefined because the prior salary is zero.

    Raised by the salary change auditor under the ``reject`` policy.  The
    salary mutation that triggered it is aborted.
    """

    code: str = "UNDEFINED_SALARY_CHANGE"

    def __init__(self, employee_number: int, new_salary: Decimal):
        self.employee_number = employee_number
        self.new_salary = new_salary
        super().__init__(
            f"Cannot record salary change for employee {employee_number}: "
            f"prior salary is 0, change percentage to {new_salary} is undefined"
        )


class InconsistentReportError(InvalidStateError):
    """
    Department aggregate does not match the streamed employee rows.

    Indicates the report reads did not share a consistent snapshot.
    """

    code: str = "INCONSISTENT_REPORT"

    def __init__(
        self,
        department_id: str,
        streamed_count: int,
        aggregate_count: int,
        streamed_total: Decimal,
        aggregate_total: Decimal,
    ):
        self.department_id = department_id
        self.streamed_count = streamed_count
        self.aggregate_count = aggregate_count
        self.streamed_total = streamed_total
        self.aggregate_total = aggregate_total
        super().__init__(
            f"Report for department {department_id} is inconsistent: "
            f"streamed {streamed_count} rows totalling {streamed_total}, "
            f"aggregate saw {aggregate_count} rows totalling {aggregate_total}"
        )


# Immutability


class ImmutabilityError(HrKernelError):
    """Base exception for immutability violations."""

    code: str = "IMMUTABILITY_ERROR"


class ImmutabilityViolationError(ImmutabilityError):
    """
    Attempted to modify or delete an append-only record.

    SalaryHistory and AuditLog rows are immutable from creation.
    """

    code: str = "IMMUTABILITY_VIOLATION"

    def __init__(self, entity_type: str, entity_id: str, reason: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.reason = reason
        super().__init__(
            f"Immutability violation on {entity_type} {entity_id}: {reason}"
        )


# Storage


class StorageFailureError(HrKernelError):
    """
    Underlying persistence failure.

    The operation's transaction has been rolled back.  The original
    exception is available as ``cause`` and as ``__cause__``.
    """

    code: str = "STORAGE_FAILURE"

    def __init__(self, operation: str, cause: BaseException):
        self.operation = operation
        self.cause = cause
        super().__init__(
            f"Storage failure during {operation}: {type(cause).__name__}: {cause}"
        )
