"""
Module: hr_kernel.models.employee
Responsibility: ORM persistence for employees.
Architecture position: Kernel > Models.  May import from db/ only.

Invariants enforced:
    - salary >= 0 (check constraint ck_employee_salary_non_negative).
    - 0 <= performance_score <= 10 (check constraint ck_employee_score_range).
    - department_id references an existing department (foreign key).
    - employee_number is unique and allocated by SequenceService, never by
      an aggregate max()+1 query.

Audit relevance:
    Every change to ``salary`` is captured by the SalaryChangeAuditor as a
    SalaryHistory row in the same flush.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import BigInteger, CheckConstraint, ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from hr_kernel.db.base import Base
from hr_kernel.db.types import SCORE_TYPE

DEFAULT_PERFORMANCE_SCORE = Decimal("5.0")


class Employee(Base):
    """
    An employee.

    Guarantees:
        - ``employee_number`` is the stable business identifier used by
          every service API.
        - ``performance_score`` is the denormalized latest review score;
          defaults to 5.0 at creation.
    """

    __tablename__ = "employees"

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_employee_salary_non_negative"),
        CheckConstraint(
            "performance_score >= 0 AND performance_score <= 10",
            name="ck_employee_score_range",
        ),
        Index("idx_employee_department_score", "department_id", "performance_score"),
    )

    employee_number: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        unique=True,
    )

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    hire_date: Mapped[datetime] = mapped_column(nullable=False)

    # active_history: the prior value is loaded before a set on an expired
    # or unloaded instance, so the salary auditor always sees old -> new.
    salary: Mapped[Decimal] = mapped_column(nullable=False, active_history=True)

    department_id: Mapped[UUID] = mapped_column(
        ForeignKey("departments.id"),
        nullable=False,
    )

    performance_score: Mapped[Decimal] = mapped_column(
        SCORE_TYPE,
        nullable=False,
        default=DEFAULT_PERFORMANCE_SCORE,
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Employee #{self.employee_number} {self.full_name}>"
