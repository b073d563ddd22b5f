"""
Module: hr_kernel.models.salary_history
Responsibility: ORM persistence for the append-only salary change trail.
Architecture position: Kernel > Models.  May import from db/ only.

Invariants enforced:
    - Append-only: no UPDATE or DELETE (ORM listener + PostgreSQL trigger).
    - Exactly one row per salary mutation, written by SalaryChangeAuditor in
      the same flush as the mutation.
    - change_percentage = round(((new - old) / old) * 100, 2); NULL only when
      old_salary is 0 and the record_null policy is active.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from hr_kernel.db.base import Base
from hr_kernel.db.types import PERCENTAGE_TYPE


class SalaryHistory(Base):
    """One recorded salary change."""

    __tablename__ = "salary_history"

    __table_args__ = (
        Index("idx_salary_history_employee", "employee_id", "changed_at"),
    )

    employee_id: Mapped[UUID] = mapped_column(
        ForeignKey("employees.id"),
        nullable=False,
    )

    changed_at: Mapped[datetime] = mapped_column(nullable=False)

    old_salary: Mapped[Decimal] = mapped_column(nullable=False)

    new_salary: Mapped[Decimal] = mapped_column(nullable=False)

    change_percentage: Mapped[Decimal | None] = mapped_column(
        PERCENTAGE_TYPE,
        nullable=True,
    )

    def __repr__(self) -> str:
        return (
            f"<SalaryHistory {self.old_salary} -> {self.new_salary} "
            f"({self.change_percentage}%)>"
        )
