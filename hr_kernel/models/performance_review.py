"""
Module: hr_kernel.models.performance_review
Responsibility: ORM persistence for performance reviews.
Architecture position: Kernel > Models.  May import from db/ only.

The latest review score is denormalized onto Employee.performance_score by
PerformanceService; reports and bonuses read it from there.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import CheckConstraint, ForeignKey, Index, Text
from sqlalchemy.orm import Mapped, mapped_column

from hr_kernel.db.base import Base
from hr_kernel.db.types import SCORE_TYPE


class PerformanceReview(Base):
    """A dated performance review of one employee."""

    __tablename__ = "performance_reviews"

    __table_args__ = (
        CheckConstraint("score >= 0 AND score <= 10", name="ck_review_score_range"),
        Index("idx_review_employee", "employee_id"),
    )

    employee_id: Mapped[UUID] = mapped_column(
        ForeignKey("employees.id"),
        nullable=False,
    )

    review_date: Mapped[datetime] = mapped_column(nullable=False)

    score: Mapped[Decimal] = mapped_column(SCORE_TYPE, nullable=False)

    comments: Mapped[str | None] = mapped_column(Text, nullable=True)
