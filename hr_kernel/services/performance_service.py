"""
PerformanceService -- performance reviews and the denormalized score.

Responsibility:
    Records a PerformanceReview and copies its score onto
    Employee.performance_score, which is what bonuses and reports read.

Architecture position:
    Kernel > Services -- imperative shell.

Invariants enforced:
    - 0 <= score <= 10, checked before any write (also a DB constraint).
    - Review insert and score update commit together.
"""

from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session

from hr_kernel.db.types import MAX_PERFORMANCE_SCORE, MIN_PERFORMANCE_SCORE, round_score
from hr_kernel.domain.clock import Clock, SystemClock
from hr_kernel.exceptions import EmployeeNotFoundError, InvalidPerformanceScoreError
from hr_kernel.logging_config import LogContext, get_logger
from hr_kernel.models.employee import Employee
from hr_kernel.models.performance_review import PerformanceReview
from hr_kernel.services.base import BaseService

logger = get_logger("services.performance")


class PerformanceService(BaseService[PerformanceReview]):
    """Records performance reviews."""

    def __init__(self, session: Session, clock: Clock | None = None):
        super().__init__(session)
        self._clock = clock or SystemClock()

    def record_review(
        self,
        employee_number: int,
        score: Decimal,
        comments: str | None = None,
    ) -> PerformanceReview:
        """
        Record a review and make its score the employee's current score.

        Raises:
            InvalidPerformanceScoreError: score outside [0, 10].
            EmployeeNotFoundError: unknown employee number.
            StorageFailureError: the write failed and was rolled back.
        """
        score = Decimal(score)

        with LogContext.bind(operation="record_review", employee_number=str(employee_number)):
            if not score.is_finite() or not MIN_PERFORMANCE_SCORE <= score <= MAX_PERFORMANCE_SCORE:
                logger.warning("review_rejected", extra={"score": str(score)})
                raise InvalidPerformanceScoreError(score)

            review = self._in_transaction(
                "record_review",
                lambda: self._record(employee_number, round_score(score), comments),
            )
            logger.info("review_recorded", extra={"score": str(review.score)})
            return review

    def _record(
        self,
        employee_number: int,
        score: Decimal,
        comments: str | None,
    ) -> PerformanceReview:
        employee = self.session.execute(
            select(Employee).where(Employee.employee_number == employee_number)
        ).scalar_one_or_none()
        if employee is None:
            raise EmployeeNotFoundError(employee_number)

        review = PerformanceReview(
            employee_id=employee.id,
            review_date=self._clock.now(),
            score=score,
            comments=comments,
        )
        self.session.add(review)
        employee.performance_score = score
        self.session.flush()
        return review
