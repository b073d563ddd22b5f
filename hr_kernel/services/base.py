"""
BaseService -- abstract base for kernel services.

Responsibility:
    Provides the common constructor for services that write, and the
    shared commit-or-rollback handling for services that own their
    transaction boundary.

Architecture position:
    Kernel > Services -- imperative shell infrastructure.

Invariants enforced:
    - Business operations (hire, change_salary, record_review) own their
      transaction: commit on success, rollback on any exception.
    - SQLAlchemy errors leave the service as StorageFailureError with the
      original chained; HrKernelError subclasses propagate unchanged.
    - Helper services (SequenceService, AuditLogService) only flush; the
      calling business operation commits.
"""

from abc import ABC
from collections.abc import Callable
from typing import Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from hr_kernel.db.base import Base
from hr_kernel.exceptions import HrKernelError, StorageFailureError
from hr_kernel.logging_config import get_logger

ModelType = TypeVar("ModelType", bound=Base)
ResultType = TypeVar("ResultType")

logger = get_logger("services.base")


class BaseService(ABC, Generic[ModelType]):
    """
    Abstract base class for kernel services.

    Contract:
        Accepts a SQLAlchemy ``Session`` from the caller.  Subclasses that
        own a business operation wrap it in ``_in_transaction``.
    """

    def __init__(self, session: Session):
        self.session = session

    def _in_transaction(
        self,
        operation: str,
        work: Callable[[], ResultType],
    ) -> ResultType:
        """
        Run ``work`` and commit, or roll back everything it wrote.

        Raises:
            HrKernelError: Re-raised unchanged after rollback.
            StorageFailureError: Wrapping any SQLAlchemyError, after rollback.
        """
        try:
            result = work()
            self.session.commit()
            return result
        except HrKernelError:
            self.session.rollback()
            raise
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(
                "storage_failure",
                extra={"operation": operation},
                exc_info=True,
            )
            raise StorageFailureError(operation=operation, cause=exc) from exc
        except Exception:
            self.session.rollback()
            raise
