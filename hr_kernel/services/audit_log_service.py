"""
AuditLogService -- append-only onboarding audit trail.

Responsibility:
    Creates immutable AuditLog rows for onboarding events, each with a
    monotonically increasing sequence number.

Architecture position:
    Kernel > Services -- called by OnboardingService inside its transaction.

Invariants enforced:
    - Sequence monotonicity via SequenceService (never raw SQL max+1).
    - Append-only: AuditLog rows are protected by ORM listeners and
      PostgreSQL triggers.

Non-goals:
    - Does NOT call ``session.commit()`` -- caller controls boundaries.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from hr_kernel.domain.clock import Clock, SystemClock
from hr_kernel.logging_config import get_logger
from hr_kernel.models.audit_log import AuditAction, AuditLog
from hr_kernel.models.employee import Employee
from hr_kernel.services.sequence_service import SequenceService

logger = get_logger("services.audit_log")


class AuditLogService:
    """Service for writing and reading the onboarding audit log."""

    def __init__(
        self,
        session: Session,
        clock: Clock | None = None,
    ):
        self._session = session
        self._clock = clock or SystemClock()
        self._sequence_service = SequenceService(session)

    def _create_entry(
        self,
        action: AuditAction,
        description: str,
        entity_id: UUID | None = None,
    ) -> AuditLog:
        seq = self._sequence_service.next_value(SequenceService.AUDIT_LOG)

        entry = AuditLog(
            seq=seq,
            occurred_at=self._clock.now(),
            action=action.value,
            entity_id=entity_id,
            description=description,
        )
        self._session.add(entry)
        self._session.flush()

        logger.info(
            "audit_log_entry_created",
            extra={
                "action": action.value,
                "seq": seq,
                "entity_id": str(entity_id) if entity_id else None,
            },
        )
        return entry

    def record_new_hire(self, employee: Employee, department_name: str) -> AuditLog:
        """
        Record that an employee was hired.

        Preconditions:
            - ``employee`` is pending or persistent in the same session.
        """
        return self._create_entry(
            action=AuditAction.NEW_HIRE,
            entity_id=employee.id,
            description=(
                f"Hired employee #{employee.employee_number} "
                f"{employee.first_name} {employee.last_name} <{employee.email}> "
                f"into {department_name} at salary {employee.salary}"
            ),
        )

    def entries(self, action: AuditAction | None = None) -> list[AuditLog]:
        """Audit log entries in sequence order, optionally filtered by action."""
        query = select(AuditLog).order_by(AuditLog.seq)
        if action is not None:
            query = query.where(AuditLog.action == action.value)
        return list(self._session.execute(query).scalars())
