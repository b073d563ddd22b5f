"""
Module: hr_kernel.models.audit_log
Responsibility: ORM persistence for the append-only onboarding audit log.
Architecture position: Kernel > Models.  May import from db/ only.

Invariants enforced:
    - Append-only: no UPDATE or DELETE (ORM listener + PostgreSQL trigger).
    - seq is unique and monotonically increasing, allocated by SequenceService.
"""

from datetime import datetime
from enum import Enum
from uuid import UUID

from sqlalchemy import BigInteger, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from hr_kernel.db.base import Base, UUIDString
from hr_kernel.db.types import LONG_TEXT_TYPE


class AuditAction(str, Enum):
    """Types of auditable actions."""

    NEW_HIRE = "NEW_HIRE"


class AuditLog(Base):
    """
    One audit log entry.

    Guarantees:
        - ``action`` stores the AuditAction value (e.g. "NEW_HIRE").
        - ``description`` is a human-readable summary of the event.
    """

    __tablename__ = "audit_log"

    __table_args__ = (
        Index("idx_audit_log_action", "action"),
        Index("idx_audit_log_occurred", "occurred_at"),
    )

    seq: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        unique=True,
    )

    occurred_at: Mapped[datetime] = mapped_column(nullable=False)

    action: Mapped[str] = mapped_column(String(50), nullable=False)

    # Entity the entry is about (e.g. the new Employee)
    entity_id: Mapped[UUID | None] = mapped_column(UUIDString(), nullable=True)

    description: Mapped[str] = mapped_column(LONG_TEXT_TYPE, nullable=False)
