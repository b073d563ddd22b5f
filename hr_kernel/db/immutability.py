"""
ORM-Level Immutability Enforcement (Layer 1 of 2).

===============================================================================
WHY THIS EXISTS
===============================================================================

Salary history and the audit log are evidence.  Once written they may only
be appended to, never corrected in place.

  Layer 1: THIS FILE (ORM event listeners)
    - Catches modifications through Python/SQLAlchemy code
    - Fires BEFORE the SQL is sent to the database

  Layer 2: db/sql/*.sql (PostgreSQL triggers)
    - Catches raw SQL, bulk UPDATE statements, direct psql access
    - Fires AT the database level, independent of application code

===============================================================================
PROTECTED ENTITIES
===============================================================================

Entity         | When Immutable          | Why
---------------|-------------------------|----------------------------------
SalaryHistory  | ALWAYS (from creation)  | Every salary change must stay traceable
AuditLog       | ALWAYS (from creation)  | Onboarding trail is append-only

===============================================================================
USAGE
===============================================================================

Registered by ``init_engine_from_url()``.  To temporarily disable
(TESTS ONLY):

    from hr_kernel.db.immutability import unregister_immutability_listeners
    unregister_immutability_listeners()
    # ... do forbidden operation ...
    register_immutability_listeners()
"""

from sqlalchemy import event

from hr_kernel.exceptions import ImmutabilityViolationError
from hr_kernel.logging_config import get_logger

logger = get_logger("db.immutability")


def _block(entity_type: str, target, operation: str, reason: str) -> None:
    logger.error(
        "immutability_violation_blocked",
        extra={
            "entity_type": entity_type,
            "entity_id": str(target.id),
            "operation": operation,
        },
    )
    raise ImmutabilityViolationError(
        entity_type=entity_type,
        entity_id=str(target.id),
        reason=reason,
    )


def _check_salary_history_immutability(mapper, connection, target):
    """Prevent any updates to SalaryHistory records."""
    _block(
        "SalaryHistory",
        target,
        "UPDATE",
        "Salary history records are immutable and cannot be modified",
    )


def _check_salary_history_delete(mapper, connection, target):
    """Prevent deletion of SalaryHistory records."""
    _block(
        "SalaryHistory",
        target,
        "DELETE",
        "Salary history records cannot be deleted",
    )


def _check_audit_log_immutability(mapper, connection, target):
    """Prevent any updates to AuditLog records."""
    _block(
        "AuditLog",
        target,
        "UPDATE",
        "Audit log entries are immutable and cannot be modified",
    )


def _check_audit_log_delete(mapper, connection, target):
    """Prevent deletion of AuditLog records."""
    _block(
        "AuditLog",
        target,
        "DELETE",
        "Audit log entries cannot be deleted",
    )


def _listeners():
    from hr_kernel.models.audit_log import AuditLog
    from hr_kernel.models.salary_history import SalaryHistory

    return [
        (SalaryHistory, "before_update", _check_salary_history_immutability),
        (SalaryHistory, "before_delete", _check_salary_history_delete),
        (AuditLog, "before_update", _check_audit_log_immutability),
        (AuditLog, "before_delete", _check_audit_log_delete),
    ]


def register_immutability_listeners():
    """
    Register all immutability enforcement event listeners.

    Idempotent: listeners already registered are left alone.
    """
    for target, event_name, listener_fn in _listeners():
        if not event.contains(target, event_name, listener_fn):
            event.listen(target, event_name, listener_fn)


def unregister_immutability_listeners():
    """
    Remove immutability enforcement event listeners.

    WARNING: Only use this in tests where you need to intentionally
    violate immutability rules to verify detection.
    """
    for target, event_name, listener_fn in _listeners():
        if event.contains(target, event_name, listener_fn):
            event.remove(target, event_name, listener_fn)
