"""
SalaryChangeAuditor -- salary history written inside the mutating flush.

Responsibility:
    Observes every flush of a SQLAlchemy Session and, for each Employee
    whose ``salary`` changed value, adds one SalaryHistory row to the same
    flush.  The history row and the salary UPDATE therefore commit or roll
    back together, whichever code path changed the salary.

Architecture position:
    Kernel > Services.  Registered on the Session class by
    ``init_engine_from_url()`` via ``register_salary_change_auditor()``;
    SalaryService.change_salary() is the explicit business operation that
    drives it.

Invariants enforced:
    - Exactly one SalaryHistory row per salary mutation (old != new).
    - change_percentage = round(((new - old) / old) * 100, 2).
    - Old salary 0: rejected with UndefinedSalaryChangeError (default) or
      recorded with a NULL percentage, per ZeroSalaryPolicy.

Failure modes:
    - UndefinedSalaryChangeError raised out of ``session.flush()``; nothing
      has been written and the caller rolls back.
"""

from decimal import Decimal

from sqlalchemy import event
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import get_history

from hr_kernel.domain.clock import Clock, SystemClock
from hr_kernel.domain.salary import ZeroSalaryPolicy, change_percentage
from hr_kernel.exceptions import UndefinedSalaryChangeError
from hr_kernel.logging_config import get_logger
from hr_kernel.models.employee import Employee
from hr_kernel.models.salary_history import SalaryHistory

logger = get_logger("services.salary_auditor")

# session.info key under which the rows recorded by this flush are kept
RECORDED_CHANGES_KEY = "hr_kernel.recorded_salary_changes"


class SalaryChangeAuditor:
    """
    Before-flush hook that appends SalaryHistory rows.

    Contract:
        Only Employee instances already persistent in the session are
        considered; inserting a new employee is not a salary change.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        zero_salary_policy: ZeroSalaryPolicy = ZeroSalaryPolicy.REJECT,
    ):
        self._clock = clock or SystemClock()
        self._zero_salary_policy = ZeroSalaryPolicy(zero_salary_policy)

    @property
    def zero_salary_policy(self) -> ZeroSalaryPolicy:
        return self._zero_salary_policy

    def before_flush(self, session: Session, flush_context, instances) -> None:
        """SessionEvents.before_flush listener."""
        for obj in list(session.dirty):
            if not isinstance(obj, Employee):
                continue

            history = get_history(obj, "salary")
            if not history.deleted or not history.added:
                continue

            old_salary = history.deleted[0]
            new_salary = history.added[0]
            if old_salary == new_salary:
                continue

            self.record_change(session, obj, Decimal(old_salary), Decimal(new_salary))

    def record_change(
        self,
        session: Session,
        employee: Employee,
        old_salary: Decimal,
        new_salary: Decimal,
    ) -> SalaryHistory:
        """
        Add the SalaryHistory row for one change to the session.

        Raises:
            UndefinedSalaryChangeError: old_salary is 0 under the reject policy.
        """
        percentage = change_percentage(old_salary, new_salary)

        if percentage is None and self._zero_salary_policy is ZeroSalaryPolicy.REJECT:
            logger.warning(
                "salary_change_rejected",
                extra={
                    "employee_number": employee.employee_number,
                    "old_salary": str(old_salary),
                    "new_salary": str(new_salary),
                },
            )
            raise UndefinedSalaryChangeError(
                employee_number=employee.employee_number,
                new_salary=new_salary,
            )

        entry = SalaryHistory(
            employee_id=employee.id,
            changed_at=self._clock.now(),
            old_salary=old_salary,
            new_salary=new_salary,
            change_percentage=percentage,
        )
        session.add(entry)
        session.info.setdefault(RECORDED_CHANGES_KEY, []).append(entry)

        logger.info(
            "salary_change_recorded",
            extra={
                "employee_number": employee.employee_number,
                "old_salary": str(old_salary),
                "new_salary": str(new_salary),
                "change_percentage": str(percentage) if percentage is not None else None,
            },
        )
        return entry


def pop_recorded_changes(session: Session) -> list[SalaryHistory]:
    """Return and forget the SalaryHistory rows recorded on this session."""
    return session.info.pop(RECORDED_CHANGES_KEY, [])


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

_installed: SalaryChangeAuditor | None = None


def register_salary_change_auditor(auditor: SalaryChangeAuditor) -> None:
    """
    Install ``auditor`` as the process-wide salary change hook.

    Replaces any previously installed auditor, so at most one history row
    is written per change.
    """
    global _installed
    unregister_salary_change_auditor()
    event.listen(Session, "before_flush", auditor.before_flush)
    _installed = auditor
    logger.debug(
        "salary_change_auditor_registered",
        extra={"zero_salary_policy": auditor.zero_salary_policy.value},
    )


def unregister_salary_change_auditor() -> None:
    """Remove the installed salary change hook, if any."""
    global _installed
    if _installed is not None and event.contains(
        Session, "before_flush", _installed.before_flush
    ):
        event.remove(Session, "before_flush", _installed.before_flush)
    _installed = None


def installed_salary_change_auditor() -> SalaryChangeAuditor | None:
    return _installed
