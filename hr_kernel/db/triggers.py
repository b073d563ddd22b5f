"""
Module: hr_kernel.db.triggers
Responsibility: Loading, installing, and verifying PostgreSQL append-only
    triggers (Layer 2 of 2).  This is the database-level complement to the
    ORM-level listeners in db/immutability.py.
Architecture position: Kernel > DB.  May import from db/ only.

Invariants enforced:
    - SalaryHistory rows: no UPDATE, no DELETE.
    - AuditLog rows: no UPDATE, no DELETE.

Failure modes:
    - PostgreSQL RAISE EXCEPTION on any trigger violation (surfaced by
      SQLAlchemy as InternalError / DBAPIError).
    - FileNotFoundError if SQL files are missing from the sql/ directory.
"""

from pathlib import Path

from sqlalchemy import text
from sqlalchemy.engine import Engine

# Directory containing SQL trigger files
SQL_DIR = Path(__file__).parent / "sql"

# Installed in this order
TRIGGER_FILES = [
    "01_salary_history.sql",
    "02_audit_log.sql",
]

DROP_FILE = "99_drop_all.sql"

ALL_TRIGGER_NAMES = [
    "trg_salary_history_immutability_update",
    "trg_salary_history_immutability_delete",
    "trg_audit_log_immutability_update",
    "trg_audit_log_immutability_delete",
]


def _load_sql_file(filename: str) -> str:
    """
    Load SQL content from a file in the sql/ directory.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    filepath = SQL_DIR / filename
    return filepath.read_text(encoding="utf-8")


def _load_all_trigger_sql() -> str:
    """Load and concatenate all trigger SQL files in numbered order."""
    sql_parts = []
    for filename in TRIGGER_FILES:
        sql_parts.append(f"-- Loading: {filename}")
        sql_parts.append(_load_sql_file(filename))
        sql_parts.append("")
    return "\n".join(sql_parts)


def _load_drop_sql() -> str:
    return _load_sql_file(DROP_FILE)


def install_immutability_triggers(engine: Engine) -> None:
    """
    Install database-level append-only triggers.

    Preconditions: Tables must exist.  Engine must be connected to PostgreSQL.
    Postconditions: All triggers in ALL_TRIGGER_NAMES are installed.
        Trigger functions use CREATE OR REPLACE (idempotent).
    """
    with engine.connect() as conn:
        conn.execute(text(_load_all_trigger_sql()))
        conn.commit()


def uninstall_immutability_triggers(engine: Engine) -> None:
    """
    Remove database-level append-only triggers.

    WARNING: Only for tests and migrations.  Re-install immediately after.
    """
    with engine.connect() as conn:
        conn.execute(text(_load_drop_sql()))
        conn.commit()


def get_installed_triggers(engine: Engine) -> list[str]:
    """Get list of installed append-only triggers."""
    trigger_list = ", ".join(f"'{name}'" for name in ALL_TRIGGER_NAMES)
    check_sql = f"""
    SELECT tgname FROM pg_trigger
    WHERE tgname IN ({trigger_list})
    ORDER BY tgname;
    """

    with engine.connect() as conn:
        result = conn.execute(text(check_sql))
        return [row[0] for row in result]


def triggers_installed(engine: Engine) -> bool:
    """Check if all append-only triggers are installed."""
    return set(get_installed_triggers(engine)) == set(ALL_TRIGGER_NAMES)
