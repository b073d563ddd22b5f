"""Database layer - engine, base classes, types, and append-only enforcement."""

from hr_kernel.db.base import UUID, Base, UUIDString
from hr_kernel.db.engine import (
    create_tables,
    get_engine,
    get_session,
    session_scope,
    snapshot_scope,
)

__all__ = [
    "get_engine",
    "get_session",
    "session_scope",
    "snapshot_scope",
    "create_tables",
    "Base",
    "UUIDString",
    "UUID",
]
