"""
Module: hr_kernel.selectors.department_selector
Responsibility: Read-only department lookups.
Architecture position: Kernel > Selectors.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID

from sqlalchemy import select

from hr_kernel.models.department import Department
from hr_kernel.selectors.base import BaseSelector


@dataclass(frozen=True)
class DepartmentRecord:
    """Department DTO."""

    id: UUID
    name: str
    budget: Decimal


class DepartmentSelector(BaseSelector[Department]):
    """Selector for department queries."""

    def get(self, department_id: UUID) -> DepartmentRecord | None:
        """Return the department, or None if it does not exist."""
        department = self.session.execute(
            select(Department).where(Department.id == department_id)
        ).scalar_one_or_none()

        if department is None:
            return None
        return DepartmentRecord(
            id=department.id,
            name=department.name,
            budget=department.budget,
        )

    def exists(self, department_id: UUID) -> bool:
        return self.get(department_id) is not None
