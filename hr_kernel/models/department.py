"""
Module: hr_kernel.models.department
Responsibility: ORM persistence for organizational departments.
Architecture position: Kernel > Models.  May import from db/ only.

Departments are reference data from the kernel's point of view: they are
read to validate hires and to head reports, never written by a service.
"""

from decimal import Decimal

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from hr_kernel.db.base import Base


class Department(Base):
    """
    A department employees belong to.

    Guarantees:
        - ``name`` is unique.
        - ``budget`` is Decimal (Numeric(38, 9)).
    """

    __tablename__ = "departments"

    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)

    budget: Mapped[Decimal] = mapped_column(nullable=False, default=Decimal("0"))

    def __repr__(self) -> str:
        return f"<Department {self.name}>"
