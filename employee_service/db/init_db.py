from __future__ import annotations

from employee_service.db.base import Base
from employee_service.db.session import engine
from employee_service.models import employee as _employee  # noqa: F401  (register the table)


def init_db() -> None:
    """Create the employees table if it does not exist yet."""

    Base.metadata.create_all(bind=engine)
