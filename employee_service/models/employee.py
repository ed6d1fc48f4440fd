from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from employee_service.db.base import Base


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    group_name: Mapped[str] = mapped_column(String(100), nullable=False)
    role: Mapped[str] = mapped_column(String(100), nullable=False)

    # Stored as the client sent it (number or numeric text); only checked to be numeric.
    expected_salary: Mapped[Any] = mapped_column(JSON, nullable=False)

    # Canonical UTC timestamp text, e.g. "2025-06-01T12:00:00.000Z".
    expected_date_of_defense: Mapped[str] = mapped_column(String(32), nullable=False)
