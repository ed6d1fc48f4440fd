"""
Persistent-store wrapper for employee rows.

Each method issues a single statement and reports its outcome as a
``StoreResult`` instead of raising, so handlers branch on the result
explicitly. Database errors, and values the driver refuses to bind, roll the
session back and carry the driver's message in ``StoreResult.error``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fastapi import Depends
from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from employee_service.db.session import get_db
from employee_service.models.employee import Employee

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> StoreResult[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, message: str) -> StoreResult[T]:
        return cls(error=message)


def _store_message(exc: Exception) -> str:
    # DBAPIError wraps the driver exception; its text is what the database said.
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


class EmployeeStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def list_all(self) -> StoreResult[list[Employee]]:
        return self._run("list", lambda: list(self.db.scalars(select(Employee).order_by(Employee.id)).all()))

    def insert(self, record: dict[str, Any]) -> StoreResult[list[Employee]]:
        def _insert() -> list[Employee]:
            rows = list(self.db.scalars(insert(Employee).returning(Employee), [record]).all())
            self.db.commit()
            return rows

        return self._run("insert", _insert)

    def update(self, employee_id: int | float, record: dict[str, Any]) -> StoreResult[int]:
        def _update() -> int:
            result = self.db.execute(update(Employee).where(Employee.id == employee_id).values(**record))
            self.db.commit()
            return result.rowcount

        return self._run("update", _update)

    def delete(self, employee_id: int | float) -> StoreResult[int]:
        def _delete() -> int:
            result = self.db.execute(delete(Employee).where(Employee.id == employee_id))
            self.db.commit()
            return result.rowcount

        return self._run("delete", _delete)

    def _run(self, operation: str, call: Callable[[], T]) -> StoreResult[T]:
        try:
            return StoreResult.success(call())
        except (SQLAlchemyError, OverflowError) as exc:
            # The SQLite driver raises a bare OverflowError for ids beyond 64 bits.
            self.db.rollback()
            logger.exception("Store %s failed", operation)
            return StoreResult.failure(_store_message(exc))


def get_store(db: Session = Depends(get_db)) -> EmployeeStore:
    return EmployeeStore(db)
