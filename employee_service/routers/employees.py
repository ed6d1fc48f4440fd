from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from employee_service.errors import NotFound, StoreFailure
from employee_service.schemas.employee import EmployeeOut
from employee_service.settings import Settings, get_settings
from employee_service.store import EmployeeStore, StoreResult, get_store
from employee_service.validation import build_record, valid_employee_id, valid_employee_payload

router = APIRouter(tags=["employees"])


def _unwrap(result: StoreResult, settings: Settings):
    if not result.ok:
        # The real message is already logged by the store.
        raise StoreFailure(result.error if settings.expose_store_errors else None)
    return result.value


def _check_affected(affected: int, settings: Settings) -> None:
    if affected == 0 and settings.report_missing_as_not_found:
        raise NotFound()


@router.get("/employees", response_model=list[EmployeeOut])
def list_employees(
    store: EmployeeStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> list[EmployeeOut]:
    rows = _unwrap(store.list_all(), settings)
    return [EmployeeOut.model_validate(row) for row in rows]


@router.post("/employees", response_model=list[EmployeeOut], status_code=status.HTTP_201_CREATED)
def create_employee(
    payload: dict[str, Any] = Depends(valid_employee_payload),
    store: EmployeeStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> list[EmployeeOut]:
    rows = _unwrap(store.insert(build_record(payload)), settings)
    return [EmployeeOut.model_validate(row) for row in rows]


@router.put("/employees/{id}", response_class=PlainTextResponse)
def update_employee(
    employee_id: int | float = Depends(valid_employee_id),
    payload: dict[str, Any] = Depends(valid_employee_payload),
    store: EmployeeStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> str:
    affected = _unwrap(store.update(employee_id, build_record(payload)), settings)
    _check_affected(affected, settings)
    return "Employee updated successfully"


@router.delete("/employees/{id}", response_class=PlainTextResponse)
def delete_employee(
    employee_id: int | float = Depends(valid_employee_id),
    store: EmployeeStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> str:
    affected = _unwrap(store.delete(employee_id), settings)
    _check_affected(affected, settings)
    return "Employee deleted successfully"
