from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from employee_service.validation import parse_date


class EmployeeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    group_name: str
    role: str
    expected_salary: bool | int | float | str
    expected_date_of_defense: datetime

    @field_validator("expected_date_of_defense", mode="before")
    @classmethod
    def _stored_text_to_datetime(cls, value):
        # Rows hold the canonical "...Z" text; hand pydantic an aware datetime.
        if isinstance(value, str):
            parsed = parse_date(value)
            if parsed is not None:
                return parsed
        return value
