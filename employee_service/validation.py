"""
Request validation for the employee endpoints.

The checks are plain functions that return the rejection (an ``ApiError``) or
``None`` to continue. ``valid_employee_id`` and ``valid_employee_payload`` wrap
them as FastAPI dependencies; listing them on a route runs them in order
before the handler body, and the first rejection short-circuits the request.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any

from fastapi import Body

from employee_service.errors import ApiError, InvalidDate, InvalidId, InvalidSalary, MissingFields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "group_name",
    "role",
    "expected_salary",
    "expected_date_of_defense",
)


def to_number(value: Any) -> int | float | None:
    """
    Numeric reading of a salary or path id, or None if it has none.

    Accepts ints, floats, booleans and numeric text (surrounding whitespace
    allowed, blank text reads as 0). NaN is never a number here.
    """

    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return None if math.isnan(value) else value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return 0
    if "_" in text:
        return None
    try:
        number = float(text)
    except ValueError:
        return None
    if math.isnan(number):
        return None
    if number.is_integer() and "." not in text and "e" not in text.lower():
        return int(text)
    return number


def parse_date(value: Any) -> datetime | None:
    """
    Parse a date from a client payload.

    Accepts ISO-8601 date / date-time strings, RFC 2822 / HTTP-date strings
    ("Sun, 01 Jun 2025 12:00:00 GMT") and epoch milliseconds. Returns an aware
    UTC datetime, or None when the value is not a date or its UTC instant
    falls outside the representable range. Naive inputs are taken as UTC.
    """

    if isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if not isinstance(value, str):
        return None

    parsed = _parse_iso(value.strip()) or _parse_rfc2822(value.strip())
    if parsed is None:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc)
    except OverflowError:
        # e.g. "0001-01-01T00:00:00+01:00" lands before year 1 in UTC.
        return None


def _parse_iso(text: str) -> datetime | None:
    if text[-1:] in ("Z", "z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def _parse_rfc2822(text: str) -> datetime | None:
    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError, IndexError):
        return None


def format_timestamp(moment: datetime) -> str:
    """Canonical stored form: ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC."""

    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def check_payload(payload: Any) -> ApiError | None:
    """Presence first, then salary, then date. First failure wins."""

    if not isinstance(payload, dict) or any(not payload.get(field) for field in REQUIRED_FIELDS):
        return MissingFields()

    if to_number(payload["expected_salary"]) is None:
        return InvalidSalary()

    if parse_date(payload["expected_date_of_defense"]) is None:
        return InvalidDate()

    return None


def check_employee_id(raw_id: str) -> ApiError | None:
    if to_number(raw_id) is None:
        return InvalidId()
    return None


def build_record(payload: dict[str, Any]) -> dict[str, Any]:
    """
    Column values for an insert/update from a payload that passed ``check_payload``.

    The salary is kept exactly as sent (number or numeric text).
    """

    return {
        "first_name": str(payload["first_name"]),
        "last_name": str(payload["last_name"]),
        "group_name": str(payload["group_name"]),
        "role": str(payload["role"]),
        "expected_salary": payload["expected_salary"],
        "expected_date_of_defense": format_timestamp(parse_date(payload["expected_date_of_defense"])),
    }


def valid_employee_payload(payload: Any = Body(None)) -> dict[str, Any]:
    logger.debug("Validating employee data: %s", payload)

    error = check_payload(payload)
    if error is not None:
        logger.info("Employee payload rejected: %s", error.message)
        raise error

    logger.debug("Validation passed")
    return payload


def valid_employee_id(id: str) -> int | float:
    error = check_employee_id(id)
    if error is not None:
        logger.info("Employee id rejected: %r", id)
        raise error

    number = to_number(id)
    if isinstance(number, float) and number.is_integer():
        return int(number)
    return number
