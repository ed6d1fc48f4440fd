"""
Error taxonomy for the employee endpoints.

Every error is rendered as ``{"error": <message>}`` with its status code by the
handler installed in ``employee_service.main``.
"""

from __future__ import annotations

from fastapi import status


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class MissingFields(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Missing required fields"


class InvalidSalary(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Expected salary must be a number"


class InvalidDate(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid date format"


class InvalidId(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid employee ID"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Employee not found"


class StoreFailure(ApiError):
    """The database reported an error; ``message`` is its text."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
