from __future__ import annotations

import logging


def configure_app_logging(level: str = "INFO") -> None:
    """
    Set the level for the service's logger tree.

    Notes:
    - Uvicorn already configures handlers; this only sets levels for our package.
    - Set `APP_LOG_LEVEL=DEBUG` to see every validated payload.
    """

    normalized = level.upper()
    logging.getLogger("employee_service").setLevel(normalized)
    logging.getLogger("employee_service").propagate = True
