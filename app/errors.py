"""Error taxonomy shared by the store, the service layer and the HTTP boundary.

There are exactly three kinds of failure:

- ``ValidationFailed``: caller input rejected before any store call (400).
- ``NotFound``: the referenced list does not exist (404).
- ``Internal``: anything else the database layer raised (500).

Driver and SQLAlchemy exceptions are converted in one place only,
``classified()``, which the repository wraps around its database work.
No framework imports allowed.
"""

from __future__ import annotations

import enum
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Optional

from sqlalchemy.exc import NoResultFound


class ErrorKind(str, enum.Enum):
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    INTERNAL = "internal"


STATUS_CODES = {
    ErrorKind.VALIDATION_FAILED: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.INTERNAL: 500,
}


class AppError(Exception):
    """Base class for every failure the application reports."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return STATUS_CODES[self.kind]


class ValidationFailed(AppError):
    """Raised (or carried on a result) when user input is rejected."""

    kind = ErrorKind.VALIDATION_FAILED

    def __init__(self, field: str, value: Any, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class NotFound(AppError):
    """Raised when a lookup matched zero rows."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, record: str = "record", record_id: Optional[int] = None) -> None:
        if record_id is None:
            message = f"{record} not found"
        else:
            message = f"{record} with id {record_id} not found"
        super().__init__(message)
        self.record = record
        self.record_id = record_id


class Internal(AppError):
    """Raised for every other database or connectivity failure.

    The message is meant for logs; it is never sent to the client.
    """

    kind = ErrorKind.INTERNAL

    def __init__(self, message: str = "internal error") -> None:
        super().__init__(message)


def classify(exc: BaseException) -> AppError:
    """Map any exception onto the three-kind taxonomy."""
    if isinstance(exc, AppError):
        return exc
    if isinstance(exc, NoResultFound):
        return NotFound()
    return Internal(f"{type(exc).__name__}: {exc}")


@asynccontextmanager
async def classified() -> AsyncIterator[None]:
    """Re-raise anything escaping the block as a classified AppError.

    The original exception is kept as ``__cause__`` for logging.
    """
    try:
        yield
    except AppError:
        raise
    except Exception as exc:
        raise classify(exc) from exc
