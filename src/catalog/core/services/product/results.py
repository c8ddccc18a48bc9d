"""Explicit outcome values returned by the service layer.

Expected failures (bad input, unknown id) travel back to the HTTP layer as
data instead of exceptions; the router switches on ``ErrorKind`` to pick a
status code. Anything else is a genuine exception and propagates.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ServiceError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Either a value or a ``ServiceError``, never both."""

    value: T | None = None
    error: ServiceError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> ServiceResult[T]:
        return cls(value=value)

    @classmethod
    def validation(cls, message: str) -> ServiceResult[T]:
        return cls(error=ServiceError(ErrorKind.VALIDATION, message))

    @classmethod
    def not_found(cls, message: str) -> ServiceResult[T]:
        return cls(error=ServiceError(ErrorKind.NOT_FOUND, message))
