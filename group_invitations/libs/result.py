"""
Result type returned by every use case.

A use case never raises for an expected outcome: it returns ``Return.ok(value)``
or ``Return.err(Error(...))``. Callers branch on ``is_ok()`` / ``is_err()`` and
on ``Error.kind``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Variant tag of an Error"""

    condition = "condition"
    server = "server"
    transaction = "transaction"


@dataclass(frozen=True)
class Error:
    code: str
    message: str
    kind: ErrorKind = ErrorKind.condition
    cause: Optional[BaseException] = field(default=None, compare=False, repr=False)

    def is_condition(self) -> bool:
        return self.kind == ErrorKind.condition


class Result(Generic[T]):
    def __init__(self, value: Optional[T] = None, error: Optional[Error] = None):
        self._value = value
        self._error = error

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    @property
    def value(self) -> Optional[T]:
        if self._error is not None:
            raise ValueError(f"Result is an error: {self._error.code}")
        return self._value

    @property
    def error(self) -> Optional[Error]:
        return self._error

    def __repr__(self) -> str:
        if self._error is not None:
            return f"Err({self._error.code})"
        return f"Ok({self._value!r})"


class Return:
    @staticmethod
    def ok(value: Optional[T] = None) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def err(error: Error) -> Result:
        return Result(error=error)
