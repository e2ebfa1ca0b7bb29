# models/api_result.py

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from cnst.error_kind import ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """Outcome of an upstream call: either a value or an error kind with a message."""
    value: Optional[T] = None
    error: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> 'ApiResult[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorKind, message: str = "") -> 'ApiResult[T]':
        return cls(error=error, message=message)
