"""Typed outcomes returned by application services."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from app.domain.errors import InvalidInputError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Rejected outcome carrying the validation ``error``."""

    error: InvalidInputError

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        return self.error.message


Result = Union[Ok[T], Err]

__all__ = ["Err", "Ok", "Result"]
