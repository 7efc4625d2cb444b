"""
Tagged parser outcomes.

Each field parser returns Found(value) or NotFound(reason); the profile
assembler is the one place that turns NotFound into a placeholder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T

    @property
    def found(self) -> bool:
        return True


@dataclass(frozen=True)
class NotFound:
    reason: str = ""

    @property
    def found(self) -> bool:
        return False


ParseResult = Union[Found[T], NotFound]


def value_or(result: "ParseResult[T]", default: T) -> T:
    """Unwrap a Found, or return `default` for NotFound."""
    if isinstance(result, Found):
        return result.value
    return default
