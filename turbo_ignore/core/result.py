"""Result type for explicit error handling.

Fallible operations (reading a manifest from disk, for example) return
``Ok(value)`` or ``Err(error)`` instead of raising, so callers decide how a
failure is reported.

Usage:
    result = read_manifest(path)
    if is_err(result):
        print(result.error.kind)
    else:
        print(result.value.name)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeGuard, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result carrying ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result carrying ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Union[Ok[T], Err[E]]


def is_err(result: Result[T, E]) -> TypeGuard[Err[E]]:
    """Type guard narrowing ``result`` to ``Err``."""
    return isinstance(result, Err)
