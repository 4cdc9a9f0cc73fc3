"""Python rendition of the nested two-variant sum type.

``wrap(count, n, payload)`` nests the payload in ``Left``/``Right`` following
``build_path(count, n)``, outermost first. Every index for the same count
produces a value of the same nesting structure, so a caller can treat all
alternatives uniformly and recover the selected one with ``unwrap``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, TypeVar, Union

from .exceptions import InvalidCountError, ShapeMismatchError
from .path import Side, build_path
from .tree_math import power_of_two_ceiling

L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class Left(Generic[L]):
    value: L


@dataclass(frozen=True, slots=True)
class Right(Generic[R]):
    value: R


Either = Union[Left[L], Right[R]]


def fold(path: Iterable[Side | int], payload: Any) -> Any:
    """Apply the path to payload: the first side becomes the outermost variant."""
    value = payload
    for side in reversed(tuple(path)):
        value = Left(value) if Side.coerce(side) is Side.LEFT else Right(value)
    return value


def wrap(count: int, n: int, payload: Any) -> Any:
    """Wrap payload as alternative n of count; count == 1 returns it unchanged."""
    return fold(build_path(count, n), payload)


def unwrap(count: int, value: Any) -> tuple[int, Any]:
    """Recover (n, payload) from a value produced by wrap(count, n, payload).

    Raises
    - ShapeMismatchError: If the nesting does not follow the tree for count.
    """
    if count < 1:
        raise InvalidCountError(f"count must be positive, got {count}")
    remaining = count
    offset = 0
    level = 0
    while remaining > 1:
        half = power_of_two_ceiling(remaining) // 2
        if isinstance(value, Left):
            remaining = half
        elif isinstance(value, Right):
            offset += half
            remaining -= half
        else:
            raise ShapeMismatchError(
                f"expected Left or Right at depth {level} for count={count}, "
                f"got {type(value).__name__}"
            )
        value = value.value
        level += 1
    return offset, value


def index_of(count: int, value: Any) -> int:
    return unwrap(count, value)[0]
