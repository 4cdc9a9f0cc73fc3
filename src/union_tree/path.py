"""Routing paths through the balanced tree of two-variant sum types.

For ``count`` alternatives the tree is built by splitting off a left subtree
whose size is the largest power of two below ``count`` and recursing into the
remainder on the right. The left subtree is therefore always perfect, and the
shape depends on ``count`` alone: every index resolves into the same tree.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Union

from .exceptions import IndexOutOfRangeError, InvalidCountError, MalformedPathError
from .tree_math import ceil_log2, first_half, power_of_two_ceiling


class Side(IntEnum):
    """Which variant of the two-variant sum type is taken at one tree level."""

    LEFT = 0
    RIGHT = 1

    @property
    def symbol(self) -> str:
        return "L" if self is Side.LEFT else "R"

    @classmethod
    def coerce(cls, value: object) -> "Side":
        """Accept a Side or its plain integer value (0 or 1)."""
        try:
            return cls(value)
        except ValueError:
            raise MalformedPathError(f"invalid side {value!r}; expected 0 (LEFT) or 1 (RIGHT)") from None


Path = tuple[Side, ...]


def _check_arguments(count: int, n: int) -> None:
    if count < 1:
        raise InvalidCountError(f"count must be positive, got {count}")
    if n < 0 or n >= count:
        raise IndexOutOfRangeError(f"index out of range: {n} not in [0, {count})")


def build_path(count: int, n: int) -> Path:
    """Return the root-first sequence of sides that selects alternative n.

    Parameters
    - count: Number of alternatives at the call site, count >= 1.
    - n: Selected alternative, 0 <= n < count.

    Returns
    - Tuple of Side values; empty when count == 1.

    The result is recomputed on every call; the recursion is only
    ceil(log2(count)) levels deep.

    Raises
    - InvalidCountError: If count < 1.
    - IndexOutOfRangeError: If n is outside [0, count).
    """
    _check_arguments(count, n)

    if count == 1:
        return ()
    if count == 2:
        return (Side.LEFT,) if n & 1 == 0 else (Side.RIGHT,)

    cap = power_of_two_ceiling(count)
    half = cap // 2
    if first_half(cap, n):
        return (Side.LEFT,) + build_path(half, n)
    return (Side.RIGHT,) + build_path(count - half, n - half)


def depth(count: int) -> int:
    """Height of the tree for count alternatives (length of the longest path)."""
    return ceil_log2(count)


def enumerate_paths(count: int) -> list[Path]:
    return [build_path(count, n) for n in range(count)]


def path_to_index(count: int, path: Iterable[Side | int]) -> int:
    """Inverse of build_path: the alternative selected by path among count.

    Raises IndexOutOfRangeError when the path runs past a leaf or stops at an
    inner node, and MalformedPathError for values that are not sides.
    """
    if count < 1:
        raise InvalidCountError(f"count must be positive, got {count}")
    remaining = count
    offset = 0
    for level, side in enumerate(path):
        if remaining == 1:
            raise IndexOutOfRangeError(
                f"path too long for count={count}: leaf reached after {level} steps"
            )
        half = power_of_two_ceiling(remaining) // 2
        if Side.coerce(side) is Side.LEFT:
            remaining = half
        else:
            offset += half
            remaining -= half
    if remaining != 1:
        raise IndexOutOfRangeError(f"path too short for count={count}: ends at an inner node")
    return offset


def is_prefix_code(paths: Iterable[Path]) -> bool:
    """True if all paths are distinct and none is a prefix of another."""
    ordered = sorted(paths)
    for prev, cur in zip(ordered, ordered[1:]):
        # Sorting places any prefix immediately before some path it prefixes.
        if cur[: len(prev)] == prev:
            return False
    return True


@dataclass(frozen=True)
class Node:
    """Inner node of the tree shape; leaves are alternative indices."""

    left: "Shape"
    right: "Shape"


Shape = Union[int, Node]


def tree_shape(count: int, offset: int = 0) -> Shape:
    """Tree shape for count alternatives, leaves numbered from offset."""
    if count < 1:
        raise InvalidCountError(f"count must be positive, got {count}")
    if count == 1:
        return offset
    half = power_of_two_ceiling(count) // 2
    return Node(tree_shape(half, offset), tree_shape(count - half, offset + half))


def leaf_paths(shape: Shape, prefix: Path = ()) -> dict[int, Path]:
    """Map every leaf of shape to the path that reaches it."""
    if isinstance(shape, Node):
        out = leaf_paths(shape.left, prefix + (Side.LEFT,))
        out.update(leaf_paths(shape.right, prefix + (Side.RIGHT,)))
        return out
    return {shape: prefix}


def render_path(path: Iterable[Side | int]) -> str:
    return "".join(Side.coerce(side).symbol for side in path)


def parse_path(text: str) -> Path:
    """Parse an 'LRL'-style path; '-' or '' is the empty path."""
    text = text.strip()
    if text in ("", "-"):
        return ()
    out = []
    for ch in text.upper():
        if ch == "L":
            out.append(Side.LEFT)
        elif ch == "R":
            out.append(Side.RIGHT)
        else:
            raise MalformedPathError(f"invalid path symbol {ch!r}; expected 'L' or 'R'")
    return tuple(out)
