"""Source-text emission of wrapped expressions and collapsed types.

A dialect names the two constructors and the sum type of one target
language or library. The ``futures01`` dialect reproduces the output of the
``future_union!`` macro (``futures::future::Either::A``/``B``).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from .exceptions import UnknownDialectError
from .path import Node, Shape, Side, tree_shape

logger = logging.getLogger(__name__)

DIALECT_FUTURES01 = "futures01"
DIALECT_EITHER = "either"
DIALECT_PYTHON = "python"
DEFAULT_DIALECT = DIALECT_FUTURES01


@dataclass(frozen=True)
class Dialect:
    """Constructor and type spellings for one emission target."""

    name: str
    left: str
    right: str
    type_name: str
    type_open: str = "<"
    type_close: str = ">"

    def constructor(self, side: Side | int) -> str:
        return self.left if Side.coerce(side) is Side.LEFT else self.right


_DIALECTS: dict[str, Dialect] = {}
_builtins_loaded = False


def register_dialect(dialect: Dialect) -> None:
    """Register a dialect under its name, replacing any previous one."""
    _ensure_builtin_dialects()
    if dialect.name in _DIALECTS:
        logger.debug("replacing emission dialect %r", dialect.name)
    _DIALECTS[dialect.name] = dialect


def _ensure_builtin_dialects() -> None:
    global _builtins_loaded
    if _builtins_loaded:
        return
    _builtins_loaded = True
    register_dialect(
        Dialect(
            DIALECT_FUTURES01,
            left="futures::future::Either::A",
            right="futures::future::Either::B",
            type_name="futures::future::Either",
        )
    )
    register_dialect(
        Dialect(
            DIALECT_EITHER,
            left="either::Either::Left",
            right="either::Either::Right",
            type_name="either::Either",
        )
    )
    register_dialect(
        Dialect(
            DIALECT_PYTHON,
            left="Left",
            right="Right",
            type_name="Either",
            type_open="[",
            type_close="]",
        )
    )


def get_dialect(name: str) -> Dialect:
    _ensure_builtin_dialects()
    try:
        return _DIALECTS[name]
    except KeyError:
        raise UnknownDialectError(
            f"unknown dialect {name!r}; available: {', '.join(available_dialects())}"
        ) from None


def available_dialects() -> list[str]:
    _ensure_builtin_dialects()
    return sorted(_DIALECTS)


def _resolve(dialect: Dialect | str) -> Dialect:
    return dialect if isinstance(dialect, Dialect) else get_dialect(dialect)


def emit_expression(path: Iterable[Side | int], expr: str, dialect: Dialect | str = DEFAULT_DIALECT) -> str:
    """Wrap expr in the dialect's constructors, first side outermost."""
    d = _resolve(dialect)
    out = expr
    for side in reversed(tuple(path)):
        out = f"{d.constructor(side)}({out})"
    return out


def _leaf_names(count: int, leaf_names: Sequence[str] | None, leaf_prefix: str) -> list[str]:
    if leaf_names is None:
        return [f"{leaf_prefix}{i}" for i in range(count)]
    if len(leaf_names) != count:
        raise ValueError(f"expected {count} leaf names, got {len(leaf_names)}")
    return list(leaf_names)


def _type_inline(shape: Shape, names: list[str], d: Dialect) -> str:
    if isinstance(shape, Node):
        left = _type_inline(shape.left, names, d)
        right = _type_inline(shape.right, names, d)
        return f"{d.type_name}{d.type_open}{left}, {right}{d.type_close}"
    return names[shape]


def _type_lines(shape: Shape, names: list[str], d: Dialect, indent: int, level: int) -> list[str]:
    pad = " " * (indent * level)
    if not isinstance(shape, Node):
        return [pad + names[shape]]
    lines = [f"{pad}{d.type_name}{d.type_open}"]
    for child in (shape.left, shape.right):
        child_lines = _type_lines(child, names, d, indent, level + 1)
        child_lines[-1] += ","
        lines.extend(child_lines)
    lines.append(pad + d.type_close)
    return lines


def emit_type(
    count: int,
    dialect: Dialect | str = DEFAULT_DIALECT,
    leaf_names: Sequence[str] | None = None,
    *,
    leaf_prefix: str = "T",
    indent: int | None = None,
) -> str:
    """Render the collapsed sum type shared by all count alternatives.

    With indent=None the type is rendered on one line, e.g.
    ``Either<Either<T0, T1>, T2>``; otherwise one element per line with
    trailing commas.
    """
    d = _resolve(dialect)
    names = _leaf_names(count, leaf_names, leaf_prefix)
    shape = tree_shape(count)
    if indent is None:
        return _type_inline(shape, names, d)
    return "\n".join(_type_lines(shape, names, d, indent, 0))
