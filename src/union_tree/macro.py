"""Parsing and expansion of ``future_union!``-style invocations.

The argument text has the form ``<count>, <n>, <expr>``. Both integers are
literals as a Rust tokenizer would read them (``3``, ``1_000``, ``0x10``,
``5usize``); the expression is everything after the second comma and is
passed through untouched.

Conventions follow the codec readers: ``_read_*`` helpers take the text and
an offset and return ``(value, new_offset)``.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from .emit import DEFAULT_DIALECT, Dialect, emit_expression
from .exceptions import MalformedInvocationError
from .path import Path, build_path

logger = logging.getLogger(__name__)

_LITERAL_TOKEN_RE = re.compile(r"[0-9][0-9A-Za-z_]*(?:\.[0-9][0-9A-Za-z_]*)?")
_INT_LITERAL_RE = re.compile(
    r"""
    (?:
        0x(?P<hex>[0-9A-Fa-f_]+)
      | 0o(?P<oct>[0-7_]+)
      | 0b(?P<bin>[01_]+)
      | (?P<dec>[0-9][0-9_]*)
    )
    (?:u8|u16|u32|u64|u128|usize|i8|i16|i32|i64|i128|isize)?
    """,
    re.VERBOSE,
)
_RADIX = {"hex": 16, "oct": 8, "bin": 2, "dec": 10}


@dataclass(frozen=True)
class Invocation:
    """Parsed macro arguments."""

    count: int
    n: int
    expr: str

    @property
    def path(self) -> Path:
        return build_path(self.count, self.n)


def _skip_ws(text: str, offset: int) -> int:
    while offset < len(text) and text[offset].isspace():
        offset += 1
    return offset


def _read_int_literal(text: str, offset: int) -> tuple[int, int]:
    offset = _skip_ws(text, offset)
    if offset >= len(text):
        raise MalformedInvocationError("Too few arguments")
    token = _LITERAL_TOKEN_RE.match(text, offset)
    if token is None:
        raise MalformedInvocationError("Expecting integer literal")
    literal = _INT_LITERAL_RE.fullmatch(token.group())
    if literal is None:
        raise MalformedInvocationError(f"Expecting integer literal, got {token.group()!r}")
    for group, radix in _RADIX.items():
        digits = literal.group(group)
        if digits is not None:
            digits = digits.replace("_", "")
            if not digits:
                raise MalformedInvocationError(f"Expecting integer literal, got {token.group()!r}")
            return int(digits, radix), token.end()
    raise MalformedInvocationError("Expecting integer literal")


def _read_comma(text: str, offset: int) -> int:
    offset = _skip_ws(text, offset)
    if offset >= len(text):
        raise MalformedInvocationError("Too few arguments")
    if text[offset] != ",":
        raise MalformedInvocationError("Invalid syntax, expected a comma")
    return offset + 1


def parse_invocation(text: str) -> Invocation:
    """Split macro argument text into (count, n, expr).

    Raises
    - MalformedInvocationError: On missing arguments, missing commas or
      arguments that are not non-negative integer literals.
    """
    count, offset = _read_int_literal(text, 0)
    offset = _read_comma(text, offset)
    n, offset = _read_int_literal(text, offset)
    offset = _read_comma(text, offset)
    expr = text[offset:].strip()
    if not expr:
        raise MalformedInvocationError("Too few arguments")
    return Invocation(count=count, n=n, expr=expr)


def expand(text: str, dialect: Dialect | str = DEFAULT_DIALECT) -> str:
    """Expand macro argument text into the wrapped expression source."""
    inv = parse_invocation(text)
    path = inv.path
    logger.debug("expanding count=%d n=%d into %d level(s)", inv.count, inv.n, len(path))
    return emit_expression(path, inv.expr, dialect)
