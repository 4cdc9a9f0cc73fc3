from __future__ import annotations

import io
from contextlib import redirect_stderr, redirect_stdout

from union_tree.cli import main

FUTURES_EITHER = "futures::future::Either"


def unit_array(i: int) -> str:
    """Leaf type used by the macro's own tree tests: ``[(); i]``."""
    return f"[(); {i}]"


def either(left: str, right: str) -> str:
    return f"{FUTURES_EITHER}<{left}, {right}>"


def run_cli(*argv: str) -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()
