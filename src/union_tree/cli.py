from __future__ import annotations

import argparse
import logging
import sys

from .config import EmitConfig
from .emit import available_dialects, emit_type
from .exceptions import UnionTreeError
from .macro import expand
from .path import (
    build_path,
    depth,
    enumerate_paths,
    is_prefix_code,
    leaf_paths,
    parse_path,
    path_to_index,
    render_path,
    tree_shape,
)
from .tree_math import diverges_from_float, power_of_two_ceiling

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="union-tree")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    pa = sub.add_parser("path", help="print the path selecting alternative N of COUNT")
    pa.add_argument("count", type=int)
    pa.add_argument("n", type=int)

    ix = sub.add_parser("index", help="print the alternative selected by PATH (e.g. LLR)")
    ix.add_argument("count", type=int)
    ix.add_argument("path")

    ex = sub.add_parser("expand", help="expand macro arguments '<count>, <n>, <expr>'")
    ex.add_argument("args")
    ex.add_argument("--dialect", default=EmitConfig.dialect, choices=available_dialects())

    ty = sub.add_parser("type", help="render the collapsed type for COUNT alternatives")
    ty.add_argument("count", type=int)
    ty.add_argument("--dialect", default=EmitConfig.dialect, choices=available_dialects())
    ty.add_argument("--indent", type=int, default=None)
    ty.add_argument("--leaf-prefix", default=EmitConfig.leaf_prefix)

    tb = sub.add_parser("table", help="list every alternative of COUNT with its path")
    tb.add_argument("count", type=int)

    ck = sub.add_parser("check", help="verify the tree invariants for COUNT")
    ck.add_argument("count", type=int)
    return p


def _check(count: int) -> list[str]:
    height = depth(count)
    problems: list[str] = []
    paths = enumerate_paths(count)
    if len(set(paths)) != count:
        problems.append(f"expected {count} distinct paths, got {len(set(paths))}")
    if not is_prefix_code(paths):
        problems.append("paths do not form a prefix code")
    if max(len(x) for x in paths) != height:
        problems.append(f"longest path differs from depth {height}")
    if leaf_paths(tree_shape(count)) != dict(enumerate(paths)):
        problems.append("paths disagree with the tree shape")
    for n, path in enumerate(paths):
        if path_to_index(count, path) != n:
            problems.append(f"path {render_path(path) or '-'} does not map back to {n}")
    return problems


def _run(args: argparse.Namespace) -> int:
    if args.cmd == "path":
        print(render_path(build_path(args.count, args.n)) or "-")
        return 0
    if args.cmd == "index":
        print(path_to_index(args.count, parse_path(args.path)))
        return 0
    if args.cmd == "expand":
        print(expand(args.args, EmitConfig(dialect=args.dialect).resolve_dialect()))
        return 0
    if args.cmd == "type":
        config = EmitConfig(dialect=args.dialect, leaf_prefix=args.leaf_prefix, indent=args.indent)
        logger.debug("rendering type for count=%d with %s", args.count, config.as_dict())
        print(
            emit_type(
                args.count,
                config.resolve_dialect(),
                leaf_prefix=config.leaf_prefix,
                indent=config.indent,
            )
        )
        return 0
    if args.cmd == "table":
        for n, path in enumerate(enumerate_paths(args.count)):
            print(f"{n}\t{render_path(path) or '-'}")
        return 0
    if args.cmd == "check":
        problems = _check(args.count)
        if diverges_from_float(args.count):
            print(
                f"note: floating-point rounding disagrees for {args.count}; "
                f"exact ceiling is {power_of_two_ceiling(args.count)}"
            )
        for problem in problems:
            print(f"FAIL: {problem}")
        if problems:
            return 1
        print(f"ok: {args.count} alternatives, depth {depth(args.count)}")
        return 0
    return 2


def main(argv: list[str] | None = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        return _run(args)
    except UnionTreeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
