"""Run matrix scripts: one assignment per line."""

from __future__ import annotations

import argparse
import os
import string
import sys

from matscript.expr import evaluate_expr
from matscript.matrix import Matrix, parse_matrix
from matscript.tree import MatrixTree

_WHITESPACE = string.whitespace


def execute_script(path: str | os.PathLike[str]) -> Matrix | None:
    """Execute the script and return the matrix assigned on its last line."""
    tree = MatrixTree()
    last: Matrix | None = None
    with open(path, encoding="utf-8") as script:
        for line in script:
            rest = line.lstrip(_WHITESPACE)
            if not rest:
                continue
            name = rest[0]
            rhs = rest[1:].lstrip(_WHITESPACE)[1:].lstrip(_WHITESPACE)
            if rhs[:1] and rhs[0] in string.digits:
                matrix = parse_matrix(name, rhs)
            else:
                matrix = evaluate_expr(name, rhs, tree)
            tree.insert(matrix)
            last = matrix
    return last


def main(argv: list[str] | None = None) -> int:
    """Run a script file and print the final matrix."""
    parser = argparse.ArgumentParser(
        prog="matscript", description="Execute a matrix script and print the result."
    )
    parser.add_argument("script", help="path of the script file")
    args = parser.parse_args(argv)
    try:
        matrix = execute_script(args.script)
    except OSError as exc:
        print(f"matscript: {exc}", file=sys.stderr)
        return 1
    except KeyError as exc:
        print(f"matscript: undefined matrix {exc.args[0]!r}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"matscript: {exc}", file=sys.stderr)
        return 1
    if matrix is None:
        print("matscript: script defines no matrix", file=sys.stderr)
        return 1
    print(matrix.format())
    return 0


if __name__ == "__main__":
    sys.exit(main())