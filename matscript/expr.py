"""Infix matrix expressions: conversion to postfix and evaluation."""

from __future__ import annotations

from matscript.matrix import Matrix
from matscript.tree import MatrixTree

_PRECEDENCE = {"+": 1, "*": 2}
_BLANKS = " \t\n"


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression over single-letter names to postfix."""
    output: list[str] = []
    operators: list[str] = []
    for char in infix:
        if char in _BLANKS:
            continue
        if "A" <= char <= "Z" or char == "'":
            output.append(char)
        elif char == "(":
            operators.append(char)
        elif char == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if operators:
                operators.pop()
        elif char in _PRECEDENCE:
            while (
                operators
                and operators[-1] != "("
                and _PRECEDENCE[operators[-1]] >= _PRECEDENCE[char]
            ):
                output.append(operators.pop())
            operators.append(char)
    output.extend(op for op in reversed(operators) if op != "(")
    return "".join(output)


def _pop(stack: list[Matrix]) -> Matrix:
    if not stack:
        raise ValueError("operator is missing an operand")
    return stack.pop()


def evaluate_expr(name: str, expr: str, tree: MatrixTree) -> Matrix:
    """Evaluate an infix expression against the tree and name the result."""
    stack: list[Matrix] = []
    for token in infix_to_postfix(expr):
        if token.isalpha():
            matrix = tree.find(token)
            if matrix is None:
                raise KeyError(token)
            stack.append(matrix)
        elif token == "'":
            stack.append(_pop(stack).transpose())
        else:
            right = _pop(stack)
            left = _pop(stack)
            stack.append(left + right if token == "+" else left @ right)
    if not stack:
        raise ValueError(f"empty expression: {expr!r}")
    return stack[-1].renamed(name)