"""A binary search tree of matrices keyed by their names."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from matscript.matrix import Matrix


@dataclass
class _Node:
    matrix: Matrix
    left: _Node | None = None
    right: _Node | None = None


class MatrixTree:
    """Matrices ordered by name; a name already present is not replaced."""

    def __init__(self, matrices: Iterable[Matrix] = ()) -> None:
        self._root: _Node | None = None
        self._size = 0
        for matrix in matrices:
            self.insert(matrix)

    def insert(self, matrix: Matrix) -> bool:
        """Add the matrix; return False if its name is already taken."""
        if self._root is None:
            self._root = _Node(matrix)
            self._size += 1
            return True
        node = self._root
        while True:
            if matrix.name < node.matrix.name:
                if node.left is None:
                    node.left = _Node(matrix)
                    break
                node = node.left
            elif matrix.name > node.matrix.name:
                if node.right is None:
                    node.right = _Node(matrix)
                    break
                node = node.right
            else:
                return False
        self._size += 1
        return True

    def find(self, name: str) -> Matrix | None:
        """Return the matrix with this name, or None."""
        node = self._root
        while node is not None:
            if name == node.matrix.name:
                return node.matrix
            node = node.left if name < node.matrix.name else node.right
        return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __iter__(self) -> Iterator[Matrix]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.matrix
            node = node.right

    def __len__(self) -> int:
        return self._size