"""Undirected graphs stored as adjacency matrices."""

from __future__ import annotations

from collections.abc import Iterable


class AdjacencyMatrix:
    """A resizable adjacency matrix for an undirected graph without self loops."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._cells = [[0] * size for _ in range(size)]

    def __len__(self) -> int:
        return len(self._cells)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self):
            raise IndexError(f"vertex {vertex} not present")

    def _check_pair(self, x: int, y: int) -> None:
        self._check_vertex(x)
        self._check_vertex(y)
        if x == y:
            raise ValueError("same vertex")

    def add_edge(self, x: int, y: int) -> None:
        """Connect ``x`` and ``y``."""
        self._check_pair(x, y)
        self._cells[x][y] = self._cells[y][x] = 1

    def remove_edge(self, x: int, y: int) -> None:
        """Disconnect ``x`` and ``y``."""
        self._check_pair(x, y)
        self._cells[x][y] = self._cells[y][x] = 0

    def add_vertex(self) -> None:
        """Append an isolated vertex."""
        for row in self._cells:
            row.append(0)
        self._cells.append([0] * (len(self._cells) + 1))

    def remove_vertex(self, v: int) -> None:
        """Remove vertex ``v``; higher-numbered vertices shift down by one."""
        self._check_vertex(v)
        del self._cells[v]
        for row in self._cells:
            del row[v]

    def rows(self) -> list[list[int]]:
        """Return a copy of the matrix as a list of rows."""
        return [list(row) for row in self._cells]

    def format(self) -> str:
        """Render the matrix with a tab after every cell and one row per line."""
        return "".join(
            "".join(f"{cell}\t" for cell in row) + "\n" for row in self._cells
        )


def build_adjacency_matrix(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Return a symmetric 0/1 matrix with a 1 for every edge given."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for i, j in edges:
        for vertex in (i, j):
            if not 0 <= vertex < vertex_count:
                raise IndexError(f"vertex {vertex} not present")
        matrix[i][j] = 1
        matrix[j][i] = 1
    return matrix