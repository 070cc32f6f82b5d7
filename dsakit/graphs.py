"""Undirected graphs stored as adjacency lists, with BFS and DFS traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator, Sequence

AdjacencyList = list[list[int]]


def _check_vertex(adj: Sequence[Sequence[int]], vertex: int) -> None:
    if not 0 <= vertex < len(adj):
        raise IndexError(f"vertex {vertex} is not in the graph")


def add_edge(adj: AdjacencyList, u: int, v: int) -> None:
    """Add an undirected edge between ``u`` and ``v``."""
    _check_vertex(adj, u)
    _check_vertex(adj, v)
    adj[u].append(v)
    adj[v].append(u)


def build_adjacency_list(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> AdjacencyList:
    """Return the adjacency list of an undirected graph with the given edges."""
    if vertex_count < 0:
        raise ValueError("vertex count must not be negative")
    adj: AdjacencyList = [[] for _ in range(vertex_count)]
    for u, v in edges:
        add_edge(adj, u, v)
    return adj


def format_adjacency_list(adj: Sequence[Sequence[int]]) -> str:
    """Render each vertex as ``i:n1 n2 ...`` on its own line."""
    return "".join(
        f"{vertex}:" + "".join(f"{neighbour} " for neighbour in neighbours) + "\n"
        for vertex, neighbours in enumerate(adj)
    )


def _bfs_from(
    adj: Sequence[Sequence[int]], source: int, visited: list[bool]
) -> Iterator[int]:
    queue = deque([source])
    visited[source] = True
    while queue:
        current = queue.popleft()
        yield current
        for neighbour in adj[current]:
            if not visited[neighbour]:
                visited[neighbour] = True
                queue.append(neighbour)


def _dfs_from(
    adj: Sequence[Sequence[int]], source: int, visited: list[bool]
) -> Iterator[int]:
    visited[source] = True
    yield source
    stack = [iter(adj[source])]
    while stack:
        for neighbour in stack[-1]:
            if not visited[neighbour]:
                visited[neighbour] = True
                yield neighbour
                stack.append(iter(adj[neighbour]))
                break
        else:
            stack.pop()


def bfs(adj: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return the vertices reachable from ``source`` in breadth-first order."""
    _check_vertex(adj, source)
    return list(_bfs_from(adj, source, [False] * len(adj)))


def bfs_all(adj: Sequence[Sequence[int]]) -> list[int]:
    """Breadth-first order over every component, starting each at its lowest vertex."""
    visited = [False] * len(adj)
    order: list[int] = []
    for vertex in range(len(adj)):
        if not visited[vertex]:
            order.extend(_bfs_from(adj, vertex, visited))
    return order


def dfs(adj: Sequence[Sequence[int]], source: int) -> list[int]:
    """Return the vertices reachable from ``source`` in depth-first order."""
    _check_vertex(adj, source)
    return list(_dfs_from(adj, source, [False] * len(adj)))


def dfs_all(adj: Sequence[Sequence[int]]) -> list[int]:
    """Depth-first order over every component, starting each at its lowest vertex."""
    visited = [False] * len(adj)
    order: list[int] = []
    for vertex in range(len(adj)):
        if not visited[vertex]:
            order.extend(_dfs_from(adj, vertex, visited))
    return order