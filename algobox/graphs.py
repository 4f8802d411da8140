"""Directed graphs: breadth-first traversal and strongly connected components,
plus a count of knight-reachable squares on a 10x10 board."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

__all__ = ["KNIGHT_BOARD_SIZE", "Graph", "knight_reach_count"]

KNIGHT_BOARD_SIZE = 10

_KNIGHT_MOVES = ((2, 1), (1, 2), (-1, 2), (-2, 1), (-2, -1), (-1, -2), (1, -2), (2, -1))


class Graph:
    """A directed graph on the vertices 0 .. vertex_count - 1."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"vertex count must be non-negative, got {vertex_count}")
        self._adjacency: list[list[int]] = [[] for _ in range(vertex_count)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} out of range 0..{len(self._adjacency) - 1}")

    def add_edge(self, source: int, target: int) -> None:
        """Add a directed edge from source to target."""
        self._check_vertex(source)
        self._check_vertex(target)
        self._adjacency[source].append(target)

    def neighbours(self, vertex: int) -> list[int]:
        """Return the targets of the edges leaving a vertex, in insertion order."""
        self._check_vertex(vertex)
        return list(self._adjacency[vertex])

    def bfs(self) -> list[list[int]]:
        """Traverse breadth first from every vertex not yet reached, lowest first.

        Returns one visiting order per traversal started.
        """
        visited = [False] * len(self._adjacency)
        traversals: list[list[int]] = []
        for start in range(len(self._adjacency)):
            if visited[start]:
                continue
            visited[start] = True
            queue = deque([start])
            order: list[int] = []
            while queue:
                vertex = queue.popleft()
                order.append(vertex)
                for target in self._adjacency[vertex]:
                    if not visited[target]:
                        visited[target] = True
                        queue.append(target)
            traversals.append(order)
        return traversals

    def strongly_connected_components(self) -> list[list[int]]:
        """Find the strongly connected components with Tarjan's algorithm.

        Components come in the order they are completed; the vertices of each
        appear in the order they leave the algorithm's stack.
        """
        count = len(self._adjacency)
        discovery: list[int | None] = [None] * count
        low = [0] * count
        on_stack = [False] * count
        stack: list[int] = []
        components: list[list[int]] = []
        clock = 0

        def visit(vertex: int) -> tuple[int, Iterator[int]]:
            nonlocal clock
            clock += 1
            discovery[vertex] = low[vertex] = clock
            stack.append(vertex)
            on_stack[vertex] = True
            return vertex, iter(self._adjacency[vertex])

        for start in range(count):
            if discovery[start] is not None:
                continue
            work = [visit(start)]
            while work:
                vertex, targets = work[-1]
                descended = False
                for target in targets:
                    if discovery[target] is None:
                        work.append(visit(target))
                        descended = True
                        break
                    if on_stack[target]:
                        low[vertex] = min(low[vertex], discovery[target])
                if descended:
                    continue
                work.pop()
                if low[vertex] == discovery[vertex]:
                    component: list[int] = []
                    while True:
                        member = stack.pop()
                        on_stack[member] = False
                        component.append(member)
                        if member == vertex:
                            break
                    components.append(component)
                if work:
                    parent = work[-1][0]
                    low[parent] = min(low[parent], low[vertex])
        return components


def knight_reach_count(row: int, col: int, moves: int) -> int:
    """Count the squares of a 10x10 board a knight can reach in at most `moves` moves.

    The starting square counts as reached.
    """
    size = KNIGHT_BOARD_SIZE
    if not (0 <= row < size and 0 <= col < size):
        raise ValueError(f"square ({row}, {col}) is off the {size}x{size} board")
    if moves < 0:
        raise ValueError(f"moves must be non-negative, got {moves}")
    reached = {(row, col)}
    frontier = [(row, col)]
    for _ in range(moves):
        next_frontier = []
        for r, c in frontier:
            for dr, dc in _KNIGHT_MOVES:
                square = (r + dr, c + dc)
                if 0 <= square[0] < size and 0 <= square[1] < size and square not in reached:
                    reached.add(square)
                    next_frontier.append(square)
        if not next_frontier:
            break
        frontier = next_frontier
    return len(reached)