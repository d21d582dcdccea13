"""
Search engines: A* and Iterative Deepening DFS
==============================================

Both engines run over the complete route graph produced by
``build_graph`` and return a ``PathfindingResult``.  Neither raises when
no route exists; they return the empty-path sentinel instead.  Start and
goal are expected to be present in the graph (``RoutePlanner`` checks
this before calling in).

Search nodes live in a per-run arena (a plain list).  A node's parent is
the arena index of the node it was expanded from, so reconstructing a
path is a walk over indices followed by a reverse.

A*
--
* Open set: unsorted list, linear scan for the lowest f = g + h.
* Ties: f-scores equal up to float noise prefer the lower h (closer to
  the goal); anything still tied keeps insertion order.
* A neighbour is pushed unless the first open entry for it already has
  g <= tentative g.  Stale entries are left in the open set.
* Explored locations are tracked in a set, so a location dequeued twice
  counts once.

Because the heuristic is the straight-line distance to the goal it is
admissible and consistent, and the returned cost is optimal.

IDDFS
-----
* Depth limits 0 .. len(graph) inclusive.
* Fresh visited set per iteration; the explored set is shared across
  iterations.
* First successful branch wins.  The result is *a* path, not the
  shortest one, and its distance is the summed edge weights.
* The depth-limited search keeps its own stack, so long chains in a
  sparse caller-supplied graph are not bounded by the recursion limit.

Complexity
----------
* A*:    O(V^2) selections x O(open) scan on a complete graph
* IDDFS: exponential in the depth limit in the worst case
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

from .entities import Graph, Heuristic, PathfindingResult
from .enums import AlgorithmType
from .graph import path_distance

_F_TIE_REL_TOL = 1e-9


# ── Arena nodes ───────────────────────────────────────────────────────


@dataclass(frozen=True)
class _AStarNode:
    location: str
    g: float
    h: float
    f: float
    parent: Optional[int]


@dataclass(frozen=True)
class _DepthNode:
    location: str
    remaining_depth: int
    parent: Optional[int]


def _reconstruct(arena: list, index: int) -> list[str]:
    path: list[str] = []
    current: Optional[int] = index
    while current is not None:
        node = arena[current]
        path.append(node.location)
        current = node.parent
    path.reverse()
    return path


# ── A* ────────────────────────────────────────────────────────────────


def _lowest_f(open_set: list[int], arena: list[_AStarNode]) -> int:
    """Return the position in *open_set* of the node to expand next."""
    best_pos = 0
    best = arena[open_set[0]]
    for pos in range(1, len(open_set)):
        node = arena[open_set[pos]]
        if math.isclose(node.f, best.f, rel_tol=_F_TIE_REL_TOL):
            if node.h < best.h:
                best_pos, best = pos, node
        elif node.f < best.f:
            best_pos, best = pos, node
    return best_pos


def find_path_astar(
    graph: Graph, heuristic: Heuristic, start: str, goal: str
) -> PathfindingResult:
    """Optimal path from *start* to *goal* guided by *heuristic*."""
    arena: list[_AStarNode] = []
    open_set: list[int] = []
    closed: set[str] = set()
    explored: set[str] = set()

    h_start = heuristic.get(start, 0.0)
    arena.append(_AStarNode(start, 0.0, h_start, h_start, None))
    open_set.append(0)

    while open_set:
        pos = _lowest_f(open_set, arena)
        current_idx = open_set[pos]
        current = arena[current_idx]

        explored.add(current.location)

        if current.location == goal:
            return PathfindingResult(
                path=_reconstruct(arena, current_idx),
                distance=current.g,
                nodes_explored=len(explored),
                algorithm=AlgorithmType.ASTAR,
            )

        del open_set[pos]
        closed.add(current.location)

        for neighbour, weight in graph[current.location].items():
            if neighbour in closed:
                continue

            tentative_g = current.g + weight
            h = heuristic.get(neighbour, 0.0)

            existing = next(
                (arena[i] for i in open_set if arena[i].location == neighbour),
                None,
            )
            if existing is not None and existing.g <= tentative_g:
                continue

            arena.append(
                _AStarNode(neighbour, tentative_g, h, tentative_g + h, current_idx)
            )
            open_set.append(len(arena) - 1)

    return PathfindingResult.not_found(len(explored), AlgorithmType.ASTAR)


# ── IDDFS ─────────────────────────────────────────────────────────────


def _depth_limited_search(
    graph: Graph,
    start: str,
    goal: str,
    depth: int,
    visited: set[str],
    explored: set[str],
    arena: list[_DepthNode],
) -> Optional[int]:
    """
    Return the arena index of the goal node, or None on a dead end.

    Depth-first with an explicit stack of (arena index, neighbour
    iterator) frames.  Neighbours are tried in graph key order and the
    goal check comes before the depth check, so a goal one hop past the
    limit is still accepted.
    """
    if start == goal:
        arena.append(_DepthNode(start, depth, None))
        return 0

    if depth == 0:
        return None

    visited.add(start)
    explored.add(start)
    arena.append(_DepthNode(start, depth, None))
    stack: list[tuple[int, Iterator[str]]] = [(0, iter(graph[start]))]

    while stack:
        current_idx, neighbours = stack[-1]
        remaining = arena[current_idx].remaining_depth - 1

        for neighbour in neighbours:
            if neighbour in visited:
                continue
            if neighbour == goal:
                arena.append(_DepthNode(neighbour, remaining, current_idx))
                return len(arena) - 1
            if remaining == 0:
                continue

            visited.add(neighbour)
            explored.add(neighbour)
            arena.append(_DepthNode(neighbour, remaining, current_idx))
            stack.append((len(arena) - 1, iter(graph[neighbour])))
            break
        else:
            stack.pop()

    return None


def find_path_iddfs(graph: Graph, start: str, goal: str) -> PathfindingResult:
    """Some path from *start* to *goal* found by iterative deepening."""
    explored: set[str] = set()
    max_depth = len(graph)

    for depth in range(max_depth + 1):
        arena: list[_DepthNode] = []
        goal_idx = _depth_limited_search(
            graph, start, goal, depth, set(), explored, arena
        )
        if goal_idx is not None:
            path = _reconstruct(arena, goal_idx)
            return PathfindingResult(
                path=path,
                distance=path_distance(path, graph),
                nodes_explored=len(explored),
                algorithm=AlgorithmType.IDDFS,
            )

    return PathfindingResult.not_found(len(explored), AlgorithmType.IDDFS)
