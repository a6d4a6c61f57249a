"""aocgrid.search
==================

Graph searches over a :class:`~aocgrid.map.Map`. Neither function knows what
a tile means: each asks a :class:`~aocgrid.tiles.Classifier` (plus an optional
context value) whether a tile is obstructed, free, or a halting point.
"""

from __future__ import annotations

import heapq
from collections import deque
from typing import TYPE_CHECKING, Any, Deque, Dict, List, Optional, Tuple

import numpy as np

from .direction import Direction
from .logging_utils import get_logger
from .point import Point
from .tiles import Classifier, Traversability
from .types import Visitor

if TYPE_CHECKING:  # pragma: no cover
    from .map import Map

logger = get_logger(__name__)


def reachable_from(
    grid: "Map[Any]",
    start: Point,
    visit: Visitor,
    classifier: Classifier[Any, Any],
    context: Any = None,
) -> None:
    """Visit every non-obstructed tile reachable from ``start``.

    Breadth-first: tiles are visited in the order they were queued, and each
    coordinate at most once. Free tiles queue their four in-bounds neighbours;
    halt tiles are visited but go no further; obstructed tiles are neither
    visited nor expanded.

    Parameters
    ----------
    grid:
        Map to explore.
    start:
        First point to consider. Nothing happens when it is out of bounds.
    visit:
        Called as ``visit(tile, point)``. Returning ``True`` stops the whole
        scan immediately.
    classifier, context:
        Traversability rule for the tiles of ``grid``.
    """

    if not grid.in_bounds(start):
        return
    width = grid.width
    visited = np.zeros(grid.width * grid.height, dtype=bool)
    queue: Deque[Point] = deque([start])

    while queue:
        point = queue.popleft()
        index = point.x + point.y * width
        # a point may be queued more than once via alternate paths
        if visited[index]:
            continue
        visited[index] = True

        tile = grid[point]
        traversability = classifier.classify(tile, context)
        if traversability is Traversability.OBSTRUCTED:
            continue
        if visit(tile, point):
            break
        if traversability is Traversability.FREE:
            for neighbour in grid.orthogonal_neighbours(point):
                if not visited[neighbour.x + neighbour.y * width]:
                    queue.append(neighbour)


def navigate(
    grid: "Map[Any]",
    start: Point,
    goal: Point,
    classifier: Classifier[Any, Any],
    context: Any = None,
) -> Optional[List[Direction]]:
    """Find a shortest sequence of steps from ``start`` to ``goal`` with A*.

    Moves are the four orthogonal unit steps at cost one, with Manhattan
    distance as the heuristic. Obstructed tiles cannot be entered; free and
    halt tiles are both traversable here.

    The open set is a heap of ``(estimate, point)`` entries, so equal
    estimates are broken by point order. A point is pushed again whenever a
    cheaper route to it turns up; the older entry is recognised as stale on
    pop (its estimate exceeds the best known cost plus heuristic) and skipped.

    Returns
    -------
    list[Direction] | None
        The steps to take, or ``None`` when ``goal`` cannot be reached or
        either endpoint lies outside the map.
    """

    if not (grid.in_bounds(start) and grid.in_bounds(goal)):
        logger.debug("navigate: endpoint outside %r (%s -> %s)", grid, start, goal)
        return None

    def heuristic(point: Point) -> int:
        return (goal - point).manhattan()

    # cost of the cheapest known path from start to each point
    best_cost: Dict[Point, int] = {start: 0}
    # step taken into each point along that path, and where it came from
    came_from: Dict[Point, Tuple[Direction, Point]] = {}
    open_set: List[Tuple[int, Point]] = [(heuristic(start), start)]

    while open_set:
        estimate, position = heapq.heappop(open_set)
        cost = best_cost[position]
        if estimate > cost + heuristic(position):
            continue

        if position == goal:
            path: List[Direction] = []
            current = position
            while current in came_from:
                direction, current = came_from[current]
                path.append(direction)
            path.reverse()
            assert len(path) >= (goal - start).manhattan()
            return path

        for direction in Direction.iter():
            neighbour = position + direction
            if not grid.in_bounds(neighbour):
                continue
            if classifier.classify(grid[neighbour], context) is Traversability.OBSTRUCTED:
                continue
            tentative = cost + 1
            if tentative < best_cost.get(neighbour, tentative + 1):
                came_from[neighbour] = (direction, position)
                best_cost[neighbour] = tentative
                heapq.heappush(open_set, (tentative + heuristic(neighbour), neighbour))

    logger.debug("navigate: no path from %s to %s", start, goal)
    return None


def trace_path(start: Point, steps: List[Direction]) -> List[Point]:
    """Points visited when following ``steps`` from ``start``, both ends included."""

    points = [start]
    for step in steps:
        points.append(points[-1] + step)
    return points


__all__ = ["reachable_from", "navigate", "trace_path"]
