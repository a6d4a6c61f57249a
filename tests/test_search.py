from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aocgrid.direction import Direction
from aocgrid.map import Map
from aocgrid.point import Point
from aocgrid.search import navigate, reachable_from, trace_path
from aocgrid.tiles import Bool, FunctionClassifier, Traversability, always


def glyph_classifier():
    table = {
        "#": Traversability.OBSTRUCTED,
        ".": Traversability.FREE,
        "H": Traversability.HALT,
    }
    return FunctionClassifier(lambda tile, _context: table[tile])


def height_classifier():
    def classify(height, limit):
        return Traversability.OBSTRUCTED if height > limit else Traversability.FREE

    return FunctionClassifier(classify)


def assert_valid_path(grid, start, goal, steps, classifier):
    points = trace_path(start, steps)
    assert points[0] == start
    assert points[-1] == goal
    for point in points:
        assert grid.in_bounds(point)
        assert classifier.classify(grid[point], None) is not Traversability.OBSTRUCTED


# ---------------------------------------------------------------------------
# navigate
# ---------------------------------------------------------------------------
@pytest.mark.parametrize("goal", [Point(7, 4), Point(0, 9), Point(9, 0), Point(3, 3)])
def test_open_grid_path_is_manhattan(goal):
    grid = Map.new(10, 10, Bool.FALSE)
    classifier = Bool.classifier()
    start = Point(0, 0)
    steps = navigate(grid, start, goal, classifier)
    assert steps is not None
    assert len(steps) == (goal - start).manhattan()
    assert all(isinstance(step, Direction) for step in steps)
    assert_valid_path(grid, start, goal, steps, classifier)


def test_start_equals_goal():
    grid = Map.new(3, 3, Bool.FALSE)
    assert navigate(grid, Point(1, 1), Point(1, 1), Bool.classifier()) == []


def test_path_goes_around_wall():
    grid = Map.from_text("..#..\n..#..\n..#..\n.....\n", Bool)
    classifier = Bool.classifier()
    start, goal = grid.top_left, grid.top_right
    steps = grid.navigate(start, goal, classifier)
    assert steps is not None
    assert len(steps) == 10
    assert_valid_path(grid, start, goal, steps, classifier)


def test_unreachable_goal(caplog):
    grid = Map.from_text("..#..\n..#..\n", Bool)
    with caplog.at_level(logging.DEBUG, logger="aocgrid"):
        assert navigate(grid, Point(0, 0), Point(4, 0), Bool.classifier()) is None
    assert "no path" in caplog.text


def test_endpoint_outside_map():
    grid = Map.new(3, 3, Bool.FALSE)
    assert navigate(grid, Point(0, 0), Point(3, 0), Bool.classifier()) is None
    assert navigate(grid, Point(-1, 0), Point(1, 1), Bool.classifier()) is None


def test_halt_tiles_are_traversable_for_paths():
    grid = Map.from_text("...\nHHH\n...\n", str)
    steps = navigate(grid, Point(1, 2), Point(1, 0), glyph_classifier())
    assert steps == [Direction.DOWN, Direction.DOWN]


def test_context_changes_the_answer():
    grid = Map.from_text("151\n111\n", int)
    classifier = height_classifier()
    assert len(navigate(grid, Point(0, 1), Point(2, 1), classifier, 9)) == 2
    assert len(navigate(grid, Point(0, 1), Point(2, 1), classifier, 1)) == 4


# ---------------------------------------------------------------------------
# reachable_from
# ---------------------------------------------------------------------------
def test_flood_fill_stops_at_walls():
    grid = Map.from_text("..#..\n..#..\n", Bool)
    visited = []
    grid.reachable_from(Point(0, 0), lambda tile, point: visited.append(point), Bool.classifier())
    assert sorted(visited) == [Point(0, 0), Point(0, 1), Point(1, 0), Point(1, 1)]


def test_flood_fill_visits_each_point_once():
    grid = Map.new(4, 4, Bool.FALSE)
    visited = []
    reachable_from(grid, Point(2, 2), lambda tile, point: visited.append(point), Bool.classifier())
    assert len(visited) == 16
    assert len(set(visited)) == 16
    assert visited[0] == Point(2, 2)


def test_flood_fill_is_breadth_first():
    grid = Map.from_text("...\n", Bool)
    visited = []
    reachable_from(grid, Point(1, 0), lambda tile, point: visited.append(point), Bool.classifier())
    assert visited == [Point(1, 0), Point(0, 0), Point(2, 0)]


def test_halt_tiles_are_visited_but_not_expanded():
    grid = Map.from_text(".H.\n", str)
    visited = []
    reachable_from(grid, Point(0, 0), lambda tile, point: visited.append(point), glyph_classifier())
    assert visited == [Point(0, 0), Point(1, 0)]


def test_visitor_can_stop_the_scan():
    grid = Map.new(5, 5, Bool.FALSE)
    visited = []

    def visit(tile, point):
        visited.append(point)
        return len(visited) == 3

    reachable_from(grid, Point(0, 0), visit, Bool.classifier())
    assert len(visited) == 3


def test_obstructed_or_outside_start_visits_nothing():
    grid = Map.from_text("#.\n", Bool)
    visited = []
    reachable_from(grid, Point(0, 0), lambda tile, point: visited.append(point), Bool.classifier())
    reachable_from(grid, Point(5, 5), lambda tile, point: visited.append(point), Bool.classifier())
    assert visited == []


def test_flood_fill_with_context():
    grid = Map.from_text("1239\n", int)
    for limit, expected in [(3, 3), (9, 4), (0, 0)]:
        visited = []
        reachable_from(grid, Point(0, 0), lambda tile, point: visited.append(point), height_classifier(), limit)
        assert len(visited) == expected


def test_always_classifier():
    grid = Map.new(2, 2, object())
    visited = []
    reachable_from(grid, Point(0, 0), lambda tile, point: visited.append(point), always(Traversability.FREE))
    assert len(visited) == 4
    assert navigate(grid, Point(0, 0), Point(1, 1), always(Traversability.OBSTRUCTED)) is None
