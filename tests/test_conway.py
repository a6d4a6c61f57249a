from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from aocgrid.conway import ConwaySpace
from aocgrid.map import Map
from aocgrid.tiles import Bool
from aocgrid.vectors import Vector3, Vector4

SEED = ".#.\n..#\n###\n"


def seeded(vector_type):
    return ConwaySpace.from_map(Map.from_text(SEED, Bool), vector_type)


def test_seed_covers_whole_map():
    space = seeded(Vector3)
    assert space.active_count == 5
    assert space.minimum == Vector3(0, 0, 0)
    assert space.maximum == Vector3(2, 2, 0)
    assert Vector3(1, 2, 0) in space
    assert Vector3(0, 2, 0) not in space
    assert str(space.slice_2d(0)) == SEED


def test_first_cycle_slices():
    space = seeded(Vector3).step()
    assert space.active_count == 11
    assert str(space.slice_2d(0)) == "#.#\n.##\n.#.\n"
    assert str(space.slice_2d(-1)) == "#..\n..#\n.#.\n"
    assert str(space.slice_2d(1)) == "#..\n..#\n.#.\n"


def test_step_leaves_predecessor_untouched():
    space = seeded(Vector3)
    before = set(space.active)
    space.step()
    assert set(space.active) == before
    assert space.active_count == 5


@pytest.mark.parametrize("vector_type, expected", [(Vector3, 112), (Vector4, 848)])
def test_six_cycles(vector_type, expected):
    assert seeded(vector_type).simulate(6).active_count == expected


def test_bounding_box_grows_by_at_most_one():
    space = seeded(Vector4)
    for _ in range(3):
        successor = space.step()
        lower = space.minimum.decr().coords()
        upper = space.maximum.incr().coords()
        for low, value in zip(lower, successor.minimum.coords()):
            assert value >= low
        for high, value in zip(upper, successor.maximum.coords()):
            assert value <= high
        space = successor


def test_custom_rules():
    # a lone pair dies under the classic rules but survives with survive={1}
    pair = [Vector3(0, 0, 0), Vector3(1, 0, 0)]
    assert ConwaySpace(pair).step().active_count == 0
    assert ConwaySpace(pair, survive=frozenset({1}), birth=frozenset()).step().active_count == 2


def test_empty_space():
    space = ConwaySpace([])
    assert space.minimum is None
    assert space.step().active_count == 0
    empty = space.slice_2d(0)
    assert (empty.width, empty.height) == (0, 0)


def test_isolated_cell_can_survive_with_zero_neighbours():
    lone = ConwaySpace([Vector3(0, 0, 0)], survive=frozenset({0}))
    successor = lone.step()
    assert successor.active_count == 1
    assert Vector3(0, 0, 0) in successor
    assert ConwaySpace([Vector3(0, 0, 0)]).step().active_count == 0
