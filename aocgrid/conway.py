"""aocgrid.conway
==================

Conway-style cellular automaton on an unbounded N-dimensional lattice.

The space is sparse: only active cells are stored, in a set of
:class:`~aocgrid.vectors.Vector3` or :class:`~aocgrid.vectors.Vector4` points,
together with the bounding box of the active region. A dense
:class:`~aocgrid.map.Map` would have to grow every generation; the set only
grows with the population.
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable, FrozenSet, Generic, Iterable, Optional, Sequence, Tuple, Type, TypeVar

from .logging_utils import get_logger
from .map import Map
from .point import Point
from .tiles import Bool
from .vectors import Vector3, Vector4

logger = get_logger(__name__)

V = TypeVar("V", Vector3, Vector4)

SURVIVE = frozenset({2, 3})
BIRTH = frozenset({3})


class ConwaySpace(Generic[V]):
    """A generation of active cells plus their bounding box.

    Parameters
    ----------
    active:
        Active cells.
    survive, birth:
        Neighbour counts that keep an active cell alive, and that switch an
        inactive cell on. The defaults are the classic 2/3 and 3.
    bounds:
        Optional ``(minimum, maximum)`` box. Defaults to the tightest box
        around ``active``.
    """

    def __init__(
        self,
        active: Iterable[V],
        survive: FrozenSet[int] = SURVIVE,
        birth: FrozenSet[int] = BIRTH,
        bounds: Optional[Sequence[V]] = None,
    ) -> None:
        self.active = frozenset(active)
        self.survive = frozenset(survive)
        self.birth = frozenset(birth)
        if bounds is not None:
            self.minimum: Optional[V] = bounds[0]
            self.maximum: Optional[V] = bounds[1]
        else:
            self.minimum, self.maximum = _bounding_box(self.active)

    @classmethod
    def from_map(
        cls,
        grid: Map[Any],
        vector_type: Type[V],
        is_active: Callable[[Any], bool] = bool,
        **rules: FrozenSet[int],
    ) -> "ConwaySpace[V]":
        """Seed a space from a 2D map lying on the plane where extra axes are zero.

        The bounding box starts out covering the whole map, active or not.
        """

        active = []
        minimum = maximum = None
        for point, tile in grid.items():
            projected = vector_type.from_point(point)
            if is_active(tile):
                active.append(projected)
            minimum = projected if minimum is None else minimum.boundary_min(projected)
            maximum = projected if maximum is None else maximum.boundary_max(projected)
        bounds = None if minimum is None else (minimum, maximum)
        return cls(active, bounds=bounds, **rules)

    @property
    def active_count(self) -> int:
        return len(self.active)

    def __contains__(self, cell: V) -> bool:
        return cell in self.active

    def step(self) -> "ConwaySpace[V]":
        """Compute the next generation.

        ``self`` is never modified; every cell's fate is decided from this
        generation alone.
        """

        # active cells are counted even with no active neighbours
        neighbour_counts: Counter[V] = Counter({cell: 0 for cell in self.active})
        for cell in self.active:
            neighbour_counts.update(cell.adjacent())

        successor = [
            cell
            for cell, count in neighbour_counts.items()
            if (count in self.survive if cell in self.active else count in self.birth)
        ]
        return ConwaySpace(successor, survive=self.survive, birth=self.birth)

    def simulate(self, generations: int) -> "ConwaySpace[V]":
        """Return the space ``generations`` steps ahead."""

        space = self
        for generation in range(generations):
            space = space.step()
            logger.debug("generation %d: %d active", generation + 1, space.active_count)
        return space

    def slice_2d(self, *fixed: int) -> Map[Bool]:
        """Render the plane where the extra axes equal ``fixed`` as a map.

        The map covers the x/y extent of the whole bounding box so slices at
        different depths line up; map ``(0, 0)`` is the box's minimum corner.
        """

        if self.minimum is None or self.maximum is None:
            return Map([], 0, 0)
        min_coords = self.minimum.coords()
        max_coords = self.maximum.coords()
        origin = Point(min_coords[0], min_coords[1])
        plane = Map.new(max_coords[0] - min_coords[0] + 1, max_coords[1] - min_coords[1] + 1, Bool.FALSE)
        for cell in self.active:
            coords = cell.coords()
            if tuple(coords[2:]) == tuple(fixed):
                plane[Point(coords[0], coords[1]) - origin] = Bool.TRUE
        return plane


def _bounding_box(cells: Iterable[V]) -> Tuple[Optional[V], Optional[V]]:
    minimum = maximum = None
    for cell in cells:
        minimum = cell if minimum is None else minimum.boundary_min(cell)
        maximum = cell if maximum is None else maximum.boundary_max(cell)
    return minimum, maximum


__all__ = ["ConwaySpace", "SURVIVE", "BIRTH"]
