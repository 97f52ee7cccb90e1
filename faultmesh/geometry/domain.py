"""Rectangular terrain domain."""

from __future__ import annotations

import math

import numpy as np
from shapely.geometry import Point, box
from shapely.geometry.base import BaseGeometry

from faultmesh.exceptions import InvalidDomain


class Domain:
    """Axis-aligned rectangle ``[min_x, max_x] x [min_y, max_y]``.

    Wraps a shapely box so the domain can be built from, and compared with,
    other shapely geometry.

    Args:
        min_x: Minimum x coordinate.
        max_x: Maximum x coordinate.
        min_y: Minimum y coordinate.
        max_y: Maximum y coordinate.

    Raises:
        InvalidDomain: If the rectangle is degenerate or not finite.
    """

    def __init__(self, min_x: float, max_x: float, min_y: float, max_y: float):
        values = (min_x, max_x, min_y, max_y)
        if not all(math.isfinite(v) for v in values):
            raise InvalidDomain(f"Domain bounds must be finite, got {values}")
        if max_x <= min_x:
            raise InvalidDomain(
                f"max_x ({max_x}) must be greater than min_x ({min_x})"
            )
        if max_y <= min_y:
            raise InvalidDomain(
                f"max_y ({max_y}) must be greater than min_y ({min_y})"
            )
        if not (math.isfinite(max_x - min_x) and math.isfinite(max_y - min_y)):
            raise InvalidDomain(
                f"Domain extent overflows: width={max_x - min_x}, "
                f"height={max_y - min_y}"
            )

        self._min_x = float(min_x)
        self._max_x = float(max_x)
        self._min_y = float(min_y)
        self._max_y = float(max_y)
        self._box = box(self._min_x, self._min_y, self._max_x, self._max_y)

    @classmethod
    def from_bounds(
        cls, bounds: tuple[float, float, float, float]
    ) -> Domain:
        """Create domain from shapely-ordered bounds ``(xmin, ymin, xmax, ymax)``."""
        xmin, ymin, xmax, ymax = bounds
        return cls(xmin, xmax, ymin, ymax)

    @classmethod
    def from_shapely(cls, geometry: BaseGeometry) -> Domain:
        """Create domain from the bounding box of any shapely geometry.

        Args:
            geometry: Shapely geometry (polygon, line string, collection...).

        Returns:
            New Domain covering the geometry's envelope.

        Raises:
            InvalidDomain: If the geometry is empty or its envelope is degenerate.
        """
        if geometry.is_empty:
            raise InvalidDomain("Cannot build a domain from empty geometry")
        return cls.from_bounds(geometry.bounds)

    @property
    def min_x(self) -> float:
        return self._min_x

    @property
    def max_x(self) -> float:
        return self._max_x

    @property
    def min_y(self) -> float:
        return self._min_y

    @property
    def max_y(self) -> float:
        return self._max_y

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Return bounding box as (xmin, ymin, xmax, ymax)."""
        return self._box.bounds

    @property
    def width(self) -> float:
        return self._max_x - self._min_x

    @property
    def height(self) -> float:
        return self._max_y - self._min_y

    @property
    def area(self) -> float:
        """Return domain area in coordinate units squared."""
        return self._box.area

    @property
    def center(self) -> tuple[float, float]:
        """Return domain centre as (x, y)."""
        c = self._box.centroid
        return (c.x, c.y)

    @property
    def shapely(self):
        """Return underlying shapely Polygon object."""
        return self._box

    def contains(self, x: float, y: float) -> bool:
        """Return True if (x, y) lies inside the domain or on its boundary."""
        return self._box.covers(Point(x, y))

    def spacing(self, div: int) -> tuple[float, float]:
        """Return grid spacing (dx, dy) for ``div`` subdivisions per axis."""
        return (self.width / div, self.height / div)

    def sample_point(self, rng: np.random.Generator) -> tuple[float, float]:
        """Draw one point uniformly inside the domain.

        Draws x first, then y.
        """
        x = rng.random() * self.width + self._min_x
        y = rng.random() * self.height + self._min_y
        return (x, y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Domain):
            return NotImplemented
        return (self._min_x, self._max_x, self._min_y, self._max_y) == (
            other._min_x,
            other._max_x,
            other._min_y,
            other._max_y,
        )

    def __hash__(self) -> int:
        return hash((self._min_x, self._max_x, self._min_y, self._max_y))

    def __repr__(self) -> str:
        return (
            f"Domain(x=[{self._min_x}, {self._max_x}], "
            f"y=[{self._min_y}, {self._max_y}])"
        )
