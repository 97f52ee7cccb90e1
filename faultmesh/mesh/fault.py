"""Fault-formation terrain sculpting.

Repeatedly cuts the terrain with random vertical planes, raising every vertex
on one side and lowering every vertex on the other. The displacement shrinks
geometrically between cuts:

    delta_{k+1} = delta_k / 2**H

with a single roughness exponent H in [0, 1) per pass. H near 0 keeps the
displacement almost constant (rough relief); H near 1 halves it on every cut
(smooth relief).
"""

from __future__ import annotations

import logging
import math
import numbers
from typing import Sequence

import numpy as np

from faultmesh.geometry.domain import Domain

logger = logging.getLogger(__name__)


class FaultConfig:
    """Configuration for the fault sculpting pass.

    Args:
        base_delta: Displacement applied by the first cut.
        min_cuts: Lower bound on the number of cuts.
        cuts_per_division: Cuts per grid division; the pass performs
            ``max(cuts_per_division * div, min_cuts)`` cuts.
        roughness: Fixed roughness exponent H in [0, 1). If None, H is drawn
            uniformly from the random source once per pass.

    Example:
        >>> config = FaultConfig()
        >>> config.n_cuts_for(90)
        180
        >>> config.n_cuts_for(10)
        50
    """

    def __init__(
        self,
        base_delta: float = 0.2,
        min_cuts: int = 50,
        cuts_per_division: int = 2,
        roughness: float | None = None,
    ):
        if not math.isfinite(base_delta) or base_delta < 0:
            raise ValueError("base_delta must be a non-negative finite number")
        for name, value in (
            ("min_cuts", min_cuts),
            ("cuts_per_division", cuts_per_division),
        ):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if min_cuts < 0:
            raise ValueError("min_cuts must be non-negative")
        if cuts_per_division < 0:
            raise ValueError("cuts_per_division must be non-negative")
        if roughness is not None and not 0.0 <= roughness < 1.0:
            raise ValueError(f"roughness must lie in [0, 1), got {roughness}")

        self._base_delta = float(base_delta)
        self._min_cuts = int(min_cuts)
        self._cuts_per_division = int(cuts_per_division)
        self._roughness = None if roughness is None else float(roughness)

    @classmethod
    def disabled(cls) -> FaultConfig:
        """Configuration that performs no cuts (flat terrain)."""
        return cls(min_cuts=0, cuts_per_division=0)

    @property
    def base_delta(self) -> float:
        return self._base_delta

    @property
    def min_cuts(self) -> int:
        return self._min_cuts

    @property
    def cuts_per_division(self) -> int:
        return self._cuts_per_division

    @property
    def roughness(self) -> float | None:
        """Fixed roughness exponent, or None if drawn per pass."""
        return self._roughness

    def n_cuts_for(self, div: int) -> int:
        """Number of cuts for a grid with ``div`` divisions per axis."""
        return max(self._cuts_per_division * div, self._min_cuts)

    def __repr__(self) -> str:
        return (
            f"FaultConfig(base_delta={self._base_delta}, "
            f"min_cuts={self._min_cuts}, "
            f"cuts_per_division={self._cuts_per_division}, "
            f"roughness={self._roughness})"
        )


class FaultCut:
    """A vertical cutting plane through ``point`` with XY ``normal``.

    Args:
        point: (x, y) point on the plane.
        normal: (nx, ny) plane normal; expected to be unit length.
    """

    def __init__(
        self,
        point: tuple[float, float],
        normal: tuple[float, float],
    ):
        self._point = (float(point[0]), float(point[1]))
        self._normal = (float(normal[0]), float(normal[1]))

    @classmethod
    def from_angle(cls, point: tuple[float, float], angle: float) -> FaultCut:
        """Create a cut whose normal points along ``angle`` radians."""
        return cls(point, (math.cos(angle), math.sin(angle)))

    @property
    def point(self) -> tuple[float, float]:
        return self._point

    @property
    def normal(self) -> tuple[float, float]:
        return self._normal

    def signed_distance(self, positions: np.ndarray) -> np.ndarray:
        """Return ``(v - p) . n`` for every vertex, using x and y only."""
        px, py = self._point
        nx, ny = self._normal
        return (positions[:, 0] - px) * nx + (positions[:, 1] - py) * ny

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FaultCut):
            return NotImplemented
        return (self._point, self._normal) == (other._point, other._normal)

    def __hash__(self) -> int:
        return hash((self._point, self._normal))

    def __repr__(self) -> str:
        return f"FaultCut(point={self._point}, normal={self._normal})"


class FaultRecord:
    """Random draws of one sculpting pass; enough to replay it.

    Args:
        roughness: Decay exponent H used for the pass.
        base_delta: Displacement of the first cut.
        cuts: Fault planes in the order they were applied.
        final_delta: Delta a further cut would have used.
    """

    def __init__(
        self,
        roughness: float,
        base_delta: float,
        cuts: Sequence[FaultCut] = (),
        final_delta: float = 0.0,
    ):
        self._roughness = float(roughness)
        self._base_delta = float(base_delta)
        self._cuts = list(cuts)
        self._final_delta = float(final_delta)

    @property
    def roughness(self) -> float:
        return self._roughness

    @property
    def base_delta(self) -> float:
        return self._base_delta

    @property
    def cuts(self) -> list[FaultCut]:
        """Fault planes in application order (a copy)."""
        return list(self._cuts)

    @property
    def final_delta(self) -> float:
        return self._final_delta

    @property
    def n_cuts(self) -> int:
        return len(self._cuts)

    def __repr__(self) -> str:
        return (
            f"FaultRecord(n_cuts={self.n_cuts}, roughness={self._roughness:.4f}, "
            f"base_delta={self._base_delta})"
        )


def draw_roughness(rng: np.random.Generator) -> float:
    """Draw a roughness exponent uniformly from [0, 1)."""
    return float(rng.random())


def draw_cuts(
    domain: Domain,
    n_cuts: int,
    rng: np.random.Generator,
) -> list[FaultCut]:
    """Draw ``n_cuts`` random fault planes.

    Each cut consumes three draws in order: point x, point y and the normal
    angle in [0, 2*pi).
    """
    cuts = []
    for _ in range(n_cuts):
        point = domain.sample_point(rng)
        angle = rng.random() * 2.0 * math.pi
        cuts.append(FaultCut.from_angle(point, angle))
    return cuts


def displacement_schedule(
    n_cuts: int,
    base_delta: float = 0.2,
    roughness: float = 0.0,
) -> np.ndarray:
    """Displacement applied by each successive cut.

    Entry ``k`` equals ``base_delta / 2**(k * roughness)`` up to rounding; it
    is computed by repeated division, as the sculpting loop does.
    """
    deltas = np.empty(n_cuts)
    delta = base_delta
    divisor = 2.0**roughness
    for k in range(n_cuts):
        deltas[k] = delta
        delta /= divisor
    return deltas


def apply_fault_cuts_inplace(
    positions: np.ndarray,
    cuts: Sequence[FaultCut],
    base_delta: float = 0.2,
    roughness: float = 0.0,
) -> float:
    """Displace vertex elevations by a sequence of fault cuts, in place.

    For each cut, vertices with ``(v - p) . n < 0`` are lowered by the
    current delta and all others (including those exactly on the plane) are
    raised by it. The delta is then divided by ``2**roughness``.

    Args:
        positions: Vertex positions, shape (n_vertices, 3). Column 2 is
            modified.
        cuts: Fault planes, applied in order.
        base_delta: Displacement of the first cut.
        roughness: Decay exponent H.

    Returns:
        The delta that a further cut would use.
    """
    if positions.ndim != 2 or positions.shape[1] < 3:
        raise ValueError("positions must have shape (n_vertices, 3)")

    delta = base_delta
    divisor = 2.0**roughness
    z = positions[:, 2]
    for cut in cuts:
        below = cut.signed_distance(positions) < 0
        z[below] -= delta
        z[~below] += delta
        delta /= divisor
    return delta


def apply_fault_cuts(
    positions: np.ndarray,
    cuts: Sequence[FaultCut],
    base_delta: float = 0.2,
    roughness: float = 0.0,
) -> np.ndarray:
    """Return the elevations produced by ``cuts`` without modifying input.

    Returns:
        New z values, shape (n_vertices,).
    """
    work = np.array(positions, dtype=float, copy=True)
    apply_fault_cuts_inplace(work, cuts, base_delta, roughness)
    return work[:, 2]


class FaultSculptor:
    """Runs one fault-formation pass over a grid.

    Args:
        config: Sculpting parameters. Defaults to ``FaultConfig()``.
        rng: Random source. Defaults to an unseeded ``np.random.default_rng()``.

    Example:
        >>> sculptor = FaultSculptor(rng=np.random.default_rng(7))
        >>> record = sculptor.sculpt(positions, domain, div=50)
        >>> record.n_cuts
        100
    """

    def __init__(
        self,
        config: FaultConfig | None = None,
        rng: np.random.Generator | None = None,
    ):
        self._config = config or FaultConfig()
        self._rng = rng if rng is not None else np.random.default_rng()

    @property
    def config(self) -> FaultConfig:
        return self._config

    def sculpt(
        self,
        positions: np.ndarray,
        domain: Domain,
        div: int,
    ) -> FaultRecord:
        """Draw roughness and cuts, then displace ``positions`` in place.

        Args:
            positions: Grid vertex positions, shape (n_vertices, 3).
            domain: Rectangle the cut points are drawn from.
            div: Grid divisions, used to size the pass.

        Returns:
            FaultRecord with the draws used.
        """
        config = self._config
        n_cuts = config.n_cuts_for(div)

        if config.roughness is None:
            roughness = draw_roughness(self._rng)
        else:
            roughness = config.roughness

        cuts = draw_cuts(domain, n_cuts, self._rng)
        final_delta = apply_fault_cuts_inplace(
            positions, cuts, config.base_delta, roughness
        )

        logger.debug(
            f"Applied {n_cuts} fault cuts (H={roughness:.4f}, "
            f"final delta={final_delta:.6g})"
        )
        return FaultRecord(
            roughness=roughness,
            base_delta=config.base_delta,
            cuts=cuts,
            final_delta=final_delta,
        )
