"""
Fastener pattern geometry and section properties.

This module contains the *input* pattern (positions + areas) and the
centroid/inertia calculation. Load distribution is performed by
`boltpattern.solvers.elastic`; `LoadedPattern` in `boltpattern.analysis`
ties the two together.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Sequence, Union

import numpy as np

from .common.errors import InvalidArgumentError
from .layout import Point2D, circle, rectangle, translate

if TYPE_CHECKING:
    from .analysis import LoadedPattern
    from .common.config import AnalysisConfig
    from .common.load import Load
    from .units import Units

logger = logging.getLogger(__name__)

AreaInput = Union[float, Sequence[float]]


def as_points(points: Sequence[Sequence[float]]) -> np.ndarray:
    """Validate a point set and return it as an (N, 2) float array."""
    try:
        arr = np.asarray(points, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError("points must be a sequence of (x, y) pairs") from exc

    if arr.size == 0:
        raise InvalidArgumentError("Pattern must have at least one fastener")
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidArgumentError("points must be a sequence of (x, y) pairs")
    if not np.all(np.isfinite(arr)):
        raise InvalidArgumentError("Fastener coordinates must be finite")
    return arr


def as_pivot(pivot: Sequence[float]) -> Point2D:
    """Validate a pivot override and return it as an (x, y) float tuple."""
    try:
        arr = np.asarray(pivot, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError("pivot must be an (x, y) point") from exc

    if arr.shape != (2,):
        raise InvalidArgumentError("pivot must be an (x, y) point")
    if not np.all(np.isfinite(arr)):
        raise InvalidArgumentError("pivot coordinates must be finite")
    return (float(arr[0]), float(arr[1]))


def resolve_areas(areas: AreaInput, n: int) -> np.ndarray:
    """Broadcast a scalar area or validate a per-fastener sequence to N values."""
    try:
        arr = np.asarray(areas, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError("areas must be a number or a sequence of numbers") from exc

    if arr.ndim == 0:
        arr = np.full(n, float(arr))
    else:
        if arr.ndim != 1 or arr.shape[0] != n:
            raise InvalidArgumentError(
                f"Expected {n} fastener areas, got {np.size(areas)}"
            )

    if not np.all(np.isfinite(arr)) or np.any(arr <= 0.0):
        raise InvalidArgumentError("Fastener areas must be positive")
    return arr


@dataclass(frozen=True, eq=False)
class PatternProperties:
    """Geometric properties of a fastener pattern about its pivot.

    Attributes:
        xc, yc: Pivot (area-weighted centroid unless overridden)
        rcx, rcy: Per-fastener offsets from the pivot
        rcxy: Per-fastener radial distance from the pivot
        Icx: Second moment of area about the x-axis through the pivot, sum(rcy² A)
        Icy: Second moment of area about the y-axis through the pivot, sum(rcx² A)
        Icp: Polar moment, Icx + Icy
        areas: Resolved per-fastener areas
        pivot_override: True when the pivot was supplied rather than computed
    """

    xc: float
    yc: float
    rcx: np.ndarray = field(repr=False)
    rcy: np.ndarray = field(repr=False)
    rcxy: np.ndarray = field(repr=False)
    Icx: float
    Icy: float
    Icp: float
    areas: np.ndarray = field(repr=False)
    pivot_override: bool = False

    @property
    def n(self) -> int:
        return int(self.areas.shape[0])

    @property
    def total_area(self) -> float:
        return float(np.sum(self.areas))

    @property
    def centroid(self) -> Point2D:
        return (self.xc, self.yc)


def compute_properties(
    points: Sequence[Sequence[float]],
    areas: AreaInput = 1.0,
    pivot: Point2D | None = None,
) -> PatternProperties:
    """Compute pivot, offsets and second moments of area for a point set.

    With `pivot` omitted the pivot is the area-weighted centroid. A supplied
    pivot is used verbatim and no weighting is performed.
    """
    pts = as_points(points)
    A = resolve_areas(areas, pts.shape[0])
    x = pts[:, 0]
    y = pts[:, 1]

    if pivot is None:
        sum_a = float(np.sum(A))
        xc = float(np.sum(x * A)) / sum_a
        yc = float(np.sum(y * A)) / sum_a
    else:
        xc, yc = as_pivot(pivot)

    rcx = x - xc
    rcy = y - yc

    Icx = float(np.sum(rcy**2 * A))
    Icy = float(np.sum(rcx**2 * A))
    Icp = Icx + Icy

    rcxy = np.hypot(rcx, rcy)

    logger.debug(
        "pattern properties: n=%d pivot=(%g, %g)%s Icx=%g Icy=%g Icp=%g",
        pts.shape[0], xc, yc, " [override]" if pivot is not None else "", Icx, Icy, Icp,
    )

    return PatternProperties(
        xc=xc,
        yc=yc,
        rcx=rcx,
        rcy=rcy,
        rcxy=rcxy,
        Icx=Icx,
        Icy=Icy,
        Icp=Icp,
        areas=A,
        pivot_override=pivot is not None,
    )


def centroid(
    points: Sequence[Sequence[float]],
    areas: AreaInput = 1.0,
    pivot: Point2D | None = None,
) -> Point2D:
    """Return only the pivot (xc, yc) of a point set."""
    if pivot is not None:
        # Still validate the inputs so both variants fail the same way
        resolve_areas(areas, as_points(points).shape[0])
        return as_pivot(pivot)
    props = compute_properties(points, areas)
    return props.centroid


@dataclass(frozen=True)
class BoltPattern:
    """A planar fastener pattern (x-y plane). Geometry only."""

    points: tuple[Point2D, ...]
    areas: AreaInput = 1.0

    def __post_init__(self) -> None:
        pts = as_points(self.points)
        object.__setattr__(self, "points", tuple((float(x), float(y)) for x, y in pts))
        resolved = resolve_areas(self.areas, len(self.points))
        if np.ndim(self.areas) == 0:
            object.__setattr__(self, "areas", float(self.areas))
        else:
            object.__setattr__(self, "areas", tuple(float(a) for a in resolved))

    @classmethod
    def from_points(
        cls,
        points: Sequence[Sequence[float]],
        areas: AreaInput = 1.0,
    ) -> "BoltPattern":
        """Create a pattern from arbitrary (x, y) points."""
        return cls(points=tuple(points), areas=areas)

    @classmethod
    def from_xy(
        cls,
        x: Sequence[float],
        y: Sequence[float],
        areas: AreaInput = 1.0,
    ) -> "BoltPattern":
        """Create a pattern from separate x and y coordinate sequences."""
        if len(x) != len(y):
            raise InvalidArgumentError("x and y must have the same length")
        return cls(points=tuple(zip(x, y)), areas=areas)

    @classmethod
    def from_circle(
        cls,
        radius: float,
        count: int = 4,
        start_angle: float = 0.0,
        center: Point2D = (0.0, 0.0),
        areas: AreaInput = 1.0,
    ) -> "BoltPattern":
        """Create `count` fasteners on a circle, first at the top, numbered clockwise."""
        points = translate(circle(radius, count, start_angle), center)
        return cls(points=tuple(points), areas=areas)

    @classmethod
    def from_rectangle(
        cls,
        x_span: float,
        y_span: float,
        nx: int = 2,
        ny: int = 2,
        center: Point2D = (0.0, 0.0),
        areas: AreaInput = 1.0,
    ) -> "BoltPattern":
        """Create a rectangular perimeter pattern (see `boltpattern.layout.rectangle`)."""
        points = translate(rectangle(x_span, y_span, nx, ny), center)
        return cls(points=tuple(points), areas=areas)

    @property
    def n(self) -> int:
        return len(self.points)

    @property
    def x(self) -> list[float]:
        return [p[0] for p in self.points]

    @property
    def y(self) -> list[float]:
        return [p[1] for p in self.points]

    @property
    def area_values(self) -> np.ndarray:
        return resolve_areas(self.areas, self.n)

    def properties(self, pivot: Point2D | None = None) -> PatternProperties:
        return compute_properties(self.points, self.areas, pivot)

    def centroid(self, pivot: Point2D | None = None) -> Point2D:
        return self.properties(pivot).centroid

    @property
    def xc(self) -> float:
        return self.properties().xc

    @property
    def yc(self) -> float:
        return self.properties().yc

    def analyze(
        self,
        load: "Load",
        *,
        pivot: Point2D | None = None,
        units: "Units | None" = None,
        config: "AnalysisConfig | None" = None,
    ) -> "LoadedPattern":
        """Distribute `load` over this pattern and return a `LoadedPattern`."""
        from .analysis import LoadedPattern

        return LoadedPattern(pattern=self, load=load, pivot=pivot, units=units, config=config)


__all__ = [
    "AreaInput",
    "BoltPattern",
    "PatternProperties",
    "as_pivot",
    "as_points",
    "centroid",
    "compute_properties",
    "resolve_areas",
]
