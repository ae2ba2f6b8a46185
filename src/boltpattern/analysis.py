"""LoadedPattern: a BoltPattern subjected to a Load, with calculated fastener loads."""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Iterable, Sequence

import numpy as np

from .common.config import AnalysisConfig
from .common.load import Load
from .geometry import AreaInput, BoltPattern, PatternProperties, centroid
from .layout import Point2D
from .results import BoltForce
from .units import DEFAULT_UNITS, Quantity, Units

logger = logging.getLogger(__name__)


@dataclass
class LoadedPattern:
    """A `BoltPattern` subjected to a `Load`, with calculated per-fastener loads."""

    pattern: BoltPattern
    load: Load
    pivot: Point2D | None = None
    units: Units | None = None
    config: AnalysisConfig | None = None

    properties: PatternProperties | None = field(default=None, repr=False)
    bolt_forces: list[BoltForce] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        from .solvers.elastic import distribute_with_properties

        if self.units is None:
            self.units = DEFAULT_UNITS
        if self.properties is None:
            self.properties = self.pattern.properties(self.pivot)
        self.bolt_forces = distribute_with_properties(
            points=self.pattern.points,
            props=self.properties,
            load=self.load,
            config=self.config,
        )
        logger.debug(
            "analyzed %d fasteners: max shear=%g max axial=%g",
            self.pattern.n, self.max_shear, self.max_axial,
        )

    @classmethod
    def for_loads(
        cls,
        pattern: BoltPattern,
        loads: Iterable[Load],
        *,
        pivot: Point2D | None = None,
        units: Units | None = None,
        config: AnalysisConfig | None = None,
    ) -> list["LoadedPattern"]:
        """Analyze several load cases against the same pattern.

        The pattern properties are computed once and shared by every case.
        """
        props = pattern.properties(pivot)
        return [
            cls(pattern=pattern, load=load, pivot=pivot, units=units, config=config, properties=props)
            for load in loads
        ]

    @property
    def centroid(self) -> Point2D:
        return self.properties.centroid

    @property
    def n(self) -> int:
        return len(self.bolt_forces)

    def to_bolt_forces(self) -> list[BoltForce]:
        return list(self.bolt_forces)

    @property
    def max_shear(self) -> float:
        return float(np.max([bf.shear for bf in self.bolt_forces]))

    @property
    def max_axial(self) -> float:
        return float(np.max([bf.axial for bf in self.bolt_forces]))

    @property
    def min_axial(self) -> float:
        return float(np.min([bf.axial for bf in self.bolt_forces]))

    @property
    def max_resultant(self) -> float:
        return float(np.max([bf.resultant for bf in self.bolt_forces]))

    @property
    def critical_index(self) -> int:
        """Index of the fastener with the largest resultant load."""
        return int(np.argmax([bf.resultant for bf in self.bolt_forces]))

    def axial_quantity(self, index: int) -> Quantity:
        return Quantity(self.bolt_forces[index].axial, self.units.force)

    def shear_quantity(self, index: int) -> Quantity:
        return Quantity(self.bolt_forces[index].shear, self.units.force)

    def rows(self) -> list[dict[str, float]]:
        """Per-fastener rows (1-based id, x, y, axial, shear) in `self.units`."""
        return [
            {
                "id": bf.index + 1,
                "x": bf.x,
                "y": bf.y,
                "axial": bf.axial,
                "shear": bf.shear,
            }
            for bf in self.bolt_forces
        ]

    def table(self, *, length_unit: str | None = None, force_unit: str | None = None) -> str:
        from .table import format_table

        return format_table(self, length_unit=length_unit, force_unit=force_unit)

    def plot(
        self,
        *,
        colorbar: bool = True,
        cmap: str = "viridis",
        ax=None,
        show: bool = True,
        save_path: str | None = None,
        length_unit: str | None = None,
        force_unit: str | None = None,
    ):
        from .plotting import plot_bolt_loads

        return plot_bolt_loads(
            self,
            colorbar=colorbar,
            cmap=cmap,
            ax=ax,
            show=show,
            save_path=save_path,
            length_unit=length_unit,
            force_unit=force_unit,
        )


def analyze_pattern(
    points: Sequence[Sequence[float]],
    areas: AreaInput = 1.0,
    pivot: Point2D | None = None,
) -> Point2D:
    """Return the pivot (xc, yc) of a fastener pattern."""
    return centroid(points, areas, pivot)


def analyze_loads(
    points: Sequence[Sequence[float]],
    Fc: Sequence[float] = (0.0, 0.0, 0.0),
    Mc: Sequence[float] = (0.0, 0.0, 0.0),
    areas: AreaInput = 1.0,
    pivot: Point2D | None = None,
    units: Units | None = None,
    config: AnalysisConfig | None = None,
) -> LoadedPattern:
    """Distribute a force `Fc` and moment `Mc` acting at the pivot over `points`."""
    pattern = BoltPattern.from_points(points, areas=areas)
    load = Load.from_vectors(Fc, Mc)
    return pattern.analyze(load, pivot=pivot, units=units, config=config)


__all__ = ["LoadedPattern", "analyze_loads", "analyze_pattern"]
