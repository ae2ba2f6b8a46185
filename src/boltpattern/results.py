"""Result models for fastener load distribution."""

from __future__ import annotations

from dataclasses import dataclass
import math

from .layout import Point2D


@dataclass(frozen=True)
class BoltForce:
    """Loads resolved onto a single fastener.

    The axial load is signed (positive = tension). Each superposition term is
    kept so callers can see which part of the resultant governs.
    """

    index: int
    point: Point2D
    area: float
    # Axial (z) components
    axial_direct: float = 0.0
    axial_Mx: float = 0.0
    axial_My: float = 0.0
    # Shear (x-y) components
    shear_direct_x: float = 0.0
    shear_direct_y: float = 0.0
    shear_torsion_x: float = 0.0
    shear_torsion_y: float = 0.0

    @property
    def x(self) -> float:
        return self.point[0]

    @property
    def y(self) -> float:
        return self.point[1]

    @property
    def axial(self) -> float:
        """Total axial load on this fastener."""
        return self.axial_direct + self.axial_Mx + self.axial_My

    @property
    def shear_x(self) -> float:
        return self.shear_direct_x + self.shear_torsion_x

    @property
    def shear_y(self) -> float:
        return self.shear_direct_y + self.shear_torsion_y

    @property
    def shear_vector(self) -> tuple[float, float]:
        return (self.shear_x, self.shear_y)

    @property
    def shear(self) -> float:
        """Resultant shear magnitude."""
        return math.hypot(self.shear_x, self.shear_y)

    @property
    def resultant(self) -> float:
        return math.sqrt(self.shear_x**2 + self.shear_y**2 + self.axial**2)

    @property
    def angle(self) -> float:
        """Direction of the shear vector in degrees, counter-clockwise from +x."""
        return math.degrees(math.atan2(self.shear_y, self.shear_x))

    @property
    def tension(self) -> float:
        """Axial load clamped to zero for compression."""
        return max(0.0, self.axial)


__all__ = ["BoltForce"]
