"""Applied force/moment resultant for a fastener pattern."""

from __future__ import annotations

from dataclasses import dataclass, replace
import math
from typing import Sequence, Tuple

from .errors import InvalidArgumentError

Point3D = Tuple[float, float, float]
Vector3 = Tuple[float, float, float]


@dataclass(frozen=True)
class Load:
    """Applied forces and moments acting on a fastener pattern.

    The pattern lies in the x-y plane; z is normal to it (the fastener axis).

    Attributes:
        Fx: In-plane force in x-direction (shear)
        Fy: In-plane force in y-direction (shear)
        Fz: Out-of-plane force (positive = tension)
        Mx: Moment about x-axis (bending, produces a y-gradient of axial load)
        My: Moment about y-axis (bending, produces an x-gradient of axial load)
        Mz: Moment about z-axis (torsion in the pattern plane)
        location: Point (x, y, z) where the load acts, or None when the
            resultant already acts at the pattern pivot

    Notes:
        - Use consistent units throughout (e.g., N and mm -> moments in N·mm)
        - Moments follow the right-hand rule
    """

    Fx: float = 0.0
    Fy: float = 0.0
    Fz: float = 0.0
    Mx: float = 0.0
    My: float = 0.0
    Mz: float = 0.0
    location: Point3D | None = None

    def __post_init__(self) -> None:
        if self.location is not None:
            if len(self.location) != 3:
                raise InvalidArgumentError("Load location must be an (x, y, z) point")
            object.__setattr__(self, "location", tuple(float(v) for v in self.location))

    @classmethod
    def from_vectors(
        cls,
        Fc: Sequence[float] = (0.0, 0.0, 0.0),
        Mc: Sequence[float] = (0.0, 0.0, 0.0),
        location: Point3D | None = None,
    ) -> "Load":
        """Build a load from a force vector and a moment vector."""
        if len(Fc) != 3 or len(Mc) != 3:
            raise InvalidArgumentError("Fc and Mc must each have three components")
        Fx, Fy, Fz = (float(v) for v in Fc)
        Mx, My, Mz = (float(v) for v in Mc)
        return cls(Fx=Fx, Fy=Fy, Fz=Fz, Mx=Mx, My=My, Mz=Mz, location=location)

    @property
    def force(self) -> Vector3:
        return (self.Fx, self.Fy, self.Fz)

    @property
    def moment(self) -> Vector3:
        return (self.Mx, self.My, self.Mz)

    @property
    def shear_magnitude(self) -> float:
        """Magnitude of the in-plane force."""
        return math.hypot(self.Fx, self.Fy)

    def equivalent_at(self, position: Point3D) -> "Load":
        """Compute equivalent forces and moments at a different position.

        Transfers the load from its location to `position` using
        ``M_new = M + r x F`` with ``r = location - position``. A load without
        a location is assumed to already act at `position` and is returned
        relocated but otherwise unchanged.
        """
        target = tuple(float(v) for v in position)
        if self.location is None:
            return replace(self, location=target)

        # r points from the new position to the load location
        rx = self.location[0] - target[0]
        ry = self.location[1] - target[1]
        rz = self.location[2] - target[2]

        Mx_eq = self.Mx + (ry * self.Fz - rz * self.Fy)
        My_eq = self.My + (rz * self.Fx - rx * self.Fz)
        Mz_eq = self.Mz + (rx * self.Fy - ry * self.Fx)

        return Load(
            Fx=self.Fx,
            Fy=self.Fy,
            Fz=self.Fz,
            Mx=Mx_eq,
            My=My_eq,
            Mz=Mz_eq,
            location=target,
        )


__all__ = ["Load", "Point3D", "Vector3"]
