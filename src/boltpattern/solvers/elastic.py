"""Elastic (linear superposition) load distribution for fastener patterns."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..common.config import DEFAULT_CONFIG, AnalysisConfig
from ..common.errors import InvalidConfigurationError
from ..common.load import Load
from ..geometry import AreaInput, PatternProperties, compute_properties
from ..layout import Point2D
from ..results import BoltForce

logger = logging.getLogger(__name__)

# Relative rounding error of an offset computed from absolute coordinates
_RESIDUE = 16.0 * float(np.finfo(float).eps)


def _length_scales(props: PatternProperties) -> tuple[float, float]:
    """Return (spread, reach): largest radius about the pivot and largest absolute coordinate."""
    spread = float(np.max(props.rcxy))
    reach = max(
        float(np.max(np.abs(props.rcx + props.xc))),
        float(np.max(np.abs(props.rcy + props.yc))),
        abs(props.xc),
        abs(props.yc),
    )
    return spread, reach


def _degenerate_threshold(props: PatternProperties, config: AnalysisConfig) -> float:
    """Inertia below which an axis carries no moment.

    Scales with the pattern spread, plus the rounding residue that offsets
    pick up far from the origin, so collinear patterns count as zero.
    """
    spread, reach = _length_scales(props)
    return props.total_area * (config.inertia_tolerance * spread**2 + (_RESIDUE * reach) ** 2)


def _moment_floor(load: Load, props: PatternProperties, config: AnalysisConfig) -> float:
    """Moment magnitude left over from transferring `load` that counts as zero."""
    spread, reach = _length_scales(props)
    force = float(np.linalg.norm(load.force))
    return force * (config.inertia_tolerance * spread + _RESIDUE * reach)


def _moment_factor(
    moment: float,
    inertia: float,
    threshold: float,
    *,
    moment_name: str,
    inertia_name: str,
    floor: float = 0.0,
) -> float:
    """Return moment / inertia, or 0.0 when |moment| does not exceed `floor`."""
    if abs(moment) <= floor:
        return 0.0
    if inertia <= threshold:
        raise InvalidConfigurationError(
            f"{moment_name}={moment:g} applied but {inertia_name}={inertia:g}: "
            f"pattern has no inertia about that axis"
        )
    return moment / inertia


def distribute_with_properties(
    *,
    points: Sequence[Sequence[float]],
    props: PatternProperties,
    load: Load,
    config: AnalysisConfig | None = None,
) -> list[BoltForce]:
    """Distribute `load` using precomputed pattern properties.

    The load is transferred to the pivot first when it carries a location;
    moments that are only transfer residue are then dropped.
    """
    config = config or DEFAULT_CONFIG

    floor = 0.0
    if load.location is not None:
        load = load.equivalent_at((props.xc, props.yc, 0.0))
        floor = _moment_floor(load, props, config)
        logger.debug("load transferred to pivot: F=%s M=%s", load.force, load.moment)

    A = props.areas
    sum_a = props.total_area
    rcx = props.rcx
    rcy = props.rcy
    threshold = _degenerate_threshold(props, config)

    kx = _moment_factor(load.Mx, props.Icx, threshold, moment_name="Mx", inertia_name="Icx", floor=floor)
    ky = _moment_factor(load.My, props.Icy, threshold, moment_name="My", inertia_name="Icy", floor=floor)
    kp = _moment_factor(load.Mz, props.Icp, threshold, moment_name="Mz", inertia_name="Icp", floor=floor)

    # Axial load
    P_Fz = load.Fz * A / sum_a
    P_Mx = kx * rcy * A
    P_My = -ky * rcx * A

    # Shear load
    P_Fx = load.Fx * A / sum_a
    P_Fy = load.Fy * A / sum_a

    # (0, 0, Mz) x (rcx, rcy, 0), scaled by A / Icp
    rc = np.column_stack((rcx, rcy, np.zeros_like(rcx)))
    P_Mz = np.cross(np.array([0.0, 0.0, 1.0]), rc) * (kp * A)[:, None]

    pts = np.asarray(points, dtype=float)
    bolt_results: list[BoltForce] = []
    for i in range(props.n):
        bolt_results.append(
            BoltForce(
                index=i,
                point=(float(pts[i, 0]), float(pts[i, 1])),
                area=float(A[i]),
                axial_direct=float(P_Fz[i]),
                axial_Mx=float(P_Mx[i]),
                axial_My=float(P_My[i]),
                shear_direct_x=float(P_Fx[i]),
                shear_direct_y=float(P_Fy[i]),
                shear_torsion_x=float(P_Mz[i, 0]),
                shear_torsion_y=float(P_Mz[i, 1]),
            )
        )

    return bolt_results


def distribute(
    points: Sequence[Sequence[float]],
    load: Load,
    areas: AreaInput = 1.0,
    pivot: Point2D | None = None,
    config: AnalysisConfig | None = None,
) -> list[BoltForce]:
    """Return per-fastener axial and shear loads using the elastic method."""
    props = compute_properties(points, areas, pivot)
    return distribute_with_properties(points=points, props=props, load=load, config=config)


__all__ = ["distribute", "distribute_with_properties"]
