"""Numerical tolerances and analysis settings shared by all solvers."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgumentError

# Numerical tolerances (consistent across all solvers)
ZERO_TOLERANCE = 1e-12  # Relative threshold for a vanishing inertia


@dataclass(frozen=True)
class AnalysisConfig:
    """Settings for the elastic load distribution.

    Attributes:
        inertia_tolerance: An inertia term ``I`` is treated as zero when
            ``I <= inertia_tolerance * sum(A) * R**2`` (plus coordinate
            rounding residue), with ``R`` the largest fastener radius about
            the pivot. A transferred moment is treated as zero when
            ``|M| <= inertia_tolerance * |F| * R`` (plus residue).
    """

    inertia_tolerance: float = ZERO_TOLERANCE

    def __post_init__(self) -> None:
        if self.inertia_tolerance < 0.0:
            raise InvalidArgumentError("inertia_tolerance must not be negative")


DEFAULT_CONFIG = AnalysisConfig()
