"""
boltpattern - Fastener Group Load Analysis Package

Distribute a force and moment resultant over a planar pattern of bolts,
rivets or weld points using the elastic (linear superposition) method.

The pattern lies in the x-y plane and z is the fastener axis. For every
fastener the package reports the signed axial load (positive = tension)
and the in-plane shear vector.

Example usage:
    from boltpattern import BoltPattern, Load

    # 1. Create a pattern
    pattern = BoltPattern.from_circle(radius=100.0, count=6)

    # 2. Define the load (acts at the pattern centroid unless a location is given)
    load = Load(Fz=5000.0, Mx=2.0e5)

    # 3. Analyze
    result = pattern.analyze(load)

    # 4. Access results
    print(f"Max axial: {result.max_axial:.1f} N")
    print(result.table(force_unit="kN"))

    # 5. Plot
    result.plot()

Functional entry points:
    from boltpattern import analyze_loads, analyze_pattern, rectangle

    points = rectangle(x_span=250.0, y_span=125.0, nx=3, ny=4)
    xc, yc = analyze_pattern(points)
    result = analyze_loads(points, Fc=(0.0, 0.0, 400.0), Mc=(0.0, 0.0, 1.0e4))
"""

import logging

from .analysis import LoadedPattern, analyze_loads, analyze_pattern
from .common import (
    AnalysisConfig,
    BoltPatternError,
    InvalidArgumentError,
    InvalidConfigurationError,
    Load,
)
from .geometry import BoltPattern, PatternProperties, centroid, compute_properties, resolve_areas
from .layout import circle, rectangle
from .plotting import plot_bolt_loads, plot_bolt_pattern
from .results import BoltForce
from .solvers import distribute
from .table import format_table
from .units import Quantity, Units

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Pattern
    "BoltPattern",
    "PatternProperties",
    "circle",
    "rectangle",
    "centroid",
    "compute_properties",
    "resolve_areas",
    # Loads and results
    "Load",
    "BoltForce",
    "LoadedPattern",
    "distribute",
    "analyze_pattern",
    "analyze_loads",
    # Settings and units
    "AnalysisConfig",
    "Units",
    "Quantity",
    # Errors
    "BoltPatternError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
    # Presentation
    "format_table",
    "plot_bolt_pattern",
    "plot_bolt_loads",
]

__version__ = "0.1.0"
