"""
Common infrastructure shared by the pattern, solver and presentation modules.

Includes the load resultant, error types and numerical settings.
"""

from .config import DEFAULT_CONFIG, ZERO_TOLERANCE, AnalysisConfig
from .errors import BoltPatternError, InvalidArgumentError, InvalidConfigurationError
from .load import Load, Point3D, Vector3

__all__ = [
    "Load",
    "Point3D",
    "Vector3",
    "AnalysisConfig",
    "DEFAULT_CONFIG",
    "ZERO_TOLERANCE",
    "BoltPatternError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
]
