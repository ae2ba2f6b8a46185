"""Exception types raised by boltpattern.

Errors subclass the builtin types callers would naturally catch
(`ValueError`, `ZeroDivisionError`) so existing handlers keep working.
"""

from __future__ import annotations


class BoltPatternError(Exception):
    """Base class for all boltpattern errors."""


class InvalidArgumentError(BoltPatternError, ValueError):
    """Malformed geometry, area assignment or unit name."""


class InvalidConfigurationError(BoltPatternError, ZeroDivisionError):
    """A moment component acts on a pattern with no inertia about that axis."""


__all__ = [
    "BoltPatternError",
    "InvalidArgumentError",
    "InvalidConfigurationError",
]
