"""Load distribution solvers."""

from .elastic import distribute, distribute_with_properties

__all__ = ["distribute", "distribute_with_properties"]
