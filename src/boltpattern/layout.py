"""Standard fastener layouts in the x-y plane."""

from __future__ import annotations

import numpy as np

from .common.errors import InvalidArgumentError

Point2D = tuple[float, float]  # (x, y)


def circle(radius: float, count: int = 4, start_angle: float = 0.0) -> list[Point2D]:
    """Create a circular layout of fasteners centred on the origin.

    Args:
        radius (float): The radius of the fastener circle.
        count (int, optional): The number of fasteners. Defaults to 4.
        start_angle (float, optional): Clockwise rotation in degrees of the
            first fastener away from the top of the circle (90°). Defaults to 0.0.

    Returns:
        list[tuple[float, float]]: ``count`` (x, y) coordinates, proceeding
        clockwise at 360/count spacing.
    """
    if radius <= 0.0:
        raise InvalidArgumentError("radius must be positive")
    if count < 1:
        raise InvalidArgumentError("count must be at least 1")

    step = 2.0 * np.pi / count
    theta = np.pi / 2.0 - np.radians(start_angle) - step * np.arange(count)
    x = radius * np.cos(theta)
    y = radius * np.sin(theta)

    return [(float(xi), float(yi)) for xi, yi in zip(x, y)]


def rectangle(x_span: float, y_span: float, nx: int = 2, ny: int = 2) -> list[Point2D]:
    """Create a rectangular perimeter layout centred on the origin.

    Args:
        x_span (float): Distance between the left and right columns.
        y_span (float): Distance between the top and bottom rows.
        nx (int, optional): Fasteners along the top and bottom edges (corners included). Defaults to 2.
        ny (int, optional): Fasteners along the left and right edges (corners included). Defaults to 2.

    Returns:
        list[tuple[float, float]]: ``2*ny + 2*(nx - 2)`` (x, y) coordinates,
        column by column from -x to +x, top to bottom within each column.
    """
    if x_span <= 0.0 or y_span <= 0.0:
        raise InvalidArgumentError("x_span and y_span must be positive")
    if nx < 2 or ny < 2:
        raise InvalidArgumentError("nx and ny must be at least 2")

    xs = np.linspace(-x_span / 2.0, x_span / 2.0, nx)
    ys = np.linspace(y_span / 2.0, -y_span / 2.0, ny)

    points: list[Point2D] = []
    for i, x in enumerate(xs):
        # Outer columns carry the full edge, interior columns only the corners of their edge
        column = ys if i in (0, nx - 1) else (ys[0], ys[-1])
        for y in column:
            points.append((float(x), float(y)))

    return points


def translate(points: list[Point2D], center: Point2D) -> list[Point2D]:
    """Shift every point by `center`."""
    cx, cy = center
    return [(x + cx, y + cy) for x, y in points]


__all__ = ["Point2D", "circle", "rectangle", "translate"]
