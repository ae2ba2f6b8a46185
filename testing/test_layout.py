from __future__ import annotations

import math

import pytest

from boltpattern import BoltPattern, InvalidArgumentError, circle, rectangle


@pytest.mark.parametrize("count", [2, 3, 4, 6, 7, 12])
def test_circle_points_lie_on_radius_and_centre_on_origin(count: int) -> None:
    points = circle(radius=100.0, count=count)

    assert len(points) == count
    for x, y in points:
        assert math.hypot(x, y) == pytest.approx(100.0)

    xc = sum(p[0] for p in points) / count
    yc = sum(p[1] for p in points) / count
    assert xc == pytest.approx(0.0, abs=1e-9)
    assert yc == pytest.approx(0.0, abs=1e-9)


def test_circle_starts_at_top_and_runs_clockwise() -> None:
    points = circle(radius=10.0, count=4)

    expected = [(0.0, 10.0), (10.0, 0.0), (0.0, -10.0), (-10.0, 0.0)]
    for (x, y), (ex, ey) in zip(points, expected):
        assert x == pytest.approx(ex, abs=1e-9)
        assert y == pytest.approx(ey, abs=1e-9)


def test_circle_start_angle_rotates_clockwise() -> None:
    x, y = circle(radius=10.0, count=4, start_angle=90.0)[0]

    assert x == pytest.approx(10.0)
    assert y == pytest.approx(0.0, abs=1e-9)


def test_circle_single_point_is_valid() -> None:
    points = circle(radius=5.0, count=1)

    assert len(points) == 1
    assert points[0][1] == pytest.approx(5.0)


@pytest.mark.parametrize("radius, count", [(0.0, 4), (-1.0, 4), (10.0, 0)])
def test_circle_rejects_bad_arguments(radius: float, count: int) -> None:
    with pytest.raises(InvalidArgumentError):
        circle(radius=radius, count=count)


@pytest.mark.parametrize("nx, ny", [(2, 2), (3, 4), (5, 2), (4, 6)])
def test_rectangle_point_count_perimeter_and_centroid(nx: int, ny: int) -> None:
    points = rectangle(x_span=250.0, y_span=125.0, nx=nx, ny=ny)

    assert len(points) == 2 * ny + 2 * (nx - 2)
    assert len(set(points)) == len(points)

    for x, y in points:
        on_vertical_edge = abs(abs(x) - 125.0) < 1e-9 and abs(y) <= 62.5 + 1e-9
        on_horizontal_edge = abs(abs(y) - 62.5) < 1e-9 and abs(x) <= 125.0 + 1e-9
        assert on_vertical_edge or on_horizontal_edge

    n = len(points)
    assert sum(p[0] for p in points) / n == pytest.approx(0.0, abs=1e-9)
    assert sum(p[1] for p in points) / n == pytest.approx(0.0, abs=1e-9)


def test_rectangle_orders_columns_left_to_right_top_to_bottom() -> None:
    points = rectangle(x_span=200.0, y_span=100.0, nx=3, ny=3)

    assert points == [
        (-100.0, 50.0),
        (-100.0, 0.0),
        (-100.0, -50.0),
        (0.0, 50.0),
        (0.0, -50.0),
        (100.0, 50.0),
        (100.0, 0.0),
        (100.0, -50.0),
    ]


@pytest.mark.parametrize(
    "x_span, y_span, nx, ny",
    [(0.0, 10.0, 2, 2), (10.0, -5.0, 2, 2), (10.0, 10.0, 1, 2), (10.0, 10.0, 2, 1)],
)
def test_rectangle_rejects_bad_arguments(x_span: float, y_span: float, nx: int, ny: int) -> None:
    with pytest.raises(InvalidArgumentError):
        rectangle(x_span=x_span, y_span=y_span, nx=nx, ny=ny)


def test_pattern_constructors_apply_center_offset() -> None:
    pattern = BoltPattern.from_rectangle(x_span=100.0, y_span=50.0, center=(10.0, -5.0))

    assert pattern.n == 4
    assert pattern.centroid() == pytest.approx((10.0, -5.0))

    ring = BoltPattern.from_circle(radius=20.0, count=6, center=(3.0, 4.0))
    for x, y in ring.points:
        assert math.hypot(x - 3.0, y - 4.0) == pytest.approx(20.0)


def test_pattern_from_xy_matches_from_points() -> None:
    x = [-35.0, -30.0, -25.0]
    y = [-20.0, 12.0, 30.0]

    assert BoltPattern.from_xy(x, y) == BoltPattern.from_points(list(zip(x, y)))

    with pytest.raises(InvalidArgumentError, match="same length"):
        BoltPattern.from_xy([0.0, 1.0], [0.0])
