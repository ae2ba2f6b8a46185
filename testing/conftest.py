import pytest

from boltpattern import BoltPattern


@pytest.fixture
def square_points() -> list[tuple[float, float]]:
    """Four fasteners at the corners of a 100 x 100 square centred on the origin."""
    return [(-50.0, 50.0), (-50.0, -50.0), (50.0, 50.0), (50.0, -50.0)]


@pytest.fixture
def square_pattern(square_points) -> BoltPattern:
    return BoltPattern.from_points(square_points)


@pytest.fixture
def scattered_points() -> list[tuple[float, float]]:
    """Irregular six-fastener pattern."""
    x = [-35.0, -30.0, -25.0, 27.0, 29.0, 45.0]
    y = [-20.0, 12.0, 30.0, 27.0, -20.0, -50.0]
    return list(zip(x, y))


@pytest.fixture
def scattered_areas() -> list[float]:
    return [1.0, 1.0, 1.0, 1.0, 1.0, 20.0]
