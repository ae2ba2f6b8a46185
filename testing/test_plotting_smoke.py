from __future__ import annotations

import matplotlib

matplotlib.use("Agg")  # non-interactive backend for CI

import matplotlib.pyplot as plt
import pytest

from boltpattern import BoltPattern, Load, plot_bolt_pattern


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def test_plot_pattern_saves_svg(tmp_path) -> None:
    pattern = BoltPattern.from_rectangle(x_span=250.0, y_span=125.0, nx=3, ny=4)

    ax = plot_bolt_pattern(pattern, pivot=(-48.0, 35.0), show=False, save_path=tmp_path / "pattern.png")

    assert (tmp_path / "pattern.svg").exists()
    assert ax.get_title() == "Fastener Pattern: 10 fasteners"


def test_plot_loads_with_torsion_and_compression(tmp_path) -> None:
    pattern = BoltPattern.from_circle(radius=100.0, count=6)
    result = pattern.analyze(Load(Fy=-2000.0, Mx=5.0e5, location=(150.0, 0.0, 0.0)))

    ax = result.plot(show=False, save_path=tmp_path / "loads.svg", force_unit="kN")

    assert (tmp_path / "loads.svg").exists()
    assert "kN" in ax.get_title()
    # One arrow per loaded fastener
    assert len(ax.patches) == 6


def test_plot_loads_without_shear_draws_no_arrows() -> None:
    pattern = BoltPattern.from_points([(0.0, 0.0), (0.0, 50.0)])
    result = pattern.analyze(Load(Fz=100.0))

    ax = result.plot(show=False, colorbar=False)

    assert len(ax.patches) == 0
