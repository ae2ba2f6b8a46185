from __future__ import annotations

import pytest

from boltpattern import InvalidArgumentError, Quantity, Units, analyze_loads, format_table
from boltpattern.table import result_rows
from boltpattern.units import convert_area, convert_force, convert_length, convert_moment


def test_length_and_force_conversion() -> None:
    assert convert_length(1.0, "inch", "mm") == pytest.approx(25.4)
    assert convert_length(250.0, "mm", "cm") == pytest.approx(25.0)
    assert convert_force(1500.0, "N", "kN") == pytest.approx(1.5)
    assert convert_force(1.0, "kip", "lbf") == pytest.approx(1000.0)
    assert convert_area(1.0, "cm", "mm") == pytest.approx(100.0)


def test_moment_conversion() -> None:
    value = convert_moment(1.0, Units(length="m", force="kN"), Units(length="mm", force="N"))

    assert value == pytest.approx(1.0e6)
    assert Units(length="m", force="kN").moment == "kN·m"


def test_unknown_units_are_rejected() -> None:
    with pytest.raises(InvalidArgumentError, match="length unit"):
        Units(length="furlong")
    with pytest.raises(InvalidArgumentError, match="force unit"):
        convert_force(1.0, "N", "tonne")


def test_quantity_conversion() -> None:
    assert Quantity(1000.0, "N").to("kN").magnitude == pytest.approx(1.0)
    assert Quantity(2.0, "inch").to("mm") == Quantity(pytest.approx(50.8), "mm")
    assert str(Quantity(12.345, "kN")) == "12.3 kN"

    with pytest.raises(InvalidArgumentError):
        Quantity(1.0, "mm").to("kN")


def test_results_carry_units(square_points) -> None:
    result = analyze_loads(square_points, Fc=(0.0, 0.0, 400.0), units=Units(length="inch", force="lbf"))

    assert result.units.force == "lbf"
    assert result.axial_quantity(0) == Quantity(pytest.approx(100.0), "lbf")
    assert result.shear_quantity(0).unit == "lbf"


def test_rows_and_display_conversion(square_points) -> None:
    result = analyze_loads(square_points, Fc=(0.0, 300.0, 400.0))

    rows = result.rows()
    assert [r["id"] for r in rows] == [1, 2, 3, 4]
    assert rows[0]["axial"] == pytest.approx(100.0)
    assert rows[0]["shear"] == pytest.approx(75.0)

    converted = result_rows(result, length_unit="cm", force_unit="kN")
    assert converted[0]["x"] == pytest.approx(-5.0)
    assert converted[0]["axial"] == pytest.approx(0.1)


def test_format_table(square_points) -> None:
    result = analyze_loads(square_points, Fc=(0.0, 0.0, 400.0))
    text = format_table(result, force_unit="kN", digits=3)
    lines = text.splitlines()

    assert "Axial [kN]" in lines[0]
    assert "x [mm]" in lines[0]
    assert len(lines) == 2 + 4
    assert lines[2].split() == ["1", "-50.000", "50.000", "0.100", "0.000"]
    assert result.table() == format_table(result)
