"""Plain-text tabulation of fastener loads."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .units import convert_force, convert_length

if TYPE_CHECKING:
    from .analysis import LoadedPattern


def result_rows(
    result: "LoadedPattern",
    *,
    length_unit: str | None = None,
    force_unit: str | None = None,
) -> list[dict[str, float]]:
    """Per-fastener rows converted to the requested display units."""
    units = result.units
    length_unit = length_unit or units.length
    force_unit = force_unit or units.force

    rows = []
    for row in result.rows():
        rows.append(
            {
                "id": row["id"],
                "x": convert_length(row["x"], units.length, length_unit),
                "y": convert_length(row["y"], units.length, length_unit),
                "axial": convert_force(row["axial"], units.force, force_unit),
                "shear": convert_force(row["shear"], units.force, force_unit),
            }
        )
    return rows


def format_table(
    result: "LoadedPattern",
    *,
    length_unit: str | None = None,
    force_unit: str | None = None,
    digits: int = 1,
) -> str:
    """Render fastener loads as a fixed-width text table."""
    length_unit = length_unit or result.units.length
    force_unit = force_unit or result.units.force
    rows = result_rows(result, length_unit=length_unit, force_unit=force_unit)

    header = (
        f"{'ID':>4}  {'x [' + length_unit + ']':>12}  {'y [' + length_unit + ']':>12}  "
        f"{'Axial [' + force_unit + ']':>14}  {'Shear [' + force_unit + ']':>14}"
    )
    lines: list[str] = [header, "-" * len(header)]
    for row in rows:
        lines.append(
            f"{row['id']:>4}  {row['x']:>12.{digits}f}  {row['y']:>12.{digits}f}  "
            f"{row['axial']:>14.{digits}f}  {row['shear']:>14.{digits}f}"
        )
    return "\n".join(lines)


__all__ = ["format_table", "result_rows"]
