"""Several load cases against one bolt circle, tabulated side by side.

Outputs (created under `gallery/`):
- load_cases.txt
- load_case_<n>.svg
"""

from __future__ import annotations

from pathlib import Path

import matplotlib

matplotlib.use("Agg")  # non-interactive backend for scripts/CI

from boltpattern import BoltPattern, Load, LoadedPattern, Units


def _out_dir() -> Path:
    out_dir = Path(__file__).resolve().parents[1] / "gallery"
    out_dir.mkdir(parents=True, exist_ok=True)
    return out_dir


def main() -> None:
    # M16 bolts on a 120 mm PCD, stress area 157 mm²
    pattern = BoltPattern.from_circle(radius=60.0, count=8, start_angle=22.5, areas=157.0)

    loads = [
        Load(Fz=40_000.0),
        Load(Fz=10_000.0, Mx=3.0e6),
        Load(Fx=8_000.0, Fy=-6_000.0, location=(0.0, 0.0, 250.0)),
        Load(Fy=-12_000.0, location=(400.0, 0.0, 0.0)),
    ]
    results = LoadedPattern.for_loads(pattern, loads, units=Units(length="mm", force="N"))

    lines: list[str] = []
    for n, (load, result) in enumerate(zip(loads, results), start=1):
        lines.append(f"Load case {n}: F={load.force} M={load.moment} at {load.location}")
        lines.append("=" * 80)
        lines.append(result.table(force_unit="kN", digits=2))
        lines.append(f"max shear={result.max_shear / 1000:.2f} kN, max axial={result.max_axial / 1000:.2f} kN")
        lines.append("")
        result.plot(show=False, force_unit="kN", save_path=_out_dir() / f"load_case_{n}.svg")

    out = _out_dir() / "load_cases.txt"
    out.write_text("\n".join(lines).rstrip() + "\n", encoding="utf-8")
    print(f"Saved: {out}")


if __name__ == "__main__":
    main()
