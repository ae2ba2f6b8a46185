"""
boltpattern Example: load distribution over three fastener patterns.

This example demonstrates:
1. Generating circular and rectangular patterns, and using arbitrary points
2. Computing the centroid, with and without per-fastener areas or a pivot override
3. Applying a force/moment resultant
4. Tabulating and plotting the fastener loads
"""
from boltpattern import BoltPattern, Load


def main() -> None:
    # 1. Six bolts on a 100 mm radius circle
    ring = BoltPattern.from_circle(radius=100.0, count=6)
    print(f"Circle centroid: ({ring.xc:.1f}, {ring.yc:.1f}) mm")
    print(f"Pivot override:  {ring.centroid(pivot=(-30.0, 75.0))}")

    # 2. 250 x 125 mm perimeter pattern, 3 columns by 4 rows
    rect = BoltPattern.from_rectangle(x_span=250.0, y_span=125.0, nx=3, ny=4)
    props = rect.properties()
    print(f"\nRectangle: {rect.n} bolts")
    print(f"  Icx: {props.Icx:.0f}")
    print(f"  Icy: {props.Icy:.0f}")
    print(f"  Icp: {props.Icp:.0f}")

    # 3. Arbitrary points, one much larger fastener
    x = [-35.0, -30.0, -25.0, 27.0, 29.0, 45.0]
    y = [-20.0, 12.0, 30.0, 27.0, -20.0, -50.0]
    custom = BoltPattern.from_xy(x, y, areas=[1.0, 1.0, 1.0, 1.0, 1.0, 20.0])
    print(f"\nWeighted centroid: ({custom.xc:.2f}, {custom.yc:.2f}) mm")

    # 4. 5 kN tension and 10 kN shear applied 150 mm off the rectangle centroid
    load = Load(Fx=10_000.0, Fz=5_000.0, My=2.0e5, location=(0.0, 150.0, 0.0))
    result = rect.analyze(load)

    print("\nFastener loads:")
    print(result.table(force_unit="kN"))
    print(f"\nCritical fastener: {result.critical_index + 1}")

    # 5. Plot the results
    print("\nGenerating plot...")
    result.plot(force_unit="kN", save_path="bolt_loads_example.svg")


if __name__ == "__main__":
    main()
