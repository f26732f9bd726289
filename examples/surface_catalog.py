#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Surface catalog example for csgdist.

This example demonstrates:
1. Every surface type in the catalog
2. Axis-plane ray parameters and undefined results
3. Writing and reading MCNP surface cards
4. Sampling a distance grid and plotting it (if matplotlib is installed)
"""

import math
import tempfile
from pathlib import Path

import csgdist as cd

print("=" * 60)
print("csgdist surface catalog")
print("=" * 60)

point = cd.Point(1.0, 2.0, 2.0)
direction = cd.Direction(1.0, 0.0, 0.0)

surfaces = [
    cd.Sphere(1, 1, 1, radius=1.0, name="ball"),
    cd.XPlane(2.0),
    cd.YPlane(-1.0),
    cd.ZPlane(5.0),
    cd.Plane(1, 1, 1, -3),
    cd.CylinderX(0, 0, radius=1.0),
    cd.CylinderY(0.5, 0.5, radius=2.0),
    cd.CylinderZ(0, 0, radius=1.0),
    cd.ConeX(0, 0, 0, angle=math.pi / 4),
    cd.ConeY(0, 0, 0, angle=math.pi / 6),
    cd.ConeZ(0, 0, 1, angle=math.pi / 3),
    # x² + y² + z² - 3 = 0 (approximate distance)
    cd.Quadric(1, 1, 1, 0, 0, 0, 0, 0, 0, -3),
    cd.TorusX(0, 0, 0, a=3.0, b=0.5, c=0.5),
]

print(f"\nPoint {point}, direction {direction}\n")
for surface in surfaces:
    value = cd.evaluate(surface, point, direction)
    shown = "undefined" if value is None else f"{value:.6f}"
    print(f"  {surface!r:60s} -> {shown}")

# =============================================================================
# Surface cards
# =============================================================================

print("\n--- Surface cards ---")

with tempfile.TemporaryDirectory() as tmp:
    path = Path(tmp) / "surfaces.inp"
    cd.write_surfaces(surfaces, path)
    print(path.read_text())

    loaded = cd.read_surfaces(path)
    print(f"Read back {len(loaded)} surfaces")

# =============================================================================
# Distance grid
# =============================================================================

print("\n--- Distance grid ---")

grid = cd.distance_grid_z(cd.CylinderZ(0, 0, radius=3.0), 0.0,
                          bounds=(-5, 5, -5, 5), resolution=(50, 50))
print(f"Grid stats: {cd.grid_stats(grid)}")

if cd.HAS_PLOTTING:
    import matplotlib.pyplot as plt

    fig, axes = plt.subplots(1, 2, figsize=(10, 5))
    cd.plot_distance_slice(grid, ax=axes[0], levels=[0.1], title="CZ r=3")
    cd.plot_surface(cd.TorusX(0, 0, 0, 3.0, 1.0, 1.0), axis='x', value=0.0,
                    bounds=(-5, 5, -5, 5), ax=axes[1])
    plt.tight_layout()
    plt.savefig("surface_catalog.png", dpi=100)
    print("Saved surface_catalog.png")
else:
    print("matplotlib not installed; skipping plots")
