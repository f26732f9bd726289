#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Basic usage example for csgdist.

Builds a unit sphere at the origin, evaluates the distance from a point,
and prints the result or a "no intersection" message.
"""

import csgdist as cd

point = cd.Point(1.0, 2.0, 3.0)
direction = cd.Direction(1.0, 0.0, 0.0)

surface = cd.Sphere(0.0, 0.0, 0.0, radius=1.0)

distance = cd.evaluate(surface, point, direction)
if distance is not None:
    print(f"Distance to surface: {distance}")
else:
    print("No intersection with the surface.")
