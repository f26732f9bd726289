# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Point and direction value types.

Both are immutable named tuples, so plain ``(x, y, z)`` tuples can be used
wherever a Point or Direction is expected:

    p = Point(1.0, 2.0, 3.0)
    x, y, z = p
    d = Direction.along('x')
"""

from __future__ import annotations
from typing import NamedTuple


class Point(NamedTuple):
    """Position in 3D space."""

    x: float
    y: float
    z: float

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y}, {self.z})"


class Direction(NamedTuple):
    """Direction vector in 3D space.

    Need not be normalized. Its magnitude only matters for the axis-aligned
    plane surfaces, where the returned distance is a ray parameter ``t``
    such that ``point + t * direction`` lies on the plane.
    """

    dx: float
    dy: float
    dz: float

    @classmethod
    def along(cls, axis: str) -> 'Direction':
        """Unit direction along a coordinate axis.

        Args:
            axis: One of 'x', 'y', 'z' (case-insensitive).

        Raises:
            ValueError: If axis is not a coordinate axis name.
        """
        key = axis.lower() if isinstance(axis, str) else axis
        if key == 'x':
            return cls(1.0, 0.0, 0.0)
        if key == 'y':
            return cls(0.0, 1.0, 0.0)
        if key == 'z':
            return cls(0.0, 0.0, 1.0)
        raise ValueError(f"Unknown axis: {axis!r} (expected 'x', 'y' or 'z')")

    def __repr__(self) -> str:
        return f"Direction({self.dx}, {self.dy}, {self.dz})"


# Zero direction: axis-plane queries with it are always undefined
ZERO_DIRECTION = Direction(0.0, 0.0, 0.0)
