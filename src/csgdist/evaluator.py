# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Single-point and batch evaluation of surface distances.

    import csgdist as cd

    s = cd.Sphere(0, 0, 0, radius=1.0)
    cd.evaluate(s, cd.Point(2, 0, 0), cd.Direction(1, 0, 0))   # 1.0
    cd.evaluate(cd.XPlane(2), (1, 1, 1), (0, 1, 0))            # None
"""

from __future__ import annotations
from typing import Iterable, Optional, Sequence, Union

import numpy as np

from .geometry import Point, Direction, ZERO_DIRECTION
from .surfaces import Surface, SURFACE_TYPES

PointLike = Union[Point, Sequence[float]]
DirectionLike = Union[Direction, Sequence[float]]


def _check_surface(surface) -> None:
    if not isinstance(surface, SURFACE_TYPES):
        raise TypeError(
            f"Expected a catalog surface, got {type(surface).__name__}")


def evaluate(surface: Surface, point: PointLike,
             direction: Optional[DirectionLike] = None) -> Optional[float]:
    """Evaluate the proximity of a point to a surface.

    Args:
        surface: One of the catalog surfaces (see ``SURFACE_TYPES``).
        point: (x, y, z) sample position.
        direction: (dx, dy, dz) ray direction. Only the axis planes read it;
            None is treated as the zero direction.

    Returns:
        Non-negative distance, or None when undefined (axis plane parallel
        to the direction, or behind the point).

    Raises:
        TypeError: If surface is not a catalog surface.
    """
    _check_surface(surface)
    if direction is None:
        direction = ZERO_DIRECTION
    return surface.distance(point, direction)


def evaluate_many(surface: Surface, points: Union[np.ndarray, Iterable[PointLike]],
                  direction: Optional[DirectionLike] = None) -> np.ndarray:
    """Evaluate many points against one surface and direction.

    Args:
        surface: Catalog surface.
        points: (N, 3) array or iterable of (x, y, z).
        direction: Shared direction for all points.

    Returns:
        float64 array of shape (N,), NaN where the distance is undefined.
    """
    _check_surface(surface)
    if direction is None:
        direction = ZERO_DIRECTION

    pts = np.asarray(points, dtype=float)
    if pts.size == 0:
        return np.empty(0, dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 3:
        raise ValueError(f"points must have shape (N, 3), got {pts.shape}")

    out = np.empty(len(pts), dtype=float)
    for i, (x, y, z) in enumerate(pts.tolist()):
        value = surface.distance((x, y, z), direction)
        out[i] = np.nan if value is None else value
    return out
