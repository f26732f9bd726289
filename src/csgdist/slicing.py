# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""Distance sampling on axis-aligned slice grids.

Three samplers share one implementation:

- distance_grid_z: XY plane at height z
- distance_grid_y: XZ plane at depth y
- distance_grid_x: YZ plane at offset x

Each returns a grid result dict. ``values`` is a flat float64 array in
row-major order (horizontal index fastest), NaN where the distance is
undefined. Pixel centers are sampled.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING

import numpy as np

from .evaluator import evaluate_many

if TYPE_CHECKING:
    from .geometry import Direction
    from .surfaces import Surface

logger = logging.getLogger(__name__)

# axis -> (horizontal axis, vertical axis)
_PLANE_AXES = {'z': ('x', 'y'), 'y': ('x', 'z'), 'x': ('y', 'z')}
_AXIS_INDEX = {'x': 0, 'y': 1, 'z': 2}


def _sample_plane(surface: 'Surface', axis: str, value: float,
                  bounds: Tuple[float, float, float, float],
                  resolution: Tuple[int, int],
                  direction: Optional['Direction']) -> Dict[str, Any]:
    h_name, v_name = _PLANE_AXES[axis]
    h_min, h_max, v_min, v_max = (float(b) for b in bounds)
    n_h, n_v = (int(n) for n in resolution)
    if n_h <= 0 or n_v <= 0:
        raise ValueError(f"Resolution must be positive, got {resolution}")
    if h_min >= h_max or v_min >= v_max:
        raise ValueError(f"Bounds min values must be less than max values, got {bounds}")

    hs = h_min + (np.arange(n_h) + 0.5) * (h_max - h_min) / n_h
    vs = v_min + (np.arange(n_v) + 0.5) * (v_max - v_min) / n_v
    hh, vv = np.meshgrid(hs, vs)

    points = np.empty((n_h * n_v, 3), dtype=float)
    points[:, _AXIS_INDEX[h_name]] = hh.ravel()
    points[:, _AXIS_INDEX[v_name]] = vv.ravel()
    points[:, _AXIS_INDEX[axis]] = value

    logger.debug("Sampling %r on %s=%g plane (%dx%d)", surface, axis, value, n_h, n_v)
    values = evaluate_many(surface, points, direction)

    return {
        f'n{h_name}': n_h,
        f'n{v_name}': n_v,
        f'{h_name}_min': h_min,
        f'{h_name}_max': h_max,
        f'{v_name}_min': v_min,
        f'{v_name}_max': v_max,
        axis: float(value),
        'values': values,
        'surface': surface,
    }


def distance_grid_z(surface: 'Surface', z: float,
                    bounds: Tuple[float, float, float, float],
                    resolution: Tuple[int, int] = (100, 100),
                    direction: Optional['Direction'] = None) -> Dict[str, Any]:
    """Sample distances on the XY plane at height z.

    Args:
        surface: Surface to evaluate.
        z: Slice height.
        bounds: (x_min, x_max, y_min, y_max).
        resolution: (nx, ny) pixel counts.
        direction: Direction passed to every evaluation.

    Returns:
        Dict with nx, ny, x_min, x_max, y_min, y_max, z, values, surface.
    """
    return _sample_plane(surface, 'z', z, bounds, resolution, direction)


def distance_grid_y(surface: 'Surface', y: float,
                    bounds: Tuple[float, float, float, float],
                    resolution: Tuple[int, int] = (100, 100),
                    direction: Optional['Direction'] = None) -> Dict[str, Any]:
    """Sample distances on the XZ plane; bounds are (x_min, x_max, z_min, z_max)."""
    return _sample_plane(surface, 'y', y, bounds, resolution, direction)


def distance_grid_x(surface: 'Surface', x: float,
                    bounds: Tuple[float, float, float, float],
                    resolution: Tuple[int, int] = (100, 100),
                    direction: Optional['Direction'] = None) -> Dict[str, Any]:
    """Sample distances on the YZ plane; bounds are (y_min, y_max, z_min, z_max)."""
    return _sample_plane(surface, 'x', x, bounds, resolution, direction)


def _extract_slice_params(grid_result: Dict[str, Any]) -> Tuple:
    """Extract uniform slice parameters from a grid result dict.

    Returns:
        (nu, nv, origin, normal, up, u_min, u_max, v_min, v_max)

    The mapping depends on which keys are present:
        Z-slice (nx, ny)  -> nu=nx, nv=ny, normal=(0,0,1), up=(0,1,0)
        Y-slice (nx, nz)  -> nu=nx, nv=nz, normal=(0,1,0), up=(0,0,1)
        X-slice (ny, nz)  -> nu=ny, nv=nz, normal=(1,0,0), up=(0,0,1)
    """
    if 'nx' in grid_result and 'ny' in grid_result:
        h, v, axis = 'x', 'y', 'z'
        normal, up = (0, 0, 1), (0, 1, 0)
    elif 'nx' in grid_result and 'nz' in grid_result:
        h, v, axis = 'x', 'z', 'y'
        normal, up = (0, 1, 0), (0, 0, 1)
    elif 'ny' in grid_result and 'nz' in grid_result:
        h, v, axis = 'y', 'z', 'x'
        normal, up = (1, 0, 0), (0, 0, 1)
    else:
        raise ValueError("Unrecognized grid result (no nx/ny/nz keys)")

    origin = [0.0, 0.0, 0.0]
    origin[_AXIS_INDEX[axis]] = grid_result.get(axis, 0.0)

    return (grid_result[f'n{h}'], grid_result[f'n{v}'], tuple(origin),
            normal, up,
            grid_result[f'{h}_min'], grid_result[f'{h}_max'],
            grid_result[f'{v}_min'], grid_result[f'{v}_max'])


def grid_to_image(grid_result: Dict[str, Any]) -> np.ndarray:
    """Reshape grid values to a (nv, nu) array, row 0 at v_min."""
    nu, nv = _extract_slice_params(grid_result)[:2]
    return np.asarray(grid_result['values'], dtype=float).reshape(nv, nu)


def grid_stats(grid_result: Dict[str, Any]) -> Dict[str, Any]:
    """Summary statistics of a distance grid.

    Returns:
        Dict with min, max, mean over defined samples (None if there are
        none), the number of undefined samples, and the total count.
    """
    values = np.asarray(grid_result['values'], dtype=float)
    defined = values[~np.isnan(values)]
    stats: Dict[str, Any] = {
        'count': int(values.size),
        'undefined': int(values.size - defined.size),
        'min': None,
        'max': None,
        'mean': None,
    }
    if defined.size:
        stats['min'] = float(defined.min())
        stats['max'] = float(defined.max())
        stats['mean'] = float(defined.mean())
    return stats
