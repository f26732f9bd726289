# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Matplotlib-based plotting of surface distance fields.

Includes:
- plot_distance_slice: image of a grid result from the slicing module
- plot_surface: sample a surface on a slice and plot it in one call
"""

from __future__ import annotations
from typing import Any, Dict, Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from .slicing import (
    _extract_slice_params, grid_to_image,
    distance_grid_x, distance_grid_y, distance_grid_z,
)

if TYPE_CHECKING:
    from .surfaces import Surface

try:
    import matplotlib.pyplot as plt
    from matplotlib.axes import Axes
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False

_AXIS_LABELS = {
    (0, 0, 1): ('x', 'y'),
    (0, 1, 0): ('x', 'z'),
    (1, 0, 0): ('y', 'z'),
}

_SAMPLERS = {'x': distance_grid_x, 'y': distance_grid_y, 'z': distance_grid_z}


def plot_distance_slice(grid_result: Dict[str, Any],
                        ax: Optional['Axes'] = None,
                        cmap: str = 'viridis',
                        levels: Optional[Sequence[float]] = None,
                        show_colorbar: bool = True,
                        undefined_color: str = 'lightgray',
                        title: Optional[str] = None,
                        xlabel: Optional[str] = None,
                        ylabel: Optional[str] = None) -> 'Axes':
    """Plot a distance grid as an image.

    Args:
        grid_result: Result from distance_grid_z/y/x.
        ax: Matplotlib axes (new figure if None).
        cmap: Colormap name for the distance values.
        levels: Distance values to draw as contour lines, e.g. ``[0.05]``
            to outline the surface.
        show_colorbar: Show colorbar.
        undefined_color: Color for samples with no defined distance.
        title, xlabel, ylabel: Labels. Axis labels default to the slice axes.

    Returns:
        Matplotlib Axes
    """
    if not HAS_MATPLOTLIB:
        raise ImportError("matplotlib is required for plotting")

    if ax is None:
        fig, ax = plt.subplots()

    nu, nv, origin, normal, up, u_min, u_max, v_min, v_max = \
        _extract_slice_params(grid_result)
    image = grid_to_image(grid_result)

    cmap_obj = plt.colormaps[cmap].copy()
    cmap_obj.set_bad(undefined_color)
    masked = np.ma.masked_invalid(image)
    im = ax.imshow(masked, origin='lower', extent=(u_min, u_max, v_min, v_max),
                   cmap=cmap_obj, interpolation='nearest', aspect='equal')

    if levels is not None and masked.count() > 0:
        hs = u_min + (np.arange(nu) + 0.5) * (u_max - u_min) / nu
        vs = v_min + (np.arange(nv) + 0.5) * (v_max - v_min) / nv
        ax.contour(hs, vs, masked, levels=sorted(levels),
                   colors='white', linewidths=0.8)

    if show_colorbar:
        plt.colorbar(im, ax=ax, label='Distance')

    h_name, v_name = _AXIS_LABELS[tuple(normal)]
    ax.set_xlabel(xlabel if xlabel is not None else h_name)
    ax.set_ylabel(ylabel if ylabel is not None else v_name)
    if title:
        ax.set_title(title)

    return ax


def plot_surface(surface: 'Surface',
                 axis: str = 'z',
                 value: float = 0.0,
                 bounds: Tuple[float, float, float, float] = (-10, 10, -10, 10),
                 resolution: Tuple[int, int] = (200, 200),
                 direction=None,
                 ax: Optional['Axes'] = None,
                 **kwargs) -> 'Axes':
    """Sample a surface on an axis-aligned slice and plot the distance field.

    Args:
        surface: Surface to plot.
        axis: Slice normal, 'x', 'y' or 'z'.
        value: Slice position along the axis.
        bounds: (h_min, h_max, v_min, v_max) of the slice.
        resolution: (nh, nv) pixel counts.
        direction: Direction passed to every evaluation.
        ax: Matplotlib axes.
        **kwargs: Passed to plot_distance_slice.

    Returns:
        Matplotlib Axes
    """
    if not HAS_MATPLOTLIB:
        raise ImportError("matplotlib is required for plotting")
    if axis not in _SAMPLERS:
        raise ValueError(f"Unknown axis: {axis!r} (expected 'x', 'y' or 'z')")

    grid = _SAMPLERS[axis](surface, value, bounds, resolution=resolution,
                           direction=direction)
    kwargs.setdefault('title', f"{surface!r} at {axis} = {value:g}")
    return plot_distance_slice(grid, ax=ax, **kwargs)
