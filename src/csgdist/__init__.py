# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
csgdist: point-to-surface distances for CSG primitive surfaces

Evaluates how far a point is from one analytic surface of a fixed catalog
(sphere, planes, axis cylinders and cones, general quadric, x-axis torus).

Example:
    import csgdist as cd

    sphere = cd.Sphere(0, 0, 0, radius=1.0)
    d = cd.evaluate(sphere, cd.Point(1, 2, 3), cd.Direction(1, 0, 0))

    plane = cd.XPlane(2.0)
    t = cd.evaluate(plane, (1, 1, 1), (1, 0, 0))   # ray parameter 1.0
    cd.evaluate(plane, (1, 1, 1), (0, 1, 0))       # None: parallel

    surfaces = cd.read_surfaces("surfaces.inp")    # MCNP surface cards
"""

import logging

__version__ = "0.1.0"

from .geometry import (
    Point,
    Direction,
)

from .surfaces import (
    Surface,
    InvalidSurfaceError,
    Sphere,
    XPlane,
    YPlane,
    ZPlane,
    Plane,
    CylinderX,
    CylinderY,
    CylinderZ,
    ConeX,
    ConeY,
    ConeZ,
    Quadric,
    TorusX,
    SURFACE_TYPES,
)

from .evaluator import (
    evaluate,
    evaluate_many,
)

from .io import (
    SurfaceCardError,
    parse_surface_card,
    format_surface_card,
    read_surfaces,
    read_surfaces_string,
    write_surfaces,
)

from .slicing import (
    distance_grid_x,
    distance_grid_y,
    distance_grid_z,
    grid_stats,
)

# Logging (library logs go to the "csgdist" logger)
_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())

# Log level constants
LOG_NONE = logging.CRITICAL + 10
LOG_ERROR = logging.ERROR
LOG_WARN = logging.WARNING
LOG_INFO = logging.INFO
LOG_DEBUG = logging.DEBUG
LOG_TRACE = 5


def set_log_level(level: int) -> None:
    """Set the level of the csgdist logger (one of the LOG_* constants)."""
    _logger.setLevel(level)


def get_log_level() -> int:
    """Get the effective level of the csgdist logger."""
    return _logger.getEffectiveLevel()


def enable_logging() -> None:
    """Enable logging at INFO level."""
    _logger.setLevel(LOG_INFO)


def disable_logging() -> None:
    """Disable logging."""
    _logger.setLevel(LOG_NONE)


# Optional plotting (requires matplotlib)
try:
    import matplotlib  # noqa: F401
    from .plotting import (
        plot_distance_slice,
        plot_surface,
    )
    HAS_PLOTTING = True
except ImportError:
    HAS_PLOTTING = False

__all__ = [
    # Geometry
    'Point',
    'Direction',
    # Surfaces
    'Surface',
    'InvalidSurfaceError',
    'Sphere',
    'XPlane',
    'YPlane',
    'ZPlane',
    'Plane',
    'CylinderX',
    'CylinderY',
    'CylinderZ',
    'ConeX',
    'ConeY',
    'ConeZ',
    'Quadric',
    'TorusX',
    'SURFACE_TYPES',
    # Evaluation
    'evaluate',
    'evaluate_many',
    # I/O
    'SurfaceCardError',
    'parse_surface_card',
    'format_surface_card',
    'read_surfaces',
    'read_surfaces_string',
    'write_surfaces',
    # Slicing
    'distance_grid_x',
    'distance_grid_y',
    'distance_grid_z',
    'grid_stats',
    # Logging
    'LOG_NONE',
    'LOG_ERROR',
    'LOG_WARN',
    'LOG_INFO',
    'LOG_DEBUG',
    'LOG_TRACE',
    'set_log_level',
    'get_log_level',
    'enable_logging',
    'disable_logging',
    'HAS_PLOTTING',
]

if HAS_PLOTTING:
    __all__ += ['plot_distance_slice', 'plot_surface']
