# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""Pytest fixtures for csgdist tests."""

import logging
import math
from pathlib import Path

import pytest


@pytest.fixture
def data_dir():
    """Directory holding surface card files."""
    return Path(__file__).parent / "data"


@pytest.fixture
def all_surfaces():
    """One instance of every surface type in the catalog."""
    import csgdist as cd

    return [
        cd.Sphere(1, 1, 1, radius=1.0),
        cd.XPlane(2.0),
        cd.YPlane(-1.0),
        cd.ZPlane(5.0),
        cd.Plane(1, 2, 3, 4),
        cd.CylinderX(0, 0, radius=1.0),
        cd.CylinderY(0.5, -0.5, radius=2.0),
        cd.CylinderZ(1, 1, radius=1.5),
        cd.ConeX(0, 0, 0, angle=math.pi / 4),
        cd.ConeY(1, 0, 1, angle=math.pi / 6),
        cd.ConeZ(0, 0, 1, angle=math.pi / 3),
        cd.Quadric(1, 1, 1, 0, 0, 0, 0, 0, 0, -3),
        cd.TorusX(0, 0, 0, a=3.0, b=0.5, c=0.5),
    ]


@pytest.fixture
def static_surfaces(all_surfaces):
    """Surfaces whose distance does not depend on the direction."""
    import csgdist as cd

    planes = (cd.XPlane, cd.YPlane, cd.ZPlane)
    return [s for s in all_surfaces if not isinstance(s, planes)]


@pytest.fixture
def bounds_xy():
    """Standard XY bounds for testing."""
    return (-5.0, 5.0, -5.0, 5.0)


@pytest.fixture
def restore_log_level():
    """Restore the csgdist logger level after a test."""
    logger = logging.getLogger("csgdist")
    level = logger.level
    yield
    logger.setLevel(level)
