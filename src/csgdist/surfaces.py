# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Surface catalog for CSG primitives.

Every surface answers one query, ``surface.distance(point, direction)``,
returning an unsigned proximity value or None when the query is undefined.

Most surfaces ignore the direction and return a static point-to-surface
measure. The three axis planes (XPlane, YPlane, ZPlane) instead return the
ray parameter ``t >= 0`` at which ``point + t * direction`` meets the plane.

Surfaces are immutable values: they compare equal when they are the same
kind with the same parameters.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional, Tuple
import math

from .geometry import Point, Direction


class InvalidSurfaceError(ValueError):
    """Surface parameters that describe no surface at all."""


class Surface(ABC):
    """Abstract base class for surfaces.

    Subclasses list their shape parameters in ``_fields`` and implement
    ``distance``. A subclass missing ``distance`` cannot be instantiated.

    Attributes:
        name: Optional human-readable name.
        surface_id: Optional surface number used for card export.
    """

    _fields: Tuple[str, ...] = ()

    def __init__(self, name: Optional[str] = None,
                 surface_id: Optional[int] = None):
        """
        Args:
            name: Optional name for the surface.
            surface_id: Optional explicit surface ID.
        """
        self.name = name
        self.surface_id = surface_id

    def _freeze(self) -> None:
        object.__setattr__(self, '_frozen', True)

    def __setattr__(self, key, value):
        if getattr(self, '_frozen', False):
            raise AttributeError(
                f"{self.__class__.__name__} is immutable (cannot set '{key}')")
        super().__setattr__(key, value)

    def __delattr__(self, key):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @abstractmethod
    def distance(self, point: Point,
                 direction: Optional[Direction] = None) -> Optional[float]:
        """Proximity of point to this surface.

        Returns a non-negative float, or None when undefined.
        """
        pass

    @abstractmethod
    def _get_type(self) -> str:
        """Get surface card mnemonic for export."""
        pass

    @abstractmethod
    def _get_params(self) -> Tuple:
        """Get surface card parameters for export."""
        pass

    @property
    def params(self) -> Tuple[float, ...]:
        """Shape parameters, in constructor order."""
        return tuple(getattr(self, f) for f in self._fields)

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.params == other.params

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.params))

    def __repr__(self) -> str:
        args = ", ".join(f"{f}={getattr(self, f)!r}" for f in self._fields)
        if self.name:
            return f"{self.__class__.__name__}({args}, name='{self.name}')"
        return f"{self.__class__.__name__}({args})"


def _ray_parameter(offset: float, origin: float,
                   component: float) -> Optional[float]:
    """Parameter t where a ray meets an axis plane, or None."""
    if component == 0.0:
        return None  # parallel
    t = (offset - origin) / component
    if t >= 0.0:
        return t
    return None  # plane is behind the ray origin


def _on_axis(*coords: float) -> bool:
    return all(c == 0.0 for c in coords)


class Sphere(Surface):
    """Sphere: (x-x0)² + (y-y0)² + (z-z0)² = R²

    distance = | |P - C| - R |
    """

    _fields = ('x0', 'y0', 'z0', 'radius')

    def __init__(self, x0: float, y0: float, z0: float, radius: float,
                 name: Optional[str] = None, **kwargs):
        """
        Args:
            x0, y0, z0: Center coordinates.
            radius: Sphere radius.
        """
        super().__init__(name=name, **kwargs)
        self.x0 = float(x0)
        self.y0 = float(y0)
        self.z0 = float(z0)
        self.radius = float(radius)
        self._freeze()

    def distance(self, point, direction=None):
        x, y, z = point
        dx, dy, dz = x - self.x0, y - self.y0, z - self.z0
        to_center = math.sqrt(dx*dx + dy*dy + dz*dz)
        return abs(to_center - self.radius)

    def _get_type(self) -> str:
        if _on_axis(self.x0, self.y0, self.z0):
            return 'SO'  # Sphere centered at origin
        return 'S'

    def _get_params(self) -> Tuple:
        if self._get_type() == 'SO':
            return (self.radius,)
        return (self.x0, self.y0, self.z0, self.radius)


class XPlane(Surface):
    """Plane perpendicular to X axis: x = x0

    distance is the ray parameter t = (x0 - px) / dx, None when the ray
    is parallel to the plane (dx == 0) or the plane is behind it (t < 0).
    """

    _fields = ('x0',)

    def __init__(self, x0: float, name: Optional[str] = None, **kwargs):
        """
        Args:
            x0: X coordinate of plane.
        """
        super().__init__(name=name, **kwargs)
        self.x0 = float(x0)
        self._freeze()

    def distance(self, point, direction=None):
        if direction is None:
            return None
        return _ray_parameter(self.x0, point[0], direction[0])

    def _get_type(self) -> str:
        return 'PX'

    def _get_params(self) -> Tuple:
        return (self.x0,)


class YPlane(Surface):
    """Plane perpendicular to Y axis: y = y0"""

    _fields = ('y0',)

    def __init__(self, y0: float, name: Optional[str] = None, **kwargs):
        """
        Args:
            y0: Y coordinate of plane.
        """
        super().__init__(name=name, **kwargs)
        self.y0 = float(y0)
        self._freeze()

    def distance(self, point, direction=None):
        if direction is None:
            return None
        return _ray_parameter(self.y0, point[1], direction[1])

    def _get_type(self) -> str:
        return 'PY'

    def _get_params(self) -> Tuple:
        return (self.y0,)


class ZPlane(Surface):
    """Plane perpendicular to Z axis: z = z0"""

    _fields = ('z0',)

    def __init__(self, z0: float, name: Optional[str] = None, **kwargs):
        """
        Args:
            z0: Z coordinate of plane.
        """
        super().__init__(name=name, **kwargs)
        self.z0 = float(z0)
        self._freeze()

    def distance(self, point, direction=None):
        if direction is None:
            return None
        return _ray_parameter(self.z0, point[2], direction[2])

    def _get_type(self) -> str:
        return 'PZ'

    def _get_params(self) -> Tuple:
        return (self.z0,)


class Plane(Surface):
    """General plane: ax + by + cz + d = 0

    distance = |ax + by + cz + d| / sqrt(a² + b² + c²)

    Scaling all four coefficients by the same nonzero factor describes the
    same plane and gives the same distance.
    """

    _fields = ('a', 'b', 'c', 'd')

    def __init__(self, a: float, b: float, c: float, d: float,
                 name: Optional[str] = None, **kwargs):
        """
        Args:
            a, b, c: Normal vector components.
            d: Constant term.

        Raises:
            InvalidSurfaceError: If the normal vector is zero.
        """
        super().__init__(name=name, **kwargs)
        a, b, c, d = float(a), float(b), float(c), float(d)
        if a == 0.0 and b == 0.0 and c == 0.0:
            raise InvalidSurfaceError("Plane normal vector cannot be zero")
        self.a = a
        self.b = b
        self.c = c
        self.d = d
        self._freeze()

    def distance(self, point, direction=None):
        x, y, z = point
        numerator = self.a * x + self.b * y + self.c * z + self.d
        norm = math.sqrt(self.a*self.a + self.b*self.b + self.c*self.c)
        return abs(numerator / norm)

    def _get_type(self) -> str:
        return 'P'

    def _get_params(self) -> Tuple:
        # Card form is ax + by + cz - D = 0
        return (self.a, self.b, self.c, -self.d)


class CylinderX(Surface):
    """Infinite cylinder along X axis: (y-y0)² + (z-z0)² = R²

    distance = | sqrt((y-y0)² + (z-z0)²) - R |
    """

    _fields = ('y0', 'z0', 'radius')

    def __init__(self, y0: float, z0: float, radius: float,
                 name: Optional[str] = None, **kwargs):
        """
        Args:
            y0, z0: Center in YZ plane.
            radius: Cylinder radius.
        """
        super().__init__(name=name, **kwargs)
        self.y0 = float(y0)
        self.z0 = float(z0)
        self.radius = float(radius)
        self._freeze()

    def distance(self, point, direction=None):
        x, y, z = point
        dy, dz = y - self.y0, z - self.z0
        return abs(math.sqrt(dy*dy + dz*dz) - self.radius)

    def _get_type(self) -> str:
        if _on_axis(self.y0, self.z0):
            return 'CX'
        return 'C/X'

    def _get_params(self) -> Tuple:
        if self._get_type() == 'CX':
            return (self.radius,)
        return (self.y0, self.z0, self.radius)


class CylinderY(Surface):
    """Infinite cylinder along Y axis: (x-x0)² + (z-z0)² = R²"""

    _fields = ('x0', 'z0', 'radius')

    def __init__(self, x0: float, z0: float, radius: float,
                 name: Optional[str] = None, **kwargs):
        """
        Args:
            x0, z0: Center in XZ plane.
            radius: Cylinder radius.
        """
        super().__init__(name=name, **kwargs)
        self.x0 = float(x0)
        self.z0 = float(z0)
        self.radius = float(radius)
        self._freeze()

    def distance(self, point, direction=None):
        x, y, z = point
        dx, dz = x - self.x0, z - self.z0
        return abs(math.sqrt(dx*dx + dz*dz) - self.radius)

    def _get_type(self) -> str:
        if _on_axis(self.x0, self.z0):
            return 'CY'
        return 'C/Y'

    def _get_params(self) -> Tuple:
        if self._get_type() == 'CY':
            return (self.radius,)
        return (self.x0, self.z0, self.radius)


class CylinderZ(Surface):
    """Infinite cylinder along Z axis: (x-x0)² + (y-y0)² = R²"""

    _fields = ('x0', 'y0', 'radius')

    def __init__(self, x0: float, y0: float, radius: float,
                 name: Optional[str] = None, **kwargs):
        """
        Args:
            x0, y0: Center in XY plane.
            radius: Cylinder radius.
        """
        super().__init__(name=name, **kwargs)
        self.x0 = float(x0)
        self.y0 = float(y0)
        self.radius = float(radius)
        self._freeze()

    def distance(self, point, direction=None):
        x, y, z = point
        dx, dy = x - self.x0, y - self.y0
        return abs(math.sqrt(dx*dx + dy*dy) - self.radius)

    def _get_type(self) -> str:
        if _on_axis(self.x0, self.y0):
            return 'CZ'
        return 'C/Z'

    def _get_params(self) -> Tuple:
        if self._get_type() == 'CZ':
            return (self.radius,)
        return (self.x0, self.y0, self.radius)


class _AxisCone(Surface):
    """Double cone with apex (x0, y0, z0) and axis along one coordinate.

    With r the distance from the axis and h the axial offset from the apex:

        distance = | |h| - r * tan(angle) |
    """

    _fields = ('x0', 'y0', 'z0', 'angle')
    _axis = 0

    def __init__(self, x0: float, y0: float, z0: float, angle: float,
                 name: Optional[str] = None, **kwargs):
        """
        Args:
            x0, y0, z0: Apex coordinates.
            angle: Half-angle in radians.
        """
        super().__init__(name=name, **kwargs)
        self.x0, self.y0, self.z0 = float(x0), float(y0), float(z0)
        self.angle = float(angle)
        self._freeze()

    def distance(self, point, direction=None):
        x, y, z = point
        offsets = [x - self.x0, y - self.y0, z - self.z0]
        h = offsets.pop(self._axis)
        du, dv = offsets
        r = math.sqrt(du*du + dv*dv)
        return abs(abs(h) - r * math.tan(self.angle))

    @property
    def t_sq(self) -> float:
        """tan²(half-angle), the card form of the opening."""
        return math.tan(self.angle) ** 2

    def _get_type(self) -> str:
        apex = [self.x0, self.y0, self.z0]
        apex.pop(self._axis)
        axis = 'XYZ'[self._axis]
        if _on_axis(*apex):
            return f'K{axis}'
        return f'K/{axis}'

    def _get_params(self) -> Tuple:
        # Cards hold tan², which reads back as an angle in [0, pi/2)
        if math.tan(self.angle) < 0.0:
            raise ValueError(
                f"Cannot write {self!r} as a card: tan(angle) is negative")
        if '/' in self._get_type():
            return (self.x0, self.y0, self.z0, self.t_sq)
        return ((self.x0, self.y0, self.z0)[self._axis], self.t_sq)


class ConeX(_AxisCone):
    """Cone along X axis: |x-x0| = sqrt((y-y0)² + (z-z0)²) * tan(angle)"""

    _axis = 0


class ConeY(_AxisCone):
    """Cone along Y axis: |y-y0| = sqrt((x-x0)² + (z-z0)²) * tan(angle)"""

    _axis = 1


class ConeZ(_AxisCone):
    """Cone along Z axis: |z-z0| = sqrt((x-x0)² + (y-y0)²) * tan(angle)"""

    _axis = 2


class Quadric(Surface):
    """General quadric surface (GQ).

    Ax² + By² + Cz² + Dxy + Eyz + Fzx + Gx + Hy + Jz + K = 0

    This is the most general second-degree surface and can represent
    any conic section: ellipsoid, hyperboloid, paraboloid, cone, cylinder, etc.

    Note:
        distance is the magnitude of the polynomial at the point. It is zero
        exactly on the surface, but elsewhere it is an algebraic level-set
        value, not a Euclidean distance. Treat it as an approximation.
    """

    _fields = ('A', 'B', 'C', 'D', 'E', 'F', 'G', 'H', 'J', 'K')

    def __init__(self, A: float, B: float, C: float,
                 D: float, E: float, F: float,
                 G: float, H: float, J: float, K: float,
                 name: Optional[str] = None, **kwargs):
        """
        Args:
            A, B, C: Coefficients of x², y², z²
            D, E, F: Coefficients of xy, yz, zx
            G, H, J: Coefficients of x, y, z
            K: Constant term
        """
        super().__init__(name=name, **kwargs)
        self.A, self.B, self.C = float(A), float(B), float(C)
        self.D, self.E, self.F = float(D), float(E), float(F)
        self.G, self.H, self.J = float(G), float(H), float(J)
        self.K = float(K)
        self._freeze()

    def distance(self, point, direction=None):
        x, y, z = point
        value = (self.A*x*x + self.B*y*y + self.C*z*z +
                 self.D*x*y + self.E*y*z + self.F*z*x +
                 self.G*x + self.H*y + self.J*z + self.K)
        return abs(value)

    def _get_type(self) -> str:
        return 'GQ'

    def _get_params(self) -> Tuple:
        return self.params


class TorusX(Surface):
    """Torus with revolution axis parallel to X, centered at (x0, y0, z0).

    ``a`` is the major radius (axis to tube center), ``c`` the tube radius.
    ``b`` is the axial semi-axis of an elliptical tube; it is kept for card
    export but not used by ``distance``, which treats the tube as circular:

        ring = | sqrt(dy² + dz²) - a |
        distance = | sqrt(ring² + dx²) - c |

    For elliptical tubes (b != c) the result is an approximation.
    """

    _fields = ('x0', 'y0', 'z0', 'a', 'b', 'c')

    def __init__(self, x0: float, y0: float, z0: float,
                 a: float, b: float, c: float,
                 name: Optional[str] = None, **kwargs):
        """
        Args:
            x0, y0, z0: Center of torus.
            a: Major radius.
            b: Axial semi-axis of the tube (unused by distance).
            c: Tube radius.
        """
        super().__init__(name=name, **kwargs)
        self.x0, self.y0, self.z0 = float(x0), float(y0), float(z0)
        self.a = float(a)
        self.b = float(b)
        self.c = float(c)
        self._freeze()

    def distance(self, point, direction=None):
        x, y, z = point
        dx, dy, dz = x - self.x0, y - self.y0, z - self.z0
        ring = abs(math.sqrt(dy*dy + dz*dz) - self.a)
        return abs(math.sqrt(ring*ring + dx*dx) - self.c)

    def _get_type(self) -> str:
        return 'TX'

    def _get_params(self) -> Tuple:
        return self.params


SURFACE_TYPES = (
    Sphere,
    XPlane, YPlane, ZPlane,
    Plane,
    CylinderX, CylinderY, CylinderZ,
    ConeX, ConeY, ConeZ,
    Quadric,
    TorusX,
)
