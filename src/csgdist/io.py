# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Reading and writing MCNP-style surface cards.

A surface card is ``<id> <MNEMONIC> <params...>``, for example::

    1 SO 5.0
    2 C/Z 1.0 2.0 0.5
    3 P 1 1 1 3

Supported mnemonics: SO S SX SY SZ, PX PY PZ P, CX CY CZ C/X C/Y C/Z,
KX KY KZ K/X K/Y K/Z, GQ, TX.
"""

from __future__ import annotations
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union
import logging
import math
import re

from .surfaces import (
    Surface, Plane, XPlane, YPlane, ZPlane, Sphere,
    CylinderX, CylinderY, CylinderZ, ConeX, ConeY, ConeZ,
    Quadric, TorusX,
)

logger = logging.getLogger(__name__)

_COMMENT_RE = re.compile(r'^\s{0,4}[cC](\s|$)')
_MAX_COLUMNS = 80


class SurfaceCardError(ValueError):
    """Malformed or unsupported surface card."""


def _cone_angle(t_sq: float) -> float:
    if t_sq < 0:
        raise ValueError(f"cone t^2 must be non-negative, got {t_sq}")
    return math.atan(math.sqrt(t_sq))


def _axis_cone(cls, axis: int):
    def build(params):
        apex = [0.0, 0.0, 0.0]
        apex[axis] = params[0]
        return cls(*apex, _cone_angle(params[1]))
    return build


def _offaxis_cone(cls):
    def build(params):
        x, y, z, t_sq = params[:4]
        return cls(x, y, z, _cone_angle(t_sq))
    return build


# mnemonic -> (allowed parameter counts, builder)
_BUILDERS: Dict[str, Tuple[Tuple[int, ...], Callable]] = {
    'SO': ((1,), lambda p: Sphere(0, 0, 0, p[0])),
    'S': ((4,), lambda p: Sphere(*p)),
    'SX': ((2,), lambda p: Sphere(p[0], 0, 0, p[1])),
    'SY': ((2,), lambda p: Sphere(0, p[0], 0, p[1])),
    'SZ': ((2,), lambda p: Sphere(0, 0, p[0], p[1])),
    'PX': ((1,), lambda p: XPlane(p[0])),
    'PY': ((1,), lambda p: YPlane(p[0])),
    'PZ': ((1,), lambda p: ZPlane(p[0])),
    # Card form ax + by + cz - D = 0
    'P': ((4,), lambda p: Plane(p[0], p[1], p[2], -p[3])),
    'CX': ((1,), lambda p: CylinderX(0, 0, p[0])),
    'CY': ((1,), lambda p: CylinderY(0, 0, p[0])),
    'CZ': ((1,), lambda p: CylinderZ(0, 0, p[0])),
    'C/X': ((3,), lambda p: CylinderX(*p)),
    'C/Y': ((3,), lambda p: CylinderY(*p)),
    'C/Z': ((3,), lambda p: CylinderZ(*p)),
    # Trailing sheet selector is accepted and ignored
    'KX': ((2, 3), _axis_cone(ConeX, 0)),
    'KY': ((2, 3), _axis_cone(ConeY, 1)),
    'KZ': ((2, 3), _axis_cone(ConeZ, 2)),
    'K/X': ((4, 5), _offaxis_cone(ConeX)),
    'K/Y': ((4, 5), _offaxis_cone(ConeY)),
    'K/Z': ((4, 5), _offaxis_cone(ConeZ)),
    'GQ': ((10,), lambda p: Quadric(*p)),
    'TX': ((6,), lambda p: TorusX(*p)),
}

SUPPORTED_MNEMONICS = tuple(_BUILDERS)


def _parse_number(token: str, card: str) -> float:
    try:
        return float(token)
    except ValueError:
        raise SurfaceCardError(f"Invalid number '{token}' in card: {card}") from None


def parse_surface_card(line: str) -> Surface:
    """Parse a single surface card.

    Args:
        line: Card text, e.g. ``"1 PX 2.0"``. A leading ``*`` or ``+`` on the
            surface number (boundary condition marker) is ignored.

    Returns:
        Surface with ``surface_id`` set from the card.

    Raises:
        SurfaceCardError: If the card is malformed or unsupported.
    """
    card = line.split('$', 1)[0].strip()
    tokens = card.split()
    if len(tokens) < 2:
        raise SurfaceCardError(f"Incomplete surface card: {line!r}")

    id_token = tokens[0].lstrip('*+')
    try:
        surface_id = int(id_token)
    except ValueError:
        raise SurfaceCardError(f"Invalid surface number '{tokens[0]}' in card: {card}") from None

    mnemonic = tokens[1].upper()
    if mnemonic.lstrip('-').isdigit():
        raise SurfaceCardError(f"Transformed surfaces are not supported: {card}")
    if mnemonic not in _BUILDERS:
        raise SurfaceCardError(f"Unsupported surface type '{tokens[1]}' in card: {card}")

    counts, build = _BUILDERS[mnemonic]
    params = [_parse_number(t, card) for t in tokens[2:]]
    if len(params) not in counts:
        expected = " or ".join(str(n) for n in counts)
        raise SurfaceCardError(
            f"{mnemonic} expects {expected} parameters, got {len(params)}: {card}")

    try:
        surface = build(params)
    except ValueError as e:
        raise SurfaceCardError(f"{e}: {card}") from e

    logger.debug("Parsed surface %d (%s)", surface_id, mnemonic)
    return type(surface)(*surface.params, name=surface.name, surface_id=surface_id)


def _format_number(value: float) -> str:
    return repr(float(value))


def _wrap_card(text: str) -> str:
    """Split a long card into continuation lines (5-space indent)."""
    if len(text) <= _MAX_COLUMNS:
        return text
    lines: List[str] = []
    current = ''
    for token in text.split():
        candidate = f"{current} {token}" if current else token
        if len(candidate) > _MAX_COLUMNS and current:
            lines.append(current)
            current = '     ' + token
        else:
            current = candidate
    lines.append(current)
    return '\n'.join(lines)


def format_surface_card(surface: Surface, surface_id: Optional[int] = None) -> str:
    """Format a surface as a card.

    Args:
        surface: Surface to format.
        surface_id: Surface number; defaults to ``surface.surface_id``.

    Raises:
        ValueError: If no surface number is available, or the surface has
            no card form (a cone whose tan(angle) is negative).
    """
    if surface_id is None:
        surface_id = surface.surface_id
    if surface_id is None:
        raise ValueError(f"No surface number for {surface!r}")

    fields = [str(surface_id), surface._get_type()]
    fields.extend(_format_number(p) for p in surface._get_params())
    return _wrap_card(' '.join(fields))


def _logical_cards(content: str) -> List[str]:
    """Join continuation lines and drop comments."""
    cards: List[str] = []
    continued = False
    for raw in content.splitlines():
        if not raw.strip() or _COMMENT_RE.match(raw):
            continue
        text = raw.split('$', 1)[0].rstrip()
        if not text.strip():
            continue
        if cards and (continued or raw.startswith('     ')):
            cards[-1] += ' ' + text.strip()
        else:
            cards.append(text.strip())
        continued = cards[-1].endswith('&')
        if continued:
            cards[-1] = cards[-1][:-1].rstrip()
    return cards


def read_surfaces_string(content: str) -> Dict[int, Surface]:
    """Read surface cards from a string.

    Blank lines and ``c`` comment lines are skipped, ``$`` comments are
    stripped, and ``&`` or 5-space-indented continuation lines are joined.

    Returns:
        Dict mapping surface number to Surface, in card order.

    Raises:
        SurfaceCardError: On a malformed card or duplicate surface number.
    """
    surfaces: Dict[int, Surface] = {}
    for card in _logical_cards(content):
        surface = parse_surface_card(card)
        if surface.surface_id in surfaces:
            raise SurfaceCardError(f"Duplicate surface number {surface.surface_id}: {card}")
        surfaces[surface.surface_id] = surface
    return surfaces


def read_surfaces(filename: Union[str, Path]) -> Dict[int, Surface]:
    """Read surface cards from a file.

    Args:
        filename: Path to a file holding a block of surface cards.

    Raises:
        IOError: If file cannot be read.
        SurfaceCardError: If file contains parse errors.
    """
    path = Path(filename)
    if not path.exists():
        raise IOError(f"File not found: {filename}")

    surfaces = read_surfaces_string(path.read_text())
    logger.info("Read %d surfaces from %s", len(surfaces), path)
    return surfaces


def write_surfaces(surfaces: Union[Mapping[int, Surface], Iterable[Surface]],
                   filename: Union[str, Path]) -> None:
    """Write surfaces as cards, one per surface.

    Surface numbers come from the mapping keys when a mapping is given,
    otherwise from ``surface.surface_id``; surfaces without one are numbered
    after the highest number in use.

    Args:
        surfaces: Mapping of number to Surface, or iterable of Surfaces.
        filename: Output file path.

    Raises:
        SurfaceCardError: If two surfaces share a surface number.
        ValueError: If a surface cannot be written as a card.
    """
    if isinstance(surfaces, Mapping):
        numbered = list(surfaces.items())
    else:
        items = list(surfaces)
        used = [s.surface_id for s in items if s.surface_id is not None]
        next_id = max(used, default=0) + 1
        seen = set()
        for sid in used:
            if sid in seen:
                raise SurfaceCardError(f"Duplicate surface number {sid}")
            seen.add(sid)
        numbered = []
        for s in items:
            if s.surface_id is None:
                numbered.append((next_id, s))
                next_id += 1
            else:
                numbered.append((s.surface_id, s))

    lines = ["c Surface cards"]
    lines.extend(format_surface_card(s, sid) for sid, s in numbered)

    path = Path(filename)
    path.write_text('\n'.join(lines) + '\n')
    logger.info("Wrote %d surfaces to %s", len(numbered), path)
