"""
Rendering Decorations
=====================
Stateless visual effects layered on top of projected atoms: depth fog, the
pulsing glow of the mutated base and the partial-charge halo.

Every function here depends only on the atom, its projected radius/depth and
the pulse phase. None of them changes the draw order.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import math
from typing import Optional

from helixview.config import DEFAULT_PROJECTION, ProjectionSettings
from helixview.model.scene import Atom

NEGATIVE_CHARGE_COLOR = "#ff0000"
POSITIVE_CHARGE_COLOR = "#0000ff"


class DecorationKind(StrEnum):
    GLOW = "glow"
    HALO = "halo"


@dataclass(frozen=True)
class Decoration:
    """A translucent disc drawn behind an atom, centered on it."""
    kind: DecorationKind
    radius: float
    color: str
    opacity: float


def depth_opacity(depth: float, settings: ProjectionSettings = DEFAULT_PROJECTION) -> float:
    """Distance fog: farther atoms (larger depth) fade out, never below `min_opacity`."""
    opacity = 1.0 - (depth + settings.fog_offset) / settings.fog_range
    return min(1.0, max(settings.min_opacity, opacity))


def pulse(phase: float) -> float:
    """Smooth 0 -> 1 -> 0 wave over one period; `phase` is in periods."""
    return 0.5 - 0.5 * math.cos(2.0 * math.pi * phase)


def mutation_glow(
    atom: Atom,
    radius: float,
    phase: float = 0.0,
    settings: ProjectionSettings = DEFAULT_PROJECTION,
) -> Optional[Decoration]:
    if not atom.highlighted:
        return None
    p = pulse(phase)
    scale = settings.glow_min_scale + (settings.glow_max_scale - settings.glow_min_scale) * p
    opacity = settings.glow_min_opacity + (settings.glow_max_opacity - settings.glow_min_opacity) * p
    return Decoration(DecorationKind.GLOW, radius * scale, atom.color, opacity)


def charge_halo(
    atom: Atom,
    radius: float,
    settings: ProjectionSettings = DEFAULT_PROJECTION,
) -> Optional[Decoration]:
    # The glow already marks mutated atoms
    if atom.highlighted or not atom.charge:
        return None
    if abs(atom.charge) <= settings.charge_halo_threshold:
        return None
    color = NEGATIVE_CHARGE_COLOR if atom.charge < 0 else POSITIVE_CHARGE_COLOR
    return Decoration(DecorationKind.HALO, radius * settings.charge_halo_scale, color, settings.charge_halo_opacity)


def decorate(
    atom: Atom,
    radius: float,
    phase: float = 0.0,
    settings: ProjectionSettings = DEFAULT_PROJECTION,
) -> tuple[Decoration, ...]:
    """All decorations for one projected atom, back to front."""
    found = (mutation_glow(atom, radius, phase, settings), charge_halo(atom, radius, settings))
    return tuple(d for d in found if d is not None)
