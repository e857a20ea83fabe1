"""
Projection & Depth Sorting
==========================
Turns a MolecularScene into an ordered list of 2D draw primitives.

Pipeline:
    1. Rotate every atom around Y by `rotation_y`, then around X by `rotation_x`.
    2. Perspective-like scale: focal / (focal + depth) * zoom * base_scale.
    3. Screen coordinates around the viewport center.
    4. Bonds take their endpoints and the mean depth from their atoms.
    5. Sort farthest first (painter's algorithm).

Nothing here knows about Qt; any backend that draws circles and lines with
alpha blending can consume the output in order.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
import logging
from operator import attrgetter
from typing import Dict, Union, TYPE_CHECKING

import numpy as np

from helixview.config import DEFAULT_PROJECTION, ProjectionSettings
from helixview.model.chemistry import BondKind
from helixview.model.decorations import Decoration, decorate, depth_opacity
from helixview.model.geometry_primitives import Point3D, deg2rad
from helixview.model.scene import MolecularScene

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Keeps the perspective divisor positive for points behind the focal plane
MIN_PERSPECTIVE_DIVISOR = 1e-6


@dataclass
class ViewState:
    """Camera orientation (degrees) and zoom. Owned by the interaction controller."""
    rotation_x: float = 0.0
    rotation_y: float = 0.0
    zoom: float = 1.0


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float

    @property
    def is_sized(self) -> bool:
        return self.width > 0 and self.height > 0

    @property
    def center(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2


@dataclass(frozen=True)
class Projection:
    x: float
    y: float
    scale: float
    depth: float


class PrimitiveKind(StrEnum):
    ATOM = "atom"
    BOND = "bond"


@dataclass(frozen=True)
class BondStyle:
    color: str
    width: float
    # Dash pattern in pixels; empty for a solid line
    dash: tuple[float, ...] = ()


BOND_STYLES: Dict[BondKind, BondStyle] = {
    BondKind.SINGLE: BondStyle("#71717a", 1.5),
    BondKind.DOUBLE: BondStyle("#71717a", 2.5),
    BondKind.HYDROGEN: BondStyle("#52525b", 1.0, (3.0, 3.0)),
    BondKind.BACKBONE: BondStyle("#a1a1aa", 1.5),
}


@dataclass(frozen=True)
class AtomPrimitive:
    atom_id: str
    screen_x: float
    screen_y: float
    radius: float
    color: str
    opacity: float
    depth: float
    decorations: tuple[Decoration, ...] = ()
    kind: PrimitiveKind = field(default=PrimitiveKind.ATOM, init=False)


@dataclass(frozen=True)
class BondPrimitive:
    bond_id: str
    x1: float
    y1: float
    x2: float
    y2: float
    style: BondStyle
    opacity: float
    depth: float
    kind: PrimitiveKind = field(default=PrimitiveKind.BOND, init=False)


Primitive = Union[AtomPrimitive, BondPrimitive]


def project_points(
    points: npt.NDArray[np.float64],
    view: ViewState,
    viewport: Viewport,
    settings: ProjectionSettings = DEFAULT_PROJECTION,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Project an (N, 3) array of helix-frame points.

    Returns:
        screen: (N, 2) screen coordinates.
        scale: (N,) perspective scale factors.
        depth: (N,) view-space depth, larger is farther away.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    x, y, z = pts[:, 0], pts[:, 1], pts[:, 2]

    ry = deg2rad(view.rotation_y)
    x1 = x * np.cos(ry) - z * np.sin(ry)
    z1 = x * np.sin(ry) + z * np.cos(ry)

    rx = deg2rad(view.rotation_x)
    y1 = y * np.cos(rx) - z1 * np.sin(rx)
    depth = y * np.sin(rx) + z1 * np.cos(rx)

    divisor = np.maximum(settings.focal_length + depth, MIN_PERSPECTIVE_DIVISOR)
    scale = (settings.focal_length / divisor) * view.zoom * settings.base_scale

    cx, cy = viewport.center
    screen = np.column_stack((x1 * scale + cx, y1 * scale + cy))
    return screen, scale, depth


def project_point(
    point: Point3D,
    view: ViewState,
    viewport: Viewport,
    settings: ProjectionSettings = DEFAULT_PROJECTION,
) -> Projection:
    screen, scale, depth = project_points(point.to_array(), view, viewport, settings)
    return Projection(
        x=float(screen[0, 0]),
        y=float(screen[0, 1]),
        scale=float(scale[0]),
        depth=float(depth[0]),
    )


def render_scene(
    scene: MolecularScene,
    view: ViewState,
    viewport: Viewport,
    settings: ProjectionSettings = DEFAULT_PROJECTION,
    phase: float = 0.0,
) -> list[Primitive]:
    """
    Project the scene and return primitives ordered back to front.

    Args:
        scene: The atoms and bonds to draw.
        view: Current rotation and zoom.
        viewport: Size of the draw surface. An unsized viewport yields nothing.
        settings: Camera and depth cueing constants.
        phase: Pulse phase (in periods) for the mutation glow.
    """
    if not viewport.is_sized or scene.is_empty:
        return []

    coords = np.array([(a.x, a.y, a.z) for a in scene.atoms], dtype=np.float64)
    screen, scale, depth = project_points(coords, view, viewport, settings)

    primitives: list[Primitive] = []
    index: dict[str, int] = {}
    for i, atom in enumerate(scene.atoms):
        index[atom.id] = i
        radius = float(atom.size * scale[i])
        atom_depth = float(depth[i])
        primitives.append(AtomPrimitive(
            atom_id=atom.id,
            screen_x=float(screen[i, 0]),
            screen_y=float(screen[i, 1]),
            radius=radius,
            color=atom.color,
            opacity=depth_opacity(atom_depth, settings),
            depth=atom_depth,
            decorations=decorate(atom, radius, phase, settings),
        ))

    for bond in scene.bonds:
        i = index.get(bond.start.id)
        j = index.get(bond.end.id)
        if i is None or j is None:
            logger.warning(f"Bond '{bond.id}' references an atom outside the scene, skipped.")
            continue
        primitives.append(BondPrimitive(
            bond_id=bond.id,
            x1=float(screen[i, 0]),
            y1=float(screen[i, 1]),
            x2=float(screen[j, 0]),
            y2=float(screen[j, 1]),
            style=BOND_STYLES[bond.kind],
            opacity=settings.bond_opacity,
            depth=float((depth[i] + depth[j]) / 2),
        ))

    # sorted() stays stable with reverse=True
    return sorted(primitives, key=attrgetter("depth"), reverse=True)
