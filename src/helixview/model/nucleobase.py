"""
Nucleobase Builder
==================
Builds the heavy-atom skeleton of one nucleobase in the helix frame.

Each base has a hand-specified planar layout (offsets in a local frame where
+x points from the sugar attachment towards the partner strand). The layout
is scaled, pointed at the helix axis from the anchor radius and rotated
around the axis by the helix angle.

Classes:
    RingAtom: One named atom of a layout.
    NucleobaseLayout: A complete planar layout.
    NucleobaseUnit: The atoms/bonds produced for one strand at one step.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Dict

from helixview.config import DEFAULT_GEOMETRY, HelixGeometry
from helixview.model.chemistry import ATOM_SIZES, BondKind, Element, element_color
from helixview.model.geometry_primitives import rotate_in_plane
from helixview.model.scene import Atom, Bond

logger = logging.getLogger(__name__)

C = Element.CARBON
N = Element.NITROGEN
O = Element.OXYGEN
S = BondKind.SINGLE
D = BondKind.DOUBLE


@dataclass(frozen=True)
class RingAtom:
    name: str
    element: Element
    x: float
    z: float
    charge: float


@dataclass(frozen=True)
class NucleobaseLayout:
    symbol: str
    atoms: tuple[RingAtom, ...]
    bonds: tuple[tuple[str, str, BondKind], ...]
    connector: str
    # Donor/acceptor atoms eligible for hydrogen bonds
    hbond_sites: tuple[str, ...]

    def ring_atom(self, name: str) -> RingAtom:
        for ring_atom in self.atoms:
            if ring_atom.name == name:
                return ring_atom
        raise KeyError(f"Atom '{name}' not in {self.symbol} layout.")


@dataclass(frozen=True)
class NucleobaseUnit:
    atoms: tuple[Atom, ...]
    bonds: tuple[Bond, ...]
    connector: Atom
    hbond_sites: tuple[Atom, ...]


# ------------------------------------------------------------------------------
# Layouts
# ------------------------------------------------------------------------------

ADENINE = NucleobaseLayout(
    symbol="A",
    atoms=(
        RingAtom("N9", N, -1.5, 0.0, -0.2),
        RingAtom("C8", C, -1.0, 1.2, 0.1),
        RingAtom("N7", N, 0.2, 1.2, -0.5),
        RingAtom("C5", C, 0.5, 0.0, 0.1),
        RingAtom("C6", C, 1.8, 0.0, 0.4),
        RingAtom("N6", N, 2.5, 1.2, -0.8),  # amino
        RingAtom("N1", N, 2.5, -1.2, -0.6),
        RingAtom("C2", C, 1.5, -2.2, 0.2),
        RingAtom("N3", N, 0.2, -2.2, -0.6),
        RingAtom("C4", C, -0.5, -1.0, 0.1),
    ),
    bonds=(
        ("N9", "C8", S), ("C8", "N7", S), ("N7", "C5", S), ("C5", "C6", S),
        ("C6", "N1", S), ("N1", "C2", S), ("C2", "N3", S), ("N3", "C4", S),
        ("C4", "C5", S), ("C4", "N9", S), ("C6", "N6", S),
    ),
    connector="N9",
    hbond_sites=("N1", "N6"),
)

GUANINE = NucleobaseLayout(
    symbol="G",
    atoms=(
        RingAtom("N9", N, -1.5, 0.0, -0.2),
        RingAtom("C8", C, -1.0, 1.2, 0.1),
        RingAtom("N7", N, 0.2, 1.2, -0.5),
        RingAtom("C5", C, 0.5, 0.0, 0.1),
        RingAtom("C6", C, 1.8, 0.0, 0.5),
        RingAtom("O6", O, 2.5, 1.2, -0.6),  # keto
        RingAtom("N1", N, 2.5, -1.2, -0.6),
        RingAtom("C2", C, 1.5, -2.2, 0.4),
        RingAtom("N2", N, 1.8, -3.2, -0.8),  # amino
        RingAtom("N3", N, 0.2, -2.2, -0.6),
        RingAtom("C4", C, -0.5, -1.0, 0.1),
    ),
    bonds=(
        ("N9", "C8", S), ("C8", "N7", S), ("N7", "C5", S), ("C5", "C6", S),
        ("C6", "O6", D), ("C6", "N1", S), ("N1", "C2", S), ("C2", "N2", S),
        ("C2", "N3", S), ("N3", "C4", S), ("C4", "C5", S), ("C4", "N9", S),
    ),
    connector="N9",
    hbond_sites=("O6", "N1", "N2"),
)

CYTOSINE = NucleobaseLayout(
    symbol="C",
    atoms=(
        RingAtom("N1", N, -1.5, 0.0, -0.2),
        RingAtom("C2", C, -0.5, 1.2, 0.5),
        RingAtom("O2", O, -0.8, 2.4, -0.6),  # keto
        RingAtom("N3", N, 0.8, 1.2, -0.6),
        RingAtom("C4", C, 1.5, 0.0, 0.4),
        RingAtom("N4", N, 2.8, 0.0, -0.8),  # amino
        RingAtom("C5", C, 0.8, -1.2, 0.1),
        RingAtom("C6", C, -0.5, -1.2, 0.1),
    ),
    bonds=(
        ("N1", "C2", S), ("C2", "O2", D), ("C2", "N3", S), ("N3", "C4", S),
        ("C4", "N4", S), ("C4", "C5", S), ("C5", "C6", S), ("C6", "N1", S),
    ),
    connector="N1",
    hbond_sites=("N4", "N3", "O2"),
)

THYMINE = NucleobaseLayout(
    symbol="T",
    atoms=(
        RingAtom("N1", N, -1.5, 0.0, -0.2),
        RingAtom("C2", C, -0.5, 1.2, 0.5),
        RingAtom("O2", O, -0.8, 2.4, -0.6),  # keto
        RingAtom("N3", N, 0.8, 1.2, -0.6),
        RingAtom("C4", C, 1.5, 0.0, 0.5),
        RingAtom("O4", O, 2.5, 0.5, -0.6),  # keto
        RingAtom("C5", C, 0.8, -1.2, 0.1),
        RingAtom("C7", C, 1.5, -2.4, 0.0),  # methyl
        RingAtom("C6", C, -0.5, -1.2, 0.1),
    ),
    bonds=(
        ("N1", "C2", S), ("C2", "O2", D), ("C2", "N3", S), ("N3", "C4", S),
        ("C4", "O4", D), ("C4", "C5", S), ("C5", "C7", S), ("C5", "C6", S),
        ("C6", "N1", S),
    ),
    connector="N1",
    hbond_sites=("N3", "O4"),
)

LAYOUTS: Dict[str, NucleobaseLayout] = {
    layout.symbol: layout for layout in (ADENINE, GUANINE, CYTOSINE, THYMINE)
}


def layout_for(symbol: str) -> NucleobaseLayout:
    """Layout for a base symbol. Anything unrecognized uses the Thymine layout."""
    layout = LAYOUTS.get(symbol.upper())
    if layout is None:
        logger.debug(f"Unknown base symbol '{symbol}', using the Thymine layout.")
        return THYMINE
    return layout


# ------------------------------------------------------------------------------
# Builder
# ------------------------------------------------------------------------------

def build_nucleobase(
    symbol: str,
    anchor: tuple[float, float],
    angle_deg: float,
    id_prefix: str,
    is_mutation: bool = False,
    *,
    strand: int = 0,
    step: int = -1,
    geometry: HelixGeometry = DEFAULT_GEOMETRY,
) -> NucleobaseUnit:
    """
    Build the atoms and ring bonds of one nucleobase.

    Args:
        symbol: Base symbol (A/T/C/G). Other values fall back to Thymine.
        anchor: (radial distance from the helix axis, height along the axis)
            of the connector atom.
        angle_deg: Helix angle of the strand at this step.
        id_prefix: Prefix making atom and bond ids unique within the scene.
        is_mutation: Draw the whole base in the mutation color and flag the
            connector as the mutation site.
        strand: Strand number stored on the atoms.
        step: Helix step stored on the atoms.
        geometry: Scale of the local layout.

    Returns:
        NucleobaseUnit with the connector (attaches to the sugar) and the
        hydrogen-bond sites.
    """
    layout = layout_for(symbol)
    anchor_radius, height = anchor
    origin = layout.ring_atom(layout.connector)
    scale = geometry.base_scale

    atoms: dict[str, Atom] = {}
    for ring_atom in layout.atoms:
        # Local +x points towards the helix axis
        radial = anchor_radius - (ring_atom.x - origin.x) * scale
        tangential = ring_atom.z * scale
        x, z = rotate_in_plane(radial, tangential, angle_deg)

        atoms[ring_atom.name] = Atom(
            x=x, y=height, z=z,
            element=ring_atom.element,
            id=f"{id_prefix}-{ring_atom.name}",
            size=ATOM_SIZES[ring_atom.element],
            color=element_color(ring_atom.element, is_mutation),
            charge=ring_atom.charge,
            is_mutation_site=is_mutation and ring_atom.name == layout.connector,
            highlighted=is_mutation,
            name=ring_atom.name,
            strand=strand,
            step=step,
            residue=symbol,
        )

    bonds = tuple(
        Bond(start=atoms[a], end=atoms[b], kind=kind, id=f"{id_prefix}-b-{i}")
        for i, (a, b, kind) in enumerate(layout.bonds)
    )

    return NucleobaseUnit(
        atoms=tuple(atoms.values()),
        bonds=bonds,
        connector=atoms[layout.connector],
        hbond_sites=tuple(atoms[name] for name in layout.hbond_sites),
    )
