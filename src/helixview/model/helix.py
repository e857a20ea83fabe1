"""
Helix Assembler
===============
Builds a synthetic double-helix segment centered on a genomic coordinate.

The background sequence is derived from the coordinate itself, so no
reference genome is needed and the same coordinate always shows the same base.

Functions:
    base_at_position: Deterministic background base for a coordinate.
    sequence_window: Background bases for a whole window.
    generate: The MolecularScene for (position, variant, window_steps).
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from helixview.config import DEFAULT_GEOMETRY, HelixGeometry
from helixview.model.chemistry import (
    ATOM_SIZES, ELEMENT_COLORS, NUCLEOBASES, PHOSPHATE_CHARGE, BondKind, Element, complement
)
from helixview.model.geometry_primitives import rotate_in_plane
from helixview.model.nucleobase import NucleobaseUnit, build_nucleobase
from helixview.model.scene import Atom, Bond, MolecularScene, Variant

logger = logging.getLogger(__name__)


def base_at_position(position: int) -> str:
    """Pseudo-random but stable base: fractional part of a sine transform, in 4 buckets."""
    x = abs(math.sin(position * 0.123) * 10000)
    frac = x - math.floor(x)
    return NUCLEOBASES[min(int(frac * 4), 3)]


def sequence_window(position: int, window_steps: int) -> list[str]:
    """Background bases for the steps of a window centered on `position`."""
    start_offset = -(window_steps // 2)
    return [base_at_position(position + start_offset + i) for i in range(max(window_steps, 0))]


def _backbone_atoms(
    strand: int,
    step: int,
    angle_deg: float,
    height: float,
    geometry: HelixGeometry,
) -> tuple[Atom, Atom]:
    """Phosphate and sugar of one strand at one step."""
    # Strand 2 mirrors the sugar offsets
    sign = 1.0 if strand == 1 else -1.0

    px, pz = rotate_in_plane(geometry.backbone_radius, 0.0, angle_deg)
    phosphate = Atom(
        x=px, y=height, z=pz,
        element=Element.PHOSPHATE,
        id=f"s{strand}-p-{step}",
        size=ATOM_SIZES[Element.PHOSPHATE],
        color=ELEMENT_COLORS[Element.PHOSPHATE],
        charge=PHOSPHATE_CHARGE,
        name="P",
        strand=strand,
        step=step,
    )

    sx, sz = rotate_in_plane(
        geometry.sugar_radius,
        sign * geometry.sugar_tangential_offset,
        angle_deg + sign * geometry.sugar_phase_deg,
    )
    sugar = Atom(
        x=sx, y=height, z=sz,
        element=Element.SUGAR,
        id=f"s{strand}-s-{step}",
        size=ATOM_SIZES[Element.SUGAR],
        color=ELEMENT_COLORS[Element.SUGAR],
        name="C1'",
        strand=strand,
        step=step,
    )
    return phosphate, sugar


def pair_hydrogen_bonds(
    unit1: NucleobaseUnit,
    unit2: NucleobaseUnit,
    step: int,
    cutoff: float,
) -> list[Bond]:
    """
    Proximity heuristic: every site of strand 1 against every site of strand 2,
    bonded when their planar distance is below `cutoff`. An atom may pair with
    several partners.
    """
    bonds: list[Bond] = []
    for h1 in unit1.hbond_sites:
        for h2 in unit2.hbond_sites:
            if h1.planar_distance_to(h2) < cutoff:
                bonds.append(Bond(start=h1, end=h2, kind=BondKind.HYDROGEN, id=f"h-{step}-{h1.id}-{h2.id}"))
    return bonds


def generate(
    position: int,
    variant: Optional[Variant] = None,
    window_steps: int = 18,
    *,
    geometry: HelixGeometry = DEFAULT_GEOMETRY,
) -> MolecularScene:
    """
    Assemble the helix segment for a window of `window_steps` base pairs.

    The step with offset 0 (index ``window_steps // 2``) is the variant site.
    A substitution replaces the strand-1 base with the alternate allele; an
    indel keeps the background base and no hydrogen bonds are generated at all.
    """
    if window_steps <= 0:
        logger.debug(f"Empty window requested at {position}.")
        return MolecularScene(position=position, variant=variant, window_steps=0)

    atoms: list[Atom] = []
    bonds: list[Bond] = []
    strand1: list[str] = []
    strand2: list[str] = []

    is_indel = variant is not None and variant.is_indel
    start_offset = -(window_steps // 2)
    mutation_step: Optional[int] = None
    previous_sugars: dict[int, Atom] = {}
    backgrounds = sequence_window(position, window_steps)

    for i in range(window_steps):
        offset = start_offset + i
        is_mutation_site = offset == 0 and variant is not None

        background = backgrounds[i]
        base1 = background
        if is_mutation_site:
            mutation_step = i
            if not is_indel:
                base1 = variant.alt.upper()
        # Strand 2 keeps pairing with the reference context
        base2 = complement(background)
        strand1.append(base1)
        strand2.append(base2)

        height = offset * geometry.rise
        angle1 = i * geometry.twist_deg
        angle2 = angle1 + geometry.strand_phase_deg

        units: dict[int, NucleobaseUnit] = {}
        for strand, angle, base, mutated in ((1, angle1, base1, is_mutation_site), (2, angle2, base2, False)):
            phosphate, sugar = _backbone_atoms(strand, i, angle, height, geometry)
            atoms.extend((phosphate, sugar))
            bonds.append(Bond(start=phosphate, end=sugar, kind=BondKind.SINGLE, id=f"s{strand}-ps-{i}"))

            if strand in previous_sugars:
                bonds.append(Bond(
                    start=previous_sugars[strand], end=sugar, kind=BondKind.BACKBONE, id=f"s{strand}-bb-{i}"
                ))
            previous_sugars[strand] = sugar

            unit = build_nucleobase(
                base,
                (geometry.base_anchor_radius, height),
                angle,
                f"s{strand}-b-{i}",
                mutated,
                strand=strand,
                step=i,
                geometry=geometry,
            )
            atoms.extend(unit.atoms)
            bonds.extend(unit.bonds)
            bonds.append(Bond(start=sugar, end=unit.connector, kind=BondKind.SINGLE, id=f"s{strand}-sb-{i}"))
            units[strand] = unit

        if is_indel:
            continue
        bonds.extend(pair_hydrogen_bonds(units[1], units[2], i, geometry.hbond_cutoff))

    logger.debug(
        f"Generated helix at {position}: {window_steps} steps, {len(atoms)} atoms, {len(bonds)} bonds."
    )
    return MolecularScene(
        atoms=tuple(atoms),
        bonds=tuple(bonds),
        position=position,
        variant=variant,
        window_steps=window_steps,
        strand1=tuple(strand1),
        strand2=tuple(strand2),
        mutation_step=mutation_step,
    )
