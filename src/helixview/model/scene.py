"""
Molecular Scene (Data Model)
============================
Immutable containers for one generated helix segment.

Classes:
    Atom: A rendered sphere with chemistry metadata.
    Bond: A connection between two atoms of the same scene.
    Variant: The allele change supplied by the caller.
    MolecularScene: Atoms + bonds + the inputs they were generated from.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Optional

from helixview.model.chemistry import BondKind, Element
from helixview.model.geometry_primitives import Point3D


@dataclass(frozen=True)
class Atom(Point3D):
    element: Element
    id: str
    size: float
    color: str
    charge: Optional[float] = None
    is_mutation_site: bool = False
    # Drawn with the mutation color and glow
    highlighted: bool = False
    name: str = ""
    strand: int = 0
    step: int = -1
    residue: Optional[str] = None


@dataclass(frozen=True)
class Bond:
    start: Atom
    end: Atom
    kind: BondKind
    id: str


@dataclass(frozen=True)
class Variant:
    """
    A single allele change. The position is optional because the helix is
    always centered on the variant.
    """
    ref: str
    alt: str
    gene_label: str = ""
    position: Optional[int] = None
    chromosome: Optional[str] = None

    @property
    def is_indel(self) -> bool:
        return len(self.ref) != len(self.alt)

    @property
    def label(self) -> str:
        return f"{self.ref} > {self.alt}"


@dataclass(frozen=True)
class MolecularScene:
    atoms: tuple[Atom, ...] = ()
    bonds: tuple[Bond, ...] = ()

    position: Optional[int] = None
    variant: Optional[Variant] = None
    window_steps: int = 0

    # Displayed bases per step (strand 1 carries the substitution)
    strand1: tuple[str, ...] = field(default_factory=tuple)
    strand2: tuple[str, ...] = field(default_factory=tuple)
    mutation_step: Optional[int] = None

    @classmethod
    def empty(cls) -> MolecularScene:
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.atoms

    @cached_property
    def _atom_index(self) -> dict[str, Atom]:
        return {atom.id: atom for atom in self.atoms}

    def atom(self, atom_id: str) -> Atom:
        """Look up an atom by its id. Raises KeyError if missing."""
        return self._atom_index[atom_id]

    def bonds_of_kind(self, kind: BondKind) -> list[Bond]:
        return [b for b in self.bonds if b.kind == kind]

    def mutation_sites(self) -> list[Atom]:
        return [a for a in self.atoms if a.is_mutation_site]

    def hydrogen_bonds_at(self, step: int) -> list[Bond]:
        return [b for b in self.bonds if b.kind == BondKind.HYDROGEN and b.start.step == step]

    def context_sequence(self, flank: Optional[int] = None) -> str:
        """
        Strand-1 sequence with the mutation step in brackets, e.g. ``AGT[A]CA``.

        Args:
            flank: Number of bases to keep on each side of the mutation step.
                None keeps the whole window.
        """
        bases = list(self.strand1)
        if not bases:
            return ""
        if self.mutation_step is None:
            return "".join(bases)

        start = 0
        end = len(bases)
        if flank is not None:
            start = max(0, self.mutation_step - flank)
            end = min(len(bases), self.mutation_step + flank + 1)

        left = "".join(bases[start:self.mutation_step])
        right = "".join(bases[self.mutation_step + 1:end])
        return f"{left}[{bases[self.mutation_step]}]{right}"
