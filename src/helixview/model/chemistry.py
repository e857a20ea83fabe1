"""Element, bond and nucleobase lookup tables."""
from __future__ import annotations

from enum import StrEnum
from typing import Dict


class Element(StrEnum):
    CARBON = "C"
    NITROGEN = "N"
    OXYGEN = "O"
    HYDROGEN = "H"
    PHOSPHATE = "P"
    SUGAR = "Sugar"
    MUTATED = "Mutated"


class BondKind(StrEnum):
    SINGLE = "single"
    DOUBLE = "double"
    HYDROGEN = "hydrogen"
    BACKBONE = "backbone"


NUCLEOBASES: tuple[str, ...] = ("A", "T", "C", "G")

BASE_NAMES: Dict[str, str] = {
    "A": "Adenine",
    "G": "Guanine",
    "T": "Thymine",
    "C": "Cytosine",
}

# Legend colors
BASE_COLORS: Dict[str, str] = {
    "A": "#3b82f6",
    "T": "#fbbf24",
    "C": "#ef4444",
    "G": "#22c55e",
}

ELEMENT_COLORS: Dict[Element, str] = {
    Element.CARBON: "#cccccc",
    Element.NITROGEN: "#3b82f6",
    Element.OXYGEN: "#ff2222",
    Element.HYDROGEN: "#ffffff",
    Element.PHOSPHATE: "#a1a1aa",
    Element.SUGAR: "#71717a",
    Element.MUTATED: "#d946ef",
}

ATOM_SIZES: Dict[Element, float] = {
    Element.PHOSPHATE: 3.2,
    Element.SUGAR: 2.5,
    Element.CARBON: 2.0,
    Element.NITROGEN: 2.1,
    Element.OXYGEN: 1.9,
    Element.HYDROGEN: 0.8,
    Element.MUTATED: 2.1,
}

PHOSPHATE_CHARGE = -1.0

_COMPLEMENT: Dict[str, str] = {"A": "T", "T": "A", "G": "C", "C": "G"}


def complement(base: str) -> str:
    """Watson-Crick partner of `base`. Unknown symbols pair with G."""
    return _COMPLEMENT.get(base.upper(), "G")


def element_color(element: Element, is_mutation: bool = False) -> str:
    if is_mutation:
        return ELEMENT_COLORS[Element.MUTATED]
    return ELEMENT_COLORS[element]
