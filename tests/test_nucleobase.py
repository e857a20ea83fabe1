"""Tests for helixview.model.nucleobase"""
import pytest

from helixview.model.chemistry import ELEMENT_COLORS, BondKind, Element
from helixview.model.geometry_primitives import rotate_in_plane
from helixview.model.nucleobase import LAYOUTS, THYMINE, build_nucleobase, layout_for


@pytest.mark.parametrize(("symbol", "n_atoms"), [("A", 10), ("G", 11), ("C", 8), ("T", 9)])
def test_atom_counts(symbol, n_atoms):
    unit = build_nucleobase(symbol, (7.0, 0.0), 0.0, "x")
    assert len(unit.atoms) == n_atoms


@pytest.mark.parametrize(
    ("symbol", "sites"),
    [("A", ["N1", "N6"]), ("G", ["O6", "N1", "N2"]), ("C", ["N4", "N3", "O2"]), ("T", ["N3", "O4"])],
)
def test_hbond_sites(symbol, sites):
    unit = build_nucleobase(symbol, (7.0, 0.0), 0.0, "x")
    assert [a.name for a in unit.hbond_sites] == sites
    assert all(a in unit.atoms for a in unit.hbond_sites)


def test_unknown_symbol_uses_thymine_layout():
    unit = build_nucleobase("N", (7.0, 0.0), 0.0, "x")
    assert [a.name for a in unit.atoms] == [a.name for a in THYMINE.atoms]
    assert layout_for("?") is THYMINE
    assert layout_for("g") is LAYOUTS["G"]


def test_connector_sits_on_anchor():
    unit = build_nucleobase("G", (7.0, 12.0), 34.0, "x")
    x, z = rotate_in_plane(7.0, 0.0, 34.0)
    assert unit.connector.name == "N9"
    assert (unit.connector.x, unit.connector.z) == pytest.approx((x, z))
    assert all(a.y == 12.0 for a in unit.atoms)


def test_base_points_towards_axis():
    unit = build_nucleobase("C", (7.0, 0.0), 0.0, "x")
    n4 = next(a for a in unit.atoms if a.name == "N4")
    assert abs(n4.x) < unit.connector.x


def test_ids_are_prefixed_and_unique():
    unit = build_nucleobase("A", (7.0, 0.0), 0.0, "s1-b-3")
    ids = [a.id for a in unit.atoms] + [b.id for b in unit.bonds]
    assert len(ids) == len(set(ids))
    assert all(i.startswith("s1-b-3-") for i in ids)


def test_bonds_reference_unit_atoms():
    unit = build_nucleobase("G", (7.0, 0.0), 0.0, "x")
    for bond in unit.bonds:
        assert bond.start in unit.atoms
        assert bond.end in unit.atoms


def test_carbonyls_are_double_bonds():
    thymine = build_nucleobase("T", (7.0, 0.0), 0.0, "x")
    doubles = {(b.start.name, b.end.name) for b in thymine.bonds if b.kind == BondKind.DOUBLE}
    assert doubles == {("C2", "O2"), ("C4", "O4")}

    adenine = build_nucleobase("A", (7.0, 0.0), 0.0, "x")
    assert all(b.kind == BondKind.SINGLE for b in adenine.bonds)


def test_element_colors_and_charges():
    unit = build_nucleobase("A", (7.0, 0.0), 0.0, "x")
    n6 = next(a for a in unit.atoms if a.name == "N6")
    assert n6.color == ELEMENT_COLORS[Element.NITROGEN]
    assert n6.charge == -0.8
    assert not any(a.highlighted or a.is_mutation_site for a in unit.atoms)


def test_mutation_flags_connector_only():
    unit = build_nucleobase("A", (7.0, 0.0), 0.0, "x", True, strand=1, step=2)
    sites = [a for a in unit.atoms if a.is_mutation_site]
    assert sites == [unit.connector]
    assert all(a.highlighted for a in unit.atoms)
    assert all(a.color == ELEMENT_COLORS[Element.MUTATED] for a in unit.atoms)
    assert all(a.residue == "A" and a.strand == 1 and a.step == 2 for a in unit.atoms)
