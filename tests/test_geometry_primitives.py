"""Tests for helixview.model.geometry_primitives"""
import math

import numpy as np
import pytest

from helixview.model.geometry_primitives import Point3D, deg2rad, rotate_in_plane


def test_deg2rad():
    assert deg2rad(180.0) == pytest.approx(math.pi)


@pytest.mark.parametrize(
    ("u", "v", "angle", "expected"),
    [
        (1.0, 0.0, 0.0, (1.0, 0.0)),
        (1.0, 0.0, 90.0, (0.0, 1.0)),
        (1.0, 0.0, 180.0, (-1.0, 0.0)),
        (0.0, 2.0, 90.0, (-2.0, 0.0)),
    ],
)
def test_rotate_in_plane(u, v, angle, expected):
    assert rotate_in_plane(u, v, angle) == pytest.approx(expected, abs=1e-12)


def test_planar_distance_ignores_helix_axis():
    a = Point3D(0.0, 0.0, 0.0)
    b = Point3D(3.0, 100.0, 4.0)
    assert a.planar_distance_to(b) == pytest.approx(5.0)
    # Height difference is ignored
    assert a.planar_distance_to(Point3D(0.0, -50.0, 0.0)) == 0.0


def test_to_array():
    np.testing.assert_allclose(Point3D(1.0, 2.0, 3.0).to_array(), [1.0, 2.0, 3.0])
