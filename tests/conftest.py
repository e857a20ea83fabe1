"""
Shared fixtures for the helix model, renderer and controllers.

The end-to-end scene is the 4-step window around position 100 with a G>A
substitution; most structural tests run against it.
"""
import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from helixview.model.helix import generate
from helixview.model.projection import ViewState, Viewport
from helixview.model.scene import Variant


@pytest.fixture
def snv():
    return Variant(ref="G", alt="A", gene_label="TEST")


@pytest.fixture
def indel():
    return Variant(ref="G", alt="GAT", gene_label="TEST")


@pytest.fixture
def snv_scene(snv):
    return generate(100, snv, 4)


@pytest.fixture
def wild_type_scene():
    return generate(43_000_000, None, 18)


@pytest.fixture
def viewport():
    return Viewport(400, 500)


@pytest.fixture
def view():
    return ViewState()


@pytest.fixture(scope="session")
def qapp():
    """One offscreen QApplication shared by the worker, canvas and window tests."""
    widgets = pytest.importorskip("PySide6.QtWidgets")
    app = widgets.QApplication.instance()
    if app is None:
        app = widgets.QApplication([])
    yield app
