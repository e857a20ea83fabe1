"""Tests for helixview.controller.interaction"""
import pytest

from helixview.config import InteractionSettings
from helixview.controller.interaction import InteractionController, InteractionMode
from helixview.model.projection import ViewState


@pytest.fixture
def controller():
    ctrl = InteractionController()
    ctrl.events = []
    ctrl.on_autorotate_changed = ctrl.events.append
    return ctrl


def test_starts_idle_and_autorotating(controller):
    assert controller.mode is InteractionMode.IDLE_AUTOROTATING
    assert controller.autorotate_active
    assert controller.view.zoom == 1.0


def test_tick_rotates_around_y(controller):
    assert controller.tick()
    assert controller.tick()
    assert controller.view.rotation_y == pytest.approx(0.4)
    assert controller.view.rotation_x == 0.0


def test_drag_updates_rotation(controller):
    controller.pointer_down(100, 100)
    assert controller.is_dragging
    assert controller.pointer_move(110, 96)
    assert controller.view.rotation_y == pytest.approx(5.0)
    assert controller.view.rotation_x == pytest.approx(2.0)

    # Deltas are relative to the last pointer position
    controller.pointer_move(110, 96)
    assert controller.view.rotation_y == pytest.approx(5.0)


def test_no_tick_while_dragging(controller):
    controller.pointer_down(0, 0)
    assert not controller.tick()
    assert controller.view.rotation_y == 0.0


def test_move_without_press_is_ignored(controller):
    assert not controller.pointer_move(50, 50)
    assert controller.view.rotation_y == 0.0


@pytest.mark.parametrize("release", ["pointer_up", "pointer_leave"])
def test_release_resumes_autorotate(controller, release):
    controller.pointer_down(0, 0)
    getattr(controller, release)()
    assert controller.mode is InteractionMode.IDLE_AUTOROTATING
    assert controller.tick()
    assert controller.events == [False, True]


def test_generation_pending_pauses_autorotate(controller):
    controller.set_generation_pending(True)
    assert not controller.autorotate_active
    assert not controller.tick()

    # Release during generation keeps auto-rotate paused
    controller.pointer_down(0, 0)
    controller.pointer_up()
    assert controller.events == [False]

    controller.set_generation_pending(False)
    assert controller.events == [False, True]
    assert controller.tick()


def test_repeated_pending_does_not_fire_callback(controller):
    controller.set_generation_pending(False)
    assert controller.events == []


@pytest.mark.parametrize(("start", "delta", "expected"), [(1.0, 10.0, 5.0), (1.0, -10.0, 0.5), (4.9, 0.2, 5.0)])
def test_zoom_clamped(controller, start, delta, expected):
    controller.set_zoom(start)
    assert controller.zoom_by(delta) == pytest.approx(expected)
    # Clamping is idempotent
    assert controller.zoom_by(0.0) == pytest.approx(expected)


def test_zoom_buttons(controller):
    assert controller.zoom_in() == pytest.approx(1.2)
    assert controller.zoom_out() == pytest.approx(1.0)


def test_zoom_works_while_dragging(controller):
    controller.pointer_down(0, 0)
    controller.zoom_in()
    assert controller.is_dragging
    assert controller.view.zoom == pytest.approx(1.2)


def test_reset_view(controller):
    controller.pointer_down(0, 0)
    controller.pointer_move(40, 40)
    controller.zoom_in()
    controller.reset_view()
    assert (controller.view.rotation_x, controller.view.rotation_y, controller.view.zoom) == (0.0, 0.0, 1.0)


def test_shared_view_state():
    view = ViewState(zoom=9.0)
    ctrl = InteractionController(view)
    assert ctrl.view is view
    assert view.zoom == 5.0


@pytest.mark.parametrize(("zoom_min", "zoom_max"), [(2.0, 1.0), (0.0, 1.0), (-1.0, 3.0)])
def test_invalid_zoom_range(zoom_min, zoom_max):
    with pytest.raises(ValueError):
        InteractionSettings(zoom_min=zoom_min, zoom_max=zoom_max)


@pytest.mark.parametrize("pixels", [0.0, -10.0])
def test_invalid_wheel_pixels_per_notch(pixels):
    with pytest.raises(ValueError):
        InteractionSettings(zoom_wheel_pixels_per_notch=pixels)
