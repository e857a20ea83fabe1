"""
Interaction & Animation State
=============================
Owns the ViewState and arbitrates between pointer dragging and the idle
auto-rotation timer.

Why is this file needed?
------------------------
1. Testability: The rotation/zoom math runs without a live Qt event loop.
2. Exclusivity: Dragging and auto-rotation never update the ViewState at the
   same time. The Qt widget only forwards events and starts/stops its timer
   when `on_autorotate_changed` fires.

States:
    IDLE_AUTOROTATING --pointer_down--> DRAGGING
    DRAGGING --pointer_up / pointer_leave--> IDLE_AUTOROTATING
"""
from __future__ import annotations

from enum import Enum, auto
import logging
from typing import Callable, Optional

from helixview.config import DEFAULT_INTERACTION, InteractionSettings
from helixview.model.projection import ViewState

logger = logging.getLogger(__name__)


class InteractionMode(Enum):
    IDLE_AUTOROTATING = auto()
    DRAGGING = auto()


class InteractionController:
    def __init__(
        self,
        view: Optional[ViewState] = None,
        settings: InteractionSettings = DEFAULT_INTERACTION,
    ) -> None:
        self.settings = settings
        self.view = view if view is not None else ViewState(zoom=settings.zoom_initial)
        self.view.zoom = self._clamp_zoom(self.view.zoom)

        self.mode = InteractionMode.IDLE_AUTOROTATING
        self.generation_pending = False
        self._last_pointer: tuple[float, float] = (0.0, 0.0)

        # Called with the new value whenever `autorotate_active` flips
        self.on_autorotate_changed: Optional[Callable[[bool], None]] = None

    # ------------------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------------------

    @property
    def is_dragging(self) -> bool:
        return self.mode is InteractionMode.DRAGGING

    @property
    def autorotate_active(self) -> bool:
        return self.mode is InteractionMode.IDLE_AUTOROTATING and not self.generation_pending

    def set_generation_pending(self, pending: bool) -> None:
        """Pause auto-rotation while a new structure is being generated."""
        self._transition(lambda: setattr(self, "generation_pending", pending))

    # ------------------------------------------------------------------------------
    # Pointer handlers
    # ------------------------------------------------------------------------------

    def pointer_down(self, x: float, y: float) -> None:
        self._last_pointer = (x, y)
        self._transition(lambda: setattr(self, "mode", InteractionMode.DRAGGING))

    def pointer_move(self, x: float, y: float) -> bool:
        """Rotate by the pointer delta. Returns True if the view changed."""
        if not self.is_dragging:
            return False
        last_x, last_y = self._last_pointer
        dx = x - last_x
        dy = y - last_y
        # Horizontal drag spins around Y, vertical drag tilts around X
        self.view.rotation_y += dx * self.settings.drag_sensitivity
        self.view.rotation_x -= dy * self.settings.drag_sensitivity
        self._last_pointer = (x, y)
        return dx != 0 or dy != 0

    def pointer_up(self) -> None:
        self._transition(lambda: setattr(self, "mode", InteractionMode.IDLE_AUTOROTATING))

    def pointer_leave(self) -> None:
        self.pointer_up()

    # ------------------------------------------------------------------------------
    # Timer
    # ------------------------------------------------------------------------------

    def tick(self) -> bool:
        """One auto-rotate step. Ignored while dragging or generating."""
        if not self.autorotate_active:
            return False
        self.view.rotation_y += self.settings.autorotate_step_deg
        return True

    # ------------------------------------------------------------------------------
    # Zoom
    # ------------------------------------------------------------------------------

    def zoom_by(self, delta: float) -> float:
        """Add `delta` to the zoom, clamped. Works in any mode."""
        return self.set_zoom(self.view.zoom + delta)

    def zoom_in(self) -> float:
        return self.zoom_by(self.settings.zoom_button_step)

    def zoom_out(self) -> float:
        return self.zoom_by(-self.settings.zoom_button_step)

    def set_zoom(self, value: float) -> float:
        self.view.zoom = self._clamp_zoom(value)
        return self.view.zoom

    def reset_view(self) -> None:
        self.view.rotation_x = 0.0
        self.view.rotation_y = 0.0
        self.view.zoom = self._clamp_zoom(self.settings.zoom_initial)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _clamp_zoom(self, value: float) -> float:
        return min(self.settings.zoom_max, max(self.settings.zoom_min, value))

    def _transition(self, change: Callable[[], None]) -> None:
        was_active = self.autorotate_active
        change()
        now_active = self.autorotate_active
        if was_active != now_active:
            logger.debug(f"Auto-rotate {'resumed' if now_active else 'paused'} ({self.mode.name}).")
            if self.on_autorotate_changed is not None:
                self.on_autorotate_changed(now_active)
