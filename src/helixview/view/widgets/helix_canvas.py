"""
Helix Canvas (QPainter draw surface)
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QElapsedTimer, QEvent, QPointF, Qt, QTimer
from PySide6.QtGui import (
    QBrush, QColor, QFont, QMouseEvent, QPainter, QPaintEvent, QPen, QRadialGradient, QWheelEvent
)
from PySide6.QtWidgets import QWidget

from helixview.config import DEFAULT_PROJECTION, ProjectionSettings
from helixview.controller.interaction import InteractionController
from helixview.model.chemistry import BASE_COLORS, BASE_NAMES
from helixview.model.projection import (
    AtomPrimitive, BondPrimitive, Primitive, PrimitiveKind, Viewport, render_scene
)
from helixview.model.scene import MolecularScene

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = "#050505"
LEGEND_TEXT_COLOR = "#a1a1aa"


class HelixCanvas(QWidget):
    """
    Draws the projected helix back to front and forwards pointer, wheel and
    timer events to the InteractionController.
    """
    def __init__(
        self,
        interaction: Optional[InteractionController] = None,
        projection: ProjectionSettings = DEFAULT_PROJECTION,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setMinimumSize(320, 320)
        self.setCursor(Qt.CursorShape.SizeAllCursor)

        self.interaction = interaction if interaction is not None else InteractionController()
        self.interaction.on_autorotate_changed = self._on_autorotate_changed
        self.projection = projection
        self._scene = MolecularScene.empty()

        # Drives the glow pulse
        self._clock = QElapsedTimer()
        self._clock.start()

        self._autorotate_timer = QTimer(self)
        self._autorotate_timer.setInterval(self.interaction.settings.autorotate_interval_ms)
        self._autorotate_timer.timeout.connect(self._on_tick)
        if self.interaction.autorotate_active:
            self._autorotate_timer.start()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def scene(self) -> MolecularScene:
        return self._scene

    def set_scene(self, scene: MolecularScene) -> None:
        self._scene = scene
        self.update()

    def set_generation_pending(self, pending: bool) -> None:
        self.interaction.set_generation_pending(pending)
        self.update()

    def zoom_in(self) -> None:
        self.interaction.zoom_in()
        self.update()

    def zoom_out(self) -> None:
        self.interaction.zoom_out()
        self.update()

    def reset_view(self) -> None:
        self.interaction.reset_view()
        self.update()

    def current_primitives(self) -> list[Primitive]:
        phase = self._clock.elapsed() / 1000.0 / self.projection.glow_period_s
        return render_scene(
            self._scene,
            self.interaction.view,
            Viewport(self.width(), self.height()),
            self.projection,
            phase,
        )

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QColor(BACKGROUND_COLOR))

        for primitive in self.current_primitives():
            if primitive.kind is PrimitiveKind.BOND:
                self._draw_bond(painter, primitive)
            else:
                self._draw_atom(painter, primitive)

        self._draw_legend(painter)
        painter.end()

    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.interaction.pointer_down(pos.x(), pos.y())
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        pos = event.position()
        if self.interaction.pointer_move(pos.x(), pos.y()):
            self.update()
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self.interaction.pointer_up()
        super().mouseReleaseEvent(event)

    def leaveEvent(self, event: QEvent) -> None:
        self.interaction.pointer_leave()
        super().leaveEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        notches = event.angleDelta().y() / 120.0  # 1 per notch
        if not notches:
            notches = event.pixelDelta().y() / self.interaction.settings.zoom_wheel_pixels_per_notch
        if notches:
            self.interaction.zoom_by(notches * self.interaction.settings.zoom_wheel_step)
            self.update()
        event.accept()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _on_autorotate_changed(self, active: bool) -> None:
        if active:
            self._autorotate_timer.start()
        else:
            self._autorotate_timer.stop()

    def _on_tick(self) -> None:
        if self.interaction.tick():
            self.update()

    @staticmethod
    def _draw_bond(painter: QPainter, bond: BondPrimitive) -> None:
        style = bond.style
        pen = QPen(QColor(style.color))
        pen.setWidthF(style.width)
        if style.dash:
            # Qt dash patterns are in units of the pen width
            pen.setDashPattern([d / style.width for d in style.dash])
        painter.setOpacity(bond.opacity)
        painter.setPen(pen)
        painter.drawLine(QPointF(bond.x1, bond.y1), QPointF(bond.x2, bond.y2))

    @staticmethod
    def _draw_atom(painter: QPainter, atom: AtomPrimitive) -> None:
        center = QPointF(atom.screen_x, atom.screen_y)
        painter.setPen(Qt.PenStyle.NoPen)

        for decoration in atom.decorations:
            painter.setOpacity(decoration.opacity)
            painter.setBrush(QBrush(QColor(decoration.color)))
            painter.drawEllipse(center, decoration.radius, decoration.radius)

        # Highlight offset to the upper left
        r = atom.radius
        gradient = QRadialGradient(QPointF(center.x() - 0.4 * r, center.y() - 0.4 * r), 1.4 * r)
        highlight = QColor("white")
        highlight.setAlphaF(0.9)
        gradient.setColorAt(0.0, highlight)
        gradient.setColorAt(1.0, QColor(atom.color))

        painter.setOpacity(atom.opacity)
        painter.setBrush(QBrush(gradient))
        painter.drawEllipse(center, r, r)

    def _draw_legend(self, painter: QPainter) -> None:
        painter.setOpacity(1.0)
        painter.setFont(QFont("Arial", 9))
        x_offset = 16
        y_offset = self.height() - 16

        for symbol in ("C", "T", "G", "A"):
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor(BASE_COLORS[symbol]))
            painter.drawEllipse(QPointF(x_offset + 5, y_offset - 4), 5, 5)
            painter.setPen(QColor(LEGEND_TEXT_COLOR))
            painter.drawText(x_offset + 16, y_offset, BASE_NAMES[symbol])
            y_offset -= 18
