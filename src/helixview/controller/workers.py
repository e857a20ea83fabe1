"""
Generation Worker (Timer-Driven)
================================
This module contains the QObject that runs staged structure generation on
the Qt event loop.

Why is this file needed?
------------------------
1. Progress: Generation is reported as three ordered stages (locate, extract,
   compute) so the UI can show what is happening.
2. Signals: It updates the GUI (progress bar, status message, canvas) only
   through Qt Signals.
3. Supersession: A new request stops the pending stage timer; a stale request
   can never commit its scene.

Everything runs on the GUI thread. The assembly is cheap, so no QThread is
involved; the stage delays are plain single-shot timers.

Classes:
    GenerationWorker: Drives a GenerationSequencer from QTimer timeouts.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from helixview.config import DEFAULT_GENERATION, GenerationSettings
from helixview.controller.generation import (
    STAGE_MESSAGES, GenerationRequest, GenerationSequencer, GenerationStage
)
from helixview.model.scene import MolecularScene, Variant

logger = logging.getLogger(__name__)


class GenerationWorker(QObject):
    progress_updated = Signal(int, str)  # e.g. (33, "Extracting helix segment...")
    pending_changed = Signal(bool)
    scene_ready = Signal(object)  # MolecularScene
    error_occurred = Signal(str)

    def __init__(
        self,
        sequencer: Optional[GenerationSequencer] = None,
        settings: GenerationSettings = DEFAULT_GENERATION,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self.sequencer = sequencer if sequencer is not None else GenerationSequencer()
        self.settings = settings
        self._request: Optional[GenerationRequest] = None

        self._stage_timer = QTimer(self)
        self._stage_timer.setSingleShot(True)
        self._stage_timer.setInterval(self.settings.stage_delay_ms)
        self._stage_timer.timeout.connect(self._on_stage_elapsed)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def scene(self) -> MolecularScene:
        return self.sequencer.scene

    @property
    def pending(self) -> bool:
        return self.sequencer.pending

    def request(
        self,
        position: int,
        variant: Optional[Variant] = None,
        window_steps: Optional[int] = None,
    ) -> None:
        """
        Generate the helix for `position`.

        Without a variant the wild-type helix is shown immediately; with a
        variant the staged sequence runs and the scene is committed at the end.
        """
        steps = self.settings.window_steps if window_steps is None else window_steps
        self._stage_timer.stop()
        was_pending = self.sequencer.pending

        if variant is None:
            self._request = None
            try:
                scene = self.sequencer.generate_now(position, None, steps)
            except Exception as e:
                self._fail(e, was_pending)
                return
            if was_pending:
                self.pending_changed.emit(False)
            self.progress_updated.emit(100, "")
            self.scene_ready.emit(scene)
            return

        self._request = self.sequencer.submit(position, variant, steps)
        if not was_pending:
            self.pending_changed.emit(True)
        if self.settings.blank_while_pending:
            self.scene_ready.emit(MolecularScene.empty())
        self._report_stage(self._request)
        self._stage_timer.start()

    def cancel(self) -> None:
        """Abandon the pending request; the displayed scene stays."""
        if not self.sequencer.pending:
            return
        self._stage_timer.stop()
        self.sequencer.cancel()
        self._request = None
        self.pending_changed.emit(False)
        self.scene_ready.emit(self.sequencer.scene)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _report_stage(self, request: GenerationRequest) -> None:
        self.progress_updated.emit(request.progress, STAGE_MESSAGES[request.stage])

    def _on_stage_elapsed(self) -> None:
        request = self._request
        if request is None or not self.sequencer.is_current(request):
            return

        if request.stage is not GenerationStage.COMPUTE:
            stage = self.sequencer.advance(request)
            if stage is None:
                return
            self._report_stage(request)
            self._stage_timer.start()
            return

        try:
            scene = self.sequencer.compute(request)
        except Exception as e:
            self._fail(e, True)
            return

        if self.sequencer.commit(request, scene):
            self._request = None
            self.progress_updated.emit(100, "")
            self.pending_changed.emit(False)
            self.scene_ready.emit(scene)

    def _fail(self, error: Exception, was_pending: bool) -> None:
        logger.error(f"Error while generating the helix: {error}")
        self.sequencer.cancel()
        self._request = None
        if was_pending:
            self.pending_changed.emit(False)
        # Replace the blank pending canvas with the last committed scene
        self.scene_ready.emit(self.sequencer.scene)
        self.error_occurred.emit(str(error))
