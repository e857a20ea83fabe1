"""
Staged Generation Sequencer
===========================
Request bookkeeping for structure (re)generation.

A request walks through three stages (locate -> extract -> compute). Only the
most recent request may commit a scene; anything superseded is discarded.
The helix assembly itself is a pure function, the stages only exist to report
progress to the UI.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import itertools
import logging
from typing import Dict, Optional

from helixview.config import DEFAULT_GEOMETRY, HelixGeometry
from helixview.model.helix import generate
from helixview.model.scene import MolecularScene, Variant

logger = logging.getLogger(__name__)


class GenerationStage(StrEnum):
    LOCATE = "locate"
    EXTRACT = "extract"
    COMPUTE = "compute"


STAGE_ORDER: tuple[GenerationStage, ...] = (
    GenerationStage.LOCATE,
    GenerationStage.EXTRACT,
    GenerationStage.COMPUTE,
)

STAGE_MESSAGES: Dict[GenerationStage, str] = {
    GenerationStage.LOCATE: "Locating structure for the selected position...",
    GenerationStage.EXTRACT: "Extracting helix segment...",
    GenerationStage.COMPUTE: "Calculating partial charges and base pairing...",
}


@dataclass
class GenerationRequest:
    request_id: int
    position: int
    variant: Optional[Variant]
    window_steps: int
    stage: GenerationStage = GenerationStage.LOCATE

    @property
    def progress(self) -> int:
        """Percentage shown while this stage runs."""
        return int(100 * STAGE_ORDER.index(self.stage) / len(STAGE_ORDER))


class GenerationSequencer:
    def __init__(self, geometry: HelixGeometry = DEFAULT_GEOMETRY) -> None:
        self.geometry = geometry
        self.scene: MolecularScene = MolecularScene.empty()
        self.current: Optional[GenerationRequest] = None
        self._ids = itertools.count(1)

    @property
    def pending(self) -> bool:
        return self.current is not None

    def submit(self, position: int, variant: Optional[Variant], window_steps: int) -> GenerationRequest:
        """Start a new request. Any request still pending is superseded."""
        if self.current is not None:
            logger.info(f"Generation request {self.current.request_id} superseded.")
        request = GenerationRequest(
            request_id=next(self._ids),
            position=position,
            variant=variant,
            window_steps=window_steps,
        )
        self.current = request
        logger.debug(f"Generation request {request.request_id} submitted for position {position}.")
        return request

    def is_current(self, request: GenerationRequest) -> bool:
        return self.current is not None and self.current.request_id == request.request_id

    def advance(self, request: GenerationRequest) -> Optional[GenerationStage]:
        """
        Move `request` to its next stage.

        Returns:
            The new stage, or None if the request was superseded or is
            already in its final stage.
        """
        if not self.is_current(request):
            return None
        index = STAGE_ORDER.index(request.stage)
        if index + 1 >= len(STAGE_ORDER):
            return None
        request.stage = STAGE_ORDER[index + 1]
        return request.stage

    def compute(self, request: GenerationRequest) -> MolecularScene:
        return generate(
            request.position,
            request.variant,
            request.window_steps,
            geometry=self.geometry,
        )

    def commit(self, request: GenerationRequest, scene: MolecularScene) -> bool:
        """Install `scene` if `request` is still current. Returns False if discarded."""
        if not self.is_current(request):
            logger.debug(f"Discarding scene of superseded request {request.request_id}.")
            return False
        self.scene = scene
        self.current = None
        logger.info(
            f"Scene committed for position {request.position} "
            f"({len(scene.atoms)} atoms, {len(scene.bonds)} bonds)."
        )
        return True

    def cancel(self) -> None:
        """Abandon the pending request, keeping the current scene."""
        if self.current is not None:
            logger.info(f"Generation request {self.current.request_id} cancelled.")
        self.current = None

    def generate_now(
        self,
        position: int,
        variant: Optional[Variant],
        window_steps: int,
    ) -> MolecularScene:
        """Submit, compute and commit in one go, skipping the progress stages."""
        request = self.submit(position, variant, window_steps)
        request.stage = GenerationStage.COMPUTE
        scene = self.compute(request)
        self.commit(request, scene)
        return scene
