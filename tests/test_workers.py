"""Tests for helixview.controller.workers, driven by an offscreen Qt event loop."""
import pytest

pytest.importorskip("PySide6")

from PySide6.QtTest import QTest

from helixview.config import GenerationSettings
from helixview.controller.generation import GenerationSequencer
from helixview.controller.workers import GenerationWorker


@pytest.fixture
def worker(qapp):
    w = GenerationWorker(settings=GenerationSettings(window_steps=4, stage_delay_ms=0))
    w.log = {"progress": [], "pending": [], "scenes": [], "errors": []}
    w.progress_updated.connect(lambda value, message: w.log["progress"].append((value, message)))
    w.pending_changed.connect(lambda pending: w.log["pending"].append(pending))
    w.scene_ready.connect(lambda scene: w.log["scenes"].append(scene))
    w.error_occurred.connect(lambda message: w.log["errors"].append(message))
    yield w
    w.cancel()


def wait_until_idle(worker, timeout_ms=2000):
    waited = 0
    while worker.pending and waited < timeout_ms:
        QTest.qWait(10)
        waited += 10
    assert not worker.pending


def test_wild_type_is_immediate(worker):
    worker.request(100)
    assert not worker.pending
    assert worker.log["pending"] == []
    assert len(worker.log["scenes"]) == 1
    assert worker.log["scenes"][0].mutation_step is None
    assert worker.scene is worker.log["scenes"][0]


def test_variant_runs_all_stages(worker, snv):
    worker.request(100, snv)
    assert worker.pending
    wait_until_idle(worker)

    assert worker.log["pending"] == [True, False]
    assert [p for p, _ in worker.log["progress"]] == [0, 33, 66, 100]
    # Blank scene first, then the committed one
    blank, scene = worker.log["scenes"]
    assert blank.is_empty
    assert scene.mutation_step == 2
    assert scene.strand1[2] == "A"
    assert worker.log["errors"] == []


def test_new_request_supersedes_pending(worker, snv):
    worker.request(100, snv)
    worker.request(200, snv)
    wait_until_idle(worker)

    committed = [s for s in worker.log["scenes"] if not s.is_empty]
    assert [s.position for s in committed] == [200]
    assert worker.log["pending"] == [True, False]


def test_wild_type_request_supersedes_pending(worker, snv):
    worker.request(100, snv)
    worker.request(300)
    assert not worker.pending
    QTest.qWait(50)

    committed = [s for s in worker.log["scenes"] if not s.is_empty]
    assert [s.position for s in committed] == [300]
    assert worker.log["pending"] == [True, False]


def test_cancel_restores_previous_scene(worker, snv):
    worker.request(100)
    wild_type = worker.scene
    worker.request(400, snv)
    worker.cancel()
    QTest.qWait(50)

    assert not worker.pending
    assert worker.log["scenes"][-1] is wild_type
    assert worker.log["pending"] == [True, False]


class FailingSequencer(GenerationSequencer):
    def compute(self, request):
        if request.variant is not None:
            raise RuntimeError("pairing failed")
        return super().compute(request)


def test_failed_request_restores_previous_scene(qapp, snv):
    w = GenerationWorker(FailingSequencer(), GenerationSettings(window_steps=4, stage_delay_ms=0))
    scenes = []
    errors = []
    w.scene_ready.connect(lambda scene: scenes.append(scene))
    w.error_occurred.connect(lambda message: errors.append(message))

    w.request(100)
    wild_type = w.scene
    w.request(200, snv)
    assert scenes[-1].is_empty
    wait_until_idle(w)

    assert errors == ["pairing failed"]
    assert scenes[-1] is wild_type
    assert not w.pending
