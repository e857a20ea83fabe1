"""Tests for helixview.controller.generation"""
from helixview.controller.generation import STAGE_ORDER, GenerationSequencer, GenerationStage


def run_stages(sequencer, request):
    stages = [request.stage]
    while (stage := sequencer.advance(request)) is not None:
        stages.append(stage)
    return stages


def test_stages_in_order(snv):
    sequencer = GenerationSequencer()
    request = sequencer.submit(100, snv, 4)
    assert sequencer.pending
    assert run_stages(sequencer, request) == list(STAGE_ORDER)


def test_progress_values(snv):
    sequencer = GenerationSequencer()
    request = sequencer.submit(100, snv, 4)
    progress = [request.progress]
    while sequencer.advance(request) is not None:
        progress.append(request.progress)
    assert progress == [0, 33, 66]


def test_commit_installs_scene(snv):
    sequencer = GenerationSequencer()
    request = sequencer.submit(100, snv, 4)
    run_stages(sequencer, request)
    scene = sequencer.compute(request)
    assert sequencer.commit(request, scene)
    assert sequencer.scene is scene
    assert not sequencer.pending
    assert scene.mutation_step == 2


def test_superseded_request_cannot_commit(snv):
    sequencer = GenerationSequencer()
    first = sequencer.submit(100, snv, 4)
    second = sequencer.submit(200, snv, 4)

    assert not sequencer.is_current(first)
    assert sequencer.advance(first) is None
    assert first.stage is GenerationStage.LOCATE

    stale = sequencer.compute(first)
    assert not sequencer.commit(first, stale)
    assert sequencer.scene.is_empty

    run_stages(sequencer, second)
    assert sequencer.commit(second, sequencer.compute(second))
    assert sequencer.scene.position == 200


def test_cancel_keeps_previous_scene(snv):
    sequencer = GenerationSequencer()
    wild_type = sequencer.generate_now(100, None, 4)
    request = sequencer.submit(300, snv, 4)
    sequencer.cancel()
    assert not sequencer.pending
    assert sequencer.scene is wild_type
    assert not sequencer.commit(request, sequencer.compute(request))


def test_generate_now_supersedes_pending(snv):
    sequencer = GenerationSequencer()
    pending = sequencer.submit(100, snv, 4)
    scene = sequencer.generate_now(500, None, 6)
    assert sequencer.scene is scene
    assert scene.position == 500
    assert not sequencer.pending
    assert not sequencer.is_current(pending)
