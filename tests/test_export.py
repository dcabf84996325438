import pytest

from planrenderer.visualization import export as export_module
from planrenderer.visualization.display import DisplayTree
from planrenderer.visualization.export import (
    BASE_FAILURE_MESSAGE,
    INTERIOR_FAILURE_MESSAGE,
    ExportSession,
    ExportStatus,
    ExportUnavailableError,
)
from planrenderer.visualization.generator import render_plan
from planrenderer.visualization.raster import ImageEncodingError, MissingRenderSourceError, RasterImage


@pytest.fixture
def captured(monkeypatch):
    """Replace rasterization with a recorder of the captured sources."""
    sources = []

    def fake_rasterize(source, image_format="png", scale=2):
        sources.append(source)
        return RasterImage(data=b"image", image_format="jpeg", width=1, height=1)

    monkeypatch.setattr(export_module, "rasterize", fake_rasterize)
    return sources


class Collaborator:
    def __init__(self, result="rendered"):
        self.calls = []
        self.result = result

    def __call__(self, image):
        self.calls.append(image)
        return self.result


def test_display_tree_capture_requires_mounted_drawing():
    with pytest.raises(MissingRenderSourceError):
        DisplayTree().capture("concept-plan-svg")


def test_when_ready_fires_on_mount(south_door_plan):
    display = DisplayTree()
    seen = []
    display.when_ready("concept-plan-svg", seen.append)
    assert seen == []
    drawing = render_plan(south_door_plan)
    display.mount(drawing)
    assert seen == [drawing]
    display.mount(drawing)
    assert seen == [drawing]


def test_base_export_starts_when_drawing_is_mounted(captured, south_door_plan):
    display = DisplayTree()
    session = ExportSession(display)
    collaborator = Collaborator()
    session.start(collaborator)
    assert collaborator.calls == []

    display.mount(render_plan(south_door_plan))
    assert len(collaborator.calls) == 1
    assert session.base.status is ExportStatus.DONE
    assert session.base.result == "rendered"


def test_base_export_runs_only_once(captured, south_door_plan):
    display = DisplayTree()
    display.mount(render_plan(south_door_plan))
    session = ExportSession(display)
    collaborator = Collaborator()
    session.start(collaborator)
    session.start(collaborator)
    session.export_base(collaborator)
    assert len(collaborator.calls) == 1


def test_base_export_is_not_reentered(captured, south_door_plan):
    display = DisplayTree()
    display.mount(render_plan(south_door_plan))
    session = ExportSession(display)
    states = []

    def collaborator(image):
        states.append(session.export_base(collaborator).status)
        return "rendered"

    session.export_base(collaborator)
    assert states == [ExportStatus.RUNNING]
    assert len(captured) == 1


def test_interior_requires_base_export(captured, south_door_plan):
    display = DisplayTree()
    display.mount(render_plan(south_door_plan))
    session = ExportSession(display)
    with pytest.raises(ExportUnavailableError):
        session.export_interior(Collaborator())


def test_interior_captures_the_mounted_drawing(captured, sample_plan, south_door_plan):
    display = DisplayTree()
    display.mount(render_plan(south_door_plan))
    session = ExportSession(display)
    session.export_base(Collaborator())

    replacement = render_plan(sample_plan)
    display.mount(replacement)
    state = session.export_interior(Collaborator("interior"))
    assert state.status is ExportStatus.DONE
    assert state.result == "interior"
    assert captured[-1].svg == replacement.to_bytes()


def test_lost_source_fails_the_interior_export(captured, south_door_plan):
    display = DisplayTree()
    display.mount(render_plan(south_door_plan))
    session = ExportSession(display)
    session.export_base(Collaborator())

    display.unmount("concept-plan-svg")
    collaborator = Collaborator()
    state = session.export_interior(collaborator)
    assert state.status is ExportStatus.FAILED
    assert state.error == INTERIOR_FAILURE_MESSAGE
    assert "concept-plan-svg" in state.cause
    assert collaborator.calls == []


def test_collaborator_failure_then_retry(captured, south_door_plan):
    display = DisplayTree()
    display.mount(render_plan(south_door_plan))
    session = ExportSession(display)

    def broken(image):
        raise ConnectionError("service unavailable")

    with pytest.raises(ConnectionError):
        session.export_base(broken)
    assert session.base.status is ExportStatus.FAILED
    assert session.base.error == BASE_FAILURE_MESSAGE

    state = session.retry_base(Collaborator())
    assert state.status is ExportStatus.DONE
    assert state.error is None
    assert state.result == "rendered"


def test_retry_interior_after_failure(captured, south_door_plan):
    display = DisplayTree()
    drawing = render_plan(south_door_plan)
    display.mount(drawing)
    session = ExportSession(display)
    session.export_base(Collaborator())

    display.unmount(drawing.element_id)
    assert session.export_interior(Collaborator()).status is ExportStatus.FAILED

    display.mount(drawing)
    assert session.retry_interior(Collaborator()).status is ExportStatus.DONE


def test_failed_base_export_started_twice_runs_once(monkeypatch, south_door_plan):
    attempts = []

    def failing_rasterize(source, image_format="png", scale=2):
        attempts.append(source)
        raise ImageEncodingError("encoder crashed")

    monkeypatch.setattr(export_module, "rasterize", failing_rasterize)
    display = DisplayTree()
    session = ExportSession(display)
    collaborator = Collaborator()
    session.start(collaborator)
    session.start(collaborator)

    display.mount(render_plan(south_door_plan))
    assert len(attempts) == 1
    assert session.base.status is ExportStatus.FAILED
    assert session.base.error == BASE_FAILURE_MESSAGE
    assert collaborator.calls == []


def test_failing_ready_callback_does_not_drop_the_others(south_door_plan):
    display = DisplayTree()
    seen = []

    def broken(drawing):
        raise RuntimeError("callback failed")

    display.when_ready("concept-plan-svg", broken)
    display.when_ready("concept-plan-svg", seen.append)
    drawing = render_plan(south_door_plan)
    with pytest.raises(RuntimeError, match="callback failed"):
        display.mount(drawing)
    assert seen == [drawing]
    assert display.is_mounted("concept-plan-svg")
