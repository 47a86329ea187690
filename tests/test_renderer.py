"""Tests for FrameRenderer draw commands."""

import pytest
from flight_reveal import FrameRenderer, FrameState, LineDraw, MarkerDraw, Path, RevealClock

WIDTH = 100.0


def _renderer() -> FrameRenderer:
    return FrameRenderer(RevealClock(0.02), world_width=WIDTH, marker_scale=0.05)


def _started(n: int, start: float = 0.0) -> Path:
    path = Path(tuple((float(i), float(i)) for i in range(n)))
    path.start_time = start
    return path


def _lines(commands):
    return [c for c in commands if isinstance(c, LineDraw)]


def _markers(commands):
    return [c for c in commands if isinstance(c, MarkerDraw)]


class TestWorldWrap:
    """Two translated copies per revealing path."""

    @pytest.mark.parametrize("center_x, k", [(0.0, 0), (250.0, 2), (-10.0, -1), (-300.0, -3)])
    def test_two_copies_at_k_and_k_plus_one(self, center_x, k):
        path = _started(3)
        frame = FrameState(time=60.0, resolution=1.0, center=(center_x, 0.0))

        commands, _ = _renderer().render([path], frame)
        lines = _lines(commands)

        assert [line.world_offset for line in lines] == [k, k + 1]
        assert lines[0].coordinates == ((k * WIDTH, 0.0), (k * WIDTH + 1, 1.0))
        assert lines[1].coordinates == (((k + 1) * WIDTH, 0.0), ((k + 1) * WIDTH + 1, 1.0))

    def test_two_lines_per_path(self):
        paths = [_started(5) for _ in range(4)]
        frame = FrameState(time=100.0, resolution=1.0, center=(0.0, 0.0))
        commands, _ = _renderer().render(paths, frame)
        assert len(_lines(commands)) == 8


class TestLifecycle:
    """Pending, revealing, and finished paths."""

    def test_pending_path_not_drawn(self):
        path = _started(5, start=500.0)
        frame = FrameState(time=110.0, resolution=1.0, center=(0.0, 0.0))
        commands, finished = _renderer().render([path], frame)
        assert commands == []
        assert finished == []

    def test_finishing_frame_draws_full_path(self):
        path = _started(3)
        frame = FrameState(time=110.0, resolution=1.0, center=(0.0, 0.0))
        commands, finished = _renderer().render([path], frame)

        assert finished == [path]
        assert path.finished
        assert _lines(commands)[0].coordinates == path.coordinates

    def test_finished_path_never_drawn(self):
        path = _started(3)
        renderer = _renderer()
        renderer.render([path], FrameState(time=110.0, resolution=1.0, center=(0.0, 0.0)))

        commands, finished = renderer.render(
            [path], FrameState(time=200.0, resolution=1.0, center=(0.0, 0.0))
        )
        assert commands == []
        assert finished == []


class TestMarkers:
    """Transient start/end markers."""

    def test_markers_follow_visible_prefix(self):
        path = _started(10)
        frame = FrameState(time=120.0, resolution=2.0, center=(0.0, 0.0))
        commands, _ = _renderer().render([path], frame)
        start, end = _markers(commands)

        assert start.kind == "start"
        assert start.position == (0.0, 0.0)
        assert end.kind == "end"
        assert end.position == (2.0, 2.0)

    def test_marker_scale_inverse_to_resolution(self):
        path = _started(10)
        renderer = _renderer()
        near, _ = renderer.render([path], FrameState(time=10.0, resolution=0.5, center=(0.0, 0.0)))
        far, _ = renderer.render([path], FrameState(time=10.0, resolution=4.0, center=(0.0, 0.0)))
        assert _markers(near)[0].scale == pytest.approx(0.1)
        assert _markers(far)[0].scale == pytest.approx(0.0125)

    def test_markers_in_primary_world_copy(self):
        path = _started(4)
        frame = FrameState(time=10.0, resolution=1.0, center=(150.0, 0.0))
        commands, _ = _renderer().render([path], frame)
        assert [m.position for m in _markers(commands)] == [(100.0, 0.0), (100.0, 0.0)]
