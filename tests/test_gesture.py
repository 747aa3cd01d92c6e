import pytest

from tally_counter.core import (
    CounterAction, CounterGeometry, DraggingDirection, DragTracker,
    GesturePhase, Offset, classify_direction, rubber_band
)


@pytest.fixture
def tracker():
    return DragTracker(CounterGeometry(300))


@pytest.mark.parametrize("dx, dy, expected", [
    (50, 5, DraggingDirection.RIGHT),
    (-50, 5, DraggingDirection.LEFT),
    (12, -30, DraggingDirection.RIGHT),
    (5, 50, DraggingDirection.DOWN),
    (10, -40, DraggingDirection.RIGHT),
    (-40, -50, DraggingDirection.LEFT),
    (0, -50, DraggingDirection.NONE),
    (0, 5, DraggingDirection.NONE),
    (0, 30, DraggingDirection.NONE),
])
def test_classify_direction(dx, dy, expected):
    assert classify_direction(dx, dy) is expected


def test_geometry_limits():
    geometry = CounterGeometry(300)
    assert geometry.horizontal_limit == pytest.approx(130.0)
    assert geometry.vertical_limit == pytest.approx(100.0)
    assert geometry.label_size == pytest.approx(100.0)


@pytest.mark.parametrize("width", [0, -10, float("inf"), float("nan")])
def test_geometry_rejects_unusable_width(width):
    with pytest.raises(ValueError):
        CounterGeometry(width)


def test_rubber_band_passes_values_inside_limit():
    assert rubber_band(-50.0, 130.0) == -50.0


def test_rubber_band_softens_excess():
    assert rubber_band(150.0, 130.0) == pytest.approx(141.0)
    assert rubber_band(-150.0, 130.0) == pytest.approx(-141.0)


def test_starts_idle(tracker):
    assert tracker.phase is GesturePhase.IDLE
    assert tracker.direction is DraggingDirection.NONE
    assert tracker.offset.is_zero


def test_right_drag_past_start_zone_increases(tracker):
    tracker.begin()
    offset = tracker.update(50, 5)

    assert tracker.direction is DraggingDirection.RIGHT
    assert offset == Offset(37.5, 0.0)
    assert tracker.end(60, 5) is CounterAction.INCREASE


def test_down_drag_past_start_zone_resets(tracker):
    tracker.begin()
    offset = tracker.update(5, 50)

    assert tracker.direction is DraggingDirection.DOWN
    assert offset == Offset(0.0, 37.5)
    assert tracker.end(5, 25) is CounterAction.RESET


def test_left_drag_past_start_zone_decreases(tracker):
    tracker.begin()
    assert tracker.update(-50, 0) == Offset(-37.5, 0.0)
    assert tracker.end(-30, 0) is CounterAction.DECREASE


def test_release_inside_start_zone_does_nothing(tracker):
    tracker.begin()
    tracker.update(50, 5)
    assert tracker.end(10, 0) is None

    tracker.begin()
    tracker.update(-50, 0)
    assert tracker.end(-15, 0) is None


def test_end_returns_to_idle(tracker):
    tracker.begin()
    tracker.update(50, 5)
    tracker.end(60, 5)

    assert tracker.phase is GesturePhase.IDLE
    assert tracker.direction is DraggingDirection.NONE
    assert tracker.offset.is_zero


def test_direction_is_latched(tracker):
    tracker.begin()
    tracker.update(50, 5)
    offset = tracker.update(50, 80)

    assert tracker.direction is DraggingDirection.RIGHT
    assert offset.height == 0.0
    # Releasing far down still only evaluates the horizontal axis
    assert tracker.end(10, 80) is None


def test_uncommitted_drag_commits_on_later_movement(tracker):
    tracker.begin()
    assert tracker.update(0, 5).is_zero
    assert tracker.direction is DraggingDirection.NONE

    assert tracker.update(40, 5) == Offset(30.0, 0.0)
    assert tracker.direction is DraggingDirection.RIGHT


def test_upward_drag_is_suppressed(tracker):
    tracker.begin()
    offset = tracker.update(0, -50)

    assert tracker.direction is DraggingDirection.NONE
    assert offset.is_zero
    assert tracker.end(0, -50) is None


def test_upward_start_commits_horizontally(tracker):
    tracker.begin()
    offset = tracker.update(40, -50)

    assert tracker.direction is DraggingDirection.RIGHT
    assert offset == Offset(30.0, 0.0)
    assert tracker.end(60, -50) is CounterAction.INCREASE


def test_offsets_rubber_band_past_limits(tracker):
    tracker.begin()
    tracker.update(200, 0)
    assert tracker.offset.width == pytest.approx(141.0)

    tracker.begin()
    tracker.update(0, 200)
    assert tracker.offset.height == pytest.approx(127.5)


def test_begin_cancels_gesture_in_progress(tracker):
    tracker.begin()
    tracker.update(50, 5)
    tracker.begin()

    assert tracker.is_dragging
    assert tracker.direction is DraggingDirection.NONE
    assert tracker.offset.is_zero


def test_cancel_yields_no_action(tracker):
    tracker.begin()
    tracker.update(80, 0)
    tracker.cancel()

    assert tracker.phase is GesturePhase.IDLE
    assert tracker.end(80, 0) is None


def test_update_while_idle_is_ignored(tracker):
    assert tracker.update(80, 0).is_zero
    assert tracker.direction is DraggingDirection.NONE
