import pytest

from tally_counter.core import CounterGeometry, DraggingDirection, Offset, feedback_for
from tally_counter.core.feedback import container_offset, control_opacity

GEOMETRY = CounterGeometry(300)


def test_resting_feedback():
    fb = feedback_for(Offset(), GEOMETRY)

    assert fb.decrease_opacity == pytest.approx(0.4)
    assert fb.increase_opacity == pytest.approx(0.4)
    assert fb.reset_opacity == 0.0
    assert fb.overlay_opacity == 0.0
    assert fb.container_offset.is_zero


def test_dragging_right_to_limit():
    fb = feedback_for(Offset(130.0, 0.0), GEOMETRY)

    assert fb.increase_opacity == pytest.approx(0.8)
    assert fb.decrease_opacity == pytest.approx(0.0)
    assert fb.overlay_opacity == pytest.approx(0.3)


def test_dragging_left_halfway():
    fb = feedback_for(Offset(-65.0, 0.0), GEOMETRY)

    assert fb.decrease_opacity == pytest.approx(0.6)
    assert fb.increase_opacity == pytest.approx(0.2)
    assert fb.overlay_opacity == pytest.approx(0.15)


def test_pulling_down_fades_side_controls():
    half = feedback_for(Offset(0.0, 50.0), GEOMETRY)
    full = feedback_for(Offset(0.0, 100.0), GEOMETRY)

    assert half.reset_opacity == pytest.approx(0.5)
    assert half.increase_opacity == pytest.approx(0.2)
    assert full.reset_opacity == pytest.approx(1.0)
    assert full.decrease_opacity == pytest.approx(0.0)
    assert full.overlay_opacity == pytest.approx(0.5)


def test_rubber_banded_offset_is_clipped():
    fb = feedback_for(Offset(141.0, 0.0), GEOMETRY)

    assert fb.increase_opacity == pytest.approx(0.8)
    assert fb.overlay_opacity == pytest.approx(0.3)


def test_spring_overshoot_above_centre_keeps_reset_hidden():
    assert feedback_for(Offset(0.0, -12.0), GEOMETRY).reset_opacity == 0.0


def test_container_follows_at_one_sixth():
    assert container_offset(Offset(60.0, 30.0)) == Offset(10.0, 5.0)


def test_control_opacity_rejects_down_side():
    with pytest.raises(ValueError):
        control_opacity(Offset(), GEOMETRY, DraggingDirection.DOWN)
