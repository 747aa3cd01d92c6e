import pytest
from PyQt6.QtCore import QPoint, QPointF, Qt
from PyQt6.QtTest import QTest

from tally_counter.config import CounterConfig
from tally_counter.core import CounterAction, DraggingDirection, Offset
from tally_counter.main_window import CounterWindow
from tally_counter.widgets import CounterView, CountLabel, LogoWidget
from tally_counter.widgets.logo import DEFAULT_LOGO_PATH


@pytest.fixture
def view(qapp):
    widget = CounterView(width=300)
    yield widget
    widget.deleteLater()


def record(signal):
    received = []
    signal.connect(received.append)
    return received


def finish_spring(view):
    anim = view._spring_anim
    anim.setCurrentTime(anim.duration())


def test_initial_state(qapp):
    view = CounterView(width=300, initial_count=5)
    assert view.count == 5
    assert view.label.text == "5"
    assert view.direction is DraggingDirection.NONE
    assert view.label_offset.is_zero


def test_tap_increases(view):
    changes = record(view.count_changed)

    view.begin_drag()
    assert view.end_drag(0, 0) is CounterAction.INCREASE

    assert view.count == 1
    assert changes == [1]


def test_tap_method_increases(view):
    assert view.tap() == 1
    assert view.label.text == "1"


def test_right_drag_increases_once(view):
    changes = record(view.count_changed)
    actions = record(view.action_triggered)

    view.begin_drag()
    view.drag_to(50, 5)
    assert view.direction is DraggingDirection.RIGHT

    assert view.end_drag(60, 5) is CounterAction.INCREASE
    assert view.count == 1
    assert changes == [1]
    assert actions == ["increase"]
    assert view.direction is DraggingDirection.NONE


def test_down_drag_resets(qapp):
    view = CounterView(width=300, initial_count=500)

    view.begin_drag()
    view.drag_to(5, 50)
    assert view.direction is DraggingDirection.DOWN
    assert view.end_drag(5, 25) is CounterAction.RESET
    assert view.count == 0


def test_left_drag_decreases(qapp):
    view = CounterView(width=300, initial_count=3)

    view.begin_drag()
    view.drag_to(-60, 0)
    view.end_drag(-60, 0)
    assert view.count == 2


def test_short_release_springs_back_without_change(view):
    changes = record(view.count_changed)

    view.begin_drag()
    view.drag_to(50, 5)
    assert view.label_offset == Offset(37.5, 0.0)

    assert view.end_drag(10, 0) is None
    assert view.count == 0
    assert changes == []
    assert view._spring_anim.endValue() == QPointF(0, 0)

    finish_spring(view)
    assert view.label_offset.is_zero


def test_feedback_follows_drag(view):
    view.begin_drag()
    view.drag_to(-400, 0)

    fb = view.feedback
    assert fb.decrease_opacity == pytest.approx(0.8)
    assert view.decrease_button.iconOpacity == pytest.approx(0.8)
    assert view.increase_button.iconOpacity == pytest.approx(0.0)
    assert fb.container_offset.width < 0


def test_buttons_drive_counter(qapp):
    view = CounterView(width=300, initial_count=10)

    view.increase_button.click()
    assert view.count == 11
    view.decrease_button.click()
    view.decrease_button.click()
    assert view.count == 9
    view.reset_button.click()
    assert view.count == 0


def test_saturation_emits_nothing(qapp):
    view = CounterView(width=300, initial_count=999)
    changes = record(view.count_changed)

    assert view.increase() == 999
    assert changes == []


def test_label_signals_drive_gesture(view):
    view.label.pressed.emit(QPointF(200, 200))
    view.label.moved.emit(QPointF(260, 204))
    assert view.direction is DraggingDirection.RIGHT

    view.label.released.emit(QPointF(270, 204))
    assert view.count == 1


@pytest.fixture
def shown_view(view):
    view.show()
    QTest.qWaitForWindowExposed(view)
    yield view
    view.hide()


def label_center(view):
    return view.label.circle_rect().center().toPoint()


def test_mouse_click_on_label_increases(shown_view):
    changes = record(shown_view.count_changed)

    QTest.mouseClick(shown_view.label, Qt.MouseButton.LeftButton,
                     Qt.KeyboardModifier.NoModifier, label_center(shown_view))

    assert shown_view.count == 1
    assert changes == [1]


def test_mouse_press_outside_circle_is_ignored(shown_view):
    changes = record(shown_view.count_changed)
    corner = QPoint(1, 1)

    QTest.mousePress(shown_view.label, Qt.MouseButton.LeftButton,
                     Qt.KeyboardModifier.NoModifier, corner)
    QTest.mouseRelease(shown_view.label, Qt.MouseButton.LeftButton,
                       Qt.KeyboardModifier.NoModifier, corner)

    assert shown_view.count == 0
    assert changes == []
    assert shown_view.direction is DraggingDirection.NONE


def test_mouse_drag_right_increases_once(shown_view):
    actions = record(shown_view.action_triggered)
    label = shown_view.label
    start = label_center(shown_view)
    end = start + QPoint(60, 0)

    QTest.mousePress(label, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, start)
    QTest.mouseMove(label, end)
    assert shown_view.direction is DraggingDirection.RIGHT

    QTest.mouseRelease(label, Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, end)

    assert shown_view.count == 1
    assert actions == ["increase"]
    assert shown_view.direction is DraggingDirection.NONE


def test_label_hit_test(qapp):
    label = CountLabel(100, 40)
    center = label.circle_rect().center()

    assert label.hit(center)
    assert not label.hit(QPointF(0, 0))


@pytest.mark.parametrize("width", [-10, float("inf")])
def test_rejects_invalid_width(qapp, width):
    with pytest.raises(ValueError):
        CounterView(width=width)


def test_view_paints(view):
    view.begin_drag()
    view.drag_to(0, 80)
    assert not view.grab().isNull()


def test_logo_falls_back_when_missing(qapp):
    logo = LogoWidget(300, "/nonexistent/logo.png")
    assert not logo.has_image
    assert not logo.grab().isNull()


def test_bundled_logo_exists():
    assert DEFAULT_LOGO_PATH.exists()


def test_window_uses_config(qapp):
    window = CounterWindow(CounterConfig(width=240, initial_count=7))
    assert window.counter_view.count == 7
    assert window.counter_view.sizes.width == 240
    assert window.windowTitle() == "Tally Counter"
