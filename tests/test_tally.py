import pytest

from tally_counter.core import CounterAction, TallyCounter
from tally_counter.utils.constants import MAX_COUNT


def test_starts_at_zero():
    assert TallyCounter().count == 0


def test_increase_five_then_decrease_ten_stops_at_zero():
    counter = TallyCounter()
    for _ in range(5):
        counter.increase()
    assert counter.count == 5

    for _ in range(10):
        counter.decrease()
    assert counter.count == 0


def test_increase_saturates_at_maximum():
    counter = TallyCounter()
    for _ in range(MAX_COUNT + 1):
        value = counter.increase()
        assert value <= MAX_COUNT
    assert counter.count == 999
    assert counter.at_maximum


def test_decrease_never_goes_negative():
    counter = TallyCounter(3)
    for _ in range(20):
        assert counter.decrease() >= 0
    assert counter.at_minimum


def test_reset_from_five_hundred():
    counter = TallyCounter(500)
    assert counter.reset() == 0
    assert counter.count == 0


def test_reset_then_decrease_stays_zero():
    counter = TallyCounter(42)
    counter.reset()
    for _ in range(7):
        counter.decrease()
    assert counter.count == 0


def test_apply_dispatches_actions():
    counter = TallyCounter(10)
    assert counter.apply(CounterAction.INCREASE) == 11
    assert counter.apply(CounterAction.DECREASE) == 10
    assert counter.apply(CounterAction.RESET) == 0


@pytest.mark.parametrize("initial", [-1, 1000])
def test_rejects_initial_count_out_of_range(initial):
    with pytest.raises(ValueError):
        TallyCounter(initial)
