import pytest

from hexapode.timer import Duration, Timer


class FakeClock:
    def __init__(self, *values):
        self._values = iter(values)

    def __call__(self):
        return next(self._values)


def test_elapsed_since_reset():
    timer = Timer(run=True, clock=FakeClock(1_000, 21_000_000))
    assert timer.elapsed() == Duration(21_000_000 - 1_000)


def test_not_running_measures_from_zero():
    timer = Timer(clock=FakeClock(5_000))
    assert timer.elapsed().nanos() == 5_000.0


def test_reset_moves_start():
    timer = Timer(run=True, clock=FakeClock(0, 100, 150))
    timer.reset()
    assert timer.elapsed().nanoseconds == 50


def test_real_clock_is_monotonic():
    timer = Timer(run=True)
    first = timer.elapsed()
    second = timer.elapsed()
    assert 0 <= first.nanoseconds <= second.nanoseconds


def test_one_minute():
    assert Duration(60_000_000_000).minutes() == pytest.approx(1.0)


@pytest.mark.parametrize("ns", [1, 123_456_789, 7 * 24 * 3600 * 10**9])
def test_units_are_consistent(ns):
    d = Duration(ns)
    assert d.micros() * 1000 == pytest.approx(d.nanos())
    assert d.millis() * 1000 == pytest.approx(d.micros())
    assert d.seconds() * 1000 == pytest.approx(d.millis())
    assert d.minutes() * 60 == pytest.approx(d.seconds())
    assert d.hours() * 60 == pytest.approx(d.minutes())
    assert d.days() * 24 == pytest.approx(d.hours())
    assert d.weeks() * 7 == pytest.approx(d.days())