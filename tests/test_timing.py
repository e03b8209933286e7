import pytest

from benchkernels.timing import Timer


def _clock(values):
    it = iter(values)
    return lambda: next(it)


def test_stop_returns_elapsed_times():
    timer = Timer(real_clock=_clock([1.0, 1.5]), cpu_clock=_clock([2.0, 2.25]))
    timer.start()
    assert timer.stop() == (0.5, 0.25)
    assert timer.real_seconds == 0.5
    assert timer.cpu_seconds == 0.25


def test_report_formats_milliseconds():
    timer = Timer(real_clock=_clock([1.0, 1.5]), cpu_clock=_clock([2.0, 2.25]))
    timer.start()
    timer.stop()
    assert timer.report() == "Real time: 500.000000 ms CPU time: 250.000000 ms "


def test_stop_without_start_raises():
    with pytest.raises(RuntimeError):
        Timer().stop()


def test_report_before_stop_raises():
    timer = Timer()
    timer.start()
    with pytest.raises(RuntimeError):
        timer.report()


def test_stop_twice_raises():
    timer = Timer()
    timer.start()
    timer.stop()
    with pytest.raises(RuntimeError):
        timer.stop()


def test_context_manager_measures_non_negative_times():
    with Timer() as timer:
        sum(range(1000))
    assert timer.real_seconds >= 0.0
    assert timer.cpu_seconds >= 0.0
    assert timer.report().startswith("Real time: ")


def test_restart_clears_previous_measurement():
    timer = Timer(real_clock=_clock([0.0, 1.0, 5.0]), cpu_clock=_clock([0.0, 1.0, 5.0]))
    timer.start()
    timer.stop()
    timer.start()
    assert timer.real_seconds is None
    with pytest.raises(RuntimeError):
        timer.report()