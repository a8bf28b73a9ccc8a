import pytest

from coinflip_sim.engine import Engine, EngineError, FrameContext
from coinflip_sim.input import Input


def _clock(values):
    return iter(values).__next__


def test_history_length_follows_refresh_rate():
    engine = Engine(refresh_rate=2, clock=_clock([0.0]))
    assert len(engine.frame_times) == 10
    assert engine.average_delta_time() == 0.0


def test_begin_frame_reports_delta_and_fixed_size():
    engine = Engine(refresh_rate=1, clock=_clock([0.0, 1.0, 3.0]))
    first = engine.begin_frame()
    second = engine.begin_frame()
    assert first == FrameContext(800, 600, 1.0)
    assert second.delta_time == 2.0


def test_ordered_frame_times_oldest_first():
    engine = Engine(refresh_rate=1, clock=_clock([0.0, 1.0, 3.0]))
    engine.begin_frame()
    engine.begin_frame()
    assert engine.ordered_frame_times() == [0.0, 0.0, 0.0, 1.0, 2.0]
    assert engine.frame_time_index == 2


def test_average_over_full_history():
    engine = Engine(refresh_rate=1, clock=_clock([0.0, 1.0, 3.0]))
    engine.begin_frame()
    engine.begin_frame()
    assert engine.average_delta_time() == pytest.approx(0.6)


def test_history_wraps():
    times = [float(t) for t in range(8)]
    engine = Engine(refresh_rate=1, clock=_clock(times))
    for _ in range(7):
        engine.begin_frame()
    assert engine.ordered_frame_times() == [1.0] * 5
    assert engine.frame_time_index == 2


def test_begin_frame_updates_input():
    inp = Input()
    inp.bind("quit", 5)
    engine = Engine(refresh_rate=1, clock=_clock([0.0, 1.0]), input=inp)
    engine.begin_frame({5})
    assert engine.input.is_pressed("quit") is True


def test_fatal_failure_raises(capsys):
    engine = Engine(clock=_clock([0.0]))
    with pytest.raises(EngineError, match="boom"):
        engine.fail("boom")
    assert "Error: boom" in capsys.readouterr().err


def test_nonfatal_failure_only_reports(capsys):
    engine = Engine(clock=_clock([0.0]))
    engine.fail("minor", fatal=False)
    assert capsys.readouterr().err == "Error: minor\n"


def test_invalid_refresh_rate():
    with pytest.raises(ValueError):
        Engine(refresh_rate=0, clock=_clock([0.0]))


def test_should_close_flag():
    engine = Engine(clock=_clock([0.0]))
    assert engine.should_close is False
    engine.should_close = True
    assert engine.should_close is True