from rvbench.stopwatch import Stopwatch, seconds


def _clock(*values):
    return iter(values).__next__


def test_seconds_is_monotonic():
    a = seconds()
    b = seconds()
    assert b >= a


def test_new_stopwatch_reads_zero():
    sw = Stopwatch(_clock())
    assert sw.read() == 0.0
    assert sw.running is False


def test_start_stop():
    sw = Stopwatch(_clock(1.0, 4.0))
    sw.start()
    sw.stop()
    assert sw.read() == 3.0


def test_resume_accumulates():
    sw = Stopwatch(_clock(1.0, 4.0, 10.0, 12.0))
    sw.start()
    sw.stop()
    sw.resume()
    sw.stop()
    assert sw.read() == 5.0


def test_start_clears_total():
    sw = Stopwatch(_clock(1.0, 4.0, 20.0, 21.0))
    sw.start()
    sw.stop()
    sw.start()
    sw.stop()
    assert sw.read() == 1.0


def test_read_while_running():
    sw = Stopwatch(_clock(0.0, 2.0, 5.0))
    sw.start()
    assert sw.read() == 2.0
    assert sw.read() == 5.0
    assert sw.running is True


def test_second_start_is_ignored():
    sw = Stopwatch(_clock(0.0, 3.0))
    sw.start()
    sw.start()
    sw.stop()
    assert sw.read() == 3.0


def test_reset_clears():
    sw = Stopwatch(_clock(0.0, 3.0))
    sw.start()
    sw.stop()
    sw.reset()
    assert sw.read() == 0.0
    assert sw.running is False