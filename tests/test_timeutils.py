import time

import pytest

from plagueshooter.timeutils import epoch_now, has_time_elapsed, make_clock_string


def test_epoch_now_is_close_to_time():
    assert abs(epoch_now() - time.time()) < 1.0


def test_epoch_now_has_millisecond_resolution():
    value = epoch_now()
    assert round(value * 1000) == pytest.approx(value * 1000)


def test_has_time_elapsed_true_for_past():
    assert has_time_elapsed(epoch_now() - 10, 5)


def test_has_time_elapsed_false_for_future():
    assert not has_time_elapsed(epoch_now() + 100, 0)


def test_clock_string_zero():
    assert make_clock_string(0) == "00:00"


def test_clock_string_rescue_eta():
    assert make_clock_string(300) == "05:00"


@pytest.mark.parametrize("seconds", [1, 9, 59, 61, 599, 3599, 7265])
def test_clock_string_round_trip(seconds):
    minutes, secs = make_clock_string(seconds).split(":")
    assert int(minutes) * 60 + int(secs) == seconds
    assert 0 <= int(secs) < 60
    assert len(secs) == 2