"""Wall-clock helpers and clock formatting."""

import time


def epoch_now():
    """Seconds since the epoch, at millisecond resolution."""
    return int(time.time() * 1000) / 1000


def has_time_elapsed(epoch, seconds):
    """True once at least ``seconds`` have passed since ``epoch``."""
    return epoch_now() - epoch >= seconds


def _pad(number):
    return f"0{number}" if number < 10 else str(number)


def make_clock_string(seconds):
    """Format a whole number of seconds as ``MM:SS``."""
    seconds = int(seconds)
    minutes = -(-seconds // 60) if seconds < 0 else seconds // 60
    remainder = seconds - minutes * 60
    return f"{_pad(minutes)}:{_pad(remainder)}"