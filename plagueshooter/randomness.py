"""Random number helpers used by the game rules."""

import random

INT_MAX = 2**31 - 1

_rng = random.Random()


def rand_int():
    """A uniform integer between 0 and ``INT_MAX`` inclusive."""
    return _rng.randint(0, INT_MAX)


def rand_int_in_range(low, high):
    """A uniform integer between ``low`` and ``high`` inclusive, in either order."""
    if low > high:
        low, high = high, low
    return _rng.randint(low, high)


def rand_normal_dist(mean, sd):
    """A sample from a normal distribution."""
    return _rng.normalvariate(mean, sd)


def check_probability(p):
    """Return True with probability ``p``."""
    return _rng.random() <= p