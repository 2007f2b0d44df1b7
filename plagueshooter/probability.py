"""Lethality and injury probabilities for bullets and explosions."""

import math

from plagueshooter.constants import MINIMUM_LETHAL_ENERGY, HitLocation


def _clamp(value, low=0.0, high=1.0):
    return max(low, min(value, high))


def impact_fatal_probability(location, joules):
    """Probability that an impact of ``joules`` at ``location`` kills outright."""
    if joules < MINIMUM_LETHAL_ENERGY:
        return 0.0
    if location == HitLocation.HEAD:
        probability = 1 / (1 + math.exp(-0.045 * (joules - 100)))
    elif location == HitLocation.THORAX:
        probability = (4.61 * math.log(joules) - 20.12) / 10.0
    elif location == HitLocation.ABDOMEN:
        probability = (7.64 * math.log(joules) - 38.52) / 10.0
    else:
        probability = (5.83 * math.log(joules) - 32.44) / 10.0
    return _clamp(probability)


def ear_rupture_probability(pascals):
    """Probability that an overpressure of ``pascals`` ruptures an eardrum."""
    if pascals <= 0:
        return 0.0
    return _clamp(-12.6 + 1.524 * math.log(pascals))


def explosion_fatal_probability(pascals):
    """Probability that a blast overpressure of ``pascals`` is fatal."""
    psi = pascals / 6894.8
    if psi < 40:
        return 0.0
    if psi >= 92:
        return 1.0
    return 1 / (1 + math.exp(-0.2088 * (psi - 62)))


def fragment_fatal_probability(joules, fragments):
    """Probability that at least one of ``fragments`` hits of ``joules`` is fatal."""
    per_fragment = sum(
        impact_fatal_probability(location, joules) for location in HitLocation
    ) / len(HitLocation)
    return 1 - (1 - per_fragment) ** fragments