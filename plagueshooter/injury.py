"""Rules deciding the outcome of bullet and explosion injuries."""

from plagueshooter.constants import (
    BULLET_EXIT_PROBABILITY_9MM,
    BULLET_EXIT_PROBABILITY_22LR,
    DELAYED_DEATH_LOSS_RATE_ABDOMEN_MAX,
    DELAYED_DEATH_LOSS_RATE_ABDOMEN_MIN,
    DELAYED_DEATH_LOSS_RATE_HEAD_MAX,
    DELAYED_DEATH_LOSS_RATE_HEAD_MIN,
    DELAYED_DEATH_LOSS_RATE_LIMBS_MAX,
    DELAYED_DEATH_LOSS_RATE_LIMBS_MIN,
    DELAYED_DEATH_LOSS_RATE_THORAX_MAX,
    DELAYED_DEATH_LOSS_RATE_THORAX_MIN,
    DELAYED_DEATH_PROBABILITY_ABDOMEN,
    DELAYED_DEATH_PROBABILITY_ABDOMEN_HP,
    DELAYED_DEATH_PROBABILITY_HEAD,
    DELAYED_DEATH_PROBABILITY_LIMBS,
    DELAYED_DEATH_PROBABILITY_LIMBS_HP,
    DELAYED_DEATH_PROBABILITY_THORAX,
    DELAYED_DEATH_PROBABILITY_THORAX_HP,
    HEADSHOT_SPATTER_REQUIRED_FORCE,
    HINDER_PROBABILITY_ABDOMEN,
    HINDER_PROBABILITY_HEAD,
    HINDER_PROBABILITY_LIMBS,
    CartridgeType,
    HitLocation,
)
from plagueshooter.mathutils import compute_area_from_distance, compute_inverse_square_law
from plagueshooter.probability import (
    ear_rupture_probability,
    explosion_fatal_probability,
    fragment_fatal_probability,
    impact_fatal_probability,
)
from plagueshooter.randomness import check_probability, rand_int_in_range

_HINDER_PROBABILITIES = {
    HitLocation.HEAD: HINDER_PROBABILITY_HEAD,
    HitLocation.ABDOMEN: HINDER_PROBABILITY_ABDOMEN,
    HitLocation.LIMBS: HINDER_PROBABILITY_LIMBS,
}

# (normal, hollow point) delayed-death probabilities.
_DELAYED_DEATH_PROBABILITIES = {
    HitLocation.HEAD: (DELAYED_DEATH_PROBABILITY_HEAD, DELAYED_DEATH_PROBABILITY_HEAD),
    HitLocation.THORAX: (DELAYED_DEATH_PROBABILITY_THORAX, DELAYED_DEATH_PROBABILITY_THORAX_HP),
    HitLocation.ABDOMEN: (
        DELAYED_DEATH_PROBABILITY_ABDOMEN,
        DELAYED_DEATH_PROBABILITY_ABDOMEN_HP,
    ),
}

_BULLET_EXIT_PROBABILITIES = {
    CartridgeType.CARTRIDGE_22LR: BULLET_EXIT_PROBABILITY_22LR,
    CartridgeType.CARTRIDGE_9MM: BULLET_EXIT_PROBABILITY_9MM,
    CartridgeType.CARTRIDGE_223_REMINGTON: 1.0,
    CartridgeType.CARTRIDGE_30_06: 1.0,
}


def rand_hit_location():
    """A random hit location, or None when the hit lands on no listed region.

    Each of the four regions and the miss are equally likely.
    """
    index = rand_int_in_range(0, len(HitLocation))
    return HitLocation(index) if index < len(HitLocation) else None


def check_bullet_was_fatal(location, joules):
    """Roll whether a bullet impact of ``joules`` at ``location`` kills."""
    return check_probability(impact_fatal_probability(location, joules))


def delayed_death_loss_rate(location, is_high_velocity, joules):
    """Rate at which a wounded enemy approaches death from a delayed death."""
    if location == HitLocation.HEAD:
        low, high = DELAYED_DEATH_LOSS_RATE_HEAD_MIN, DELAYED_DEATH_LOSS_RATE_HEAD_MAX
    elif location == HitLocation.THORAX:
        if is_high_velocity:
            return rand_int_in_range(DELAYED_DEATH_LOSS_RATE_THORAX_MAX, 622)
        low, high = DELAYED_DEATH_LOSS_RATE_THORAX_MIN, DELAYED_DEATH_LOSS_RATE_THORAX_MAX
    elif location == HitLocation.ABDOMEN:
        if is_high_velocity:
            return rand_int_in_range(DELAYED_DEATH_LOSS_RATE_ABDOMEN_MAX, 200)
        low, high = DELAYED_DEATH_LOSS_RATE_ABDOMEN_MIN, DELAYED_DEATH_LOSS_RATE_ABDOMEN_MAX
    else:
        low, high = DELAYED_DEATH_LOSS_RATE_LIMBS_MIN, DELAYED_DEATH_LOSS_RATE_LIMBS_MAX
    return rand_int_in_range(low, high)


def check_should_delayed_death(location, is_hollow_point):
    """Roll whether a bullet wound leads to a delayed death."""
    normal, hollow = _DELAYED_DEATH_PROBABILITIES.get(
        location, (DELAYED_DEATH_PROBABILITY_LIMBS, DELAYED_DEATH_PROBABILITY_LIMBS_HP)
    )
    return check_probability(hollow if is_hollow_point else normal)


def check_should_hinder(location):
    """Roll whether a wound at ``location`` slows the enemy down."""
    probability = _HINDER_PROBABILITIES.get(location)
    if probability is None:
        return False
    return check_probability(probability)


def _fragments_at(explosive, area):
    """Fragments hitting a target spread over ``area``; at least a chance of one."""
    if area <= 0:
        return explosive.fragment_count
    count = int(explosive.fragment_count / area)
    if count == 0:
        p = 1 - (1 - 1.0 / area) ** explosive.fragment_count
        count = 1 if check_probability(p) else 0
    return count


def check_explosion_was_fatal(explosive, distance):
    """Roll whether an explosion at ``distance`` kills, by fragments or blast."""
    area = compute_area_from_distance(distance)
    pascals = int(compute_inverse_square_law(explosive.explosion_pascals, distance))
    fragments = _fragments_at(explosive, area)
    fragment_energy = int(
        explosive.fragment_kinetic_energy
        - explosive.fragment_kinetic_energy_loss_per_meter * distance
    )
    return check_probability(
        fragment_fatal_probability(fragment_energy, fragments)
    ) or check_probability(explosion_fatal_probability(pascals))


def check_explosion_ruptured_ear(explosive, distance):
    """True if the blast at ``distance`` has any chance of rupturing an eardrum."""
    pascals = int(compute_inverse_square_law(explosive.explosion_pascals, distance))
    return ear_rupture_probability(pascals) > 0


def check_explosion_was_hindering(explosive, distance):
    """Roll a hit location for each fragment reaching ``distance``; True if any hinders."""
    fragments = _fragments_at(explosive, compute_area_from_distance(distance))
    return any(check_should_hinder(rand_hit_location()) for _ in range(fragments))


def check_should_splatter(location, is_high_velocity, joules, muzzle_distance):
    """Whether a wound produces a blood splatter effect."""
    if joules >= HEADSHOT_SPATTER_REQUIRED_FORCE and location == HitLocation.HEAD:
        return True
    if is_high_velocity:
        return muzzle_distance <= 2
    return False


def bullet_exit_probability(cartridge):
    """Probability that a bullet of ``cartridge`` exits the body it hits."""
    return _BULLET_EXIT_PROBABILITIES.get(cartridge, 0.0)