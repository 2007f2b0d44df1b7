"""Magazines, firearms and explosives with their per-type characteristics."""

from typing import NamedTuple, Optional

from plagueshooter.constants import (
    BULLET_KE_9MM,
    BULLET_KE_22LR,
    BULLET_KE_30_06,
    BULLET_KE_223_REMINGTON,
    BULLET_KE_LOSS_9MM,
    BULLET_KE_LOSS_22LR,
    BULLET_KE_LOSS_30_06,
    BULLET_KE_LOSS_223_REMINGTON,
    CLAYMORE_CHAR_DEFAULT,
    CLAYMORE_EXPLOSION_DELAY,
    CLAYMORE_FRAGMENT_COUNT,
    CLAYMORE_FRAGMENT_KE,
    CLAYMORE_FRAGMENT_KE_LOSS,
    CLAYMORE_PASCALS,
    FIREARM_ACCURACY_DECAYS,
    FIREARM_ACCURACY_MULTIPLIERS,
    GRENADE_CHAR,
    M67_EXPLOSION_DELAY_MAX,
    M67_EXPLOSION_DELAY_MIN,
    M67_FRAGMENT_COUNT,
    M67_FRAGMENT_KE,
    M67_FRAGMENT_KE_LOSS,
    M67_PASCALS,
    CartridgeType,
    Direction,
    ExplosiveType,
    FirearmType,
    ReloadType,
)
from plagueshooter.mathutils import Position
from plagueshooter.randomness import rand_int_in_range


class _CartridgeSpec(NamedTuple):
    kinetic_energy: int
    kinetic_energy_loss_per_meter: float
    is_high_velocity: bool
    penetrate_energy_threshold: int


_CARTRIDGES = {
    CartridgeType.CARTRIDGE_9MM: _CartridgeSpec(BULLET_KE_9MM, BULLET_KE_LOSS_9MM, False, 13),
    CartridgeType.CARTRIDGE_223_REMINGTON: _CartridgeSpec(
        BULLET_KE_223_REMINGTON, BULLET_KE_LOSS_223_REMINGTON, True, 5
    ),
    CartridgeType.CARTRIDGE_30_06: _CartridgeSpec(BULLET_KE_30_06, BULLET_KE_LOSS_30_06, True, 10),
    CartridgeType.CARTRIDGE_22LR: _CartridgeSpec(BULLET_KE_22LR, BULLET_KE_LOSS_22LR, False, 6),
}


class Magazine:
    """A magazine of cartridges of one type."""

    def __init__(self, cartridge_type, capacity=0, cartridge_count=0):
        cartridge_type = CartridgeType(cartridge_type)
        spec = _CARTRIDGES[cartridge_type]
        self.cartridge_type = cartridge_type
        self.capacity = capacity
        self.cartridge_count = cartridge_count
        self.is_hollow_point = False
        self.kinetic_energy = spec.kinetic_energy
        self.kinetic_energy_loss_per_meter = spec.kinetic_energy_loss_per_meter
        # Bullet travels faster than 2,000 ft/s.
        self.is_high_velocity = spec.is_high_velocity
        # Joules required to penetrate an enemy.
        self.penetrate_energy_threshold = spec.penetrate_energy_threshold

    def __repr__(self):
        return (
            f"Magazine({self.cartridge_type.name}, capacity={self.capacity}, "
            f"cartridge_count={self.cartridge_count}, hollow_point={self.is_hollow_point})"
        )


class _FirearmSpec(NamedTuple):
    name: str
    reload_time: float
    fast_reload_time: float
    chamber_reload_delay: float
    load_round_time: Optional[float]
    shoot_audio_file: str
    shoot_interval_ms: int
    cartridge_type: CartridgeType
    loaded_rounds: int
    magazine_capacity: int
    magazine_rounds: int
    feed_system: ReloadType


_FIREARMS = {
    FirearmType.SIG_M17: _FirearmSpec(
        "SIG Sauer M17", 2, 0.5, 0.1, None, "sig_m17.wav", 300,
        CartridgeType.CARTRIDGE_9MM, 17, 17, 16, ReloadType.DETACHABLE_MAGAZINE,
    ),
    FirearmType.AR15: _FirearmSpec(
        "AR15", 3, 2, 0.2, None, "223_remington.wav", 250,
        CartridgeType.CARTRIDGE_223_REMINGTON, 20, 20, 19, ReloadType.DETACHABLE_MAGAZINE,
    ),
    FirearmType.REMINGTON_700: _FirearmSpec(
        "Remington 700", 3, 2, 0.2, 0.5, "30_06.wav", 1000,
        CartridgeType.CARTRIDGE_30_06, 4, 4, 4, ReloadType.DIRECT_LOAD,
    ),
    FirearmType.RUGER_MK_IV: _FirearmSpec(
        "Ruger Mk. IV", 2, 0.5, 0.1, None, "22lr.wav", 250,
        CartridgeType.CARTRIDGE_22LR, 10, 10, 9, ReloadType.DETACHABLE_MAGAZINE,
    ),
}


class Firearm:
    """A firearm with its loaded magazine and handling characteristics."""

    def __init__(self, firearm_type):
        firearm_type = FirearmType(firearm_type)
        spec = _FIREARMS[firearm_type]
        self.firearm_type = firearm_type
        self.name = spec.name
        self.is_chambered = True
        self.can_shoot = True
        self.reload_time = spec.reload_time
        self.fast_reload_time = spec.fast_reload_time
        self.chamber_reload_delay = spec.chamber_reload_delay
        self.load_round_time = spec.load_round_time
        self.shoot_interval_ms = spec.shoot_interval_ms
        self.shoot_audio_file = spec.shoot_audio_file
        self.accuracy_decay = FIREARM_ACCURACY_DECAYS[firearm_type]
        self.accuracy_scale_factor = FIREARM_ACCURACY_MULTIPLIERS[firearm_type]
        self.cartridge_type = spec.cartridge_type
        self.loaded_rounds = spec.loaded_rounds
        self.magazine = Magazine(spec.cartridge_type, spec.magazine_capacity, spec.magazine_rounds)
        self.magazine_capacity = spec.magazine_capacity
        self.feed_system = spec.feed_system

    def __repr__(self):
        return f"Firearm({self.firearm_type.name}, loaded_rounds={self.loaded_rounds})"


class Explosive:
    """A grenade or claymore, in an inventory or active in the world."""

    def __init__(self, explosive_type):
        explosive_type = ExplosiveType(explosive_type)
        self.explosive_type = explosive_type
        self.position = Position()
        self.explosive_id: Optional[int] = None
        self.facing_direction: Optional[Direction] = None
        self.explode_close_audio_file = "explosion_close.wav"
        if explosive_type == ExplosiveType.M67_GRENADE:
            self.explosion_pascals = M67_PASCALS
            self.explosion_delay = (
                rand_int_in_range(
                    int(M67_EXPLOSION_DELAY_MIN * 10), int(M67_EXPLOSION_DELAY_MAX * 10)
                )
                / 10.0
            )
            self.explode_audio_file = "explosion_with_debris.wav"
            self.explosive_char = GRENADE_CHAR
            self.fragment_count = M67_FRAGMENT_COUNT
            self.fragment_kinetic_energy = M67_FRAGMENT_KE
            self.fragment_kinetic_energy_loss_per_meter = M67_FRAGMENT_KE_LOSS
        else:
            self.explosion_pascals = CLAYMORE_PASCALS
            self.explosion_delay = CLAYMORE_EXPLOSION_DELAY
            self.explode_audio_file = "explosion.wav"
            self.explosive_char = CLAYMORE_CHAR_DEFAULT
            self.fragment_count = CLAYMORE_FRAGMENT_COUNT
            self.fragment_kinetic_energy = CLAYMORE_FRAGMENT_KE
            self.fragment_kinetic_energy_loss_per_meter = CLAYMORE_FRAGMENT_KE_LOSS

    def __repr__(self):
        return (
            f"Explosive({self.explosive_type.name}, id={self.explosive_id}, "
            f"position={self.position})"
        )