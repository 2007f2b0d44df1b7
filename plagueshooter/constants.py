"""Enumerations and tuning constants shared across the game."""

from enum import IntEnum


class HitLocation(IntEnum):
    """Body region struck by a projectile or fragment."""

    HEAD = 0
    THORAX = 1
    ABDOMEN = 2
    LIMBS = 3


class FirearmType(IntEnum):
    SIG_M17 = 0
    AR15 = 1
    REMINGTON_700 = 2
    RUGER_MK_IV = 3


class CartridgeType(IntEnum):
    CARTRIDGE_9MM = 0
    CARTRIDGE_223_REMINGTON = 1
    CARTRIDGE_30_06 = 2
    CARTRIDGE_22LR = 3


class ReloadType(IntEnum):
    DETACHABLE_MAGAZINE = 0
    DIRECT_LOAD = 1


class ExplosiveType(IntEnum):
    M67_GRENADE = 0
    M18A1_CLAYMORE = 1


class Direction(IntEnum):
    NORTH = 0
    SOUTH = 1
    EAST = 2
    WEST = 3


# Explosives.
CLAYMORE_FRAGMENT_DEGREES = 60

M67_PASCALS = 962_000
CLAYMORE_PASCALS = 4_556_000

M67_FRAGMENT_COUNT = 1300
CLAYMORE_FRAGMENT_COUNT = 700
M67_FRAGMENT_KE = 125
CLAYMORE_FRAGMENT_KE = 100
M67_FRAGMENT_KE_LOSS = 0.47
CLAYMORE_FRAGMENT_KE_LOSS = 2.2

M67_EXPLOSION_DELAY_MIN = 4.0
M67_EXPLOSION_DELAY_MAX = 5.5
CLAYMORE_EXPLOSION_DELAY = 1.0

GRENADE_CHAR = "\u2022"
CLAYMORE_CHAR_DEFAULT = "<"

# Firearms.
# Fraction of energy a bullet retains after penetrating an enemy.
BULLET_PENETRATE_KE_FACTOR = 0.8
BULLET_PENETRATE_KE_FACTOR_HP = 0.1

# Maximum number of enemies a bullet can perforate.
MAX_PERFORATE_COUNT = 3

BULLET_KE_9MM = 536
BULLET_KE_223_REMINGTON = 1738
BULLET_KE_223_REMINGTON_HP = 1300
BULLET_KE_30_06 = 3894
BULLET_KE_22LR = 138
BULLET_KE_LOSS_9MM = 1.4
BULLET_KE_LOSS_223_REMINGTON = 4.4
BULLET_KE_LOSS_30_06 = 6.32
BULLET_KE_LOSS_22LR = 0.63

FIREARM_ACCURACY_DECAYS = {
    FirearmType.SIG_M17: 0.054,
    FirearmType.AR15: 0.02,
    FirearmType.REMINGTON_700: 0.0135,
    FirearmType.RUGER_MK_IV: 0.054,
}
FIREARM_ACCURACY_MULTIPLIERS = {
    FirearmType.SIG_M17: 1.74,
    FirearmType.AR15: 1.69,
    FirearmType.REMINGTON_700: 1.7,
    FirearmType.RUGER_MK_IV: 1.74,
}

# Cost of each cartridge, as supply drop delay in seconds.
CARTRIDGE_9MM_COST = 0.96
CARTRIDGE_9MM_HP_COST = 1.7
CARTRIDGE_223_REMINGTON_COST = 2.8
CARTRIDGE_223_REMINGTON_HP_COST = 2.0
CARTRIDGE_30_06_COST = 3.9

# Infected.
INFECTED_CHAR = "Z"
INFECTED_CHAR_DEAD = "D"

INFECTED_SPAWN_SIZE_MAX = 4
INFECTED_SPAWN_SIZE_MEAN = 1.4
INFECTED_SPAWN_SIZE_SD = 0.5

INFECTED_SPAWN_INTERVAL_MAX = 5.0
INFECTED_SPAWN_INTERVAL_MEAN = 3.0
INFECTED_SPAWN_INTERVAL_SD = 2.0

INFECTED_MOVEMENT_INTERVAL_MS = 170
INFECTED_HINDER_DELAY_MS = 150

# Injuries.
MINIMUM_LETHAL_ENERGY = 79

HINDER_PROBABILITY_ABDOMEN = 0.5
HINDER_PROBABILITY_LIMBS = 0.5
HINDER_PROBABILITY_HEAD = 1.0

# Rate at which an enemy gets closer to death due to delayed death.
DELAYED_DEATH_LOSS_RATE_HEAD_MIN = 13
DELAYED_DEATH_LOSS_RATE_HEAD_MAX = 44
DELAYED_DEATH_LOSS_RATE_THORAX_MIN = 75
DELAYED_DEATH_LOSS_RATE_THORAX_MAX = 250
DELAYED_DEATH_LOSS_RATE_ABDOMEN_MIN = 5
DELAYED_DEATH_LOSS_RATE_ABDOMEN_MAX = 132
DELAYED_DEATH_LOSS_RATE_LIMBS_MIN = 2
DELAYED_DEATH_LOSS_RATE_LIMBS_MAX = 6

# Probability of a gunshot wound resulting in a delayed death.
DELAYED_DEATH_PROBABILITY_HEAD = 0.9
DELAYED_DEATH_PROBABILITY_THORAX = 0.5
DELAYED_DEATH_PROBABILITY_THORAX_HP = 0.88
DELAYED_DEATH_PROBABILITY_ABDOMEN = 0.2
DELAYED_DEATH_PROBABILITY_ABDOMEN_HP = 0.6
DELAYED_DEATH_PROBABILITY_LIMBS = 0.1
DELAYED_DEATH_PROBABILITY_LIMBS_HP = 0.3

# Probability of a bullet having an exit wound.
BULLET_EXIT_PROBABILITY_22LR = 0.1
BULLET_EXIT_PROBABILITY_9MM = 0.6

DELAYED_DEATH_COUNTER_MAX = 5000
DELAYED_DEATH_COUNTER_HINDER = 4250
DELAYED_DEATH_COUNTER_FATAL = 3000

HEADSHOT_SPATTER_REQUIRED_FORCE = 2000

# Math and physics.
PI = 3.141592653589793238
GRAVITY_ACCELERATION = 9.80665
P_HEADSHOT_MULTIPLIER = 0.18

# Terminal colours.
COLOR_PAIR_SPLATTER = 1
COLOR_ID_SPLATTER = 196

# Player.
PLAYER_THROW_VELOCITY_MIN = 15
PLAYER_THROW_VELOCITY_MAX = 20

PLAYER_THROW_ANGLE_DEGREES_MIN = 40
PLAYER_THROW_ANGLE_DEGREES_MAX = 50

PLAYER_CHAR = "O"
PLAYER_WEAPON_CHAR_VERTICAL = "|"
PLAYER_WEAPON_CHAR_HORIZONTAL = "\u2015"

GAME_END_MSG_GRENADE = "cause of death: grenade"
GAME_END_MSG_CLAYMORE = "cause of death: claymore"
GAME_END_MSG_RESCUED = "You have been rescued!"
GAME_END_MSG_RESCUE_FAILED = "You have been left behind!"

# World.
EARLY_GAME_TIME_THRESHOLD = 30
EARLY_GAME_SPAWN_DELAY_MULTIPLIER = 1.4
INFECTED_DEAD_TIME = 3.0

FIRST_SUPPLY_DROP_DELAY = 20
FIRST_INFECTED_SPAWN_DELAY = 2

RESCUE_ARRIVAL_ETA = 300
RESCUE_ESCAPE_DURATION = 15