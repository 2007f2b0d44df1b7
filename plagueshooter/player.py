"""The player, their game statistics, and player movement."""

import copy
import threading
import time
from dataclasses import dataclass, field
from typing import Optional

from plagueshooter.audio import play_audio
from plagueshooter.constants import (
    PLAYER_CHAR,
    PLAYER_WEAPON_CHAR_HORIZONTAL,
    PLAYER_WEAPON_CHAR_VERTICAL,
    Direction,
    ExplosiveType,
    FirearmType,
    ReloadType,
)
from plagueshooter.inventory import Inventory
from plagueshooter.mathutils import Position, position_distance
from plagueshooter.randomness import rand_int
from plagueshooter.weapons import Explosive, Firearm

# Fill levels of a spare magazine, from full to nearly empty.
_MAGAZINE_GLYPHS = (
    (1.0, "\u2588"),
    (0.875, "\u2589"),
    (0.75, "\u2586"),
    (0.625, "\u2585"),
    (0.5, "\u2584"),
    (0.375, "\u2583"),
    (0.25, "\u2582"),
    (0.125, "\u2581"),
)
_EMPTY_MAGAZINE_GLYPH = "\u2581"
_HUD_BAR_LENGTH = 10


def _magazine_glyph(fraction):
    for threshold, glyph in _MAGAZINE_GLYPHS:
        if fraction >= threshold:
            return glyph
        if fraction <= 0.125:
            return _EMPTY_MAGAZINE_GLYPH
    return None


def _clamp(value, limits):
    low, high = limits
    return max(low, min(value, high))


@dataclass
class GameStats:
    """Tallies of the player's kills and the message shown at the end."""

    end_game_message: str = ""
    kills: int = 0
    headshots: int = 0
    grenade_kills: int = 0
    claymore_kills: int = 0

    def add_kill(self):
        self.kills += 1

    def add_headshot(self):
        self.headshots += 1

    def add_grenade_kill(self):
        self.grenade_kills += 1

    def add_claymore_kill(self):
        self.claymore_kills += 1


@dataclass(eq=False)
class Player:
    """The survivor controlled from the keyboard."""

    player_char: str = PLAYER_CHAR
    weapon_char: str = PLAYER_WEAPON_CHAR_VERTICAL
    hud_text: str = ""
    alive: bool = True
    can_switch_firearm: bool = True
    active_weapon: Firearm = field(default_factory=lambda: Firearm(FirearmType.RUGER_MK_IV))
    inventory: Inventory = field(default_factory=Inventory)
    position: Position = field(default_factory=Position)
    weapon_position: Position = field(default_factory=Position)
    facing_direction: Direction = Direction.NORTH
    game_stats: GameStats = field(default_factory=GameStats)
    is_reloading: bool = False
    has_planted_claymore: bool = False
    is_rescued: bool = False

    # Appearance and movement.

    def fix_weapon_appearance(self):
        """Place the weapon glyph in front of the player, facing their direction."""
        vertical = self.facing_direction in (Direction.NORTH, Direction.SOUTH)
        self.weapon_char = (
            PLAYER_WEAPON_CHAR_VERTICAL if vertical else PLAYER_WEAPON_CHAR_HORIZONTAL
        )
        column, row = self.position.column, self.position.row
        if vertical:
            row += -1 if self.facing_direction == Direction.NORTH else 1
        else:
            column += -1 if self.facing_direction == Direction.WEST else 1
        self.weapon_position = Position(column, row)

    def move(self, world, direction):
        """Step one cell in ``direction`` if the map allows; return whether it moved."""
        column, row = self.position.column, self.position.row
        col_low, col_high = world.map_column_limits
        row_low, row_high = world.map_row_limits
        if direction == Direction.NORTH:
            target, allowed = Position(column, row - 1), row - 1 >= row_low
        elif direction == Direction.SOUTH:
            target, allowed = Position(column, row + 1), row + 1 <= row_high
        elif direction == Direction.EAST:
            target, allowed = Position(column + 1, row), column + 1 <= col_high
        else:
            target, allowed = Position(column - 1, row), column - 1 >= col_low
        if not allowed:
            return False
        self.position = target
        self.facing_direction = Direction(direction)
        self.fix_weapon_appearance()
        return True

    # Firearms.

    def shoot_firearm(self):
        """Fire one round, blocking for the weapon's firing interval."""
        weapon = self.active_weapon
        if not weapon.can_shoot or self.is_reloading:
            return
        self.can_switch_firearm = False
        weapon.can_shoot = False

        threading.Thread(
            target=play_audio, args=(weapon.shoot_audio_file,), daemon=True
        ).start()

        weapon.magazine.cartridge_count = max(0, weapon.magazine.cartridge_count - 1)
        weapon.loaded_rounds -= 1
        if weapon.is_chambered and weapon.loaded_rounds <= 0:
            weapon.is_chambered = False

        time.sleep(weapon.shoot_interval_ms / 1000)
        self.can_switch_firearm = True
        self.active_weapon.can_shoot = self.active_weapon.loaded_rounds >= 1

    def _sort_magazines(self):
        self.inventory.magazines.sort(key=lambda mag: mag.cartridge_count, reverse=True)

    def _take_fullest_magazine(self, cartridge):
        """Remove and return the fullest spare magazine of ``cartridge``, if any."""
        self._sort_magazines()
        magazines = self.inventory.magazines
        index = next(
            (i for i, mag in enumerate(magazines) if mag.cartridge_type == cartridge), None
        )
        return None if index is None else magazines.pop(index)

    def _finish_reload(self):
        self.is_reloading = False
        self.active_weapon.can_shoot = True

    def reload_firearm(self):
        """Swap in the fullest spare magazine, keeping the old one, or top up by hand."""
        weapon = self.active_weapon
        cartridge = weapon.cartridge_type
        detachable = weapon.feed_system == ReloadType.DETACHABLE_MAGAZINE

        if detachable:
            if self.is_reloading or not self.inventory.has_magazine(cartridge):
                return
        elif not self.inventory.has_ammunition(cartridge):
            return

        weapon.can_shoot = False
        self.is_reloading = True
        current = weapon.magazine

        if not detachable:
            time.sleep(weapon.chamber_reload_delay / 2.0)
            while (
                weapon.magazine.cartridge_count < weapon.magazine.capacity
                and self.inventory.has_ammunition(cartridge)
            ):
                time.sleep(weapon.load_round_time)
                self.inventory.ammunition[cartridge] -= 1
                weapon.magazine.cartridge_count += 1
                weapon.loaded_rounds += 1
            time.sleep(weapon.chamber_reload_delay / 2.0)
            self._finish_reload()
            return

        weapon.loaded_rounds = 1 if weapon.is_chambered else 0

        # An empty magazine is not worth keeping.
        if current.cartridge_count == 0:
            self.is_reloading = False
            self.fast_reload_firearm()
            return

        time.sleep(weapon.reload_time)

        replacement = self._take_fullest_magazine(current.cartridge_type)
        if replacement is not None:
            weapon.magazine = replacement
            self.inventory.magazines.append(current)
        else:
            self.inventory.magazines.append(copy.copy(current))
        self._sort_magazines()
        self._finish_reload()
        weapon.loaded_rounds += weapon.magazine.cartridge_count

    def fast_reload_firearm(self):
        """Drop the current magazine for the fullest spare, or load a single round."""
        weapon = self.active_weapon
        cartridge = weapon.cartridge_type
        detachable = weapon.feed_system == ReloadType.DETACHABLE_MAGAZINE

        if detachable:
            if self.is_reloading or not self.inventory.has_magazine(
                weapon.magazine.cartridge_type
            ):
                return
        elif not self.inventory.has_ammunition(cartridge):
            return

        weapon.can_shoot = False
        self.is_reloading = True

        if not detachable:
            if weapon.loaded_rounds >= weapon.magazine.capacity:
                self._finish_reload()
                return
            time.sleep(weapon.chamber_reload_delay / 2.0)
            time.sleep(weapon.load_round_time)
            self.inventory.ammunition[cartridge] -= 1
            weapon.magazine.cartridge_count += 1
            weapon.loaded_rounds += 1
            time.sleep(weapon.chamber_reload_delay / 2.0)
            self._finish_reload()
            return

        weapon.loaded_rounds = 1 if weapon.is_chambered else 0
        time.sleep(weapon.fast_reload_time)

        replacement = self._take_fullest_magazine(weapon.magazine.cartridge_type)
        if replacement is not None:
            weapon.magazine = replacement

        weapon.loaded_rounds += weapon.magazine.cartridge_count
        if not weapon.is_chambered:
            time.sleep(weapon.chamber_reload_delay)
            weapon.magazine.cartridge_count -= 1
            weapon.is_chambered = True
        self._finish_reload()

    def switch_firearm(self):
        """Make the next firearm of another type active; discard one without ammunition."""
        firearms = self.inventory.firearms
        if not firearms or self.is_reloading or not self.can_switch_firearm:
            return

        current_type = self.active_weapon.firearm_type
        firearms.append(self.active_weapon)

        index = next(
            (i for i, f in enumerate(firearms) if f.firearm_type != current_type), None
        )
        if index is not None:
            self.active_weapon = firearms.pop(index)

        empty = next(
            (
                i
                for i, f in enumerate(firearms)
                if f.loaded_rounds == 0
                and not self.inventory.has_magazine(f.magazine.cartridge_type)
            ),
            None,
        )
        if empty is not None:
            del firearms[empty]

    # Explosives.

    def throw_grenade(self) -> Optional[Explosive]:
        """Take a grenade from the inventory, aimed the way the player faces."""
        if self.is_reloading:
            return None
        explosives = self.inventory.explosives
        index = next(
            (
                i
                for i, explosive in enumerate(explosives)
                if explosive.explosive_type == ExplosiveType.M67_GRENADE
            ),
            None,
        )
        if index is None:
            return None
        grenade = explosives.pop(index)
        grenade.explosive_id = rand_int()
        grenade.facing_direction = self.facing_direction
        grenade.position = self.position
        return grenade

    def plant_claymore(self, world):
        """Plant a claymore in the cell in front of the player, facing away from them."""
        has_claymore = ExplosiveType.M18A1_CLAYMORE in self.inventory.explosive_counts()
        if self.is_reloading or not has_claymore:
            return

        claymore = Explosive(ExplosiveType.M18A1_CLAYMORE)
        explosives = self.inventory.explosives
        index = next(
            i
            for i, explosive in enumerate(explosives)
            if explosive.explosive_type == ExplosiveType.M18A1_CLAYMORE
        )
        del explosives[index]

        claymore.explosive_id = rand_int()
        claymore.facing_direction = self.facing_direction

        direction = self.facing_direction
        if direction in (Direction.NORTH, Direction.SOUTH):
            south = direction == Direction.SOUTH
            claymore.explosive_char = "^" if south else "V"
            row = _clamp(self.position.row + (1 if south else -1), world.map_row_limits)
            claymore.position = Position(self.position.column, row)
        else:
            east = direction == Direction.EAST
            claymore.explosive_char = "<" if east else ">"
            column = _clamp(
                self.position.column + (1 if east else -1), world.map_column_limits
            )
            claymore.position = Position(column, self.position.row)

        world.active_explosives.append(claymore)
        self.has_planted_claymore = True

    # Items.

    def pickup_item(self, world):
        """Empty the first supply drop within two cells into the inventory."""
        if self.is_reloading:
            return
        drop = next(
            (
                d
                for d in world.supply_drops
                if position_distance(self.position, d.position) <= 2
            ),
            None,
        )
        if drop is None:
            return

        inventory = self.inventory
        for item in drop.items.firearms:
            # A firearm already owned only contributes its magazine.
            if (
                inventory.has_firearm(item.firearm_type)
                or self.active_weapon.firearm_type == item.firearm_type
            ):
                inventory.magazines.append(item.magazine)
                continue

            inventory.firearms.append(item)

            weapon = self.active_weapon
            if weapon.loaded_rounds == 0 and not inventory.has_magazine(
                weapon.magazine.cartridge_type
            ):
                self.switch_firearm()
            elif (
                weapon.feed_system == ReloadType.DIRECT_LOAD
                and weapon.loaded_rounds == 0
                and not inventory.has_ammunition(weapon.cartridge_type)
            ):
                self.switch_firearm()

        inventory.explosives.extend(drop.items.explosives)
        inventory.magazines.extend(drop.items.magazines)
        for cartridge, count in drop.items.ammunition.items():
            inventory.ammunition[cartridge] = inventory.ammunition.get(cartridge, 0) + count

        world.supply_drops.remove(drop)

    # Heads-up display.

    def _bullets_text(self):
        weapon = self.active_weapon
        mag = weapon.magazine
        count = int(mag.cartridge_count / mag.capacity * _HUD_BAR_LENGTH)
        if count == 0 and weapon.loaded_rounds > 0:
            count = 1
        text = "[" + "|" * count + " " * (_HUD_BAR_LENGTH - count) + "]"
        if mag.is_hollow_point:
            text += " HP"
        return text

    def _spares_text(self):
        weapon = self.active_weapon
        if weapon.feed_system == ReloadType.DIRECT_LOAD:
            return "|" * self.inventory.ammunition_count(weapon.cartridge_type)
        glyphs = (
            _magazine_glyph(mag.cartridge_count / mag.capacity)
            for mag in self.inventory.magazines
            if mag.cartridge_type == weapon.cartridge_type
        )
        return "".join(f"{glyph} " for glyph in glyphs if glyph is not None)

    def update_hud_text(self):
        """Rebuild the status text shown above the map, and return it."""
        weapon = self.active_weapon
        if weapon.feed_system == ReloadType.DIRECT_LOAD:
            display_spares = self.inventory.has_ammunition(weapon.cartridge_type)
        else:
            display_spares = self.inventory.has_magazine(weapon.cartridge_type)
        no_ammo = not display_spares and weapon.loaded_rounds < 1

        text = f"Active firearm: {weapon.name}"
        if self.is_reloading:
            text += " (reloading...)"
        text += " (no ammo)" if no_ammo else " " + self._bullets_text()
        if display_spares:
            text += " / " + self._spares_text()

        counts = self.inventory.explosive_counts()
        grenades = counts.get(ExplosiveType.M67_GRENADE, 0)
        claymores = counts.get(ExplosiveType.M18A1_CLAYMORE, 0)
        if grenades:
            text += f"\nm67 grenades: {grenades}"
        if claymores:
            text += ", " if grenades > 0 else "\n"
            text += f"claymores: {claymores}"
        text += f"\nkills: {self.game_stats.kills}"

        self.hud_text = text
        return text


def player_is_dead(world, player):
    """True if a living infected stands on the player's cell."""
    return any(inf.alive and inf.position == player.position for inf in world.infected)


def set_player_spawn_position(world, player):
    """Place the player midway across the map and three quarters of the way down."""
    col_low, col_high = world.map_column_limits
    row_low, row_high = world.map_row_limits
    player.position = Position(
        int((col_high - col_low) * 0.5 + col_low),
        int((row_high - row_low) * 0.75 + row_low),
    )