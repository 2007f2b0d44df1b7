"""Inventories of weapons and ammunition, and supply drops that carry them."""

from collections import Counter
from dataclasses import dataclass, field

from plagueshooter.mathutils import Position
from plagueshooter.randomness import rand_int_in_range


@dataclass
class Inventory:
    """Firearms, explosives, magazines and loose cartridges held together."""

    firearms: list = field(default_factory=list)
    explosives: list = field(default_factory=list)
    magazines: list = field(default_factory=list)
    ammunition: dict = field(default_factory=dict)

    def magazine_count(self, cartridge):
        """Number of magazines holding ``cartridge``."""
        return sum(1 for mag in self.magazines if mag.cartridge_type == cartridge)

    def ammunition_count(self, cartridge):
        """Number of loose cartridges of the given type."""
        return self.ammunition.get(cartridge, 0)

    def has_firearm(self, firearm_type):
        """True if a firearm of ``firearm_type`` is held."""
        return any(firearm.firearm_type == firearm_type for firearm in self.firearms)

    def explosive_counts(self):
        """Map each explosive type present to how many are held."""
        return dict(Counter(explosive.explosive_type for explosive in self.explosives))

    def has_magazine(self, cartridge):
        """True if at least one magazine holds ``cartridge``."""
        return any(mag.cartridge_type == cartridge for mag in self.magazines)

    def has_ammunition(self, cartridge):
        """True if at least one loose cartridge of the type is held."""
        return self.ammunition_count(cartridge) >= 1


@dataclass
class SupplyDrop:
    """A crate of items lying on the map."""

    items: Inventory = field(default_factory=Inventory)
    position: Position = field(default_factory=Position)
    item_char: str = "$"


def random_supply_drop(column_range, row_range):
    """An empty supply drop at a random position inside the given ranges.

    A drop too close to the top row, where infected spawn, is moved two rows down.
    """
    column = rand_int_in_range(*column_range)
    row = rand_int_in_range(*row_range)
    if row - 2 < row_range[0]:
        row += 2
    return SupplyDrop(position=Position(column, row))