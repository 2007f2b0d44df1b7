# plagueshooter

A survival shooter played in the terminal. You stand in a walled map while
groups of infected move towards you. Shoot, throw grenades and plant claymores
to hold them off, and collect supply drops for new firearms and ammunition.
After five minutes a rescue aircraft lands somewhere on the map. You then have
fifteen seconds to reach it before it leaves without you.

## Installing

```
pip install .
```

The game draws on the terminal with curses, so it needs a terminal that curses
supports, such as one on Linux or macOS.

Sound effects are played through pygame. They are loaded from WAV files in an
`assets/` directory in the working directory, the one you start the game from.
If a file is missing or no audio device can be opened, the game runs on without
that sound.

## Playing

```
plague-shooter
```

To show blood splatter in red on terminals that support colour:

```
plague-shooter --colors
```

### Controls

| Key               | Action                                      |
|-------------------|---------------------------------------------|
| `w` / Up          | Move north                                  |
| `s` / Down        | Move south                                  |
| `a` / Left        | Move west                                   |
| `d` / Right       | Move east                                   |
| Space             | Fire the active weapon                      |
| `r`               | Reload, keeping the old magazine            |
| `R`               | Fast reload, dropping the current magazine  |
| `g`               | Throw a grenade                             |
| `c`               | Plant a claymore; press again to detonate it |
| `e`               | Pick up a supply drop (`$`) within two cells |
| `q`               | Switch firearm                              |
| Backspace         | Quit                                        |

The Remington 700 is loaded round by round from loose cartridges: `r` fills it
up, and `R` loads a single round.

### What you will see

- `O` is you. Your weapon is drawn next to you, on the side you face.
- `Z` is a living infected, `D` a dead one, and `*` blood splatter.
- `$` marks a supply drop, `•` a grenade, and `^ V < >` a planted claymore.
- `✈` is the rescue aircraft. Stand within two cells of it to escape.

The status line at the top shows your active firearm, the rounds left in its
magazine, your spare magazines or cartridges, your grenades and claymores, and
your kill count. Above the map a countdown shows the time until the rescue
arrives, and then the time left to board it.

The game ends when an infected reaches you, when your own grenade or claymore
kills you, when you board the rescue, or when the rescue leaves without you. A
summary of kills, headshots, grenade and claymore kills and the total playtime
is then shown. Press Backspace to leave.

## Using the pieces

The game rules can be driven from Python without a terminal, for example to try
out the ballistics:

```python
from plagueshooter.constants import Direction, FirearmType
from plagueshooter.mathutils import Position
from plagueshooter.physics import bullet_hit_location, bullet_projectile_positions
from plagueshooter.weapons import Firearm
from plagueshooter.world import World

world = World((120, 40))
path = bullet_projectile_positions(world, Position(40, 20), Direction.NORTH)
print(bullet_hit_location(5.0, Firearm(FirearmType.AR15)))
```

`World` takes the terminal size as `(columns, rows)`; without it the current
terminal's size is used. `bullet_hit_location` returns a `HitLocation`, or
`None` when the shot misses.

## Running the tests

```
pip install .[test]
pytest
```