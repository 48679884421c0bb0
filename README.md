# dungeonquest

Building blocks for a turn-based dungeon crawler on character grids. The
player (Link) moves over a map, opens chests and doors, strikes enemies with
a sword and uses one special ability whose uses are counted in bombs. Levels,
boss rooms, enemies and bosses are read from comma-separated text files.

The game messages the objects print as they act are in Spanish.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dungeonquest.dungeon`

- `Direction`: `UP`, `DOWN`, `LEFT`, `RIGHT`, whose values are the strings
  `"arriba"`, `"abajo"`, `"izquierda"`, `"derecha"`. `delta()` gives the
  `(dx, dy)` step; up is `y - 1`.
- `Grid(rows, cols, tiles)`: a map of one-character tiles.
  - `element_at(x, y)` takes column then row and returns `"0"` off the map.
  - `set_element(row, col, value)` takes row then column and ignores
    positions off the map. Note the two methods take their coordinates in
    opposite order.
  - `target_of(player)` returns the `(x, y)` square the player faces.
  - `player_start()` returns `(row, col)` of the first `L`, or `(0, 0)`.
  - `render()` returns the map as text (`L` and `Z` highlighted, `X` dimmed
    with ANSI colours); `show()` writes it to standard output.
- `Dungeon`: a `Grid` with an `enemies` list.
- `BossRoom`: a `Grid` with `enemies`, a `boss` and a `boss_entrance`
  position; `resize(rows, cols)` changes its size, keeping tiles that fit.

### `dungeonquest.player`

`Player(x, y)` starts with 100 health, 20 damage, 3 bombs and facing up.
It offers `choose_direction(choice)` (menu choice 1–4; anything else prints
an error and faces up), `move()`, `can_move(grid, x, y)` (free on `-`; a
`p`/`P` door is passed by spending a key), `add_key()`, `use_key()`,
`add_boss_key()`, `use_boss_key()`, `use_bomb(grid)`, `spend_charge()`,
`attack()`, `attack_enemies(grid, enemies)` (hits the enemy on the faced
square if the map shows `E` or `J` there and returns it), `open_chest(grid)`,
`open_door()`, `enter_boss_room()`, `inventory()`, `in_range(enemy)`,
`take_damage(amount)` (health never drops below 0) and `heal(amount)`.

### `dungeonquest.enemy` and `dungeonquest.boss`

- `Enemy(x, y, movement_pattern, health, damage, attack_range,
  attack_frequency, move_count)`: `take_damage(amount)`, `attack(player)`
  (only once `attack_frequency` turns have passed; returns whether it
  struck), `tick()` and `reset_cooldown()`.
- `Boss(x, y, movement_pattern, health, damage, attack_range,
  attack_frequency, name)`: holds a boss's data; defaults are 100 health,
  20 damage, range 1, frequency 1 and the name `"Default"`.

### `dungeonquest.abilities`

`use_ability(player, grid, enemies)` does nothing if the player has no bombs
left; otherwise it runs the ability named by `player.ability` and, when that
ability reports it, spends one bomb. The names are:

| `player.ability` | function | effect |
|------------------|----------|--------|
| `"bomba"`  | `bomb(player, grid)` | clears the faced square |
| `"salto"`  | `jump(player, grid)` | leaps two squares if the way is clear |
| `"escudo"` | `shield(player)` | gains 20 health |
| `"arco"`   | `bow(player, grid)` | fires up to 8 squares and counts `E`/`J` tiles in a 5x5 burst |
| `"gancho"` | `hook(player, grid, enemies)` | up to 10 squares: hurts an enemy for 5, or pulls the player next to an `X`, `C` or `K` tile |

Any other name prints a message and still spends a bomb.

### `dungeonquest.loader`

All readers take a path and raise `OSError` if the file cannot be opened and
`ValueError` if a field that should be a number is not.

- `load_dungeons(path)` returns `(dungeons, boss_rooms)`. Each line is
  `rows,cols,` followed by `rows*cols` tiles for the dungeon, then
  `rows,cols,` and the tiles of its boss room.
- `load_boss_room(path, selection)` reads the boss room from line
  `selection` (counted from 1) of such a file; `boss_entrance` is the last
  `Y` tile of the dungeon part.
- `load_enemies(path)` reads one enemy per line:
  `y,x,n,` then `n` movement pairs, then `health,damage,range,frequency`.
  It returns `(enemies, [])`.
- `load_level_enemies(selection, path)` reads line `selection + 1`: enemy
  records, then a boss record that starts with the boss's name. Returns
  `(enemies, boss)`.
- `load_boss_room_enemies(selection, path)` reads the same kind of line but
  keeps only the enemy records that follow the boss.
- `filter_enemies_by_map(enemies, dungeon)` keeps, for each `E` tile, the
  first enemy standing on it.
- `render_dungeons(dungeons)` prints and returns every map, numbered from 1.

## Example

```python
from dungeonquest.abilities import use_ability
from dungeonquest.loader import filter_enemies_by_map, load_dungeons, load_level_enemies
from dungeonquest.player import Player

dungeons, boss_rooms = load_dungeons("dungeons.csv")
dungeon = dungeons[0]
enemies, boss = load_level_enemies(0, "enemies.csv")
enemies = filter_enemies_by_map(enemies, dungeon)

row, col = dungeon.player_start()
player = Player(col, row)
player.choose_direction(4)          # face right
player.attack_enemies(dungeon, enemies)
player.ability = "arco"
use_ability(player, dungeon, enemies)
print(dungeon.render())
```

## What it does not do

The package has no command to run and no game loop: nothing reads the
player's turns from the keyboard, chooses a level, moves enemies along their
movement patterns or ends the game. Enemies only attack when `Enemy.attack`
is called, and `Boss` holds data but has no actions of its own. Putting these
pieces together into a playable game is left to the caller.