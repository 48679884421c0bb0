"""Loading dungeons, boss rooms, enemies and bosses from comma-separated files."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Iterator

from .boss import Boss
from .dungeon import BLANK, BossRoom, Dungeon
from .enemy import Enemy

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _TruncatedRecord(ValueError):
    """A record ended before all of its fields were read."""


def _to_int(text: str) -> int:
    """Parse the integer at the start of ``text``, ignoring anything after it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group(1))


def _tile(text: str) -> str:
    return text[0] if text else BLANK


class _Fields:
    """The comma-separated fields of one line, read in order."""

    def __init__(self, line: str) -> None:
        parts = line.split(",")
        if parts[-1] == "":
            parts.pop()
        self._parts = iter(parts)
        self.current = ""

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        self.current = next(self._parts)
        return self.current

    def text(self) -> str:
        try:
            return next(self)
        except StopIteration:
            raise _TruncatedRecord("record ends too early") from None

    def number(self) -> int:
        return _to_int(self.text())


def _read_lines(path: str | os.PathLike[str]) -> list[str]:
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def _read_pattern(fields: _Fields, count: int) -> list[tuple[int, int]]:
    """Read ``count`` movement steps, each kept in the order it is written."""
    pattern = []
    for _ in range(count):
        first = fields.number()
        second = fields.number()
        pattern.append((first, second))
    return pattern


def _read_enemy(y: int, fields: _Fields) -> Enemy:
    """Read the rest of an enemy record whose first field, ``y``, is already known."""
    x = fields.number()
    move_count = fields.number()
    pattern = _read_pattern(fields, move_count)
    health = fields.number()
    damage = fields.number()
    attack_range = fields.number()
    frequency = fields.number()
    return Enemy(x, y, pattern, health, damage, attack_range, frequency, move_count)


def _read_boss(name: str, fields: _Fields) -> Boss:
    """Read the rest of a boss record that starts with its ``name``."""
    y = fields.number()
    x = fields.number()
    move_count = fields.number()
    pattern = _read_pattern(fields, move_count)
    health = fields.number()
    damage = fields.number()
    attack_range = fields.number()
    frequency = fields.number()
    return Boss(x, y, pattern, health, damage, attack_range, frequency, name)


def _fill_boss_room(room: BossRoom, fields: _Fields) -> None:
    room.resize(fields.number(), fields.number())
    for i in range(room.rows):
        for j in range(room.cols):
            room.tiles[i][j] = _tile(fields.text())


def load_dungeons(path: str | os.PathLike[str]) -> tuple[list[Dungeon], list[BossRoom]]:
    """Read every dungeon, each followed by its boss room, one per line."""
    dungeons: list[Dungeon] = []
    rooms: list[BossRoom] = []

    for line in _read_lines(path):
        fields = _Fields(line)
        room = BossRoom()
        rooms.append(room)

        rows = fields.number()
        cols = fields.number()
        tiles = [[BLANK] * cols for _ in range(rows)]
        for i in range(rows):
            for j in range(cols):
                tile = _tile(fields.text())
                tiles[i][j] = tile
                if tile == "E":
                    room.boss_entrance = (i, j)

        _fill_boss_room(room, fields)
        dungeons.append(Dungeon(rows=rows, cols=cols, tiles=tiles, enemies=[]))

    if not dungeons:
        print(f"No se encontraron mazmorras en el archivo: {path}", file=sys.stderr)
    return dungeons, rooms


def load_enemies(path: str | os.PathLike[str]) -> tuple[list[Enemy], list[Boss]]:
    """Read one enemy per line; bosses are not listed in this format."""
    enemies: list[Enemy] = []
    bosses: list[Boss] = []

    for line in _read_lines(path):
        fields = _Fields(line)
        y = fields.number()
        x = fields.number()
        move_count = fields.number()
        pattern = []
        for _ in range(move_count):
            step_x = fields.number()
            step_y = fields.number()
            pattern.append((step_y, step_x))
        health = fields.number()
        damage = fields.number()
        attack_range = fields.number()
        frequency = fields.number()
        enemies.append(
            Enemy(x, y, pattern, health, damage, attack_range, frequency, move_count)
        )

    if not enemies:
        print(f"No se encontraron enemigos en el archivo: {path}", file=sys.stderr)
    return enemies, bosses


def render_dungeons(dungeons: list[Dungeon]) -> str:
    """Print and return every dungeon map, numbered from 1."""
    parts = ["\n=== Mazmorras ===\n"]
    for number, dungeon in enumerate(dungeons, start=1):
        parts.append(f"Mazmorras #{number}\n")
        parts.append(dungeon.render())
        parts.append("\n")
    text = "".join(parts)
    print(text, end="")
    return text


def load_level_enemies(
    selection: int, path: str | os.PathLike[str]
) -> tuple[list[Enemy], Boss]:
    """Read the enemies and the boss of the dungeon at index ``selection``.

    Enemy records come first; the first field that is not a number is taken
    as the boss's name and the boss record follows it.
    """
    enemies: list[Enemy] = []
    boss = Boss()

    for number, line in enumerate(_read_lines(path), start=1):
        if number != selection + 1:
            continue
        fields = _Fields(line)
        for token in fields:
            try:
                enemies.append(_read_enemy(_to_int(token), fields))
            except _TruncatedRecord:
                raise
            except ValueError:
                boss = _read_boss(fields.current, fields)
                break
        break

    return enemies, boss


def load_boss_room_enemies(
    selection: int, path: str | os.PathLike[str]
) -> tuple[list[Enemy], Boss]:
    """Read the boss-room enemies of the dungeon at index ``selection``.

    Only records that come after the boss are read as enemies, and the boss
    itself is only recognised while reading such a record.
    """
    enemies: list[Enemy] = []
    boss = Boss()

    for number, line in enumerate(_read_lines(path), start=1):
        if number != selection + 1:
            continue
        fields = _Fields(line)
        boss_found = False
        for token in fields:
            try:
                if boss_found:
                    enemies.append(_read_enemy(_to_int(token), fields))
            except _TruncatedRecord:
                raise
            except ValueError:
                boss_found = True
                boss = _read_boss(fields.current, fields)
        break

    return enemies, boss


def filter_enemies_by_map(enemies: list[Enemy], dungeon: Dungeon) -> list[Enemy]:
    """Keep, for each 'E' tile on the map, the first enemy standing on it."""
    for index, enemy in enumerate(enemies):
        print(f"  Enemigo {index}: ({enemy.x}, {enemy.y})")

    kept: list[Enemy] = []
    for i in range(dungeon.rows):
        for j in range(dungeon.cols):
            if dungeon.element_at(i, j) != "E":
                continue
            print(f"  Encontrada 'E' en mapa: ({i}, {j})")
            for index, enemy in enumerate(enemies):
                print(f"    Comparando con enemigo {index}: ({enemy.x}, {enemy.y})")
                if enemy.x == i and enemy.y == j:
                    kept.append(enemy)
                    break

    print(f"📋 Enemigos filtrados: {len(kept)}")
    return kept


def load_boss_room(path: str | os.PathLike[str], selection: int) -> BossRoom:
    """Read the boss room on line ``selection`` (counted from 1)."""
    room = BossRoom()

    for number, line in enumerate(_read_lines(path), start=1):
        if number != selection:
            continue
        fields = _Fields(line)
        rows = fields.number()
        cols = fields.number()
        for i in range(rows):
            for j in range(cols):
                if _tile(fields.text()) == "Y":
                    room.boss_entrance = (i, j)
        _fill_boss_room(room, fields)

    return room