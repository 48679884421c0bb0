import pytest

from dungeonquest.boss import Boss
from dungeonquest.dungeon import Dungeon
from dungeonquest.enemy import Enemy
from dungeonquest.loader import (
    filter_enemies_by_map,
    load_boss_room,
    load_boss_room_enemies,
    load_dungeons,
    load_enemies,
    load_level_enemies,
    render_dungeons,
)

DUNGEON_LINE = "2,3,L,-,E,X,-,-,2,2,Y,-,-,L"


@pytest.fixture
def write(tmp_path):
    def _write(*lines):
        path = tmp_path / "data.csv"
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return path

    return _write


def test_load_dungeons_reads_map_and_boss_room(write):
    dungeons, rooms = load_dungeons(write(DUNGEON_LINE))
    assert len(dungeons) == 1
    assert len(rooms) == 1
    dungeon = dungeons[0]
    assert (dungeon.rows, dungeon.cols) == (2, 3)
    assert dungeon.tiles == [["L", "-", "E"], ["X", "-", "-"]]
    room = rooms[0]
    assert (room.rows, room.cols) == (2, 2)
    assert room.tiles == [["Y", "-"], ["-", "L"]]
    assert room.boss_entrance == (0, 2)


def test_load_dungeons_one_per_line(write):
    dungeons, rooms = load_dungeons(write(DUNGEON_LINE, "1,1,L,1,1,-"))
    assert len(dungeons) == len(rooms) == 2
    assert dungeons[1].tiles == [["L"]]
    assert rooms[1].tiles == [["-"]]


def test_load_dungeons_empty_file_warns(write, capsys):
    dungeons, rooms = load_dungeons(write())
    assert (dungeons, rooms) == ([], [])
    assert "No se encontraron mazmorras" in capsys.readouterr().err


def test_load_dungeons_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dungeons(tmp_path / "missing.csv")


def test_load_dungeons_truncated_line_raises(write):
    with pytest.raises(ValueError):
        load_dungeons(write("2,2,L,-"))


def test_load_enemies_swaps_pattern_pairs(write):
    enemies, bosses = load_enemies(write("1,2,1,3,4,50,10,3,2"))
    assert bosses == []
    assert len(enemies) == 1
    enemy = enemies[0]
    assert (enemy.x, enemy.y) == (2, 1)
    assert enemy.movement_pattern == [(4, 3)]
    assert (enemy.health, enemy.damage, enemy.attack_range) == (50, 10, 3)
    assert enemy.attack_frequency == 2
    assert enemy.move_count == 1


def test_load_enemies_tolerates_trailing_text(write):
    enemies, _ = load_enemies(write(" 7abc,2,0,50,10,3,2"))
    assert enemies[0].y == 7


def test_load_enemies_rejects_non_number(write):
    with pytest.raises(ValueError):
        load_enemies(write("a,2,0,50,10,3,2"))


def test_load_enemies_empty_file_warns(write, capsys):
    enemies, bosses = load_enemies(write())
    assert (enemies, bosses) == ([], [])
    assert "No se encontraron enemigos" in capsys.readouterr().err


def test_load_level_enemies_reads_enemies_and_boss(write):
    path = write(
        "9,9,0,1,1,1,1",
        "1,2,0,30,5,1,1,Ganon,4,5,1,1,0,200,25,2,3",
    )
    enemies, boss = load_level_enemies(1, path)
    assert enemies == [Enemy(2, 1, [], 30, 5, 1, 1, 0)]
    assert boss == Boss(5, 4, [(1, 0)], 200, 25, 2, 3, "Ganon")
    assert (boss.origin_x, boss.origin_y) == (5, 4)


def test_load_level_enemies_keeps_pattern_order(write):
    enemies, boss = load_level_enemies(0, write("1,2,1,3,4,30,5,1,1"))
    assert enemies[0].movement_pattern == [(3, 4)]
    assert boss == Boss()


def test_load_level_enemies_unknown_line_gives_defaults(write):
    enemies, boss = load_level_enemies(5, write("1,2,0,30,5,1,1"))
    assert enemies == []
    assert boss == Boss()


def test_load_level_enemies_name_inside_record_starts_boss(write):
    enemies, boss = load_level_enemies(0, write("1,Ganon,4,5,0,200,25,2,3"))
    assert enemies == []
    assert boss.name == "Ganon"
    assert (boss.x, boss.y) == (5, 4)
    assert boss.health == 200


def test_load_level_enemies_bad_boss_field_raises(write):
    with pytest.raises(ValueError):
        load_level_enemies(0, write("Ganon,4,five,0,200,25,2,3"))


def test_load_level_enemies_truncated_raises(write):
    with pytest.raises(ValueError):
        load_level_enemies(0, write("1,2,0,30"))


def test_load_boss_room_enemies_never_sees_leading_boss(write):
    path = write("1,2,0,30,5,1,1,Ganon,4,5,0,200,25,2,3,3,3,0,10,2,1,1")
    enemies, boss = load_boss_room_enemies(0, path)
    assert enemies == []
    assert boss == Boss()


def test_load_boss_room_enemies_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_boss_room_enemies(0, tmp_path / "missing.csv")


def test_filter_enemies_by_map_keeps_enemies_on_tiles():
    dungeon = Dungeon(
        rows=3,
        cols=3,
        tiles=[["-", "-", "-"], ["-", "-", "E"], ["-", "-", "-"]],
    )
    on_tile = Enemy(x=2, y=1, health=10)
    elsewhere = Enemy(x=0, y=0, health=10)
    kept = filter_enemies_by_map([elsewhere, on_tile], dungeon)
    assert kept == [on_tile]


def test_filter_enemies_by_map_without_enemy_tiles():
    dungeon = Dungeon(rows=2, cols=2, tiles=[["-", "-"], ["-", "L"]])
    assert filter_enemies_by_map([Enemy(x=0, y=0)], dungeon) == []


def test_filter_enemies_by_map_takes_first_match_only():
    dungeon = Dungeon(rows=2, cols=2, tiles=[["E", "-"], ["-", "-"]])
    first = Enemy(x=0, y=0, health=1)
    second = Enemy(x=0, y=0, health=2)
    kept = filter_enemies_by_map([first, second], dungeon)
    assert len(kept) == 1
    assert kept[0] is first


def test_load_boss_room_reads_selected_line(write):
    path = write("1,1,L,1,1,-", "2,2,L,Y,-,-,2,3,-,-,-,L,-,-")
    room = load_boss_room(path, 2)
    assert (room.rows, room.cols) == (2, 3)
    assert room.tiles == [["-", "-", "-"], ["L", "-", "-"]]
    assert room.boss_entrance == (0, 1)


def test_load_boss_room_unknown_line_is_empty(write):
    room = load_boss_room(write(DUNGEON_LINE), 4)
    assert (room.rows, room.cols) == (0, 0)
    assert room.tiles == []


def test_load_boss_room_matches_load_dungeons_room(write):
    path = write(DUNGEON_LINE)
    _, rooms = load_dungeons(path)
    room = load_boss_room(path, 1)
    assert room.tiles == rooms[0].tiles
    assert (room.rows, room.cols) == (rooms[0].rows, rooms[0].cols)


def test_render_dungeons_numbers_each_map(capsys):
    dungeons = [
        Dungeon(rows=1, cols=1, tiles=[["-"]]),
        Dungeon(rows=1, cols=2, tiles=[["E", "-"]]),
    ]
    text = render_dungeons(dungeons)
    assert text.startswith("\n=== Mazmorras ===\n")
    assert "Mazmorras #1\n" in text
    assert "Mazmorras #2\n" in text
    assert dungeons[1].render() in text
    assert capsys.readouterr().out == text


def test_render_dungeons_empty_list():
    assert render_dungeons([]) == "\n=== Mazmorras ===\n"