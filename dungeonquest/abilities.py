"""Special abilities the player can use, each costing one bomb charge."""

from __future__ import annotations

from .dungeon import EMPTY, Direction, Grid
from .enemy import Enemy
from .player import Player

_JUMP_OBSTACLES = frozenset("XEJPYC")
_ARROW_STOPS = frozenset("XPY")
_ENEMY_TILES = frozenset("EJ")
_HOOK_ANCHORS = frozenset("XCK")

_ARROW_REACH = 8
_HOOK_REACH = 10
_BLAST_RADIUS = 2
_SHIELD_BONUS = 20
_HOOK_DAMAGE = 5


def _inside(grid: Grid, x: int, y: int) -> bool:
    return 0 <= x < grid.cols and 0 <= y < grid.rows


def _ahead(direction: Direction, player: Player, x: int, y: int) -> bool:
    """Return whether ``(x, y)`` lies on the side of the player it faces."""
    dx, dy = direction.delta()
    if dy < 0:
        return y <= player.y
    if dy > 0:
        return y >= player.y
    if dx < 0:
        return x <= player.x
    return x >= player.x


def use_ability(player: Player, grid: Grid, enemies: list[Enemy]) -> bool:
    """Use the player's ability; return whether it cost a bomb charge."""
    if player.bombs <= 0:
        return False

    player.using_ability = True
    print(f"Link usa su habilidad: {player.ability}")

    name = player.ability
    if name == "bomba":
        spent = bomb(player, grid)
    elif name == "salto":
        spent = jump(player, grid)
    elif name == "escudo":
        spent = shield(player)
    elif name == "arco":
        spent = bow(player, grid)
    elif name == "gancho":
        spent = hook(player, grid, enemies)
    else:
        print(f"Habilidad no reconocida: {name}")
        spent = True

    if spent:
        player.spend_charge()
    return spent


def bomb(player: Player, grid: Grid) -> bool:
    """Throw a bomb at the faced square; the charge is always spent."""
    if player.bombs > 0:
        player.use_bomb(grid)
        x, y = grid.target_of(player)
        grid.set_element(y, x, EMPTY)
        print("Bomba usada!")
    else:
        print("No tienes bombas disponibles.")
    return True


def jump(player: Player, grid: Grid) -> bool:
    """Leap two squares ahead over a free square; return whether the jump happened."""
    direction = Direction(player.direction)
    dx, dy = direction.delta()
    mid_x, mid_y = player.x + dx, player.y + dy
    new_x, new_y = player.x + 2 * dx, player.y + 2 * dy

    if not _inside(grid, new_x, new_y):
        print("Salto fuera del mapa. Link pierde el turno.")
        return False

    middle = grid.element_at(mid_x, mid_y)
    if middle in _JUMP_OBSTACLES:
        print(f"Salto fallido: obstáculo en el camino ({middle}). Link pierde el turno.")
        return False

    landing = grid.element_at(new_x, new_y)
    if landing in _JUMP_OBSTACLES:
        print(f"Salto fallido: obstáculo en el destino ({landing}). Link pierde el turno.")
        return False

    print(f"se salta hacia {direction.value}!")
    grid.set_element(player.y, player.x, EMPTY)
    player.x, player.y = new_x, new_y
    grid.set_element(player.y, player.x, "L")
    print(f"Link aterriza en ({player.x}, {player.y}).")
    return True


def shield(player: Player) -> bool:
    """Raise the shield, gaining health; the charge is always spent."""
    player.heal(_SHIELD_BONUS)
    print("¡Escudo activado!")
    return True


def bow(player: Player, grid: Grid) -> bool:
    """Fire an arrow that bursts in a 5x5 area; return whether the arrow flew."""
    direction = Direction(player.direction)
    dx, dy = direction.delta()
    print(f"¡Link dispara una flecha hacia {direction.value}!")

    reach = 0
    for distance in range(1, _ARROW_REACH + 1):
        check_x = player.x + dx * distance
        check_y = player.y + dy * distance
        if not _inside(grid, check_x, check_y):
            break
        tile = grid.element_at(check_y, check_x)
        if tile in _ARROW_STOPS:
            print(f"Flecha se detiene al chocar con '{tile}'.")
            break
        reach = distance

    if reach == 0:
        print("Flecha bloqueada inmediatamente.")
        return False

    centre_x = player.x + dx * reach
    centre_y = player.y + dy * reach
    print(f"¡Explosión 5x5 en ({centre_x}, {centre_y})!")

    hits = 0
    for target_y in range(centre_y - _BLAST_RADIUS, centre_y + _BLAST_RADIUS + 1):
        for target_x in range(centre_x - _BLAST_RADIUS, centre_x + _BLAST_RADIUS + 1):
            if not _inside(grid, target_x, target_y):
                continue
            if not _ahead(direction, player, target_x, target_y):
                continue
            if grid.element_at(target_y, target_x) in _ENEMY_TILES:
                print(f"¡Enemigo golpeado en ({target_x}, {target_y})!")
                hits += 1

    if hits:
        print(f"¡{hits} enemigos reciben 10 de daño cada uno!")
    else:
        print("La flecha no golpea ningún enemigo.")
    return True


def hook(player: Player, grid: Grid, enemies: list[Enemy]) -> bool:
    """Cast the hookshot; return whether it found nothing, which costs the charge."""
    direction = Direction(player.direction)
    dx, dy = direction.delta()
    print(f"se usa el gancho hacia {direction.value}")

    for distance in range(1, _HOOK_REACH + 1):
        check_x = player.x + dx * distance
        check_y = player.y + dy * distance
        if not _inside(grid, check_x, check_y):
            break

        tile = grid.element_at(check_x, check_y)

        if tile in _ENEMY_TILES:
            target = next(
                (e for e in enemies if e.x == check_x and e.y == check_y), None
            )
            if target is not None:
                target.take_damage(_HOOK_DAMAGE)
                print("el gancho golpea al enemigo")
                print(f"el enemigo recibe {_HOOK_DAMAGE} de daño")
            print("Link permanece en su lugar.")
            return False

        if tile in _HOOK_ANCHORS:
            dest_x, dest_y = check_x - dx, check_y - dy
            if (dest_x, dest_y) == (player.x, player.y):
                print("ya estas junto al objetivo.")
                return False
            if _inside(grid, dest_x, dest_y):
                if grid.element_at(dest_y, dest_x) == EMPTY:
                    grid.set_element(player.y, player.x, EMPTY)
                    player.x, player.y = dest_x, dest_y
                    grid.set_element(player.y, player.x, "L")
                else:
                    print("Destino ocupado, no se puede mover.")
            else:
                print("Destino fuera del mapa.")
            return False

    print("El gancho no encuentra objetivo válido.")
    return True