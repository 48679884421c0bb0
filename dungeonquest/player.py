"""The player character: position, inventory and actions."""

from __future__ import annotations

from dataclasses import dataclass

from .dungeon import EMPTY, Direction, Grid
from .enemy import Enemy

_MENU_CHOICES = {
    1: Direction.UP,
    2: Direction.DOWN,
    3: Direction.LEFT,
    4: Direction.RIGHT,
}

_DOORS = ("p", "P")
_BOSS_DOORS = ("y", "Y")
_ENEMY_TILES = ("E", "J")


@dataclass
class Player:
    """The hero exploring the dungeon."""

    x: int = 0
    y: int = 0
    health: int = 100
    damage: int = 20
    attack_range: int = 1
    ability: str = ""
    direction: Direction = Direction.UP
    taking_damage: bool = False
    keys: int = 0
    boss_keys: int = 0
    steps: int = 0
    chests_opened: int = 0
    doors_opened: int = 0
    enemies_defeated: int = 0
    bombs: int = 3
    using_ability: bool = False
    attacking: bool = False
    in_boss_room: bool = False
    has_won: bool = False

    def choose_direction(self, choice: int | str) -> Direction:
        """Face the direction picked from the menu (1-4); anything else faces up."""
        try:
            direction = _MENU_CHOICES[int(choice)]
        except (ValueError, TypeError, KeyError):
            print("instruccion invalida")
            print("Opciones válidas: 1, 2, 3, 4")
            direction = Direction.UP
        self.direction = direction
        return direction

    def move(self) -> None:
        """Step one square in the facing direction."""
        dx, dy = Direction(self.direction).delta()
        self.x += dx
        self.y += dy

    def can_move(self, grid: Grid, x: int, y: int) -> bool:
        """Return whether the square at ``x``, ``y`` can be entered; a door uses a key."""
        tile = grid.element_at(x, y)
        if tile == EMPTY:
            return True
        if tile in _DOORS and self.keys > 0:
            self.keys -= 1
            print("Usas una llave")
            return True
        if tile in _BOSS_DOORS and self.boss_keys > 0:
            print("Interactua con esta puerta para usarla")
            return False
        return False

    def use_key(self) -> None:
        """Spend one key."""
        self.keys -= 1

    def use_boss_key(self) -> None:
        """Spend one boss key."""
        self.boss_keys -= 1

    def add_key(self) -> None:
        """Pick up a key."""
        self.keys += 1

    def add_boss_key(self) -> None:
        """Pick up a boss key."""
        self.boss_keys += 1

    def use_bomb(self, grid: Grid) -> bool:
        """Blow up the faced square if a bomb is left; return whether one was used."""
        if self.bombs <= 0:
            print("No tienes bombas disponibles!")
            return False
        self.bombs -= 1
        first, second = grid.target_of(self)
        print(f"Bomba colocada en: ({first}, {second})")
        grid.set_element(first, second, EMPTY)
        print(f"Link usa una bomba! Bombas restantes: {self.bombs}")
        return True

    def spend_charge(self) -> None:
        """Use up one bomb as the cost of an ability."""
        self.bombs -= 1

    def attack(self) -> None:
        """Swing the sword."""
        self.attacking = True
        print("Link ataca con su espada")

    def attack_enemies(self, grid: Grid, enemies: list[Enemy]) -> Enemy | None:
        """Strike the faced square; return the enemy that was hit, if any."""
        self.attacking = True
        print("Link ataca con su espada!")
        dx, dy = Direction(self.direction).delta()
        target_x, target_y = self.x + dx, self.y + dy

        if grid.element_at(target_x, target_y) not in _ENEMY_TILES:
            print("El ataque no le da a un enemigo")
            return None

        print(f"¡Golpe conectado! Enemigo recibe {self.damage} de daño.")
        for index, enemy in enumerate(enemies):
            print(index)
            if enemy.x == target_x and enemy.y == target_y:
                print(f"Enemigo encontrado en la posición ({target_x}, {target_y}).")
                print(f"Vida del enemigo antes del ataque: {enemy.health}")
                enemy.take_damage(self.damage)
                print(f"Vida del enemigo después del ataque: {enemy.health}")
                if enemy.health <= 0:
                    self.enemies_defeated += 1
                    print("Enemigo derrotado!")
                return enemy
        return None

    def open_chest(self, grid: Grid) -> tuple[int, int]:
        """Open the chest in the faced square and return its position."""
        self.chests_opened += 1
        first, second = grid.target_of(self)
        grid.set_element(first, second, EMPTY)
        print(f"Cofre abierto en la posición: ({first}, {second})")
        return first, second

    def open_door(self) -> None:
        """Count an opened door."""
        self.doors_opened += 1
        print("Link abre una puerta!")

    def enter_boss_room(self) -> None:
        """Move into the boss room."""
        self.in_boss_room = True
        print("Link entra a la sala del jefe!")

    def inventory(self) -> str:
        """Print and return a summary of the player's belongings."""
        text = "\n".join(
            [
                "=== INVENTARIO ===",
                f"Vida: {self.health}",
                f"Llaves: {self.keys}",
                f"Llaves de Jefe: {self.boss_keys}",
                f"Bombas: {self.bombs}",
                f"Cofres abiertos: {self.chests_opened}",
                f"Puertas abiertas: {self.doors_opened}",
            ]
        )
        print(text)
        return text

    def in_range(self, enemy: Enemy) -> bool:
        """Return whether the player stands inside the enemy's square attack area."""
        reach = int((enemy.attack_range - 1) / 2)
        return abs(self.x - enemy.x) <= reach and abs(self.y - enemy.y) <= reach

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` health, never dropping below zero."""
        self.health -= amount
        self.taking_damage = True
        print(f"Recibes {amount} de daño")
        if self.health <= 0:
            self.health = 0
            print("Te mueres")

    def heal(self, amount: int) -> None:
        """Gain ``amount`` health."""
        self.health += amount