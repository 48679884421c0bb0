"""Regular enemies that roam a dungeon and strike the player."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class _Target(Protocol):
    def take_damage(self, amount: int) -> None: ...


@dataclass
class Enemy:
    """An enemy with a position, a movement pattern and an attack cooldown."""

    x: int = 0
    y: int = 0
    movement_pattern: list[tuple[int, int]] = field(default_factory=list)
    health: int = 0
    damage: int = 0
    attack_range: int = 0
    attack_frequency: int = 0
    move_count: int = 0
    step: int = field(default=0, init=False)
    attacking: bool = field(default=False, init=False)
    origin_x: int = field(default=0, init=False)
    origin_y: int = field(default=0, init=False)
    taking_damage: bool = field(default=False, init=False)
    turns_since_attack: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.movement_pattern = list(self.movement_pattern)
        self.origin_x = self.x
        self.origin_y = self.y

    def take_damage(self, amount: int) -> None:
        """Lose ``amount`` health."""
        self.health -= amount
        self.taking_damage = True
        print(f"Enemigo recibe {amount} de daño")

    def attack(self, player: _Target) -> bool:
        """Strike ``player`` if the cooldown has elapsed; return whether it did."""
        if self.turns_since_attack < self.attack_frequency:
            remaining = self.attack_frequency - self.turns_since_attack
            print(f"El enemigo no puede atacar aún, debe esperar {remaining} turnos.")
            return False
        player.take_damage(self.damage)
        self.reset_cooldown()
        print(f"El enemigo te ataca por {self.damage} de dano")
        return True

    def tick(self) -> None:
        """Count one more turn since the last attack."""
        self.turns_since_attack += 1

    def reset_cooldown(self) -> None:
        """Start the attack cooldown over."""
        self.turns_since_attack = 0