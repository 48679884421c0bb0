"""The boss that guards the final room of a dungeon."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Boss:
    """A boss with a position, a movement pattern and combat stats."""

    x: int = 0
    y: int = 0
    movement_pattern: list[tuple[int, int]] = field(default_factory=list)
    health: int = 100
    damage: int = 20
    attack_range: int = 1
    attack_frequency: int = 1
    name: str = "Default"
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