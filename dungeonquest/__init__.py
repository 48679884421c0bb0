"""Turn-based grid dungeon crawler pieces: maps, player, enemies, boss, abilities and level loading."""

__version__ = "0.1.0"
__all__ = ["abilities", "boss", "dungeon", "enemy", "loader", "player"]