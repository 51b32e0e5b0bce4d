"""
Configuration for a 2048 game session.
"""

from dataclasses import dataclass, field

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}


def _is_power_of_two(value: int) -> bool:
    return value > 0 and value & (value - 1) == 0


@dataclass
class EngineConfig:
    """
    Configuration for the grid engine.

    Raises
    ------
    ValueError
        If any parameter falls outside the rules of the game.
    """

    size: int = 4  # Side of the square grid
    target_tile: int = 2048  # Tile value that wins the session
    start_tiles: int = 2  # Tiles spawned by initialize()
    tile_spawn_probs: dict[int, float] = field(default_factory=lambda: dict(TILE_SPAWN_PROBS))
    seed: int | None = None  # Seed of the random generator

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'size must be >= 2, got {self.size}')

        if self.target_tile < 4 or not _is_power_of_two(self.target_tile):
            raise ValueError(f'target_tile must be a power of two >= 4, got {self.target_tile}')

        if not 0 <= self.start_tiles <= self.size * self.size:
            raise ValueError(f'start_tiles must be in [0, {self.size * self.size}], got {self.start_tiles}')

        if not self.tile_spawn_probs:
            raise ValueError('tile_spawn_probs must not be empty')

        for value, prob in self.tile_spawn_probs.items():
            if value < 2 or not _is_power_of_two(value):
                raise ValueError(f'spawned tiles must be powers of two >= 2, got {value}')
            if prob < 0:
                raise ValueError(f'probability of tile {value} must be >= 0, got {prob}')

        total = sum(self.tile_spawn_probs.values())
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f'tile_spawn_probs must sum to 1, got {total}')
