"""
World configuration for Maze Explorer
"""

from utils.constants import (
    MAZE_WIDTH, MAZE_HEIGHT, CELL_SIZE, NPC_COUNT, NPC_SPEED,
    PLAYER_SPEED, PLAYER_RADIUS, PLAYER_HEIGHT
)

GAME_TITLE = "Maze Explorer"
GAME_VERSION = "1.0.0"


class WorldConfig:
    """Configuration for one maze world"""
    def __init__(self, **kwargs):
        # Maze dimensions
        self.cols = kwargs.get('cols', MAZE_WIDTH)
        self.rows = kwargs.get('rows', MAZE_HEIGHT)
        self.cell_size = kwargs.get('cell_size', CELL_SIZE)

        # Player
        self.player_speed = kwargs.get('player_speed', PLAYER_SPEED)
        self.player_radius = kwargs.get('player_radius', PLAYER_RADIUS)
        self.player_height = kwargs.get('player_height', PLAYER_HEIGHT)

        # NPCs
        self.npc_count = kwargs.get('npc_count', NPC_COUNT)
        self.npc_speed = kwargs.get('npc_speed', NPC_SPEED)

        self.validate()

    def validate(self):
        """Raise ValueError on settings no world can be built from"""
        for name in ('cols', 'rows', 'npc_count'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if self.cols < 1 or self.rows < 1:
            raise ValueError(f"maze must be at least 1x1, got {self.cols}x{self.rows}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.npc_count < 0:
            raise ValueError(f"npc_count must not be negative, got {self.npc_count}")
        if self.player_radius < 0 or self.player_radius * 2 >= self.cell_size:
            raise ValueError(f"player_radius {self.player_radius} does not fit a cell of {self.cell_size}")

    def copy(self, **overrides):
        """New config with some settings replaced"""
        settings = dict(vars(self))
        settings.update(overrides)
        return WorldConfig(**settings)

    def __repr__(self):
        return f"WorldConfig(size={self.cols}x{self.rows}, npcs={self.npc_count})"


# ========== PRESETS ==========

WORLD_REFERENCE = WorldConfig()

WORLD_SMALL = WorldConfig(
    cols=8,
    rows=8,
    npc_count=3,
)

WORLD_LARGE = WorldConfig(
    cols=40,
    rows=40,
    npc_count=30,
)

WORLD_PRESETS = {
    'reference': WORLD_REFERENCE,
    'small': WORLD_SMALL,
    'large': WORLD_LARGE,
}


def get_world_config(name='reference'):
    """
    Get a preset by name

    Raises:
        ValueError: unknown preset name
    """
    if name not in WORLD_PRESETS:
        raise ValueError(f"unknown world preset '{name}', choose from {sorted(WORLD_PRESETS)}")
    return WORLD_PRESETS[name]
