"""
Maze World - owns the maze, the player and the NPCs, and runs the per-tick update
"""

import random

from pygame.math import Vector3

from config import WorldConfig
from entities.npc import NpcManager
from entities.player import Player
from game.collision import is_blocked
from maze.generator import generate_maze
from maze.maze_core import MazeGrid, random_spawn_position


class MazeWorld:
    """
    Single maze plus everything living in it

    The grid is only written by generate(). The player, the NPCs and any
    front end read it through self.maze, a view that shares the grid's
    storage and so stays current across regenerations.
    """
    def __init__(self, config=None, seed=None):
        """
        Args:
            config: WorldConfig, defaults to the reference settings
            seed: Seed for the world's random source (None = OS entropy)
        """
        self.config = config or WorldConfig()
        self.rng = random.Random(seed)

        # Maze data
        self.grid = None
        self.maze = None

        # Entities
        self.player = Player(speed=self.config.player_speed,
                             radius=self.config.player_radius,
                             height=self.config.player_height)
        self.npc_manager = NpcManager()

        # World state
        self.time_elapsed = 0.0
        self.generation_count = 0
        self.generation_complete = False
        self._regenerate_pending = False

        self.initialize(self.config.cols, self.config.rows)

    def initialize(self, width, height):
        """Allocate a fresh grid (all walls closed, nothing generated yet)"""
        self.grid = MazeGrid(width, height, self.config.cell_size)
        self.maze = self.grid.read_only()
        self.generation_complete = False

    def generate(self, seed=None):
        """
        Regenerate the maze and respawn everything

        Args:
            seed: Reseed the world's random source first, for replay

        Returns:
            Number of passages carved
        """
        if seed is not None:
            self.rng.seed(seed)

        carved = generate_maze(self.grid, self.rng)
        self._spawn_entities()

        self.generation_count += 1
        self.generation_complete = True
        self._regenerate_pending = False
        return carved

    def _spawn_entities(self):
        """Place the player, then create or re-place the NPCs"""
        self.player.respawn(self.maze, self.rng)

        if not self.npc_manager.npcs:
            self.npc_manager.spawn(self.maze, self.config.npc_count, self.rng,
                                   speed=self.config.npc_speed,
                                   radius=self.config.player_radius,
                                   height=self.config.player_height)
        else:
            self.npc_manager.respawn(self.maze, self.rng)

    def request_regenerate(self):
        """Regenerate at the start of the next update"""
        self._regenerate_pending = True

    def update(self, dt, player_delta=None, regenerate=False):
        """
        Advance the world by one tick

        Args:
            dt: Delta time in seconds (negative values count as 0)
            player_delta: Movement the front end wants for the player this tick
            regenerate: Regenerate trigger for this tick

        Returns:
            True if the maze was regenerated this tick
        """
        dt = max(0.0, dt)
        regenerated = False

        if regenerate or self._regenerate_pending or not self.generation_complete:
            self.generate()
            regenerated = True

        self.time_elapsed += dt

        if player_delta is not None:
            self.player.move(self.maze, player_delta)

        self.npc_manager.update(dt, self.maze, self.player.position, self.rng)
        return regenerated

    def is_blocked(self, position):
        return is_blocked(self.maze, position, self.config.player_radius)

    def random_spawn_position(self):
        return random_spawn_position(self.maze, self.rng, self.config.player_height)

    def cell_at(self, x, y):
        return self.maze.cell_at(x, y)

    @property
    def player_position(self):
        return Vector3(self.player.position)

    @property
    def npcs(self):
        return self.npc_manager.npcs

    def __repr__(self):
        return (f"MazeWorld(size={self.grid.cols}x{self.grid.rows}, "
                f"npcs={len(self.npc_manager)}, generations={self.generation_count})")
