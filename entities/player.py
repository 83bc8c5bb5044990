"""
Player position holder with wall-gated movement
"""

import math
import random

from pygame.math import Vector3

from game.collision import CollisionHandler
from maze.maze_core import random_spawn_position
from utils.constants import PLAYER_SPEED, PLAYER_RADIUS, PLAYER_HEIGHT
from utils.colors import COLOR_PLAYER


class Player:
    """
    Player in world space

    Input, camera and view angles belong to whatever front end drives the
    simulation; this only applies the movement it is handed.
    """
    def __init__(self, position=(0.0, PLAYER_HEIGHT / 2, 0.0),
                 speed=PLAYER_SPEED, radius=PLAYER_RADIUS, height=PLAYER_HEIGHT):
        self.position = Vector3(position)
        self.speed = speed
        self.height = height
        self.collision = CollisionHandler(radius)

        # Gameplay tracking
        self.distance_moved = 0.0

    @property
    def radius(self):
        return self.collision.radius

    def move(self, maze, delta):
        """
        Move by delta, each horizontal axis gated separately

        Args:
            maze: MazeView
            delta: Vector3 (or (x, y, z)) movement for this tick

        Returns:
            True if player moved
        """
        new_pos = self.collision.move_axes(maze, self.position, delta)
        step = new_pos.distance_to(self.position)
        self.position = new_pos
        self.distance_moved += step
        return step > 0

    def velocity_from_heading(self, heading, dt):
        """
        Movement delta for walking along a yaw heading for dt seconds

        Args:
            heading: Yaw in radians, 0 faces +z
            dt: Delta time in seconds
        """
        return Vector3(math.sin(heading), 0.0, math.cos(heading)) * (self.speed * dt)

    def cell(self, maze):
        """Grid cell the player stands in (nearest cell centre)"""
        half = maze.cell_size / 2
        return (int(math.floor((self.position.x + half) / maze.cell_size)),
                int(math.floor((self.position.z + half) / maze.cell_size)))

    def respawn(self, maze, rng=random):
        """Place at a random cell"""
        self.position = random_spawn_position(maze, rng, self.height)

    def get_color(self):
        return COLOR_PLAYER

    def __repr__(self):
        return f"Player(pos=({self.position.x:.2f},{self.position.z:.2f}))"
