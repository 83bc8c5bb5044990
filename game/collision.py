"""
Collision detection against maze walls
"""

import math
from numba import njit
from pygame.math import Vector3

from utils.constants import NORTH, EAST, SOUTH, WEST, PLAYER_RADIUS


@njit(cache=True)
def point_blocked(walls, cols, rows, px, pz, cell_size, radius):
    """
    Per-cell wall test for a point with a radius buffer.

    The point is mapped to the cell whose centre is nearest on each axis
    (cell centres sit at x * cell_size), then checked against the four
    cell-local wall planes only. Neighbouring cells are never consulted.

    Args:
        walls: 1D int32 array of wall bitmasks (rows * cols)
        cols, rows: maze dimensions
        px, pz: horizontal world coordinates
        cell_size: world size of one cell
        radius: clearance kept from a present wall

    Returns:
        True if blocked; any point outside the grid is blocked
    """
    half = cell_size / 2.0
    cell_x = int(math.floor((px + half) / cell_size))
    cell_y = int(math.floor((pz + half) / cell_size))

    local_x = px - (cell_x * cell_size - half)
    local_y = pz - (cell_y * cell_size - half)

    if cell_x < 0 or cell_x >= cols or cell_y < 0 or cell_y >= rows:
        return True

    w = walls[cell_y * cols + cell_x]

    if (w & NORTH) != 0 and local_y > cell_size - radius:
        return True
    if (w & EAST) != 0 and local_x > cell_size - radius:
        return True
    if (w & SOUTH) != 0 and local_y < radius:
        return True
    if (w & WEST) != 0 and local_x < radius:
        return True

    return False


def is_blocked(maze, position, radius=PLAYER_RADIUS):
    """
    Check a world position against the maze walls

    Args:
        maze: MazeView (or MazeGrid)
        position: Vector3 or any (x, y, z) sequence; y (height) is ignored
        radius: clearance from walls

    Returns:
        True if the position is blocked
    """
    return point_blocked(maze.walls, maze.cols, maze.rows,
                         float(position[0]), float(position[2]),
                         float(maze.cell_size), float(radius))


class CollisionHandler:
    """
    Handles wall collision response for moving bodies
    """
    def __init__(self, radius=PLAYER_RADIUS):
        self.radius = radius
        self.last_blocked = (False, False)

    def is_blocked(self, maze, position):
        return is_blocked(maze, position, self.radius)

    def move_axes(self, maze, position, delta):
        """
        Apply a movement delta one horizontal axis at a time

        Both axis steps are tested from the starting position and committed
        independently, so a body blocked on X can still slide along Z.

        Args:
            maze: MazeView
            position: current Vector3
            delta: Vector3 (or (x, y, z)) movement for this tick; y is ignored

        Returns:
            New Vector3 position
        """
        dx, dz = float(delta[0]), float(delta[2])
        new_x = Vector3(position.x + dx, position.y, position.z)
        new_z = Vector3(position.x, position.y, position.z + dz)

        blocked_x = self.is_blocked(maze, new_x)
        blocked_z = self.is_blocked(maze, new_z)

        result = Vector3(position)
        if not blocked_x:
            result.x = new_x.x
        if not blocked_z:
            result.z = new_z.z

        self.last_blocked = (blocked_x, blocked_z)
        return result
