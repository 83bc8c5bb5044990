"""
Core maze data - grid storage, wall queries, and spawn points
"""

import random
from collections import deque, namedtuple

import numpy as np
from pygame.math import Vector3

from utils.constants import (
    CELL_SIZE, PLAYER_HEIGHT, ALL_WALLS, WALL_ORDER, DIRS, DIR_TO_BITS
)


# Read-only snapshot of one cell; walls follow WALL_ORDER (N, E, S, W)
Cell = namedtuple("Cell", ["x", "y", "visited", "walls"])


class MazeView:
    """
    Read-only access to a maze grid.

    Collision checks, NPCs and renderers get one of these. The wall and
    visited arrays are numpy views with the writeable flag cleared, so any
    attempt to write through them raises.
    """
    def __init__(self, cols, rows, cell_size, walls, visited):
        self.cols = cols
        self.rows = rows
        self.cell_size = cell_size
        self._walls = walls
        self._visited = visited

    @property
    def walls(self):
        """Flat int32 wall bitmasks, index y * cols + x"""
        view = self._walls.view()
        view.flags.writeable = False
        return view

    @property
    def visited(self):
        """Flat visited flags, index y * cols + x"""
        view = self._visited.view()
        view.flags.writeable = False
        return view

    def idx(self, x, y):
        """Convert 2D coordinates to 1D index"""
        return y * self.cols + x

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.cols and 0 <= y < self.rows

    def get_cell(self, x, y):
        """Get a Cell snapshot, or None when (x, y) is outside the grid"""
        if not self.in_bounds(x, y):
            return None
        i = self.idx(x, y)
        return Cell(x, y, bool(self._visited[i]), self._flags(int(self._walls[i])))

    def cell_at(self, x, y):
        """Get the (north, east, south, west) wall flags, or None when out of bounds"""
        if not self.in_bounds(x, y):
            return None
        return self._flags(int(self._walls[self.idx(x, y)]))

    def is_visited(self, x, y):
        return self.in_bounds(x, y) and bool(self._visited[self.idx(x, y)])

    def is_open_between(self, a, b):
        """Check if passage is open between two adjacent cells"""
        (ax, ay), (bx, by) = a[:2], b[:2]
        bits = DIR_TO_BITS.get((bx - ax, by - ay))
        if bits is None or not self.in_bounds(ax, ay) or not self.in_bounds(bx, by):
            return False
        wall_bit, _ = bits
        return (int(self._walls[self.idx(ax, ay)]) & wall_bit) == 0

    def neighbors_open(self, x, y):
        """Get list of neighbour cells reachable through an open wall"""
        res = []
        for dx, dy, _, _ in DIRS:
            nx, ny = x + dx, y + dy
            if self.is_open_between((x, y), (nx, ny)):
                res.append((nx, ny))
        return res

    def open_edge_count(self):
        """Count undirected passages (each shared wall counted once)"""
        count = 0
        for y in range(self.rows):
            for x in range(self.cols):
                if self.is_open_between((x, y), (x + 1, y)):
                    count += 1
                if self.is_open_between((x, y), (x, y + 1)):
                    count += 1
        return count

    def reachable_cells(self, start=(0, 0)):
        """Flood fill over open walls, returns the set of reachable cells"""
        if not self.in_bounds(*start):
            return set()
        q = deque([start])
        seen = {start}
        while q:
            x, y = q.popleft()
            for n in self.neighbors_open(x, y):
                if n not in seen:
                    seen.add(n)
                    q.append(n)
        return seen

    def walls_symmetric(self):
        """True when every shared wall reads the same from both sides"""
        for y in range(self.rows):
            for x in range(self.cols):
                for dx, dy, wall_bit, opp_bit in DIRS:
                    nx, ny = x + dx, y + dy
                    if not self.in_bounds(nx, ny):
                        continue
                    here = (int(self._walls[self.idx(x, y)]) & wall_bit) != 0
                    there = (int(self._walls[self.idx(nx, ny)]) & opp_bit) != 0
                    if here != there:
                        return False
        return True

    @staticmethod
    def _flags(w):
        return tuple((w & bit) != 0 for bit in WALL_ORDER)

    def __repr__(self):
        return f"MazeView(size={self.cols}x{self.rows}, cell_size={self.cell_size})"


class MazeGrid(MazeView):
    """
    Maze grid with wall-based representation
    Each cell has 4 possible walls: NORTH, EAST, SOUTH, WEST

    Only the generator and the regeneration path should hold one of these;
    everything else gets read_only().
    """
    def __init__(self, cols, rows, cell_size=CELL_SIZE):
        if cols < 1 or rows < 1:
            raise ValueError(f"maze must be at least 1x1, got {cols}x{rows}")
        if cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {cell_size}")

        # Initialize all walls closed
        walls = np.full(cols * rows, ALL_WALLS, dtype=np.int32)
        visited = np.zeros(cols * rows, dtype=np.bool_)
        super().__init__(cols, rows, cell_size, walls, visited)

    def reset(self):
        """Close every wall and clear visited flags"""
        self._walls.fill(ALL_WALLS)
        self._visited.fill(False)

    def mark_visited(self, x, y):
        self._visited[self.idx(x, y)] = True

    def remove_wall(self, a, b):
        """
        Carve a passage between two adjacent cells

        Args:
            a, b: (x, y) pairs or Cell snapshots

        Returns:
            False (and nothing changed) unless a and b are in-bounds 4-neighbours
        """
        (ax, ay), (bx, by) = a[:2], b[:2]
        bits = DIR_TO_BITS.get((bx - ax, by - ay))
        if bits is None or not self.in_bounds(ax, ay) or not self.in_bounds(bx, by):
            return False
        wall_bit, opp_bit = bits
        self._walls[self.idx(ax, ay)] &= ~wall_bit
        self._walls[self.idx(bx, by)] &= ~opp_bit
        return True

    def read_only(self):
        """Get a MazeView sharing this grid's storage"""
        return MazeView(self.cols, self.rows, self.cell_size, self.walls, self.visited)

    def __repr__(self):
        return f"MazeGrid(size={self.cols}x{self.rows}, cell_size={self.cell_size})"


def cell_center(x, y, cell_size=CELL_SIZE, height=PLAYER_HEIGHT):
    """World position of a cell centre, lifted to half the agent height"""
    return Vector3(x * cell_size, height / 2, y * cell_size)


def random_spawn_position(maze, rng=random, height=PLAYER_HEIGHT):
    """Uniformly random cell centre of the maze"""
    x = rng.randrange(maze.cols)
    y = rng.randrange(maze.rows)
    return cell_center(x, y, maze.cell_size, height)
