"""
Maze generation - randomized depth-first backtracking
"""

import random
from utils.constants import DIRS


# ========== GENERATOR: DFS BACKTRACKER ==========

def gen_dfs_backtracker(grid, rng=random):
    """
    Depth-First Search with backtracking - animated generator

    The stack holds the cell each forward step was taken *from*, so a dead
    end backs up exactly one step per pop. Neighbours are checked North,
    East, South, West, which makes a seeded rng reproducible.

    Args:
        grid: MazeGrid to carve in place (it is reset first)
        rng: anything with a choice() method, e.g. random.Random(seed)

    Yields:
        Step dicts: current cell, carved edge or None, backtracked flag, done flag
    """
    grid.reset()

    cx, cy = 0, 0
    grid.mark_visited(cx, cy)
    stack = []

    yield {"current": (cx, cy), "carved": None, "backtracked": False, "done": False}

    while True:
        neighbors = []
        for dx, dy, _, _ in DIRS:
            nx, ny = cx + dx, cy + dy
            if grid.in_bounds(nx, ny) and not grid.is_visited(nx, ny):
                neighbors.append((nx, ny))

        if neighbors:
            nx, ny = rng.choice(neighbors)
            grid.remove_wall((cx, cy), (nx, ny))
            grid.mark_visited(nx, ny)
            stack.append((cx, cy))
            carved = ((cx, cy), (nx, ny))
            cx, cy = nx, ny

            yield {"current": (cx, cy), "carved": carved, "backtracked": False, "done": False}
        elif stack:
            cx, cy = stack.pop()
            yield {"current": (cx, cy), "carved": None, "backtracked": True, "done": False}
        else:
            break

    yield {"current": (cx, cy), "carved": None, "backtracked": False, "done": True}


def generate_maze(grid, rng=random):
    """
    Generate instantly

    Returns:
        Number of passages carved (cols * rows - 1 for a finished maze)
    """
    carved = 0
    for state in gen_dfs_backtracker(grid, rng):
        if state["carved"] is not None:
            carved += 1
    return carved
