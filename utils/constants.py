"""
Global constants for Maze Explorer
"""

# Maze settings
MAZE_WIDTH = 20
MAZE_HEIGHT = 20
CELL_SIZE = 1.0

# Wall bit flags (cell-local sides, North = +y / world +z)
NORTH = 1
EAST = 2
SOUTH = 4
WEST = 8
ALL_WALLS = NORTH | EAST | SOUTH | WEST

# Order used by get_cell()/cell_at() wall tuples
WALL_ORDER = (NORTH, EAST, SOUTH, WEST)

# Direction vectors with wall bits, checked in this order during generation
DIRS = [
    (0, 1, NORTH, SOUTH),    # north
    (1, 0, EAST, WEST),      # east
    (0, -1, SOUTH, NORTH),   # south
    (-1, 0, WEST, EAST),     # west
]

# Direction to bit mapping
DIR_TO_BITS = {
    (0, 1): (NORTH, SOUTH),
    (1, 0): (EAST, WEST),
    (0, -1): (SOUTH, NORTH),
    (-1, 0): (WEST, EAST),
}

# Player settings
PLAYER_HEIGHT = 0.5
PLAYER_RADIUS = 0.15
PLAYER_SPEED = 3.0  # Units per second

# NPC settings
NPC_COUNT = 10
NPC_SPEED = 2.0  # Slower than the player
NPC_THINK_INTERVAL = 0.5  # Seconds between state evaluations
NPC_FLEE_DISTANCE = 3.0
NPC_CHASE_DISTANCE = 5.0
NPC_FLEE_OFFSET = 2.0
NPC_WANDER_RETARGET_CHANCE = 0.3
NPC_ARRIVE_DISTANCE = 0.1
