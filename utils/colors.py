"""
Color palette for Maze Explorer
"""

# NPC state indicator colors
COLOR_STATE_WANDERING = (130, 130, 130)   # Gray
COLOR_STATE_CHASING = (253, 249, 0)       # Yellow
COLOR_STATE_FLEEING = (230, 41, 55)       # Red
COLOR_STATE_PATROLLING = (0, 121, 241)    # Blue

# Player
COLOR_PLAYER = (230, 41, 55)
