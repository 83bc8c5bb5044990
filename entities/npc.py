"""
NPC entities
Timer-driven state machine with direct seek movement
"""

import random
from enum import Enum, auto

from pygame.math import Vector3

from game.collision import is_blocked
from maze.maze_core import random_spawn_position
from utils.constants import (
    NPC_SPEED, NPC_THINK_INTERVAL, NPC_FLEE_DISTANCE, NPC_CHASE_DISTANCE,
    NPC_FLEE_OFFSET, NPC_WANDER_RETARGET_CHANCE, NPC_ARRIVE_DISTANCE,
    PLAYER_RADIUS, PLAYER_HEIGHT
)
from utils.colors import (
    COLOR_STATE_WANDERING, COLOR_STATE_CHASING, COLOR_STATE_FLEEING,
    COLOR_STATE_PATROLLING
)
from utils.helpers import random_color


class NpcState(Enum):
    """NPC behaviour states"""
    WANDERING = auto()
    CHASING = auto()
    FLEEING = auto()
    PATROLLING = auto()  # Reserved: no transition enters it


class Npc:
    """
    Maze NPC

    Every think interval the NPC picks a state from its distance to the
    player. Every tick it steps straight at its target; if that step would
    hit a wall it gives up and picks a new random target instead of sliding.
    """
    think_interval = NPC_THINK_INTERVAL
    flee_distance = NPC_FLEE_DISTANCE
    chase_distance = NPC_CHASE_DISTANCE
    flee_offset = NPC_FLEE_OFFSET
    wander_retarget_chance = NPC_WANDER_RETARGET_CHANCE
    arrive_distance = NPC_ARRIVE_DISTANCE

    def __init__(self, position, target, color=(255, 100, 100),
                 speed=NPC_SPEED, radius=PLAYER_RADIUS, height=PLAYER_HEIGHT):
        """
        Args:
            position, target: World positions (Vector3 or (x, y, z))
            color: RGB tuple, cosmetic only
            speed: Units per second
            radius: Wall clearance used for collision
            height: Agent height, spawn points sit at half of it
        """
        self.position = Vector3(position)
        self.target = Vector3(target)
        self.color = color
        self.speed = speed
        self.radius = radius
        self.height = height

        self.state = NpcState.WANDERING
        self.think_timer = 0.0

    def think(self, maze, player_position, dt, rng=random):
        """
        Accumulate time and, once past the think interval, re-evaluate state

        Returns:
            True if the think tick fired
        """
        self.think_timer += dt
        if self.think_timer <= self.think_interval:
            return False

        self.think_timer = 0.0
        player_position = Vector3(player_position)
        dist = self.position.distance_to(player_position)

        if dist < self.flee_distance:
            self.state = NpcState.FLEEING
            away = self.position - player_position
            if away.length_squared() > 0:
                away.normalize_ip()
            self.target = self.position + away * self.flee_offset
        elif dist < self.chase_distance:
            self.state = NpcState.CHASING
            self.target = Vector3(player_position)
        else:
            self.state = NpcState.WANDERING
            if rng.random() < self.wander_retarget_chance:
                self.target = random_spawn_position(maze, rng, self.height)

        return True

    def update(self, maze, dt, rng=random):
        """
        Step toward the target

        Returns:
            True if the NPC moved
        """
        direction = self.target - self.position
        if direction.length() <= self.arrive_distance:
            return False

        direction.normalize_ip()
        proposed = self.position + direction * (self.speed * dt)

        if not is_blocked(maze, proposed, self.radius):
            self.position = proposed
            return True

        self.target = random_spawn_position(maze, rng, self.height)
        return False

    def respawn(self, maze, rng=random):
        """Place at a random cell with a random target"""
        self.position = random_spawn_position(maze, rng, self.height)
        self.target = random_spawn_position(maze, rng, self.height)

    def get_indicator_color(self):
        """Get RGB color of the state indicator"""
        if self.state == NpcState.WANDERING:
            return COLOR_STATE_WANDERING
        elif self.state == NpcState.CHASING:
            return COLOR_STATE_CHASING
        elif self.state == NpcState.FLEEING:
            return COLOR_STATE_FLEEING
        elif self.state == NpcState.PATROLLING:
            return COLOR_STATE_PATROLLING
        raise ValueError(f"unknown NPC state: {self.state}")

    def __repr__(self):
        return (f"Npc(pos=({self.position.x:.2f},{self.position.z:.2f}), "
                f"state={self.state.name})")


class NpcManager:
    """
    Manages all NPCs in the maze
    """
    def __init__(self):
        self.npcs = []

    def add_npc(self, position, target, color=(255, 100, 100), **kwargs):
        """Add an NPC"""
        npc = Npc(position, target, color, **kwargs)
        self.npcs.append(npc)
        return npc

    def spawn(self, maze, count, rng=random, **kwargs):
        """Create count NPCs at random cells with random targets and colors"""
        height = kwargs.get('height', PLAYER_HEIGHT)
        for _ in range(count):
            position = random_spawn_position(maze, rng, height)
            target = random_spawn_position(maze, rng, height)
            self.add_npc(position, target, random_color(rng), **kwargs)
        return self.npcs

    def respawn(self, maze, rng=random):
        """Re-place every NPC after the maze changed"""
        for npc in self.npcs:
            npc.respawn(maze, rng)

    def update(self, dt, maze, player_position, rng=random):
        """Think then move, one NPC at a time"""
        for npc in self.npcs:
            npc.think(maze, player_position, dt, rng)
            npc.update(maze, dt, rng)

    def count_by_state(self):
        """Get {NpcState: count} for every state"""
        counts = {state: 0 for state in NpcState}
        for npc in self.npcs:
            counts[npc.state] += 1
        return counts

    def __len__(self):
        return len(self.npcs)

    def __repr__(self):
        return f"NpcManager(npcs={len(self.npcs)})"
