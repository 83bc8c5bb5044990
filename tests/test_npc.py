"""Tests for entities.npc module."""

from random import Random

import pytest
from pygame.math import Vector3

from entities.npc import Npc, NpcManager, NpcState
from game.collision import is_blocked
from maze.generator import generate_maze
from maze.maze_core import MazeGrid
from utils.colors import (
    COLOR_STATE_WANDERING, COLOR_STATE_CHASING, COLOR_STATE_FLEEING,
    COLOR_STATE_PATROLLING
)

H = 0.25  # half of the default agent height


class FixedRng:
    """random()/randrange() return fixed values."""

    def __init__(self, value=0.0, index=0):
        self.value = value
        self.index = index

    def random(self):
        return self.value

    def randrange(self, n):
        return self.index % n


@pytest.fixture
def maze():
    grid = MazeGrid(12, 12)
    generate_maze(grid, Random(0))
    return grid.read_only()


def make_npc(position=(5, H, 5), target=(5, H, 5)):
    return Npc(Vector3(position), Vector3(target))


class TestThinkTimer:
    def test_does_not_fire_at_exactly_the_interval(self, maze):
        npc = make_npc()
        assert npc.think(maze, Vector3(5, H, 7), 0.5, Random(0)) is False
        assert npc.state == NpcState.WANDERING
        assert npc.think_timer == pytest.approx(0.5)

    def test_fires_once_past_the_interval_and_resets(self, maze):
        npc = make_npc()
        npc.think(maze, Vector3(5, H, 7), 0.3, Random(0))
        assert npc.think(maze, Vector3(5, H, 7), 0.3, Random(0)) is True
        assert npc.think_timer == 0.0
        assert npc.state == NpcState.FLEEING

    def test_no_state_change_between_ticks(self, maze):
        npc = make_npc()
        npc.think(maze, Vector3(5, H, 7), 0.6, Random(0))
        assert npc.state == NpcState.FLEEING
        # player walks away, but the next tick has not come yet
        npc.think(maze, Vector3(5, H, 50), 0.1, Random(0))
        assert npc.state == NpcState.FLEEING


class TestTransitions:
    def test_close_player_makes_it_flee(self, maze):
        npc = make_npc()
        player = Vector3(3, H, 5)  # distance 2.0
        npc.think(maze, player, 0.6, Random(0))
        assert npc.state == NpcState.FLEEING
        assert (npc.target.x, npc.target.y, npc.target.z) == pytest.approx((7.0, H, 5.0))
        assert npc.target.distance_to(player) > npc.position.distance_to(player)

    def test_flee_target_is_offset_two_units(self, maze):
        npc = make_npc()
        npc.think(maze, Vector3(4, H, 4), 0.6, Random(0))
        assert npc.target.distance_to(npc.position) == pytest.approx(2.0)

    def test_player_on_top_of_npc(self, maze):
        npc = make_npc()
        npc.think(maze, Vector3(5, H, 5), 0.6, Random(0))
        assert npc.state == NpcState.FLEEING
        assert npc.target == npc.position

    def test_mid_range_player_is_chased(self, maze):
        npc = make_npc()
        player = Vector3(5, H, 9)  # distance 4.0
        npc.think(maze, player, 0.6, Random(0))
        assert npc.state == NpcState.CHASING
        assert npc.target == player
        assert npc.target is not player

    @pytest.mark.parametrize("distance, state", [
        (2.999, NpcState.FLEEING),
        (3.0, NpcState.CHASING),
        (4.999, NpcState.CHASING),
        (5.0, NpcState.WANDERING),
    ])
    def test_thresholds(self, maze, distance, state):
        npc = make_npc()
        npc.think(maze, Vector3(5 + distance, H, 5), 0.6, FixedRng(0.99))
        assert npc.state == state

    def test_far_player_means_wandering(self, maze):
        npc = make_npc(target=(1, H, 1))
        npc.think(maze, Vector3(5, H, 13), 0.6, FixedRng(0.99))  # distance 8.0
        assert npc.state == NpcState.WANDERING
        assert npc.target == Vector3(1, H, 1)

    def test_wandering_sometimes_picks_a_new_spawn_target(self, maze):
        npc = make_npc(target=(1, H, 1))
        npc.think(maze, Vector3(5, H, 13), 0.6, FixedRng(0.1, index=7))
        assert npc.state == NpcState.WANDERING
        assert npc.target == Vector3(7, H, 7)

    def test_wander_retarget_rate(self, maze):
        rng = Random(42)
        npc = make_npc()
        changes = 0
        for _ in range(2000):
            before = Vector3(npc.target)
            npc.think(maze, Vector3(100, H, 100), 0.6, rng)
            if npc.target != before:
                changes += 1
        # 30% chance, minus the 1-in-144 times the new cell equals the old one
        assert 0.25 < changes / 2000 < 0.35

    def test_patrolling_is_never_entered(self, maze):
        rng = Random(3)
        npc = make_npc()
        for i in range(500):
            player = Vector3(rng.uniform(0, 12), H, rng.uniform(0, 12))
            npc.think(maze, player, 0.6, rng)
            npc.update(maze, 0.05, rng)
            assert npc.state != NpcState.PATROLLING


class TestUpdate:
    def test_moves_toward_target(self):
        cell = MazeGrid(1, 1)
        npc = Npc(Vector3(0, H, 0), Vector3(0.3, H, 0), speed=2.0)
        assert npc.update(cell, 0.1, Random(0)) is True
        assert npc.position.x == pytest.approx(0.2)
        assert npc.position.z == pytest.approx(0.0)

    def test_stops_near_target(self):
        cell = MazeGrid(1, 1)
        npc = Npc(Vector3(0, H, 0), Vector3(0.05, H, 0.05))
        assert npc.update(cell, 0.1, Random(0)) is False
        assert npc.position == Vector3(0, H, 0)

    def test_zero_dt_does_not_move(self):
        cell = MazeGrid(1, 1)
        npc = Npc(Vector3(0, H, 0), Vector3(0.4, H, 0))
        npc.update(cell, 0.0, Random(0))
        assert npc.position == Vector3(0, H, 0)

    def test_gives_up_when_blocked(self):
        cell = MazeGrid(1, 1)
        blocked_target = Vector3(5, H, 0)
        npc = Npc(Vector3(0, H, 0), blocked_target, speed=2.0)
        assert npc.update(cell, 0.2, Random(0)) is False
        assert npc.position == Vector3(0, H, 0)
        assert npc.target != blocked_target
        assert npc.target == Vector3(0, H, 0)  # the only cell of a 1x1 maze

    def test_give_up_retargets_to_a_cell_center(self, maze):
        # heading straight off the west edge of the maze
        npc = Npc(Vector3(0, H, 0), Vector3(-3, H, 0))
        npc.update(maze, 0.5, Random(4))
        assert npc.position == Vector3(0, H, 0)
        assert npc.target.x == int(npc.target.x) and 0 <= npc.target.x < 12
        assert npc.target.z == int(npc.target.z) and 0 <= npc.target.z < 12

    def test_never_walks_into_walls(self, maze):
        rng = Random(11)
        npcs = NpcManager()
        npcs.spawn(maze, 8, rng)
        player = Vector3(6, H, 6)
        for _ in range(600):
            npcs.update(1 / 60, maze, player, rng)
            for npc in npcs.npcs:
                assert not is_blocked(maze, npc.position, npc.radius)


class TestMisc:
    def test_indicator_colors(self):
        npc = make_npc()
        expected = {
            NpcState.WANDERING: COLOR_STATE_WANDERING,
            NpcState.CHASING: COLOR_STATE_CHASING,
            NpcState.FLEEING: COLOR_STATE_FLEEING,
            NpcState.PATROLLING: COLOR_STATE_PATROLLING,
        }
        for state, color in expected.items():
            npc.state = state
            assert npc.get_indicator_color() == color

    def test_respawn(self, maze):
        npc = make_npc(position=(100, H, 100))
        npc.respawn(maze, Random(0))
        assert not is_blocked(maze, npc.position, npc.radius)
        assert npc.position.y == pytest.approx(H)


class TestNpcManager:
    def test_spawn(self, maze):
        manager = NpcManager()
        manager.spawn(maze, 10, Random(0))
        assert len(manager) == 10
        for npc in manager.npcs:
            assert all(55 <= c <= 254 for c in npc.color)
            assert npc.state == NpcState.WANDERING
            assert not is_blocked(maze, npc.position, npc.radius)

    def test_spawn_passes_settings(self, maze):
        manager = NpcManager()
        manager.spawn(maze, 2, Random(0), speed=1.25, height=1.0)
        assert all(npc.speed == 1.25 for npc in manager.npcs)
        assert all(npc.position.y == pytest.approx(0.5) for npc in manager.npcs)

    def test_respawn_keeps_npcs(self, maze):
        manager = NpcManager()
        npcs = list(manager.spawn(maze, 4, Random(0)))
        manager.respawn(maze, Random(1))
        assert manager.npcs == npcs

    def test_update_thinks_then_moves(self, maze):
        manager = NpcManager()
        npc = manager.add_npc(Vector3(5, H, 5), Vector3(5, H, 5))
        manager.update(0.6, maze, Vector3(5, H, 9), Random(0))
        assert npc.state == NpcState.CHASING
        assert npc.think_timer == 0.0

    def test_count_by_state(self, maze):
        manager = NpcManager()
        manager.add_npc(Vector3(5, H, 5), Vector3(5, H, 5))
        manager.add_npc(Vector3(5, H, 6), Vector3(5, H, 6))
        manager.npcs[1].state = NpcState.CHASING
        counts = manager.count_by_state()
        assert counts == {
            NpcState.WANDERING: 1,
            NpcState.CHASING: 1,
            NpcState.FLEEING: 0,
            NpcState.PATROLLING: 0,
        }
