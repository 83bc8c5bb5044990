#!/usr/bin/env python3
"""
Maze Explorer - headless simulation runner

Drives the maze world the way a game front end would: a fixed delta time
per tick, a movement delta for the player and an occasional regenerate
trigger. The player walks a scripted heading and turns when it hits a wall.

Usage:
    python main.py [options]

Examples:
    python main.py
    python main.py --preset small --seed 42 --ticks 600
    python main.py --width 30 --height 10 --npcs 5 --regen-every 300 --quiet
"""

import argparse
import math
import os
import sys

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from config import GAME_TITLE, GAME_VERSION, get_world_config
from entities.npc import NpcState
from game.world import MazeWorld
from utils.helpers import format_time

FPS = 60


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description=f'{GAME_TITLE} {GAME_VERSION} - headless simulation',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument('--preset', default='reference',
                        help='World preset: reference, small, large (default: reference)')
    parser.add_argument('--width', type=int, default=None,
                        help='Override maze width in cells')
    parser.add_argument('--height', type=int, default=None,
                        help='Override maze height in cells')
    parser.add_argument('--npcs', type=int, default=None,
                        help='Override NPC count')

    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')
    parser.add_argument('--ticks', type=int, default=FPS * 10,
                        help=f'Number of ticks to run (default: {FPS * 10})')
    parser.add_argument('--dt', type=float, default=1.0 / FPS,
                        help='Seconds per tick (default: 1/60)')
    parser.add_argument('--regen-every', type=int, default=0,
                        help='Regenerate the maze every N ticks (0 = never)')

    parser.add_argument('--quiet', action='store_true', default=False,
                        help='Suppress stdout output')

    return parser.parse_args(argv)


def format_states(world):
    counts = world.npc_manager.count_by_state()
    return "  ".join(f"{state.name.lower()}={counts[state]}" for state in NpcState)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)

    overrides = {}
    if args.width is not None:
        overrides['cols'] = args.width
    if args.height is not None:
        overrides['rows'] = args.height
    if args.npcs is not None:
        overrides['npc_count'] = args.npcs

    try:
        config = get_world_config(args.preset).copy(**overrides)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.ticks < 0 or args.dt < 0:
        print("Error: --ticks and --dt must not be negative", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"{GAME_TITLE} {GAME_VERSION}")
        print(f"  Maze: {config.cols}x{config.rows} (cell size {config.cell_size})")
        print(f"  NPCs: {config.npc_count}")
        print(f"  Seed: {args.seed}")

    world = MazeWorld(config, seed=args.seed)
    carved = world.generate()
    if not args.quiet:
        print(f"  Generated: {carved} passages, player at cell {world.player.cell(world.maze)}")

    heading = 0.0
    report_every = max(1, int(round(1.0 / args.dt))) if args.dt > 0 else FPS

    for tick in range(1, args.ticks + 1):
        regenerate = args.regen_every > 0 and tick % args.regen_every == 0

        delta = world.player.velocity_from_heading(heading, args.dt)
        regenerated = world.update(args.dt, delta, regenerate=regenerate)

        # Scripted walker: turn right whenever the step was refused
        if any(world.player.collision.last_blocked):
            heading = (heading + math.pi / 2) % (2 * math.pi)

        if args.quiet:
            continue
        if regenerated:
            print(f"[{format_time(world.time_elapsed)}] maze regenerated "
                  f"(#{world.generation_count})")
        if tick % report_every == 0:
            print(f"[{format_time(world.time_elapsed)}] player cell "
                  f"{world.player.cell(world.maze)}  {format_states(world)}")

    if not args.quiet:
        print(f"Done: {args.ticks} ticks, {world.time_elapsed:.1f}s simulated, "
              f"player walked {world.player.distance_moved:.1f} units")
    return 0


if __name__ == "__main__":
    sys.exit(main())
