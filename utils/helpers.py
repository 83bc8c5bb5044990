"""
Helper utility functions for Maze Explorer
"""

import random


def random_color(rng=random):
    """Random bright-ish RGB color (each channel 55-254)"""
    return (rng.randrange(200) + 55, rng.randrange(200) + 55, rng.randrange(200) + 55)


def format_time(seconds):
    """Format seconds to MM:SS string"""
    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes:02d}:{secs:02d}"
