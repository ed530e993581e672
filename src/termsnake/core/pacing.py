"""Tick pacing - the game speeds up linearly with the score"""

from __future__ import annotations

# Defaults in seconds
BASE_INTERVAL = 0.150
SPEED_STEP = 0.005
MIN_INTERVAL = 0.060


def tick_interval(
    score: int,
    base: float = BASE_INTERVAL,
    step: float = SPEED_STEP,
    floor: float = MIN_INTERVAL,
) -> float:
    """Seconds between ticks for the given score, never below ``floor``"""
    return max(floor, base - step * max(score, 0))
