"""Scoring — converts a round's flight time into points."""

from __future__ import annotations

import math

from luckyjet.data.balance import BALANCE


def compute_score(flight_time: float, explosion_threshold: float | None = None) -> int:
    """Points for a jump made after ``flight_time`` seconds.

    ``floor(flight_time * 10)`` plus the survival bonus when the flight
    outlasted ``explosion_threshold`` (8.0 by default).  The threshold is a
    fixed bar, unrelated to the round's sampled explosion time.
    """
    bal = BALANCE.scoring
    if explosion_threshold is None:
        explosion_threshold = bal.explosion_threshold
    flight_time = max(0.0, flight_time)

    # Round first so 2.3s scores 23, not 22.999...
    time_points = math.floor(round(flight_time * bal.points_per_second, BALANCE.flight.time_precision))
    survival = bal.survival_bonus if flight_time > explosion_threshold else 0
    return int(time_points) + survival


def is_success(flight_time: float, explosion_time: float) -> bool:
    """A jump saves the astronaut if it happened before the explosion."""
    return flight_time < explosion_time
