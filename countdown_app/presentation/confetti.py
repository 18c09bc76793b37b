"""Confetti pieces for the arrival animation."""

import random
from dataclasses import dataclass
from typing import Optional

from ..config.defaults import CelebrationParams


@dataclass(frozen=True)
class Confetti:
    """One falling piece."""
    left: float        # Horizontal offset within the celebration width
    color: str
    z_index: int
    delay: float       # Seconds after arrival before the piece drops


def make_confetti(params: CelebrationParams,
                  rng: Optional[random.Random] = None) -> list[Confetti]:
    """Scatter ``params.pieces`` pieces across the width and the spread window."""
    rng = rng or random.Random()

    return [
        Confetti(
            left=rng.random() * params.width,
            color=rng.choice(params.colors),
            z_index=round(rng.random() * params.max_z_index),
            delay=rng.random() * params.spread_seconds,
        )
        for _ in range(params.pieces)
    ]
