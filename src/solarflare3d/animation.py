"""Per-frame cosmetic values as pure functions of elapsed seconds."""

import math


def core_pulse(t: float) -> float:
    """Scale of the flare core."""
    return 1 + 0.3 * math.sin(t * 5)


def glow_pulse(t: float) -> float:
    """Scale of the outer glow shell."""
    return 1 + 0.2 * math.sin(t * 3)


def ring_rotation(t: float) -> float:
    """Particle ring angle (radians)."""
    return t * 0.5


def sun_rotation(t: float) -> float:
    """Sun surface spin about +y (radians)."""
    return t * 0.05


def frame_times(n_frames: int, period: float) -> list[float]:
    """n_frames evenly spaced sample times in [0, period)."""
    if n_frames <= 0:
        return []
    step = period / n_frames
    return [i * step for i in range(n_frames)]
