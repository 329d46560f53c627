"""Angle helpers shared by the engine and its HUD / editor collaborators.
=======================================================================
All functions here are **stateless**, pure utilities that can be imported
by *geometry.py*, *evaluator.py* and *vehicles* without causing circular
dependencies.
"""

from __future__ import annotations

import math

__all__ = [
    "to_radians",
    "to_degrees",
    "normalize_angle",
]


def to_radians(deg: float) -> float:
    return deg * math.pi / 180.0


def to_degrees(rad: float) -> float:
    return rad * 180.0 / math.pi


def normalize_angle(angle: float) -> float:
    """Wrap *angle* into the interval ``[0, 2*pi)``.

    The kinematic model never wraps the heading itself; this is for
    display and reporting.

    Parameters
    ----------
    angle : float
        Angle in **radians**.

    Returns
    -------
    float
        Wrapped angle.
    """
    a = math.fmod(angle, 2 * math.pi)
    if a < 0:
        a += 2 * math.pi
    # fmod of a tiny negative number can round back up to exactly 2*pi
    return 0.0 if a >= 2 * math.pi else a

