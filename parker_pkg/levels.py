# parker_pkg/levels.py
"""Built-in levels shipped with the game (600 x 400 arenas)."""
from __future__ import annotations

from typing import List

from .level import Bounds, Level, Rect, StartPose

ARENA = Bounds(600.0, 400.0)

# Outer walls, 20 px thick
_TOP    = Rect(0, 0, 600, 20)
_BOTTOM = Rect(0, 380, 600, 20)
_LEFT   = Rect(0, 0, 20, 400)
_RIGHT  = Rect(580, 0, 20, 400)

LEVELS: List[Level] = [
    Level(
        id=1,
        name="The Basic Box",
        description="Get used to the controls. Park the car in the green box.",
        bounds=ARENA,
        start=StartPose(100, 200, 0),
        target=Rect(450, 150, 100, 100),
        obstacles=(
            _TOP, _BOTTOM, _LEFT, _RIGHT,
            Rect(300, 100, 20, 200),          # wall in the middle
        ),
    ),
    Level(
        id=2,
        name="The Alley Turn",
        description="A tight L-turn. Don't scratch the paint.",
        bounds=ARENA,
        start=StartPose(80, 320, 0),
        target=Rect(450, 50, 80, 120),
        obstacles=(
            _TOP, _RIGHT, _BOTTOM, _LEFT,
            Rect(200, 150, 400, 250),         # inner block of the L
        ),
    ),
    Level(
        id=3,
        name="Parallel Nightmare",
        description="Parallel park between two cars.",
        bounds=ARENA,
        start=StartPose(100, 200, 0),
        target=Rect(400, 280, 120, 60),
        obstacles=(
            Rect(0, 360, 600, 40),            # curb
            Rect(540, 290, 50, 50),           # car in front
            Rect(250, 290, 50, 50),           # car behind
            Rect(400, 50, 50, 100),
            _LEFT, _RIGHT, _TOP,
        ),
    ),
]
