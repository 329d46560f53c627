import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from parker_pkg.level import Bounds, Level, Rect, StartPose


def make_level(start=(100.0, 200.0, 0.0), target=Rect(450, 150, 100, 100),
               obstacles=(), bounds=(600.0, 400.0), level_id=99):
    return Level(
        id=level_id,
        name="test level",
        bounds=Bounds(*bounds),
        start=StartPose(*start),
        target=target,
        obstacles=tuple(obstacles),
    )


@pytest.fixture
def open_level():
    """Empty 600x400 arena, target box on the right."""
    return make_level()
