import os
from dataclasses import dataclass


@dataclass
class EngineConfig:
    # tolerances
    rest_epsilon: float = 1e-3         # |v| below this: pose frozen for the tick
    win_speed_epsilon: float = 0.1     # |v| below this: counts as parked

    # session
    initial_speed_level: int = 1
    strict_ticks: bool = False         # raise instead of ignoring ticks after game over

    # gym wrapper
    max_steps: int = 2000

    # custom level storage
    data_dir: str = "custom_levels"
    custom_levels_file: str = "custom_levels.json"
    custom_level_id_base: int = 1000

    @property
    def custom_levels_path(self) -> str:
        return os.path.join(self.data_dir, self.custom_levels_file)
