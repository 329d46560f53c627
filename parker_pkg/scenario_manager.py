# parker_pkg/scenario_manager.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from .config import EngineConfig
from .level import Level, LevelValidationError, validate_level
from .levels import LEVELS

logger = logging.getLogger(__name__)


class ScenarioManager:
    """
    Level catalogue: built-in levels plus user-authored ones stored as a
    JSON list of level records. Zero coupling to the session; only hands
    out immutable ``Level`` objects.
    """

    def __init__(self, cfg: Optional[EngineConfig] = None):
        self.cfg = cfg or EngineConfig()
        self.path = Path(self.cfg.custom_levels_path)

    # ---------- Public API -------------------------------------------------
    def builtin(self) -> List[Level]:
        return list(LEVELS)

    def all_levels(self) -> List[Level]:
        return self.builtin() + self.load_custom()

    def get(self, level_id: int) -> Level:
        for level in self.all_levels():
            if level.id == level_id:
                return level
        raise KeyError(f"no level with id {level_id}")

    def next_level_id(self, levels: Optional[Iterable[Level]] = None) -> int:
        if levels is None:
            levels = self.load_custom()
        return max([self.cfg.custom_level_id_base, *(lvl.id for lvl in levels)]) + 1

    # ---------- Custom level storage ----------------------------------------
    def load_custom(self) -> List[Level]:
        """Read the custom level store; an unreadable file yields no levels.

        Each record is validated on its own and invalid ones are skipped,
        so one bad level does not hide the rest.
        """
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:   # ValueError covers bad JSON and bad UTF-8
            logger.warning("Failed to load custom levels from %s: %s", self.path, exc)
            return []
        if not isinstance(data, list):
            logger.warning("Failed to load custom levels from %s: expected a list of levels, got %s",
                           self.path, type(data).__name__)
            return []

        levels = []
        for i, d in enumerate(data):
            try:
                levels.append(validate_level(Level.from_dict(d)))
            except LevelValidationError as exc:
                logger.warning("Skipping custom level #%d in %s: %s", i, self.path, exc)
        logger.info("Loaded %d custom level(s) from %s", len(levels), self.path)
        return levels

    def save_custom(self, levels: Iterable[Level]) -> Path:
        levels = list(levels)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([lvl.to_dict() for lvl in levels], f, indent=2)
        logger.info("Saved %d custom level(s) to %s", len(levels), self.path)
        return self.path
