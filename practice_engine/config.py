"""Tuning constants and runtime settings for the practice engine."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

# Level thresholds: a level at or below the bound belongs to the tier
EASY_MAX_LEVEL = 5
MEDIUM_MAX_LEVEL = 10
INTERMEDIATE_MAX_LEVEL = 15
DIFFICULT_MAX_LEVEL = 20

# Round durations (seconds)
MATH_ROUND_SECONDS = 30
WORD_ROUND_SECONDS = 45

# XP formula
MATH_BASE_XP = 15
WORD_BASE_XP = 20
TIME_BONUS_STEP = 5            # seconds per time-bonus tick
MATH_TIME_BONUS = 2            # XP per time-bonus tick
WORD_TIME_BONUS = 3
MATH_LEVEL_DIVISOR = 5
WORD_LEVEL_DIVISOR = 3
DIFFICULTY_MULTIPLIER = 5
FILL_MODE_BONUS = 5
DESCRIBE_MODE_BONUS = 10

XP_PER_LEVEL = 150

# Generation
CHOICE_COUNT = 5
MAX_GENERATION_ATTEMPTS = 10
RECENT_EQUATION_WINDOW = 50   # equation keys remembered for repeat-avoidance
MASK_RATIO = 0.4
MIN_BLANKS = 2
BLANK_MARKER = "_"

CONFIG_ENV_VAR = "PRACTICE_ENGINE_CONFIG"


class EngineSettings(BaseModel):
    seed: Optional[int] = Field(default=None)
    log_level: str = "INFO"
    recent_equation_window: int = Field(default=RECENT_EQUATION_WINDOW, ge=1)
    max_generation_attempts: int = Field(default=MAX_GENERATION_ATTEMPTS, ge=1)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "EngineSettings":
        path = config_path or _default_config_path()
        data: dict = {}
        if path is not None and path.exists():
            with open(path) as f:
                data = yaml.safe_load(f) or {}

        seed = os.environ.get("PRACTICE_ENGINE_SEED")
        if seed:
            data["seed"] = int(seed)
        log_level = os.environ.get("PRACTICE_ENGINE_LOG_LEVEL")
        if log_level:
            data["log_level"] = log_level
        return cls(**data)


def _default_config_path() -> Optional[Path]:
    value = os.environ.get(CONFIG_ENV_VAR)
    return Path(value) if value else None
