"""
Configuration - Environment-driven settings and logging setup.

Environment variables:
- TICTAC_LOG_LEVEL: logging level name (default WARNING)
- TICTAC_SEED: integer seed for the bot's random choices
- TICTAC_DIFFICULTY: default difficulty (easy, medium, hard or 1-3)

Command-line flags override the environment.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping
import logging
import os

from .bots.difficulty import Difficulty

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    """Process-wide settings for the console game."""
    log_level: str = DEFAULT_LOG_LEVEL
    seed: int | None = None
    difficulty: Difficulty | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Read settings from the environment."""
        env = os.environ if environ is None else environ

        seed_text = env.get("TICTAC_SEED")
        seed = None
        if seed_text:
            try:
                seed = int(seed_text)
            except ValueError:
                raise ValueError(f"TICTAC_SEED must be an integer, got {seed_text!r}") from None

        difficulty_text = env.get("TICTAC_DIFFICULTY")
        difficulty = Difficulty.parse(difficulty_text) if difficulty_text else None

        return cls(
            log_level=env.get("TICTAC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            seed=seed,
            difficulty=difficulty,
        )


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL):
    """Configure the root logger for the console game."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
