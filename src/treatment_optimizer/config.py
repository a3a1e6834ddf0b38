"""Configuration management for Treatment Optimizer."""

import logging
import os
import random
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings loaded from environment variables.

    Attributes:
        log_level: Logging verbosity level.
        data_dir: Directory holding catalog files and recommendation history.
        max_iterations: Iteration cap for the hill climbing search.
        random_seed: Seed for the random starting treatment (None = unseeded).
    """

    log_level: str
    data_dir: Path
    max_iterations: int
    random_seed: int | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables.

        Returns:
            Settings instance with loaded configuration.
        """
        load_dotenv()

        log_level = os.getenv("LOG_LEVEL", "INFO")
        data_dir = Path(os.getenv("DATA_DIR", "./data"))
        max_iterations = int(os.getenv("MAX_ITERATIONS", "100"))
        seed_value = os.getenv("RANDOM_SEED", "").strip()
        random_seed = int(seed_value) if seed_value else None

        logger.debug(
            f"Loaded settings: log_level={log_level}, data_dir={data_dir}, "
            f"max_iterations={max_iterations}, random_seed={random_seed}"
        )

        return cls(
            log_level=log_level,
            data_dir=data_dir,
            max_iterations=max_iterations,
            random_seed=random_seed,
        )

    def ensure_directories(self) -> None:
        """Create required directories if they don't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Ensured data directory exists: {self.data_dir}")

    def make_rng(self) -> random.Random:
        """Create the random source used to pick the starting treatment."""
        return random.Random(self.random_seed)
