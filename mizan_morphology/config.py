"""
Configuration for the Mizan morphology engine
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


def _env_path(name: str) -> Optional[Path]:
    value = os.environ.get(name)
    return Path(value) if value else None


@dataclass
class Config:
    """Main configuration."""

    # Definition files (None = built-in data, no persistence)
    data_dir: Optional[Path] = field(default_factory=lambda: _env_path("MIZAN_DATA_DIR"))
    roots_file: str = "racines.txt"
    schemes_file: str = "schemes.txt"
    transformations_file: str = "transformations.txt"

    # Fall back to built-in data for definition files that do not exist yet
    seed_missing: bool = True

    # Pattern store
    initial_capacity: int = 16
    load_factor: float = 0.75

    # Logging
    log_level: str = field(default_factory=lambda: os.environ.get("MIZAN_LOG_LEVEL", "INFO"))
    log_format: str = '%(asctime)s [%(levelname)s] %(message)s'

    def __post_init__(self):
        if self.data_dir is not None:
            self.data_dir = Path(self.data_dir)
        if self.initial_capacity < 1:
            raise ValueError(f"initial_capacity must be positive, got {self.initial_capacity}")
        if not 0 < self.load_factor <= 1:
            raise ValueError(f"load_factor must be in (0, 1], got {self.load_factor}")


# Global config instance
config = Config()
