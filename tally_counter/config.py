"""
================================================================================
Counter Configuration Module
================================================================================

Manages the start-up configuration of the tally counter.

Features:
- Widget width (every size is derived from it)
- Initial count shown at launch
- Optional logo image path and log level
- Configuration save/load to JSON
- Validation with readable messages

The count itself is never written here: every launch starts from the
configured initial count.
================================================================================
"""

import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

try:
    from .utils.constants import DEFAULT_WIDTH, MIN_COUNT, MAX_COUNT
except ImportError:
    from utils.constants import DEFAULT_WIDTH, MIN_COUNT, MAX_COUNT

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CounterConfig:
    """
    Start-up configuration for the counter window.

    Attributes:
        width: Width of the counter widget in pixels
        initial_count: Count shown at launch
        logo_path: Image shown above the counter (bundled logo if None)
        log_level: Name of the logging level
    """

    width: float = DEFAULT_WIDTH
    initial_count: int = MIN_COUNT
    logo_path: Optional[str] = None
    log_level: str = "INFO"

    @property
    def is_valid(self) -> bool:
        return not self.validate()

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "width": self.width,
            "initial_count": self.initial_count,
            "logo_path": self.logo_path,
            "log_level": self.log_level,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CounterConfig':
        """Create from dictionary."""
        logo_path = data.get("logo_path")
        if logo_path is not None and not isinstance(logo_path, str):
            raise TypeError(f"logo_path must be a string, got {type(logo_path).__name__}")

        return cls(
            width=float(data.get("width", DEFAULT_WIDTH)),
            initial_count=int(data.get("initial_count", MIN_COUNT)),
            logo_path=logo_path,
            log_level=str(data.get("log_level", "INFO")).upper(),
        )

    def save(self, filepath: str):
        """Save configuration to JSON file."""
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: str) -> 'CounterConfig':
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls.from_dict(data)

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of issues.

        Returns:
            List of validation error messages (empty if valid)
        """
        issues = []

        if not (math.isfinite(self.width) and self.width > 0):
            issues.append(f"Width must be a positive number, got {self.width}")

        if not MIN_COUNT <= self.initial_count <= MAX_COUNT:
            issues.append(
                f"Initial count {self.initial_count} out of range ({MIN_COUNT}-{MAX_COUNT})"
            )

        if self.log_level not in LOG_LEVELS:
            issues.append(f"Unknown log level: {self.log_level}")

        if self.logo_path and not Path(self.logo_path).exists():
            issues.append(f"Logo file not found: {self.logo_path}")

        return issues


# Default configuration file location, overridable from the environment
CONFIG_ENV_VAR = "TALLY_COUNTER_CONFIG"
DEFAULT_CONFIG_NAME = "tally_config.json"


def get_config_path() -> Path:
    """Resolve where the configuration file is read from."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.cwd() / DEFAULT_CONFIG_NAME


def get_default_config() -> CounterConfig:
    """Get default configuration (loads from file if exists, otherwise creates new)."""
    path = get_config_path()
    if not path.exists():
        return CounterConfig()

    try:
        config = CounterConfig.load(str(path))
        issues = config.validate()
    except (OSError, ValueError, TypeError, AttributeError, OverflowError) as e:
        logger.error("Error loading config %s: %s", path, e)
        return CounterConfig()

    if issues:
        for issue in issues:
            logger.warning("Invalid config %s: %s", path, issue)
        return CounterConfig()

    logger.info("Loaded config from %s", path)
    return config


def save_default_config(config: CounterConfig):
    """Save as default configuration."""
    config.save(str(get_config_path()))
