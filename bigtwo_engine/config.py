"""Configuration for the Big Two engine.

Values come from environment variables with the defaults below, and can be
overridden per game by passing an EngineConfig to the engine.
"""

import os
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

# Configuration from environment variables
SEED = os.getenv("BIGTWO_SEED")
CPU_DELAY = os.getenv("BIGTWO_CPU_DELAY", "0")
DECISION_TIMEOUT = os.getenv("BIGTWO_DECISION_TIMEOUT")
LOG_LEVEL = os.getenv("BIGTWO_LOG_LEVEL", "INFO").upper()

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _parse_optional_int(name: str, raw: Optional[str]) -> Optional[int]:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _parse_optional_seconds(name: str, raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    try:
        seconds = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of seconds, got {raw!r}") from None
    if seconds < 0:
        raise ValueError(f"{name} cannot be negative, got {raw!r}")
    return seconds


@dataclass
class EngineConfig:
    """Engine settings.

    Attributes:
        seed: Seed for the default random source (None = fresh entropy)
        cpu_delay: Seconds to pause before automated turns and at round ends
        decision_timeout: Seconds an interactive seat may take before the
            automated policy decides for it (None = wait forever)
        log_level: Level used by configure_logging
    """

    seed: Optional[int] = None
    cpu_delay: float = 0.0
    decision_timeout: Optional[float] = None
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.cpu_delay < 0:
            raise ValueError(f"cpu_delay cannot be negative, got {self.cpu_delay}")
        if self.decision_timeout is not None and self.decision_timeout < 0:
            raise ValueError(f"decision_timeout cannot be negative, got {self.decision_timeout}")
        self.log_level = self.log_level.upper()
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}, got {self.log_level!r}")

    @classmethod
    def from_env(cls, environ: Optional[Dict[str, str]] = None) -> "EngineConfig":
        """Build a config from `environ` (defaults to the process environment)."""
        env = os.environ if environ is None else environ
        return cls(
            seed=_parse_optional_int("BIGTWO_SEED", env.get("BIGTWO_SEED")),
            cpu_delay=_parse_optional_seconds("BIGTWO_CPU_DELAY", env.get("BIGTWO_CPU_DELAY")) or 0.0,
            decision_timeout=_parse_optional_seconds("BIGTWO_DECISION_TIMEOUT", env.get("BIGTWO_DECISION_TIMEOUT")),
            log_level=env.get("BIGTWO_LOG_LEVEL", "INFO"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# Environment variable documentation
ENVIRONMENT_VARIABLES = {
    "BIGTWO_SEED": {
        "description": "Seed for shuffling (integer, unset for random games)",
        "default": None,
        "current": SEED,
    },
    "BIGTWO_CPU_DELAY": {
        "description": "Pause in seconds before CPU turns (display pacing)",
        "default": "0",
        "current": CPU_DELAY,
    },
    "BIGTWO_DECISION_TIMEOUT": {
        "description": "Seconds before an interactive seat falls back to the CPU policy",
        "default": None,
        "current": DECISION_TIMEOUT,
    },
    "BIGTWO_LOG_LEVEL": {
        "description": f"Logging level ({'/'.join(VALID_LOG_LEVELS)})",
        "default": "INFO",
        "current": LOG_LEVEL,
    },
}


def print_environment_variables() -> None:
    """Print documentation for environment variables."""
    print("Environment Variables")
    print("=" * 50)

    for var_name, info in ENVIRONMENT_VARIABLES.items():
        print(f"{var_name}:")
        print(f"  Description: {info['description']}")
        print(f"  Default: {info['default']}")
        print(f"  Current: {info['current']}")
        print()


if __name__ == "__main__":
    print_environment_variables()
