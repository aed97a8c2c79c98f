"""Simulation settings loaded from config.toml."""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"

logger = logging.getLogger(__name__)


class SimulationConfig(BaseModel):
    trials: int = Field(default=1000, ge=1)
    max_turns: int = Field(default=100, ge=0)
    seed: Optional[int] = None
    log_level: str = "WARNING"


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load config.toml from the project root. A missing file means defaults."""
    config_path = path or CONFIG_PATH
    if config_path.exists():
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    logger.debug("No config file at %s, using defaults", config_path)
    return {}


def get_simulation_config(path: Path | None = None) -> SimulationConfig:
    config = load_config(path)
    values = dict(config.get("simulation", {}))
    level = config.get("logging", {}).get("level")
    if level:
        values["log_level"] = level
    return SimulationConfig(**values)
