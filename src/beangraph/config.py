"""
Global Configuration and Layout Defaults.

Module constants hold the reference values of the diagram. LayoutConfig
bundles them into a model that can be overridden from the "layout"
section of .beangraph/config.yaml.
"""

import logging
import math
from pathlib import Path
from typing import Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(".beangraph/config.yaml")

# --- Glyphs ---
NODE_RADIUS = 5.0
PULSE_SCALE = 1.5
PULSE_DURATION = "1s"

# --- Forces ---
# More negative means stronger repulsion
CHARGE_STRENGTH = -16.0
CHARGE_DISTANCE_MIN = 1.0
LINK_DISTANCE = 30.0
COLLIDE_STRENGTH = 1.0

# --- Simulation schedule ---
ALPHA_START = 1.0
ALPHA_MIN = 0.001
ALPHA_TARGET = 0.0
# Reaches ALPHA_MIN from 1 in 300 ticks
ALPHA_DECAY = 1 - math.pow(ALPHA_MIN, 1 / 300)
VELOCITY_DECAY = 0.4

# --- Surface ---
DEFAULT_WIDTH = 960.0
DEFAULT_HEIGHT = 600.0
DEFAULT_SEED = 1


class Bounds(BaseModel):
    """Drawing surface size; the layout is centered within it."""
    width: float = Field(default=DEFAULT_WIDTH, gt=0)
    height: float = Field(default=DEFAULT_HEIGHT, gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def center(self):
        return self.width / 2, self.height / 2


class LayoutConfig(BaseModel):
    """Tunable parameters of the force layout."""
    radius: float = Field(default=NODE_RADIUS, gt=0)
    charge_strength: float = CHARGE_STRENGTH
    charge_distance_min: float = Field(default=CHARGE_DISTANCE_MIN, gt=0)
    link_distance: float = Field(default=LINK_DISTANCE, ge=0)
    collide_strength: float = Field(default=COLLIDE_STRENGTH, ge=0, le=1)
    alpha_min: float = Field(default=ALPHA_MIN, gt=0, lt=1)
    alpha_decay: float = Field(default=ALPHA_DECAY, ge=0, lt=1)
    alpha_target: float = Field(default=ALPHA_TARGET, ge=0)
    velocity_decay: float = Field(default=VELOCITY_DECAY, ge=0, le=1)
    seed: int = DEFAULT_SEED

    model_config = ConfigDict(extra="ignore")


def load_config(path: Optional[Union[str, Path]] = None) -> LayoutConfig:
    """
    Load the layout section of a YAML config file.

    A missing file yields the defaults. Unreadable YAML or invalid values
    raise ConfigError.
    """
    config_path = Path(path) if path else DEFAULT_CONFIG_PATH
    if not config_path.exists():
        if path:
            raise ConfigError(f"Config file not found: {config_path}")
        return LayoutConfig()

    try:
        with open(config_path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a mapping")

    try:
        config = LayoutConfig.model_validate(data.get("layout") or {})
    except ValidationError as e:
        raise ConfigError(f"Invalid layout settings in {config_path}: {e}") from e

    logger.debug("Loaded layout config from %s", config_path)
    return config
