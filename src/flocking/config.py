from __future__ import annotations

import logging
import math
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml

logger = logging.getLogger(__name__)

# Width and height of the simulation area.
SIZE: tuple[float, float] = (1600.0, 1000.0)

SETTINGS_KEY = "flocking.settings"

_LEGACY_NAMES = {"boids": "population"}


class SettingsError(ValueError):
    pass


@dataclass(frozen=True)
class Settings:
    # Number of boids.
    population: int = 300
    # View distance of a boid.
    visible_range: float = 80.0
    # Distance boids try to keep between each other.
    min_distance: float = 15.0
    max_speed: float = 20.0
    # Force multiplier for pulling boids together.
    cohesion_factor: float = 0.05
    # Force multiplier for separating boids.
    separation_factor: float = 0.6
    # Force multiplier for matching velocity of other boids.
    alignment_factor: float = 0.15
    # Controls turn speed to avoid leaving the boundary.
    turn_speed_ratio: float = 0.25
    # Fraction of the area size at which a boid starts turning more.
    border_margin: float = 0.1
    # Factor for adapting the average color of the swarm.
    color_adapt_factor: float = 0.05

    @staticmethod
    def from_yaml(path: Path) -> "Settings":
        data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
        return load_settings(data or {})

    def replace(self, **changes: Any) -> "Settings":
        return replace(self, **changes)

    def warnings(self) -> List[str]:
        """Notes about legal values that make the flock behave degenerately."""
        notes: List[str] = []
        for item in fields(self):
            if item.name == "population":
                continue
            if getattr(self, item.name) < 0:
                notes.append(f"{item.name} is negative ({getattr(self, item.name)})")
        if self.population == 0:
            notes.append("population is zero")
        if self.min_distance > self.visible_range:
            notes.append("min_distance exceeds visible_range; separation never triggers")
        if self.border_margin >= 0.5:
            notes.append("border_margin >= 0.5; both boundary thresholds can fire at once")
        return notes


def load_settings(raw: Mapping[str, Any]) -> Settings:
    if not isinstance(raw, Mapping):
        raise SettingsError(f"settings must be a mapping, got {type(raw).__name__}")
    nested = raw.get(SETTINGS_KEY)
    if isinstance(nested, Mapping):
        raw = nested

    known = {item.name for item in fields(Settings)}
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        name = _LEGACY_NAMES.get(key, key)
        if name not in known:
            raise SettingsError(f"Unknown setting: {key}")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SettingsError(f"Setting {key} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise SettingsError(f"Setting {key} must be finite, got {value!r}")
        values[name] = int(value) if name == "population" else float(value)
    if values.get("population", 0) < 0:
        raise SettingsError("population must not be negative")
    return Settings(**values)


def load_settings_file(path: Path) -> Settings:
    """Load settings from ``path``, falling back to the defaults on any failure."""
    path = Path(path)
    if not path.is_file():
        logger.info("No settings at %s, using defaults", path)
        return Settings()
    try:
        settings = Settings.from_yaml(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        logger.warning("Could not load settings from %s (%s), using defaults", path, exc)
        return Settings()
    for note in settings.warnings():
        logger.warning("Settings %s: %s", path, note)
    return settings
