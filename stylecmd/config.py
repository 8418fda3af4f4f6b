"""
Configuration module for the style command interpreter.

Settings come from config/settings.yaml (or $STYLECMD_CONFIG / --config).
Matching thresholds are grouped into tolerance presets; pick one with the
`tolerance` key instead of tuning thresholds one by one.

To add a new tolerance preset:
1. Add entry to TOLERANCE_PRESETS with your thresholds
2. Reference it from settings.yaml
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from loguru import logger

from stylecmd.core.color import DARK_FOREGROUND, FOREGROUND_LIGHTNESS_THRESHOLD, LIGHT_FOREGROUND


CONFIG_ENV_VAR = "STYLECMD_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config" / "settings.yaml"


# === TOLERANCE PRESETS ===
# How forgiving fuzzy matching is for targets, colors and radius words
TOLERANCE_PRESETS = {
    "STRICT": {
        "target_max_distance": 1,
        "target_min_similarity": 0.75,
        "color_max_distance": 1,
        "color_min_similarity": 0.8,
        "radius_min_similarity": 0.75,
        "use_phonetic": False,
    },
    "DEFAULT": {
        "target_max_distance": 2,
        "target_min_similarity": 0.6,
        "color_max_distance": 2,
        "color_min_similarity": 0.65,
        "radius_min_similarity": 0.6,
        "use_phonetic": True,
    },
    "LENIENT": {
        "target_max_distance": 3,
        "target_min_similarity": 0.5,
        "color_max_distance": 3,
        "color_min_similarity": 0.55,
        "radius_min_similarity": 0.5,
        "use_phonetic": True,
    },
}

ACTIVE_TOLERANCE = "DEFAULT"


@dataclass
class InterpreterConfig:
    """Main configuration for the interpreter.

    Attributes:
        tolerance: Tolerance preset name (STRICT, DEFAULT, LENIENT)
        debounce_ms: Persistence debounce window in milliseconds
        persist_dir: Directory for the YAML theme sink (None = log only)
        foreground_threshold: Surface lightness above which the dark foreground is used
        dark_foreground: Foreground written next to light surfaces
        light_foreground: Foreground written next to dark surfaces
        log_level: Console log level
        log_file: Optional log file path
    """
    tolerance: str = ACTIVE_TOLERANCE

    # Persistence
    debounce_ms: int = 500
    persist_dir: Optional[str] = None

    # Paired foreground
    foreground_threshold: float = FOREGROUND_LIGHTNESS_THRESHOLD
    dark_foreground: str = DARK_FOREGROUND
    light_foreground: str = LIGHT_FOREGROUND

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Computed from preset (set in __post_init__)
    target_max_distance: int = field(default=2, init=False)
    target_min_similarity: float = field(default=0.6, init=False)
    color_max_distance: int = field(default=2, init=False)
    color_min_similarity: float = field(default=0.65, init=False)
    radius_min_similarity: float = field(default=0.6, init=False)
    use_phonetic: bool = field(default=True, init=False)

    def __post_init__(self):
        """Validate and apply the tolerance preset."""
        self.tolerance = self.tolerance.upper()
        if self.tolerance not in TOLERANCE_PRESETS:
            raise ValueError(
                f"Unknown tolerance preset: {self.tolerance} "
                f"(expected one of {', '.join(TOLERANCE_PRESETS)})"
            )
        if self.debounce_ms < 0:
            raise ValueError(f"debounce_ms must be >= 0, got {self.debounce_ms}")
        if not 0 <= self.foreground_threshold <= 100:
            raise ValueError(f"foreground_threshold must be in 0..100, got {self.foreground_threshold}")

        preset = TOLERANCE_PRESETS[self.tolerance]
        self.target_max_distance = preset["target_max_distance"]
        self.target_min_similarity = preset["target_min_similarity"]
        self.color_max_distance = preset["color_max_distance"]
        self.color_min_similarity = preset["color_min_similarity"]
        self.radius_min_similarity = preset["radius_min_similarity"]
        self.use_phonetic = preset["use_phonetic"]


def config_from_dict(data: Optional[Dict[str, Any]]) -> InterpreterConfig:
    """Build an InterpreterConfig from the settings.yaml structure."""
    data = data or {}
    matching = data.get('matching', {}) or {}
    foreground = data.get('foreground', {}) or {}
    persistence = data.get('persistence', {}) or {}
    logging_cfg = data.get('logging', {}) or {}

    return InterpreterConfig(
        tolerance=str(matching.get('tolerance', ACTIVE_TOLERANCE)),
        debounce_ms=int(persistence.get('debounce_ms', 500)),
        persist_dir=persistence.get('directory'),
        foreground_threshold=float(foreground.get('threshold', FOREGROUND_LIGHTNESS_THRESHOLD)),
        dark_foreground=str(foreground.get('dark', DARK_FOREGROUND)),
        light_foreground=str(foreground.get('light', LIGHT_FOREGROUND)),
        log_level=str(logging_cfg.get('level', 'INFO')).upper(),
        log_file=logging_cfg.get('file'),
    )


def load_config(config_path: Optional[str] = None) -> InterpreterConfig:
    """Load configuration from file.

    Lookup order: explicit path, $STYLECMD_CONFIG, config/settings.yaml.
    A missing file yields the defaults.

    Args:
        config_path: Path to a YAML settings file, or None

    Returns:
        InterpreterConfig with all settings
    """
    candidates = [config_path, os.environ.get(CONFIG_ENV_VAR), str(DEFAULT_CONFIG_PATH)]

    for candidate in candidates:
        if not candidate:
            continue
        path = Path(candidate).expanduser()
        if path.exists():
            with open(path) as f:
                data = yaml.safe_load(f)
            logger.info(f"Loaded config from {path}")
            return config_from_dict(data)
        if candidate != str(DEFAULT_CONFIG_PATH):
            logger.warning(f"Config file not found: {path}")

    logger.info("Using default config")
    return InterpreterConfig()
