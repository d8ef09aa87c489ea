"""YAML loader for temperature threshold overrides."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from badevann.config.defaults import DEFAULT_COLOR_BANDS, DEFAULT_EMOJI_BANDS, DEFAULT_THRESHOLDS
from badevann.config.schema import ThresholdConfig

logger = logging.getLogger(__name__)


def load_thresholds(path: str | Path) -> ThresholdConfig:
    """Load threshold tables from a YAML file.

    Sections missing from the file fall back to the built-in tables. A
    missing or invalid file yields the built-in tables unchanged.
    """
    path = Path(path)
    if not path.exists():
        return DEFAULT_THRESHOLDS

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"expected a mapping, got {type(raw).__name__}")

        if not raw.get("colors"):
            raw["colors"] = [b.model_dump() for b in DEFAULT_COLOR_BANDS]
        if not raw.get("emojis"):
            raw["emojis"] = [b.model_dump() for b in DEFAULT_EMOJI_BANDS]

        return ThresholdConfig(**raw)
    except (yaml.YAMLError, ValidationError, ValueError, TypeError) as e:
        logger.warning("Ignoring invalid threshold file %s: %s", path, e)
        return DEFAULT_THRESHOLDS
