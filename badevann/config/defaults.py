"""Static endpoints, file locations, threshold tables and settings choices."""

import os
from pathlib import Path

from badevann.config.schema import Band, OutputFormat, ThresholdConfig

API_ENDPOINT = "https://www.yr.no/api/v0/regions/NO/watertemperatures"

CONFIG_DIR_ENV = "BADEVANN_HOME"
SETTINGS_FILENAME = "settings.json"
CACHE_FILENAME = "cache.json"
THRESHOLDS_FILENAME = "thresholds.yaml"

# Shown at most in the county/municipality pickers
REGION_PAGE_SIZE = 20


def config_dir() -> Path:
    """Folder holding settings, cache and threshold overrides."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override)
    return Path.home() / ".badevann"


DEFAULT_COLOR_BANDS: list[Band] = [
    Band(name="hot", min=25, symbol="red"),
    Band(name="warm", min=22, symbol="yellow"),
    Band(name="mid", min=17, symbol="green"),
    Band(name="cool", min=15, symbol="cyan"),
    Band(name="cold", symbol="blue"),
]

DEFAULT_EMOJI_BANDS: list[Band] = [
    Band(name="hot", min=25, symbol="🥵"),
    Band(name="warm", min=22, symbol="😎"),
    Band(name="pleasant", min=20, symbol="😁"),
    Band(name="comfortable", min=17, symbol="😊"),
    Band(name="cool", min=15, symbol="😑"),
    Band(name="cold", min=10, symbol="🥶"),
    Band(name="freezing", symbol="⛄️"),
]

DEFAULT_THRESHOLDS = ThresholdConfig(colors=DEFAULT_COLOR_BANDS, emojis=DEFAULT_EMOJI_BANDS)


# Settings editor choices: (label, value)
OUTPUT_FORMAT_CHOICES: list[tuple[str, OutputFormat]] = [
    ("Kun temperatur", OutputFormat.TEMP_ONLY),
    ("Kortversjon", OutputFormat.SHORT),
    ("Langversjon", OutputFormat.LONG),
    ("ISO", OutputFormat.ISO),
]

BEACH_COUNT_CHOICES: list[tuple[str, int]] = [
    (str(n), n) for n in (5, 10, 15, 20, 50)
]

CACHE_TIMEOUT_CHOICES: list[tuple[str, int]] = [
    ("0 (ingen cache)", 0),
    ("5 min", 5),
    ("30 min", 30),
    ("1 time", 60),
    ("4 timer", 240),
    ("8 timer", 480),
    ("12 timer", 720),
    ("24 timer", 1440),
]

DEBUG_MODE_CHOICES: list[tuple[str, bool]] = [
    ("Ja", True),
    ("Nei", False),
]
