"""Repository for the on-disk temperature snapshot cache."""

import json
import logging
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from badevann.models.temperature import TemperatureSnapshot

logger = logging.getLogger(__name__)


class MissReason(StrEnum):
    MISSING = "missing"
    CORRUPT = "corrupt"


@dataclass(frozen=True)
class CacheHit:
    snapshot: TemperatureSnapshot


@dataclass(frozen=True)
class CacheMiss:
    reason: MissReason
    detail: str = ""


CacheRead = CacheHit | CacheMiss


class CacheRepo:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def read(self) -> CacheRead:
        """Read the cached snapshot. Never raises for a bad or absent file."""
        logger.debug("Trying to read from %s", self.path)
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return CacheMiss(MissReason.MISSING)
        except (OSError, UnicodeDecodeError) as e:
            return CacheMiss(MissReason.CORRUPT, str(e))

        logger.debug("Cache size: %d KB", round(len(text.encode("utf-8")) / 1000))
        try:
            data = json.loads(text)
            snapshot = TemperatureSnapshot.from_cache(data)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError, AttributeError) as e:
            return CacheMiss(MissReason.CORRUPT, f"{type(e).__name__}: {e}")
        return CacheHit(snapshot)

    def write(self, snapshot: TemperatureSnapshot) -> Path:
        """Persist a snapshot, replacing any previous one."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(snapshot.to_cache(), f, ensure_ascii=False)
        tmp.replace(self.path)
        return self.path
