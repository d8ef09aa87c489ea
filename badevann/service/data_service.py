"""Temperature data service: cached snapshot with fallback to a fresh fetch."""

import logging
from collections.abc import Callable
from enum import StrEnum

import httpx

from badevann.ingest.staleness import cache_age_minutes, is_cache_stale
from badevann.ingest.yr_client import YrClient
from badevann.models.common import now_ms
from badevann.models.temperature import TemperatureRecord, TemperatureSnapshot
from badevann.storage.cache_repo import CacheHit, CacheRepo

logger = logging.getLogger(__name__)


class DataUnavailable(Exception):
    """Raised when neither the network nor the cache can supply data."""


class CacheStatus(StrEnum):
    DISABLED = "disabled"
    MISSING = "missing"
    CORRUPT = "corrupt"
    STALE = "stale"
    FRESH = "fresh"


class DataService:
    """Loads the temperature snapshot once per run and answers queries on it."""

    def __init__(
        self,
        client: YrClient,
        cache: CacheRepo,
        cache_timeout: int,
        clock: Callable[[], int] = now_ms,
    ):
        self.client = client
        self.cache = cache
        self.cache_timeout = cache_timeout
        self.clock = clock
        self.last_cache_status: CacheStatus | None = None
        self._snapshot: TemperatureSnapshot | None = None

    @property
    def snapshot(self) -> TemperatureSnapshot:
        if self._snapshot is None:
            raise RuntimeError("Temperature data has not been loaded")
        return self._snapshot

    def get_temperature_data(self) -> TemperatureSnapshot:
        """Return the cached snapshot if fresh, otherwise fetch a new one.

        If the fetch fails, a readable but stale cache is used instead.
        Raises DataUnavailable when there is nothing to fall back on.
        """
        logger.debug("Getting temperature data")
        now = self.clock()
        cached = self.cache.read()

        if isinstance(cached, CacheHit):
            age = cache_age_minutes(cached.snapshot.timestamp, now)
            logger.debug("Cache age: %.1f min", age)
            if self.cache_timeout == 0:
                status = CacheStatus.DISABLED
            elif is_cache_stale(cached.snapshot.timestamp, self.cache_timeout, now):
                status = CacheStatus.STALE
            else:
                status = CacheStatus.FRESH
        else:
            status = (
                CacheStatus.DISABLED
                if self.cache_timeout == 0
                else CacheStatus(cached.reason.value)
            )
            if cached.detail:
                logger.debug("Cache unusable: %s", cached.detail)

        self.last_cache_status = status
        logger.debug("Cache status: %s", status)

        if status == CacheStatus.FRESH:
            self._snapshot = cached.snapshot
            return self._snapshot

        try:
            self._snapshot = self._fetch_fresh(now)
        except (httpx.HTTPError, ValueError) as e:
            if isinstance(cached, CacheHit):
                logger.warning("Fetch failed (%s), using cached data from %s", e, _describe(cached.snapshot))
                self._snapshot = cached.snapshot
                return self._snapshot
            raise DataUnavailable(f"Could not fetch temperature data: {e}") from e
        return self._snapshot

    def _fetch_fresh(self, now: int) -> TemperatureSnapshot:
        raw = self.client.get_water_temperatures()
        records = []
        for i, item in enumerate(raw):
            try:
                records.append(TemperatureRecord.from_api(item))
            except (TypeError, ValueError, AttributeError) as e:
                logger.warning("Skipping malformed record #%d: %s", i, e)
        snapshot = TemperatureSnapshot.from_records(records, timestamp=now)
        logger.debug(
            "Fetched %d records: %d counties, %d municipalities, %d beaches",
            len(snapshot.records), len(snapshot.counties),
            len(snapshot.municipalities), len(snapshot.beaches),
        )
        try:
            self.cache.write(snapshot)
        except OSError as e:
            logger.warning("Could not write cache file %s: %s", self.cache.path, e)
        return snapshot

    # --- Queries on the loaded snapshot ---

    def find_by_name(self, name: str) -> TemperatureRecord | None:
        return self.snapshot.find_by_name(name)

    def search(self, partial: str) -> list[TemperatureRecord]:
        return self.snapshot.search(partial)

    def by_county(self, county: str) -> list[TemperatureRecord]:
        return self.snapshot.by_county(county)

    def by_municipality(self, municipality: str) -> list[TemperatureRecord]:
        return self.snapshot.by_municipality(municipality)

    def by_temperature_descending(self, limit: int | None = None) -> list[TemperatureRecord]:
        return self.snapshot.by_temperature_descending(limit)

    def resolve(self, name: str) -> TemperatureRecord | None:
        """Exact match first, then the first substring match, else None."""
        record = self.find_by_name(name)
        if record is not None:
            return record

        logger.debug("Could not find exact match for '%s', trying fuzzy search", name)
        matches = self.search(name)
        if not matches:
            return None
        logger.debug("Found %d matches, using '%s'", len(matches), matches[0].name)
        return matches[0]


def _describe(snapshot: TemperatureSnapshot) -> str:
    return f"{len(snapshot.records)} records at {snapshot.timestamp}"
