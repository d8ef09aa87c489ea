"""Shared test fixtures."""

import json
import logging
from pathlib import Path

import pytest

from badevann.config.settings_store import SettingsStore
from badevann.ingest.yr_client import YrClient
from badevann.models.temperature import TemperatureRecord, TemperatureSnapshot
from badevann.service.data_service import DataService
from badevann.storage.cache_repo import CacheRepo

TEST_ENDPOINT = "https://test-yr.example.com/api/v0/regions/NO/watertemperatures"

# 2024-07-01T12:00:00Z
NOW_MS = 1719835200000


@pytest.fixture(autouse=True)
def _restore_log_levels():
    """set_debug() changes global logger levels; undo it after each test."""
    names = ("", "httpx", "httpcore")
    saved = {n: logging.getLogger(n).level for n in names}
    yield
    for n, level in saved.items():
        logging.getLogger(n).setLevel(level)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def api_records(fixtures_dir: Path) -> list[dict]:
    with open(fixtures_dir / "watertemperatures.json", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def snapshot(api_records: list[dict]) -> TemperatureSnapshot:
    records = [TemperatureRecord.from_api(r) for r in api_records]
    return TemperatureSnapshot.from_records(records, timestamp=NOW_MS)


@pytest.fixture
def client() -> YrClient:
    return YrClient(endpoint=TEST_ENDPOINT)


@pytest.fixture
def cache_repo(tmp_path: Path) -> CacheRepo:
    return CacheRepo(tmp_path / "cache.json")


@pytest.fixture
def settings_store(tmp_path: Path) -> SettingsStore:
    store = SettingsStore(tmp_path / "settings.json")
    store.load()
    return store


@pytest.fixture
def make_service(client: YrClient, cache_repo: CacheRepo):
    """Build a DataService with a fixed clock."""

    def _make(cache_timeout: int = 60, now: int = NOW_MS) -> DataService:
        return DataService(client, cache_repo, cache_timeout, clock=lambda: now)

    return _make


@pytest.fixture
def loaded_service(make_service, cache_repo: CacheRepo, snapshot: TemperatureSnapshot) -> DataService:
    """A service whose fresh cache already holds the fixture snapshot."""
    cache_repo.write(snapshot)
    service = make_service()
    service.get_temperature_data()
    return service
