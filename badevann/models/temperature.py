"""Water temperature records and the snapshot they are cached in."""

from dataclasses import dataclass, field
from datetime import datetime

from badevann.models.common import parse_timestamp


@dataclass(frozen=True)
class Position:
    lat: float
    lon: float


@dataclass(frozen=True)
class Location:
    name: str
    county: str | None
    municipality: str | None
    category: str
    url_path: str
    position: Position | None


@dataclass(frozen=True)
class TemperatureRecord:
    location: Location
    temperature: float
    time: str  # as supplied by the server, never corrected
    source: str | None = None
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    @property
    def name(self) -> str:
        return self.location.name

    @property
    def measured_at(self) -> datetime | None:
        return parse_timestamp(self.time)

    @classmethod
    def from_api(cls, raw: dict) -> "TemperatureRecord":
        """Build a record from one element of the API response."""
        loc = raw.get("location") or {}
        pos = loc.get("position")
        position = None
        if isinstance(pos, dict) and "lat" in pos and "lon" in pos:
            position = Position(lat=float(pos["lat"]), lon=float(pos["lon"]))

        return cls(
            location=Location(
                name=str(loc.get("name", "")),
                county=_nested_name(loc, "region"),
                municipality=_nested_name(loc, "subregion"),
                category=_nested_name(loc, "category") or "",
                url_path=str(loc.get("urlPath", "")),
                position=position,
            ),
            temperature=float(raw.get("temperature", 0)),
            time=str(raw.get("time", "")),
            source=raw.get("sourceDisplayName") or None,
            raw=raw,
        )


def _nested_name(loc: dict, key: str) -> str | None:
    value = loc.get(key)
    if isinstance(value, dict):
        name = value.get("name")
        return str(name) if name else None
    return None


def _distinct_sorted(names) -> list[str]:
    return sorted(dict.fromkeys(n for n in names if n))


@dataclass(frozen=True)
class TemperatureSnapshot:
    """One fetch worth of records plus lookup lists derived from them."""

    timestamp: int  # epoch milliseconds
    records: list[TemperatureRecord]
    counties: list[str]
    municipalities: list[str]
    beaches: list[str]

    @classmethod
    def from_records(cls, records: list[TemperatureRecord], timestamp: int) -> "TemperatureSnapshot":
        return cls(
            timestamp=timestamp,
            records=list(records),
            counties=_distinct_sorted(r.location.county for r in records),
            municipalities=_distinct_sorted(r.location.municipality for r in records),
            beaches=_distinct_sorted(r.location.name for r in records),
        )

    @classmethod
    def from_cache(cls, data: dict) -> "TemperatureSnapshot":
        """Rebuild from the cache file layout, keeping the stored lists."""
        return cls(
            timestamp=int(data["Timestamp"]),
            records=[TemperatureRecord.from_api(r) for r in data["Data"]],
            counties=list(data["Counties"]),
            municipalities=list(data["Municipalities"]),
            beaches=list(data["Beaches"]),
        )

    def to_cache(self) -> dict:
        return {
            "Timestamp": self.timestamp,
            "Data": [r.raw for r in self.records],
            "Counties": self.counties,
            "Municipalities": self.municipalities,
            "Beaches": self.beaches,
        }

    def find_by_name(self, name: str) -> TemperatureRecord | None:
        """Case-insensitive exact match on the beach name."""
        wanted = name.lower()
        for record in self.records:
            if record.name.lower() == wanted:
                return record
        return None

    def search(self, partial: str) -> list[TemperatureRecord]:
        """Case-insensitive substring match, in snapshot order."""
        needle = partial.lower()
        return [r for r in self.records if needle in r.name.lower()]

    def by_county(self, county: str) -> list[TemperatureRecord]:
        return [r for r in self.records if r.location.county == county]

    def by_municipality(self, municipality: str) -> list[TemperatureRecord]:
        return [r for r in self.records if r.location.municipality == municipality]

    def by_temperature_descending(self, limit: int | None = None) -> list[TemperatureRecord]:
        """Warmest first. Equal temperatures keep their snapshot order."""
        ranked = sorted(self.records, key=lambda r: r.temperature, reverse=True)
        return ranked[:limit] if limit else ranked
