"""Tests for temperature records and snapshot queries."""

from badevann.models.temperature import TemperatureRecord, TemperatureSnapshot


class TestTemperatureRecord:
    def test_from_api(self, api_records: list[dict]):
        r = TemperatureRecord.from_api(api_records[0])
        assert r.name == "Kalvøya"
        assert r.location.county == "Akershus"
        assert r.location.municipality == "Bærum"
        assert r.location.category == "Badeplass"
        assert r.location.position.lat == 59.8946
        assert r.temperature == 19.5
        assert r.source == "Bærum kommune"
        assert r.raw is api_records[0]

    def test_missing_region(self, api_records: list[dict]):
        r = TemperatureRecord.from_api(api_records[5])
        assert r.location.county is None
        assert r.location.municipality is None
        assert r.source is None

    def test_server_time_kept_as_is(self):
        r = TemperatureRecord.from_api({
            "location": {"name": "Gammel"},
            "temperature": 18,
            "time": "2000-07-01T08:00:00+02:00",
        })
        assert r.time == "2000-07-01T08:00:00+02:00"
        assert r.measured_at.year == 2000

    def test_unparseable_time(self):
        r = TemperatureRecord.from_api({"location": {"name": "X"}, "temperature": 1, "time": "igår"})
        assert r.measured_at is None


class TestDerivedLists:
    def test_counties_distinct_sorted(self, snapshot: TemperatureSnapshot):
        assert snapshot.counties == ["Akershus", "Oslo", "Vestland", "Østfold"]

    def test_municipalities_distinct_sorted(self, snapshot: TemperatureSnapshot):
        assert snapshot.municipalities == ["Asker", "Bergen", "Bærum", "Halden", "Oslo"]

    def test_beaches_sorted(self, snapshot: TemperatureSnapshot):
        assert snapshot.beaches == [
            "Helleneset",
            "Huk",
            "Hvalstrand",
            "Kalvøya",
            "Sjøbadet strand",
            "Storøyodden strand",
        ]

    def test_cache_layout_round_trip(self, snapshot: TemperatureSnapshot):
        restored = TemperatureSnapshot.from_cache(snapshot.to_cache())
        assert restored == snapshot


class TestQueries:
    def test_find_by_name_case_insensitive(self, snapshot: TemperatureSnapshot):
        lower = snapshot.find_by_name("Kalvøya")
        upper = snapshot.find_by_name("KALVØYA")
        assert lower is not None
        assert upper is lower

    def test_find_by_name_not_found(self, snapshot: TemperatureSnapshot):
        assert snapshot.find_by_name("nonexistent") is None

    def test_find_by_name_is_exact(self, snapshot: TemperatureSnapshot):
        assert snapshot.find_by_name("Kalv") is None

    def test_search_substring(self, snapshot: TemperatureSnapshot):
        names = [r.name for r in snapshot.search("strand")]
        assert names == ["Hvalstrand", "Sjøbadet strand", "Storøyodden strand"]

    def test_search_is_subset_of_all(self, snapshot: TemperatureSnapshot):
        everything = snapshot.search("")
        assert everything == snapshot.records
        hits = snapshot.search("STRAND")
        assert all(r in everything and "strand" in r.name.lower() for r in hits)

    def test_by_county(self, snapshot: TemperatureSnapshot):
        names = [r.name for r in snapshot.by_county("Akershus")]
        assert names == ["Kalvøya", "Hvalstrand"]

    def test_by_county_case_sensitive(self, snapshot: TemperatureSnapshot):
        assert snapshot.by_county("akershus") == []

    def test_by_municipality(self, snapshot: TemperatureSnapshot):
        assert [r.name for r in snapshot.by_municipality("Bergen")] == ["Helleneset"]

    def test_by_temperature_descending_stable(self, snapshot: TemperatureSnapshot):
        names = [r.name for r in snapshot.by_temperature_descending()]
        assert names == [
            "Sjøbadet strand",
            "Hvalstrand",
            "Huk",
            "Storøyodden strand",
            "Kalvøya",
            "Helleneset",
        ]

    def test_by_temperature_descending_limit(self, snapshot: TemperatureSnapshot):
        top = snapshot.by_temperature_descending(limit=2)
        assert [r.temperature for r in top] == [26, 21]
