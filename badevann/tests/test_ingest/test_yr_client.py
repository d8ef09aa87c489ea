"""Tests for the yr.no API client with mocked httpx."""

import httpx
import pytest
import respx

from badevann.ingest.yr_client import YrClient


class TestGetWaterTemperatures:
    @respx.mock
    def test_success(self, client: YrClient, api_records: list[dict]):
        respx.get(client.endpoint).mock(return_value=httpx.Response(200, json=api_records))

        result = client.get_water_temperatures()
        assert len(result) == 6
        assert result[0]["location"]["name"] == "Kalvøya"

    @respx.mock
    def test_user_agent_header(self, client: YrClient, api_records: list[dict]):
        route = respx.get(client.endpoint).mock(
            return_value=httpx.Response(200, json=api_records)
        )

        client.get_water_temperatures()
        assert route.called
        request = route.calls[0].request
        assert "badevann" in request.headers["user-agent"]

    @respx.mock
    def test_single_request_no_retry(self, client: YrClient):
        route = respx.get(client.endpoint).mock(return_value=httpx.Response(503))

        with pytest.raises(httpx.HTTPStatusError):
            client.get_water_temperatures()
        assert route.call_count == 1

    @respx.mock
    def test_connection_error(self, client: YrClient):
        respx.get(client.endpoint).mock(side_effect=httpx.ConnectError("offline"))

        with pytest.raises(httpx.RequestError):
            client.get_water_temperatures()

    @respx.mock
    def test_non_array_body(self, client: YrClient):
        respx.get(client.endpoint).mock(
            return_value=httpx.Response(200, json={"error": "nope"})
        )

        with pytest.raises(ValueError, match="JSON array"):
            client.get_water_temperatures()

    @respx.mock
    def test_invalid_json(self, client: YrClient):
        respx.get(client.endpoint).mock(
            return_value=httpx.Response(200, text="<html>down</html>")
        )

        with pytest.raises(ValueError):
            client.get_water_temperatures()
