"""yr.no water temperature API client."""

import logging

import httpx

from badevann import __version__
from badevann.config.defaults import API_ENDPOINT

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = f"badevann/{__version__}"


class YrClient:
    def __init__(
        self,
        endpoint: str = API_ENDPOINT,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
    ):
        self.endpoint = endpoint
        self.user_agent = user_agent
        self.timeout = timeout

    def get_water_temperatures(self) -> list[dict]:
        """Fetch every station's latest measurement in one request.

        Raises httpx.HTTPError on transport or status errors and ValueError
        if the body is not a JSON array.
        """
        headers = {"User-Agent": self.user_agent, "Accept": "application/json"}
        logger.debug("Fetching from %s", self.endpoint)
        try:
            resp = httpx.get(self.endpoint, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error("yr API responded with status %d", e.response.status_code)
            raise
        except httpx.RequestError as e:
            logger.error("yr API request failed: %s", e)
            raise

        data = resp.json()
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
        logger.debug("Fetched %d temperature records", len(data))
        return data
