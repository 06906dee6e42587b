"""Async forecast API client with retry and rate limit handling."""

import asyncio
import logging

import httpx

from shoresquad.config.schema import WeatherConfig
from shoresquad.models.common import ShoreSquadError

logger = logging.getLogger(__name__)


class WeatherUnavailable(ShoreSquadError):
    """No usable forecast could be obtained from the provider."""


class ProviderUnavailable(WeatherUnavailable):
    """Network failure or non-success status from the provider."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class EmptyPayload(WeatherUnavailable):
    """Provider responded but with no forecast entries."""


class WeatherClient:
    def __init__(
        self,
        config: WeatherConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        self.config = config or WeatherConfig()
        self.base_url = self.config.base_url.rstrip("/")
        self._client = client or httpx.AsyncClient(timeout=self.config.timeout)
        self._owns_client = client is None

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def fetch_forecast(self) -> dict:
        """Fetch the 24-hour forecast payload.

        Retries on 503/429 and transport errors with exponential backoff.
        Raises ProviderUnavailable or EmptyPayload.
        """
        url = f"{self.base_url}{self.config.forecast_path}"
        headers = {"User-Agent": self.config.user_agent, "Accept": "application/json"}
        max_retries = self.config.max_retries

        for attempt in range(max_retries + 1):
            try:
                resp = await self._client.get(url, headers=headers)
            except httpx.RequestError as e:
                if attempt < max_retries:
                    delay = self._delay(attempt)
                    logger.warning(
                        "Forecast request error, retrying in %.1fs: %s", delay, e
                    )
                    await asyncio.sleep(delay)
                    continue
                raise ProviderUnavailable(f"Request failed: {e}") from e

            if resp.status_code in (503, 429) and attempt < max_retries:
                delay = self._delay(attempt)
                logger.warning(
                    "Forecast %s returned %d, retrying in %.1fs (attempt %d/%d)",
                    url, resp.status_code, delay, attempt + 1, max_retries,
                )
                await asyncio.sleep(delay)
                continue
            if not resp.is_success:
                raise ProviderUnavailable(
                    f"HTTP {resp.status_code} from {url}", resp.status_code
                )
            return _require_items(resp)

        raise ProviderUnavailable(f"Retries exhausted for {url}")

    def _delay(self, attempt: int) -> float:
        return self.config.retry_base_delay * (2**attempt)


def _require_items(resp: httpx.Response) -> dict:
    try:
        payload = resp.json()
    except ValueError as e:
        raise ProviderUnavailable(f"Invalid JSON body: {e}", resp.status_code) from e
    if not isinstance(payload, dict):
        raise EmptyPayload("Forecast payload is not an object")
    items = payload.get("items")
    if not isinstance(items, list) or not items:
        raise EmptyPayload("Forecast payload has no items")
    return payload
