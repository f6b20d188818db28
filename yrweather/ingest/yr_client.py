"""Yr.no location-forecast API client with retry and rate limit handling."""

import logging
import time

import httpx

from yrweather.config.schema import DEFAULT_USER_AGENT, YR_BASE_URL, LocationConfig
from yrweather.document import DEFAULT_LANG, LocationForecast
from yrweather.errors import MalformedInput, YrClientError

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = frozenset({429, 503})


def build_url(base_url: str, lat: float, lon: float, msl: int = 0) -> str:
    """Location forecast URL; the service separates query params with ';'."""
    return f"{base_url.rstrip('/')}/?lat={lat};lon={lon};msl={msl}"


class YrClient:
    def __init__(
        self,
        base_url: str = YR_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        max_retries: int = 3,
        retry_base_delay: float = 5.0,
    ):
        self.base_url = base_url
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_retries = max_retries
        self.retry_base_delay = retry_base_delay

    def get_location_forecast_xml(self, lat: float, lon: float, msl: int = 0) -> str:
        """Fetch the raw forecast XML for a point."""
        url = build_url(self.base_url, lat, lon, msl)
        headers = {"User-Agent": self.user_agent, "Accept": "application/xml"}
        return self._get(url, headers).text

    def _get(self, url: str, headers: dict[str, str]) -> httpx.Response:
        """GET with up to max_retries retries on 429/503 and transport errors.

        Waits retry_base_delay * 2**attempt between attempts, or the server's
        Retry-After seconds when it sends one.
        """
        attempt = 0
        while True:
            try:
                resp = httpx.get(url, headers=headers, timeout=self.timeout)
            except httpx.RequestError as e:
                if attempt >= self.max_retries:
                    logger.error("Forecast fetch failed after %d attempts: %s", attempt + 1, e)
                    raise
                delay = self._backoff(attempt)
                logger.warning("Forecast fetch error (%s), next try in %.1fs", e, delay)
            else:
                if resp.status_code not in RETRYABLE_STATUS or attempt >= self.max_retries:
                    resp.raise_for_status()
                    return resp
                delay = self._backoff(attempt, resp.headers.get("Retry-After"))
                logger.warning(
                    "Forecast service busy (HTTP %d), try %d/%d in %.1fs",
                    resp.status_code, attempt + 1, self.max_retries, delay,
                )
            time.sleep(delay)
            attempt += 1

    def _backoff(self, attempt: int, retry_after: str | None = None) -> float:
        if retry_after is not None and retry_after.isdigit():
            return float(retry_after)
        return self.retry_base_delay * (2**attempt)

    def location_forecast(
        self,
        location: LocationConfig,
        lang: str = DEFAULT_LANG,
        strict: bool = False,
    ) -> LocationForecast:
        """Fetch and read the forecast document for a configured location."""
        text = self.get_location_forecast_xml(location.lat, location.lon, location.msl)
        try:
            return LocationForecast.from_xml(text, lang=lang, strict=strict)
        except MalformedInput as e:
            logger.error("Unreadable forecast for %s: %s", location.slug, e)
            raise YrClientError(f"Unreadable forecast for {location.slug}: {e}") from e
