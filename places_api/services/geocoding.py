import logging
from typing import Optional

import requests
from fastapi.concurrency import run_in_threadpool

from places_api import config
from places_api.errors import ServerError, ValidationError
from places_api.models.place import Location

logger = logging.getLogger(__name__)


class GoogleGeocoder:
    """Resolves a postal address to coordinates with the Google Geocoding API."""

    def __init__(self, api_key: Optional[str] = None, url: Optional[str] = None, timeout: int = 10):
        self.api_key = api_key if api_key is not None else config.GOOGLE_API_KEY
        self.url = url or config.GEOCODING_URL
        self.timeout = timeout

    def _request(self, address: str) -> dict:
        response = requests.get(
            self.url,
            params={"address": address, "key": self.api_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    async def resolve(self, address: str) -> Location:
        try:
            data = await run_in_threadpool(self._request, address)
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Geocoding request failed for {address!r}: {e}")
            raise ServerError("Could not reach the geocoding service, please try again later.")

        status = (data or {}).get("status")
        if status == "ZERO_RESULTS" or (status == "OK" and not data.get("results")):
            raise ValidationError("Could not find location for the specified address.")
        if status != "OK":
            # REQUEST_DENIED, OVER_QUERY_LIMIT, INVALID_REQUEST, UNKNOWN_ERROR
            logger.error(f"Geocoding {address!r} returned {status}: {data.get('error_message') if data else None}")
            raise ServerError("Could not reach the geocoding service, please try again later.")

        coordinates = data["results"][0]["geometry"]["location"]
        return Location(lat=coordinates["lat"], lng=coordinates["lng"])


# Provider (singleton) for dependency injection
_geocoder_instance = None


def get_geocoder() -> GoogleGeocoder:
    global _geocoder_instance
    if _geocoder_instance is None:
        _geocoder_instance = GoogleGeocoder()
    return _geocoder_instance
