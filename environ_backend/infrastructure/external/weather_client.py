"""OpenWeatherMap current-weather client."""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from ...core.config import get_settings
from ...core.exceptions import WeatherServiceError
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


@dataclass
class WeatherReport:
    city: str
    temperature_c: float
    description: str

    def summary(self) -> str:
        return f"Today in {self.city}: {self.temperature_c}°C, {self.description}"


class OpenWeatherClient:
    WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"

    def __init__(self, http_client: Optional[httpx.AsyncClient] = None) -> None:
        self.api_key = get_settings().openweather_api_key
        self._http_client = http_client

        if not self.api_key:
            logger.warning("OPENWEATHER_API_KEY not found in environment variables")

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client if self._http_client is not None else get_shared_http_client()

    async def current(self, city: str) -> WeatherReport:
        if not self.api_key:
            raise WeatherServiceError("OPENWEATHER_API_KEY not configured")

        try:
            response = await self.http_client.get(
                self.WEATHER_URL,
                params={"q": city, "appid": self.api_key, "units": "metric"},
                timeout=10.0,
            )
            response.raise_for_status()
            data = response.json()
            return WeatherReport(
                city=city,
                temperature_c=data["main"]["temp"],
                description=data["weather"][0]["description"],
            )
        except httpx.HTTPError as e:
            raise WeatherServiceError(f"Weather request failed for {city}: {e}")
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise WeatherServiceError(f"Unexpected weather payload for {city}: {e}")
