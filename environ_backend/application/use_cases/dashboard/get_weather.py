import logging
from typing import Optional

from ....core.exceptions import WeatherServiceError
from ....domain.repositories.user_repository import UserRepository
from ....infrastructure.external.weather_client import OpenWeatherClient
from ...dto.dashboard_dto import WeatherResponse

logger = logging.getLogger(__name__)

WEATHER_UNAVAILABLE = "Weather data unavailable"


class GetWeatherUseCase:
    """
    Current weather for the requested city, else the user's city, else the
    configured default. Weather is decoration: failures degrade to a fixed
    message instead of an error response.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        weather_client: OpenWeatherClient,
        default_city: str,
    ) -> None:
        self.user_repository = user_repository
        self.weather_client = weather_client
        self.default_city = default_city

    async def execute(self, user_id: str, city: Optional[str] = None) -> WeatherResponse:
        city = (city or "").strip()
        if not city:
            user = await self.user_repository.find_by_id(user_id)
            city = (user.city if user and user.city else "") or self.default_city

        try:
            report = await self.weather_client.current(city)
        except WeatherServiceError as e:
            logger.warning(f"Weather lookup failed for {city}: {e}")
            return WeatherResponse(city=city, summary=WEATHER_UNAVAILABLE, available=False)

        return WeatherResponse(city=report.city, summary=report.summary())
