# backend/shoptar/api/v1/weather.py
"""天氣查詢 API 路由

外部 API 失敗時由全域例外處理回應 502，不重試。
"""

from fastapi import APIRouter, Depends, Path

from shoptar.api.dependencies import get_weather_services
from shoptar.schemas.weather import AccuLocationWeatherResultDto, CitySearchRequest
from shoptar.services.weather import WeatherForecastServices

router = APIRouter()


@router.get(
    "/{location_key}",
    response_model=AccuLocationWeatherResultDto,
    summary="取得地點目前天氣",
    description="依 AccuWeather 地點代碼查詢目前觀測資料",
)
async def get_current_weather(
    location_key: str = Path(..., description="AccuWeather 地點代碼，如 127964（塔林）"),
    service: WeatherForecastServices = Depends(get_weather_services),
) -> AccuLocationWeatherResultDto:
    dto = AccuLocationWeatherResultDto(location_key=location_key)
    return await service.accu_weather_result(dto)


@router.post(
    "/search",
    response_model=AccuLocationWeatherResultDto,
    summary="搜尋城市天氣",
    description="以城市名稱搜尋地點，再取得該地點目前天氣",
)
async def search_city(
    request: CitySearchRequest,
    service: WeatherForecastServices = Depends(get_weather_services),
) -> AccuLocationWeatherResultDto:
    dto = AccuLocationWeatherResultDto(city_name=request.city_name)
    return await service.search_city(dto)
