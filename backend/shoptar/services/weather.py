"""AccuWeather 天氣查詢服務

從 AccuWeather API 取得指定地點的目前天氣，
並將觀測時間、天氣描述與攝氏溫度填入 AccuLocationWeatherResultDto。

失敗不重試：非 2xx 回應拋出 WeatherServiceError，
格式錯誤的 JSON 直接向上拋出解析錯誤。
"""

from typing import Optional

import httpx

from shoptar.config import settings
from shoptar.schemas.weather import (
    AccuCitySearchResult,
    AccuLocationRootDto,
    AccuLocationWeatherResultDto,
)


# AccuWeather API 端點
CURRENT_CONDITIONS_ENDPOINT = "currentconditions/v1"
CITY_SEARCH_ENDPOINT = "locations/v1/cities/search"


class WeatherServiceError(Exception):
    """AccuWeather API 回應非成功狀態"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def parse_current_conditions(data) -> AccuLocationRootDto:
    """解析目前天氣回應

    currentconditions 端點回傳只含一筆資料的陣列，
    也接受直接傳入單一物件。

    Args:
        data: 已解碼的 JSON

    Returns:
        第一筆觀測資料

    Raises:
        ValueError: 回應為空陣列
        pydantic.ValidationError: 缺少必要欄位
    """
    if isinstance(data, list):
        if not data:
            raise ValueError("AccuWeather 回應沒有任何觀測資料")
        data = data[0]
    return AccuLocationRootDto.model_validate(data)


class WeatherForecastServices:
    """天氣查詢服務

    Attributes:
        api_key: AccuWeather API 金鑰
        base_url: AccuWeather API 基底網址
    """

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        self.api_key = api_key if api_key is not None else settings.accuweather_api_key
        self.base_url = (base_url or settings.accuweather_base_url).rstrip("/")

    async def _get_json(self, path: str, params: dict):
        """發送 GET 請求並回傳解碼後的 JSON

        Raises:
            WeatherServiceError: 回應狀態非 2xx
        """
        query = {"apikey": self.api_key, **params}

        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                headers={"Accept": "application/json"},
            ) as client:
                response = await client.get(path, params=query)
                response.raise_for_status()
                return response.json()

        except httpx.HTTPStatusError as e:
            # 不跟隨轉址，3xx 也視為失敗
            print(f"AccuWeather API HTTP 錯誤: {e.response.status_code} ({path})")
            raise WeatherServiceError(
                "Error fetching weather data from AccuWeather API",
                status_code=e.response.status_code,
            ) from e

    async def accu_weather_result(
        self, dto: AccuLocationWeatherResultDto
    ) -> AccuLocationWeatherResultDto:
        """取得目前天氣並填入 DTO

        Args:
            dto: 含 location_key 的查詢物件（未提供時使用預設地點）

        Returns:
            同一個 DTO，已填入觀測時間、天氣描述與攝氏溫度
        """
        location_key = dto.location_key or settings.accuweather_location_key

        data = await self._get_json(
            f"/{CURRENT_CONDITIONS_ENDPOINT}/{location_key}",
            {"details": "true"},
        )
        weather_data = parse_current_conditions(data)

        dto.location_key = location_key
        dto.local_observation_date_time = weather_data.local_observation_date_time
        dto.text = weather_data.weather_text
        dto.temp_metric_value_unit = weather_data.temperature.metric.value

        return dto

    async def search_city(
        self, dto: AccuLocationWeatherResultDto
    ) -> AccuLocationWeatherResultDto:
        """依城市名稱搜尋地點後查詢目前天氣

        Raises:
            WeatherServiceError: 找不到符合的城市
        """
        data = await self._get_json(f"/{CITY_SEARCH_ENDPOINT}", {"q": dto.city_name})

        matches = [AccuCitySearchResult.model_validate(item) for item in data]
        if not matches:
            raise WeatherServiceError(f"找不到城市 {dto.city_name}")

        city = matches[0]
        dto.location_key = city.key
        if city.localized_name:
            dto.city_name = city.localized_name

        return await self.accu_weather_result(dto)
