"""天氣 Pydantic Schema 定義

AccuLocationRootDto 等類別對應 AccuWeather API 的原始 JSON 結構（PascalCase 欄位），
AccuLocationWeatherResultDto 則是對外回傳的內部格式。
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class AccuMetric(BaseModel):
    """單一單位制的溫度值"""

    value: float = Field(..., alias="Value", description="溫度值")
    unit: Optional[str] = Field(None, alias="Unit", description="單位（C / F）")
    unit_type: Optional[int] = Field(None, alias="UnitType", description="AccuWeather 單位代碼")


class AccuTemperature(BaseModel):
    """公制與英制溫度"""

    metric: AccuMetric = Field(..., alias="Metric")
    imperial: Optional[AccuMetric] = Field(None, alias="Imperial")


class AccuLocationRootDto(BaseModel):
    """AccuWeather 目前天氣 (currentconditions) 回應中的單筆觀測"""

    local_observation_date_time: datetime = Field(..., alias="LocalObservationDateTime")
    weather_text: Optional[str] = Field(None, alias="WeatherText")
    has_precipitation: Optional[bool] = Field(None, alias="HasPrecipitation")
    is_day_time: Optional[bool] = Field(None, alias="IsDayTime")
    temperature: AccuTemperature = Field(..., alias="Temperature")

    model_config = ConfigDict(extra="ignore")


class AccuCitySearchResult(BaseModel):
    """AccuWeather 城市搜尋結果"""

    key: str = Field(..., alias="Key", description="地點代碼")
    localized_name: Optional[str] = Field(None, alias="LocalizedName", description="城市名稱")

    model_config = ConfigDict(extra="ignore")


class AccuLocationWeatherResultDto(BaseModel):
    """天氣查詢結果

    呼叫端至少提供 location_key（或以 city_name 搜尋），
    其餘三個欄位由外部 API 回應填入，不寫入資料庫。
    """

    location_key: Optional[str] = Field(None, description="AccuWeather 地點代碼")
    city_name: Optional[str] = Field(None, description="城市名稱")
    local_observation_date_time: Optional[datetime] = Field(None, description="當地觀測時間")
    text: Optional[str] = Field(None, description="天氣描述")
    temp_metric_value_unit: Optional[float] = Field(None, description="攝氏溫度")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CitySearchRequest(BaseModel):
    """城市天氣搜尋請求"""

    city_name: str = Field(..., min_length=1, description="城市名稱")

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={"example": {"cityName": "Tallinn"}},
    )
