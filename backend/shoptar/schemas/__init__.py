"""Pydantic Schema 模組"""

from shoptar.schemas.school import SchoolDto
from shoptar.schemas.real_estate import FileToDatabaseDto, RealEstateDto
from shoptar.schemas.weather import (
    AccuCitySearchResult,
    AccuLocationRootDto,
    AccuLocationWeatherResultDto,
    AccuMetric,
    AccuTemperature,
    CitySearchRequest,
)

__all__ = [
    "SchoolDto",
    "RealEstateDto",
    "FileToDatabaseDto",
    "AccuCitySearchResult",
    "AccuLocationRootDto",
    "AccuLocationWeatherResultDto",
    "AccuMetric",
    "AccuTemperature",
    "CitySearchRequest",
]
