"""服務模組

包含各種業務邏輯服務。
"""

from shoptar.services.files import FileServices, UploadedImage
from shoptar.services.real_estate import RealEstateServices
from shoptar.services.school import SchoolExistsError, SchoolServices
from shoptar.services.weather import WeatherForecastServices, WeatherServiceError

__all__ = [
    "FileServices",
    "UploadedImage",
    "RealEstateServices",
    "SchoolExistsError",
    "SchoolServices",
    "WeatherForecastServices",
    "WeatherServiceError",
]
