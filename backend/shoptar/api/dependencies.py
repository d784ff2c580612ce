"""API 依賴注入

每個請求建立自己的服務物件，並傳入該請求的資料庫 session。
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from shoptar.database import get_db
from shoptar.services import (
    FileServices,
    RealEstateServices,
    SchoolServices,
    WeatherForecastServices,
)


def get_school_services(db: Session = Depends(get_db)) -> SchoolServices:
    """取得學校服務"""
    return SchoolServices(db)


def get_real_estate_services(db: Session = Depends(get_db)) -> RealEstateServices:
    """取得房地產服務"""
    return RealEstateServices(db)


def get_file_services(db: Session = Depends(get_db)) -> FileServices:
    """取得圖片服務"""
    return FileServices(db)


def get_weather_services() -> WeatherForecastServices:
    """取得天氣服務"""
    return WeatherForecastServices()
