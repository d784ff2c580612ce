"""應用程式設定模組

使用 pydantic-settings 管理應用程式配置，
支援從環境變數和 .env 檔案載入設定。
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


# 專案根目錄（backend 的上一層）
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
DATA_DIR = PROJECT_ROOT / "data"


class Settings(BaseSettings):
    """應用程式設定類別

    Attributes:
        app_name: 應用程式名稱
        debug: 是否啟用除錯模式
        database_url: 資料庫連接字串（預設 SQLite）
        data_dir: 資料目錄路徑
        accuweather_api_key: AccuWeather API 金鑰
        accuweather_base_url: AccuWeather API 基底網址
        accuweather_location_key: 未指定地點時使用的預設地點代碼（塔林）
        api_base_url: 頁面層呼叫 REST API 時使用的網址
        cors_origins: 允許跨域的前端來源
    """

    app_name: str = "ShopTAR API"
    debug: bool = True
    database_url: str = f"sqlite:///{DATA_DIR / 'shoptar.db'}"
    data_dir: Path = DATA_DIR

    accuweather_api_key: str = ""
    accuweather_base_url: str = "http://dataservice.accuweather.com"
    accuweather_location_key: str = "127964"

    api_base_url: str = "http://localhost:8000"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# 全域設定實例
settings = Settings()
