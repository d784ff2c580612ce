# backend/shoptar/main.py
"""FastAPI 應用程式入口"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm.exc import StaleDataError

from shoptar.config import settings
from shoptar.database import init_db
from shoptar.api.v1 import real_estates, schools, weather
from shoptar.services.school import SchoolExistsError
from shoptar.services.weather import WeatherServiceError

app = FastAPI(
    title=settings.app_name,
    description="學校、房地產 CRUD 與天氣查詢 API",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup():
    """應用程式啟動時初始化資料庫"""
    init_db()


@app.exception_handler(StaleDataError)
async def stale_data_handler(request: Request, exc: StaleDataError):
    """更新不存在的資料：資料庫層並行衝突，不嘗試復原"""
    print(f"更新衝突: {exc}")
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(SchoolExistsError)
async def school_exists_handler(request: Request, exc: SchoolExistsError):
    """新增的學校 id 重複"""
    print(f"新增衝突: {exc}")
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(WeatherServiceError)
async def weather_error_handler(request: Request, exc: WeatherServiceError):
    """外部天氣 API 失敗"""
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.get("/health")
async def health_check():
    """健康檢查端點"""
    return {"status": "ok", "version": "0.1.0"}


# 註冊 API 路由
app.include_router(
    schools.router,
    prefix="/api/schools",
    tags=["schools"]
)
app.include_router(
    real_estates.router,
    prefix="/api/realestates",
    tags=["realestates"]
)
app.include_router(
    weather.router,
    prefix="/api/weather",
    tags=["weather"]
)
