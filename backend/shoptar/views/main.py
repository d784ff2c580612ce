# backend/shoptar/views/main.py
"""學校管理頁面應用程式入口

與 REST API 分開部署，僅透過 HTTP JSON 溝通：
    uvicorn shoptar.views.main:app --port 3000
"""

from fastapi import FastAPI

from shoptar.views import schools

app = FastAPI(
    title="ShopTAR 學校管理",
    version="0.1.0",
    docs_url=None,
    redoc_url=None,
)

app.include_router(schools.router, tags=["views"])
