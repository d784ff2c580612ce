"""測試共用設定

所有測試共用同一個測試資料庫檔案，每次測試前重建資料表。
"""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from shoptar.database import build_engine, get_db
from shoptar.main import app
from shoptar.models import Base


# 測試用資料庫
SQLALCHEMY_DATABASE_URL = "sqlite:///./test_shoptar.db"
engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """覆蓋資料庫依賴"""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_database():
    """每次測試前重建資料庫"""
    Base.metadata.create_all(bind=engine)

    yield

    # 清理
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    """測試用資料庫 session"""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    """API 測試客戶端"""
    return TestClient(app)


# 清理測試資料庫檔案
@pytest.fixture(scope="session", autouse=True)
def cleanup():
    """測試結束後清理"""
    yield
    engine.dispose()
    if os.path.exists("./test_shoptar.db"):
        os.remove("./test_shoptar.db")
