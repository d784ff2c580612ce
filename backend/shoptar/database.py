# backend/shoptar/database.py
"""資料庫連線管理"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from typing import Generator

from shoptar.config import settings
from shoptar.models import Base


def _connect_args(database_url: str) -> dict:
    if database_url.startswith("sqlite"):
        return {"check_same_thread": False}  # SQLite 專用
    return {}


def build_engine(database_url: str) -> Engine:
    """建立資料庫引擎

    SQLite 預設不檢查外鍵，連線時需開啟 foreign_keys，
    刪除房地產時圖片資料才會由資料庫層一併刪除。

    Args:
        database_url: 資料庫連接字串

    Returns:
        SQLAlchemy Engine
    """
    new_engine = create_engine(
        database_url,
        connect_args=_connect_args(database_url),
    )

    if database_url.startswith("sqlite"):
        @event.listens_for(new_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


engine = build_engine(settings.database_url)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind: Engine = engine):
    """初始化資料庫表"""
    if bind is engine and settings.database_url.startswith("sqlite:///"):
        # SQLite 檔案所在目錄必須存在
        settings.data_dir.mkdir(parents=True, exist_ok=True)
    Base.metadata.create_all(bind=bind)


def get_db() -> Generator[Session, None, None]:
    """取得資料庫 session（FastAPI 依賴注入用）"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
