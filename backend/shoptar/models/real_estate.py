"""房地產與圖片資料模型

RealEstate 擁有多筆 FileToDatabase 圖片，
刪除房地產時其圖片必須在同一交易內一併刪除。
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, ForeignKey, Integer, LargeBinary, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shoptar.models import Base


class RealEstate(Base):
    """房地產資料表

    除主鍵外所有欄位皆可為空，資料層不做任何檢查
    （負數面積、修改時間早於建立時間都會被接受）。

    Attributes:
        id: 主鍵 (UUID)
        area: 面積
        location: 地點
        room_number: 房間數
        building_type: 建築類型
        created_at: 建立時間
        modified_at: 修改時間
        images: 所屬圖片
    """

    __tablename__ = "real_estates"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    area: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    room_number: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    building_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # 元數據
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    modified_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    images: Mapped[list["FileToDatabase"]] = relationship(
        back_populates="real_estate",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return (
            f"RealEstate(id={self.id!r}, "
            f"location={self.location!r}, "
            f"area={self.area})"
        )


class FileToDatabase(Base):
    """房地產圖片資料表（圖片內容直接存於資料庫）"""

    __tablename__ = "file_to_databases"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    real_estate_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("real_estates.id", ondelete="CASCADE"), nullable=False, index=True
    )
    image_title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image_data: Mapped[Optional[bytes]] = mapped_column(LargeBinary, nullable=True)

    real_estate: Mapped[RealEstate] = relationship(back_populates="images")

    def __repr__(self) -> str:
        return f"<FileToDatabase {self.id}: {self.image_title}>"
