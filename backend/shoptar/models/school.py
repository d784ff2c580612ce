"""學校資料模型

單一平面資料表，沒有關聯。
"""

from typing import Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from shoptar.models import Base


class School(Base):
    """學校資料表

    Attributes:
        id: 主鍵（由呼叫端提供或自動產生的字串）
        name: 學校名稱
        address: 地址
        phone: 電話
        email: 電子郵件
        student_count: 學生人數
    """

    __tablename__ = "schools"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)

    address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    student_count: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<School {self.id}: {self.name}>"
