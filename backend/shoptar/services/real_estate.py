"""房地產 CRUD 服務

每個方法對應一次 ORM 操作，欄位逐一複製，不做任何資料檢查。
"""

import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from shoptar.models.real_estate import RealEstate
from shoptar.schemas.real_estate import FileToDatabaseDto, RealEstateDto


def _to_dto(entity: RealEstate) -> RealEstateDto:
    """將 ORM 物件轉換為 DTO"""
    return RealEstateDto(
        id=entity.id,
        area=entity.area,
        location=entity.location,
        room_number=entity.room_number,
        building_type=entity.building_type,
        created_at=entity.created_at,
        modified_at=entity.modified_at,
        images=[FileToDatabaseDto.model_validate(image) for image in entity.images],
    )


def _local_naive(value: Optional[datetime]) -> Optional[datetime]:
    """帶時區的時間轉為本地時間並去除時區（資料表欄位不含時區）"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def _copy_fields(dto: RealEstateDto, entity: RealEstate) -> None:
    """複製可修改欄位（不含 id、時間戳記與圖片）"""
    entity.area = dto.area
    entity.location = dto.location
    entity.room_number = dto.room_number
    entity.building_type = dto.building_type


class RealEstateServices:
    """房地產服務

    Attributes:
        db: SQLAlchemy Session 物件
    """

    def __init__(self, db: Session):
        """初始化房地產服務

        Args:
            db: 資料庫 session
        """
        self.db = db

    def list_all(self) -> list[RealEstateDto]:
        """列出所有房地產"""
        entities = self.db.scalars(select(RealEstate)).all()
        return [_to_dto(e) for e in entities]

    def create(self, dto: RealEstateDto) -> RealEstateDto:
        """新增房地產

        一律產生新的 id；其餘欄位（含時間戳記）原樣保存，
        帶時區的時間戳記換算為本地時間，與更新時的 datetime.now() 一致。

        Args:
            dto: 房地產資料

        Returns:
            已保存的房地產資料
        """
        entity = RealEstate(
            id=uuid.uuid4(),
            created_at=_local_naive(dto.created_at),
            modified_at=_local_naive(dto.modified_at),
        )
        _copy_fields(dto, entity)

        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)

        return _to_dto(entity)

    def detail(self, real_estate_id: uuid.UUID) -> Optional[RealEstateDto]:
        """依 id 取得房地產

        Returns:
            房地產資料，找不到時返回 None
        """
        entity = self.db.get(RealEstate, real_estate_id)
        if entity is None:
            return None
        return _to_dto(entity)

    def update(self, dto: RealEstateDto) -> RealEstateDto:
        """更新房地產

        建立時間保持不變，修改時間改為目前時間，圖片不受影響。
        資料不存在時由服務直接拋出 StaleDataError（與 unit of work
        更新 0 筆時相同的例外），不會送出 UPDATE。

        Args:
            dto: 含 id 的房地產資料

        Returns:
            更新後的房地產資料

        Raises:
            StaleDataError: id 為空或資料庫中不存在（0 筆資料被更新）
        """
        entity = None
        if dto.id is not None:
            entity = self.db.get(RealEstate, dto.id)

        if entity is None:
            raise StaleDataError(
                f"UPDATE statement on table '{RealEstate.__tablename__}' "
                f"expected to update 1 row(s); 0 were matched. (id={dto.id})"
            )

        _copy_fields(dto, entity)
        entity.modified_at = datetime.now()

        self.db.commit()
        self.db.refresh(entity)

        return _to_dto(entity)

    def delete(self, real_estate_id: uuid.UUID) -> Optional[RealEstateDto]:
        """刪除房地產及其所有圖片

        Returns:
            被刪除的房地產資料，找不到時返回 None
        """
        entity = self.db.get(RealEstate, real_estate_id)
        if entity is None:
            return None

        deleted = _to_dto(entity)

        # 圖片由 relationship cascade 在同一個 commit 中刪除
        self.db.delete(entity)
        self.db.commit()

        return deleted
