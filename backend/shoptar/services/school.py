"""學校 CRUD 服務"""

import uuid
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from sqlalchemy.orm.exc import StaleDataError

from shoptar.models.school import School
from shoptar.schemas.school import SchoolDto


class SchoolExistsError(Exception):
    """新增的學校 id 已存在"""

    def __init__(self, school_id: str):
        super().__init__(f"學校 {school_id} 已存在")
        self.school_id = school_id


def _to_dto(entity: School) -> SchoolDto:
    return SchoolDto(
        id=entity.id,
        name=entity.name,
        address=entity.address,
        phone=entity.phone,
        email=entity.email,
        student_count=entity.student_count,
    )


def _copy_fields(dto: SchoolDto, entity: School) -> None:
    entity.name = dto.name
    entity.address = dto.address
    entity.phone = dto.phone
    entity.email = dto.email
    entity.student_count = dto.student_count


class SchoolServices:
    """學校服務

    Attributes:
        db: SQLAlchemy Session 物件
    """

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> list[SchoolDto]:
        """列出所有學校（依 id 排序）"""
        entities = self.db.scalars(select(School).order_by(School.id)).all()
        return [_to_dto(e) for e in entities]

    def create(self, dto: SchoolDto) -> SchoolDto:
        """新增學校

        呼叫端有提供 id 時沿用，否則產生新的 id。

        Raises:
            SchoolExistsError: id 已存在
        """
        if dto.id and self.db.get(School, dto.id) is not None:
            raise SchoolExistsError(dto.id)

        school_id = dto.id or uuid.uuid4().hex
        entity = School(id=school_id)
        _copy_fields(dto, entity)

        self.db.add(entity)
        try:
            self.db.commit()
        except IntegrityError as e:
            # 檢查後才被其他連線寫入
            self.db.rollback()
            raise SchoolExistsError(school_id) from e
        self.db.refresh(entity)

        return _to_dto(entity)

    def detail(self, school_id: str) -> Optional[SchoolDto]:
        """依 id 取得學校，找不到時返回 None"""
        entity = self.db.get(School, school_id)
        if entity is None:
            return None
        return _to_dto(entity)

    def update(self, dto: SchoolDto) -> SchoolDto:
        """更新學校

        資料不存在時由服務直接拋出 StaleDataError（與 unit of work
        更新 0 筆時相同的例外），不會送出 UPDATE。

        Raises:
            StaleDataError: id 為空或資料庫中不存在
        """
        entity = self.db.get(School, dto.id) if dto.id else None

        if entity is None:
            raise StaleDataError(
                f"UPDATE statement on table '{School.__tablename__}' "
                f"expected to update 1 row(s); 0 were matched. (id={dto.id})"
            )

        _copy_fields(dto, entity)
        self.db.commit()
        self.db.refresh(entity)

        return _to_dto(entity)

    def delete(self, school_id: str) -> Optional[SchoolDto]:
        """刪除學校，找不到時返回 None"""
        entity = self.db.get(School, school_id)
        if entity is None:
            return None

        deleted = _to_dto(entity)
        self.db.delete(entity)
        self.db.commit()

        return deleted
