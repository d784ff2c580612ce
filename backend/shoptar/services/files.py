"""房地產圖片服務

圖片內容以二進位形式直接存入 file_to_databases 資料表。
"""

import uuid
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from shoptar.models.real_estate import FileToDatabase, RealEstate
from shoptar.schemas.real_estate import FileToDatabaseDto


@dataclass
class UploadedImage:
    """已讀取內容的上傳檔案"""

    filename: Optional[str]
    content: bytes


class FileServices:
    """圖片上傳與刪除服務

    Attributes:
        db: SQLAlchemy Session 物件
    """

    def __init__(self, db: Session):
        self.db = db

    def upload_images(
        self, real_estate_id: uuid.UUID, files: list[UploadedImage]
    ) -> Optional[list[FileToDatabaseDto]]:
        """將圖片存入資料庫

        Args:
            real_estate_id: 所屬房地產 ID
            files: 上傳檔案列表

        Returns:
            已保存的圖片資訊，房地產不存在時返回 None
        """
        if self.db.get(RealEstate, real_estate_id) is None:
            return None

        images = [
            FileToDatabase(
                id=uuid.uuid4(),
                real_estate_id=real_estate_id,
                image_title=f.filename,
                image_data=f.content,
            )
            for f in files
        ]
        self.db.add_all(images)
        self.db.commit()

        return [FileToDatabaseDto.model_validate(image) for image in images]

    def images_for(self, real_estate_id: uuid.UUID) -> list[FileToDatabaseDto]:
        """取得房地產的所有圖片資訊"""
        images = self.db.scalars(
            select(FileToDatabase).where(FileToDatabase.real_estate_id == real_estate_id)
        ).all()
        return [FileToDatabaseDto.model_validate(image) for image in images]

    def get_image(self, image_id: uuid.UUID) -> Optional[FileToDatabase]:
        """取得單張圖片（含內容），找不到時返回 None"""
        return self.db.get(FileToDatabase, image_id)

    def remove_image(self, image_id: uuid.UUID) -> Optional[FileToDatabaseDto]:
        """刪除單張圖片，找不到時返回 None"""
        image = self.db.get(FileToDatabase, image_id)
        if image is None:
            return None

        removed = FileToDatabaseDto.model_validate(image)
        self.db.delete(image)
        self.db.commit()

        return removed
