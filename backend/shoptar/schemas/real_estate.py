"""房地產 Pydantic Schema 定義"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FileToDatabaseDto(BaseModel):
    """房地產圖片資訊（不含圖片內容）"""

    id: uuid.UUID = Field(..., description="圖片 ID")
    real_estate_id: uuid.UUID = Field(..., description="所屬房地產 ID")
    image_title: Optional[str] = Field(None, description="圖片標題（檔名）")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RealEstateDto(BaseModel):
    """房地產資料傳輸物件

    所有欄位皆可為空；不做範圍檢查，負數面積會原樣保存。
    """

    id: Optional[uuid.UUID] = Field(None, description="房地產 ID")
    area: Optional[float] = Field(None, description="面積 (m²)")
    location: Optional[str] = Field(None, description="地點")
    room_number: Optional[int] = Field(None, description="房間數")
    building_type: Optional[str] = Field(None, description="建築類型")
    created_at: Optional[datetime] = Field(None, description="建立時間")
    modified_at: Optional[datetime] = Field(None, description="修改時間")
    images: list[FileToDatabaseDto] = Field(default_factory=list, description="圖片列表（唯讀）")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "area": 150.0,
                "location": "Uptown",
                "roomNumber": 4,
                "buildingType": "House",
                "createdAt": "2025-11-17T09:17:22",
                "modifiedAt": "2025-11-17T09:17:22",
            }
        },
    )
