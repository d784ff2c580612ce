"""學校 Pydantic Schema 定義"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SchoolDto(BaseModel):
    """學校資料傳輸物件

    JSON 欄位使用 camelCase（如 studentCount），
    Python 端同時接受 snake_case。
    """

    id: Optional[str] = Field(None, description="學校代碼，未提供時自動產生")
    name: str = Field(..., description="學校名稱")
    address: Optional[str] = Field(None, description="地址")
    phone: Optional[str] = Field(None, description="電話")
    email: Optional[str] = Field(None, description="電子郵件")
    student_count: Optional[int] = Field(None, description="學生人數")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "s1",
                "name": "Oak",
                "address": "Tammsaare tee 1, Tallinn",
                "phone": "+372 600 0000",
                "email": "info@oak.ee",
                "studentCount": 420,
            }
        },
    )
