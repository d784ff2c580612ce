"""頁面層使用的學校 REST API 客戶端

每次呼叫都建立新的 httpx.AsyncClient，
頁面之間不共用任何狀態。
"""

from typing import Optional
from urllib.parse import quote

import httpx

from shoptar.schemas.school import SchoolDto


SCHOOLS_PATH = "/api/schools/"


class SchoolApiError(Exception):
    """API 呼叫失敗（網路錯誤或非 2xx 回應）"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class SchoolApiClient:
    """學校 REST API 客戶端

    Attributes:
        base_url: API 基底網址
        transport: 自訂 httpx transport（測試時指向 ASGI 應用程式）
    """

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url
        self.transport = transport

    def _school_path(self, school_id: str) -> str:
        return f"{SCHOOLS_PATH}{quote(school_id, safe='')}"

    async def _request(self, method: str, path: str, failure: str, **kwargs) -> httpx.Response:
        """發送請求，失敗時轉為 SchoolApiError

        Args:
            method: HTTP 方法
            path: 請求路徑
            failure: 失敗訊息前綴
        """
        try:
            async with httpx.AsyncClient(base_url=self.base_url, transport=self.transport) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            raise SchoolApiError(f"{failure}: {e}") from e

        if response.is_error:
            raise SchoolApiError(f"{failure} ({response.status_code})", response.status_code)

        return response

    async def list_schools(self) -> list[SchoolDto]:
        response = await self._request("GET", SCHOOLS_PATH, "Failed to load schools")
        return [SchoolDto.model_validate(item) for item in response.json()]

    async def get_school(self, school_id: str) -> SchoolDto:
        response = await self._request("GET", self._school_path(school_id), "Failed to load school")
        return SchoolDto.model_validate(response.json())

    async def update_school(self, school: SchoolDto) -> SchoolDto:
        response = await self._request(
            "PUT",
            self._school_path(school.id),
            "Save failed",
            json=school.model_dump(mode="json", by_alias=True),
        )
        return SchoolDto.model_validate(response.json())

    async def delete_school(self, school_id: str) -> SchoolDto:
        response = await self._request("DELETE", self._school_path(school_id), "Delete failed")
        return SchoolDto.model_validate(response.json())
