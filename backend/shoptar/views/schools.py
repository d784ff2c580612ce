"""學校頁面路由

列表、詳細／編輯、刪除確認三個頁面。
每個頁面各自呼叫 REST API，並以 ViewState 決定要呈現哪一種狀態。
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from shoptar.config import settings
from shoptar.schemas.school import SchoolDto
from shoptar.views.client import SchoolApiClient, SchoolApiError

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter()


class ViewStatus(str, Enum):
    """頁面呈現狀態（互斥）"""

    LOADING = "loading"
    ERROR = "error"
    NOT_FOUND = "not_found"
    READY = "ready"


@dataclass
class ViewState:
    """單一頁面的本地狀態"""

    status: ViewStatus = ViewStatus.LOADING
    school: Optional[SchoolDto] = None
    error: Optional[str] = None

    def resolve(self, school: Optional[SchoolDto]) -> "ViewState":
        self.school = school
        self.error = None
        self.status = ViewStatus.READY if school else ViewStatus.NOT_FOUND
        return self

    def fail(self, message: str) -> "ViewState":
        self.school = None
        self.error = message
        self.status = ViewStatus.ERROR
        return self


def get_school_api_client() -> SchoolApiClient:
    """取得 REST API 客戶端（FastAPI 依賴注入用）"""
    return SchoolApiClient(settings.api_base_url)


def _parse_student_count(value: Optional[str]) -> Optional[int]:
    """表單中的學生人數，空白或非數字視為未填"""
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        return None


async def _load_school(client: SchoolApiClient, school_id: str) -> ViewState:
    state = ViewState()

    if not school_id:
        return state.fail("No school id provided.")

    try:
        return state.resolve(await client.get_school(school_id))
    except SchoolApiError as e:
        if e.status_code == 404:
            return state.resolve(None)
        return state.fail(e.message or "Failed to load school.")


@router.get("/", response_class=HTMLResponse)
async def school_list(
    request: Request,
    client: SchoolApiClient = Depends(get_school_api_client),
):
    """學校列表頁：載入一次全部資料"""
    schools: list[SchoolDto] = []
    try:
        schools = await client.list_schools()
    except SchoolApiError as e:
        print(f"Fetch error: {e.message}")

    return templates.TemplateResponse(
        request,
        "school_list.html",
        {"schools": schools},
    )


@router.get("/schools/{school_id}", response_class=HTMLResponse)
async def school_detail(
    request: Request,
    school_id: str,
    client: SchoolApiClient = Depends(get_school_api_client),
):
    """學校詳細／編輯頁"""
    state = await _load_school(client, school_id)
    return templates.TemplateResponse(
        request,
        "school_detail.html",
        {"state": state, "saved": False},
    )


@router.post("/schools/{school_id}", response_class=HTMLResponse)
async def school_save(
    request: Request,
    school_id: str,
    name: Optional[str] = Form(None),
    address: Optional[str] = Form(None),
    phone: Optional[str] = Form(None),
    email: Optional[str] = Form(None),
    student_count: Optional[str] = Form(None),
    client: SchoolApiClient = Depends(get_school_api_client),
):
    """送出編輯表單"""
    state = ViewState()

    if not name or not name.strip():
        state.fail("Name is required")
        return templates.TemplateResponse(
            request,
            "school_detail.html",
            {"state": state, "saved": False},
        )

    school = SchoolDto(
        id=school_id,
        name=name,
        address=address or None,
        phone=phone or None,
        email=email or None,
        student_count=_parse_student_count(student_count),
    )

    saved = False
    try:
        state.resolve(await client.update_school(school))
        saved = True
    except SchoolApiError as e:
        state.fail(e.message or "Save failed")

    return templates.TemplateResponse(
        request,
        "school_detail.html",
        {"state": state, "saved": saved},
    )


@router.get("/schools/{school_id}/delete", response_class=HTMLResponse)
async def school_delete_confirm(
    request: Request,
    school_id: str,
    client: SchoolApiClient = Depends(get_school_api_client),
):
    """刪除確認頁"""
    state = await _load_school(client, school_id)
    return templates.TemplateResponse(
        request,
        "school_delete.html",
        {"state": state},
    )


@router.post("/schools/{school_id}/delete")
async def school_delete(
    request: Request,
    school_id: str,
    client: SchoolApiClient = Depends(get_school_api_client),
):
    """執行刪除，成功後回到列表"""
    try:
        await client.delete_school(school_id)
    except SchoolApiError as e:
        state = ViewState().fail(e.message or "Delete failed")
        return templates.TemplateResponse(
            request,
            "school_delete.html",
            {"state": state},
        )

    return RedirectResponse(url="/", status_code=303)
