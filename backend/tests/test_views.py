"""學校管理頁面測試

頁面應用程式透過 ASGITransport 呼叫同一個測試用 REST API。
"""

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from shoptar.main import app as api_app
from shoptar.models import School
from shoptar.views.client import SchoolApiClient
from shoptar.views.main import app as views_app
from shoptar.views.schools import ViewState, ViewStatus, get_school_api_client


class BrokenTransport(httpx.AsyncBaseTransport):
    """模擬網路錯誤"""

    async def handle_async_request(self, request):
        raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture
def pages(setup_database, db):
    """頁面測試客戶端，並新增測試學校"""
    db.add_all([
        School(id="s1", name="Oak", address="Oak St 1", student_count=300),
        School(id="s2", name="Pine"),
    ])
    db.commit()

    views_app.dependency_overrides[get_school_api_client] = lambda: SchoolApiClient(
        "http://testserver", transport=httpx.ASGITransport(app=api_app)
    )
    yield TestClient(views_app)
    views_app.dependency_overrides.clear()


@pytest.fixture
def broken_pages():
    views_app.dependency_overrides[get_school_api_client] = lambda: SchoolApiClient(
        "http://testserver", transport=BrokenTransport()
    )
    yield TestClient(views_app)
    views_app.dependency_overrides.clear()


def test_view_state_transitions():
    """測試頁面狀態互斥"""
    state = ViewState()
    assert state.status == ViewStatus.LOADING

    state.fail("boom")
    assert state.status == ViewStatus.ERROR
    assert state.school is None

    state.resolve(None)
    assert state.status == ViewStatus.NOT_FOUND
    assert state.error is None


def test_school_list(pages):
    """測試列表頁顯示所有學校與詳細連結"""
    response = pages.get("/")
    assert response.status_code == 200
    assert "School List" in response.text
    assert "Oak" in response.text
    assert "Pine" in response.text
    assert 'href="/schools/s1"' in response.text


def test_school_list_fetch_error(broken_pages):
    """測試列表頁載入失敗時顯示空表格"""
    response = broken_pages.get("/")
    assert response.status_code == 200
    assert "Loading schools or no data found..." in response.text


def test_school_detail(pages):
    """測試詳細頁顯示表單"""
    response = pages.get("/schools/s1")
    assert response.status_code == 200
    assert "School Detail" in response.text
    assert 'value="Oak"' in response.text
    assert 'value="300"' in response.text


def test_school_detail_not_found(pages):
    """測試找不到學校"""
    response = pages.get("/schools/missing")
    assert response.status_code == 200
    assert "School not found." in response.text


def test_school_detail_network_error(broken_pages):
    """測試網路錯誤時顯示錯誤訊息"""
    response = broken_pages.get("/schools/s1")
    assert response.status_code == 200
    assert "Error: Failed to load school" in response.text
    assert "<h2>School Detail</h2>" not in response.text


def test_school_save(pages, db):
    """測試送出表單更新學校"""
    response = pages.post(
        "/schools/s1",
        data={"name": "Oak Gymnasium", "address": "", "student_count": "350"},
    )
    assert response.status_code == 200
    assert "Saved." in response.text
    assert 'value="Oak Gymnasium"' in response.text

    school = db.get(School, "s1")
    db.refresh(school)
    assert school.name == "Oak Gymnasium"
    assert school.address is None
    assert school.student_count == 350


def test_school_save_invalid_student_count(pages, db):
    """測試學生人數非數字時視為未填"""
    response = pages.post("/schools/s2", data={"name": "Pine", "student_count": "many"})
    assert response.status_code == 200

    school = db.get(School, "s2")
    db.refresh(school)
    assert school.student_count is None


def test_school_save_blank_name(pages, db):
    """測試名稱空白時顯示錯誤且不送出更新"""
    response = pages.post("/schools/s1", data={"name": "  ", "student_count": "1"})
    assert response.status_code == 200
    assert "Error: Name is required" in response.text

    school = db.get(School, "s1")
    db.refresh(school)
    assert school.name == "Oak"
    assert school.student_count == 300


def test_school_save_missing_school(pages):
    """測試更新不存在的學校時顯示錯誤"""
    response = pages.post("/schools/ghost", data={"name": "Ghost"})
    assert response.status_code == 200
    assert "Error: Save failed (409)" in response.text


def test_school_delete_confirm(pages):
    """測試刪除確認頁"""
    response = pages.get("/schools/s2/delete")
    assert response.status_code == 200
    assert "Delete this school?" in response.text


def test_school_delete(pages, db):
    """測試刪除後回到列表"""
    response = pages.post("/schools/s2/delete", follow_redirects=False)
    assert response.status_code == 303
    assert response.headers["location"] == "/"

    db.expire_all()
    assert db.scalars(select(School).where(School.id == "s2")).first() is None


def test_school_delete_missing(pages):
    """測試刪除不存在的學校時顯示錯誤"""
    response = pages.post("/schools/ghost/delete", follow_redirects=False)
    assert response.status_code == 200
    assert "Error: Delete failed (404)" in response.text
