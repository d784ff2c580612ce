"""房地產 API 測試"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import select

from shoptar.models import FileToDatabase


REAL_ESTATE = {
    "area": 150.0,
    "location": "Uptown",
    "roomNumber": 4,
    "buildingType": "House",
    "createdAt": "2025-11-17T09:17:22",
    "modifiedAt": "2025-11-17T09:17:22",
}


def _create(client, payload=None) -> dict:
    response = client.post("/api/realestates/", json=REAL_ESTATE if payload is None else payload)
    assert response.status_code == 200
    return response.json()


def test_create_and_get(client):
    """測試新增後取得相同的地點與面積"""
    created = _create(client)
    assert created["id"]

    response = client.get(f"/api/realestates/{created['id']}")
    assert response.status_code == 200

    data = response.json()
    assert data["location"] == "Uptown"
    assert data["area"] == 150.0
    assert data["roomNumber"] == 4
    assert data["images"] == []


def test_create_negative_area(client):
    """測試負數面積被接受"""
    created = _create(client, {**REAL_ESTATE, "area": -10})
    assert created["area"] == -10


def test_create_empty_body(client):
    """測試空白資料被接受"""
    created = _create(client, {})
    assert created["id"]
    assert created["location"] is None


def test_list(client):
    """測試列出所有房地產"""
    _create(client)
    _create(client, {**REAL_ESTATE, "location": "Mountain"})

    response = client.get("/api/realestates/")
    assert response.status_code == 200
    assert len(response.json()) == 2


def test_get_not_found(client):
    """測試找不到房地產"""
    response = client.get(f"/api/realestates/{uuid.uuid4()}")
    assert response.status_code == 404


def test_get_invalid_id(client):
    """測試無效的 id 格式"""
    response = client.get("/api/realestates/not-a-guid")
    assert response.status_code == 422


def test_update(client):
    """測試更新房地產"""
    created = _create(client)

    response = client.put(
        f"/api/realestates/{created['id']}",
        json={"area": 100.0, "location": "Mountain", "roomNumber": 3, "buildingType": "Cabin log"},
    )
    assert response.status_code == 200

    data = response.json()
    assert data["location"] == "Mountain"
    assert data["createdAt"] == created["createdAt"]
    assert data["modifiedAt"] != created["modifiedAt"]


def test_update_not_found(client):
    """測試更新不存在的房地產回應 409"""
    response = client.put(f"/api/realestates/{uuid.uuid4()}", json={"location": "Nowhere"})
    assert response.status_code == 409


def test_delete(client):
    """測試刪除房地產"""
    created = _create(client)

    response = client.delete(f"/api/realestates/{created['id']}")
    assert response.status_code == 200
    assert response.json()["id"] == created["id"]

    assert client.get(f"/api/realestates/{created['id']}").status_code == 404


def test_delete_not_found(client):
    """測試刪除不存在的房地產"""
    response = client.delete(f"/api/realestates/{uuid.uuid4()}")
    assert response.status_code == 404


def test_upload_and_list_images(client):
    """測試上傳圖片"""
    created = _create(client)

    response = client.post(
        f"/api/realestates/{created['id']}/images",
        files=[
            ("files", ("kitchen.jpg", b"\x01\x02\x03", "image/jpeg")),
            ("files", ("livingroom.jpg", b"\x04\x05\x06", "image/jpeg")),
        ],
    )
    assert response.status_code == 200
    assert {img["imageTitle"] for img in response.json()} == {"kitchen.jpg", "livingroom.jpg"}

    images = client.get(f"/api/realestates/{created['id']}/images").json()
    assert len(images) == 2

    content = client.get(f"/api/realestates/images/{images[0]['id']}")
    assert content.status_code == 200
    assert content.content in (b"\x01\x02\x03", b"\x04\x05\x06")


def test_upload_images_real_estate_not_found(client):
    """測試上傳圖片到不存在的房地產"""
    response = client.post(
        f"/api/realestates/{uuid.uuid4()}/images",
        files=[("files", ("a.jpg", b"\x00", "image/jpeg"))],
    )
    assert response.status_code == 404


def test_remove_image(client):
    """測試刪除單張圖片"""
    created = _create(client)
    uploaded = client.post(
        f"/api/realestates/{created['id']}/images",
        files=[("files", ("a.jpg", b"\x00", "image/jpeg"))],
    ).json()

    response = client.delete(f"/api/realestates/images/{uploaded[0]['id']}")
    assert response.status_code == 200
    assert client.get(f"/api/realestates/{created['id']}/images").json() == []

    response = client.delete(f"/api/realestates/images/{uploaded[0]['id']}")
    assert response.status_code == 404


def test_delete_cascades_images(client, db):
    """測試刪除房地產時不留下任何圖片"""
    created = _create(client)
    client.post(
        f"/api/realestates/{created['id']}/images",
        files=[
            ("files", ("a.jpg", b"\x00", "image/jpeg")),
            ("files", ("b.jpg", b"\x01", "image/jpeg")),
        ],
    )

    response = client.delete(f"/api/realestates/{created['id']}")
    assert response.status_code == 200
    assert len(response.json()["images"]) == 2

    leftovers = db.scalars(
        select(FileToDatabase).where(FileToDatabase.real_estate_id == uuid.UUID(created["id"]))
    ).all()
    assert leftovers == []


def test_create_with_offset_timestamp(client):
    """測試帶時區偏移的時間戳記不會只保留當地時刻"""
    created = _create(client, {**REAL_ESTATE, "createdAt": "2025-11-17T09:17:22+02:00"})

    expected = datetime(2025, 11, 17, 7, 17, 22, tzinfo=timezone.utc).astimezone().replace(tzinfo=None)
    assert datetime.fromisoformat(created["createdAt"]) == expected
