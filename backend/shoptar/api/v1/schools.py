# backend/shoptar/api/v1/schools.py
"""學校 API 路由"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from shoptar.api.dependencies import get_school_services
from shoptar.schemas.school import SchoolDto
from shoptar.services.school import SchoolServices

router = APIRouter()


@router.get(
    "/",
    response_model=List[SchoolDto],
    summary="列出所有學校",
)
async def list_schools(
    service: SchoolServices = Depends(get_school_services),
) -> List[SchoolDto]:
    return service.list_all()


@router.post(
    "/",
    response_model=SchoolDto,
    summary="新增學校",
    description="未提供 id 時自動產生；欄位不做檢查",
)
async def create_school(
    dto: SchoolDto,
    service: SchoolServices = Depends(get_school_services),
) -> SchoolDto:
    return service.create(dto)


@router.get(
    "/{school_id}",
    response_model=SchoolDto,
    summary="取得單一學校",
)
async def get_school(
    school_id: str,
    service: SchoolServices = Depends(get_school_services),
) -> SchoolDto:
    """取得單一學校

    Raises:
        404: 找不到指定學校
    """
    school = service.detail(school_id)

    if not school:
        raise HTTPException(status_code=404, detail=f"找不到學校 {school_id}")

    return school


@router.put(
    "/{school_id}",
    response_model=SchoolDto,
    summary="更新學校",
)
async def update_school(
    school_id: str,
    dto: SchoolDto,
    service: SchoolServices = Depends(get_school_services),
) -> SchoolDto:
    """更新學校

    以路徑中的 id 為準；學校不存在時由全域例外處理回應 409。
    """
    dto.id = school_id
    return service.update(dto)


@router.delete(
    "/{school_id}",
    response_model=SchoolDto,
    summary="刪除學校",
)
async def delete_school(
    school_id: str,
    service: SchoolServices = Depends(get_school_services),
) -> SchoolDto:
    school = service.delete(school_id)

    if not school:
        raise HTTPException(status_code=404, detail=f"找不到學校 {school_id}")

    return school
