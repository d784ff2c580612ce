# backend/shoptar/api/v1/real_estates.py
"""房地產 API 路由"""

import uuid
from typing import List

from fastapi import APIRouter, Depends, File, HTTPException, Response, UploadFile

from shoptar.api.dependencies import get_file_services, get_real_estate_services
from shoptar.schemas.real_estate import FileToDatabaseDto, RealEstateDto
from shoptar.services.files import FileServices, UploadedImage
from shoptar.services.real_estate import RealEstateServices

router = APIRouter()


@router.get(
    "/",
    response_model=List[RealEstateDto],
    summary="列出所有房地產",
)
async def list_real_estates(
    service: RealEstateServices = Depends(get_real_estate_services),
) -> List[RealEstateDto]:
    return service.list_all()


@router.post(
    "/",
    response_model=RealEstateDto,
    summary="新增房地產",
    description="一律產生新的 id，其餘欄位原樣保存（不檢查面積正負或空值）",
)
async def create_real_estate(
    dto: RealEstateDto,
    service: RealEstateServices = Depends(get_real_estate_services),
) -> RealEstateDto:
    return service.create(dto)


@router.get(
    "/{real_estate_id}",
    response_model=RealEstateDto,
    summary="取得單一房地產",
)
async def get_real_estate(
    real_estate_id: uuid.UUID,
    service: RealEstateServices = Depends(get_real_estate_services),
) -> RealEstateDto:
    """取得單一房地產

    Raises:
        404: 找不到指定房地產
    """
    real_estate = service.detail(real_estate_id)

    if not real_estate:
        raise HTTPException(status_code=404, detail=f"找不到房地產 {real_estate_id}")

    return real_estate


@router.put(
    "/{real_estate_id}",
    response_model=RealEstateDto,
    summary="更新房地產",
)
async def update_real_estate(
    real_estate_id: uuid.UUID,
    dto: RealEstateDto,
    service: RealEstateServices = Depends(get_real_estate_services),
) -> RealEstateDto:
    dto.id = real_estate_id
    return service.update(dto)


@router.delete(
    "/{real_estate_id}",
    response_model=RealEstateDto,
    summary="刪除房地產",
    description="一併刪除所有圖片",
)
async def delete_real_estate(
    real_estate_id: uuid.UUID,
    service: RealEstateServices = Depends(get_real_estate_services),
) -> RealEstateDto:
    real_estate = service.delete(real_estate_id)

    if not real_estate:
        raise HTTPException(status_code=404, detail=f"找不到房地產 {real_estate_id}")

    return real_estate


@router.get(
    "/{real_estate_id}/images",
    response_model=List[FileToDatabaseDto],
    summary="列出房地產圖片",
)
async def list_images(
    real_estate_id: uuid.UUID,
    service: FileServices = Depends(get_file_services),
) -> List[FileToDatabaseDto]:
    return service.images_for(real_estate_id)


@router.post(
    "/{real_estate_id}/images",
    response_model=List[FileToDatabaseDto],
    summary="上傳房地產圖片",
)
async def upload_images(
    real_estate_id: uuid.UUID,
    files: List[UploadFile] = File(..., description="圖片檔案"),
    service: FileServices = Depends(get_file_services),
) -> List[FileToDatabaseDto]:
    """上傳房地產圖片

    Raises:
        404: 找不到指定房地產
    """
    uploaded = []
    for file in files:
        content = await file.read()
        uploaded.append(UploadedImage(filename=file.filename, content=content))

    images = service.upload_images(real_estate_id, uploaded)

    if images is None:
        raise HTTPException(status_code=404, detail=f"找不到房地產 {real_estate_id}")

    return images


@router.get(
    "/images/{image_id}",
    summary="下載圖片內容",
    response_class=Response,
)
async def get_image(
    image_id: uuid.UUID,
    service: FileServices = Depends(get_file_services),
) -> Response:
    image = service.get_image(image_id)

    if not image:
        raise HTTPException(status_code=404, detail=f"找不到圖片 {image_id}")

    return Response(content=image.image_data or b"", media_type="application/octet-stream")


@router.delete(
    "/images/{image_id}",
    response_model=FileToDatabaseDto,
    summary="刪除單張圖片",
)
async def remove_image(
    image_id: uuid.UUID,
    service: FileServices = Depends(get_file_services),
) -> FileToDatabaseDto:
    image = service.remove_image(image_id)

    if not image:
        raise HTTPException(status_code=404, detail=f"找不到圖片 {image_id}")

    return image
