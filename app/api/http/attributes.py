from fastapi import APIRouter, Depends, status, Query
from typing import List

from app.api.deps import get_attribute_service
from app.domains.document_types.schemas import AttributeCreate, AttributeUpdate, AttributeResponse
from app.domains.document_types.services import AttributeService

router = APIRouter(prefix="/attributes", tags=["attributes"])


@router.get("/", response_model=List[AttributeResponse])
async def get_attributes(
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1, le=100),
    service: AttributeService = Depends(get_attribute_service)
):
    return await service.list_attributes(page, size)


@router.get("/{attribute_id}", response_model=AttributeResponse)
async def get_attribute(
    attribute_id: int,
    service: AttributeService = Depends(get_attribute_service)
):
    return await service.get_attribute(attribute_id)


@router.post("/", response_model=AttributeResponse, status_code=status.HTTP_201_CREATED)
async def create_attribute(
    data: AttributeCreate,
    service: AttributeService = Depends(get_attribute_service)
):
    return await service.create_attribute(data)


@router.patch("/{attribute_id}", response_model=AttributeResponse)
async def update_attribute(
    attribute_id: int,
    data: AttributeUpdate,
    service: AttributeService = Depends(get_attribute_service)
):
    return await service.update_attribute(attribute_id, data)


@router.delete("/{attribute_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_attribute(
    attribute_id: int,
    service: AttributeService = Depends(get_attribute_service)
):
    await service.delete_attribute(attribute_id)
