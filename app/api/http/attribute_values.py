from fastapi import APIRouter, Depends, status, Query
from typing import List

from app.api.deps import get_attribute_value_service
from app.domains.documents.mapper import AttributeValueMapper
from app.domains.documents.schemas import (
    AttributeValueCreate, AttributeValueUpdate, AttributeValueResponse
)
from app.domains.documents.services import AttributeValueService

router = APIRouter(prefix="/attribute-values", tags=["attribute values"])

attribute_value_mapper = AttributeValueMapper()


@router.get("/", response_model=List[AttributeValueResponse])
async def get_document_values(
    document_id: int = Query(...),
    service: AttributeValueService = Depends(get_attribute_value_service)
):
    """Значения атрибутов документа"""
    values = await service.get_document_values(document_id)
    return [attribute_value_mapper.to_dto(value) for value in values]


@router.get("/{attribute_value_id}", response_model=AttributeValueResponse)
async def get_attribute_value(
    attribute_value_id: int,
    service: AttributeValueService = Depends(get_attribute_value_service)
):
    value = await service.get_attribute_value(attribute_value_id)
    return attribute_value_mapper.to_dto(value)


@router.post("/", response_model=AttributeValueResponse, status_code=status.HTTP_201_CREATED)
async def create_attribute_value(
    value_data: AttributeValueCreate,
    service: AttributeValueService = Depends(get_attribute_value_service)
):
    value = await service.create_attribute_value(value_data)
    return attribute_value_mapper.to_dto(value)


@router.patch("/{attribute_value_id}", response_model=AttributeValueResponse)
async def update_attribute_value(
    attribute_value_id: int,
    update_data: AttributeValueUpdate,
    service: AttributeValueService = Depends(get_attribute_value_service)
):
    value = await service.update_attribute_value(attribute_value_id, update_data)
    return attribute_value_mapper.to_dto(value)


@router.delete("/{attribute_value_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_attribute_value(
    attribute_value_id: int,
    service: AttributeValueService = Depends(get_attribute_value_service)
):
    await service.delete_attribute_value(attribute_value_id)
