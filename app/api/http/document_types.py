from fastapi import APIRouter, Depends, status, Query
from typing import List

from app.api.deps import get_document_type_service
from app.domains.document_types.schemas import (
    DocumentTypeCreate, DocumentTypeUpdate, DocumentTypeResponse
)
from app.domains.document_types.services import DocumentTypeService

router = APIRouter(prefix="/document-types", tags=["document types"])


@router.get("/", response_model=List[DocumentTypeResponse])
async def get_document_types(
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1, le=100),
    service: DocumentTypeService = Depends(get_document_type_service)
):
    """Получение списка типов документов"""
    return await service.list_document_types(page, size)


@router.get("/{document_type_id}", response_model=DocumentTypeResponse)
async def get_document_type(
    document_type_id: int,
    service: DocumentTypeService = Depends(get_document_type_service)
):
    """Получение типа документа с атрибутами"""
    return await service.get_document_type(document_type_id)


@router.post("/", response_model=DocumentTypeResponse, status_code=status.HTTP_201_CREATED)
async def create_document_type(
    data: DocumentTypeCreate,
    service: DocumentTypeService = Depends(get_document_type_service)
):
    """Создание типа документа"""
    return await service.create_document_type(data)


@router.patch("/{document_type_id}", response_model=DocumentTypeResponse)
async def update_document_type(
    document_type_id: int,
    data: DocumentTypeUpdate,
    service: DocumentTypeService = Depends(get_document_type_service)
):
    """Обновление типа документа"""
    return await service.update_document_type(document_type_id, data)


@router.delete("/{document_type_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document_type(
    document_type_id: int,
    service: DocumentTypeService = Depends(get_document_type_service)
):
    """Удаление типа документа"""
    await service.delete_document_type(document_type_id)
