from fastapi import APIRouter, Depends, status, Query

from app.api.deps import get_document_service
from app.domains.documents.mapper import DocumentMapper
from app.domains.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse, DocumentListResponse
)
from app.domains.documents.services import DocumentService

router = APIRouter(prefix="/documents", tags=["documents"])

document_mapper = DocumentMapper()


@router.get("/", response_model=DocumentListResponse)
async def get_documents(
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1, le=100),
    document_service: DocumentService = Depends(get_document_service)
):
    """Получение списка документов"""
    documents = await document_service.list_documents(page, size)

    return DocumentListResponse(
        documents=[document_mapper.to_dto(doc) for doc in documents.items],
        total=documents.total,
        page=documents.page,
        size=documents.size
    )


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: int,
    document_service: DocumentService = Depends(get_document_service)
):
    """Получение документа по id"""
    document = await document_service.get_document(document_id)
    return document_mapper.to_dto(document)


@router.post("/", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def create_document(
    document_data: DocumentCreate,
    document_service: DocumentService = Depends(get_document_service)
):
    """Создание нового документа"""
    document = await document_service.create_document(document_data)
    return document_mapper.to_dto(document)


@router.patch("/{document_id}", response_model=DocumentResponse)
async def update_document(
    document_id: int,
    update_data: DocumentUpdate,
    document_service: DocumentService = Depends(get_document_service)
):
    """Обновление документа"""
    document = await document_service.update_document(document_id, update_data)
    return document_mapper.to_dto(document)


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(
    document_id: int,
    document_service: DocumentService = Depends(get_document_service)
):
    """Удаление документа"""
    await document_service.delete_document(document_id)
