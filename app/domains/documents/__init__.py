from app.domains.documents.schemas import (
    DocumentCreate, DocumentUpdate, DocumentResponse, DocumentListResponse,
    AttributeValueCreate, AttributeValueUpdate, AttributeValueResponse
)
from app.domains.documents.mapper import DocumentMapper, AttributeValueMapper
from app.domains.documents.services import DocumentService, AttributeValueService

__all__ = [
    "DocumentCreate", "DocumentUpdate", "DocumentResponse", "DocumentListResponse",
    "AttributeValueCreate", "AttributeValueUpdate", "AttributeValueResponse",
    "DocumentMapper", "AttributeValueMapper",
    "DocumentService", "AttributeValueService"
]
