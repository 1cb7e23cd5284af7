from app.domains.document_types.schemas import (
    AttributeCreate, AttributeUpdate, AttributeResponse, DocumentAttributeResponse,
    DocumentTypeCreate, DocumentTypeUpdate, DocumentTypeResponse
)
from app.domains.document_types.mapper import AttributeMapper, DocumentTypeMapper
from app.domains.document_types.services import AttributeService, DocumentTypeService

__all__ = [
    "AttributeCreate", "AttributeUpdate", "AttributeResponse", "DocumentAttributeResponse",
    "DocumentTypeCreate", "DocumentTypeUpdate", "DocumentTypeResponse",
    "AttributeMapper", "DocumentTypeMapper",
    "AttributeService", "DocumentTypeService"
]
