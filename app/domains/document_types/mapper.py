from app.db.models.document_type import Attribute, DocumentType
from app.domains.document_types.schemas import (
    AttributeResponse, DocumentAttributeResponse, DocumentTypeResponse
)


class DocumentTypeMapper:
    """Преобразование типа документа в DTO вместе со списком атрибутов"""

    def map(self, document_type: DocumentType) -> DocumentTypeResponse:
        return DocumentTypeResponse(
            id=document_type.id,
            name=document_type.name,
            description=document_type.description,
            created_at=document_type.created_at,
            attributes=[
                DocumentAttributeResponse(id=attribute.id, name=attribute.name)
                for attribute in document_type.attributes or []
            ]
        )


class AttributeMapper:

    def to_dto(self, attribute: Attribute) -> AttributeResponse:
        return AttributeResponse.model_validate(attribute)
