from app.db.models.document import AttributeValue, Document
from app.domains.documents.schemas import AttributeValueResponse, DocumentResponse


class DocumentMapper:
    """Преобразование документа в DTO"""

    def to_dto(self, document: Document) -> DocumentResponse:
        # До flush user_id может отставать от присвоенной связи
        user_id = document.user.id if document.user is not None else document.user_id
        document_type_id = (
            document.document_type.id if document.document_type is not None else document.document_type_id
        )
        return DocumentResponse(
            id=document.id,
            name=document.name,
            creation_date=document.creation_date,
            update_date=document.update_date,
            user_id=user_id,
            document_type_id=document_type_id
        )


class AttributeValueMapper:
    """Преобразование значения атрибута в DTO"""

    def to_dto(self, attribute_value: AttributeValue) -> AttributeValueResponse:
        return AttributeValueResponse.model_validate(attribute_value)
