from app.db.models.user import User
from app.db.models.document_type import Attribute, DocumentType, document_type_attributes
from app.db.models.document import AttributeValue, Document

__all__ = [
    "User",
    "Attribute",
    "DocumentType",
    "document_type_attributes",
    "Document",
    "AttributeValue"
]
