from app.db.repositories.base import Page, SQLAlchemyRepository
from app.db.repositories.user_repository import UserRepository
from app.db.repositories.document_repository import DocumentRepository, AttributeValueRepository
from app.db.repositories.document_type_repository import DocumentTypeRepository, AttributeRepository

__all__ = [
    "Page",
    "SQLAlchemyRepository",
    "UserRepository",
    "DocumentRepository",
    "AttributeValueRepository",
    "DocumentTypeRepository",
    "AttributeRepository"
]
