from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_db
from app.core.security import PasswordEncoder, get_password_encoder
from app.domains.documents.services import AttributeValueService, DocumentService
from app.domains.document_types.services import AttributeService, DocumentTypeService
from app.domains.identity.services import UserService


def get_user_service(
    db: AsyncSession = Depends(get_db),
    password_encoder: PasswordEncoder = Depends(get_password_encoder)
) -> UserService:
    return UserService(db, password_encoder=password_encoder)


def get_document_service(db: AsyncSession = Depends(get_db)) -> DocumentService:
    return DocumentService(db)


def get_attribute_value_service(db: AsyncSession = Depends(get_db)) -> AttributeValueService:
    return AttributeValueService(db)


def get_document_type_service(db: AsyncSession = Depends(get_db)) -> DocumentTypeService:
    return DocumentTypeService(db)


def get_attribute_service(db: AsyncSession = Depends(get_db)) -> AttributeService:
    return AttributeService(db)
