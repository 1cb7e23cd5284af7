import logging
import uuid
from datetime import timedelta
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dates import as_utc, utcnow
from app.core.db import transaction
from app.core.exceptions import ResourceNotFoundError, WrongDateError
from app.db.models.document import AttributeValue, Document
from app.db.models.document_type import DocumentType
from app.db.models.user import User
from app.db.repositories.base import Page
from app.db.repositories.document_repository import AttributeValueRepository, DocumentRepository
from app.db.repositories.document_type_repository import AttributeRepository, DocumentTypeRepository
from app.db.repositories.user_repository import UserRepository
from app.domains.documents.schemas import (
    AttributeValueCreate, AttributeValueUpdate, DocumentCreate, DocumentUpdate
)

logger = logging.getLogger(__name__)

# Документ, не обновлявшийся дольше этого срока, считается устаревшим
STALE_UPDATE_WINDOW = timedelta(days=1)


class DocumentService:
    """Сервис для работы с документами"""

    def __init__(
        self,
        session: AsyncSession,
        document_repository: Optional[DocumentRepository] = None,
        user_repository: Optional[UserRepository] = None,
        document_type_repository: Optional[DocumentTypeRepository] = None
    ):
        self.session = session
        self.document_repository = document_repository or DocumentRepository(session)
        self.user_repository = user_repository or UserRepository(session)
        self.document_type_repository = document_type_repository or DocumentTypeRepository(session)

    async def list_documents(self, page: int = 0, size: int = 10) -> Page[Document]:
        """Получение страницы документов"""
        return await self.document_repository.get_page(page, size)

    async def get_document(self, document_id: int) -> Document:
        """Получение документа по id"""
        document = await self.document_repository.get_by_id(document_id)
        if document is None:
            raise ResourceNotFoundError("Document", document_id)
        return document

    async def create_document(self, document_data: DocumentCreate) -> Document:
        """Создание нового документа"""
        async with transaction(self.session):
            user = await self._get_user(document_data.user_id)
            document_type = await self._get_document_type(document_data.document_type_id)

            document = Document(
                name=document_data.name,
                creation_date=document_data.creation_date,
                update_date=document_data.update_date,
                user=user,
                document_type=document_type
            )
            document = await self.document_repository.save(document)

        logger.info("Created document %s (%s)", document.id, document.name)
        return document

    async def update_document(self, document_id: int, update_data: DocumentUpdate) -> Document:
        """Частичное обновление документа"""
        async with transaction(self.session):
            document = await self.get_document(document_id)

            stored_update_date = as_utc(document.update_date)
            if utcnow() - stored_update_date > STALE_UPDATE_WINDOW:
                logger.warning(
                    "Rejected update of stale document %s, last updated at %s",
                    document_id, stored_update_date.isoformat()
                )
                raise WrongDateError(
                    f"Document {document_id} was last updated at {stored_update_date.isoformat()}, "
                    "re-fetch it before updating"
                )

            if update_data.name is not None:
                document.name = update_data.name
            if update_data.creation_date is not None:
                document.creation_date = update_data.creation_date
            if update_data.update_date is not None:
                document.update_date = update_data.update_date
            if update_data.user_id is not None:
                document.user = await self._get_user(update_data.user_id)
            if update_data.document_type_id is not None:
                document.document_type = await self._get_document_type(update_data.document_type_id)

            # Порядок дат проверяем, только если их меняет сам запрос
            dates_changed = update_data.creation_date is not None or update_data.update_date is not None
            if dates_changed and as_utc(document.update_date) < as_utc(document.creation_date):
                raise WrongDateError("Update date cannot be earlier than creation date")

            document = await self.document_repository.save(document)

        logger.info("Updated document %s", document_id)
        return document

    async def delete_document(self, document_id: int) -> None:
        """Удаление документа"""
        async with transaction(self.session):
            document = await self.get_document(document_id)
            await self.document_repository.delete(document)

        logger.info("Deleted document %s", document_id)

    async def _get_user(self, user_id: uuid.UUID) -> User:
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user

    async def _get_document_type(self, document_type_id: int) -> DocumentType:
        document_type = await self.document_type_repository.get_by_id(document_type_id)
        if document_type is None:
            raise ResourceNotFoundError("DocumentType", document_type_id)
        return document_type


class AttributeValueService:
    """Сервис значений атрибутов документов"""

    def __init__(
        self,
        session: AsyncSession,
        attribute_value_repository: Optional[AttributeValueRepository] = None,
        attribute_repository: Optional[AttributeRepository] = None,
        document_repository: Optional[DocumentRepository] = None
    ):
        self.session = session
        self.attribute_value_repository = attribute_value_repository or AttributeValueRepository(session)
        self.attribute_repository = attribute_repository or AttributeRepository(session)
        self.document_repository = document_repository or DocumentRepository(session)

    async def get_attribute_value(self, attribute_value_id: int) -> AttributeValue:
        """Получение значения атрибута по id"""
        attribute_value = await self.attribute_value_repository.get_by_id(attribute_value_id)
        if attribute_value is None:
            raise ResourceNotFoundError("AttributeValue", attribute_value_id)
        return attribute_value

    async def get_document_values(self, document_id: int) -> List[AttributeValue]:
        """Получение всех значений атрибутов документа"""
        if not await self.document_repository.exists(document_id):
            raise ResourceNotFoundError("Document", document_id)
        return await self.attribute_value_repository.get_by_document(document_id)

    async def create_attribute_value(self, value_data: AttributeValueCreate) -> AttributeValue:
        """Создание значения атрибута для документа"""
        async with transaction(self.session):
            if not await self.attribute_repository.exists(value_data.attribute_id):
                raise ResourceNotFoundError("Attribute", value_data.attribute_id)
            if not await self.document_repository.exists(value_data.document_id):
                raise ResourceNotFoundError("Document", value_data.document_id)

            attribute_value = AttributeValue(
                attribute_id=value_data.attribute_id,
                document_id=value_data.document_id,
                value=value_data.value
            )
            attribute_value = await self.attribute_value_repository.save(attribute_value)

        logger.info(
            "Set attribute %s of document %s", value_data.attribute_id, value_data.document_id
        )
        return attribute_value

    async def update_attribute_value(
        self,
        attribute_value_id: int,
        update_data: AttributeValueUpdate
    ) -> AttributeValue:
        """Замена значения атрибута"""
        async with transaction(self.session):
            attribute_value = await self.get_attribute_value(attribute_value_id)
            attribute_value.value = update_data.value
            attribute_value = await self.attribute_value_repository.save(attribute_value)
        return attribute_value

    async def delete_attribute_value(self, attribute_value_id: int) -> None:
        """Удаление значения атрибута"""
        async with transaction(self.session):
            attribute_value = await self.get_attribute_value(attribute_value_id)
            await self.attribute_value_repository.delete(attribute_value)

        logger.info("Deleted attribute value %s", attribute_value_id)
