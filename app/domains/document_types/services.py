import logging
from typing import List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dates import utcnow
from app.core.db import transaction
from app.core.exceptions import ResourceNotFoundError
from app.db.models.document_type import Attribute, DocumentType
from app.db.repositories.document_type_repository import AttributeRepository, DocumentTypeRepository
from app.domains.document_types.mapper import AttributeMapper, DocumentTypeMapper
from app.domains.document_types.schemas import (
    AttributeCreate, AttributeResponse, AttributeUpdate,
    DocumentTypeCreate, DocumentTypeResponse, DocumentTypeUpdate
)

logger = logging.getLogger(__name__)


class DocumentTypeService:
    """Сервис типов документов"""

    def __init__(
        self,
        session: AsyncSession,
        document_type_repository: Optional[DocumentTypeRepository] = None,
        attribute_repository: Optional[AttributeRepository] = None,
        document_type_mapper: Optional[DocumentTypeMapper] = None
    ):
        self.session = session
        self.document_type_repository = document_type_repository or DocumentTypeRepository(session)
        self.attribute_repository = attribute_repository or AttributeRepository(session)
        self.document_type_mapper = document_type_mapper or DocumentTypeMapper()

    async def list_document_types(self, page: int = 0, size: int = 10) -> List[DocumentTypeResponse]:
        """Получение страницы типов документов"""
        document_types = await self.document_type_repository.get_page(page, size)
        return [self.document_type_mapper.map(item) for item in document_types.items]

    async def get_document_type(self, document_type_id: int) -> DocumentTypeResponse:
        """Получение типа документа по id"""
        document_type = await self._get_or_raise(document_type_id)
        return self.document_type_mapper.map(document_type)

    async def create_document_type(self, data: DocumentTypeCreate) -> DocumentTypeResponse:
        """Создание типа документа"""
        async with transaction(self.session):
            document_type = DocumentType(
                name=data.name,
                description=data.description,
                created_at=utcnow(),
                attributes=await self._resolve_attributes(data.attribute_ids)
            )
            document_type = await self.document_type_repository.save(document_type)

        logger.info("Created document type %s (%s)", document_type.id, document_type.name)
        return self.document_type_mapper.map(document_type)

    async def update_document_type(self, document_type_id: int, data: DocumentTypeUpdate) -> DocumentTypeResponse:
        """Частичное обновление типа документа"""
        async with transaction(self.session):
            document_type = await self._get_or_raise(document_type_id)

            if data.name is not None:
                document_type.name = data.name
            if data.description is not None:
                document_type.description = data.description
            if data.attribute_ids is not None:
                document_type.attributes = await self._resolve_attributes(data.attribute_ids)

            document_type = await self.document_type_repository.save(document_type)

        logger.info("Updated document type %s", document_type_id)
        return self.document_type_mapper.map(document_type)

    async def delete_document_type(self, document_type_id: int) -> None:
        """Удаление типа документа"""
        async with transaction(self.session):
            document_type = await self._get_or_raise(document_type_id)
            await self.document_type_repository.delete(document_type)

        logger.info("Deleted document type %s", document_type_id)

    async def _get_or_raise(self, document_type_id: int) -> DocumentType:
        document_type = await self.document_type_repository.get_by_id(document_type_id)
        if document_type is None:
            raise ResourceNotFoundError("DocumentType", document_type_id)
        return document_type

    async def _resolve_attributes(self, attribute_ids: Sequence[int]) -> List[Attribute]:
        """Атрибуты в порядке запроса, повторы отбрасываются"""
        ordered_ids = list(dict.fromkeys(attribute_ids))
        found = {
            attribute.id: attribute
            for attribute in await self.attribute_repository.get_by_ids(ordered_ids)
        }
        missing = [attribute_id for attribute_id in ordered_ids if attribute_id not in found]
        if missing:
            raise ResourceNotFoundError("Attribute", missing[0])
        return [found[attribute_id] for attribute_id in ordered_ids]


class AttributeService:
    """Сервис атрибутов"""

    def __init__(
        self,
        session: AsyncSession,
        attribute_repository: Optional[AttributeRepository] = None,
        attribute_mapper: Optional[AttributeMapper] = None
    ):
        self.session = session
        self.attribute_repository = attribute_repository or AttributeRepository(session)
        self.attribute_mapper = attribute_mapper or AttributeMapper()

    async def list_attributes(self, page: int = 0, size: int = 10) -> List[AttributeResponse]:
        attributes = await self.attribute_repository.get_page(page, size)
        return [self.attribute_mapper.to_dto(attribute) for attribute in attributes.items]

    async def get_attribute(self, attribute_id: int) -> AttributeResponse:
        attribute = await self._get_or_raise(attribute_id)
        return self.attribute_mapper.to_dto(attribute)

    async def create_attribute(self, data: AttributeCreate) -> AttributeResponse:
        async with transaction(self.session):
            attribute = Attribute(name=data.name, data_type=data.data_type)
            attribute = await self.attribute_repository.save(attribute)

        logger.info("Created attribute %s (%s)", attribute.id, attribute.name)
        return self.attribute_mapper.to_dto(attribute)

    async def update_attribute(self, attribute_id: int, data: AttributeUpdate) -> AttributeResponse:
        async with transaction(self.session):
            attribute = await self._get_or_raise(attribute_id)
            if data.name is not None:
                attribute.name = data.name
            if data.data_type is not None:
                attribute.data_type = data.data_type
            attribute = await self.attribute_repository.save(attribute)

        return self.attribute_mapper.to_dto(attribute)

    async def delete_attribute(self, attribute_id: int) -> None:
        async with transaction(self.session):
            attribute = await self._get_or_raise(attribute_id)
            await self.attribute_repository.delete(attribute)

        logger.info("Deleted attribute %s", attribute_id)

    async def _get_or_raise(self, attribute_id: int) -> Attribute:
        attribute = await self.attribute_repository.get_by_id(attribute_id)
        if attribute is None:
            raise ResourceNotFoundError("Attribute", attribute_id)
        return attribute
