from typing import List, Sequence

from sqlalchemy import select

from app.db.models.document_type import Attribute, DocumentType
from app.db.repositories.base import SQLAlchemyRepository


class DocumentTypeRepository(SQLAlchemyRepository[DocumentType]):
    """Репозиторий типов документов"""

    model = DocumentType


class AttributeRepository(SQLAlchemyRepository[Attribute]):
    """Репозиторий атрибутов"""

    model = Attribute

    async def get_by_ids(self, attribute_ids: Sequence[int]) -> List[Attribute]:
        """Получение атрибутов по списку id (порядок не гарантирован)"""
        if not attribute_ids:
            return []
        result = await self.session.execute(
            select(Attribute).where(Attribute.id.in_(set(attribute_ids)))
        )
        return list(result.scalars().all())
