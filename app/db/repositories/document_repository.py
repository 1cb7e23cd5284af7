from typing import List

from sqlalchemy import select

from app.db.models.document import AttributeValue, Document
from app.db.repositories.base import SQLAlchemyRepository


class DocumentRepository(SQLAlchemyRepository[Document]):
    """Репозиторий для работы с документами"""

    model = Document


class AttributeValueRepository(SQLAlchemyRepository[AttributeValue]):
    """Репозиторий значений атрибутов документов"""

    model = AttributeValue

    async def get_by_document(self, document_id: int) -> List[AttributeValue]:
        """Получение значений атрибутов документа"""
        result = await self.session.execute(
            select(AttributeValue)
            .where(AttributeValue.document_id == document_id)
            .order_by(AttributeValue.id)
        )
        return list(result.scalars().all())
