import logging
from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ResourceInUseError
from app.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


@dataclass
class Page(Generic[ModelT]):
    """Страница результатов, нумерация страниц с нуля"""
    items: List[ModelT] = field(default_factory=list)
    total: int = 0
    page: int = 0
    size: int = 0


class SQLAlchemyRepository(Generic[ModelT]):
    """Общий репозиторий: поиск по id, сохранение, удаление, постраничный список"""

    model: Type[ModelT]
    # Имя колонки для сортировки страниц
    order_by: str = "id"

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, entity_id: Any) -> Optional[ModelT]:
        """Получение сущности по идентификатору"""
        return await self.session.get(self.model, entity_id)

    async def exists(self, entity_id: Any) -> bool:
        """Проверка существования сущности"""
        result = await self.session.execute(
            select(self.model.id).where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none() is not None

    async def save(self, entity: ModelT) -> ModelT:
        """Вставка или обновление сущности"""
        self.session.add(entity)
        await self.session.flush()
        return entity

    async def delete(self, entity: ModelT) -> None:
        """Удаление сущности, на которую не ссылаются другие записи"""
        await self.session.delete(entity)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            logger.warning("Foreign key rejected delete of %s %s: %s", self.model.__name__, entity.id, exc.orig)
            raise ResourceInUseError(self.model.__name__, entity.id) from exc

    async def get_page(self, page: int = 0, size: int = 10) -> Page[ModelT]:
        """Получение страницы сущностей, упорядоченных по колонке order_by"""
        total = await self.session.scalar(select(func.count()).select_from(self.model))
        result = await self.session.execute(
            select(self.model)
            .order_by(getattr(self.model, self.order_by))
            .offset(page * size)
            .limit(size)
        )
        return Page(
            items=list(result.scalars().unique().all()),
            total=total or 0,
            page=page,
            size=size
        )
