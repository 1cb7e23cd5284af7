import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from app.core.exceptions import UserAlreadyExistsError
from app.db.models.user import User
from app.db.repositories.base import SQLAlchemyRepository

logger = logging.getLogger(__name__)


class UserRepository(SQLAlchemyRepository[User]):
    """Репозиторий для работы с пользователями"""

    model = User
    order_by = "login"

    async def save(self, user: User) -> User:
        """Сохранение пользователя, уникальные индексы БД страхуют проверки сервиса"""
        try:
            return await super().save(user)
        except IntegrityError as exc:
            logger.warning("Unique constraint rejected user %s: %s", user.login, exc.orig)
            raise UserAlreadyExistsError("User with this email or login already exists") from exc

    async def email_exists(self, email: str) -> bool:
        """Проверка существования email"""
        result = await self.session.execute(
            select(User.id).where(User.email == email)
        )
        return result.scalar_one_or_none() is not None

    async def login_exists(self, login: str) -> bool:
        """Проверка существования login"""
        result = await self.session.execute(
            select(User.id).where(User.login == login)
        )
        return result.scalar_one_or_none() is not None
