import logging
import uuid
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import transaction
from app.core.exceptions import InvalidCredentialsError, ResourceNotFoundError, UserAlreadyExistsError
from app.core.security import PasswordEncoder
from app.db.models.user import User
from app.db.repositories.user_repository import UserRepository
from app.domains.identity.mapper import UserMapper
from app.domains.identity.schemas import PasswordChange, UserCreate, UserResponse, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Сервис для работы с пользователями"""

    def __init__(
        self,
        session: AsyncSession,
        user_repository: Optional[UserRepository] = None,
        password_encoder: Optional[PasswordEncoder] = None,
        user_mapper: Optional[UserMapper] = None
    ):
        self.session = session
        self.user_repository = user_repository or UserRepository(session)
        self.password_encoder = password_encoder or PasswordEncoder()
        self.user_mapper = user_mapper or UserMapper()

    async def list_users(self, page: int = 0, size: int = 10) -> List[UserResponse]:
        """Получение страницы пользователей"""
        users = await self.user_repository.get_page(page, size)
        return [self.user_mapper.to_dto(user) for user in users.items]

    async def get_user(self, user_id: uuid.UUID) -> UserResponse:
        """Получение пользователя по id"""
        user = await self._get_or_raise(user_id)
        return self.user_mapper.to_dto(user)

    async def create_user(self, user_data: UserCreate) -> UserResponse:
        """Регистрация нового пользователя"""
        async with transaction(self.session):
            # Порядок важен: о занятом email сообщаем раньше, чем о login
            if await self.user_repository.email_exists(user_data.email):
                logger.warning("Email %s is already registered", user_data.email)
                raise UserAlreadyExistsError(f"User with email {user_data.email} already exists")

            if await self.user_repository.login_exists(user_data.login):
                logger.warning("Login %s is already taken", user_data.login)
                raise UserAlreadyExistsError(f"User with login {user_data.login} already exists")

            user = User(
                id=uuid.uuid4(),
                login=user_data.login,
                email=user_data.email,
                first_name=user_data.first_name,
                last_name=user_data.last_name,
                patronymic=user_data.patronymic,
                password=self.password_encoder.encode(user_data.password)
            )
            user = await self.user_repository.save(user)

        logger.info("Created user %s", user.login)
        return self.user_mapper.to_dto(user)

    async def update_user(self, user_id: uuid.UUID, update_data: UserUpdate) -> UserResponse:
        """Частичное обновление профиля пользователя"""
        async with transaction(self.session):
            user = await self._get_or_raise(user_id)

            # Совпадающее с текущим значение не проверяем, иначе пользователь конфликтует сам с собой
            if update_data.email is not None and update_data.email != user.email:
                if await self.user_repository.email_exists(update_data.email):
                    logger.warning("Email %s is already registered", update_data.email)
                    raise UserAlreadyExistsError(f"User with email {update_data.email} already exists")
                user.email = update_data.email

            if update_data.login is not None and update_data.login != user.login:
                if await self.user_repository.login_exists(update_data.login):
                    logger.warning("Login %s is already taken", update_data.login)
                    raise UserAlreadyExistsError(f"User with login {update_data.login} already exists")
                user.login = update_data.login

            if update_data.first_name is not None:
                user.first_name = update_data.first_name
            if update_data.last_name is not None:
                user.last_name = update_data.last_name
            if update_data.patronymic is not None:
                user.patronymic = update_data.patronymic

            user = await self.user_repository.save(user)

        logger.info("Updated user %s", user_id)
        return self.user_mapper.to_dto(user)

    async def update_password(self, user_id: uuid.UUID, password_data: PasswordChange) -> None:
        """Смена пароля пользователя"""
        async with transaction(self.session):
            user = await self._get_or_raise(user_id)

            if not self.password_encoder.matches(password_data.old_password, user.password):
                logger.warning("Wrong old password for user %s", user_id)
                raise InvalidCredentialsError()

            user.password = self.password_encoder.encode(password_data.new_password)
            await self.user_repository.save(user)

        logger.info("Changed password of user %s", user_id)

    async def delete_user(self, user_id: uuid.UUID) -> None:
        """Удаление пользователя"""
        async with transaction(self.session):
            user = await self._get_or_raise(user_id)
            await self.user_repository.delete(user)

        logger.info("Deleted user %s", user_id)

    async def _get_or_raise(self, user_id: uuid.UUID) -> User:
        user = await self.user_repository.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError("User", user_id)
        return user
