from app.db.models.user import User
from app.domains.identity.schemas import UserResponse


class UserMapper:
    """Преобразование пользователя в DTO"""

    def to_dto(self, user: User) -> UserResponse:
        return UserResponse.model_validate(user)
