from app.domains.identity.schemas import (
    UserBase, UserCreate, UserUpdate, PasswordChange, UserResponse
)
from app.domains.identity.mapper import UserMapper
from app.domains.identity.services import UserService

__all__ = [
    "UserBase", "UserCreate", "UserUpdate", "PasswordChange", "UserResponse",
    "UserMapper",
    "UserService"
]
