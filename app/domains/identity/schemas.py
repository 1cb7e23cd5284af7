from pydantic import BaseModel, EmailStr, Field, field_validator, ConfigDict
from typing import Optional
import uuid


def _validate_login(v):
    if v is not None and not v.replace('_', '').replace('-', '').replace('.', '').isalnum():
        raise ValueError('Login must contain only alphanumeric characters, dots, underscores, and hyphens')
    return v


class UserBase(BaseModel):
    """Базовая схема пользователя"""
    login: str = Field(..., min_length=3, max_length=100)
    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    patronymic: Optional[str] = Field(None, max_length=100)

    @field_validator('login')
    @classmethod
    def validate_login(cls, v):
        return _validate_login(v)


class UserCreate(UserBase):
    """Схема для создания пользователя"""
    password: str = Field(..., min_length=4, max_length=128)


class UserUpdate(BaseModel):
    """Схема для частичного обновления пользователя"""
    login: Optional[str] = Field(None, min_length=3, max_length=100)
    email: Optional[EmailStr] = None
    first_name: Optional[str] = Field(None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(None, min_length=1, max_length=100)
    patronymic: Optional[str] = Field(None, max_length=100)

    @field_validator('login')
    @classmethod
    def validate_login(cls, v):
        return _validate_login(v)


class PasswordChange(BaseModel):
    """Схема для смены пароля"""
    old_password: str
    new_password: str = Field(..., min_length=4, max_length=128)


class UserResponse(BaseModel):
    """Схема для ответа с данными пользователя"""
    id: uuid.UUID
    login: str
    email: str
    first_name: str
    last_name: str
    patronymic: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
