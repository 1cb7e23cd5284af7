from fastapi import APIRouter, Depends, status, Query
from typing import List
import uuid

from app.api.deps import get_user_service
from app.domains.identity.schemas import UserCreate, UserUpdate, UserResponse, PasswordChange
from app.domains.identity.services import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=List[UserResponse])
async def get_users(
    page: int = Query(0, ge=0),
    size: int = Query(10, ge=1, le=100),
    user_service: UserService = Depends(get_user_service)
):
    """Получение списка пользователей"""
    return await user_service.list_users(page, size)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: uuid.UUID,
    user_service: UserService = Depends(get_user_service)
):
    """Получение информации о пользователе"""
    return await user_service.get_user(user_id)


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service)
):
    """Регистрация пользователя"""
    return await user_service.create_user(user_data)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: uuid.UUID,
    update_data: UserUpdate,
    user_service: UserService = Depends(get_user_service)
):
    """Обновление профиля пользователя"""
    return await user_service.update_user(user_id, update_data)


@router.patch("/{user_id}/password", status_code=status.HTTP_204_NO_CONTENT)
async def update_password(
    user_id: uuid.UUID,
    password_data: PasswordChange,
    user_service: UserService = Depends(get_user_service)
):
    """Смена пароля пользователя"""
    await user_service.update_password(user_id, password_data)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: uuid.UUID,
    user_service: UserService = Depends(get_user_service)
):
    """Удаление пользователя"""
    await user_service.delete_user(user_id)
