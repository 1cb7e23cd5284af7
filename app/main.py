"""
Точка входа EDM API.

``create_app`` настраивает логирование, CORS, обработчики доменных
ошибок и подключает роутеры. Экземпляр ``app`` создается при импорте,
поэтому приложение запускается как::

    uvicorn app.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.router import api_router
from app.core.config import settings


def create_app() -> FastAPI:
    """Сборка и настройка FastAPI-приложения"""
    handlers = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(logging.FileHandler(settings.log_file, encoding="utf-8"))
    # basicConfig не трогает уже настроенный корневой логгер
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=handlers
    )

    app = FastAPI(
        title=settings.project_name,
        description="Электронный документооборот: пользователи, документы, типы документов и атрибуты",
        version=settings.api_version
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    @app.get("/")
    async def root():
        """Корневой эндпоинт"""
        return {
            "message": f"{settings.project_name} API",
            "version": settings.api_version,
            "docs": "/docs"
        }

    return app


app = create_app()
