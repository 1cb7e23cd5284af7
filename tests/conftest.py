"""
Общие фикстуры тестов EDM.

* Юнит-тесты сервисов получают репозитории-моки (``AsyncMock``) и мок сессии,
  на котором проверяются commit/rollback.
* HTTP-тесты гоняют приложение через ``httpx.AsyncClient`` + ``ASGITransport``
  на SQLite в памяти с подмененными зависимостями ``get_db`` и
  ``get_password_encoder``.
"""

from __future__ import annotations

import uuid
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.dates import utcnow
from app.core.db import get_db
from app.core.security import PasswordEncoder, get_password_encoder
from app.db.base import Base
from app.db.models import Document, DocumentType, User
from app.db.repositories.document_repository import AttributeValueRepository, DocumentRepository
from app.db.repositories.document_type_repository import AttributeRepository, DocumentTypeRepository
from app.db.repositories.user_repository import UserRepository
from app.main import app as fastapi_app


async def _return_entity(entity):
    return entity


# =============================================================================
# SERVICE UNIT FIXTURES
# =============================================================================


@pytest.fixture
def session():
    return AsyncMock()


@pytest.fixture
def user_repository():
    repository = AsyncMock(spec=UserRepository)
    repository.save.side_effect = _return_entity
    return repository


@pytest.fixture
def document_repository():
    repository = AsyncMock(spec=DocumentRepository)
    repository.save.side_effect = _return_entity
    return repository


@pytest.fixture
def document_type_repository():
    repository = AsyncMock(spec=DocumentTypeRepository)
    repository.save.side_effect = _return_entity
    return repository


@pytest.fixture
def attribute_repository():
    repository = AsyncMock(spec=AttributeRepository)
    repository.save.side_effect = _return_entity
    return repository


@pytest.fixture
def attribute_value_repository():
    repository = AsyncMock(spec=AttributeValueRepository)
    repository.save.side_effect = _return_entity
    return repository


@pytest.fixture
def password_encoder():
    return MagicMock(spec=PasswordEncoder)


@pytest.fixture
def user():
    return User(
        id=uuid.uuid4(),
        login="test",
        email="test@test.ru",
        first_name="test",
        last_name="test",
        patronymic="test",
        password="test"
    )


@pytest.fixture
def document_type():
    return DocumentType(id=1, name="name", description="description", created_at=utcnow(), attributes=[])


@pytest.fixture
def document(user, document_type):
    now = utcnow()
    return Document(
        id=1,
        name="Test Document",
        creation_date=now - timedelta(days=1),
        update_date=now,
        user=user,
        document_type=document_type
    )


# =============================================================================
# HTTP FIXTURES
# =============================================================================


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )

    # Без этого SQLite не проверяет внешние ключи, в отличие от PostgreSQL
    @event.listens_for(engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as db_session:
            yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    # pbkdf2 быстрее bcrypt и не зависит от версии бэкенда
    fastapi_app.dependency_overrides[get_password_encoder] = lambda: PasswordEncoder(["pbkdf2_sha256"])

    async with AsyncClient(transport=ASGITransport(app=fastapi_app), base_url="http://test") as http_client:
        yield http_client

    fastapi_app.dependency_overrides.clear()
