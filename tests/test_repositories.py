import uuid

import pytest

from app.core.dates import utcnow
from app.core.exceptions import ResourceInUseError, UserAlreadyExistsError
from app.db.models import Document, DocumentType, User
from app.db.repositories.user_repository import UserRepository


def _user(login, email):
    return User(
        id=uuid.uuid4(), login=login, email=email,
        first_name="Иван", last_name="Иванов", password="hash"
    )


async def test_unique_constraint_backs_up_service_checks(session_factory):
    async with session_factory() as session:
        repository = UserRepository(session)
        await repository.save(_user("test", "test@test.ru"))

        with pytest.raises(UserAlreadyExistsError):
            await repository.save(_user("test", "other@x.ru"))

        await session.rollback()


async def test_exists_checks_and_paging(session_factory):
    async with session_factory() as session:
        repository = UserRepository(session)
        for index in range(3):
            await repository.save(_user(f"user{index}", f"user{index}@test.ru"))
        await session.commit()

        assert await repository.login_exists("user1")
        assert await repository.email_exists("user2@test.ru")
        assert not await repository.login_exists("nobody")

        page = await repository.get_page(1, 2)

        assert page.total == 3
        assert page.page == 1
        assert len(page.items) == 1
        assert page.items[0].login == "user2"


async def test_users_page_is_ordered_by_login(session_factory):
    async with session_factory() as session:
        repository = UserRepository(session)
        for login in ("victor", "anna", "maria"):
            await repository.save(_user(login, f"{login}@test.ru"))
        await session.commit()

        page = await repository.get_page(0, 10)

        assert [user.login for user in page.items] == ["anna", "maria", "victor"]


async def test_delete_referenced_user_raises_resource_in_use(session_factory):
    async with session_factory() as session:
        repository = UserRepository(session)
        owner = await repository.save(_user("owner", "owner@test.ru"))
        now = utcnow()
        session.add(Document(
            name="Договор", creation_date=now, update_date=now,
            user=owner, document_type=DocumentType(name="договор", created_at=now)
        ))
        await session.commit()

        with pytest.raises(ResourceInUseError, match="User"):
            await repository.delete(owner)

        await session.rollback()
