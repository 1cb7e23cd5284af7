import pytest

from app.core.db import transaction


async def test_transaction_commits_on_success(session):
    async with transaction(session):
        pass

    session.commit.assert_awaited_once()
    session.rollback.assert_not_awaited()


async def test_transaction_rolls_back_and_reraises(session):
    with pytest.raises(RuntimeError):
        async with transaction(session):
            raise RuntimeError("boom")

    session.rollback.assert_awaited_once()
    session.commit.assert_not_awaited()
