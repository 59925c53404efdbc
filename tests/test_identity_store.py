"""
Tests for the SQLAlchemy-backed identity store, against a throwaway SQLite file.
"""

import pytest
import pytest_asyncio

from medalbot.database.database import Database
from medalbot.database.models import Base
from medalbot.services.identity_store import IdentityStore
from medalbot.utils.exceptions import StoreError


@pytest_asyncio.fixture
async def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'medalbot_test.db'}")
    await db.initialize()
    yield db
    await db.close()


@pytest.fixture
def store(database):
    return IdentityStore(database.session_factory)


class TestIdentityStore:

    @pytest.mark.asyncio
    async def test_upsert_creates(self, store):
        record, created = await store.upsert(1001, '193480093')

        assert created
        assert record.user_key == 1001
        assert record.steam_id == '193480093'

    @pytest.mark.asyncio
    async def test_upsert_updates_existing(self, store):
        await store.upsert(1001, '111')
        record, created = await store.upsert(1001, '222')

        assert not created
        assert record.steam_id == '222'
        assert (await store.find(1001)).steam_id == '222'

    @pytest.mark.asyncio
    async def test_round_trip_through_existing_branch(self, store):
        await store.upsert(1001, '193480093')
        record, created = await store.upsert(1001, '193480093')

        assert not created
        assert record.steam_id == '193480093'

    @pytest.mark.asyncio
    async def test_users_are_independent(self, store):
        await store.upsert(1, '111')
        await store.upsert(2, '222')

        assert (await store.find(1)).steam_id == '111'
        assert (await store.find(2)).steam_id == '222'

    @pytest.mark.asyncio
    async def test_find_missing(self, store):
        assert await store.find(424242) is None

    @pytest.mark.asyncio
    async def test_delete(self, store):
        await store.upsert(1001, '193480093')

        assert await store.delete(1001) is True
        assert await store.find(1001) is None
        assert await store.delete(1001) is False

    @pytest.mark.asyncio
    async def test_database_failure_raises_store_error(self, database, store):
        async with database.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        with pytest.raises(StoreError) as exc_info:
            await store.upsert(1001, '193480093')

        assert exc_info.value.operation == 'upsert linked account'
        assert 'Failed to find and add/ update ID' in exc_info.value.user_message

    @pytest.mark.asyncio
    async def test_delete_failure_reports_removal(self, database, store):
        async with database.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

        with pytest.raises(StoreError) as exc_info:
            await store.delete(1001)

        assert exc_info.value.operation == 'delete linked account'
        assert exc_info.value.user_message.startswith('Failed to find and remove steamID ')
