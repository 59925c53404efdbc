"""
Identity store for Discord user -> Steam ID links.

Each operation is a single-row write in its own transaction. Failures surface
as StoreError through BaseService.get_session.
"""

import logging
from typing import Optional, Tuple
from sqlalchemy import select, delete

from medalbot.services.base import BaseService
from medalbot.database.models import LinkedAccount
from medalbot.data_models.profile import IdentityRecord
from medalbot.utils.exceptions import StoreError

logger = logging.getLogger(__name__)


class IdentityStore(BaseService):
    """Persists which Steam account each Discord user has linked."""

    @staticmethod
    def _to_record(account: LinkedAccount) -> IdentityRecord:
        return IdentityRecord(user_key=account.discord_id, steam_id=account.steam_id)

    async def find(self, user_key: int) -> Optional[IdentityRecord]:
        """Return the stored link for user_key, if any."""
        async with self.get_session("find linked account") as session:
            result = await session.execute(
                select(LinkedAccount).where(LinkedAccount.discord_id == user_key)
            )
            account = result.scalar_one_or_none()
            return self._to_record(account) if account else None

    async def upsert(self, user_key: int, steam_id: str) -> Tuple[IdentityRecord, bool]:
        """
        Store steam_id for user_key.

        Returns:
            (record, created) where created is False when an existing link was updated
        """
        async with self.get_session("upsert linked account") as session:
            result = await session.execute(
                select(LinkedAccount).where(LinkedAccount.discord_id == user_key)
            )
            account = result.scalar_one_or_none()

            if account:
                account.steam_id = steam_id
                created = False
            else:
                account = LinkedAccount(discord_id=user_key, steam_id=steam_id)
                session.add(account)
                created = True

            await session.flush()
            record = self._to_record(account)

        logger.info(f"{'Linked' if created else 'Updated'} Steam ID {steam_id} for Discord user {user_key}")
        return record, created

    async def delete(self, user_key: int) -> bool:
        """Remove the link for user_key. Returns False when there was nothing to remove."""
        async with self.get_session(StoreError.DELETE_OPERATION) as session:
            result = await session.execute(
                delete(LinkedAccount).where(LinkedAccount.discord_id == user_key)
            )
            removed = (result.rowcount or 0) > 0

        if removed:
            logger.info(f"Removed Steam ID link for Discord user {user_key}")
        else:
            logger.debug(f"No Steam ID link to remove for Discord user {user_key}")
        return removed
