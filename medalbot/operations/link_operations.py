"""
Link Operations Module

This module provides the business logic behind the steamid command: storing a
Discord user's Steam ID, building their OpenDota profile and granting the
matching medal role.

Key functionality:
- save_steam_id(): validate the input, then upsert or delete the stored link
- lookup_medal(): fetch the six OpenDota documents, aggregate and classify
- refresh_medal(): lookup_medal() plus role assignment

Collaborators are passed in by the caller so the same operations run against
fakes in tests and real services in the bot.
"""

from typing import Optional, Tuple

import discord

from medalbot.data_models.profile import LinkAction, LinkResult, MedalResult, PlayerProfile
from medalbot.services.medal import classify
from medalbot.services.profile import ProfileAggregator
from medalbot.utils.exceptions import InvalidIdentifierError, RoleResolutionError
from medalbot.utils.logger import setup_logger
from medalbot.utils.validators import validate_steam_id

logger = setup_logger(__name__)


class LinkOperations:
    """
    Business logic for linking Discord users to OpenDota accounts.

    Every call is independent: no profile data is kept between invocations.
    """

    def __init__(self, identity_store, stats_client, role_assigner=None,
                 aggregator: Optional[ProfileAggregator] = None):
        """
        Args:
            identity_store: object with async upsert/delete (see IdentityStore)
            stats_client: object with async fetch_all (see OpenDotaClient)
            role_assigner: object with async assign(member, medal); None disables roles
            aggregator: ProfileAggregator to use, defaults to local-time rendering
        """
        self.identity_store = identity_store
        self.stats_client = stats_client
        self.role_assigner = role_assigner
        self.aggregator = aggregator or ProfileAggregator()
        self.logger = logger

    async def save_steam_id(self, user_key: int, raw_steam_id: Optional[str]) -> LinkResult:
        """
        Validate and persist a Steam ID for user_key.

        '0' removes the stored link instead. Validation happens before any
        store or network access.

        Raises:
            InvalidIdentifierError: if raw_steam_id is not all digits
            StoreError: if the store operation fails
        """
        check = validate_steam_id(raw_steam_id)
        if not check.ok:
            self.logger.info(f"Rejected Steam ID {raw_steam_id!r} from {user_key}: {check.reason}")
            raise InvalidIdentifierError(raw_steam_id)

        if check.is_removal:
            removed = await self.identity_store.delete(user_key)
            return LinkResult(action=LinkAction.REMOVED if removed else LinkAction.NOT_LINKED)

        record, created = await self.identity_store.upsert(user_key, check.value)
        return LinkResult(
            action=LinkAction.CREATED if created else LinkAction.UPDATED,
            steam_id=record.steam_id
        )

    async def lookup_medal(self, steam_id: str) -> Tuple[PlayerProfile, str]:
        """
        Build the profile and medal for steam_id.

        Raises:
            ExternalApiError: if any OpenDota request fails
            MissingProfileError: if the account has no public profile
        """
        payload = await self.stats_client.fetch_all(steam_id)
        profile = self.aggregator.aggregate(payload)
        medal = classify(profile)
        self.logger.info(f"Steam ID {steam_id} classified as '{medal}'")
        return profile, medal

    async def refresh_medal(self, member: Optional[discord.Member], steam_id: str) -> MedalResult:
        """
        Look up the medal for steam_id and grant the matching role to member.

        A missing or refused role is recorded on the result and logged; it
        never prevents the profile from being returned.
        """
        profile, medal = await self.lookup_medal(steam_id)

        if member is None or self.role_assigner is None:
            return MedalResult(profile=profile, medal=medal)

        try:
            role = await self.role_assigner.assign(member, medal)
        except RoleResolutionError as e:
            self.logger.warning(f"Role assignment skipped for {member}: {e}")
            return MedalResult(profile=profile, medal=medal, role_error=e.user_message)

        return MedalResult(profile=profile, medal=medal, role_name=role.name)
