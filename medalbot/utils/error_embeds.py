"""
Centralized error embeds for consistent error handling across the Medal Bot.

Provides standardized error messages and formatting for the steamid command.
"""

import discord
from typing import Optional

from medalbot.utils.exceptions import (
    MedalBotException, InvalidIdentifierError, StoreError, ExternalApiError, MissingProfileError
)


class ErrorEmbeds:
    """Centralized error embed factory for consistent error handling."""

    @staticmethod
    def invalid_steam_id(member: Optional[discord.abc.User] = None) -> discord.Embed:
        """Create embed for a Steam ID that is not all digits."""
        prefix = f"{member.mention} " if member else ""
        return discord.Embed(
            title="Invalid Steam ID",
            description=f"{prefix}Invalid steamID. It should only consist of numbers",
            color=discord.Color.red()
        )

    @staticmethod
    def store_error(error: StoreError) -> discord.Embed:
        """Create embed for linked-account storage failures."""
        return discord.Embed(
            title="Database Error",
            description=error.user_message,
            color=discord.Color.red()
        )

    @staticmethod
    def api_error() -> discord.Embed:
        """Create embed for failed OpenDota requests."""
        return discord.Embed(
            title="OpenDota Unavailable",
            description="Invalid API response, check that the id was correct!",
            color=discord.Color.red()
        )

    @staticmethod
    def profile_unavailable() -> discord.Embed:
        """Create embed for accounts without a public profile."""
        return discord.Embed(
            title="Profile Unavailable",
            description="Unable to retrieve dota profile. Is your profile public and have you played matches?",
            color=discord.Color.orange()
        )

    @staticmethod
    def command_error(error: str) -> discord.Embed:
        """Create embed for general command errors."""
        return discord.Embed(
            title="Command Error",
            description=f"An error occurred: {error}\n\nPlease try again or contact an administrator.",
            color=discord.Color.red()
        )

    @classmethod
    def from_exception(cls, error: MedalBotException, member: Optional[discord.abc.User] = None) -> discord.Embed:
        """Pick the embed matching a pipeline exception."""
        if isinstance(error, InvalidIdentifierError):
            return cls.invalid_steam_id(member)
        if isinstance(error, StoreError):
            return cls.store_error(error)
        if isinstance(error, ExternalApiError):
            return cls.api_error()
        if isinstance(error, MissingProfileError):
            return cls.profile_unavailable()
        return cls.command_error(error.user_message)
