"""
Medal role assignment.

Roles are matched by exact name against the medal label, so a server opts in
by creating roles named 'Herald 1', 'Crusader 2', 'Immortal' and so on.
"""

import logging

import discord

from medalbot.utils.exceptions import RoleResolutionError

logger = logging.getLogger(__name__)


class RoleAssigner:
    """Grants the guild role whose name matches a medal."""

    async def assign(self, member: discord.Member, medal: str) -> discord.Role:
        """
        Give member the role named medal.

        Raises:
            RoleResolutionError: if no such role exists or Discord refuses the grant
        """
        guild = getattr(member, 'guild', None)
        if guild is None:
            raise RoleResolutionError(medal, "command was not used in a server")

        role = discord.utils.get(guild.roles, name=medal)
        if role is None:
            raise RoleResolutionError(medal)

        if role in member.roles:
            logger.debug(f"{member} already has role '{medal}'")
            return role

        try:
            await member.add_roles(role, reason=f"OpenDota medal: {medal}")
        except discord.Forbidden as e:
            raise RoleResolutionError(medal, f"missing permissions ({e})") from e
        except discord.HTTPException as e:
            raise RoleResolutionError(medal, f"Discord API error ({e})") from e

        logger.info(f"Assigned role '{medal}' to {member} in guild {guild.id}")
        return role
