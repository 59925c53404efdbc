"""
Steam commands for the Medal Bot.

Provides the steamid command: link a Discord account to a Steam32 ID, show the
OpenDota profile summary and grant the matching medal role.
"""

import discord
from discord.ext import commands
from discord import app_commands
from typing import Optional

from medalbot.config import Config
from medalbot.data_models.profile import LinkAction
from medalbot.operations.link_operations import LinkOperations
from medalbot.utils.embeds import build_profile_embed
from medalbot.utils.error_embeds import ErrorEmbeds
from medalbot.utils.exceptions import MedalBotException, InvalidIdentifierError, StoreError
import logging

logger = logging.getLogger(__name__)

STEAMID_HELP = (
    "Stores or updates your steam ID (it should consist of only numbers and be the number that you see "
    "as your steam friend id or in your steam URL, or the number at the end of your dotabuff/ opendota URL). "
    "If you would like to remove your steamID info from the database, you can use `steamid 0`"
)


class SteamCog(commands.Cog):
    """Link Discord users to their Dota 2 accounts"""

    def __init__(self, bot, link_ops: Optional[LinkOperations] = None):
        self.bot = bot
        self.link_ops = link_ops or LinkOperations(
            identity_store=bot.identity_store,
            stats_client=bot.stats_client,
            role_assigner=bot.role_assigner
        )

    @commands.hybrid_command(
        name='steamid',
        description='Link your current Discord ID to your Steam ID',
        help=STEAMID_HELP,
        usage='[Steam32 ID]',
        extras={'category': 'dota', 'example': '193480093'}
    )
    @app_commands.describe(steam_id="Your Steam32 ID, or 0 to remove the stored one")
    @commands.cooldown(1, Config.STEAMID_COOLDOWN_SECONDS, commands.BucketType.user)
    async def steamid(self, ctx: commands.Context, steam_id: str):
        """Link your current Discord ID to your Steam ID"""
        await ctx.defer()
        author = ctx.author

        try:
            link = await self.link_ops.save_steam_id(author.id, steam_id)
        except (InvalidIdentifierError, StoreError) as e:
            await ctx.send(f"{author.mention} {e.user_message}")
            return

        if not link.should_fetch_profile:
            if link.action == LinkAction.REMOVED:
                await ctx.send("Successfully removed steamID from database.")
            else:
                await ctx.send(f"{author.mention} You have no steamID stored, nothing was removed.")
            return

        if link.action == LinkAction.UPDATED:
            await ctx.send(f"{author.mention} Successfully updated Steam ID to be **{link.steam_id}**")
        else:
            await ctx.send(f"{author.mention} Added Steam ID to be **{link.steam_id}**")

        member = author if isinstance(author, discord.Member) else None
        try:
            async with ctx.typing():
                result = await self.link_ops.refresh_medal(member, link.steam_id)
        except MedalBotException as e:
            logger.info(f"Medal lookup failed for {author.id} ({link.steam_id}): {e}")
            await ctx.send(embed=ErrorEmbeds.from_exception(e, author))
            return

        await ctx.send(embed=build_profile_embed(result, author))


async def setup(bot):
    await bot.add_cog(SteamCog(bot))
