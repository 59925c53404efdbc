"""
Shared embed utilities for the Medal Bot.

Builds the summary embed sent after a successful steamid lookup.
"""

import discord
from typing import Optional
from medalbot.data_models.profile import MedalResult
from medalbot.constants import UIConstants


def format_percent(value: Optional[float]) -> str:
    """Render a percentage, or 'no data' when it could not be computed."""
    if value is None:
        return UIConstants.NO_DATA
    return f"{value:g}%"


def build_profile_embed(result: MedalResult, target_member: Optional[discord.abc.User] = None) -> discord.Embed:
    """
    Build the OpenDota profile embed.

    Args:
        result: Profile, medal and role outcome for the player
        target_member: Discord user whose avatar is used when Steam has none

    Returns:
        Formatted Discord embed ready for display
    """
    profile = result.profile
    embed = discord.Embed(
        title=f"{UIConstants.MEDAL_EMOJI} {profile.persona_name}",
        url=profile.profile_url,
        color=UIConstants.DEFAULT_EMBED_COLOR
    )

    if profile.avatar_url:
        embed.set_thumbnail(url=profile.avatar_url)
    elif target_member:
        embed.set_thumbnail(url=target_member.display_avatar.url)

    embed.add_field(
        name="📊 Overview",
        value=(
            f"**Medal:** {result.medal}\n"
            f"**Country:** {profile.country_code}\n"
            f"**Games:** {profile.total_games} ({profile.wins}W / {profile.losses}L)\n"
            f"**Win Rate:** {format_percent(profile.win_rate)}"
        ),
        inline=True
    )

    if profile.top_heroes:
        hero_lines = [
            f"**{hero.name}**: {hero.games_played} games, "
            f"{format_percent(hero.win_rate_percent)} won, percentile {hero.percentile_rank}"
            for hero in profile.top_heroes
        ]
        embed.add_field(name=f"{UIConstants.HERO_EMOJI} Top Heroes", value="\n".join(hero_lines), inline=False)

    match = profile.recent_match
    if match:
        mode = " ".join(label for label in (match.game_mode_label, match.lobby_type_label) if label)
        embed.add_field(
            name="🕹️ Most Recent Match",
            value=(
                f"**{match.outcome}** a {match.skill_bracket} skill {mode} as **{match.hero_name}**\n"
                f"{match.started_at}"
            ),
            inline=False
        )

    if result.role_error:
        embed.set_footer(text=result.role_error)
    elif result.role_assigned:
        embed.set_footer(text=f"Role assigned: {result.role_name}")

    return embed
