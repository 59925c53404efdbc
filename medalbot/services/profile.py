"""
Profile aggregation for the steamid command.

Merges the six OpenDota documents into one PlayerProfile: overall win rate,
the first three hero entries with their names, win rates and percentiles, and
a summary of the most recent match. Nothing is cached; every call builds a
fresh profile from the payload it is given.
"""

import logging
import math
from datetime import datetime, tzinfo
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, List, Optional, Tuple

from medalbot.constants import ProfileConstants
from medalbot.data_models.profile import StatsPayload, PlayerProfile, HeroSummary, RecentMatch
from medalbot.utils.exceptions import MissingProfileError
from medalbot.utils.lookups import (
    resolve_hero_name, resolve_hero_percentile,
    game_mode_label, lobby_type_label, skill_bracket_label
)

logger = logging.getLogger(__name__)


def round_significant(value: float, digits: int) -> float:
    """Round value to the given number of significant digits, ties away from zero (12.5 -> 13)."""
    if value == 0 or not math.isfinite(value):
        return value
    exact = Decimal(value)
    step = Decimal(1).scaleb(exact.adjusted() - digits + 1)
    return float(exact.quantize(step, rounding=ROUND_HALF_UP))


def percentage(part: int, whole: int, digits: int) -> Optional[float]:
    """100 * part / whole to `digits` significant digits, None when whole is zero."""
    if not whole:
        return None
    return round_significant(100 * part / whole, digits)


def _as_int(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


class ProfileAggregator:
    """Builds PlayerProfile objects from OpenDota payloads."""

    def __init__(self, display_tz: Optional[tzinfo] = None):
        # None renders match dates in the host's local time
        self.display_tz = display_tz

    def aggregate(self, payload: StatsPayload) -> PlayerProfile:
        """
        Merge a StatsPayload into a PlayerProfile.

        Raises:
            MissingProfileError: if the account has no public profile data
        """
        document = payload.profile
        if not document or not document.get('profile'):
            raise MissingProfileError()

        details = document['profile']
        win_loss = payload.win_loss or {}
        wins = _as_int(win_loss.get('win'))
        losses = _as_int(win_loss.get('lose'))

        catalog = payload.hero_catalog or []
        top_heroes = self._top_heroes(payload.hero_stats or [], catalog, payload.rankings or [])
        recent_match = self._recent_match(payload.recent_matches or [], catalog)

        profile = PlayerProfile(
            account_id=details.get('account_id'),
            persona_name=details.get('personaname') or ProfileConstants.UNKNOWN,
            avatar_url=details.get('avatarfull') or details.get('avatar'),
            profile_url=details.get('profileurl'),
            country_code=details.get('loccountrycode') or ProfileConstants.UNKNOWN,
            wins=wins,
            losses=losses,
            win_rate=percentage(wins, wins + losses, ProfileConstants.WIN_RATE_PRECISION),
            rank_tier=document.get('rank_tier'),
            leaderboard_rank=document.get('leaderboard_rank'),
            top_heroes=top_heroes,
            recent_match=recent_match
        )

        logger.debug(
            f"Aggregated profile for {profile.account_id}: {wins}W/{losses}L, "
            f"{len(top_heroes)} heroes, recent match {'present' if recent_match else 'missing'}"
        )
        return profile

    def _top_heroes(self, hero_stats: List[Dict[str, Any]], catalog: List[Dict[str, Any]],
                    rankings: List[Dict[str, Any]]) -> Tuple[HeroSummary, ...]:
        """First entries of hero_stats in upstream order (OpenDota sorts by games played)."""
        heroes = []
        for entry in hero_stats[:ProfileConstants.TOP_HERO_COUNT]:
            hero_id = _as_int(entry.get('hero_id'), default=None)
            games = _as_int(entry.get('games'))
            hero_wins = _as_int(entry.get('win'))
            heroes.append(HeroSummary(
                hero_id=hero_id,
                name=resolve_hero_name(catalog, hero_id),
                games_played=games,
                wins=hero_wins,
                win_rate_percent=percentage(hero_wins, games, ProfileConstants.HERO_WIN_RATE_PRECISION),
                percentile_rank=resolve_hero_percentile(rankings, hero_id)
            ))

        if len(heroes) < ProfileConstants.TOP_HERO_COUNT:
            logger.debug(f"Only {len(heroes)} hero entries available for top heroes")
        return tuple(heroes)

    def _recent_match(self, recent_matches: List[Dict[str, Any]],
                      catalog: List[Dict[str, Any]]) -> Optional[RecentMatch]:
        if not recent_matches:
            return None

        match = recent_matches[0]

        game_mode = game_mode_label(match.get('game_mode')) or ''
        lobby_type = lobby_type_label(match.get('lobby_type')) or ''
        if not game_mode and not lobby_type:
            lobby_type = ProfileConstants.DEFAULT_LOBBY_LABEL

        skill = skill_bracket_label(match.get('skill'))
        if skill is None:
            logger.debug(f"Unmapped skill bracket {match.get('skill')!r} on match {match.get('match_id')}")

        return RecentMatch(
            match_id=match.get('match_id'),
            started_at=self.format_start_time(match.get('start_time')),
            skill_bracket=skill or ProfileConstants.UNKNOWN_SKILL,
            hero_name=resolve_hero_name(catalog, match.get('hero_id')),
            game_mode_label=game_mode,
            lobby_type_label=lobby_type,
            outcome=self.match_outcome(match.get('player_slot'), match.get('radiant_win'))
        )

    def format_start_time(self, start_time: Any) -> str:
        """Render a Unix timestamp as a 15-character date such as 'Sun Oct 18 2026'."""
        if start_time is None:
            return ProfileConstants.UNKNOWN
        try:
            started = datetime.fromtimestamp(int(start_time), tz=self.display_tz)
        except (TypeError, ValueError, OverflowError, OSError):
            return ProfileConstants.UNKNOWN
        return started.strftime(ProfileConstants.MATCH_DATE_FORMAT)

    @staticmethod
    def match_outcome(player_slot: Any, radiant_win: Any) -> str:
        """Radiant holds slots below 6; everyone else is dire."""
        on_radiant = _as_int(player_slot) < ProfileConstants.RADIANT_SLOT_LIMIT
        won = bool(radiant_win) if on_radiant else not radiant_win
        return ProfileConstants.WON if won else ProfileConstants.LOST
