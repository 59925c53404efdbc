"""
Profile data models for the steamid command.

Provides immutable data transfer objects for the OpenDota payloads and the
normalized profile built from them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, NamedTuple, Optional, Tuple


class StatsPayload(NamedTuple):
    """Parsed OpenDota documents, in request order."""
    profile: Optional[Dict[str, Any]]
    win_loss: Dict[str, Any]
    hero_stats: List[Dict[str, Any]]
    hero_catalog: List[Dict[str, Any]]
    rankings: List[Dict[str, Any]]
    recent_matches: List[Dict[str, Any]]


@dataclass(frozen=True)
class IdentityRecord:
    """A Discord user linked to a Steam32 account id."""
    user_key: int
    steam_id: str


class LinkAction(Enum):
    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"
    NOT_LINKED = "not_linked"  # removal requested but nothing was stored


@dataclass(frozen=True)
class LinkResult:
    """Outcome of storing or removing a user's Steam ID."""
    action: LinkAction
    steam_id: Optional[str] = None

    @property
    def should_fetch_profile(self) -> bool:
        return self.action in (LinkAction.CREATED, LinkAction.UPDATED)


@dataclass(frozen=True)
class HeroSummary:
    """One of the player's most played heroes."""
    hero_id: Optional[int]
    name: str
    games_played: int
    wins: int
    win_rate_percent: Optional[float]  # None when no games
    percentile_rank: str               # '12.35%' or 'Unknown'


@dataclass(frozen=True)
class RecentMatch:
    """Summary of the player's latest match."""
    match_id: Optional[int]
    started_at: str  # display only, e.g. 'Sun Oct 18 2026'
    skill_bracket: str
    hero_name: str
    game_mode_label: str
    lobby_type_label: str
    outcome: str  # 'Won' or 'Lost'


@dataclass(frozen=True)
class PlayerProfile:
    """Normalized OpenDota profile for one account."""
    # Basic info
    account_id: Optional[int]
    persona_name: str
    avatar_url: Optional[str]
    profile_url: Optional[str]
    country_code: str

    # Overall record
    wins: int
    losses: int
    win_rate: Optional[float]  # None when no games recorded

    # Rank
    rank_tier: Optional[int]
    leaderboard_rank: Optional[int]

    # Heroes and latest match
    top_heroes: Tuple[HeroSummary, ...]
    recent_match: Optional[RecentMatch]

    @property
    def total_games(self) -> int:
        return self.wins + self.losses


@dataclass(frozen=True)
class MedalResult:
    """Profile, medal and role outcome of one steamid lookup."""
    profile: PlayerProfile
    medal: str
    role_name: Optional[str] = None
    role_error: Optional[str] = None

    @property
    def role_assigned(self) -> bool:
        return self.role_name is not None
