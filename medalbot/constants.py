"""
Bot-wide constants for the Medal Bot.

This module holds the OpenDota resource paths, the medal vocabulary and the
lookup tables used to turn OpenDota's integer codes into readable labels.
"""

class ApiConstants:
    """OpenDota resource paths, relative to Config.OPENDOTA_API_URL."""

    PLAYER = "players/{steam_id}"
    WIN_LOSS = "players/{steam_id}/wl"
    PLAYER_HEROES = "players/{steam_id}/heroes"
    HEROES = "heroes"
    RANKINGS = "players/{steam_id}/rankings"
    RECENT_MATCHES = "players/{steam_id}/recentMatches"

    # Order matters: StatsPayload fields are filled positionally from this tuple
    RESOURCES = (PLAYER, WIN_LOSS, PLAYER_HEROES, HEROES, RANKINGS, RECENT_MATCHES)

class MedalConstants:
    """Constants related to rank tiers and medals."""

    UNRANKED = "unranked"
    IMMORTAL = "Immortal"
    LEADERBOARD_TEMPLATE = "Immortal ** | rank **{rank}"

    # Major digit 8 is Immortal, which carries no minor digit
    IMMORTAL_MAJOR = 8

    # Indexed by the major digit of rank_tier
    MEDALS = (
        "Lower than Herald?",
        "Herald",
        "Guardian",
        "Crusader",
        "Archon",
        "Legend",
        "Ancient",
        "Divine",
    )

class ProfileConstants:
    """Constants for profile aggregation."""

    UNKNOWN = "Unknown"
    UNKNOWN_SKILL = "unknown"
    TOP_HERO_COUNT = 3

    # Significant digits kept for win rates
    WIN_RATE_PRECISION = 4
    HERO_WIN_RATE_PRECISION = 2

    # Radiant occupies player slots 0-4, dire starts above 5
    RADIANT_SLOT_LIMIT = 6

    # Weekday, month, day, year: always 15 characters
    MATCH_DATE_FORMAT = "%a %b %d %Y"

    DEFAULT_LOBBY_LABEL = "match"
    WON = "Won"
    LOST = "Lost"

class UIConstants:
    """Constants for Discord UI elements."""

    DEFAULT_EMBED_COLOR = 0x3498db  # Blue
    ERROR_COLOR = 0xe74c3c         # Red for errors
    SUCCESS_COLOR = 0x2ecc71       # Green for success

    NO_DATA = "no data"
    MEDAL_EMOJI = "🏅"
    HERO_EMOJI = "🦸"

# Skill bracket reported on recent matches
SKILL_BRACKETS = {
    0: "invalid",
    1: "normal",
    2: "high",
    3: "very high",
}

# OpenDota game_mode ids
GAME_MODES = {
    0: "unknown",
    1: "all_pick",
    2: "captains_mode",
    3: "random_draft",
    4: "single_draft",
    5: "all_random",
    6: "intro",
    7: "diretide",
    8: "reverse_captains_mode",
    9: "greeviling",
    10: "tutorial",
    11: "mid_only",
    12: "least_played",
    13: "limited_heroes",
    14: "compendium_matchmaking",
    15: "custom",
    16: "captains_draft",
    17: "balanced_draft",
    18: "ability_draft",
    19: "event",
    20: "all_random_death_match",
    21: "1v1_mid",
    22: "all_draft",
    23: "turbo",
    24: "mutation",
    25: "coaches_challenge",
}

# OpenDota lobby_type ids
LOBBY_TYPES = {
    0: "normal",
    1: "practice",
    2: "tournament",
    3: "tutorial",
    4: "coop_bots",
    5: "ranked_team_mm",
    6: "ranked_solo_mm",
    7: "ranked",
    8: "1v1_mid",
    9: "battle_cup",
    10: "local_bots",
    11: "spectator",
    12: "event",
    13: "gauntlet",
    14: "new_player",
    15: "featured",
}
