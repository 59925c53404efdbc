"""
Lookup helpers for OpenDota payloads.

Hero catalogs and ranking lists are small (well under 200 entries) and each is
scanned at most a handful of times per command, so a linear scan is enough.
Label lookups return None for unmapped codes; callers decide the fallback.
"""

from typing import Any, Dict, Iterable, Optional

from medalbot.constants import GAME_MODES, LOBBY_TYPES, SKILL_BRACKETS, ProfileConstants


def _same_id(left: Any, right: Any) -> bool:
    """OpenDota mixes int and str ids between endpoints."""
    if left is None or right is None:
        return False
    return str(left) == str(right)


def resolve_hero_name(catalog: Iterable[Dict[str, Any]], hero_id: Any) -> str:
    """Return the localized hero name for hero_id, or 'Unknown'."""
    for hero in catalog or ():
        if _same_id(hero.get('id'), hero_id):
            return hero.get('localized_name') or ProfileConstants.UNKNOWN
    return ProfileConstants.UNKNOWN


def resolve_hero_percentile(rankings: Iterable[Dict[str, Any]], hero_id: Any) -> str:
    """
    Return the player's percentile on hero_id as a percent string, or 'Unknown'.

    percent_rank is a 0-1 fraction; it is shown with at most two decimals and
    no trailing zeros (0.5 -> '50%', 0.12345 -> '12.35%').
    """
    for ranking in rankings or ():
        if _same_id(ranking.get('hero_id'), hero_id):
            percent_rank = ranking.get('percent_rank')
            if percent_rank is None:
                return ProfileConstants.UNKNOWN
            return f"{round(100 * float(percent_rank), 2):g}%"
    return ProfileConstants.UNKNOWN


def _label(table: Dict[int, str], index: Any) -> Optional[str]:
    try:
        key = int(index)
    except (TypeError, ValueError):
        return None
    label = table.get(key)
    return label.replace('_', ' ') if label else None


def game_mode_label(index: Any) -> Optional[str]:
    return _label(GAME_MODES, index)


def lobby_type_label(index: Any) -> Optional[str]:
    return _label(LOBBY_TYPES, index)


def skill_bracket_label(index: Any) -> Optional[str]:
    # bool is an int subclass; True must not read as 'normal'
    if isinstance(index, bool) or not isinstance(index, int):
        return None
    return SKILL_BRACKETS.get(index)
