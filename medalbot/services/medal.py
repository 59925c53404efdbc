"""
Medal classification from OpenDota rank tiers.

rank_tier is a two digit number: the tens digit is the medal (1 Herald up to
8 Immortal) and the units digit the star count within it.
"""

import logging

from medalbot.constants import MedalConstants
from medalbot.data_models.profile import PlayerProfile

logger = logging.getLogger(__name__)


def classify(profile: PlayerProfile) -> str:
    """Map a profile's rank fields to a medal label such as 'Crusader 2'."""
    rank_tier = profile.rank_tier
    if rank_tier is None:
        return MedalConstants.UNRANKED

    if profile.leaderboard_rank:
        return MedalConstants.LEADERBOARD_TEMPLATE.format(rank=profile.leaderboard_rank)

    try:
        major, minor = divmod(int(rank_tier), 10)
    except (TypeError, ValueError):
        logger.warning(f"Unreadable rank_tier {rank_tier!r} for account {profile.account_id}")
        return MedalConstants.UNRANKED

    if major == MedalConstants.IMMORTAL_MAJOR:
        return MedalConstants.IMMORTAL

    if not 0 <= major < len(MedalConstants.MEDALS):
        logger.warning(f"rank_tier {rank_tier} for account {profile.account_id} is outside the medal table")
        return MedalConstants.UNRANKED

    return f"{MedalConstants.MEDALS[major]} {minor}"
