"""
Shared fixtures: OpenDota sample documents, a fake aiohttp session and fake
collaborators for LinkOperations.
"""

import os

# Keep test runs from writing daily log files; must be set before Config is imported
os.environ.setdefault('LOG_TO_FILE', 'false')

from datetime import timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from medalbot.data_models.profile import IdentityRecord, PlayerProfile, StatsPayload
from medalbot.services.profile import ProfileAggregator

STEAM_ID = "193480093"
BASE_URL = "https://api.opendota.test/api/"

# 2023-11-14 22:13:20 UTC, a Tuesday
MATCH_START = 1700000000


def build_payload(**overrides) -> StatsPayload:
    """A realistic OpenDota payload; keyword arguments replace whole documents."""
    documents = {
        'profile': {
            'profile': {
                'account_id': int(STEAM_ID),
                'personaname': 'Tester',
                'avatarfull': 'https://avatars.test/full.jpg',
                'profileurl': 'https://steamcommunity.com/id/tester/',
                'loccountrycode': 'NZ',
            },
            'rank_tier': 32,
            'leaderboard_rank': None,
        },
        'win_loss': {'win': 120, 'lose': 100},
        'hero_stats': [
            {'hero_id': 1, 'games': 50, 'win': 30},
            {'hero_id': 2, 'games': 40, 'win': 10},
            {'hero_id': 999, 'games': 3, 'win': 1},
            {'hero_id': 4, 'games': 1, 'win': 1},
        ],
        'hero_catalog': [
            {'id': 1, 'localized_name': 'Anti-Mage'},
            {'id': 2, 'localized_name': 'Axe'},
            {'id': 4, 'localized_name': 'Bloodseeker'},
        ],
        'rankings': [
            {'hero_id': 1, 'score': 1500.5, 'percent_rank': 0.1234},
            {'hero_id': 2, 'score': 900.0, 'percent_rank': 0.5},
        ],
        'recent_matches': [
            {
                'match_id': 7400000000,
                'player_slot': 130,
                'radiant_win': False,
                'start_time': MATCH_START,
                'hero_id': 2,
                'game_mode': 22,
                'lobby_type': 7,
                'skill': 2,
            },
        ],
    }
    documents.update(overrides)
    return StatsPayload(**documents)


def make_profile(rank_tier=None, leaderboard_rank=None) -> PlayerProfile:
    return PlayerProfile(
        account_id=int(STEAM_ID),
        persona_name='Tester',
        avatar_url=None,
        profile_url=None,
        country_code='Unknown',
        wins=0,
        losses=0,
        win_rate=None,
        rank_tier=rank_tier,
        leaderboard_rank=leaderboard_rank,
        top_heroes=(),
        recent_match=None,
    )


class FakeResponse:
    """Stands in for aiohttp.ClientResponse inside `async with session.get(...)`."""

    def __init__(self, status=200, body=None, error=None):
        self.status = status
        self._body = body
        self._error = error

    async def __aenter__(self):
        if self._error is not None:
            raise self._error
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def json(self, content_type='application/json'):
        if isinstance(self._body, Exception):
            raise self._body
        return self._body


class FakeSession:
    """Routes GET requests by URL path relative to BASE_URL."""

    def __init__(self, routes=None, default_status=200):
        self.routes = routes or {}
        self.default_status = default_status
        self.requested = []
        self.closed = False

    def get(self, url):
        self.requested.append(url)
        path = url[len(BASE_URL):] if url.startswith(BASE_URL) else url
        route = self.routes.get(path)
        if isinstance(route, FakeResponse):
            return route
        return FakeResponse(status=self.default_status, body=route)

    async def close(self):
        self.closed = True


def payload_routes(payload: StatsPayload, steam_id: str = STEAM_ID) -> dict:
    """Map each OpenDota resource path to the matching payload document."""
    return {
        f"players/{steam_id}": payload.profile,
        f"players/{steam_id}/wl": payload.win_loss,
        f"players/{steam_id}/heroes": payload.hero_stats,
        "heroes": payload.hero_catalog,
        f"players/{steam_id}/rankings": payload.rankings,
        f"players/{steam_id}/recentMatches": payload.recent_matches,
    }


@pytest.fixture
def payload():
    return build_payload()


@pytest.fixture
def aggregator():
    return ProfileAggregator(display_tz=timezone.utc)


@pytest.fixture
def identity_store():
    """In-memory stand-in for IdentityStore with call tracking."""
    records = {}
    store = MagicMock()

    async def upsert(user_key, steam_id):
        created = user_key not in records
        records[user_key] = steam_id
        return IdentityRecord(user_key=user_key, steam_id=steam_id), created

    async def delete(user_key):
        return records.pop(user_key, None) is not None

    store.records = records
    store.upsert = AsyncMock(side_effect=upsert)
    store.delete = AsyncMock(side_effect=delete)
    return store


@pytest.fixture
def stats_client(payload):
    client = MagicMock()
    client.fetch_all = AsyncMock(return_value=payload)
    return client
