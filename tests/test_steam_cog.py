"""
Tests for the steamid command's user-facing replies.
"""

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from medalbot.cogs.steam import SteamCog
from medalbot.operations.link_operations import LinkOperations
from medalbot.utils.embeds import format_percent
from medalbot.utils.exceptions import ExternalApiError, StoreError
from tests.conftest import STEAM_ID


@pytest.fixture
def ctx():
    ctx = MagicMock()
    ctx.author.id = 1001
    ctx.author.mention = '<@1001>'
    ctx.defer = AsyncMock()
    ctx.send = AsyncMock()
    return ctx


@pytest.fixture
def cog(identity_store, stats_client, aggregator):
    link_ops = LinkOperations(identity_store, stats_client, role_assigner=None, aggregator=aggregator)
    return SteamCog(MagicMock(), link_ops=link_ops)


def sent_texts(ctx):
    return [call.args[0] for call in ctx.send.await_args_list if call.args]


def sent_embeds(ctx):
    return [call.kwargs['embed'] for call in ctx.send.await_args_list if 'embed' in call.kwargs]


class TestSteamIdCommand:

    @pytest.mark.asyncio
    async def test_invalid_id(self, cog, ctx, stats_client):
        await cog.steamid.callback(cog, ctx, 'abc')

        assert sent_texts(ctx) == ['<@1001> Invalid steamID. It should only consist of numbers']
        stats_client.fetch_all.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remove(self, cog, ctx, identity_store, stats_client):
        identity_store.records[1001] = STEAM_ID

        await cog.steamid.callback(cog, ctx, '0')

        assert sent_texts(ctx) == ['Successfully removed steamID from database.']
        stats_client.fetch_all.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_added_then_profile_embed(self, cog, ctx):
        await cog.steamid.callback(cog, ctx, STEAM_ID)

        assert sent_texts(ctx) == [f'<@1001> Added Steam ID to be **{STEAM_ID}**']
        embeds = sent_embeds(ctx)
        assert len(embeds) == 1
        assert 'Crusader 2' in embeds[0].fields[0].value
        assert '**Games:** 220 (120W / 100L)' in embeds[0].fields[0].value

    @pytest.mark.asyncio
    async def test_remove_failure(self, cog, ctx, identity_store, stats_client):
        identity_store.delete = AsyncMock(
            side_effect=StoreError('delete linked account', RuntimeError('disk full'))
        )

        await cog.steamid.callback(cog, ctx, '0')

        assert sent_texts(ctx) == ['<@1001> Failed to find and remove steamID disk full']
        stats_client.fetch_all.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_remove_when_nothing_stored(self, cog, ctx, stats_client):
        await cog.steamid.callback(cog, ctx, '0')

        assert sent_texts(ctx) == ['<@1001> You have no steamID stored, nothing was removed.']
        stats_client.fetch_all.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_updated(self, cog, ctx, identity_store):
        identity_store.records[1001] = '111'

        await cog.steamid.callback(cog, ctx, STEAM_ID)

        assert sent_texts(ctx)[0] == f'<@1001> Successfully updated Steam ID to be **{STEAM_ID}**'

    @pytest.mark.asyncio
    async def test_api_error_reported(self, cog, ctx, stats_client):
        stats_client.fetch_all.side_effect = ExternalApiError('heroes', 'HTTP 500')

        await cog.steamid.callback(cog, ctx, STEAM_ID)

        embeds = sent_embeds(ctx)
        assert len(embeds) == 1
        assert isinstance(embeds[0], discord.Embed)
        assert 'check that the id was correct' in embeds[0].description


class TestFormatting:

    def test_format_percent(self):
        assert format_percent(54.55) == '54.55%'
        assert format_percent(60.0) == '60%'
        assert format_percent(None) == 'no data'
