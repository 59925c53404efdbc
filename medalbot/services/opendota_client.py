"""
OpenDota client for the steamid command.

Fetches the six documents a profile is built from concurrently. The fetch is
all-or-nothing: the first failed request raises ExternalApiError and the other
responses are ignored. No retries and no timeout beyond aiohttp's defaults.
"""

import asyncio
import logging
from typing import Any, Optional

import aiohttp

from medalbot.config import Config
from medalbot.constants import ApiConstants
from medalbot.data_models.profile import StatsPayload
from medalbot.utils.exceptions import ExternalApiError

logger = logging.getLogger(__name__)


class OpenDotaClient:
    """Thin async wrapper around the OpenDota REST API."""

    def __init__(self, session: Optional[aiohttp.ClientSession] = None, base_url: Optional[str] = None):
        self.base_url = base_url or Config.get_api_base_url()
        if not self.base_url.endswith('/'):
            self.base_url += '/'
        self.session = session
        self._owns_session = session is None

    def _ensure_session(self):
        if self.session is None or self.session.closed:
            self.session = aiohttp.ClientSession()
            self._owns_session = True
        return self.session

    async def _fetch(self, path: str) -> Any:
        """GET one resource and decode its JSON body."""
        session = self._ensure_session()
        url = f"{self.base_url}{path}"
        try:
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    raise ExternalApiError(path, f"HTTP {response.status}")
                # OpenDota occasionally serves JSON with a text/plain content type
                return await response.json(content_type=None)
        except aiohttp.ClientError as e:
            raise ExternalApiError(path, str(e)) from e
        except ValueError as e:
            raise ExternalApiError(path, f"invalid JSON: {e}") from e

    async def fetch_all(self, steam_id: str) -> StatsPayload:
        """
        Fetch profile, win/loss, hero stats, hero catalog, rankings and recent matches.

        Raises:
            ExternalApiError: if any of the six requests fails
        """
        paths = [resource.format(steam_id=steam_id) for resource in ApiConstants.RESOURCES]
        logger.debug(f"Fetching {len(paths)} OpenDota resources for {steam_id}")

        try:
            documents = await asyncio.gather(*(self._fetch(path) for path in paths))
        except ExternalApiError as e:
            logger.warning(f"OpenDota fetch aborted for {steam_id}: {e}")
            raise

        return StatsPayload(*documents)

    async def close(self):
        """Close the HTTP session if this client created it"""
        if self._owns_session and self.session is not None and not self.session.closed:
            await self.session.close()
