"""Async Steam Web API client for workshop item and player lookups.

Both lookups are batched: one request carries every id. No retries, caching,
or rate limiting; failures surface as SteamAPIError and the caller decides
what to skip.
"""

import asyncio
import logging
from collections.abc import Iterable

import httpx

from reika.config import WorkshopConfig
from reika.errors import MalformedUpstreamPayload, SteamAPIError

logger = logging.getLogger(__name__)

IdBatch = int | Iterable[int]


def _endpoint(resource: str, target: str, version: str) -> str:
    return f"/{resource}/{target}/{version}/"


PLAYER_SUMMARIES = _endpoint("ISteamUser", "GetPlayerSummaries", "v2")
PUBLISHED_FILE_DETAILS = _endpoint("ISteamRemoteStorage", "GetPublishedFileDetails", "v1")


def _wrap(ids: IdBatch) -> list[int]:
    """Accept a scalar id as shorthand for a one-element batch."""
    if isinstance(ids, int):
        return [ids]
    return list(ids)


class SteamClient:
    """Steam Web API client bound to one pooled httpx.AsyncClient.

    Args:
        config: Pipeline constants (API base URL and request timeout).
        api_key: Steam Web API key, required by GetPlayerSummaries.
        http: Optional preconfigured client, used by tests to inject a transport.
    """

    def __init__(
        self,
        config: WorkshopConfig,
        api_key: str,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._api_key = api_key
        self._http = http or httpx.AsyncClient(
            base_url=config.api_base_url,
            timeout=httpx.Timeout(config.request_timeout),
        )

    async def __aenter__(self) -> "SteamClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def fetch_item_details(self, ids: IdBatch) -> dict:
        """Look up workshop items by published file id.

        Returns the parsed body, ``{"response": {"publishedfiledetails": [...]}}``.
        Ids Steam does not know come back without item fields or not at all.
        """
        ids = _wrap(ids)
        form = {"itemcount": len(ids)}
        form.update({f"publishedfileids[{i}]": item_id for i, item_id in enumerate(ids)})
        return await self._request("POST", PUBLISHED_FILE_DETAILS, data=form)

    async def fetch_author_profiles(self, ids: IdBatch) -> dict:
        """Look up player summaries by 64-bit Steam id.

        Returns the parsed body, ``{"response": {"players": [...]}}``. The list
        may be empty; picking a player is the caller's job.
        """
        ids = _wrap(ids)
        params = {
            "key": self._api_key,
            "steamids": ",".join(str(steam_id) for steam_id in ids),
        }
        return await self._request("GET", PLAYER_SUMMARIES, params=params)

    async def _request(self, method: str, path: str, **kwargs) -> dict:
        """Send one request within the configured timeout and parse the JSON body."""
        try:
            async with asyncio.timeout(self._config.request_timeout):
                response = await self._http.request(method, path, **kwargs)
            response.raise_for_status()
        except TimeoutError as exc:
            raise SteamAPIError(
                f"{method} {path} timed out after {self._config.request_timeout:.1f}s"
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise SteamAPIError(
                f"{method} {path} returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise SteamAPIError(f"{method} {path} failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            raise MalformedUpstreamPayload(f"{method} {path} returned invalid JSON") from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)
        return body
