"""Workshop link dispatch: message text -> Steam lookups -> rendered embeds.

Each link, and each item behind a link, is processed independently -- one
failure is logged and the rest of the message carries on. Nothing is ever
reported back to the channel.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from reika.config import WorkshopConfig
from reika.errors import MalformedUpstreamPayload, ReikaError, UnsupportedPreviewFormat
from reika.models.embed import DisplayDocument
from reika.models.message import MessageEvent
from reika.render.embed import is_eligible, parse_author, parse_item, render_item
from reika.steam.client import SteamClient
from reika.workshop.urls import (
    WorkshopLinkMatch,
    extract_candidates,
    mark_suppressed,
    match_workshop_url,
)

logger = logging.getLogger(__name__)

SendDocument = Callable[[Any, DisplayDocument], Awaitable[None]]


async def handle_message(
    event: MessageEvent,
    steam: SteamClient,
    config: WorkshopConfig,
    send: SendDocument,
) -> int:
    """Post a preview embed for every workshop link in a message.

    Filters are applied in order:
    1. URL wrapped as <url> by the author -> skip
    2. Not a workshop link -> skip silently
    3. Item not public or banned -> skip

    Returns the number of embeds handed to ``send``.
    """
    candidates = mark_suppressed(extract_candidates(event.text), event.text)
    sent = 0

    for candidate in candidates:
        if candidate.suppressed:
            continue

        link = match_workshop_url(candidate.url, config)
        if link is None:
            continue

        logger.info("[message] %s (%s): %s", event.sender_name, event.sender_id, event.text)

        try:
            sent += await process_workshop_link(link, event.channel, steam, config, send)
        except ReikaError as exc:
            logger.warning("Skipping workshop link %s: %s", link.url, exc)
        except Exception as exc:
            logger.error("Workshop link failed for %s: %s", link.url, exc, exc_info=True)

    return sent


async def process_workshop_link(
    link: WorkshopLinkMatch,
    channel: Any,
    steam: SteamClient,
    config: WorkshopConfig,
    send: SendDocument,
) -> int:
    """Fetch, render, and send the item(s) behind one workshop link.

    Raises InvalidWorkshopId, SteamAPIError, or MalformedUpstreamPayload when
    the whole link has to be abandoned. Per-item payload problems are logged
    and only skip that item.
    """
    body = await steam.fetch_item_details(link.item_id)
    try:
        items = body["response"]["publishedfiledetails"]
    except (KeyError, TypeError) as exc:
        raise MalformedUpstreamPayload("Published file details response has no items") from exc

    sent = 0
    for raw_item in items:
        if not is_eligible(raw_item):
            logger.info(
                "Item %s is not public or is banned, skipping", raw_item.get("publishedfileid")
            )
            continue

        try:
            item = parse_item(raw_item)
            author = parse_author(await steam.fetch_author_profiles(item.creator))
            document = render_item(item, author, link.url, config)
        except (MalformedUpstreamPayload, UnsupportedPreviewFormat) as exc:
            logger.warning(
                "Cannot render item %s: %s", raw_item.get("publishedfileid"), exc, exc_info=True
            )
            continue

        await send(channel, document)
        sent += 1

    return sent
