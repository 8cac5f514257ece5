"""discord.py client wiring: event callbacks, embed conversion, and sending.

Send helpers are fire-and-forget: they catch and log Discord API errors but
never raise, so a failed post cannot stop the remaining links of a message.
"""

import logging
from typing import Any

import discord

from reika.config import WorkshopConfig
from reika.discord.handlers import handle_message
from reika.discord.mentions import reply_for_mention
from reika.models.embed import DisplayDocument
from reika.models.message import MessageEvent
from reika.steam.client import SteamClient

logger = logging.getLogger(__name__)


def to_discord_embed(document: DisplayDocument) -> discord.Embed:
    """Convert a rendered document into a discord.Embed."""
    embed = discord.Embed(
        title=document.title,
        description=document.description,
        color=document.color,
        url=document.url,
        timestamp=document.timestamp,
    )
    embed.set_thumbnail(url=document.thumbnail_url)
    embed.set_author(
        name=document.author.name,
        url=document.author.url,
        icon_url=document.author.icon_url,
    )
    for field in document.fields:
        embed.add_field(name=field.name, value=field.value, inline=field.inline)
    embed.set_footer(text=document.footer)
    return embed


async def send_document(channel: Any, document: DisplayDocument) -> None:
    """Post a workshop preview embed to a channel."""
    try:
        await channel.send(embed=to_discord_embed(document))
    except discord.HTTPException:
        logger.warning("Failed to send embed for %s", document.url, exc_info=True)


async def send_text(channel: Any, text: str) -> None:
    """Post a plain text message to a channel."""
    try:
        await channel.send(text)
    except discord.HTTPException:
        logger.warning("Failed to send message to channel %s", channel, exc_info=True)


def to_message_event(message: discord.Message) -> MessageEvent:
    """Extract the fields the handlers need from a discord.Message."""
    return MessageEvent(
        sender_id=message.author.id,
        sender_name=message.author.name,
        text=message.content or "",
        channel=message.channel,
    )


class ReikaBot(discord.Client):
    """Discord client that previews workshop links and answers mentions.

    Args:
        steam: Shared Steam API client (outlives reconnects).
        config: Pipeline constants.
        rival_bot_id: User id the mention replies may address.
    """

    def __init__(self, steam: SteamClient, config: WorkshopConfig, rival_bot_id: str) -> None:
        intents = discord.Intents.default()
        intents.message_content = True
        super().__init__(intents=intents)
        self.steam = steam
        self.config = config
        self.rival_bot_id = rival_bot_id

    async def on_ready(self) -> None:
        logger.info("Logged in as %s (%s)", self.user, self.user.id if self.user else "?")

    async def on_message(self, message: discord.Message) -> None:
        if message.author.bot:
            return

        event = to_message_event(message)

        if self.user is not None and self.user in message.mentions:
            await self.handle_mention(event)

        await handle_message(event, self.steam, self.config, send_document)

    async def handle_mention(self, event: MessageEvent) -> None:
        """Reply with a canned phrase if the mention matches one."""
        reply = reply_for_mention(event.text, event.sender_id, self.user.id, self.rival_bot_id)
        if reply is None:
            return
        logger.info("Mention from %s (%s): %s", event.sender_name, event.sender_id, event.text)
        await send_text(event.channel, reply)
