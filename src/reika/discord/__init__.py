"""Discord ingress: message dispatch, mention replies, and connection supervision."""

from reika.discord.bot import ReikaBot, send_document, to_discord_embed
from reika.discord.handlers import handle_message
from reika.discord.mentions import reply_for_mention
from reika.discord.supervisor import BotSupervisor

__all__ = [
    "BotSupervisor",
    "ReikaBot",
    "handle_message",
    "reply_for_mention",
    "send_document",
    "to_discord_embed",
]
