"""Data models for the reika pipeline."""

from reika.models.embed import DisplayDocument, EmbedAuthor, EmbedField
from reika.models.message import MessageEvent
from reika.models.steam import SteamPlayer, WorkshopItem, WorkshopTag

__all__ = [
    "DisplayDocument",
    "EmbedAuthor",
    "EmbedField",
    "MessageEvent",
    "SteamPlayer",
    "WorkshopItem",
    "WorkshopTag",
]
